import secrets

from cloudkeygen.exceptions import RandomSourceError
from cloudkeygen.generators.base import KeyGenerator


class RandomKeyGenerator(KeyGenerator):
    """Draw every key symbol uniformly and independently at random.

    Stateless and uncoordinated: uniqueness is only probabilistic, with
    collisions following the birthday bound over B^L keys. Uses the OS
    entropy source (`secrets`), which is safe to share between threads.
    """

    def generate(self) -> str:
        try:
            return ''.join(secrets.choice(self.alphabet.symbols) for _ in range(self.length))
        except (OSError, NotImplementedError) as e:
            raise RandomSourceError(f'Entropy source is unavailable: {e}') from e
