import logging

from cloudkeygen.exceptions import KeySpaceExhaustedError
from cloudkeygen.generators.base import CounterKeyGenerator


logger = logging.getLogger(__name__)


class SequentialKeyGenerator(CounterKeyGenerator):
    """Encode the shared counter value directly in base B.

    Keys are unique and ordered (lexicographic order equals issue order) but
    trivially guessable. Decoding a key with the same alphabet recovers the
    counter value that produced it.

    Example:
        >>> generator = SequentialKeyGenerator(counter, alphabet=Alphabet.named('base62'), length=8, namespace='sequential')
        >>> generator.generate()
        '00000001'
        >>> generator.alphabet.decode('00000001')
        1
    """

    def __init__(self, counter, alphabet, length, namespace='sequential'):
        super().__init__(counter, alphabet, length, namespace)

    def generate(self) -> str:
        n = self.next_index()
        if n >= self.capacity:
            logger.warning(
                'Sequential key space exhausted.',
                extra={'namespace': self.namespace, 'counter': n, 'capacity': self.capacity},
            )
            raise KeySpaceExhaustedError(f'Counter value {n} does not fit in {self.length} base-{self.alphabet.base} digits.')
        return self.alphabet.encode(n, self.length)
