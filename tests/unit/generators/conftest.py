from unittest.mock import MagicMock

import pytest

from cloudkeygen.dao.base import CounterBaseDAO
from cloudkeygen.dao.exceptions import DataStoreError
from cloudkeygen.dao.memory import InMemoryCounterDAO
from cloudkeygen.models import Alphabet


@pytest.fixture
def base62():
    return Alphabet.named('base62')


@pytest.fixture
def counter():
    return InMemoryCounterDAO()


@pytest.fixture
def broken_counter():
    dao = MagicMock(spec=CounterBaseDAO)
    dao.increment.side_effect = DataStoreError("Can't connect to Redis at redis.test:6379/0.")
    return dao
