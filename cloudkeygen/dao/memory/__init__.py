from cloudkeygen.dao.memory.counter_memory_dao import InMemoryCounterDAO


__all__ = [
    'InMemoryCounterDAO',
]
