from cloudkeygen.dao.base.counter_base_dao import CounterBaseDAO


__all__ = [
    'CounterBaseDAO',
]
