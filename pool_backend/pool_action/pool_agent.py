from threading import RLock

import pool_backend.pool_action.errors as pool_errors
from pool_backend.common.pool_logger import get_logger
from pool_backend.common.settings import DEFAULT_POOL_TYPE
from pool_backend.pool_action.pool_mediator_lvm import LVMPoolMediator

logger = get_logger()
_pool_mediators = {}
lock = RLock()

pool_type_to_mediator = {
    LVMPoolMediator.pool_type: LVMPoolMediator,
}


def get_mediator(pool_type=None):
    """
    Returns the mediator of the requested pool technology, creating it on first use.
    A single instance per pool type is shared across threads.

    Raises:
        UnsupportedPoolTypeError
    """
    if not pool_type:
        pool_type = DEFAULT_POOL_TYPE
    with lock:
        found = _pool_mediators.get(pool_type)
        if found:
            logger.debug("Found a cached mediator for pool type {}, reuse it".format(pool_type))
            return found

        med_class = pool_type_to_mediator.get(pool_type)
        if med_class is None:
            raise pool_errors.UnsupportedPoolTypeError(pool_type)
        logger.debug("Creating a new mediator for pool type {}".format(pool_type))
        mediator = med_class()
        _pool_mediators[pool_type] = mediator
        return mediator


def get_mediators():
    return _pool_mediators


def clear_mediators():
    with lock:
        _pool_mediators.clear()
