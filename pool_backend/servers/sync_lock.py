import threading
from collections import defaultdict, Counter

from pool_backend.common.pool_logger import get_logger
from pool_backend.servers.errors import ObjectAlreadyProcessingError

logger = get_logger()

exclusive_ids_in_use = defaultdict(set)
shared_ids_in_use = defaultdict(Counter)
ids_in_use_lock = threading.Lock()


def _is_in_use(lock_key, object_id, exclusive):
    if object_id in exclusive_ids_in_use[lock_key]:
        return True
    return exclusive and shared_ids_in_use[lock_key][object_id] > 0


def _clean_lock_ids(lock_ids):
    return [(lock_key, object_id) for lock_key, object_id in lock_ids if lock_key and object_id]


class SyncLock:
    """
    Marks pools and volumes as being processed for the duration of a lifecycle operation.
    An exclusive hold conflicts with any other hold on the same object, a shared hold only with an exclusive one,
    so volumes of one pool can be created side by side while the pool itself cannot be removed.
    A conflicting operation does not wait, it fails with ObjectAlreadyProcessingError.

    Args:
        action_name   : name of the operation, for logging
        exclusive_ids : (lock key, object id) pairs to hold exclusively
        shared_ids    : (lock key, object id) pairs to hold shared
    Pairs with an empty key or id are ignored.
    """

    def __init__(self, action_name, exclusive_ids=(), shared_ids=()):
        self.action_name = action_name
        self.exclusive_ids = _clean_lock_ids(exclusive_ids)
        self.shared_ids = _clean_lock_ids(shared_ids)

    def __enter__(self):
        if self.exclusive_ids or self.shared_ids:
            self._acquire()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.exclusive_ids or self.shared_ids:
            self._release()

    def _acquire(self):
        logger.debug("trying to acquire locks for action {}: exclusive {} shared {}".format(
            self.action_name, self.exclusive_ids, self.shared_ids))
        with ids_in_use_lock:
            requested = [(lock_id, True) for lock_id in self.exclusive_ids] + \
                        [(lock_id, False) for lock_id in self.shared_ids]
            for (lock_key, object_id), exclusive in requested:
                if _is_in_use(lock_key, object_id, exclusive):
                    logger.error("lock for action {} with {}: {} is already in use by another thread".format(
                        self.action_name, lock_key, object_id))
                    raise ObjectAlreadyProcessingError(object_id)
            for lock_key, object_id in self.exclusive_ids:
                exclusive_ids_in_use[lock_key].add(object_id)
            for lock_key, object_id in self.shared_ids:
                shared_ids_in_use[lock_key][object_id] += 1
        logger.debug("succeed to acquire locks for action {}".format(self.action_name))

    def _release(self):
        logger.debug("release locks for action {}".format(self.action_name))
        with ids_in_use_lock:
            for lock_key, object_id in self.exclusive_ids:
                exclusive_ids_in_use[lock_key].discard(object_id)
            for lock_key, object_id in self.shared_ids:
                shared_ids_in_use[lock_key][object_id] -= 1
                if shared_ids_in_use[lock_key][object_id] <= 0:
                    del shared_ids_in_use[lock_key][object_id]
