from decorator import decorator

from pool_backend.common.pool_logger import get_logger
from pool_backend.common.utils import set_current_thread_name
from pool_backend.servers.sync_lock import SyncLock

logger = get_logger()


def _get_lock_ids(request, locks):
    return [(lock_key, getattr(request, request_attribute, None)) for lock_key, request_attribute in locks]


def pool_method(exclusive_locks=(), shared_locks=()):
    """
    Wraps a PoolController method with the locks of the objects named in its request.

    Args:
        exclusive_locks : (lock key, request attribute) pairs to hold exclusively
        shared_locks    : (lock key, request attribute) pairs to hold shared
    """

    @decorator
    def call_pool_method(controller_method, controller, request):
        exclusive_ids = _get_lock_ids(request, exclusive_locks)
        shared_ids = _get_lock_ids(request, shared_locks)
        thread_names = [object_id for _, object_id in exclusive_ids + shared_ids if object_id]
        set_current_thread_name(thread_names[0] if thread_names else None)
        controller_method_name = controller_method.__name__
        logger.info(controller_method_name)
        with SyncLock(controller_method_name, exclusive_ids, shared_ids):
            response = controller_method(controller, request)
        logger.info("finished {}".format(controller_method_name))
        return response

    return call_pool_method
