import pool_backend.servers.utils as utils
from pool_backend.common.pool_logger import get_logger
from pool_backend.pool_action.pool_agent import get_mediator
from pool_backend.servers.decorators import pool_method
from pool_backend.servers.settings import POOL_NAME_LOCK, VOLUME_POOL_LOCK, VOLUME_UUID_LOCK

logger = get_logger()


class PoolController:
    """
    Entry points of the pool backend. Each method validates its request, resolves the mediator of the
    requested pool type and renders the result as a plain dict.
    """

    @pool_method(exclusive_locks=(POOL_NAME_LOCK,))
    def create_pool(self, request):
        utils.validate_create_pool_request(request)
        mediator = get_mediator(request.pool_type)
        pool = mediator.create_pool(request.name, request.devices)
        logger.debug("pool was created : {0}".format(pool))
        return utils.generate_pool_response(pool)

    @pool_method(shared_locks=(POOL_NAME_LOCK,))
    def get_pool(self, request):
        utils.validate_pool_request(request)
        mediator = get_mediator(request.pool_type)
        return utils.generate_pool_response(mediator.get_pool(request.name))

    @pool_method()
    def list_pools(self, request):
        mediator = get_mediator(request.pool_type)
        return [utils.generate_pool_response(pool) for pool in mediator.list_pools()]

    @pool_method(exclusive_locks=(POOL_NAME_LOCK,))
    def delete_pool(self, request):
        utils.validate_pool_request(request)
        mediator = get_mediator(request.pool_type)
        mediator.delete_pool(request.name)

    @pool_method(exclusive_locks=(VOLUME_UUID_LOCK,), shared_locks=(VOLUME_POOL_LOCK,))
    def create_volume(self, request):
        utils.validate_create_volume_request(request)
        mediator = get_mediator(request.pool_type)
        replica = mediator.create_volume(request.uuid, request.pool, request.size, request.thin, request.share)
        logger.debug("volume was created : {0}".format(replica))
        return utils.generate_replica_response(replica)

    @pool_method(shared_locks=(VOLUME_UUID_LOCK,))
    def get_volume(self, request):
        utils.validate_volume_request(request)
        mediator = get_mediator(request.pool_type)
        return utils.generate_replica_response(mediator.get_volume(request.uuid))

    @pool_method()
    def list_volumes(self, request):
        mediator = get_mediator(request.pool_type)
        return [utils.generate_replica_response(replica) for replica in mediator.list_volumes()]

    @pool_method(exclusive_locks=(VOLUME_UUID_LOCK,))
    def delete_volume(self, request):
        utils.validate_volume_request(request)
        mediator = get_mediator(request.pool_type)
        mediator.delete_volume(request.uuid)
