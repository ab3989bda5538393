from abc import ABC, abstractmethod

from retry import retry

import pool_backend.pool_action.errors as pool_errors
from pool_backend.common.pool_logger import get_logger
from pool_backend.common.settings import (ROLLBACK_FAILED_POOL_CREATION, POOL_ROLLBACK_RETRIES,
                                          SHARE_PROTOCOL_NONE)
from pool_backend.pool_action.pool_action_types import Replica
from pool_backend.pool_action.pool_mediator_interface import PoolMediator

logger = get_logger()


class PoolMediatorAbstract(PoolMediator, ABC):
    """
    Lifecycle flows shared by every pool technology.
    Multi-step operations are sequences of independent steps, each one aborting the flow on failure.
    Only device initialization is compensated when pool creation fails; nothing else is rolled back.
    """

    def create_pool(self, name, devices):
        logger.info("creating pool : {0} from devices : {1}".format(name, devices))
        self.initialize_devices(devices)
        try:
            self.create_pool_from_devices(name, devices)
        except pool_errors.FailedExecError as ex:
            logger.error("Cannot create pool {0}, Reason is: {1}".format(name, ex))
            if ROLLBACK_FAILED_POOL_CREATION:
                self._safe_rollback_initialize_devices(devices)
            raise ex
        logger.info("finished creating pool : {0}".format(name))
        return self.get_pool(name)

    @retry(pool_errors.FailedExecError, tries=POOL_ROLLBACK_RETRIES, delay=1)
    def _rollback_initialize_devices(self, devices):
        logger.debug("Rollback create pool. Releasing devices {0}".format(devices))
        self.release_devices(devices)

    def _safe_rollback_initialize_devices(self, devices):
        try:
            self._rollback_initialize_devices(devices)
        except pool_errors.FailedExecError as ex:
            logger.exception("rollback of devices {0} failed, they are left initialized: {1}".format(devices, ex))

    def list_pools(self):
        logger.debug("listing pools")
        return [self.get_pool(name) for name in self.get_pool_names()]

    def delete_pool(self, name):
        logger.info("Deleting pool : {0}".format(name))
        pool = self.get_pool(name)
        self.remove_pool(name)
        if pool.devices:
            try:
                self.release_devices(pool.devices)
            except pool_errors.FailedExecError as ex:
                logger.error("pool {0} was removed but releasing its devices failed".format(name))
                raise pool_errors.PoolDevicesReleaseError(name, pool.devices, ex)
        logger.info("Finished pool deletion : {0}".format(name))

    def validate_supported_volume_parameters(self, thin, share):
        if thin:
            logger.error("thin provisioning is not supported")
            raise pool_errors.UnsupportedParameterError("thin", thin)
        if share != SHARE_PROTOCOL_NONE:
            logger.error("volume sharing protocols are not supported")
            raise pool_errors.UnsupportedParameterError("share", share)

    def create_volume(self, uuid, pool, size_in_bytes, thin=False, share=SHARE_PROTOCOL_NONE):
        self.validate_supported_volume_parameters(thin, share)
        logger.info("creating volume : {0} . size : {1} . in pool : {2}".format(uuid, size_in_bytes, pool))
        self.create_volume_in_pool(uuid, pool, size_in_bytes)
        logger.info("finished creating volume : {0}".format(uuid))
        return Replica(uuid=uuid, pool=pool, size=size_in_bytes)

    def get_volume(self, uuid):
        logger.debug("Get volume : {0}".format(uuid))
        for replica in self.list_volumes():
            if replica.uuid == uuid:
                return replica
        logger.info("volume {0} was not found".format(uuid))
        raise pool_errors.VolumeNotFoundError(uuid)

    def delete_volume(self, uuid):
        logger.info("Deleting volume : {0}".format(uuid))
        replica = self.get_volume(uuid)
        self.remove_volume(replica)
        logger.info("Finished volume deletion : {0}".format(uuid))

    @abstractmethod
    def initialize_devices(self, devices):
        """
        Prepare block devices for use in a pool. Must be idempotent.
        """
        raise NotImplementedError

    @abstractmethod
    def release_devices(self, devices):
        """
        Return block devices to an unmanaged state.
        """
        raise NotImplementedError

    @abstractmethod
    def create_pool_from_devices(self, name, devices):
        raise NotImplementedError

    @abstractmethod
    def remove_pool(self, name):
        raise NotImplementedError

    @abstractmethod
    def get_pool_names(self):
        raise NotImplementedError

    @abstractmethod
    def create_volume_in_pool(self, uuid, pool, size_in_bytes):
        raise NotImplementedError

    @abstractmethod
    def remove_volume(self, replica):
        raise NotImplementedError
