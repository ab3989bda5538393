from abc import ABC, abstractmethod


class PoolMediator(ABC):

    @abstractmethod
    def create_pool(self, name, devices):
        """
        This function should initialize the devices and create a pool from them.

        Args:
            name    : name of the pool to be created
            devices : block device paths to build the pool from

        Returns:
            Pool, as read back from the storage subsystem after creation

        Raises:
            FailedExecError
            FailedParsingError
            PoolNotFoundError
        """
        raise NotImplementedError

    @abstractmethod
    def get_pool(self, name):
        """
        This function return pool info about the pool.

        Args:
            name : name of the pool

        Returns:
            Pool

        Raises:
            PoolNotFoundError
            FailedExecError
            FailedParsingError
        """
        raise NotImplementedError

    @abstractmethod
    def list_pools(self):
        """
        This function return info about all pools, in the order the storage subsystem reports them.

        Returns:
            list of Pool

        Raises:
            FailedExecError
            FailedParsingError
        """
        raise NotImplementedError

    @abstractmethod
    def delete_pool(self, name):
        """
        This function should delete the pool and release the devices it was built from.

        Args:
            name : name of the pool to delete

        Returns:
            None

        Raises:
            PoolNotFoundError
            FailedExecError
            PoolDevicesReleaseError : the pool was deleted but its devices were not released
            FailedParsingError
        """
        raise NotImplementedError

    @abstractmethod
    def create_volume(self, uuid, pool, size_in_bytes, thin, share):
        """
        This function should create a volume in the pool.

        Args:
            uuid          : identifier of the volume, also used as its name in the storage subsystem
            pool          : pool name to create the volume in
            size_in_bytes : size in bytes of the volume
            thin          : thin provisioning (not supported, must be False)
            share         : exposure protocol (not supported, must be 0)

        Returns:
            Replica

        Raises:
            UnsupportedParameterError
            FailedExecError
        """
        raise NotImplementedError

    @abstractmethod
    def get_volume(self, uuid):
        """
        This function return volume info about the volume.

        Args:
            uuid : identifier of the volume

        Returns:
            Replica

        Raises:
            VolumeNotFoundError
            FailedExecError
            FailedParsingError
        """
        raise NotImplementedError

    @abstractmethod
    def list_volumes(self):
        """
        This function return info about all volumes of all pools.

        Returns:
            list of Replica

        Raises:
            FailedExecError
            FailedParsingError
        """
        raise NotImplementedError

    @abstractmethod
    def delete_volume(self, uuid):
        """
        This function should delete a volume.

        Args:
            uuid : identifier of the volume to delete

        Returns:
            None

        Raises:
            VolumeNotFoundError
            FailedExecError
            FailedParsingError
        """
        raise NotImplementedError

    @property
    @abstractmethod
    def pool_type(self):
        """
        The pool technology this mediator implements
        """
        raise NotImplementedError
