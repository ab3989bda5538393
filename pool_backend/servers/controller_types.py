from dataclasses import dataclass, field

from pool_backend.common.settings import SHARE_PROTOCOL_NONE


@dataclass
class CreatePoolRequest:
    name: str
    devices: list = field(default_factory=list)
    pool_type: str = None


@dataclass
class PoolRequest:
    name: str
    pool_type: str = None


@dataclass
class ListRequest:
    pool_type: str = None


@dataclass
class CreateVolumeRequest:
    uuid: str
    pool: str
    size: int
    thin: bool = False
    share: int = SHARE_PROTOCOL_NONE
    pool_type: str = None


@dataclass
class VolumeRequest:
    uuid: str
    pool_type: str = None
