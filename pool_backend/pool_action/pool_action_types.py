from dataclasses import dataclass, field

from pool_backend.common.settings import SHARE_PROTOCOL_NONE
from pool_backend.pool_action.utils import build_volume_uri


@dataclass()
class Pool:
    name: str
    capacity: int
    used: int
    devices: list = field(default_factory=list)

    @property
    def free(self):
        return self.capacity - self.used


@dataclass()
class Replica:
    uuid: str
    pool: str
    size: int
    thin: bool = False
    share: int = SHARE_PROTOCOL_NONE

    @property
    def uri(self):
        return build_volume_uri(self.pool, self.uuid)
