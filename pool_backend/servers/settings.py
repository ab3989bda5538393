# (lock key, request attribute) pairs. pools and the pool of a volume share the "pool" key
POOL_NAME_LOCK = ("pool", "name")
VOLUME_POOL_LOCK = ("pool", "pool")
VOLUME_UUID_LOCK = ("volume", "uuid")

POOL_NAME_FIELD = "pool name"
VOLUME_UUID_FIELD = "volume uuid"
VOLUME_POOL_FIELD = "volume pool"

# LVM accepts letters, digits and "+_.-" in volume group and logical volume names, but not a leading "-"
LVM_NAME_PATTERN = r"[A-Za-z0-9+_.][A-Za-z0-9+_.-]*"
LVM_RESERVED_NAMES = (".", "..")
