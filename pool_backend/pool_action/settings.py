from pool_backend.common.config import config

PVCREATE_CMD = config.lvm.commands.pvcreate
PVREMOVE_CMD = config.lvm.commands.pvremove
PVS_CMD = config.lvm.commands.pvs
VGCREATE_CMD = config.lvm.commands.vgcreate
VGREMOVE_CMD = config.lvm.commands.vgremove
VGS_CMD = config.lvm.commands.vgs
LVCREATE_CMD = config.lvm.commands.lvcreate
LVREMOVE_CMD = config.lvm.commands.lvremove
LVS_CMD = config.lvm.commands.lvs

# global report options
LVM_REPORT_FORMAT_JSON = "--reportformat=json"
LVM_UNITS_BYTES = "--units=b"
LVM_NO_SUFFIX = "--nosuffix"
LVM_OPTIONS_FORMAT = "--options={}"
LVM_END_OF_OPTIONS = "--"

# report keys
REPORT_KEY = "report"
VGS_SECTION = "vg"
PVS_SECTION = "pv"
LVS_SECTION = "lv"

VG_NAME_FIELD = "vg_name"
VG_SIZE_FIELD = "vg_size"
VG_FREE_FIELD = "vg_free"
PV_NAME_FIELD = "pv_name"
LV_NAME_FIELD = "lv_name"
LV_SIZE_FIELD = "lv_size"

VGS_SIZE_FIELDS = (VG_SIZE_FIELD, VG_FREE_FIELD)
VGS_NAME_FIELDS = (VG_NAME_FIELD,)
PVS_DEVICE_MAP_FIELDS = (PV_NAME_FIELD, VG_NAME_FIELD)
LVS_VOLUME_FIELDS = (LV_NAME_FIELD, VG_NAME_FIELD, LV_SIZE_FIELD)

# lvcreate / lvremove options
LVCREATE_SIZE = "--size"
LVCREATE_NAME = "--name"
LVM_BYTES_SUFFIX = "b"
LVREMOVE_FORCE = "-f"

# stderr markers
VOLUME_GROUP_NOT_FOUND = 'Volume group "{0}" not found'
