import json

import pool_backend.pool_action.settings as lvm_settings
from pool_backend.pool_action.command_runner import CommandResult
from pool_backend.tests.common.test_settings import DEVICE_SIZE, POOL_METADATA_SIZE

FAILURE_RETURN_CODE = 5


def get_report_output(section, rows):
    return json.dumps({lvm_settings.REPORT_KEY: [{section: rows}]}).encode()


def get_vgs_size_output(capacity, free):
    return get_report_output(lvm_settings.VGS_SECTION, [{lvm_settings.VG_SIZE_FIELD: str(capacity),
                                                         lvm_settings.VG_FREE_FIELD: str(free)}])


def get_vgs_names_output(names):
    return get_report_output(lvm_settings.VGS_SECTION, [{lvm_settings.VG_NAME_FIELD: name} for name in names])


def get_pvs_output(device_to_pool):
    return get_report_output(lvm_settings.PVS_SECTION,
                             [{lvm_settings.PV_NAME_FIELD: device, lvm_settings.VG_NAME_FIELD: pool}
                              for device, pool in device_to_pool])


def get_lvs_output(volumes):
    return get_report_output(lvm_settings.LVS_SECTION,
                             [{lvm_settings.LV_NAME_FIELD: name, lvm_settings.VG_NAME_FIELD: pool,
                               lvm_settings.LV_SIZE_FIELD: str(size)}
                              for name, pool, size in volumes])


def get_command_result(command_name, args=(), stdout=b"", stderr=b"", return_code=0):
    return CommandResult(command=[command_name] + list(args), stdout=stdout, stderr=stderr, return_code=return_code)


def get_failed_command_result(command_name, args=(), stderr=b"  command failed\n"):
    return get_command_result(command_name, args, stderr=stderr, return_code=FAILURE_RETURN_CODE)


class FakeLVM:
    """
    In-memory stand-in for the LVM command line tools, used as side effect of run_command.
    Keeps physical volumes, volume groups and logical volumes and answers report commands
    with the json shape of '--reportformat=json'.
    Commands listed in failing_commands fail without changing state.
    """

    def __init__(self, device_size=DEVICE_SIZE):
        self.device_size = device_size
        self.physical_volumes = {}
        self.volume_groups = {}
        self.logical_volumes = {}
        self.failing_commands = set()
        self.calls = []
        self._handlers = {
            lvm_settings.PVCREATE_CMD: self._pvcreate,
            lvm_settings.PVREMOVE_CMD: self._pvremove,
            lvm_settings.PVS_CMD: self._pvs,
            lvm_settings.VGCREATE_CMD: self._vgcreate,
            lvm_settings.VGREMOVE_CMD: self._vgremove,
            lvm_settings.VGS_CMD: self._vgs,
            lvm_settings.LVCREATE_CMD: self._lvcreate,
            lvm_settings.LVREMOVE_CMD: self._lvremove,
            lvm_settings.LVS_CMD: self._lvs,
        }

    def __call__(self, command_name, args):
        args = list(args)
        self.calls.append((command_name, args))
        if command_name in self.failing_commands:
            return get_failed_command_result(command_name, args)
        return self._handlers[command_name](command_name, args)

    def get_called_commands(self):
        return [command_name for command_name, _ in self.calls]

    def _fail(self, command_name, args, message):
        return get_failed_command_result(command_name, args, stderr="  {0}\n".format(message).encode())

    def _pool_capacity(self, name):
        devices = self.volume_groups[name]
        return (self.device_size - POOL_METADATA_SIZE) * len(devices)

    def _pool_free(self, name):
        used = sum(size for pool, size in self.logical_volumes.values() if pool == name)
        return self._pool_capacity(name) - used

    def _pvcreate(self, command_name, args):
        for device in args:
            self.physical_volumes.setdefault(device, "")
        return get_command_result(command_name, args)

    def _pvremove(self, command_name, args):
        for device in args:
            if device not in self.physical_volumes:
                return self._fail(command_name, args, "No PV found on device {0}.".format(device))
            if self.physical_volumes[device]:
                return self._fail(command_name, args, 'PV {0} is used by VG {1} so please use vgreduce first.'.format(
                    device, self.physical_volumes[device]))
        for device in args:
            del self.physical_volumes[device]
        return get_command_result(command_name, args)

    def _positional_args(self, args):
        if lvm_settings.LVM_END_OF_OPTIONS in args:
            return args[args.index(lvm_settings.LVM_END_OF_OPTIONS) + 1:]
        return [arg for arg in args if not arg.startswith("-")]

    def _vgcreate(self, command_name, args):
        positional_args = self._positional_args(args)
        name, devices = positional_args[0], positional_args[1:]
        if name in self.volume_groups:
            return self._fail(command_name, args, "A volume group called {0} already exists.".format(name))
        for device in devices:
            if device not in self.physical_volumes:
                return self._fail(command_name, args, "Device {0} not found.".format(device))
            if self.physical_volumes[device]:
                return self._fail(command_name, args, "Physical volume '{0}' is already in volume group '{1}'".format(
                    device, self.physical_volumes[device]))
        self.volume_groups[name] = list(devices)
        for device in devices:
            self.physical_volumes[device] = name
        return get_command_result(command_name, args)

    def _vgremove(self, command_name, args):
        name = self._positional_args(args)[0]
        if name not in self.volume_groups:
            return self._fail(command_name, args, lvm_settings.VOLUME_GROUP_NOT_FOUND.format(name))
        if any(pool == name for pool, _ in self.logical_volumes.values()):
            return self._fail(command_name, args, "Volume group \"{0}\" still contains logical volumes".format(name))
        for device in self.volume_groups.pop(name):
            self.physical_volumes[device] = ""
        return get_command_result(command_name, args)

    def _vgs(self, command_name, args):
        positional_args = self._positional_args(args)
        if not positional_args:
            return get_command_result(command_name, args, stdout=get_vgs_names_output(self.volume_groups))
        name = positional_args[0]
        if name not in self.volume_groups:
            return self._fail(command_name, args, lvm_settings.VOLUME_GROUP_NOT_FOUND.format(name))
        return get_command_result(command_name, args,
                                  stdout=get_vgs_size_output(self._pool_capacity(name), self._pool_free(name)))

    def _pvs(self, command_name, args):
        return get_command_result(command_name, args, stdout=get_pvs_output(self.physical_volumes.items()))

    def _lvcreate(self, command_name, args):
        size = int(args[args.index(lvm_settings.LVCREATE_SIZE) + 1].rstrip(lvm_settings.LVM_BYTES_SUFFIX))
        name = args[args.index(lvm_settings.LVCREATE_NAME) + 1]
        pool = args[-1]
        if pool not in self.volume_groups:
            return self._fail(command_name, args, lvm_settings.VOLUME_GROUP_NOT_FOUND.format(pool))
        if name in self.logical_volumes:
            return self._fail(command_name, args,
                              "Logical Volume \"{0}\" already exists in volume group \"{1}\"".format(name, pool))
        if size > self._pool_free(pool):
            return self._fail(command_name, args, "Volume group \"{0}\" has insufficient free space".format(pool))
        self.logical_volumes[name] = (pool, size)
        return get_command_result(command_name, args)

    def _lvremove(self, command_name, args):
        pool, name = args[-1].split("/")[-2:]
        if self.logical_volumes.get(name, (None,))[0] != pool:
            return self._fail(command_name, args, "Failed to find logical volume \"{0}/{1}\"".format(pool, name))
        del self.logical_volumes[name]
        return get_command_result(command_name, args)

    def _lvs(self, command_name, args):
        volumes = [(name, pool, size) for name, (pool, size) in self.logical_volumes.items()]
        return get_command_result(command_name, args, stdout=get_lvs_output(volumes))
