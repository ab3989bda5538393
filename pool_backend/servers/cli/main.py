import sys
from argparse import ArgumentParser

import yaml

from pool_backend.common.config import config
from pool_backend.common.pool_logger import LOG_LEVELS, set_log_level
from pool_backend.common.settings import DEVICES_SEPARATOR, SHARE_PROTOCOL_NONE
from pool_backend.common.utils import string_to_array
from pool_backend.servers.controller_types import (CreatePoolRequest, PoolRequest, ListRequest,
                                                   CreateVolumeRequest, VolumeRequest)
from pool_backend.servers.exception_handler import handle_exception
from pool_backend.servers.pool_controller import PoolController


def _split_devices(devices):
    split_devices = []
    for device in devices:
        split_devices.extend(string_to_array(device, DEVICES_SEPARATOR))
    return split_devices


def _create_pool(controller, arguments):
    return controller.create_pool(CreatePoolRequest(name=arguments.name, devices=_split_devices(arguments.devices),
                                                    pool_type=arguments.pool_type))


def _get_pool(controller, arguments):
    return controller.get_pool(PoolRequest(name=arguments.name, pool_type=arguments.pool_type))


def _list_pools(controller, arguments):
    return controller.list_pools(ListRequest(pool_type=arguments.pool_type))


def _delete_pool(controller, arguments):
    return controller.delete_pool(PoolRequest(name=arguments.name, pool_type=arguments.pool_type))


def _create_volume(controller, arguments):
    return controller.create_volume(CreateVolumeRequest(uuid=arguments.uuid, pool=arguments.pool,
                                                        size=arguments.size, thin=arguments.thin,
                                                        share=arguments.share, pool_type=arguments.pool_type))


def _get_volume(controller, arguments):
    return controller.get_volume(VolumeRequest(uuid=arguments.uuid, pool_type=arguments.pool_type))


def _list_volumes(controller, arguments):
    return controller.list_volumes(ListRequest(pool_type=arguments.pool_type))


def _delete_volume(controller, arguments):
    return controller.delete_volume(VolumeRequest(uuid=arguments.uuid, pool_type=arguments.pool_type))


def _add_pool_parsers(subparsers):
    pool_parser = subparsers.add_parser("pool", help="manage storage pools")
    pool_subparsers = pool_parser.add_subparsers(dest="action", required=True)

    create_parser = pool_subparsers.add_parser("create", help="create a pool from block devices")
    create_parser.add_argument("name", help="pool name")
    create_parser.add_argument("devices", nargs="+", help="block device paths")
    create_parser.set_defaults(handler=_create_pool)

    get_parser = pool_subparsers.add_parser("get", help="show a pool")
    get_parser.add_argument("name", help="pool name")
    get_parser.set_defaults(handler=_get_pool)

    list_parser = pool_subparsers.add_parser("list", help="list all pools")
    list_parser.set_defaults(handler=_list_pools)

    remove_parser = pool_subparsers.add_parser("remove", help="remove a pool and release its devices")
    remove_parser.add_argument("name", help="pool name")
    remove_parser.set_defaults(handler=_delete_pool)


def _add_volume_parsers(subparsers):
    volume_parser = subparsers.add_parser("volume", help="manage volumes")
    volume_subparsers = volume_parser.add_subparsers(dest="action", required=True)

    create_parser = volume_subparsers.add_parser("create", help="create a volume in a pool")
    create_parser.add_argument("uuid", help="volume identifier")
    create_parser.add_argument("pool", help="pool name")
    create_parser.add_argument("size", type=int, help="size in bytes")
    create_parser.add_argument("--thin", action="store_true", help="thin provisioning")
    create_parser.add_argument("--share", type=int, default=SHARE_PROTOCOL_NONE, help="share protocol")
    create_parser.set_defaults(handler=_create_volume)

    get_parser = volume_subparsers.add_parser("get", help="show a volume")
    get_parser.add_argument("uuid", help="volume identifier")
    get_parser.set_defaults(handler=_get_volume)

    list_parser = volume_subparsers.add_parser("list", help="list all volumes")
    list_parser.set_defaults(handler=_list_volumes)

    remove_parser = volume_subparsers.add_parser("remove", help="remove a volume")
    remove_parser.add_argument("uuid", help="volume identifier")
    remove_parser.set_defaults(handler=_delete_volume)


def build_parser():
    parser = ArgumentParser(prog="pool-backend")
    parser.add_argument("-l", "--loglevel", dest="loglevel", type=str.lower, choices=LOG_LEVELS, help="log level")
    parser.add_argument("-t", "--pool-type", dest="pool_type", help="pool technology")
    parser.add_argument("-v", "--version", action="version",
                        version="{0} {1}".format(config.identity.name, config.identity.version))
    subparsers = parser.add_subparsers(dest="object", required=True)
    _add_pool_parsers(subparsers)
    _add_volume_parsers(subparsers)
    return parser


def main(argv=None):
    parser = build_parser()
    arguments = parser.parse_args(argv)

    set_log_level(arguments.loglevel)
    controller = PoolController()
    try:
        response = arguments.handler(controller, arguments)
    except Exception as ex:
        exit_code = handle_exception(ex)
        print("{0}: {1}".format(type(ex).__name__, ex), file=sys.stderr)
        return exit_code

    if response is not None:
        sys.stdout.write(yaml.safe_dump(response, default_flow_style=False, sort_keys=False))
    return 0


if __name__ == '__main__':
    sys.exit(main())
