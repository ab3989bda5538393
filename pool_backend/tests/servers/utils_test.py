import unittest

import pool_backend.servers.utils as utils
from pool_backend.pool_action.pool_action_types import Pool, Replica
from pool_backend.servers.controller_types import (CreatePoolRequest, PoolRequest, CreateVolumeRequest,
                                                   VolumeRequest)
from pool_backend.servers.errors import ValidationException
from pool_backend.tests.common.test_settings import (POOL_NAME, DEVICE1, DEVICES, VOLUME_UUID, VOLUME_SIZE,
                                                     VOLUME_URI)


class TestValidation(unittest.TestCase):

    def _test_validation_error(self, validation_function, request, message_part):
        with self.assertRaises(ValidationException) as context:
            validation_function(request)
        self.assertIn(message_part, str(context.exception))

    def test_validate_create_pool_request_success(self):
        utils.validate_create_pool_request(CreatePoolRequest(name=POOL_NAME, devices=DEVICES))

    def test_validate_create_pool_request_empty_name(self):
        self._test_validation_error(utils.validate_create_pool_request, CreatePoolRequest(name="", devices=DEVICES),
                                    "pool name should not be empty")

    def test_validate_create_pool_request_invalid_lvm_names(self):
        for name in ("tank/1", "-a", "--all", "-", ".", "..", "tank 1", "tank;1", "t\u00e4nk"):
            self._test_validation_error(utils.validate_create_pool_request,
                                        CreatePoolRequest(name=name, devices=DEVICES), "may only contain")

    def test_validate_create_pool_request_valid_lvm_names(self):
        for name in ("tank1", "tank-1", "tank_1", "tank.1", "tank+1", "_tank", ".tank", "tank-"):
            utils.validate_create_pool_request(CreatePoolRequest(name=name, devices=DEVICES))

    def test_validate_create_pool_request_no_devices(self):
        self._test_validation_error(utils.validate_create_pool_request, CreatePoolRequest(name=POOL_NAME),
                                    "at least one device")

    def test_validate_create_pool_request_relative_device(self):
        self._test_validation_error(utils.validate_create_pool_request,
                                    CreatePoolRequest(name=POOL_NAME, devices=["sdb"]), "absolute")

    def test_validate_create_pool_request_duplicate_devices(self):
        self._test_validation_error(utils.validate_create_pool_request,
                                    CreatePoolRequest(name=POOL_NAME, devices=[DEVICE1, DEVICE1]), "repeat")

    def test_validate_pool_request(self):
        utils.validate_pool_request(PoolRequest(name=POOL_NAME))
        self._test_validation_error(utils.validate_pool_request, PoolRequest(name=None), "should not be empty")
        self._test_validation_error(utils.validate_pool_request, PoolRequest(name="-a"), "may only contain")

    def test_validate_create_volume_request_success(self):
        utils.validate_create_volume_request(CreateVolumeRequest(uuid=VOLUME_UUID, pool=POOL_NAME, size=VOLUME_SIZE))

    def test_validate_create_volume_request_empty_pool(self):
        self._test_validation_error(utils.validate_create_volume_request,
                                    CreateVolumeRequest(uuid=VOLUME_UUID, pool="", size=VOLUME_SIZE),
                                    "volume pool should not be empty")

    def test_validate_create_volume_request_uuid_with_separator(self):
        self._test_validation_error(utils.validate_create_volume_request,
                                    CreateVolumeRequest(uuid="a/b", pool=POOL_NAME, size=VOLUME_SIZE),
                                    "may only contain")

    def test_validate_create_volume_request_bad_size(self):
        for size in (0, -1, "10", True, 1.5):
            self._test_validation_error(utils.validate_create_volume_request,
                                        CreateVolumeRequest(uuid=VOLUME_UUID, pool=POOL_NAME, size=size),
                                        "positive integer")

    def test_validate_create_volume_request_bad_share(self):
        self._test_validation_error(utils.validate_create_volume_request,
                                    CreateVolumeRequest(uuid=VOLUME_UUID, pool=POOL_NAME, size=VOLUME_SIZE,
                                                        share="nfs"),
                                    "share should be an integer")

    def test_validate_volume_request(self):
        utils.validate_volume_request(VolumeRequest(uuid=VOLUME_UUID))
        self._test_validation_error(utils.validate_volume_request, VolumeRequest(uuid=""), "should not be empty")
        self._test_validation_error(utils.validate_volume_request, VolumeRequest(uuid="-f"), "may only contain")


class TestResponses(unittest.TestCase):

    def test_generate_pool_response(self):
        pool = Pool(name=POOL_NAME, capacity=100, used=30, devices=DEVICES)
        self.assertEqual({"name": POOL_NAME, "devices": DEVICES, "capacity": 100, "used": 30, "free": 70},
                         utils.generate_pool_response(pool))

    def test_generate_replica_response(self):
        replica = Replica(uuid=VOLUME_UUID, pool=POOL_NAME, size=VOLUME_SIZE)
        self.assertEqual({"uuid": VOLUME_UUID, "pool": POOL_NAME, "size": VOLUME_SIZE, "thin": False, "share": 0,
                          "uri": VOLUME_URI},
                         utils.generate_replica_response(replica))
