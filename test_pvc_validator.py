#!/usr/bin/env python3
"""
create pvc 参数预检测试
"""

import itertools
import unittest

from kcreate.config.claimRequest import ClaimRequest
from kcreate.util.errors import ValidationError
from kcreate.validation.pvcValidator import validate

PVC_NAME = "pvc-testing"


class TestPVCValidation(unittest.TestCase):
    """对应 create pvc 的 Validate 阶段"""

    def assertValidationError(self, request, expected):
        with self.assertRaises(ValidationError) as ctx:
            validate(request)
        self.assertEqual(str(ctx.exception), expected)

    def test_empty_storage_request(self):
        self.assertValidationError(
            ClaimRequest(name=PVC_NAME, storage_request=""),
            "storage-request must be specified",
        )

    def test_empty_name(self):
        self.assertValidationError(
            ClaimRequest(name="", storage_request="5Gi"),
            "name must be specified",
        )

    def test_name_checked_first(self):
        self.assertValidationError(
            ClaimRequest(name="", storage_request="", access_modes="ReadWriteBoth"),
            "name must be specified",
        )

    def test_storage_request_checked_before_access_modes(self):
        self.assertValidationError(
            ClaimRequest(name=PVC_NAME, storage_request="", access_modes="ReadWriteBoth"),
            "storage-request must be specified",
        )

    def test_wrong_access_mode(self):
        self.assertValidationError(
            ClaimRequest(name=PVC_NAME, storage_request="5Gi", access_modes="ReadWriteBoth"),
            "provided access mode ReadWriteBoth is invalid",
        )

    def test_first_invalid_access_mode_is_reported(self):
        self.assertValidationError(
            ClaimRequest(
                name=PVC_NAME,
                storage_request="5Gi",
                access_modes="ReadWriteOnce,Bogus,AlsoBogus",
            ),
            "provided access mode Bogus is invalid",
        )

    def test_access_modes_are_case_sensitive(self):
        self.assertValidationError(
            ClaimRequest(name=PVC_NAME, storage_request="5Gi", access_modes="readwriteonce"),
            "provided access mode readwriteonce is invalid",
        )

    def test_empty_token_is_invalid(self):
        self.assertValidationError(
            ClaimRequest(name=PVC_NAME, storage_request="5Gi", access_modes="ReadWriteOnce,"),
            "provided access mode  is invalid",
        )

    def test_valid_access_modes(self):
        modes = ["ReadWriteOnce", "ReadOnlyMany", "ReadWriteMany"]
        for count in range(1, len(modes) + 1):
            for combo in itertools.permutations(modes, count):
                request = ClaimRequest(
                    name=PVC_NAME, storage_request="5Gi", access_modes=",".join(combo)
                )
                self.assertIsNone(validate(request))

    def test_duplicate_access_modes_are_valid(self):
        request = ClaimRequest(
            name=PVC_NAME, storage_request="5Gi", access_modes="ReadWriteOnce,ReadWriteOnce"
        )
        self.assertIsNone(validate(request))

    def test_quantities_are_not_parsed(self):
        # 容量格式由 builder 检查
        request = ClaimRequest(name=PVC_NAME, storage_request="garbage", storage_limit="1")
        self.assertIsNone(validate(request))


if __name__ == "__main__":
    unittest.main(verbosity=2)
