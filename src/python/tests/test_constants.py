"""
===============================================================================
GNC QUATERNION - Constants Test Suite
===============================================================================
Sanity checks on the numeric configuration shared by the library.
===============================================================================
"""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import numpy as np
from numpy.testing import assert_allclose

import gnc_quat
from gnc_quat import constants
from gnc_quat.quaternion import Quaternion


class TestConstants:
    """Tests for gnc_quat.constants."""

    def test_dtype_is_single_precision(self):
        assert constants.QUATERNION_DTYPE is np.float32

    def test_epsilon_is_float32_machine_epsilon(self):
        """is_unit tolerance is float32 epsilon, 2**-23."""
        assert constants.FLOAT32_EPSILON == 2.0 ** -23

    def test_identity_components(self):
        assert np.array_equal(Quaternion.identity().into_raw(),
                              np.array(constants.IDENTITY_COMPONENTS, dtype=np.float32))

    def test_angle_conversions(self):
        assert_allclose(constants.DEG2RAD * constants.RAD2DEG, 1.0)
        assert_allclose(180.0 * constants.DEG2RAD, np.pi)

    def test_package_exports(self):
        assert gnc_quat.Quaternion is Quaternion
        assert gnc_quat.FLOAT32_EPSILON == constants.FLOAT32_EPSILON
