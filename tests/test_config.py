"""Tests for runtime configuration."""

import pytest

import vbaux
from vbaux._config import get_config_info, get_svd_driver, set_svd_driver


@pytest.fixture(autouse=True)
def reset_driver():
    yield
    set_svd_driver("gesdd")


class TestSVDDriver:
    def test_default(self):
        assert get_svd_driver() == "gesdd"

    def test_set(self):
        set_svd_driver("gesvd")
        assert get_svd_driver() == "gesvd"

    def test_invalid(self):
        with pytest.raises(ValueError, match="Invalid SVD driver 'lapack'"):
            set_svd_driver("lapack")

    def test_invalid_keeps_previous(self):
        set_svd_driver("gesvd")
        with pytest.raises(ValueError):
            set_svd_driver("gesdd2")
        assert get_svd_driver() == "gesvd"


class TestConfigInfo:
    def test_keys(self):
        info = get_config_info()
        assert info["svd_driver"] == "gesdd"
        assert info["svd_fallback_driver"] == "gesvd"
        assert "numpy_version" in info
        assert "scipy_version" in info

    def test_no_fallback_for_gesvd(self):
        set_svd_driver("gesvd")
        assert get_config_info()["svd_fallback_driver"] is None

    def test_public_api(self):
        assert vbaux.get_config_info is get_config_info
        assert isinstance(vbaux.__version__, str)
