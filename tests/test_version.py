import http_status
from http_status.version import get_package_version


def test_get_package_version():
    version = get_package_version()
    assert isinstance(version, str)
    assert version


def test_dunder_version():
    assert http_status.__version__ == get_package_version()
