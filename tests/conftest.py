from pathlib import Path

import pytest

REGISTRY_SNAPSHOT = Path(__file__).parent / "data" / "http-status-codes.xml"


def pytest_addoption(parser):
    parser.addoption(
        "--run-network",
        action="store_true",
        default=False,
        help="run tests that fetch the live IANA registry",
    )


def pytest_collection_modifyitems(config, items):
    if config.getoption("--run-network"):
        return
    skip_network = pytest.mark.skip(reason="needs --run-network")
    for item in items:
        if "network" in item.keywords:
            item.add_marker(skip_network)


@pytest.fixture(scope="session")
def registry_snapshot() -> bytes:
    if not REGISTRY_SNAPSHOT.exists():
        pytest.skip(f"Registry snapshot not found: {REGISTRY_SNAPSHOT}")
    return REGISTRY_SNAPSHOT.read_bytes()
