"""
Package version lookup.
"""
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as distribution_version
from pathlib import Path

DISTRIBUTION_NAME = "http-status"


def get_package_version() -> str:
    """
    Get the package version from the installed distribution metadata.

    Falls back to the `version` line of pyproject.toml when running from a
    source checkout that was never installed.

    Returns:
        Package version string, or "unknown" if it cannot be determined.
    """
    try:
        return distribution_version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        pass

    pyproject_path = Path(__file__).resolve().parents[2] / "pyproject.toml"
    try:
        with open(pyproject_path, "r", encoding="utf-8") as f:
            for line in f:
                line = line.strip()
                if line.startswith("version") and "=" in line:
                    return line.split("=", 1)[1].strip().strip('"').strip("'")
    except OSError:
        pass
    return "unknown"
