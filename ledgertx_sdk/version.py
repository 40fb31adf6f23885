"""
Version of the ledgertx SDK.

Installed distributions report the version from their metadata. A source
checkout that is not installed reads it from the neighbouring pyproject.toml.
"""
import importlib.metadata
import pathlib

import tomli

DISTRIBUTION_NAME = "ledgertx-sdk"
FALLBACK_VERSION = "0.1.0"

_PYPROJECT = pathlib.Path(__file__).parent.parent / "pyproject.toml"


def _version_from_pyproject(path: pathlib.Path) -> str:
    try:
        with path.open("rb") as f:
            return tomli.load(f)["project"]["version"]
    except (OSError, KeyError, TypeError, tomli.TOMLDecodeError):
        return FALLBACK_VERSION


def _read_version() -> str:
    try:
        return importlib.metadata.version(DISTRIBUTION_NAME)
    except importlib.metadata.PackageNotFoundError:
        return _version_from_pyproject(_PYPROJECT)


__version__ = _read_version()
