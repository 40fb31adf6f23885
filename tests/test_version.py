"""
Tests for SDK version discovery.
"""
import importlib
import re
from importlib import metadata as importlib_metadata
from unittest.mock import mock_open, patch

import pytest

import ledgertx_sdk.version as version_module
from ledgertx_sdk import __version__


def _not_installed(name):
    raise importlib_metadata.PackageNotFoundError(name)


@pytest.fixture
def reload_version():
    """Reload the version module under the active patches, then restore it."""
    yield lambda: importlib.reload(version_module).__version__
    importlib.reload(version_module)


def test_version_is_semver():
    assert re.match(r"^\d+\.\d+\.\d+$", __version__)


def test_installed_metadata_wins(reload_version):
    with patch("importlib.metadata.version", return_value="2.3.4") as mock_version:
        assert reload_version() == "2.3.4"
    mock_version.assert_called_once_with("ledgertx-sdk")


@pytest.mark.parametrize("content, expected", [
    (b'[project]\nname = "ledgertx-sdk"\nversion = "1.2.3"\n', "1.2.3"),
    (b'[project]\nname = "ledgertx-sdk"\n', "0.1.0"),
    (b'[tool.pytest.ini_options]\ntestpaths = ["tests"]\n', "0.1.0"),
    (b'[project\nversion = = "1.2.3"\n', "0.1.0"),
])
def test_source_checkout_reads_pyproject(reload_version, content, expected):
    with patch("importlib.metadata.version", side_effect=_not_installed), \
            patch("pathlib.Path.open", mock_open(read_data=content)):
        assert reload_version() == expected


def test_missing_pyproject_falls_back(reload_version):
    with patch("importlib.metadata.version", side_effect=_not_installed), \
            patch("pathlib.Path.open", side_effect=FileNotFoundError):
        assert reload_version() == "0.1.0"


def test_malformed_pyproject_does_not_break_import(tmp_path):
    path = tmp_path / "pyproject.toml"
    path.write_bytes(b"[project\n")
    assert version_module._version_from_pyproject(path) == version_module.FALLBACK_VERSION
