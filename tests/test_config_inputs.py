"""
Tests for yc_runner/config/inputs.py
"""

import pytest

from yc_runner.config.errors import MissingInputError
from yc_runner.config.inputs import EnvInputSource, StaticInputSource, input_env_var


def test_input_env_var_naming():
    """Test the INPUT_* naming used by the GitHub runner."""
    assert input_env_var("mode") == "INPUT_MODE"
    assert input_env_var("vm-image-id") == "INPUT_VM-IMAGE-ID"
    assert input_env_var("my input") == "INPUT_MY_INPUT"


def test_env_input_source_reads_and_trims():
    """Test that values are read from INPUT_* variables and trimmed."""
    source = EnvInputSource({"INPUT_VM-IMAGE-ID": "  img1\n"})

    assert source.get("vm-image-id") == "img1"


def test_env_input_source_missing_optional_is_empty():
    """Test that an unknown optional input reads as an empty string."""
    source = EnvInputSource({})

    assert source.get("label") == ""


def test_env_input_source_required_missing_raises():
    """Test that a required input that is absent or blank raises MissingInputError."""
    source = EnvInputSource({"INPUT_FOLDER-ID": "   "})

    with pytest.raises(MissingInputError) as exc_info:
        source.get("folder-id", required=True)

    assert exc_info.value.name == "folder-id"
    assert "folder-id" in str(exc_info.value)

    with pytest.raises(MissingInputError):
        source.get("vm-subnet-id", required=True)


def test_env_input_source_snapshots_os_environ(monkeypatch):
    """Test that the default source copies os.environ at construction time."""
    monkeypatch.setenv("INPUT_MODE", "start")
    source = EnvInputSource()
    monkeypatch.setenv("INPUT_MODE", "stop")

    assert source.get("mode") == "start"


def test_static_input_source():
    """Test the mapping-backed source follows the same contract."""
    source = StaticInputSource({"mode": " stop ", "label": ""})

    assert source.get("mode") == "stop"
    assert source.get("label") == ""
    assert source.get("unknown") == ""
    with pytest.raises(MissingInputError):
        source.get("label", required=True)
