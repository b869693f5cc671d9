"""
Tests for yc_runner/utils/workflow.py

The actions-toolkit `core` module is replaced with a Mock, so these tests
check which workflow commands the action issues, not their wire format.
"""

from unittest.mock import call, patch

import pytest

from yc_runner.utils import workflow


def test_group_starts_and_ends():
    """Test that group() opens and closes a log group around the body."""
    with patch("yc_runner.utils.workflow.core") as core:
        with workflow.group("Parsing Action Inputs"):
            core.start_group.assert_called_once_with("Parsing Action Inputs")
            core.end_group.assert_not_called()

    core.end_group.assert_called_once_with()


def test_group_closes_on_error():
    """Test that the group is closed when the body raises."""
    with patch("yc_runner.utils.workflow.core") as core:
        with pytest.raises(RuntimeError):
            with workflow.group("g"):
                raise RuntimeError("boom")

    core.end_group.assert_called_once_with()


def test_add_mask_skips_empty():
    """Test that only non-empty secrets are registered."""
    with patch("yc_runner.utils.workflow.core") as core:
        workflow.add_mask("")
        workflow.add_mask("s3cr3t")

    assert core.set_secret.call_args_list == [call("s3cr3t")]


def test_error_annotation():
    """Test that errors are reported as annotations."""
    with patch("yc_runner.utils.workflow.core") as core:
        workflow.error("mode not specified")

    core.error.assert_called_once_with("mode not specified")


def test_set_output():
    """Test that step outputs are published through the toolkit."""
    with patch("yc_runner.utils.workflow.core") as core:
        workflow.set_output("label", "abc12")

    core.set_output.assert_called_once_with("label", "abc12")
