"""
Input sources for action configuration.

**Conceptual**: The loader never reads os.environ directly. It asks an
InputSource for named string values ("folder-id", "vm-memory", ...). In a
workflow run the values come from the INPUT_* environment variables the
GitHub runner exports for the step's `with:` block; in tests they come from
a plain dict.

**Why a protocol?**
  - The loader is testable without patching the process environment.
  - Any object with a matching get() works (structural typing).

**Lookup contract** (all implementations):
  1. Values are returned with surrounding whitespace stripped.
  2. Unknown names read as "" (not None).
  3. required=True and an empty value raises MissingInputError.
"""

import os
from typing import Mapping, Optional, Protocol

from yc_runner.config.errors import MissingInputError


class InputSource(Protocol):
    """
    Protocol for fetching named action inputs.

    **Example**:
        >>> source = StaticInputSource({"mode": "start"})
        >>> source.get("mode")
        'start'
        >>> source.get("label")
        ''
    """

    def get(self, name: str, required: bool = False) -> str:
        """
        Return the trimmed value of input `name`.

        Raises:
            MissingInputError: If required=True and the value is empty.
        """
        ...


def input_env_var(name: str) -> str:
    """
    Environment variable name the GitHub runner uses for an action input.

    Spaces become underscores and the name is upper-cased; hyphens are kept,
    so "vm-image-id" maps to "INPUT_VM-IMAGE-ID".
    """
    return "INPUT_" + name.replace(" ", "_").upper()


class EnvInputSource:
    """
    InputSource backed by the INPUT_* environment variables of a workflow step.

    **Usage**:
        source = EnvInputSource()               # snapshot of os.environ
        source = EnvInputSource({"INPUT_MODE": "stop"})  # explicit mapping
    """

    def __init__(self, env: Optional[Mapping[str, str]] = None):
        # Copy so later environment changes do not leak into a loaded config
        self._env = dict(os.environ if env is None else env)

    def get(self, name: str, required: bool = False) -> str:
        value = self._env.get(input_env_var(name), "").strip()
        if required and not value:
            raise MissingInputError(name)
        return value


class StaticInputSource:
    """
    InputSource backed by a plain {input-name: value} mapping.

    Used in tests and for local dry runs where inputs are given directly.
    """

    def __init__(self, values: Mapping[str, str]):
        self._values = dict(values)

    def get(self, name: str, required: bool = False) -> str:
        value = (self._values.get(name) or "").strip()
        if required and not value:
            raise MissingInputError(name)
        return value
