"""
Error taxonomy for the configuration phase.

**Conceptual**: Every failure while reading or validating action inputs is
terminal. Nothing is retried and no partial configuration is returned. The
exceptions below let the entry script catch the whole phase with one clause
(ActionInputError) while tests can assert on the precise kind.
"""

from typing import Optional


class ActionInputError(Exception):
    """
    Base exception for all configuration-phase errors.

    **Conceptual**: Catch this to abort the action with a readable message,
    regardless of which step (lookup, parsing, validation) failed.
    """
    pass


class MissingInputError(ActionInputError):
    """
    Raised when an input marked as required is absent or empty.

    **Recovery**: Add the input to the `with:` block of the workflow step.
    """

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Input required and not supplied: {name}")


class MalformedValueError(ActionInputError):
    """
    Raised when a size or integer input does not match its grammar.

    Attributes:
        name: Input name (e.g. "vm-memory"), or None when parsing a bare value.
        value: The raw string that failed to parse.
    """

    def __init__(self, value: str, expected: str, name: Optional[str] = None):
        self.name = name
        self.value = value
        where = f"Input '{name}'" if name else "Value"
        super().__init__(f"{where} must be {expected}, got: {value!r}")


class ConfigError(ActionInputError):
    """
    Raised when the combination of mode and inputs is inconsistent.

    **Example**: mode=start without vm-subnet-id, or mode=restart.
    """
    pass
