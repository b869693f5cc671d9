"""
Parsing of human-readable sizes and integer inputs.

**Conceptual**: VM memory and disk size are supplied as strings such as
"1Gb" or "30Gb" and converted to a byte count before being handed to the
compute API. Core count and core fraction are plain base-10 integers.

**Size grammar**:
  - A non-negative decimal magnitude ("30", "1.5"), immediately followed by
  - a unit suffix from b, kb, mb, gb, tb (case-insensitive).
  - Surrounding whitespace is ignored; whitespace between number and unit is not.
  - Only ASCII digits and letters count ("３Gb" is rejected).

**Units are binary**: 1kb = 1024 bytes, 1gb = 1024**3 bytes. Fractional
results ("1.5kb" -> 1536.0, "0.3kb" -> 307.2) are truncated to whole bytes.
"""

import re
from decimal import Decimal
from typing import Optional

from yc_runner.config.errors import MalformedValueError


# Power of 1024 for each supported unit
UNIT_POWERS = {
    "b": 0,
    "kb": 1,
    "mb": 2,
    "gb": 3,
    "tb": 4,
}

_SIZE_RE = re.compile(r"^(?P<number>[0-9]+(?:\.[0-9]+)?)(?P<unit>[a-z]+)$", re.IGNORECASE | re.ASCII)
_INT_RE = re.compile(r"^[+-]?[0-9]+$")


def parse_memory(value: str, name: Optional[str] = None) -> int:
    """
    Convert a size string like "30Gb" to a number of bytes.

    Args:
        value: Size string (see module docstring for the grammar).
        name: Input name used in the error message (optional).

    Returns:
        Size in bytes (int).

    Raises:
        MalformedValueError: If the unit is missing or unknown, or the
            magnitude is not a decimal number.

    Example:
        >>> parse_memory("2Gb")
        2147483648
        >>> parse_memory("512mb")
        536870912
    """
    match = _SIZE_RE.match(value.strip())
    if match is None:
        raise MalformedValueError(value, "a size like '30Gb' (units: b, kb, mb, gb, tb)", name)

    unit = match.group("unit").lower()
    if unit not in UNIT_POWERS:
        raise MalformedValueError(value, "a size like '30Gb' (units: b, kb, mb, gb, tb)", name)

    # Decimal keeps "1.1gb" exact before truncation
    number = Decimal(match.group("number"))
    return int(number * (1024 ** UNIT_POWERS[unit]))


def parse_int(value: str, name: Optional[str] = None) -> int:
    """
    Parse a base-10 integer input ("2", "100").

    Raises:
        MalformedValueError: If the value is not a plain decimal integer.
    """
    text = value.strip()
    if not _INT_RE.match(text):
        raise MalformedValueError(value, "a base-10 integer", name)
    return int(text, 10)
