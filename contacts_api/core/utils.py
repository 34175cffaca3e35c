"""
Utility helpers shared across routers/services.
"""

import re
from typing import Optional

_INT_PREFIX = re.compile(r"([+-]?)(?:0[xX]([0-9a-fA-F]*)|([0-9]+))")


def parse_int(value: Optional[str]) -> Optional[int]:
    """
    Parse the leading integer of a path segment ("12abc" -> 12, "0x10" -> 16).

    Only ASCII digits count. Returns None when the segment does not start
    with digits; None never matches a stored id.
    """
    match = _INT_PREFIX.match((value or "").strip())
    if not match:
        return None
    sign, hex_digits, dec_digits = match.groups()
    if hex_digits is None:
        number = int(dec_digits)
    elif hex_digits:
        number = int(hex_digits, 16)
    else:
        # "0x" with no hex digits after it
        return None
    return -number if sign == "-" else number
