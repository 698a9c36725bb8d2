import math
import re
from typing import Any, Optional

__all__ = ["parse_number", "parse_int"]

_NUMBER_RE = re.compile(r"^\s*([-+]?(?:[0-9]+(?:[.,][0-9]*)?|[.,][0-9]+))")


def parse_number(value: Any) -> Optional[float]:
    """Return the leading number of ``value`` as ``float``.

    Strings may carry trailing units like ``"180 cm"`` or ``"72,5kg"``; a
    comma is accepted as decimal separator.  Anything that does not start
    with a number, or that overflows to infinity, yields ``None``.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return None
    elif isinstance(value, str):
        m = _NUMBER_RE.match(value)
        if not m:
            return None
        number = float(m.group(1).replace(",", "."))
    else:
        return None
    return number if math.isfinite(number) else None


def parse_int(value: Any) -> Optional[int]:
    """Return ``value`` as ``int`` with the fractional part dropped.

    ``"72.9 kg"`` becomes ``72``.  If conversion fails, ``None`` is returned.
    """
    number = parse_number(value)
    if number is None:
        return None
    return int(number)
