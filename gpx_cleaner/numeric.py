"""Lenient number parsing for attribute values and form inputs."""

import math
import re

# Longest numeric prefix, the way browsers read ``lat="12.5abc"``.
_FLOAT_PREFIX = re.compile(
    r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)"
)
_INT_PREFIX = re.compile(r"[+-]?\d+")
_HEX_PREFIX = re.compile(r"([+-]?)0[xX]([0-9a-fA-F]*)")
# Numbers at least this large print in exponent form, as do non-zero
# numbers below _SMALLEST_PLAIN.
_LARGEST_PLAIN = 1e21
_SMALLEST_PLAIN = 1e-6


def parse_float(value):
    """Parse the leading number of ``value``.

    Leading whitespace is skipped and trailing garbage ignored, so
    ``" 12.5abc"`` gives ``12.5``. Returns ``nan`` when no number can be
    read (``None``, empty strings, ``"abc"``).
    """
    if value is None:
        return math.nan
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    match = _FLOAT_PREFIX.match(str(value).lstrip())
    if match is None:
        return math.nan
    text = match.group(0)
    if text.endswith("Infinity"):
        return -math.inf if text.startswith("-") else math.inf
    return float(text)


def parse_int(value):
    """Parse the leading integer of ``value`` or return ``None``.

    Numbers are read through their printed form, so ``1e21`` gives ``1``
    just like the string ``"1e21"``. A ``0x`` prefix reads the digits that
    follow in base 16.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        if abs(value) < _LARGEST_PLAIN:
            return value
        try:
            value = float(value)
        except OverflowError:
            return None
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return None
        if value == 0 or _SMALLEST_PLAIN <= abs(value) < _LARGEST_PLAIN:
            return int(value)
        value = repr(value)
    text = str(value).lstrip()
    hex_match = _HEX_PREFIX.match(text)
    if hex_match is not None:
        sign, digits = hex_match.groups()
        if not digits:
            return None
        number = int(digits, 16)
        return -number if sign == "-" else number
    match = _INT_PREFIX.match(text)
    if match is None:
        return None
    return int(match.group(0))
