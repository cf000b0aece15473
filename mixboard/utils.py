#!/usr/bin/env python3
"""
Value coercion helpers

StagelinQ values arrive as whatever the firmware felt like sending:
numbers as strings, booleans as numbers, nulls where a string is
expected. Nothing in here raises; every helper falls back to a default.
"""

import math
from typing import Any


def to_str(value: Any) -> str:
    """stringify, with None becoming an empty string"""
    if value is None:
        return ""
    return str(value)


def to_bool(value: Any) -> bool:
    """permissive truthiness"""
    return bool(value)


def to_float(value: Any, default: float = 0.0) -> float:
    """parse a float, returning default on garbage or non-finite values"""
    if value is None:
        return default
    try:
        result = float(value)
    except (TypeError, ValueError):
        return default
    if not math.isfinite(result):
        return default
    return result


def to_int(value: Any, default: int = 0) -> int:
    """parse an integer, truncating floats and numeric strings like '44100.0'"""
    if value is None:
        return default
    if isinstance(value, int):
        return int(value)
    try:
        return int(value)
    except (TypeError, ValueError):
        pass
    result = to_float(value, default=math.nan)
    if math.isnan(result):
        return default
    return int(result)


def is_positive_number(value: Any) -> bool:
    """true for real numbers (and numeric strings) above zero"""
    return to_float(value) > 0
