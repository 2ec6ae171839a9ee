from __future__ import annotations

import math
from typing import Any


def _json_type(x: Any) -> str:
    # bool is an int subclass; JSON keeps them apart.
    if isinstance(x, bool):
        return "boolean"
    if isinstance(x, (int, float)):
        return "number"
    if x is None:
        return "null"
    if isinstance(x, str):
        return "string"
    if isinstance(x, list):
        return "array"
    if isinstance(x, dict):
        return "object"
    return type(x).__name__


def _is_nan(x: Any) -> bool:
    return isinstance(x, float) and math.isnan(x)


def is_equal(a: Any, b: Any) -> bool:
    """
    Deep structural equality over JSON values, as used by the ``test`` op.

    Unlike ``==``: NaN equals NaN, ``True`` never equals ``1``, and object
    key order is ignored. ``1`` and ``1.0`` are the same number.
    """
    if _is_nan(a) and _is_nan(b):
        return True
    if _json_type(a) != _json_type(b):
        return False
    if isinstance(a, list):
        if len(a) != len(b):
            return False
        return all(is_equal(x, y) for x, y in zip(a, b))
    if isinstance(a, dict):
        if len(a) != len(b):
            return False
        return all(k in b and is_equal(v, b[k]) for k, v in a.items())
    if isinstance(a, (str, int, float)) or a is None:
        return a == b
    return False
