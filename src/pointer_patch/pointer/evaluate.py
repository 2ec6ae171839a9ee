from __future__ import annotations

import re
from typing import Any, Optional

from pointer_patch.errors import (
    ArrayIndexOutOfBoundsError,
    InvalidArrayIndexError,
    InvalidArrayReferenceError,
    InvalidPointerError,
    KeyNotFoundError,
    RootNotObjectError,
    UnresolvableTokenError,
    UnresolvedPointerError,
)
from pointer_patch.pointer.interpret import interpret_path
from pointer_patch.settings import get_settings

_INDEX_RE = re.compile(r"\d+")
_STRICT_INDEX_RE = re.compile(r"0|[1-9]\d*")


def is_container(value: Any) -> bool:
    return isinstance(value, (dict, list))


def parse_array_index(token: str) -> Optional[int]:
    """Return the index named by ``token``, or None if it is not an array index.

    Leading zeros ("01") are accepted unless STRICT_ARRAY_INDICES is set.
    """
    pattern = _STRICT_INDEX_RE if get_settings().STRICT_ARRAY_INDICES else _INDEX_RE
    # re's \d also matches non-ASCII digits; JSON Pointer indices are ASCII.
    if not token.isascii() or not pattern.fullmatch(token):
        return None
    return int(token)


class PointerEvaluator:
    @classmethod
    def evaluate(cls, document: Any, pointer: str) -> Any:
        if not is_container(document):
            raise RootNotObjectError()

        tokens = interpret_path(pointer).tokens

        # A non-empty pointer is a sequence of tokens each prefixed by "/".
        if tokens[0] != "":
            raise InvalidPointerError(pointer)

        cur = document
        for tok in tokens[1:]:
            if cur is None:
                raise UnresolvedPointerError(pointer)
            cur = cls._step(cur, tok)
        return cur

    @staticmethod
    def _step(cur: Any, tok: str) -> Any:
        if isinstance(cur, list):
            # "-" names the element after the last one, which never exists.
            if tok == "-":
                raise InvalidArrayReferenceError()
            idx = parse_array_index(tok)
            if idx is None:
                raise InvalidArrayIndexError(tok)
            if idx >= len(cur):
                raise ArrayIndexOutOfBoundsError(idx)
            return cur[idx]

        if isinstance(cur, dict):
            if tok not in cur:
                raise KeyNotFoundError(tok)
            return cur[tok]

        raise UnresolvableTokenError(tok)


def evaluate(document: Any, pointer: str) -> Any:
    """
    Resolve a JSON Pointer against a document.

    Args:
        document: The root document. Must be a dict or a list.
        pointer: RFC 6901 pointer; ``""`` refers to the whole document.

    Returns:
        The value at the pointer location. This is the document's own
        object, not a copy.

    Raises:
        RootNotObjectError: The document is not a dict or list.
        InvalidPointerError: A non-empty pointer does not start with "/".
        KeyNotFoundError, InvalidArrayIndexError, ArrayIndexOutOfBoundsError,
        InvalidArrayReferenceError, UnresolvableTokenError,
        UnresolvedPointerError: A token cannot be resolved.
    """
    return PointerEvaluator.evaluate(document, pointer)
