"""
Error types raised while resolving pointers and applying patches.

Every error is a ``ValueError`` so callers that already treat bad pointers
and failed patch steps as ``ValueError`` keep working. The message text is
part of the public contract; callers match on it.
"""

from __future__ import annotations

from typing import Any, Optional


class JsonPatchError(ValueError):
    """Base class for pointer evaluation and patch application failures."""


# ======================================================================
# Pointer evaluation
# ======================================================================
class RootNotObjectError(JsonPatchError):
    def __init__(self) -> None:
        super().__init__("The root object is not a valid JSON object.")


class InvalidPointerError(JsonPatchError):
    def __init__(self, pointer: str) -> None:
        self.pointer = pointer
        super().__init__(f"Invalid JSON Pointer: {pointer}")


class UnresolvedPointerError(JsonPatchError):
    def __init__(self, pointer: str) -> None:
        self.pointer = pointer
        super().__init__(f"Unable to resolve pointer: {pointer}")


class KeyNotFoundError(JsonPatchError):
    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Key not found: {token}")


class InvalidArrayReferenceError(JsonPatchError):
    def __init__(self) -> None:
        self.token = "-"
        super().__init__(
            "Invalid reference: '-' points to a non-existent array element."
        )


class InvalidArrayIndexError(JsonPatchError):
    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Invalid array index: {token}")


class ArrayIndexOutOfBoundsError(JsonPatchError):
    def __init__(self, index: int) -> None:
        self.index = index
        super().__init__(f"Array index out of bounds: {index}")


class UnresolvableTokenError(JsonPatchError):
    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(
            f"Cannot resolve token '{token}' in non-object, non-array value."
        )


# ======================================================================
# Patch operations
# ======================================================================
class InvalidAddTargetError(JsonPatchError):
    """The last token of an ``add`` path does not fit the target container."""


class IndexTooLargeError(InvalidAddTargetError):
    def __init__(self, index: int, length: int) -> None:
        self.index = index
        self.length = length
        super().__init__(
            f"Pointer index: {index} must not be greater than "
            f"target array length: {length}."
        )


class InvalidRemoveTargetError(JsonPatchError):
    """The location named by a ``remove`` path does not exist."""


class TestMismatchError(JsonPatchError):
    # Keep pytest from collecting this class.
    __test__ = False

    def __init__(self, pointer: str, expected: Any = None, actual: Any = None) -> None:
        self.pointer = pointer
        self.expected = expected
        self.actual = actual
        super().__init__("Test operation failed due to value mismatch.")


class InvalidOperationError(JsonPatchError):
    def __init__(self, message: str, operation: Optional[Any] = None) -> None:
        self.operation = operation
        super().__init__(message)
