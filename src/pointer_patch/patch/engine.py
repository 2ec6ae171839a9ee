"""
The six JSON Patch (RFC 6902) operations.

Every mutating operation deep-clones the document it is given and edits the
clone, so the caller's document is never changed. ``test`` returns the very
object it was given when it passes.

Operations accept either an operation model or a plain JSON Patch mapping.
"""

from __future__ import annotations

import logging
import math
from copy import deepcopy
from typing import Any, Mapping, Type, TypeVar, Union

from pydantic import ValidationError

from pointer_patch.compare import is_equal
from pointer_patch.errors import (
    IndexTooLargeError,
    InvalidAddTargetError,
    InvalidOperationError,
    InvalidPointerError,
    InvalidRemoveTargetError,
    TestMismatchError,
)
from pointer_patch.patch.operations import (
    AddOperation,
    CopyOperation,
    MoveOperation,
    Operation,
    RemoveOperation,
    ReplaceOperation,
    TestOperation,
    is_known_kind,
    parse_operation,
)
from pointer_patch.pointer import evaluate, interpret_path, parse_array_index
from pointer_patch.settings import get_settings

logger = logging.getLogger(__name__)

_OpT = TypeVar(
    "_OpT",
    AddOperation,
    RemoveOperation,
    ReplaceOperation,
    MoveOperation,
    CopyOperation,
    TestOperation,
)

OperationInput = Union[Operation, Mapping[str, Any]]


class PatchEngine:
    @staticmethod
    def _clone(obj: Any) -> Any:
        return deepcopy(obj)

    @staticmethod
    def _coerce(model: Type[_OpT], operation: Any) -> _OpT:
        if isinstance(operation, model):
            return operation
        if not isinstance(operation, Mapping):
            raise InvalidOperationError(
                f"Expected a {model.__name__} or a mapping, got {type(operation).__name__}",
                operation,
            )
        data = {**operation, "op": model.model_fields["op"].default}
        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise InvalidOperationError(
                f"Invalid {data['op']} operation: {e.error_count()} validation error(s)",
                operation,
            ) from e

    @staticmethod
    def _is_vacant(value: Any) -> bool:
        """True for values JavaScript treats as falsy: None, False, 0, NaN, ""."""
        if value is None or value is False:
            return True
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return value == 0 or math.isnan(value)
        return value == ""

    # ------------------------------------------------------------------
    # add
    # ------------------------------------------------------------------
    @classmethod
    def add(cls, document: Any, operation: Any) -> Any:
        op = cls._coerce(AddOperation, operation)
        path = interpret_path(op.path)

        # Valid pointers start with "/".
        if path.tokens[0] != "":
            raise InvalidPointerError(op.path)

        value = cls._clone(op.value)

        # The root is wrapped, not replaced.
        if path.is_root:
            return {"value": value}

        clone = cls._clone(document)
        # The parent container must already exist.
        target = evaluate(clone, path.parent_pointer)
        key = path.key

        if key == "-":
            if not isinstance(target, list):
                raise InvalidAddTargetError("Invalid pointer operation on target.")
            target.append(value)
            return clone

        idx = parse_array_index(key)
        if idx is not None:
            if not isinstance(target, list):
                raise InvalidAddTargetError("Invalid pointer operation on target.")
            if idx > len(target):
                raise IndexTooLargeError(idx, len(target))
            target.insert(idx, value)
            return clone

        if isinstance(target, dict):
            target[key] = value
            return clone

        raise InvalidAddTargetError(f"Invalid add operation for pointer: {op.path}")

    # ------------------------------------------------------------------
    # remove
    # ------------------------------------------------------------------
    @classmethod
    def remove(cls, document: Any, operation: Any) -> Any:
        op = cls._coerce(RemoveOperation, operation)
        path = interpret_path(op.path)

        if path.tokens[0] != "":
            raise InvalidPointerError(op.path)

        # Removing the root discards everything, whatever its type.
        if path.is_root:
            return {}

        key = path.key
        if key == "-":
            raise InvalidRemoveTargetError(
                f"Invalid pointer for remove operation: {op.path}"
            )

        clone = cls._clone(document)
        target = evaluate(clone, path.parent_pointer)

        idx = parse_array_index(key)
        if idx is not None:
            if not isinstance(target, list):
                raise InvalidRemoveTargetError(
                    "Cannot remove array elements at non-Array target."
                )
            # Falsy elements (0, "", False, None) count as missing.
            if idx >= len(target) or cls._is_vacant(target[idx]):
                raise InvalidRemoveTargetError(
                    "Attempting to index non-existent element at target array."
                )
            target.pop(idx)
            return clone

        if isinstance(target, dict):
            if key not in target:
                raise InvalidRemoveTargetError(
                    "Attempting to access undefined value at target object."
                )
            del target[key]
            return clone

        raise InvalidRemoveTargetError(
            f"Invalid remove operation for pointer: {op.path}"
        )

    # ------------------------------------------------------------------
    # replace / move / copy / test
    # ------------------------------------------------------------------
    @classmethod
    def replace(cls, document: Any, operation: Any) -> Any:
        op = cls._coerce(ReplaceOperation, operation)
        removed = cls.remove(document, RemoveOperation(path=op.path))
        return cls.add(removed, AddOperation(path=op.path, value=op.value))

    @classmethod
    def move(cls, document: Any, operation: Any) -> Any:
        op = cls._coerce(MoveOperation, operation)
        value = evaluate(document, op.from_)
        removed = cls.remove(document, RemoveOperation(path=op.from_))
        return cls.add(removed, AddOperation(path=op.path, value=value))

    @classmethod
    def copy(cls, document: Any, operation: Any) -> Any:
        op = cls._coerce(CopyOperation, operation)
        if op.from_ == op.path:
            return document
        value = evaluate(document, op.from_)
        return cls.add(document, AddOperation(path=op.path, value=value))

    @classmethod
    def test(cls, document: Any, operation: Any) -> Any:
        op = cls._coerce(TestOperation, operation)
        actual = evaluate(document, op.path)
        if not is_equal(actual, op.value):
            raise TestMismatchError(op.path, expected=op.value, actual=actual)
        return document

    # ------------------------------------------------------------------
    # dispatch
    # ------------------------------------------------------------------
    @classmethod
    def apply(cls, document: Any, operation: OperationInput) -> Any:
        if isinstance(operation, Mapping) and not is_known_kind(operation):
            op_name = operation.get("op")
            if get_settings().STRICT_OPERATIONS:
                raise InvalidOperationError(
                    f"Operation not supported: {op_name}", operation
                )
            logger.warning("Skipping unsupported patch operation %r", op_name)
            return document

        op = parse_operation(operation)

        if isinstance(op, AddOperation):
            return cls.add(document, op)
        elif isinstance(op, RemoveOperation):
            return cls.remove(document, op)
        elif isinstance(op, ReplaceOperation):
            return cls.replace(document, op)
        elif isinstance(op, MoveOperation):
            return cls.move(document, op)
        elif isinstance(op, CopyOperation):
            return cls.copy(document, op)
        # The union is closed; what is left is a TestOperation.
        return cls.test(document, op)


def add(document: Any, operation: OperationInput) -> Any:
    """
    Add ``operation.value`` at ``operation.path``.

    ``-`` appends to an array, an index inserts before that position (equal
    to the length appends), any other token sets an object member. The
    parent container must already exist. An empty path wraps the value as
    ``{"value": value}``.
    """
    return PatchEngine.add(document, operation)


def remove(document: Any, operation: OperationInput) -> Any:
    """
    Remove the value at ``operation.path``.

    An empty path yields ``{}``. Array elements that are falsy (0, "",
    False, None) are treated as missing and cannot be removed.
    """
    return PatchEngine.remove(document, operation)


def replace(document: Any, operation: OperationInput) -> Any:
    """``remove`` then ``add`` at the same path; the location must exist."""
    return PatchEngine.replace(document, operation)


def move(document: Any, operation: OperationInput) -> Any:
    """``remove`` at ``from`` then ``add`` at ``path``, in that order."""
    return PatchEngine.move(document, operation)


def copy(document: Any, operation: OperationInput) -> Any:
    """``add`` the value found at ``from`` to ``path``; no-op if they are equal."""
    return PatchEngine.copy(document, operation)


def test(document: Any, operation: OperationInput) -> Any:
    """Return ``document`` itself if the value at ``path`` equals ``value``."""
    return PatchEngine.test(document, operation)


# Keep pytest from collecting this function when imported into a test module.
test.__test__ = False  # type: ignore[attr-defined]


def apply(document: Any, operation: OperationInput) -> Any:
    """
    Apply a single operation.

    Unrecognized ``op`` tags leave the document unchanged unless
    STRICT_OPERATIONS is set.
    """
    return PatchEngine.apply(document, operation)
