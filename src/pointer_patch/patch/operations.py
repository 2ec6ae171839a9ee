"""
JSON Patch (RFC 6902) operation objects.

Each operation kind is its own model, tagged by a literal ``op`` field.
``from`` is a Python keyword, so move/copy expose it as ``from_`` and
accept and emit it under its JSON name.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Mapping, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from pointer_patch.errors import InvalidOperationError

OPERATION_KINDS = ("add", "remove", "replace", "move", "copy", "test")


class _Operation(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_json(self) -> dict[str, Any]:
        """The operation as an RFC 6902 JSON object."""
        return self.model_dump(by_alias=True)


class AddOperation(_Operation):
    op: Literal["add"] = "add"
    path: str
    value: Any


class RemoveOperation(_Operation):
    op: Literal["remove"] = "remove"
    path: str


class ReplaceOperation(_Operation):
    op: Literal["replace"] = "replace"
    path: str
    value: Any


class MoveOperation(_Operation):
    op: Literal["move"] = "move"
    from_: str = Field(alias="from")
    path: str


class CopyOperation(_Operation):
    op: Literal["copy"] = "copy"
    from_: str = Field(alias="from")
    path: str


class TestOperation(_Operation):
    # Keep pytest from collecting this class.
    __test__ = False

    op: Literal["test"] = "test"
    path: str
    value: Any


Operation = Annotated[
    Union[
        AddOperation,
        RemoveOperation,
        ReplaceOperation,
        MoveOperation,
        CopyOperation,
        TestOperation,
    ],
    Field(discriminator="op"),
]

_operation_adapter: TypeAdapter[Operation] = TypeAdapter(Operation)


def is_known_kind(operation: Mapping[str, Any]) -> bool:
    return operation.get("op") in OPERATION_KINDS


def parse_operation(operation: Any) -> Operation:
    """
    Validate a JSON Patch operation object into its model.

    Model instances are returned as-is.

    Raises:
        InvalidOperationError: ``operation`` is not a valid operation object,
            including an unrecognized ``op``.
    """
    if isinstance(operation, _Operation):
        return operation  # type: ignore[return-value]
    try:
        return _operation_adapter.validate_python(operation)
    except ValidationError as e:
        op_name = operation.get("op") if isinstance(operation, Mapping) else None
        raise InvalidOperationError(
            f"Invalid patch operation ({op_name!r}): {e.error_count()} validation error(s)",
            operation,
        ) from e


def parse_patch(operations: list[Any]) -> list[Operation]:
    return [parse_operation(op) for op in operations]
