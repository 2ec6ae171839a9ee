from pointer_patch.patch.applicator import PatchHook, apply_patch
from pointer_patch.patch.engine import (
    OperationInput,
    PatchEngine,
    add,
    apply,
    copy,
    move,
    remove,
    replace,
    test,
)
from pointer_patch.patch.operations import (
    AddOperation,
    CopyOperation,
    MoveOperation,
    Operation,
    RemoveOperation,
    ReplaceOperation,
    TestOperation,
    parse_operation,
    parse_patch,
)

__all__ = [
    "AddOperation",
    "CopyOperation",
    "MoveOperation",
    "Operation",
    "OperationInput",
    "PatchEngine",
    "PatchHook",
    "RemoveOperation",
    "ReplaceOperation",
    "TestOperation",
    "add",
    "apply",
    "apply_patch",
    "copy",
    "move",
    "parse_operation",
    "parse_patch",
    "remove",
    "replace",
    "test",
]
