"""JSON Pointer (RFC 6901) evaluation and JSON Patch (RFC 6902) application."""

from pointer_patch.compare import is_equal
from pointer_patch.errors import (
    ArrayIndexOutOfBoundsError,
    IndexTooLargeError,
    InvalidAddTargetError,
    InvalidArrayIndexError,
    InvalidArrayReferenceError,
    InvalidOperationError,
    InvalidPointerError,
    InvalidRemoveTargetError,
    JsonPatchError,
    KeyNotFoundError,
    RootNotObjectError,
    TestMismatchError,
    UnresolvableTokenError,
    UnresolvedPointerError,
)
from pointer_patch.patch import (
    AddOperation,
    CopyOperation,
    MoveOperation,
    Operation,
    RemoveOperation,
    ReplaceOperation,
    TestOperation,
    apply,
    apply_patch,
    parse_operation,
    parse_patch,
)
from pointer_patch.pointer import (
    compile_pointer,
    escape_token,
    evaluate,
    interpret_path,
    unescape_token,
)
from pointer_patch.settings import Settings, get_settings, reset_settings_cache

__all__ = [
    "AddOperation",
    "ArrayIndexOutOfBoundsError",
    "CopyOperation",
    "IndexTooLargeError",
    "InvalidAddTargetError",
    "InvalidArrayIndexError",
    "InvalidArrayReferenceError",
    "InvalidOperationError",
    "InvalidPointerError",
    "InvalidRemoveTargetError",
    "JsonPatchError",
    "KeyNotFoundError",
    "MoveOperation",
    "Operation",
    "RemoveOperation",
    "ReplaceOperation",
    "RootNotObjectError",
    "Settings",
    "TestMismatchError",
    "TestOperation",
    "UnresolvableTokenError",
    "UnresolvedPointerError",
    "apply",
    "apply_patch",
    "compile_pointer",
    "escape_token",
    "evaluate",
    "get_settings",
    "interpret_path",
    "is_equal",
    "parse_operation",
    "parse_patch",
    "reset_settings_cache",
    "unescape_token",
]
