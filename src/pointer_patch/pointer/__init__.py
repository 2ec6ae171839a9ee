from pointer_patch.pointer.evaluate import (
    PointerEvaluator,
    evaluate,
    is_container,
    parse_array_index,
)
from pointer_patch.pointer.interpret import (
    InterpretedPath,
    PathInterpreter,
    compile_pointer,
    escape_token,
    interpret_path,
    unescape_token,
)

__all__ = [
    "InterpretedPath",
    "PathInterpreter",
    "PointerEvaluator",
    "compile_pointer",
    "escape_token",
    "evaluate",
    "interpret_path",
    "is_container",
    "parse_array_index",
    "unescape_token",
]
