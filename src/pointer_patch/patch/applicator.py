from __future__ import annotations

import logging
from typing import Any, Callable, Optional, Sequence

from pointer_patch.errors import JsonPatchError
from pointer_patch.patch.engine import OperationInput, apply

logger = logging.getLogger(__name__)

PatchHook = Callable[[Any, Sequence[OperationInput]], Any]


def apply_patch(
    document: Any,
    operations: Sequence[OperationInput],
    hooks: Optional[Sequence[PatchHook]] = None,
) -> Any:
    """
    Apply JSON Patch operations to the document, in order.

    The first failing operation aborts the whole patch and its error
    propagates; no partially patched document is ever returned and
    ``document`` itself is left untouched.

    Args:
        document: The current JSON document.
        operations: JSON Patch operations (RFC 6902), as models or mappings.
        hooks: Optional callables run after a successful patch, in order,
            as ``hook(result, operations)``. Their return values are ignored
            and their exceptions propagate.

    Returns:
        The patched document.

    Example:
        >>> apply_patch({"foo": "bar"}, [
        ...     {"op": "add", "path": "/baz", "value": 0},
        ...     {"op": "remove", "path": "/foo"},
        ... ])
        {'baz': 0}
    """
    result = document
    for i, operation in enumerate(operations):
        try:
            result = apply(result, operation)
        except JsonPatchError as e:
            logger.debug("Patch aborted at operation %d (%r): %s", i, operation, e)
            raise

    if hooks:
        for hook in hooks:
            hook(result, operations)

    return result
