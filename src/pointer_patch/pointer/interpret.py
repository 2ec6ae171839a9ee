"""
JSON Pointer (RFC 6901) tokenizing and token escaping.

Nothing here validates a pointer. The evaluator and the patch operations
check that the first token is empty before treating a pointer as
well-formed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class InterpretedPath:
    pointer: str
    tokens: list[str]
    parent: str
    key: str

    @property
    def is_root(self) -> bool:
        return len(self.tokens) == 1

    @property
    def parent_pointer(self) -> str:
        """Pointer to the container holding ``key`` (``""`` for top-level keys)."""
        return compile_pointer(self.tokens[1:-1])


class PathInterpreter:
    @staticmethod
    def unescape_token(token: str) -> str:
        # "~1" must be replaced before "~0" so that "~01" decodes to "~1".
        return token.replace("~1", "/").replace("~0", "~")

    @staticmethod
    def escape_token(token: str) -> str:
        return token.replace("~", "~0").replace("/", "~1")

    @classmethod
    def interpret(cls, pointer: str) -> InterpretedPath:
        tokens = [cls.unescape_token(t) for t in pointer.split("/")]
        return InterpretedPath(
            pointer=pointer,
            tokens=tokens,
            parent=tokens[-2] if len(tokens) >= 2 else "",
            key=tokens[-1] if len(tokens) > 1 else "",
        )

    @classmethod
    def compile(cls, tokens: Iterable[str]) -> str:
        escaped = [cls.escape_token(t) for t in tokens]
        if not escaped:
            return ""
        return "/" + "/".join(escaped)


def interpret_path(pointer: str) -> InterpretedPath:
    """
    Split a JSON Pointer into unescaped reference tokens.

    The returned ``tokens`` keep the leading empty token produced by the
    initial ``/``; ``""`` yields ``[""]``.

    Example:
        >>> interpret_path("/a~1b/c").tokens
        ['', 'a/b', 'c']
    """
    return PathInterpreter.interpret(pointer)


def unescape_token(token: str) -> str:
    return PathInterpreter.unescape_token(token)


def escape_token(token: str) -> str:
    return PathInterpreter.escape_token(token)


def compile_pointer(tokens: Iterable[str]) -> str:
    """Build a pointer string from raw (unescaped) reference tokens."""
    return PathInterpreter.compile(tokens)
