# predsets/errors.py
"""
predsets Error Types

The set algebra itself is total over well-typed inputs and never raises.
Errors only appear at the two seams where outside text enters the library:
bound configuration and the set-expression language.

Error Hierarchy:
────────────────
    PredsetsError (base)
    ├── BoundError                 - invalid bound configuration
    └── ExpressionError            - expression-language failures
        ├── ExpressionSyntaxError      - text does not match the grammar
        └── ExpressionEvaluationError  - evaluation failed (e.g. x // 0)

Example Usage:
──────────────
    from predsets.errors import ExpressionError
    from predsets.expr import evaluate

    try:
        evaluate("forall({1, 2}, even")
    except ExpressionError as exc:
        print(exc)          # "<expr>:1:20: error: ..."
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class SourcePosition:
    """A position inside an expression string (1-based line and column)."""

    offset: int = 0
    line: int = 1
    column: int = 1

    @classmethod
    def from_offset(cls, text: str, offset: int) -> "SourcePosition":
        """Compute line/column for a 0-based character *offset* into *text*."""
        offset = max(0, min(offset, len(text)))
        line = text.count("\n", 0, offset) + 1
        column = offset - (text.rfind("\n", 0, offset) + 1) + 1
        return cls(offset=offset, line=line, column=column)

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


class PredsetsError(Exception):
    """Base exception for all predsets errors."""

    def __init__(self, message: str, hint: str = "") -> None:
        super().__init__(message)
        self.message = message
        self.hint = hint

    def __str__(self) -> str:
        if self.hint:
            return f"{self.message} (hint: {self.hint})"
        return self.message


class BoundError(PredsetsError, ValueError):
    """The scan bound is not a positive integer."""

    def __init__(self, message: str, value: object = None, **kwargs) -> None:
        super().__init__(message, **kwargs)
        self.value = value


# ───────────────────────────────────────────────────────────────────────────
# EXPRESSION ERRORS
# ───────────────────────────────────────────────────────────────────────────

class ExpressionError(PredsetsError):
    """Failure while parsing or evaluating a set expression."""

    def __init__(
        self,
        message: str,
        source: str = "",
        position: Optional[SourcePosition] = None,
        **kwargs,
    ) -> None:
        super().__init__(message, **kwargs)
        self.source = source
        self.position = position

    def to_gcc_format(self, filename: str = "<expr>") -> str:
        """Format as a GCC-style error message."""
        where = f"{filename}:{self.position}" if self.position else filename
        return f"{where}: error: {PredsetsError.__str__(self)}"

    def __str__(self) -> str:
        return self.to_gcc_format()


class ExpressionSyntaxError(ExpressionError):
    """The expression text does not match the grammar."""

    def __init__(
        self,
        message: str,
        source: str = "",
        position: Optional[SourcePosition] = None,
        rule: str = "",
        **kwargs,
    ) -> None:
        super().__init__(message, source=source, position=position, **kwargs)
        self.rule = rule


class ExpressionEvaluationError(ExpressionError):
    """A parsed expression failed while its sets or predicates were run."""
