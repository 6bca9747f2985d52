"""
Specification exception hierarchy.

All exceptions inherit from ``SpecificationError`` and provide
``to_dict()`` for API-friendly error responses.
"""

from __future__ import annotations

from difflib import get_close_matches
from typing import Any


class SpecificationError(Exception):
    """Base exception for all specification errors."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class InvalidMemberAccessError(SpecificationError):
    """
    A navigation selector is not a pure member-access chain.

    Raised while a specification is being constructed, e.g. for
    ``lambda p: p`` or ``lambda p: p.address.city.upper()``.
    """

    default_message = (
        "Expected member access like `lambda x: x.prop` "
        "or `lambda x: x.prop.sub_prop`"
    )

    def __init__(self, expression: Any = None, message: str | None = None) -> None:
        self.expression = expression
        text = message or self.default_message
        if expression is not None:
            text = f"{text}, got {expression!r}"
        super().__init__(text)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "INVALID_MEMBER_ACCESS",
            "message": str(self),
            "expression": repr(self.expression),
        }


class OperatorNotFoundError(SpecificationError):
    """
    Unknown operator specified.

    Provides fuzzy-matched suggestions for likely intended operators.
    """

    def __init__(self, operator: str, valid_operators: list[str]) -> None:
        self.operator = operator
        self.valid_operators = valid_operators
        self.suggestions = get_close_matches(operator, valid_operators, n=3, cutoff=0.6)

        message = f"Unknown operator: '{operator}'."
        if self.suggestions:
            message += f" Did you mean: {', '.join(self.suggestions)}?"
        message += f" Valid operators: {', '.join(sorted(valid_operators)[:10])}..."
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "OPERATOR_NOT_FOUND",
            "operator": self.operator,
            "suggestions": self.suggestions,
            "valid_operators": sorted(self.valid_operators),
        }
