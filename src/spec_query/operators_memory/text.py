"""String operators: like, not_like, ilike, contains, startswith, regex, ..."""

from __future__ import annotations

import re
from abc import abstractmethod
from typing import Any

from ..operators import SpecificationOperator
from ..strategy import MemoryOperator


def like_to_regex(pattern: str) -> str:
    """Translate a SQL LIKE pattern (``%``, ``_``) into an anchored regex."""
    parts = []
    for char in pattern:
        if char == "%":
            parts.append(".*")
        elif char == "_":
            parts.append(".")
        else:
            parts.append(re.escape(char))
    return "^" + "".join(parts) + "$"


class _TextOperator(MemoryOperator):
    """String operators never match a missing value."""

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        if field_value is None:
            return False
        return self._match(str(field_value), str(condition_value))

    @abstractmethod
    def _match(self, text: str, operand: str) -> bool: ...


class LikeOperator(_TextOperator):
    @property
    def name(self) -> SpecificationOperator:
        return SpecificationOperator.LIKE

    def _match(self, text: str, operand: str) -> bool:
        return re.match(like_to_regex(operand), text, re.DOTALL) is not None


class NotLikeOperator(_TextOperator):
    @property
    def name(self) -> SpecificationOperator:
        return SpecificationOperator.NOT_LIKE

    def _match(self, text: str, operand: str) -> bool:
        return re.match(like_to_regex(operand), text, re.DOTALL) is None


class ILikeOperator(_TextOperator):
    @property
    def name(self) -> SpecificationOperator:
        return SpecificationOperator.ILIKE

    def _match(self, text: str, operand: str) -> bool:
        flags = re.DOTALL | re.IGNORECASE
        return re.match(like_to_regex(operand), text, flags) is not None


class ContainsOperator(_TextOperator):
    @property
    def name(self) -> SpecificationOperator:
        return SpecificationOperator.CONTAINS

    def _match(self, text: str, operand: str) -> bool:
        return operand in text


class IContainsOperator(_TextOperator):
    @property
    def name(self) -> SpecificationOperator:
        return SpecificationOperator.ICONTAINS

    def _match(self, text: str, operand: str) -> bool:
        return operand.lower() in text.lower()


class StartsWithOperator(_TextOperator):
    @property
    def name(self) -> SpecificationOperator:
        return SpecificationOperator.STARTSWITH

    def _match(self, text: str, operand: str) -> bool:
        return text.startswith(operand)


class IStartsWithOperator(_TextOperator):
    @property
    def name(self) -> SpecificationOperator:
        return SpecificationOperator.ISTARTSWITH

    def _match(self, text: str, operand: str) -> bool:
        return text.lower().startswith(operand.lower())


class EndsWithOperator(_TextOperator):
    @property
    def name(self) -> SpecificationOperator:
        return SpecificationOperator.ENDSWITH

    def _match(self, text: str, operand: str) -> bool:
        return text.endswith(operand)


class IEndsWithOperator(_TextOperator):
    @property
    def name(self) -> SpecificationOperator:
        return SpecificationOperator.IENDSWITH

    def _match(self, text: str, operand: str) -> bool:
        return text.lower().endswith(operand.lower())


class RegexOperator(_TextOperator):
    @property
    def name(self) -> SpecificationOperator:
        return SpecificationOperator.REGEX

    def _match(self, text: str, operand: str) -> bool:
        return re.search(operand, text) is not None


class IRegexOperator(_TextOperator):
    @property
    def name(self) -> SpecificationOperator:
        return SpecificationOperator.IREGEX

    def _match(self, text: str, operand: str) -> bool:
        return re.search(operand, text, re.IGNORECASE) is not None
