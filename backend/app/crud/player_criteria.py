# backend/app/crud/player_criteria.py
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable

from sqlalchemy import and_, true
from sqlalchemy.sql.elements import ColumnElement

from .. import models


class Operator(str, Enum):
    CONTAINS = "contains"
    EQUALS = "eq"
    GREATER_OR_EQUAL = "ge"
    LESS_OR_EQUAL = "le"
    BETWEEN = "between"


@dataclass(frozen=True)
class Criterion:
    """
    One predicate on a player attribute. Renders as SQL with `to_clause`, or
    is evaluated against an in-memory object with `matches`.
    """
    field: str
    operator: Operator
    operand: Any  # (low, high) tuple for BETWEEN

    def to_clause(self) -> ColumnElement:
        column = getattr(models.Player, self.field)
        if self.operator is Operator.CONTAINS:
            return column.contains(self.operand, autoescape=True)
        if self.operator is Operator.EQUALS:
            return column == self.operand
        if self.operator is Operator.GREATER_OR_EQUAL:
            return column >= self.operand
        if self.operator is Operator.LESS_OR_EQUAL:
            return column <= self.operand
        low, high = self.operand
        return column.between(low, high)

    def matches(self, player: Any) -> bool:
        value = getattr(player, self.field)
        if self.operator is Operator.CONTAINS:
            return self.operand in value
        if self.operator is Operator.EQUALS:
            return value == self.operand
        if self.operator is Operator.GREATER_OR_EQUAL:
            return value >= self.operand
        if self.operator is Operator.LESS_OR_EQUAL:
            return value <= self.operand
        low, high = self.operand
        return low <= value <= high


def to_where_clause(criteria: Iterable[Criterion]) -> ColumnElement:
    """ANDs the criteria together; no criteria matches every player."""
    clauses = [criterion.to_clause() for criterion in criteria]
    if not clauses:
        return true()
    return and_(*clauses)
