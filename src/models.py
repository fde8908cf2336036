"""
Data models for the transaction parser.
"""

from dataclasses import dataclass
from typing import Optional

from .constants import ExpenseType


@dataclass(frozen=True)
class Category:
    """Catalog category."""
    id: str
    name: str
    icon: str
    default_expense_type: ExpenseType = ExpenseType.REQUIRED

    @classmethod
    def from_row(cls, row: tuple) -> "Category":
        """Create from a catalog row (id, name, icon, default type)."""
        id_, name, icon, default_type = row
        return cls(id=id_, name=name, icon=icon, default_expense_type=ExpenseType(default_type))

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "icon": self.icon,
            "default_expense_type": self.default_expense_type.name,
        }


@dataclass(frozen=True)
class AmountMatch:
    """Result of amount extraction."""
    amount: int = 0
    matched: bool = False


@dataclass(frozen=True)
class CategoryMatch:
    """Result of category matching."""
    category: Optional[Category] = None
    score: int = 0


@dataclass(frozen=True)
class ParsedTransaction:
    """Structured transaction recovered from free text."""
    amount: int
    category: Optional[Category]
    description: str
    expense_type: ExpenseType
    confidence: int

    def to_dict(self) -> dict:
        """JSON-friendly representation."""
        return {
            "amount": self.amount,
            "category": self.category.to_dict() if self.category else None,
            "description": self.description,
            "expense_type": self.expense_type.name,
            "expense_type_label": self.expense_type.value,
            "confidence": self.confidence,
        }
