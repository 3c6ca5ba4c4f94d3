"""
Row categories and classification rule types.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Category(str, Enum):
    TOPUP = "topup"
    PRINTING = "printing"
    ADMIN = "admin"
    EXPENSE = "expense"
    OTHER = "other"


@dataclass(frozen=True)
class ClassificationRule:
    """Match when any type keyword is in the row type OR any service keyword is in the service.

    Keywords are compared against lower-cased fields.
    """
    category: Category
    type_keywords: tuple[str, ...] = ()
    service_keywords: tuple[str, ...] = ()

    def matches(self, type_lower: str, service_lower: str) -> bool:
        if any(k in type_lower for k in self.type_keywords):
            return True
        return any(k in service_lower for k in self.service_keywords)
