"""Shared input records consumed by the analytics engines.

Records are immutable snapshots handed over by the caller (usually read from
the dashboard's local database). Engines only read them; nothing here is ever
mutated or persisted.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any


class TransactionType(str, Enum):
    DEBIT = "debit"
    CREDIT = "credit"


@dataclass(frozen=True)
class Holding:
    """A single investment position."""

    id: str
    name: str
    invested_amount: float
    current_value: float
    asset_type: str = "Stocks"
    asset_class: str = "Equity"
    is_long_term: bool = False

    @property
    def unrealized_pnl(self) -> float:
        return max(0.0, as_number(self.current_value)) - as_number(self.invested_amount)


@dataclass(frozen=True)
class Transaction:
    """A bank or card transaction; direction lives in ``type``."""

    id: str
    date: date
    amount: float
    category: str
    merchant: str | None = None
    description: str = ""
    type: TransactionType = TransactionType.DEBIT
    excluded: bool = False

    @property
    def is_debit(self) -> bool:
        raw = self.type.value if isinstance(self.type, TransactionType) else str(self.type)
        return raw.lower() == TransactionType.DEBIT.value


@dataclass(frozen=True)
class TradeOutcome:
    date: date
    pnl: float


def as_number(value: Any) -> float:
    """Coerce a caller-supplied numeric field, treating missing values as zero."""

    if value is None:
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(number):
        return 0.0
    return number


__all__ = [
    "Holding",
    "TradeOutcome",
    "Transaction",
    "TransactionType",
    "as_number",
]
