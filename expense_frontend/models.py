# expense_frontend/models.py
# lightweight client-side records parsed from the API payloads

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

EXPENSE = "expense"
REVENUE = "revenue"
TRANSACTION_TYPES = (EXPENSE, REVENUE)


class FormatError(ValueError):
    """Raised when an API payload does not have the expected shape"""


def _identifier(data):
    return data.get("_id") or data.get("id")


def _number(value, field):
    """JSON numbers, or strings holding one; booleans are rejected"""
    if isinstance(value, bool):
        raise FormatError(f"Invalid {field}: {value!r}")
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            raise FormatError(f"Invalid {field}: {value!r}")
    if not isinstance(value, (int, float)):
        raise FormatError(f"Invalid {field}: {value!r}")
    return float(value)


def parse_api_date(value):
    """Parse an ISO date or datetime sent by the API (a trailing Z is allowed)"""
    if not value:
        return None
    text = str(value).strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


@dataclass
class Category:
    id: str
    name: str
    budget: float

    @classmethod
    def from_api(cls, data):
        if not isinstance(data, dict):
            raise FormatError("Invalid category data format")
        return cls(
            id=_identifier(data),
            name=data.get("name", ""),
            budget=_number(data.get("budget", 0), "budget"),
        )


@dataclass
class Transaction:
    id: str
    amount: float
    type: str
    category: Optional[str]
    description: str
    date: str
    month: Optional[int] = None
    year: Optional[int] = None

    @classmethod
    def from_api(cls, data):
        if not isinstance(data, dict):
            raise FormatError("Invalid transaction data format")
        tx_type = data.get("type")
        if tx_type not in TRANSACTION_TYPES:
            raise FormatError(f"Invalid transaction type: {tx_type!r}")

        month = data.get("month")
        year = data.get("year")
        parsed = parse_api_date(data.get("date"))
        if parsed is not None:
            month = month or parsed.month
            year = year or parsed.year

        return cls(
            id=_identifier(data),
            amount=_number(data.get("amount"), "amount"),
            type=tx_type,
            category=data.get("category") or None,
            description=data.get("description") or "",
            date=data.get("date") or "",
            month=month,
            year=year,
        )


@dataclass
class UserProjection:
    id: str
    balance: float

    @classmethod
    def from_api(cls, data):
        if not isinstance(data, dict):
            raise FormatError("Invalid user data format")
        balance = data.get("balance")
        if isinstance(balance, bool) or not isinstance(balance, (int, float)):
            raise FormatError("Invalid user data format")
        return cls(id=_identifier(data), balance=float(balance))


@dataclass
class LoginResult:
    token: str
    user_id: str
