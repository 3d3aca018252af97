"""Pydantic schemas for calculation inputs and results."""
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from tripsplit.config import get_settings


def _default_currency() -> str:
    return get_settings().default_currency


# ----- Participant -----
class Participant(BaseModel):
    id: str
    name: str
    email: Optional[str] = None


# ----- Expense -----
EXPENSE_CATEGORIES = [
    "food",
    "transport",
    "accommodation",
    "entertainment",
    "shopping",
    "health",
    "other",
]


class SplitType(str, Enum):
    EQUAL = "equal"
    PERCENTAGE = "percentage"
    CUSTOM = "custom"


class SplitShare(BaseModel):
    participant_id: str
    amount: Decimal = Field(ge=0)
    percentage: Optional[Decimal] = None
    is_settled: bool = False


class Expense(BaseModel):
    id: str
    amount: Decimal = Field(ge=0)
    payer_id: str
    shares: list[SplitShare] = []
    currency: str = Field(default_factory=_default_currency)
    trip_id: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    split_type: SplitType = SplitType.EQUAL


# ----- Settlement -----
class Settlement(BaseModel):
    id: str
    from_id: str
    to_id: str
    amount: Decimal = Field(ge=0)
    currency: str = Field(default_factory=_default_currency)
    trip_id: Optional[str] = None
    notes: Optional[str] = None


# ----- Results -----
class Balance(BaseModel):
    """from_id owes to_id `amount`."""

    from_id: str
    to_id: str
    amount: Decimal = Field(gt=0)
    currency: str = Field(default_factory=_default_currency)


class ParticipantLedgerEntry(BaseModel):
    participant_id: str
    participant_name: str
    total_paid: Decimal
    total_owed: Decimal
    net_balance: Decimal


class SettlementSuggestion(BaseModel):
    from_id: str
    from_name: str
    to_id: str
    to_name: str
    amount: Decimal
    currency: str
    description: str


class CategoryTotal(BaseModel):
    category: str
    amount: Decimal
    count: int
    percentage: Decimal


class SplitValidation(BaseModel):
    is_valid: bool
    errors: list[str] = []


# ----- Requests -----
class SplitRequest(BaseModel):
    amount: Decimal
    split_type: SplitType = SplitType.EQUAL
    participant_ids: list[str]
    custom_values: Optional[dict[str, Decimal]] = None


class LedgerSnapshot(BaseModel):
    participants: list[Participant] = []
    expenses: list[Expense] = []
    settlements: list[Settlement] = []


class SettlementSummary(BaseModel):
    balances: list[Balance]
    simplified: list[Balance]
    suggestions: list[SettlementSuggestion]
    ledger: list[ParticipantLedgerEntry]
