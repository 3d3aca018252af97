"""Errors raised while building an expense split."""
from decimal import Decimal
from typing import Optional


class SplitError(ValueError):
    """Base class for split problems the caller must fix before saving an expense."""


class InvalidSplit(SplitError):
    """Percentages, custom amounts or share values don't add up.

    `participant_id` names the offending participant when a single one is to
    blame; `discrepancy` is the signed difference from the expected total.
    """

    def __init__(
        self,
        message: str,
        participant_id: Optional[str] = None,
        discrepancy: Optional[Decimal] = None,
    ):
        super().__init__(message)
        self.participant_id = participant_id
        self.discrepancy = discrepancy


class EmptyParticipantSet(SplitError):
    def __init__(self, message: str = "At least one participant is required"):
        super().__init__(message)
