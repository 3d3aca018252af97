"""Splits: divide one expense among participants, or check a proposed split."""
from fastapi import APIRouter, HTTPException

from tripsplit.exceptions import SplitError
from tripsplit.schemas import SplitRequest, SplitShare, SplitValidation
from tripsplit.services.split_calculator import calculate_split, validate_split

router = APIRouter(prefix="/splits", tags=["splits"])


@router.post("/calculate", response_model=list[SplitShare])
def calculate(data: SplitRequest):
    try:
        return calculate_split(data.amount, data.split_type, data.participant_ids, data.custom_values)
    except SplitError as exc:
        raise HTTPException(status_code=400, detail=str(exc))


@router.post("/validate", response_model=SplitValidation)
def validate(data: SplitRequest):
    return validate_split(data.amount, data.split_type, data.participant_ids, data.custom_values)
