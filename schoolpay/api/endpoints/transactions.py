"""Transaction API: record a payment made by a user."""

from typing import Annotated

from fastapi import APIRouter, Depends

from schoolpay.api.dependencies import get_transaction_service
from schoolpay.application.services import TransactionService
from schoolpay.schemas.transaction import TransactionCreateRequest, TransactionResponse

router = APIRouter()


@router.post("", response_model=TransactionResponse, status_code=201)
async def record_transaction(
    body: TransactionCreateRequest,
    tx_svc: Annotated[TransactionService, Depends(get_transaction_service)],
):
    data = body.model_dump(mode="json")
    tx_id = await tx_svc.record(data)
    return TransactionResponse(id=tx_id, **data)
