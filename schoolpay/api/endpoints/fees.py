"""Fee API: create, list by organization, update and delete."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from schoolpay.api.dependencies import get_fee_service
from schoolpay.application.services import FeeService
from schoolpay.schemas.common import DocumentId
from schoolpay.schemas.fee import (
    FeeCreateRequest,
    FeeCreateResponse,
    FeeIdResponse,
    FeeResponse,
    FeeUpdateRequest,
)

router = APIRouter()

FeeServiceDep = Annotated[FeeService, Depends(get_fee_service)]


@router.post("", response_model=FeeCreateResponse, status_code=201)
async def create_fee(body: FeeCreateRequest, fee_svc: FeeServiceDep):
    fee_id = await fee_svc.create_fee(
        title=body.title,
        amount=body.amount,
        description=body.description,
        org_id=body.org_id,
    )
    return FeeCreateResponse(id=fee_id, **body.model_dump())


@router.get("", response_model=list[FeeResponse])
async def list_fees(
    fee_svc: FeeServiceDep,
    org_id: Annotated[str, Query(min_length=1, description="Organization ID")],
):
    """Fees belonging to org_id, in no particular order."""
    return await fee_svc.list_fees(org_id)


@router.put("/{fee_id}", response_model=FeeIdResponse, status_code=201)
async def update_fee(fee_id: DocumentId, body: FeeUpdateRequest, fee_svc: FeeServiceDep):
    """Update the supplied fields; 404 if the fee does not exist."""
    await fee_svc.update_fee(fee_id, body.model_dump(exclude_none=True))
    return FeeIdResponse(id=fee_id)


@router.delete("/{fee_id}", response_model=FeeIdResponse, status_code=201)
async def delete_fee(fee_id: DocumentId, fee_svc: FeeServiceDep):
    """Delete the fee; deleting an absent fee still succeeds."""
    await fee_svc.delete_fee(fee_id)
    return FeeIdResponse(id=fee_id)
