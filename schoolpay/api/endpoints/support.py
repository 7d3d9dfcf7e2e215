"""Support API: submit a complaint."""

from typing import Annotated

from fastapi import APIRouter, Depends

from schoolpay.api.dependencies import get_support_service
from schoolpay.application.services import SupportService
from schoolpay.schemas.support import ComplaintCreateRequest, ComplaintResponse

router = APIRouter()


@router.post("", response_model=ComplaintResponse, status_code=200)
async def submit_complaint(
    body: ComplaintCreateRequest,
    support_svc: Annotated[SupportService, Depends(get_support_service)],
):
    await support_svc.submit_complaint(
        name=body.name, email=str(body.email), complaint=body.complaint
    )
    return ComplaintResponse()
