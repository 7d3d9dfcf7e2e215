"""Organization API: activate an organization for its owner."""

from typing import Annotated

from fastapi import APIRouter, Depends

from schoolpay.api.dependencies import get_organization_service
from schoolpay.application.services import OrganizationService
from schoolpay.schemas.organization import (
    OrganizationActivateRequest,
    OrganizationResponse,
)

router = APIRouter()


@router.post("", response_model=OrganizationResponse, status_code=201)
async def activate_organization(
    body: OrganizationActivateRequest,
    org_svc: Annotated[OrganizationService, Depends(get_organization_service)],
):
    """Create the organization and set org_status/org_id on the owner.

    404 when owner_id is not a registered user; nothing is left behind in that case.
    """
    details = body.model_dump(mode="json", exclude={"owner_id", "status"})
    org_id = await org_svc.activate(body.owner_id, body.status, details)
    return OrganizationResponse(id=org_id, owner_id=body.owner_id, **details)
