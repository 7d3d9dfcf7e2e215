"""Organization API schemas."""

from pydantic import BaseModel, EmailStr

from schoolpay.schemas.common import DocumentId, NonEmptyStr


class OrganizationActivateRequest(BaseModel):
    """Body for POST /api/org.

    status is written to the owner's user record as org_status
    (boolean-as-string, e.g. "true"); it is not stored on the organization.
    """

    instituteName: NonEmptyStr
    instituteType: NonEmptyStr
    otherType: NonEmptyStr
    email: EmailStr
    phone: NonEmptyStr
    address: NonEmptyStr
    status: NonEmptyStr
    review_status: NonEmptyStr
    owner_id: DocumentId


class OrganizationResponse(BaseModel):
    id: str
    instituteName: str
    instituteType: str
    otherType: str
    email: str
    phone: str
    address: str
    owner_id: str
    review_status: str
