"""Fee API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from schoolpay.schemas.common import DocumentId, NonEmptyStr, PositiveAmount


class FeeCreateRequest(BaseModel):
    title: NonEmptyStr
    amount: PositiveAmount
    description: NonEmptyStr
    org_id: DocumentId


class FeeUpdateRequest(BaseModel):
    """Body for PUT /api/fees/{id}. Omitted fields keep their stored value."""

    title: NonEmptyStr | None = None
    amount: PositiveAmount | None = None
    description: NonEmptyStr | None = None


class FeeCreateResponse(BaseModel):
    id: str
    title: str
    amount: float
    description: str
    org_id: str


class FeeResponse(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str
    title: str | None = None
    amount: float | str | None = None
    description: str | None = None
    org_id: str | None = None
    createdAt: datetime | None = None
    updatedAt: datetime | None = None


class FeeIdResponse(BaseModel):
    id: str
