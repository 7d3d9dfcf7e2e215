"""Transaction API schemas (payment records reported by the client after checkout)."""

from pydantic import BaseModel, EmailStr

from schoolpay.schemas.common import NonEmptyStr, PositiveAmount


class TransactionCreateRequest(BaseModel):
    user_id: NonEmptyStr
    email: EmailStr
    amount: PositiveAmount
    name: NonEmptyStr
    status: NonEmptyStr
    reference: NonEmptyStr
    description: str | None = None
    to: NonEmptyStr
    org_id: NonEmptyStr


class TransactionResponse(BaseModel):
    id: str
    user_id: str
    email: str
    amount: float
    name: str
    status: str
    reference: str
    description: str | None = None
