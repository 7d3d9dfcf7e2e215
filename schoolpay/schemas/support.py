"""Support complaint API schemas."""

from pydantic import BaseModel, EmailStr

from schoolpay.schemas.common import NonEmptyStr


class ComplaintCreateRequest(BaseModel):
    name: NonEmptyStr
    email: EmailStr
    complaint: NonEmptyStr


class ComplaintResponse(BaseModel):
    message: str = "Complaint submitted successfully!"
