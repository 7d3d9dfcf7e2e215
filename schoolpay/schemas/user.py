"""User API schemas."""

from pydantic import BaseModel, ConfigDict, EmailStr

from schoolpay.schemas.common import DocumentId, NonEmptyStr


class UserCreateRequest(BaseModel):
    """Body for POST /api/users. user_id is the Firebase Auth uid and becomes the document id."""

    surname: NonEmptyStr
    firstname: NonEmptyStr
    email: EmailStr
    phone: NonEmptyStr
    user_id: DocumentId


class UserCreateResponse(BaseModel):
    id: str
    surname: str
    firstname: str
    email: str
    phone: str


class UserResponse(BaseModel):
    """Stored user record. Unknown stored fields are passed through."""

    model_config = ConfigDict(extra="allow")

    id: str
    uid: str | None = None
    email: str | None = None
    surname: str | None = None
    firstname: str | None = None
    phone: str | None = None
    org_status: str | bool | None = None
    org_id: str | None = None


class ContactResponse(BaseModel):
    """Another user as shown in the chat contact list."""

    id: str
    name: str
    email: str | None = None
    phone: str | None = None
    avatar: str | None = None
