"""Chat message API schemas."""

from pydantic import BaseModel

from schoolpay.schemas.common import DocumentId, NonEmptyStr


class MessageCreateRequest(BaseModel):
    """Body for POST /api/message. id is chosen by the client and becomes the document id."""

    id: DocumentId
    to_user_id: NonEmptyStr
    from_user_id: NonEmptyStr
    text: NonEmptyStr
    timestamp: str | int | float | None = None
    status: NonEmptyStr = "sent"
    unread: bool = True


class MessageCreateResponse(BaseModel):
    message: str = "Message sent successfully!"
    id: str
