"""Message API: store a chat message."""

from typing import Annotated

from fastapi import APIRouter, Depends

from schoolpay.api.dependencies import get_message_service
from schoolpay.application.services import MessageService
from schoolpay.schemas.message import MessageCreateRequest, MessageCreateResponse

router = APIRouter()


@router.post("", response_model=MessageCreateResponse, status_code=201)
async def send_message(
    body: MessageCreateRequest,
    message_svc: Annotated[MessageService, Depends(get_message_service)],
):
    message_id = await message_svc.send(
        body.id,
        to_user_id=body.to_user_id,
        from_user_id=body.from_user_id,
        text=body.text,
        timestamp=body.timestamp,
        status=body.status,
        unread=body.unread,
    )
    return MessageCreateResponse(id=message_id)
