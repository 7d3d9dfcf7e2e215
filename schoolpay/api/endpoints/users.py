"""User API: registration, profile lookup and chat contacts."""

from typing import Annotated

from fastapi import APIRouter, Depends

from schoolpay.api.dependencies import get_user_service
from schoolpay.application.services import UserService
from schoolpay.schemas.common import DocumentId
from schoolpay.schemas.user import (
    ContactResponse,
    UserCreateRequest,
    UserCreateResponse,
    UserResponse,
)

router = APIRouter()

UserServiceDep = Annotated[UserService, Depends(get_user_service)]


@router.post("/users", response_model=UserCreateResponse, status_code=201)
async def create_user(body: UserCreateRequest, user_svc: UserServiceDep):
    """Store a newly registered user under their auth uid (user_id)."""
    user_id = await user_svc.create_user(
        user_id=body.user_id,
        surname=body.surname,
        firstname=body.firstname,
        email=str(body.email),
        phone=body.phone,
    )
    return UserCreateResponse(
        id=user_id,
        surname=body.surname,
        firstname=body.firstname,
        email=str(body.email),
        phone=body.phone,
    )


@router.get("/user/{user_id}", response_model=UserResponse)
async def get_user(user_id: DocumentId, user_svc: UserServiceDep):
    """Return one user; 404 if the id was never registered."""
    return await user_svc.get_user(user_id)


@router.get("/contacts/{uid}", response_model=list[ContactResponse])
async def list_contacts(uid: str, user_svc: UserServiceDep):
    """Return every user other than uid."""
    return await user_svc.list_contacts(uid)
