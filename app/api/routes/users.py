"""User routes."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.schemas import (
    CreditCardCreateRequest,
    CreditCardResponse,
    UserCreateRequest,
    UserResponse,
    UserUpdateRequest,
)
from app.database import get_session
from app.services.users import UserService

router = APIRouter(prefix="/users", tags=["Users"])


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(data: UserCreateRequest, session: AsyncSession = Depends(get_session)):
    return await UserService(session).create_user(data)


@router.get("/{username}", response_model=UserResponse)
async def get_user(username: str, session: AsyncSession = Depends(get_session)):
    return await UserService(session).get_by_username(username)


@router.patch("/{username}", response_model=UserResponse)
async def update_user(
    username: str, data: UserUpdateRequest, session: AsyncSession = Depends(get_session)
):
    return await UserService(session).update_user(username, data)


@router.post(
    "/{username}/credit-cards",
    response_model=CreditCardResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_credit_card(
    username: str, data: CreditCardCreateRequest, session: AsyncSession = Depends(get_session)
) -> CreditCardResponse:
    card = await UserService(session).add_credit_card(username, data)
    return CreditCardResponse(
        id=card.id,
        user_id=card.user_id,
        last_four=card.card_number[-4:],
        expiration_date=card.expiration_date,
    )


@router.delete("/id/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(user_id: int, session: AsyncSession = Depends(get_session)) -> None:
    await UserService(session).delete_user(user_id)
