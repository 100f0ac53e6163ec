"""User lifecycle and payment cards."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.adapters.repository.sqlalchemy import SqlAlchemyRepository
from app.api.schemas import CreditCardCreateRequest, UserCreateRequest, UserUpdateRequest
from app.domain.errors import NotFound, UsernameTaken
from app.domain.models import CreditCard, User
from app.security import hash_password

logger = logging.getLogger(__name__)


class UserService:
    """Handles user registration, profile updates and card storage."""

    def __init__(self, session: AsyncSession) -> None:
        self._users = SqlAlchemyRepository(session, User, "user")
        self._cards = SqlAlchemyRepository(session, CreditCard, "credit card")

    async def create_user(self, data: UserCreateRequest) -> User:
        """Register a new user. Raises ``UsernameTaken`` if the name exists."""
        await self._ensure_username_free(data.username)
        user = User(
            username=data.username,
            hashed_password=hash_password(data.password),
            name=data.name,
            email=data.email,
            home_address=data.home_address,
        )
        try:
            await self._users.save(user)
        except IntegrityError as exc:
            raise UsernameTaken(data.username) from exc
        logger.info("Created user %d (%s)", user.id, user.username)
        return user

    async def get_by_username(self, username: str) -> User:
        user = await self._users.find_one_by(username=username)
        if user is None:
            raise NotFound("user", username)
        return user

    async def update_user(self, username: str, data: UserUpdateRequest) -> User:
        """Apply the non-empty fields of ``data`` to the user."""
        user = await self.get_by_username(username)

        if data.new_username and data.new_username != user.username:
            await self._ensure_username_free(data.new_username)
            user.username = data.new_username
        if data.new_password:
            user.hashed_password = hash_password(data.new_password)
        if data.new_name:
            user.name = data.new_name
        if data.new_home_address:
            user.home_address = data.new_home_address

        await self._users.save(user)
        return user

    async def add_credit_card(self, username: str, data: CreditCardCreateRequest) -> CreditCard:
        """Attach a card to a user. The verification code is checked, never stored."""
        user = await self.get_by_username(username)
        card = CreditCard(
            user_id=user.id,
            card_number=data.card_number,
            expiration_date=data.expiration_date,
        )
        await self._cards.save(card)
        logger.info("Added card ending %s for user %d", card.card_number[-4:], user.id)
        return card

    async def delete_user(self, user_id: int) -> None:
        """Delete a user; their cart and cards go too, wishlists are kept."""
        await self._users.delete_by_id(user_id)
        logger.info("Deleted user %d", user_id)

    async def _ensure_username_free(self, username: str) -> None:
        if await self._users.find_one_by(username=username) is not None:
            raise UsernameTaken(username)
