"""Pydantic request/response schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

# ── Authors ────────────────────────────────────────


class AuthorCreateRequest(BaseModel):
    first_name: str = Field(min_length=1, max_length=150)
    last_name: str = Field(min_length=1, max_length=150)
    biography: str | None = None
    publisher: str | None = Field(default=None, max_length=300)


class AuthorResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    first_name: str
    last_name: str
    biography: str | None
    publisher: str | None


# ── Books ──────────────────────────────────────────


class BookCreateRequest(BaseModel):
    isbn: str
    title: str = Field(min_length=1, max_length=500)
    description: str | None = None
    price: int = Field(default=0, ge=0)
    author_id: int | None = None
    genre: str | None = None
    publisher: str | None = None
    year_published: int | None = None
    copies_sold: int = Field(default=0, ge=0)


class BookUpdateRequest(BaseModel):
    isbn: str | None = None
    title: str | None = Field(default=None, min_length=1, max_length=500)
    description: str | None = None
    price: int | None = Field(default=None, ge=0)
    author_id: int | None = None
    genre: str | None = None
    publisher: str | None = None
    year_published: int | None = None
    copies_sold: int | None = Field(default=None, ge=0)


class BookResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    isbn: str
    title: str
    description: str | None
    price: int
    author_id: int | None
    genre: str | None
    publisher: str | None
    year_published: int | None
    copies_sold: int
    rating: float


class RatingOverrideRequest(BaseModel):
    rating: float = Field(ge=0, le=5)


class DiscountRequest(BaseModel):
    publisher: str
    percent: float = Field(ge=-100, le=1000, allow_inf_nan=False)


class DiscountResponse(BaseModel):
    publisher: str
    percent: float
    updated: int


class AverageRatingResponse(BaseModel):
    book_id: int
    average_rating: float


class DedupResponse(BaseModel):
    kept: int
    removed: list[int]


# ── Ratings & Comments ─────────────────────────────


class RatingCreateRequest(BaseModel):
    user_id: int
    book_id: int
    score: int = Field(ge=1, le=5)


class RatingResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int | None
    book_id: int
    score: int
    created_at: datetime
    book_rating: float


class CommentCreateRequest(BaseModel):
    user_id: int
    book_id: int
    text: str = Field(min_length=1, max_length=5000)


class CommentResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int | None
    book_id: int
    text: str
    created_at: datetime


# ── Users ──────────────────────────────────────────


class UserCreateRequest(BaseModel):
    username: str = Field(min_length=3, max_length=100)
    password: str = Field(min_length=8, max_length=72)
    name: str | None = None
    email: str | None = None
    home_address: str | None = None


class UserUpdateRequest(BaseModel):
    new_username: str | None = Field(default=None, min_length=3, max_length=100)
    new_password: str | None = Field(default=None, min_length=8, max_length=72)
    new_name: str | None = None
    new_home_address: str | None = None


class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    name: str | None
    email: str | None
    home_address: str | None


class CreditCardCreateRequest(BaseModel):
    card_number: str = Field(pattern=r"^\d{12,19}$")
    expiration_date: str = Field(pattern=r"^(0[1-9]|1[0-2])/\d{2,4}$")
    cvv: str = Field(pattern=r"^\d{3,4}$")


class CreditCardResponse(BaseModel):
    id: int
    user_id: int
    last_four: str
    expiration_date: str


# ── Cart & Wishlists ───────────────────────────────


class CartSubtotalResponse(BaseModel):
    user_id: int
    subtotal: int


class WishlistCreateRequest(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    user_id: int


class WishlistResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    user_id: int | None
