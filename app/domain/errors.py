"""Typed errors raised by the catalog services."""


class CatalogError(Exception):
    """Base class for every error the catalog core reports to its callers."""


# ── ISBN validation ────────────────────────────────


class IsbnValidationError(CatalogError):
    def __init__(self, isbn: str, message: str) -> None:
        super().__init__(message)
        self.isbn = isbn


class InvalidLength(IsbnValidationError):
    def __init__(self, isbn: str) -> None:
        super().__init__(isbn, f"ISBN must be 10 or 13 characters long, got {len(isbn)}")


class InvalidCharacter(IsbnValidationError):
    def __init__(self, isbn: str, position: int) -> None:
        super().__init__(isbn, f"Invalid character {isbn[position]!r} at position {position}")
        self.position = position


class InvalidChecksum(IsbnValidationError):
    def __init__(self, isbn: str) -> None:
        super().__init__(isbn, f"Invalid ISBN checksum: {isbn}")


# ── Lookups and state conflicts ────────────────────


class DuplicateIsbn(CatalogError):
    def __init__(self, isbn: str) -> None:
        super().__init__(f"ISBN {isbn} is already taken")
        self.isbn = isbn


class NotFound(CatalogError):
    def __init__(self, entity: str, identifier: object) -> None:
        super().__init__(f"{entity.capitalize()} {identifier} does not exist")
        self.entity = entity
        self.identifier = identifier


class NoMatchingRecords(CatalogError):
    def __init__(self, criterion: str) -> None:
        super().__init__(f"No books found for {criterion}")
        self.criterion = criterion


class AlreadyMember(CatalogError):
    def __init__(self, collection: str, collection_id: int, book_id: int) -> None:
        super().__init__(f"Book {book_id} is already in {collection} {collection_id}")
        self.collection = collection
        self.collection_id = collection_id
        self.book_id = book_id


class NotMember(CatalogError):
    def __init__(self, collection: str, collection_id: int, book_id: int) -> None:
        super().__init__(f"Book {book_id} is not in {collection} {collection_id}")
        self.collection = collection
        self.collection_id = collection_id
        self.book_id = book_id


class InvalidDiscount(CatalogError):
    def __init__(self, percent: float) -> None:
        super().__init__(f"Discount of {percent}% cannot be applied")
        self.percent = percent


class InvalidScore(CatalogError):
    def __init__(self, score: int) -> None:
        super().__init__(f"Rating score must be between 1 and 5, got {score}")
        self.score = score


class UsernameTaken(CatalogError):
    def __init__(self, username: str) -> None:
        super().__init__(f"Username {username} is already taken")
        self.username = username


class DuplicateWishlistName(CatalogError):
    def __init__(self, name: str, user_id: int) -> None:
        super().__init__(f"Wishlist with name {name} already exists for user {user_id}")
        self.name = name
        self.user_id = user_id


class ConcurrentUpdate(CatalogError):
    def __init__(self, entity: str, identifier: object) -> None:
        super().__init__(f"{entity} {identifier} was modified concurrently; retry the request")
        self.entity = entity
        self.identifier = identifier
