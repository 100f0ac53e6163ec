"""ISBN-10 / ISBN-13 validation."""

from enum import Enum

from app.domain.errors import InvalidCharacter, InvalidChecksum, InvalidLength

DIGITS = "0123456789"


class IsbnKind(str, Enum):
    ISBN10 = "isbn10"
    ISBN13 = "isbn13"


def validate_isbn(isbn: str) -> IsbnKind:
    """
    Validate an ISBN and report which flavour it is.

    Only ASCII digits are accepted; an ISBN-10 may end in an uppercase ``X``
    (worth 10). Raises ``InvalidLength``, ``InvalidCharacter`` or
    ``InvalidChecksum``.
    """
    if len(isbn) == 10:
        _check_isbn10(isbn)
        return IsbnKind.ISBN10
    if len(isbn) == 13:
        _check_isbn13(isbn)
        return IsbnKind.ISBN13
    raise InvalidLength(isbn)


def _check_isbn10(isbn: str) -> None:
    total = 0
    for i in range(9):
        if isbn[i] not in DIGITS:
            raise InvalidCharacter(isbn, i)
        total += int(isbn[i]) * (10 - i)

    last = isbn[9]
    if last == "X":
        total += 10
    elif last in DIGITS:
        total += int(last)
    else:
        raise InvalidCharacter(isbn, 9)

    if total % 11 != 0:
        raise InvalidChecksum(isbn)


def _check_isbn13(isbn: str) -> None:
    for i, ch in enumerate(isbn):
        if ch not in DIGITS:
            raise InvalidCharacter(isbn, i)

    total = sum(int(isbn[i]) * (1 if i % 2 == 0 else 3) for i in range(12))
    checksum = (10 - total % 10) % 10
    if checksum != int(isbn[12]):
        raise InvalidChecksum(isbn)
