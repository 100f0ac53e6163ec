"""First-wins duplicate resolution over an ordered snapshot of records."""

from collections.abc import Callable, Hashable, Iterable
from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass
class DedupResult(Generic[T]):
    """Records kept and records to discard, each in original relative order."""

    survivors: list[T] = field(default_factory=list)
    removed: list[T] = field(default_factory=list)


def resolve_duplicates(records: Iterable[T], key: Callable[[T], Hashable]) -> DedupResult[T]:
    """
    Split ``records`` into survivors and duplicates.

    The first record seen for a key survives; every later record with the same
    key is marked removed. The input order is never changed, so callers must
    pass records in the order they want survivors chosen.
    """
    result: DedupResult[T] = DedupResult()
    seen: set[Hashable] = set()
    for record in records:
        k = key(record)
        if k in seen:
            result.removed.append(record)
        else:
            seen.add(k)
            result.survivors.append(record)
    return result


def author_key(author) -> tuple[str, str, str | None]:
    return (author.first_name, author.last_name, author.publisher)


def book_key(book) -> str:
    return book.isbn
