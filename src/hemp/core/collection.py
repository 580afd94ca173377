"""Presenting ordered collections of records, with pagination passthrough."""

from __future__ import annotations

import json
import math
from dataclasses import dataclass, field, replace
from typing import (
    Any,
    Callable,
    Dict,
    Generic,
    Iterable,
    Iterator,
    List,
    Optional,
    Sequence,
    TypeVar,
    Union,
    overload,
)

from pydantic import BaseModel

from hemp.core.factory import PresenterSpec, present
from hemp.core.types.records import FieldedRecord, json_default, record_fields

T = TypeVar("T")
R = TypeVar("R")


def _serialize(item: Any) -> Any:
    if isinstance(item, (BaseModel, FieldedRecord)):
        return record_fields(item)
    return item


class Collection(Sequence[T]):
    """Ordered collection of records or presented values.

    Indexing and iteration are read-only; only :meth:`present_transformed`
    replaces the items in place.
    """

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: List[T] = list(items)

    def __len__(self) -> int:
        return len(self._items)

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> "Collection[T]": ...

    def __getitem__(self, index: Union[int, slice]) -> Union[T, "Collection[T]"]:
        if isinstance(index, slice):
            return Collection(self._items[index])
        return self._items[index]

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Collection):
            return self._items == other._items
        if isinstance(other, list):
            return self._items == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Collection({self._items!r})"

    def map(self, fn: Callable[[T], R]) -> "Collection[R]":
        return Collection(fn(item) for item in self._items)

    def present(self, presenter: Optional[PresenterSpec] = None) -> "Collection[Any]":
        """Return a new collection with every item presented by ``presenter``."""
        return self.map(lambda item: present(item, presenter))

    def present_transformed(self, presenter: Optional[PresenterSpec] = None) -> "Collection[Any]":
        """Present every item in place and return this collection."""
        self._items = [present(item, presenter) for item in self._items]
        return self

    def first(self, default: Any = None) -> Any:
        return self._items[0] if self._items else default

    def to_list(self) -> List[Any]:
        """Items as plain values; records and presenters become dicts."""
        return [_serialize(item) for item in self._items]

    def to_json(self) -> str:
        return json.dumps(self.to_list(), default=json_default)

    def __str__(self) -> str:
        return self.to_json()


def present_all(
    records: Iterable[Any], presenter: Optional[PresenterSpec] = None
) -> Collection[Any]:
    """
    Present each record in order.

    Args:
        records: Records, or already-presented values to re-present
        presenter: Presenter class or inline callable; defaults to each
            record's ``default_presenter``

    Returns:
        A :class:`Collection` with one presented value per record
    """
    return Collection(records).present(presenter)


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of a larger result set.

    Presenting a page presents its items and keeps the pagination metadata.
    """

    items: Collection[T] = field(default_factory=Collection)
    total: int = 0
    per_page: int = 15
    current_page: int = 1

    def __post_init__(self) -> None:
        if not isinstance(self.items, Collection):
            object.__setattr__(self, "items", Collection(self.items))
        if self.per_page < 1:
            raise ValueError(f"per_page must be at least 1, got {self.per_page}")
        if self.current_page < 1:
            raise ValueError(f"current_page must be at least 1, got {self.current_page}")
        if self.total < 0:
            raise ValueError(f"total must not be negative, got {self.total}")

    @property
    def last_page(self) -> int:
        return max(1, math.ceil(self.total / self.per_page))

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def present(self, presenter: Optional[PresenterSpec] = None) -> "Page[Any]":
        return replace(self, items=self.items.present(presenter))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "current_page": self.current_page,
            "data": self.items.to_list(),
            "per_page": self.per_page,
            "total": self.total,
            "last_page": self.last_page,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), default=json_default)


def paginate(records: Sequence[T], per_page: int = 15, page: int = 1) -> Page[T]:
    """
    Slice an in-memory sequence into a :class:`Page`.

    Pages past the end are empty but keep the real ``total``.

    Raises:
        ValueError: If ``per_page`` or ``page`` is below 1
    """
    if per_page < 1:
        raise ValueError(f"per_page must be at least 1, got {per_page}")
    if page < 1:
        raise ValueError(f"page must be at least 1, got {page}")

    start = (page - 1) * per_page
    return Page(
        items=Collection(records[start:start + per_page]),
        total=len(records),
        per_page=per_page,
        current_page=page,
    )


__all__ = ["Collection", "Page", "paginate", "present_all"]
