from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Any, Literal, Mapping, Optional, Protocol, Sequence, TypeVar, TypedDict, Union

T = TypeVar("T")

Genre = Literal["fiction", "non-fiction"]
Shape = Literal["circle", "square"]
Status = Literal["active", "inactive", "new"]


@dataclass
class User:
    id: int
    name: str
    email: Optional[str] = None
    is_active: bool = True


class _BookBase(TypedDict):
    title: str
    author: str
    genre: Genre


class Book(_BookBase, total=False):
    year: int


class HasId(Protocol):
    id: int


def create_user(id: int, name: str, email: Optional[str] = None, is_active: bool = True) -> User:
    return User(id=id, name=name, email=email, is_active=is_active)


def create_book(book: Book) -> Book:
    return book


def calculate_area(shape: Shape, param: float) -> float:
    """Circle area for a radius, square area for a side length."""
    if shape == "circle":
        return math.pi * param * param
    return param * param


_STATUS_COLORS = {
    "active": "green",
    "inactive": "gray",
    "new": "blue",
}


def get_status_color(status: Status) -> str:
    try:
        return _STATUS_COLORS[status]
    except KeyError:
        raise ValueError(f"Unknown status {status!r}") from None


def capitalize_first_letter(s: str, uppercase: bool = False) -> str:
    result = s[:1].upper() + s[1:]
    return result.upper() if uppercase else result


def trim_and_format(s: str, uppercase: bool = False) -> str:
    result = s.strip()
    return result.upper() if uppercase else result


def get_first_element(seq: Sequence[T]) -> Optional[T]:
    return seq[0] if len(seq) > 0 else None


def _id_of(item: Union[HasId, Mapping[str, Any]]) -> Any:
    if isinstance(item, Mapping):
        return item.get("id")
    return getattr(item, "id", None)


def find_by_id(items: Sequence[T], id: int) -> Optional[T]:
    """Linear scan; works for objects with an `id` attribute and for dicts with an "id" key."""
    for item in items:
        if _id_of(item) == id:
            return item
    return None
