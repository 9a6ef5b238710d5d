"""Cursor and cursored-list models used for pagination.

A ``CursoredData`` pairs one page of entities with the cursor that unlocks the
next page. Feeding ``next.value`` back as the ``cursor`` argument of the same
resource and filter yields the following page; ``next is None`` ends
pagination.
"""

from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from ..core.enums import CursorType

T = TypeVar("T")


class Cursor(BaseModel):
    """Opaque pagination token.

    Only valid for the resource and filter that produced it.
    """

    value: str = Field(..., min_length=1)
    type: CursorType = CursorType.BOTTOM

    model_config = ConfigDict(frozen=True)


class CursoredData(BaseModel, Generic[T]):
    """One page of entities plus the cursor to the next page."""

    list: List[T] = Field(default_factory=list)
    next: Optional[Cursor] = None

    model_config = ConfigDict(frozen=True)

    @property
    def has_more(self) -> bool:
        return self.next is not None
