"""Pydantic schemas for the months feature."""

from pydantic import BaseModel


class MonthInfo(BaseModel):
    """A calendar month and its length in the current year."""

    name: str
    days: int

    def __str__(self) -> str:
        return f"{self.name} ({self.days} days)"


class MonthListResponse(BaseModel):
    """One page of months plus the size of the full collection."""

    items: list[MonthInfo]
    total: int


__all__ = ["MonthInfo", "MonthListResponse"]
