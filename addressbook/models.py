from __future__ import annotations

from typing import Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field

from .rules import FIELD_NAMES, FIELD_SEPARATOR


class Contact(BaseModel):
    """Immutable address book entry. Equality and hashing cover all four fields."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Display name")
    email: str = Field(..., min_length=1, description="Loosely validated email address")
    phone: str = Field(..., min_length=1, description="Phone number, stored as written")
    city: str = Field(..., min_length=1, description="City, compared exactly")

    def to_line(self) -> str:
        return FIELD_SEPARATOR.join(getattr(self, field) for field in FIELD_NAMES)

    def __str__(self) -> str:
        return f"{self.name} ({self.email}, {self.phone}, {self.city})"


class SkippedRow(BaseModel):
    row: Optional[int] = None
    column: Optional[str] = None
    issue: str
    value: Optional[str] = None
    action: str


class LoadSummary(BaseModel):
    contacts: int = 0
    skipped: int = 0
    cities: int = 0


class LoadResponse(BaseModel):
    contacts: List[Contact] = Field(default_factory=list)
    summary: LoadSummary
    skipped: List[SkippedRow] = Field(default_factory=list)


class QueryResponse(BaseModel):
    count: int = 0
    contacts: List[Contact] = Field(default_factory=list)


class CitiesResponse(BaseModel):
    unique_cities: List[str] = Field(default_factory=list, examples=[["Paris", "Lyon"]])
    counts: Dict[str, int] = Field(default_factory=dict)


class HealthResponse(BaseModel):
    ok: bool = True
