"""Pydantic models for library-tracker.

Book: one catalog record (immutable, ISBN-validated)
RunStatistics: the four per-run counters printed at exit
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

ISBN_LENGTH = 13


def is_isbn13(value: str) -> bool:
    """Return True if value is exactly 13 ASCII decimal digits."""
    return len(value) == ISBN_LENGTH and value.isascii() and value.isdigit()


class Book(BaseModel):
    """A single catalog record.

    Books order case-insensitively by title. Duplicate ISBNs across
    books are allowed; uniqueness is not a catalog invariant.
    """

    model_config = ConfigDict(frozen=True)

    title: str = Field(description="Book title (must not contain ':')")
    author: str = Field(description="Author name (must not contain ':')")
    isbn: str = Field(description="Exactly 13 ASCII digits")
    copies: int = Field(ge=0, description="Copies held")

    @field_validator("isbn")
    @classmethod
    def validate_isbn(cls, v: str) -> str:
        if not is_isbn13(v):
            raise ValueError(f"ISBN must be exactly {ISBN_LENGTH} digits")
        return v

    @property
    def sort_key(self) -> str:
        return self.title.lower()

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Book):
            return NotImplemented
        return self.sort_key < other.sort_key


class RunStatistics(BaseModel):
    """Counters for a single tracker run.

    Created once per run and passed explicitly to the loader,
    dispatcher and error log; never stored at module level.
    """

    valid_records: int = Field(default=0, description="Lines parsed into books during load")
    search_results: int = Field(default=0, description="Matches printed by the search")
    books_added: int = Field(default=0, description="0 or 1")
    error_count: int = Field(default=0, description="Malformed lines plus I/O failures")
