"""
Pydantic schemas for dog records.

``DogForm`` is what a client submits to create a dog: the display
name is assembled from ``firstname`` and ``lastname``.  ``DogCreate``
is what the service persists and ``DogRead`` is a stored record.
The remaining models describe the small JSON bodies returned by the
dog endpoints.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

# Placeholder values for a client that is not tracking any dog yet.
PLACEHOLDER_NAME = "unknown"
PLACEHOLDER_BREED = "unknown"

# Largest value a SQLite INTEGER column holds.
MAX_AGE = 2**63 - 1


class DogForm(BaseModel):
    """Validated body of ``POST /dog``."""

    firstname: str = Field(..., min_length=1, description="First part of the dog's name")
    lastname: str = Field(..., min_length=1, description="Second part of the dog's name")
    breed: str = Field(..., min_length=1, description="Breed of the dog")
    age: int = Field(..., ge=0, le=MAX_AGE, description="Age in whole years")

    model_config = {
        "str_strip_whitespace": True,
    }

    @field_validator("age", mode="before")
    @classmethod
    def reject_boolean_age(cls, v):
        if isinstance(v, bool):
            raise ValueError("age must be a whole number, not true/false")
        return v

    @property
    def name(self) -> str:
        return f"{self.firstname} {self.lastname}"

    def to_create(self) -> "DogCreate":
        return DogCreate(name=self.name, breed=self.breed, age=self.age)


class DogCreate(BaseModel):
    """Schema for inserting a dog into the store."""

    name: str
    breed: str
    age: int = Field(0, ge=0, le=MAX_AGE)


class DogRead(BaseModel):
    """Schema for a dog read back from the store."""

    id: int
    name: str
    breed: str
    age: int
    created_date: Optional[str] = None


class DogCreated(BaseModel):
    name: str
    breed: str
    age: int


class DogAge(BaseModel):
    name: str
    age: int


class TrackedName(BaseModel):
    name: str
