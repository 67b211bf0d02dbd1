"""
Pydantic schemas for dog-related operations.
"""
from pydantic import BaseModel, Field, ConfigDict


class DogCreate(BaseModel):
    """Inbound payload for ``POST /dogs``.

    Fields are strict: ``age: "3"`` is rejected rather than coerced.
    """
    name: str = Field(strict=True, description="Dog's name")
    age: int = Field(strict=True, description="Age in years")
    breed: str = Field(strict=True, description="Breed")

    model_config = ConfigDict(json_schema_extra={
        "example": {
            "name": "Dingo",
            "age": 3,
            "breed": "Beagle"
        }
    })


class DogCreated(BaseModel):
    """Response body for a successful creation; only the generated id."""
    id: int


class DogRead(BaseModel):
    id: int
    name: str
    age: int
    breed: str

    model_config = ConfigDict(from_attributes=True)
