"""Pydantic schemas for Profile API."""

from pydantic import BaseModel, ConfigDict, Field


class ProfileResponse(BaseModel):
    """Public projection of the caller's user record."""

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "123e4567-e89b-12d3-a456-426614174000",
                "name": "Alice",
                "email": "alice@example.com",
                "image": "https://cdn.example.com/avatars/alice.png",
            }
        },
    )

    id: str
    name: str
    email: str
    image: str | None = None


class ProfileUpdate(BaseModel):
    """Full replacement of the editable profile fields.

    ``name`` is optional at the schema level so that a missing name is
    reported as a 400 by the service rather than a schema error.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Alice B",
                "password": "newpass123",
                "image": "https://cdn.example.com/avatars/alice.png",
            }
        },
    )

    name: str | None = Field(None, max_length=255)
    password: str | None = Field(None, description="New password; omit to keep the current one")
    image: str | None = None
