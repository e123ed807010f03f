"""
Pydantic models for stored pastes and creation payloads.

Field values are deliberately untyped: whatever JSON value a client sends is
stored and echoed back as-is.
"""
from typing import Any
from pydantic import BaseModel, ConfigDict, Field


class PasteCreate(BaseModel):
    """Schema for the ``data`` object of a create request."""
    model_config = ConfigDict(extra="ignore")

    name: Any = Field(None, description="Display name")
    syntax: Any = Field(None, description="Syntax highlighting hint")
    exposure: Any = Field(None, description="Visibility, e.g. public or private")
    expiration: Any = Field(None, description="Expiration, free form")
    text: Any = Field(None, description="Paste content (required by the create route)")
    user_id: Any = Field(None, description="Owner identifier")


class Paste(BaseModel):
    """A stored paste. Only ``id`` is assigned by the server."""
    model_config = ConfigDict(extra="ignore")

    id: int = Field(..., description="Unique, strictly increasing paste ID")
    name: Any = None
    syntax: Any = None
    exposure: Any = None
    expiration: Any = None
    text: Any = None
    user_id: Any = None

    def to_response(self) -> dict:
        """Render the paste, leaving out fields that were never supplied."""
        return self.model_dump(exclude_unset=True)
