"""
Pydantic schemas for proposals and their activities.

A proposal is a named, ordered collection of activities.  Activities
have no life of their own outside the proposal that contains them.
Proposal identifiers are strings; activity identifiers are numbers.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Activity(BaseModel):
    """An item belonging to exactly one proposal."""

    model_config = ConfigDict(extra="allow")

    id: int = Field(..., description="Numeric activity identifier")
    name: Optional[str] = Field(None, description="Display name of the activity")
    description: Optional[str] = Field(None, description="Free-form description")


class Proposal(BaseModel):
    """Schema for reading a proposal returned by the API."""

    model_config = ConfigDict(extra="allow")

    id: str = Field(..., description="Server-assigned proposal identifier")
    name: str
    activities: List[Activity] = Field(default_factory=list)

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v: Any) -> Any:
        # Some API servers hand out numeric ids; they are still compared
        # as strings by the cache.
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v


class ProposalCreate(BaseModel):
    """Schema for the body of ``POST /api/proposals``."""

    name: str = Field(..., description="Name of the new proposal")
    activities: List[Activity] = Field(default_factory=list)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Proposal name must not be blank")
        return v.strip()
