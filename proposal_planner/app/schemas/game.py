"""
Pydantic schema for games.

A game pairs a proposal with the users playing it.  The data layer
does not create or modify games; the model exists so the front-end
can describe one.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from .proposal import Proposal


class Game(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: int
    proposal: Proposal
    users: List[str] = Field(default_factory=list, description="Participant identifiers")
    active: bool = False
