"""
Pydantic models describing the catalog source document.

The document groups games under categories::

    {"categories": [{"id": "...", "name": "...", "games": [{...}, ...]}]}

Game keys follow the document's camelCase naming and are mapped onto
snake_case fields through aliases.
"""

from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


class PlayerCountDoc(BaseModel):
    """Player range as stored in the document."""
    model_config = ConfigDict(extra="ignore")

    min: int = Field(ge=0)
    max: int = Field(ge=0)
    optimal: int = Field(ge=0)

    @model_validator(mode="after")
    def check_range(self) -> "PlayerCountDoc":
        if not (self.min <= self.optimal <= self.max):
            raise ValueError(
                f"playerCount must satisfy min <= optimal <= max, got "
                f"min={self.min} optimal={self.optimal} max={self.max}"
            )
        return self


class SetupDoc(BaseModel):
    model_config = ConfigDict(extra="ignore")

    description: Optional[str] = None


class RoleTipsDoc(BaseModel):
    """Tips grouped under a role label."""
    model_config = ConfigDict(extra="ignore")

    role: Optional[str] = None
    tips: List[str] = Field(default_factory=list)


class GameDoc(BaseModel):
    """A single game entry inside a category."""
    model_config = ConfigDict(extra="ignore")

    id: str
    name: str
    difficulty: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    player_count: Optional[PlayerCountDoc] = Field(default=None, alias="playerCount")
    setup: Optional[SetupDoc] = None
    rules: List[str] = Field(default_factory=list)
    tips: List[Union[str, RoleTipsDoc]] = Field(default_factory=list)
    examples: List[str] = Field(default_factory=list)
    duration: Optional[str] = None
    audience_participation: Optional[bool] = Field(default=None, alias="audienceParticipation")
    audience_count: Optional[Union[str, int]] = Field(default=None, alias="audienceCount")
    aliases: List[str] = Field(default_factory=list)
    video_links: List[str] = Field(default_factory=list, alias="videoLinks")
    notes: List[str] = Field(default_factory=list)


class CategoryDoc(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: Optional[str] = None
    name: str
    games: List[GameDoc] = Field(default_factory=list)


class CatalogDocument(BaseModel):
    """Root of the catalog document."""
    model_config = ConfigDict(extra="ignore")

    categories: List[CategoryDoc] = Field(default_factory=list)
