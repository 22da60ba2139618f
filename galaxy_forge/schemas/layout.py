"""Pydantic schema for hand-authored (custom) galaxy layouts."""

from pydantic import BaseModel, Field


class CustomStarSchema(BaseModel):
    """One star of a custom galaxy layout."""

    id: str = Field(min_length=1, description="Layout-local star identifier")
    x: float
    y: float
    economy: int = Field(default=0, ge=0)
    industry: int = Field(default=0, ge=0)
    science: int = Field(default=0, ge=0)
    homeStar: bool = Field(default=False)  # noqa: N815
    playerId: str | None = Field(  # noqa: N815
        default=None, description="Owning player slot, if the author assigned one"
    )
    linkedStars: list[str] = Field(  # noqa: N815
        default_factory=list, description="Layout ids of this home star's satellites"
    )


class CustomGalaxyLayout(BaseModel):
    """A complete custom galaxy layout payload."""

    stars: list[CustomStarSchema] = Field(min_length=1)
