"""Pydantic v2 schemas for category colors."""

from pydantic import BaseModel, Field

_HEX = r"^#[0-9A-Fa-f]{6}$"


class CategoryColorResponse(BaseModel):
    """Color scheme of a category."""

    model_config = {"from_attributes": True}

    id: int
    primary: str = Field(pattern=_HEX)
    light: str = Field(pattern=r"^#[0-9A-Fa-f]{8}$", description="Primary color with alpha suffix")
    dark: str = Field(pattern=_HEX)
    text: str = Field(pattern=_HEX)
