"""Pydantic models for the sections of a config document."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, Field, StrictStr

# ANSI 8-bit color table index
ColorIndex = Annotated[int, Field(ge=0, le=255, strict=True)]


class GlobalSettings(BaseModel):
    """The reserved ``recall`` section."""

    primary_color: ColorIndex | None = None
    highlight_color: ColorIndex | None = None


class EntryDocument(BaseModel):
    """One entry of a page: keys to press plus what they do."""

    content: list[StrictStr]
    description: StrictStr
