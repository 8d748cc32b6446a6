"""Caller-facing input models.

These models accept the loosely-optional shapes callers hand to the feed:
plain strings for text constructs, singular Atom element names as aliases
(``author``, ``link``, ``atomSource``), and datetimes or ISO-8601 strings for
timestamps. Required fields are deliberately optional here; the normalizers
decide what is missing so every failure surfaces as a project error.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
import re
from typing import Any

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

# Characters outside the XML 1.0 Char production.
_XML_ILLEGAL_CHARS = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]")


class TextType(str, Enum):
    TEXT = "text"
    HTML = "html"
    XHTML = "xhtml"


class _InputModel(BaseModel):
    model_config = ConfigDict(extra="forbid")

    @field_validator("*", mode="after")
    @classmethod
    def _reject_xml_illegal_characters(cls, value: Any) -> Any:
        if isinstance(value, str):
            match = _XML_ILLEGAL_CHARS.search(value)
            if match:
                raise ValueError(
                    f"character U+{ord(match.group()):04X} is not allowed in XML"
                )
        return value


class _ValueShorthand(_InputModel):
    @model_validator(mode="before")
    @classmethod
    def _wrap_plain_string(cls, data: Any) -> Any:
        if isinstance(data, str):
            return {"value": data}
        return data


class PersonInput(_InputModel):
    name: str | None = None
    uri: str | None = None
    email: str | None = None


class CategoryInput(_InputModel):
    term: str | None = None
    scheme: str | None = None
    label: str | None = None


class LinkInput(_InputModel):
    href: str | None = None
    rel: str | None = None
    type: str | None = None
    hreflang: str | None = None
    title: str | None = None
    length: int | str | None = None


class GeneratorInput(_ValueShorthand):
    value: str | None = Field(
        default=None, validation_alias=AliasChoices("value", "content")
    )
    uri: str | None = None
    version: str | None = None


class TextInput(_ValueShorthand):
    type: TextType | None = None
    value: str | None = None


class ContentInput(_ValueShorthand):
    type: str | None = None
    src: str | None = None
    value: str | None = None


class _CommonInput(_InputModel):
    authors: list[PersonInput] = Field(
        default_factory=list, validation_alias=AliasChoices("authors", "author")
    )
    categories: list[CategoryInput] = Field(
        default_factory=list,
        validation_alias=AliasChoices("categories", "category"),
    )
    contributors: list[PersonInput] = Field(
        default_factory=list,
        validation_alias=AliasChoices("contributors", "contributor"),
    )
    id: str | None = None
    links: list[LinkInput] = Field(
        default_factory=list, validation_alias=AliasChoices("links", "link")
    )
    rights: TextInput | None = None
    title: TextInput | None = None
    updated: datetime | None = None


class FeedInput(_CommonInput):
    generator: GeneratorInput | None = None
    icon: str | None = None
    logo: str | None = None
    subtitle: TextInput | None = None


class EntryInput(_CommonInput):
    content: ContentInput | None = None
    published: datetime | None = None
    source: FeedInput | None = Field(
        default=None, validation_alias=AliasChoices("source", "atomSource")
    )
    summary: TextInput | None = None
