from typing import ClassVar


class Defaults:
    GENERATOR_NAME = "AtomFeed"
    GENERATOR_URI = "https://github.com/thermarthae/atom-feed"
    INDENT = 0
    CONFIG_FILE = "atom_feed.toml"


class Namespaces:
    ATOM = "http://www.w3.org/2005/Atom"


class XmlDeclaration:
    VERSION = "1.0"
    ENCODING = "utf-8"


class TreeKeys:
    """Reserved keys of the compact attribute/text tree."""

    DECLARATION = "_declaration"
    ATTRIBUTES = "_attributes"
    TEXT = "_text"


class ElementOrder:
    FEED: ClassVar[tuple[str, ...]] = (
        "author",
        "category",
        "contributor",
        "generator",
        "icon",
        "logo",
        "id",
        "link",
        "rights",
        "subtitle",
        "title",
        "updated",
    )
    ENTRY: ClassVar[tuple[str, ...]] = (
        "author",
        "category",
        "content",
        "contributor",
        "id",
        "link",
        "published",
        "rights",
        "source",
        "summary",
        "title",
        "updated",
    )
    PERSON: ClassVar[tuple[str, ...]] = ("name", "uri", "email")
