from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Person:
    name: str
    uri: str | None = None
    email: str | None = None


@dataclass(frozen=True, slots=True)
class Category:
    term: str
    scheme: str | None = None
    label: str | None = None


@dataclass(frozen=True, slots=True)
class Link:
    href: str
    rel: str | None = None
    type: str | None = None
    hreflang: str | None = None
    title: str | None = None
    length: str | None = None


@dataclass(frozen=True, slots=True)
class Generator:
    value: str
    uri: str | None = None
    version: str | None = None


@dataclass(frozen=True, slots=True)
class TextConstruct:
    value: str
    type: str | None = None


@dataclass(frozen=True, slots=True)
class Content:
    value: str | None = None
    type: str | None = None
    src: str | None = None


@dataclass(frozen=True, slots=True)
class FeedMetadata:
    id: str
    title: TextConstruct
    updated: str
    authors: tuple[Person, ...]
    generator: Generator
    categories: tuple[Category, ...] = ()
    contributors: tuple[Person, ...] = ()
    icon: str | None = None
    logo: str | None = None
    links: tuple[Link, ...] = ()
    rights: TextConstruct | None = None
    subtitle: TextConstruct | None = None


@dataclass(frozen=True, slots=True)
class EntryRecord:
    id: str
    title: TextConstruct
    updated: str
    authors: tuple[Person, ...]
    content: Content
    categories: tuple[Category, ...] = ()
    contributors: tuple[Person, ...] = ()
    links: tuple[Link, ...] = ()
    published: str | None = None
    rights: TextConstruct | None = None
    source: FeedMetadata | None = None
    summary: TextConstruct | None = None
