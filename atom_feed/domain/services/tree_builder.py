"""Compact tree assembly.

The compact tree is a nested dict understood by the XML serializer:

- ``_declaration`` holds the XML declaration attributes
- ``_attributes`` holds an element's attributes
- ``_text`` holds an element's text content
- any other key is a child element; a list yields one element per item

Child keys are emitted in the fixed Atom order from
:class:`~atom_feed.constants.ElementOrder`.
"""

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import asdict
from typing import Any

from ...constants import ElementOrder, Namespaces, TreeKeys, XmlDeclaration
from ..entities.records import (
    Category,
    Content,
    EntryRecord,
    FeedMetadata,
    Generator,
    Link,
    Person,
    TextConstruct,
)
from .compaction import compact

Node = dict[str, Any]


def build_feed_tree(metadata: FeedMetadata, entries: Iterable[EntryRecord]) -> Node:
    """Build the compact tree for a whole Atom document.

    Args:
        metadata: Canonical feed metadata
        entries: Canonical entries in output order

    Returns:
        Compact tree with the declaration and the ``feed`` root
    """
    feed: Node = {TreeKeys.ATTRIBUTES: {"xmlns": Namespaces.ATOM}}
    feed.update(feed_metadata_node(metadata))
    entry_nodes = [entry_node(entry) for entry in entries]
    if entry_nodes:
        feed["entry"] = entry_nodes
    return {
        TreeKeys.DECLARATION: {
            TreeKeys.ATTRIBUTES: {
                "version": XmlDeclaration.VERSION,
                "encoding": XmlDeclaration.ENCODING,
            }
        },
        "feed": feed,
    }


def feed_metadata_node(metadata: FeedMetadata) -> Node:
    return _ordered(
        {
            "author": _people(metadata.authors),
            "category": [category_node(c) for c in metadata.categories],
            "contributor": _people(metadata.contributors),
            "generator": generator_node(metadata.generator),
            "icon": text_node(metadata.icon),
            "logo": text_node(metadata.logo),
            "id": text_node(metadata.id),
            "link": [link_node(link) for link in metadata.links],
            "rights": text_construct_node(metadata.rights),
            "subtitle": text_construct_node(metadata.subtitle),
            "title": text_construct_node(metadata.title),
            "updated": text_node(metadata.updated),
        },
        ElementOrder.FEED,
    )


def entry_node(entry: EntryRecord) -> Node:
    source = feed_metadata_node(entry.source) if entry.source is not None else None
    return _ordered(
        {
            "author": _people(entry.authors),
            "category": [category_node(c) for c in entry.categories],
            "content": content_node(entry.content),
            "contributor": _people(entry.contributors),
            "id": text_node(entry.id),
            "link": [link_node(link) for link in entry.links],
            "published": text_node(entry.published),
            "rights": text_construct_node(entry.rights),
            "source": source,
            "summary": text_construct_node(entry.summary),
            "title": text_construct_node(entry.title),
            "updated": text_node(entry.updated),
        },
        ElementOrder.ENTRY,
    )


def person_node(person: Person) -> Node:
    return _ordered(
        {
            "name": text_node(person.name),
            "uri": text_node(person.uri),
            "email": text_node(person.email),
        },
        ElementOrder.PERSON,
    )


def category_node(category: Category) -> Node:
    return {TreeKeys.ATTRIBUTES: compact(asdict(category))}


def link_node(link: Link) -> Node:
    return {TreeKeys.ATTRIBUTES: compact(asdict(link))}


def generator_node(generator: Generator) -> Node:
    return compact(
        {
            TreeKeys.ATTRIBUTES: compact(
                {"uri": generator.uri, "version": generator.version}
            ),
            TreeKeys.TEXT: generator.value,
        }
    )


def text_node(value: str | None) -> Node | None:
    if value is None:
        return None
    return {TreeKeys.TEXT: value}


def text_construct_node(construct: TextConstruct | None) -> Node | None:
    if construct is None:
        return None
    # The text node stays even when the type attribute is absent.
    return {
        **compact({TreeKeys.ATTRIBUTES: compact({"type": construct.type})}),
        TreeKeys.TEXT: construct.value,
    }


def content_node(content: Content) -> Node:
    return compact(
        {
            TreeKeys.ATTRIBUTES: compact({"type": content.type, "src": content.src}),
            TreeKeys.TEXT: content.value,
        }
    )


def _people(people: Sequence[Person]) -> list[Node]:
    return [person_node(person) for person in people]


def _ordered(fields: Mapping[str, Any], order: Sequence[str]) -> Node:
    return compact({name: fields.get(name) for name in order})
