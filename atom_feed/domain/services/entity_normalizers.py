"""Normalizers for the repeated Atom sub-records.

People, categories and links drop their empty optional attributes; the
generator falls back to a default identity when the caller supplies none.
"""

from collections.abc import Sequence

from ...constants import Defaults
from ..entities.inputs import CategoryInput, GeneratorInput, LinkInput, PersonInput
from ..entities.records import Category, Generator, Link, Person
from ..exceptions import MissingRequiredFieldError
from .compaction import compact, is_empty

DEFAULT_GENERATOR = Generator(value=Defaults.GENERATOR_NAME, uri=Defaults.GENERATOR_URI)


def require_value(value: str | None, *, field: str) -> str:
    if value is None or is_empty(value):
        raise MissingRequiredFieldError(field)
    return value


def normalize_person(person: PersonInput, *, field: str) -> Person:
    fields = compact(person.model_dump())
    require_value(fields.get("name"), field=f"{field}.name")
    return Person(**fields)


def normalize_people(
    people: Sequence[PersonInput], *, field: str, required: bool = False
) -> tuple[Person, ...]:
    if required and not people:
        raise MissingRequiredFieldError(field)
    return tuple(
        normalize_person(person, field=f"{field}[{index}]")
        for index, person in enumerate(people)
    )


def normalize_category(category: CategoryInput, *, field: str) -> Category:
    fields = compact(category.model_dump())
    require_value(fields.get("term"), field=f"{field}.term")
    return Category(**fields)


def normalize_categories(
    categories: Sequence[CategoryInput], *, field: str
) -> tuple[Category, ...]:
    return tuple(
        normalize_category(category, field=f"{field}[{index}]")
        for index, category in enumerate(categories)
    )


def normalize_link(link: LinkInput, *, field: str) -> Link:
    fields = compact(link.model_dump())
    require_value(fields.get("href"), field=f"{field}.href")
    if "length" in fields:
        fields["length"] = str(fields["length"])
    return Link(**fields)


def normalize_links(links: Sequence[LinkInput], *, field: str) -> tuple[Link, ...]:
    return tuple(
        normalize_link(link, field=f"{field}[{index}]")
        for index, link in enumerate(links)
    )


def normalize_generator(
    generator: GeneratorInput | None, *, default: Generator, field: str
) -> Generator:
    """Resolve the generator identity.

    A supplied generator replaces ``default`` entirely; its fields are never
    merged with the default's.
    """
    if generator is None:
        return default
    fields = compact(generator.model_dump())
    require_value(fields.get("value"), field=f"{field}.value")
    return Generator(**fields)
