"""Domain entities.

Caller input models and the canonical, immutable feed records.
"""

from .inputs import (
    CategoryInput,
    ContentInput,
    EntryInput,
    FeedInput,
    GeneratorInput,
    LinkInput,
    PersonInput,
    TextInput,
    TextType,
)
from .records import (
    Category,
    Content,
    EntryRecord,
    FeedMetadata,
    Generator,
    Link,
    Person,
    TextConstruct,
)

__all__ = [
    # Input models
    "CategoryInput",
    "ContentInput",
    "EntryInput",
    "FeedInput",
    "GeneratorInput",
    "LinkInput",
    "PersonInput",
    "TextInput",
    "TextType",
    # Canonical records
    "Category",
    "Content",
    "EntryRecord",
    "FeedMetadata",
    "Generator",
    "Link",
    "Person",
    "TextConstruct",
]
