"""Text-construct resolution.

Atom text constructs (title, subtitle, rights, summary) pair a value with an
optional ``type`` attribute. Entry content additionally carries an optional
``src`` reference for out-of-line content.
"""

from ..entities.inputs import ContentInput, TextInput
from ..entities.records import Content, TextConstruct
from ..exceptions import InvalidContentError, MissingRequiredFieldError
from .compaction import compact, is_empty


def resolve_text(value: TextInput | None) -> TextConstruct | None:
    """Resolve an optional text construct.

    Args:
        value: Caller text input, possibly omitted

    Returns:
        The resolved construct, or None when there is no usable value
    """
    if value is None or is_empty(value.value):
        return None
    content_type = value.type.value if value.type is not None else None
    return TextConstruct(value=value.value, type=content_type)


def require_text(value: TextInput | None, *, field: str) -> TextConstruct:
    resolved = resolve_text(value)
    if resolved is None:
        raise MissingRequiredFieldError(field)
    return resolved


def resolve_content(value: ContentInput | None, *, field: str) -> Content:
    """Resolve entry content.

    Content is either inline (``value``) or a pointer (``src``); both may be
    given. Having neither is an error rather than an empty element.

    Args:
        value: Caller content input
        field: Field path used in error messages

    Returns:
        The resolved content record

    Raises:
        MissingRequiredFieldError: If content is omitted
        InvalidContentError: If content has neither value nor src
    """
    if value is None:
        raise MissingRequiredFieldError(field)
    fields = compact({"value": value.value, "type": value.type, "src": value.src})
    if "value" not in fields and "src" not in fields:
        raise InvalidContentError(field)
    return Content(**fields)
