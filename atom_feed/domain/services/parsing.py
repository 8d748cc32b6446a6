from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from ..exceptions import FeedValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


def parse_input(
    model: type[ModelT], data: ModelT | Mapping[str, Any], *, context: str
) -> ModelT:
    """Coerce caller data into ``model``.

    Pydantic validation failures (wrong types, unknown keys) are re-raised as
    :class:`FeedValidationError` pointing at the first offending field.
    """
    if isinstance(data, model):
        return data
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        errors = exc.errors()
        location = [str(part) for part in errors[0]["loc"]] if errors else []
        field = ".".join([context, *location])
        raise FeedValidationError(
            f"Invalid {context} data: {exc}", field=field
        ) from exc
