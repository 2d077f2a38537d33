"""
Incubator Backend — Validation Helpers
========================================

What:  Turns pydantic validation results into the API's error list, validates
       raw mappings against a schema, and derives update schemas.
Why:   Every resource reports *all* violated fields at once as readable lines
       ("title: String should have at least 5 characters"), whether the input
       came from a JSON body (FastAPI RequestValidationError) or a query string.
How:   Pure functions over pydantic models; no I/O.

Partial schemas:
    make_partial(AnnouncementCreate, "AnnouncementUpdate") keeps every field's
    type and constraints but makes it omittable. Omitted fields stay unset
    (dump with exclude_unset=True); an explicit null for a non-nullable field
    still fails, because defaults are not validated but supplied values are.
"""

from typing import Annotated, Any, Dict, Iterable, List, Mapping, Type, TypeVar

from pydantic import BaseModel, Field, create_model
from pydantic import ValidationError as PydanticValidationError

from incubator.exceptions import ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)

# Location prefixes FastAPI adds in front of the field name
_SOURCES = {"body", "query", "path", "header", "cookie"}


def format_error(error: Mapping[str, Any]) -> str:
    """One pydantic error dict → "field: reason"."""
    if error.get("type") == "json_invalid":
        return "Request body is not valid JSON"
    message = str(error.get("msg", "Invalid value"))
    # ValueError raised in our validators arrives as "Value error, <text>"
    if message.startswith("Value error, "):
        message = message[len("Value error, "):]
    loc = [str(part) for part in error.get("loc", ()) if part not in _SOURCES]
    if not loc:
        return message
    return f"{'.'.join(loc)}: {message}"


def format_errors(errors: Iterable[Mapping[str, Any]]) -> List[str]:
    """Format every violation, in the order pydantic reported them."""
    return [format_error(error) for error in errors]


def validate(
    schema: Type[ModelT],
    data: Mapping[str, Any],
    message: str = "Validation error",
) -> ModelT:
    """
    Validate `data` against `schema`.

    Returns:
        The normalized model (defaults applied, unknown keys dropped)

    Raises:
        ValidationError: with one entry per violated field
    """
    try:
        return schema.model_validate(dict(data))
    except PydanticValidationError as exc:
        raise ValidationError(message=message, errors=format_errors(exc.errors())) from exc


def make_partial(model: Type[ModelT], name: str) -> Type[ModelT]:
    """
    Derive an update schema from a create schema.

    Each field keeps its annotation and constraint metadata, gains a default
    of None and so becomes optional. Validators are inherited through the
    subclass relationship.
    """
    fields: Dict[str, Any] = {}
    for field_name, info in model.model_fields.items():
        annotation = info.annotation
        if info.metadata:
            annotation = Annotated[(annotation, *info.metadata)]
        # Generated aliases (priority 1) are regenerated by the alias_generator
        explicit_alias = (info.alias_priority or 0) > 1
        fields[field_name] = (
            annotation,
            Field(
                default=None,
                alias=info.alias if explicit_alias else None,
                validation_alias=info.validation_alias if explicit_alias else None,
                description=info.description,
            ),
        )
    return create_model(name, __base__=model, **fields)
