"""
Incubator Backend — Shared Pydantic Schemas
=============================================

What:  Base model, response envelopes, pagination and list-query parameters
       shared by every resource.
Why:   All endpoints speak the same wire format:
           { success, message?, data?, errors? }
       and every listing returns
           { items, pagination: { currentPage, totalPages, totalItems,
                                  itemsPerPage, hasNextPage, hasPrevPage } }
How:   ApiModel maps snake_case attributes to camelCase JSON names, strips
       surrounding whitespace from strings and reads ORM objects directly.
"""

import math
import uuid
from datetime import datetime, timezone
from typing import Annotated, Any, Generic, List, Literal, Optional, TypeVar

from pydantic import (
    AfterValidator,
    AliasChoices,
    BaseModel,
    ConfigDict,
    EmailStr,
    Field,
    HttpUrl,
    TypeAdapter,
    ValidationError as PydanticValidationError,
    ValidationInfo,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel

T = TypeVar("T")

_HTTP_URL = TypeAdapter(HttpUrl)


def _http_url(value: str) -> str:
    try:
        _HTTP_URL.validate_python(value)
    except PydanticValidationError as exc:
        raise ValueError("Please provide a valid http(s) URL") from exc
    return value


def _http_url_or_empty(value: str) -> str:
    return _http_url(value) if value else value


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


# ── Reusable field types ──────────────────────────────────────────────────
# Addresses are stored lowercased so uniqueness checks ignore case
Email = Annotated[EmailStr, AfterValidator(str.lower)]
WebUrl = Annotated[str, Field(max_length=500), AfterValidator(_http_url)]
WebUrlOrEmpty = Annotated[str, Field(max_length=500), AfterValidator(_http_url_or_empty)]
# Naive timestamps from clients are taken to be UTC
UtcDateTime = Annotated[datetime, AfterValidator(_as_utc)]

SortOrder = Literal["asc", "desc"]


class ApiModel(BaseModel):
    """Base for every request/response schema."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        str_strip_whitespace=True,
    )


# ══════════════════════════════════════════════════════════════════════════
# Envelopes
# ══════════════════════════════════════════════════════════════════════════


class Envelope(ApiModel, Generic[T]):
    """
    Uniform response wrapper.

    Routes serialize with response_model_exclude_unset, so `message`,
    `data` and `errors` only appear when they were given.
    """
    success: bool = True
    message: Optional[str] = None
    data: Optional[T] = None
    errors: Optional[List[str]] = None


class Pagination(ApiModel):
    current_page: int = Field(description="1-based page number")
    total_pages: int = Field(description="ceil(totalItems / itemsPerPage); 0 when empty")
    total_items: int = Field(description="Count of all rows matching the filter")
    items_per_page: int
    has_next_page: bool
    has_prev_page: bool

    @classmethod
    def build(cls, page: int, limit: int, total: int) -> "Pagination":
        total_pages = math.ceil(total / limit) if limit else 0
        return cls(
            current_page=page,
            total_pages=total_pages,
            total_items=total,
            items_per_page=limit,
            has_next_page=page < total_pages,
            has_prev_page=page > 1,
        )


class Page(ApiModel, Generic[T]):
    items: List[T]
    pagination: Pagination


# ══════════════════════════════════════════════════════════════════════════
# Documents
# ══════════════════════════════════════════════════════════════════════════


class UserRef(ApiModel):
    """An acting user as embedded in admin reads."""
    id: uuid.UUID
    name: Optional[str] = None
    email: Optional[str] = None


def resolve_user_ref(value: Any, info: ValidationInfo) -> Any:
    """
    Expand a stored user id into a UserRef.

    Services pass the referenced users as `context={"people": {id: user}}`.
    An id missing from the context becomes a bare `{"id": ...}` reference.
    """
    if not isinstance(value, uuid.UUID):
        return value
    people = (info.context or {}).get("people") or {}
    user = people.get(value)
    return user if user is not None else {"id": value}


class DocumentRead(ApiModel):
    """System-maintained fields every stored document exposes."""
    id: uuid.UUID
    created_at: datetime
    updated_at: datetime
    created_by: Optional[UserRef] = None
    updated_by: Optional[UserRef] = None

    @field_validator("created_by", "updated_by", mode="before")
    @classmethod
    def expand_user_refs(cls, value: Any, info: ValidationInfo) -> Any:
        return resolve_user_ref(value, info)


class StatusUpdate(ApiModel):
    """Body of the activate/deactivate endpoints."""
    is_active: bool


# ══════════════════════════════════════════════════════════════════════════
# Query Parameter Models
# ══════════════════════════════════════════════════════════════════════════


class ListQuery(ApiModel):
    """
    Shared listing parameters.

    Resources subclass this to narrow `sort_by` to their allow-list, change
    the default `limit`, and add categorical filters. `startDate`/`endDate`
    are accepted as aliases of `dateFrom`/`dateTo`; both bounds are inclusive.
    """
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1, le=100)
    search: Optional[str] = Field(default=None, max_length=100)
    sort_by: str = Field(default="createdAt")
    sort_order: SortOrder = Field(default="desc")
    date_from: Optional[UtcDateTime] = Field(
        default=None, validation_alias=AliasChoices("dateFrom", "startDate", "date_from")
    )
    date_to: Optional[UtcDateTime] = Field(
        default=None, validation_alias=AliasChoices("dateTo", "endDate", "date_to")
    )

    @model_validator(mode="after")
    def check_date_range(self) -> "ListQuery":
        if self.date_from and self.date_to and self.date_to < self.date_from:
            raise ValueError("dateTo must be on or after dateFrom")
        return self


class PublicQuery(ApiModel):
    """Parameters of the unauthenticated `/public/list` endpoints."""
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=50, ge=1, le=100)
    search: Optional[str] = Field(default=None, max_length=100)
    sort_by: str = Field(default="createdAt")
    sort_order: SortOrder = Field(default="desc")
