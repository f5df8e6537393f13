# =============================================================================
# core/models/content.py - Content Schemas
# =============================================================================
# These models define what the admin forms submit for each content table:
# - *Create: body of POST /api/{resource} (required fields enforced)
# - *Update: body of PATCH /api/{resource}/{id} (every field optional)
#
# Text fields are bilingual: every `_en` column has a `_bg` twin.
# Fields the models don't know about are passed through to Supabase
# unchanged, so adding a column doesn't need a code change here.
# =============================================================================

import datetime
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator, model_validator


class ContentForm(BaseModel):
    """
    Base class for content form payloads.

    `to_row()` returns only the fields the client actually sent, so a
    create leaves database defaults alone and an update touches only the
    submitted columns.
    """

    model_config = ConfigDict(extra="allow")

    # Columns that are NOT NULL in the database; an explicit null is a
    # validation error rather than a failed write.
    not_null_columns: ClassVar[frozenset[str]] = frozenset()

    @model_validator(mode="before")
    @classmethod
    def reject_null_columns(cls, data: Any) -> Any:
        if isinstance(data, dict):
            nulls = sorted(c for c in cls.not_null_columns if c in data and data[c] is None)
            if nulls:
                raise ValueError(f"{', '.join(nulls)} cannot be null")
        return data

    @field_validator("image", "email", "student_name", mode="before", check_fields=False)
    @classmethod
    def blank_to_none(cls, value: Any) -> Any:
        """Forms send empty inputs as ""; store them as NULL."""
        if isinstance(value, str) and not value.strip():
            return None
        return value

    def to_row(self) -> dict[str, Any]:
        """Serialize the submitted fields for insert/update."""
        return self.model_dump(mode="json", exclude_unset=True)


# =============================================================================
# News
# =============================================================================

class NewsCreate(ContentForm):
    """
    Payload for creating a news item.

    Example:
        {
            "title_bg": "Ден на отворените врати",
            "title_en": "Open day",
            "summary_bg": "...", "summary_en": "...",
            "content_bg": "...", "content_en": "...",
            "date": "2024-05-10",
            "image": "https://xxx.supabase.co/storage/v1/object/public/news/1715-ab12.jpg",
            "published": true
        }
    """

    title_en: str = Field(..., min_length=1)
    title_bg: str = Field(..., min_length=1)
    summary_en: str = Field(..., min_length=1)
    summary_bg: str = Field(..., min_length=1)
    content_en: str = Field(..., min_length=1)
    content_bg: str = Field(..., min_length=1)
    date: datetime.date
    image: str | None = None
    published: bool = True


class NewsUpdate(ContentForm):
    """Partial update of a news item."""

    not_null_columns = frozenset({
        "title_en", "title_bg", "summary_en", "summary_bg",
        "content_en", "content_bg", "date", "published",
    })

    title_en: str | None = Field(default=None, min_length=1)
    title_bg: str | None = Field(default=None, min_length=1)
    summary_en: str | None = Field(default=None, min_length=1)
    summary_bg: str | None = Field(default=None, min_length=1)
    content_en: str | None = Field(default=None, min_length=1)
    content_bg: str | None = Field(default=None, min_length=1)
    date: datetime.date | None = None
    image: str | None = None
    published: bool | None = None


# =============================================================================
# Achievements
# =============================================================================

class AchievementCreate(ContentForm):
    """Payload for creating an achievement."""

    title_en: str = Field(..., min_length=1)
    title_bg: str = Field(..., min_length=1)
    description_en: str = Field(..., min_length=1)
    description_bg: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1)
    date: datetime.date
    student_name: str | None = None
    image: str | None = None
    published: bool = True


class AchievementUpdate(ContentForm):
    """Partial update of an achievement."""

    not_null_columns = frozenset({
        "title_en", "title_bg", "description_en", "description_bg",
        "category", "date", "published",
    })

    title_en: str | None = Field(default=None, min_length=1)
    title_bg: str | None = Field(default=None, min_length=1)
    description_en: str | None = Field(default=None, min_length=1)
    description_bg: str | None = Field(default=None, min_length=1)
    category: str | None = Field(default=None, min_length=1)
    date: datetime.date | None = None
    student_name: str | None = None
    image: str | None = None
    published: bool | None = None


# =============================================================================
# Teachers
# =============================================================================

class TeacherCreate(ContentForm):
    """Payload for creating a teacher profile."""

    name: str = Field(..., min_length=1)
    title_en: str = Field(..., min_length=1)
    title_bg: str = Field(..., min_length=1)
    bio_en: str = Field(..., min_length=1)
    bio_bg: str = Field(..., min_length=1)
    email: EmailStr | None = None
    image: str | None = None
    published: bool = True
    sort_order: int = Field(default=0, ge=0)


class TeacherUpdate(ContentForm):
    """Partial update of a teacher profile."""

    not_null_columns = frozenset({
        "name", "title_en", "title_bg", "bio_en", "bio_bg", "published", "sort_order",
    })

    name: str | None = Field(default=None, min_length=1)
    title_en: str | None = Field(default=None, min_length=1)
    title_bg: str | None = Field(default=None, min_length=1)
    bio_en: str | None = Field(default=None, min_length=1)
    bio_bg: str | None = Field(default=None, min_length=1)
    email: EmailStr | None = None
    image: str | None = None
    published: bool | None = None
    sort_order: int | None = Field(default=None, ge=0)


# =============================================================================
# Courses
# =============================================================================

class CourseCreate(ContentForm):
    """Payload for creating a course."""

    title_en: str = Field(..., min_length=1)
    title_bg: str = Field(..., min_length=1)
    description_en: str = Field(..., min_length=1)
    description_bg: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1)
    image: str | None = None
    published: bool = True
    sort_order: int = Field(default=0, ge=0)


class CourseUpdate(ContentForm):
    """Partial update of a course."""

    not_null_columns = frozenset({
        "title_en", "title_bg", "description_en", "description_bg",
        "category", "published", "sort_order",
    })

    title_en: str | None = Field(default=None, min_length=1)
    title_bg: str | None = Field(default=None, min_length=1)
    description_en: str | None = Field(default=None, min_length=1)
    description_bg: str | None = Field(default=None, min_length=1)
    category: str | None = Field(default=None, min_length=1)
    image: str | None = None
    published: bool | None = None
    sort_order: int | None = Field(default=None, ge=0)
