# =============================================================================
# core/models/ - Pydantic Schemas
# =============================================================================
# - content.py: Create/update payloads for news, achievements, teachers, courses
# - auth.py: Authenticated session
# - pagination.py: Pagination block of list responses
# =============================================================================

from .auth import AuthSession
from .contact import (
    ContactBulkDelete,
    ContactBulkUpdate,
    ContactMessageCreate,
    ContactStatusUpdate,
)
from .content import (
    AchievementCreate,
    AchievementUpdate,
    ContentForm,
    CourseCreate,
    CourseUpdate,
    NewsCreate,
    NewsUpdate,
    TeacherCreate,
    TeacherUpdate,
)
from .pagination import Pagination

__all__ = [
    "AuthSession",
    "ContentForm",
    "NewsCreate",
    "NewsUpdate",
    "AchievementCreate",
    "AchievementUpdate",
    "TeacherCreate",
    "TeacherUpdate",
    "CourseCreate",
    "CourseUpdate",
    "Pagination",
    "ContactMessageCreate",
    "ContactStatusUpdate",
    "ContactBulkUpdate",
    "ContactBulkDelete",
]
