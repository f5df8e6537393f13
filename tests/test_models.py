# =============================================================================
# tests/test_models.py - Pydantic Model Tests
# =============================================================================
# Unit tests for the content and auth models to ensure:
# - Valid form data is accepted and serialized for Supabase
# - Invalid data raises ValidationError
# - Only submitted fields reach the database
#
# Run with: pytest tests/test_models.py -v
# =============================================================================

import pytest
from pydantic import ValidationError

from app.auth.models import LoginRequest
from core.models import (
    AchievementCreate,
    AuthSession,
    CourseCreate,
    CourseUpdate,
    NewsCreate,
    NewsUpdate,
    Pagination,
    TeacherCreate,
    TeacherUpdate,
)


# =============================================================================
# News
# =============================================================================

class TestNewsCreate:
    """Tests for NewsCreate model."""

    def test_valid_news(self, news_payload):
        """Test creating a valid news item."""
        news = NewsCreate(**news_payload)

        assert news.title_en == "Open day"
        assert news.published is True

    def test_to_row_serializes_date(self, news_payload):
        """Dates are sent to Supabase as ISO strings."""
        row = NewsCreate(**news_payload).to_row()

        assert row["date"] == "2024-05-10"

    def test_to_row_skips_defaults(self, news_payload):
        """Fields the client didn't send are left to database defaults."""
        row = NewsCreate(**news_payload).to_row()

        assert "published" not in row

    def test_missing_title_rejected(self, news_payload):
        """Test that required fields are enforced."""
        del news_payload["title_bg"]

        with pytest.raises(ValidationError):
            NewsCreate(**news_payload)

    def test_empty_title_rejected(self, news_payload):
        news_payload["title_en"] = ""

        with pytest.raises(ValidationError):
            NewsCreate(**news_payload)

    def test_invalid_date_rejected(self, news_payload):
        news_payload["date"] = "10th of May"

        with pytest.raises(ValidationError):
            NewsCreate(**news_payload)

    def test_blank_image_becomes_none(self, news_payload):
        """An empty image input is stored as NULL."""
        news_payload["image"] = "  "

        assert NewsCreate(**news_payload).to_row()["image"] is None

    def test_unknown_columns_pass_through(self, news_payload):
        """Columns the model doesn't declare still reach Supabase."""
        news_payload["category"] = "events"

        assert NewsCreate(**news_payload).to_row()["category"] == "events"


class TestNewsUpdate:
    """Tests for NewsUpdate model."""

    def test_only_sent_fields_in_row(self):
        row = NewsUpdate(published=False).to_row()

        assert row == {"published": False}

    def test_empty_update(self):
        assert NewsUpdate().to_row() == {}

    def test_explicit_null_image_kept(self):
        """Clearing the image sends an explicit NULL."""
        assert NewsUpdate(image=None).to_row() == {"image": None}


# =============================================================================
# Achievements
# =============================================================================

class TestAchievementCreate:
    """Tests for AchievementCreate model."""

    def test_student_name_optional(self):
        achievement = AchievementCreate(
            title_en="Maths olympiad",
            title_bg="Олимпиада по математика",
            description_en="First place",
            description_bg="Първо място",
            category="olympiad",
            date="2024-03-02",
            student_name="",
        )

        assert achievement.student_name is None

    def test_category_required(self):
        with pytest.raises(ValidationError):
            AchievementCreate(
                title_en="Maths olympiad",
                title_bg="Олимпиада по математика",
                description_en="First place",
                description_bg="Първо място",
                date="2024-03-02",
            )


# =============================================================================
# Teachers
# =============================================================================

class TestTeacherCreate:
    """Tests for TeacherCreate model."""

    @pytest.fixture
    def teacher_data(self):
        return {
            "name": "Maria Ivanova",
            "title_en": "Mathematics teacher",
            "title_bg": "Учител по математика",
            "bio_en": "Twenty years at the school.",
            "bio_bg": "Двадесет години в училището.",
        }

    def test_defaults(self, teacher_data):
        teacher = TeacherCreate(**teacher_data)

        assert teacher.sort_order == 0
        assert teacher.email is None
        assert teacher.published is True

    def test_invalid_email_rejected(self, teacher_data):
        teacher_data["email"] = "not-an-email"

        with pytest.raises(ValidationError):
            TeacherCreate(**teacher_data)

    def test_blank_email_becomes_none(self, teacher_data):
        teacher_data["email"] = ""

        assert TeacherCreate(**teacher_data).email is None

    def test_negative_sort_order_rejected(self, teacher_data):
        teacher_data["sort_order"] = -1

        with pytest.raises(ValidationError):
            TeacherCreate(**teacher_data)

    def test_update_negative_sort_order_rejected(self):
        with pytest.raises(ValidationError):
            TeacherUpdate(sort_order=-3)


# =============================================================================
# Courses
# =============================================================================

class TestCourse:
    """Tests for CourseCreate and CourseUpdate models."""

    def test_valid_course(self):
        course = CourseCreate(
            title_en="Robotics",
            title_bg="Роботика",
            description_en="After-school robotics club",
            description_bg="Извънкласен клуб по роботика",
            category="extracurricular",
            sort_order=3,
        )

        assert course.to_row()["sort_order"] == 3

    def test_update_reorder(self):
        assert CourseUpdate(sort_order=0).to_row() == {"sort_order": 0}


# =============================================================================
# Pagination / Auth
# =============================================================================

class TestPagination:
    """Tests for Pagination model."""

    def test_serializes_camel_case(self):
        pagination = Pagination(page=2, limit=5, total_pages=3)

        assert pagination.to_dict() == {"page": 2, "limit": 5, "totalPages": 3}

    def test_accepts_alias(self):
        assert Pagination(page=1, limit=10, totalPages=0).total_pages == 0

    def test_page_zero_rejected(self):
        with pytest.raises(ValidationError):
            Pagination(page=0, limit=10, total_pages=0)


class TestAuthModels:
    """Tests for AuthSession and LoginRequest."""

    def test_session_is_frozen(self, session):
        with pytest.raises(ValidationError):
            session.access_token = "other"

    def test_login_requires_valid_email(self):
        with pytest.raises(ValidationError):
            LoginRequest(email="admin", password="secret")

    def test_login_requires_password(self):
        with pytest.raises(ValidationError):
            LoginRequest(email="admin@school.bg", password="")


class TestNullColumns:
    """Explicit nulls on NOT NULL columns are rejected in updates."""

    @pytest.mark.parametrize(
        "model,field",
        [
            (NewsUpdate, "title_bg"),
            (NewsUpdate, "date"),
            (TeacherUpdate, "name"),
            (CourseUpdate, "category"),
        ],
    )
    def test_null_rejected(self, model, field):
        with pytest.raises(ValidationError, match=f"{field} cannot be null"):
            model(**{field: None})

    def test_nullable_columns_accept_null(self):
        assert TeacherUpdate(email=None, image=None).to_row() == {"email": None, "image": None}

    def test_omitted_columns_fine(self):
        assert CourseUpdate(published=False).to_row() == {"published": False}
