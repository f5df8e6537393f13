# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - health.py: Health check endpoints
# - news.py, achievements.py, teachers.py, courses.py: content CRUD
# - upload.py: Image uploads into the content buckets
# - contacts.py: Public contact form and the admin inbox
# - dashboard.py: Admin dashboard stats
# - locale_redirect.py: /{locale}/admin/... -> /admin/... redirects
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import health
from . import news
from . import achievements
from . import teachers
from . import courses
from . import contacts
from . import upload
from . import dashboard
from . import locale_redirect

__all__ = [
    "health",
    "news",
    "achievements",
    "teachers",
    "courses",
    "contacts",
    "upload",
    "dashboard",
    "locale_redirect",
]
