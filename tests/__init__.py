# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the SchoolSite API:
# - test_models.py / test_pagination.py: schema and pagination units
# - test_supabase_client.py: the Supabase wrapper against a mocked SDK
# - test_content_routes.py: news/achievements/teachers/courses endpoints
# - test_upload.py: image uploads and storage helpers
# - test_contacts.py: the contact form and admin inbox
# - test_auth.py: session endpoints, cookie helpers and the refresh gate
# - test_locale_redirect.py: /{locale}/admin redirects
# - test_health.py: health and readiness checks
#
# Run tests with: pytest
# =============================================================================
