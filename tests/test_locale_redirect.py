# =============================================================================
# tests/test_locale_redirect.py - Localized Admin Redirect Tests
# =============================================================================
# Tests for /{locale}/admin/... and core/services/locale_service.py:
# - Locale-prefixed admin paths map to the canonical /admin/... path
# - The response is a client-side redirect page, never a 3xx
# - Unsupported locales are 404
#
# Run with: pytest tests/test_locale_redirect.py -v
# =============================================================================

import pytest

from core.services.locale_service import canonical_admin_path, client_redirect_page, split_locale

LOCALES = ["bg", "en"]


class TestSplitLocale:
    """Tests for split_locale."""

    def test_with_locale(self):
        assert split_locale("/bg/admin/news", LOCALES) == ("bg", "/admin/news")

    def test_without_locale(self):
        assert split_locale("/admin", LOCALES) == (None, "/admin")

    def test_locale_only(self):
        assert split_locale("/en", LOCALES) == ("en", "/")


class TestCanonicalAdminPath:
    """Tests for canonical_admin_path."""

    @pytest.mark.parametrize(
        "path,expected",
        [
            ("/bg/admin", "/admin"),
            ("/en/admin/", "/admin"),
            ("/bg/admin/dashboard", "/admin/dashboard"),
            ("/en/admin/news/3f6c1a2e-8b4d-4e7f-9a10-5c2d7e8f9b01/edit", "/admin/news/3f6c1a2e-8b4d-4e7f-9a10-5c2d7e8f9b01/edit"),
            ("/BG/admin/login", "/admin/login"),
        ],
    )
    def test_maps_to_canonical(self, path, expected):
        assert canonical_admin_path(path, LOCALES) == expected

    @pytest.mark.parametrize("path", ["/admin", "/fr/admin", "/bg/news", "/bg/administration", "/"])
    def test_not_localized_admin(self, path):
        assert canonical_admin_path(path, LOCALES) is None


class TestClientRedirectPage:
    """Tests for client_redirect_page."""

    def test_uses_location_replace(self):
        page = client_redirect_page("/admin/dashboard")

        assert 'window.location.replace("/admin/dashboard")' in page
        assert 'name="robots" content="noindex"' in page

    def test_script_cannot_be_closed(self):
        page = client_redirect_page("/admin/</script><script>alert(1)</script>")

        assert page.count("</script>") == 1


class TestRedirectEndpoint:
    """Tests for GET /{locale}/admin/..."""

    def test_dashboard(self, client):
        response = client.get("/bg/admin/dashboard")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert response.headers["cache-control"] == "no-store"
        assert 'window.location.replace("/admin/dashboard")' in response.text

    def test_admin_root(self, client):
        response = client.get("/en/admin")

        assert 'window.location.replace("/admin")' in response.text

    def test_nested_path(self, client):
        response = client.get("/bg/admin/achievements/42/edit")

        assert 'window.location.replace("/admin/achievements/42/edit")' in response.text

    def test_query_string_kept(self, client):
        response = client.get("/en/admin/news", params={"page": 2})

        assert 'window.location.replace("/admin/news?page=2")' in response.text

    def test_unsupported_locale(self, client):
        response = client.get("/fr/admin/dashboard")

        assert response.status_code == 404
        assert response.json()["code"] == "PAGE_NOT_FOUND"

    def test_no_server_redirect(self, client):
        response = client.get("/bg/admin", follow_redirects=False)

        assert response.status_code == 200
