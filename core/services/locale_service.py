# =============================================================================
# core/services/locale_service.py - Locale Path Handling
# =============================================================================
# The admin back-office lives at non-localized paths (/admin/...). Older
# links carry a locale prefix (/bg/admin/...); these helpers map them to
# the canonical path and build the page that performs the client-side
# redirect.
# =============================================================================

import json


def split_locale(path: str, locales: list[str]) -> tuple[str | None, str]:
    """
    Separate a leading locale segment from a path.

    Returns:
        (locale or None, remaining path starting with "/")

    Example:
        split_locale("/bg/admin/news", ["bg", "en"])  # ("bg", "/admin/news")
        split_locale("/admin", ["bg", "en"])          # (None, "/admin")
    """
    segments = [s for s in path.split("/") if s]
    if segments and segments[0].lower() in locales:
        return segments[0].lower(), "/" + "/".join(segments[1:])
    return None, path or "/"


def canonical_admin_path(path: str, locales: list[str]) -> str | None:
    """
    Canonical form of a locale-prefixed admin path.

    Returns None when the path is not a locale-prefixed admin path.

    Example:
        canonical_admin_path("/bg/admin/dashboard", ["bg", "en"])  # "/admin/dashboard"
        canonical_admin_path("/en/admin/", ["bg", "en"])           # "/admin"
    """
    locale, rest = split_locale(path, locales)
    if locale is None:
        return None
    if rest != "/admin" and not rest.startswith("/admin/"):
        return None
    return rest.rstrip("/") or "/admin"


def client_redirect_page(target: str) -> str:
    """
    HTML document whose only effect is replacing the location with `target`.

    Nothing is rendered; location.replace keeps the legacy URL out of the
    browser history.
    """
    # json.dumps yields a valid JS string literal; "</" is escaped so the
    # target can't close the script element.
    literal = json.dumps(target).replace("</", "<\\/")
    return (
        "<!DOCTYPE html>"
        "<html><head>"
        '<meta charset="utf-8">'
        '<meta name="robots" content="noindex">'
        f"<script>window.location.replace({literal});</script>"
        "</head><body></body></html>"
    )
