# =============================================================================
# app/routers/locale_redirect.py - Localized Admin Redirects
# =============================================================================
# The admin back-office is not localized, but old links and bookmarks
# point at /{locale}/admin/... These routes answer with a page that sends
# the browser to the canonical /admin/... path.
# =============================================================================

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from app.config import settings
from app.exceptions import PageNotFoundError
from core.services.locale_service import canonical_admin_path, client_redirect_page

router = APIRouter()


@router.get("/{locale}/admin", response_class=HTMLResponse, include_in_schema=False)
@router.get("/{locale}/admin/{rest:path}", response_class=HTMLResponse, include_in_schema=False)
async def redirect_localized_admin(request: Request, locale: str, rest: str = ""):
    """
    Client-side redirect to the non-localized admin path.

    Example: /bg/admin/dashboard -> /admin/dashboard
    """
    target = canonical_admin_path(request.url.path, settings.supported_locales_list)
    if target is None:
        raise PageNotFoundError(request.url.path)

    if request.url.query:
        target = f"{target}?{request.url.query}"

    return HTMLResponse(
        content=client_redirect_page(target),
        headers={"Cache-Control": "no-store"},
    )
