import re
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from fastapi.responses import Response

from shorty.api.formatting import OutputFormat, render_link
from shorty.api.v1.redirect import not_found
from shorty.config import settings
from shorty.dependencies import get_url_service
from shorty.exceptions import NotFound
from shorty.schemas.url import URL_PATTERN, URLCreate, URLResponse, URLStats
from shorty.services.url_service import ShortLinkService

router = APIRouter(prefix="/urls", tags=["urls"])

# Register through query parameters on the site root: /?url=...&format=...
query_router = APIRouter(tags=["urls"])

_url_re = re.compile(URL_PATTERN)


def short_link_for(request: Request, code: str) -> str:
    """Prefix code with the configured hostname (or the request's base URL)"""
    hostname = settings.hostname or str(request.base_url)
    return f"{hostname.rstrip('/')}/{code}"


def ensure_allowed(request: Request, password: Optional[str]) -> None:
    """
    Apply the registration access rules.
    
    - A non-empty whitelist limits registration to those client IPs
    - A configured password must be supplied verbatim
    """
    if settings.whitelist:
        client_ip = request.client.host if request.client else None
        if client_ip not in settings.whitelist:
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Not allowed.")

    if settings.password and settings.password != (password or ""):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Not allowed.")


@query_router.get("/")
async def register_from_query(
    request: Request,
    url: str = "",
    output_format: str = Query("", alias="format"),
    password: str = "",
    url_service: ShortLinkService = Depends(get_url_service)
) -> Response:
    """Shorten ?url=..., rendered as text, json, xml or an HTML link"""
    if not url:
        return not_found()

    ensure_allowed(request, password)

    if not _url_re.match(url):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Bad input.")

    code = await url_service.register(url)
    return render_link(short_link_for(request, code), OutputFormat.parse(output_format))


@router.post("/", response_model=URLResponse, status_code=status.HTTP_201_CREATED)
async def create_short_url(
    url_data: URLCreate,
    request: Request,
    url_service: ShortLinkService = Depends(get_url_service)
):
    """Shorten a URL; the same URL always gets the same code"""
    ensure_allowed(request, url_data.password)

    code = await url_service.register(url_data.url)
    return URLResponse(code=code, short_url=short_link_for(request, code), url=url_data.url)


@router.get("/{code}/stats", response_model=URLStats)
async def get_url_stats(
    code: str,
    url_service: ShortLinkService = Depends(get_url_service)
):
    """Get statistics for a short URL (does not count as a hit)"""
    try:
        record = await url_service.stats(code)
    except NotFound:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Short URL not found"
        )
    return URLStats(
        code=code,
        url=record.url,
        hits=record.hits,
        created=record.created,
        accessed=record.accessed
    )
