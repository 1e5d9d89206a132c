from fastapi import APIRouter, Depends, status
from fastapi.responses import HTMLResponse, RedirectResponse

from shorty.dependencies import get_url_service, get_short_code_strategy
from shorty.exceptions import NotFound
from shorty.services.short_code_strategies import ShortCodeStrategy
from shorty.services.url_service import ShortLinkService

router = APIRouter(tags=["redirect"])


def not_found() -> HTMLResponse:
    return HTMLResponse("<h1>404 Not Found</h1>", status_code=status.HTTP_404_NOT_FOUND)


@router.get("/{code:path}")
async def redirect_to_url(
    code: str,
    url_service: ShortLinkService = Depends(get_url_service),
    strategy: ShortCodeStrategy = Depends(get_short_code_strategy)
):
    """
    Redirect to the original URL.
    
    Flow:
    1. Strip path delimiters and check the code against the alphabet
    2. Resolve it (records the hit unless tracking is off)
    3. 301 to the stored URL
    
    Malformed and unknown codes both get the same 404.
    """
    code = code.replace("/", "")
    if not strategy.alphabet.matches(code):
        return not_found()
    
    try:
        url = await url_service.resolve(code)
    except NotFound:
        return not_found()
    
    return RedirectResponse(url=url, status_code=status.HTTP_301_MOVED_PERMANENTLY)
