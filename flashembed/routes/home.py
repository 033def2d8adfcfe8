"""Web routes (HTML): flash message demo page."""

from fastapi import APIRouter, Form, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse

from flashembed.config import get_settings
from flashembed.store import push
from flashembed.web import render

router = APIRouter()


@router.get("/", response_class=HTMLResponse, tags=["web"])
def index(request: Request) -> HTMLResponse:
    """Render the demo page; pending messages replace its <flashmessages> tag."""
    return render(request, "index.html", {"title": get_settings().app_name})


@router.post("/", tags=["web"])
def submit(category: str = Form("info"), text: str = Form("")) -> RedirectResponse:
    """Push one message per non-empty line and redirect back (post-redirect-get)."""
    response = RedirectResponse("/", status_code=status.HTTP_303_SEE_OTHER)
    for line in text.split("\n"):
        line = line.strip()
        if not line:
            continue
        push(response, category, line)
    return response
