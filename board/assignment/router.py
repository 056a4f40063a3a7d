import logging
from http import HTTPStatus

from fastapi import APIRouter, Depends, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import HTMLResponse

from board.assignment import views
from board.config import settings
from board.db import (
    LookupRequest,
    QueryFailure,
    build_email_lookup,
    execute,
    get_connection,
)
from board.escaping import encode
from board.models import Comment
from board.store import CommentStore

logger = logging.getLogger(__name__)
# Board routes match exact paths only and stay out of the OpenAPI schema
router = APIRouter(
    prefix=settings.mount_prefix,
    tags=["assignment"],
    include_in_schema=False,
    redirect_slashes=False,
)

HTML_MEDIA_TYPE = "text/html; charset=UTF-8"
METHODS = ["GET", "POST"]


def html_response(
    markup: str, status_code: int = 200, headers: dict[str, str] | None = None
) -> HTMLResponse:
    return HTMLResponse(
        content=markup, status_code=status_code, headers=headers, media_type=HTML_MEDIA_TYPE
    )


async def read_param(request: Request, name: str) -> str:
    """Return the first value of a request parameter, or "" if it is absent.

    Looks at the query string first and then, for POST requests, the form body.
    """
    values = request.query_params.getlist(name)
    if not values and request.method == "POST":
        form = await request.form()
        values = form.getlist(name)
    value = values[0] if values else None
    return value if isinstance(value, str) else ""


def get_comment_store(request: Request) -> CommentStore:
    return request.app.state.comment_store


def render_not_found(path: str) -> str:
    return views.layout("404", views.not_found_sections(settings.mount_prefix, path))


def render_error(status_code: int) -> str:
    try:
        phrase = HTTPStatus(status_code).phrase
    except ValueError:
        phrase = "Error"
    title = f"{status_code} {phrase}"
    sections = views.notice_sections(settings.mount_prefix, title, "The request could not be handled.")
    return views.layout(title, sections)


def lookup_users(lookup: LookupRequest) -> list:
    """Open the users database and run one lookup. Blocking; call from a worker thread."""
    with get_connection() as conn:
        return execute(lookup, conn)


@router.api_route("/", methods=METHODS, response_class=HTMLResponse)
async def home():
    sections = views.home_sections(settings.mount_prefix)
    return html_response(views.layout("Assignment Home", sections))


if settings.mount_prefix:
    router.add_api_route(
        "", home, methods=METHODS, response_class=HTMLResponse, include_in_schema=False
    )


@router.api_route("/comment", methods=METHODS, response_class=HTMLResponse)
async def submit_comment(request: Request, store: CommentStore = Depends(get_comment_store)):
    author = await read_param(request, "author")
    text = await read_param(request, "text")
    store.add(Comment(author=author, text=text))

    safe_author = encode(author)
    safe_text = encode(text)
    sections = views.thank_you_sections(settings.mount_prefix, f"Thanks, {safe_author}", safe_text)
    return html_response(views.layout("Submitted", sections))


@router.api_route("/search", methods=METHODS, response_class=HTMLResponse)
async def search(request: Request):
    safe_q = encode(await read_param(request, "q"))
    sections = views.search_sections(settings.mount_prefix, safe_q, views.render_items(safe_q))
    return html_response(views.layout("Search", sections))


@router.api_route("/userByEmail", methods=METHODS, response_class=HTMLResponse)
async def user_by_email(request: Request):
    lookup = build_email_lookup(await read_param(request, "email"))
    try:
        rows = await run_in_threadpool(lookup_users, lookup)
    except QueryFailure as e:
        logger.warning(f"User lookup failed: {e}")
        message = "Lookup failed. Please try again later."
    else:
        logger.info(f"User lookup returned {len(rows)} row(s)")
        message = "Queried by email (parameterized)."

    sections = views.notice_sections(settings.mount_prefix, "Lookup", message)
    return html_response(views.layout("UserByEmail", sections))


@router.api_route("/list", methods=METHODS, response_class=HTMLResponse)
async def list_comments(store: CommentStore = Depends(get_comment_store)):
    comments = store.recent()
    sections = views.comment_list_sections(settings.mount_prefix, comments)
    return html_response(views.layout("All Comments", sections))
