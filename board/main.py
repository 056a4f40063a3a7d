import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from starlette.exceptions import HTTPException as StarletteHTTPException

from board.assignment.router import html_response, render_error, render_not_found
from board.assignment.router import router as assignment_router
from board.config import settings
from board.store import CommentStore

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Comment board started at {settings.mount_prefix or '/'}")
    yield
    logger.info(f"Comment board stopped ({len(app.state.comment_store)} comments discarded)")


app = FastAPI(title="Comment Board", version="0.1.0", lifespan=lifespan, redirect_slashes=False)
app.state.comment_store = CommentStore(limit=settings.comment_limit)
app.include_router(assignment_router)


@app.get("/health")
async def health():
    return {"status": "ok"}


@app.exception_handler(StarletteHTTPException)
async def http_error(request: Request, exc: StarletteHTTPException):
    # Error detail stays out of the page
    if exc.status_code == 404:
        markup = render_not_found(request.url.path)
    else:
        markup = render_error(exc.status_code)
    return html_response(markup, status_code=exc.status_code, headers=exc.headers)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port)
