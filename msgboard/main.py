import logging

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from msgboard import __version__
from msgboard.core.config import get_settings
from msgboard.core.cors import cors_middleware
from msgboard.routers import listing, msg

logger = logging.getLogger(__name__)

_settings = get_settings()


def configure_logging(level: str = _settings.LOG_LEVEL) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


app = FastAPI(
    title="Message Board Service",
    version=__version__,
    description="Message submission and listing with permissive CORS.",
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
    redirect_slashes=False,
)

# OPTIONS on any path is answered here, before routing.
app.middleware("http")(cors_middleware)

# Register routers.
app.include_router(msg.router)
app.include_router(listing.router)


@app.exception_handler(StarletteHTTPException)
async def plain_text_http_error(request: Request, exc: StarletteHTTPException):
    """Render every HTTP error, the router's own 404/405 included, as plain text."""
    return PlainTextResponse(
        str(exc.detail), status_code=exc.status_code, headers=exc.headers
    )


def run() -> None:
    import uvicorn

    configure_logging()
    logger.info("服务器启动在端口 %d...", _settings.PORT)
    logger.info("支持CORS跨域请求")
    logger.info("访问 http://localhost:%d 查看API状态", _settings.PORT)
    uvicorn.run(
        "msgboard.main:app",
        host=_settings.HOST,
        port=_settings.PORT,
        reload=_settings.RELOAD,
        log_level=_settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    run()
