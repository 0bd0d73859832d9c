import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api import feedback
from .config.logging_config import setup_logging
from .config.settings import settings, warn_if_env_file_missing
from .exceptions import FeedbackStoreError
from .middleware.cors import CORSHeadersMiddleware
from .models.database import init_db

logger = logging.getLogger(__name__)

PORT = 8080

app = FastAPI(
    title="Feedback Service",
    description="Microservice for managing feedback records",
    version="1.0.0",
    redirect_slashes=False,
)

if settings.CORS_ENABLED:
    app.add_middleware(
        CORSHeadersMiddleware,
        allow_origin=settings.CORS_ALLOW_ORIGIN,
        allow_methods=settings.CORS_ALLOW_METHODS,
        allow_headers=settings.CORS_ALLOW_HEADERS,
    )

@app.on_event("startup")
def on_startup():
    warn_if_env_file_missing()
    init_db()

@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if any(err["loc"] and err["loc"][0] == "path" for err in errors):
        return PlainTextResponse("Invalid ID", status_code=400)
    detail = "; ".join(err["msg"] for err in errors)
    return PlainTextResponse(f"Invalid request body: {detail}", status_code=400)

@app.exception_handler(FeedbackStoreError)
async def store_exception_handler(request: Request, exc: FeedbackStoreError):
    return PlainTextResponse(exc.message, status_code=exc.status_code)

@app.get("/", response_class=PlainTextResponse)
def read_root():
    return "Hello, Feedback Manager!"

@app.get("/health")
def health_check():
    return {"status": "ok"}

app.include_router(
    feedback.router,
    prefix="/feedback",
    tags=["Feedback"],
)


def run():
    setup_logging(settings.LOG_LEVEL)
    logger.info("Server running on http://localhost:%s", PORT)
    uvicorn.run(app, host="0.0.0.0", port=PORT)


if __name__ == "__main__":
    run()
