# server/main.py

import logging
import os
from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException
from api import auth, blog
from core.errors import BlogApiError, UnknownUserError, ValidationError
from core.observability import RequestLoggingMiddleware, setup_logging
from core.responses import failed, success
from core.validation import error_map
from database import init_db


load_dotenv()
setup_logging()

logger = logging.getLogger(__name__)

init_db()

app = FastAPI(title="Blog", description="Blog Swagger", version="1.0.0")

app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=os.getenv("CORS_ORIGINS", "*").split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth.router)
app.include_router(blog.router)


# -------------------------------
# Error → envelope mapping
# -------------------------------

@app.exception_handler(ValidationError)
def handle_validation_error(request: Request, exc: ValidationError):
    return failed(exc.message, exc.errors, exc.status_code)


@app.exception_handler(UnknownUserError)
def handle_unknown_user(request: Request, exc: UnknownUserError):
    logger.error("Token requested for unknown user %s", exc.user_id)
    return failed(exc.message, status_code=exc.status_code)


@app.exception_handler(BlogApiError)
def handle_api_error(request: Request, exc: BlogApiError):
    return failed(exc.message, status_code=exc.status_code)


@app.exception_handler(RequestValidationError)
def handle_request_validation_error(request: Request, exc: RequestValidationError):
    return failed(ValidationError.message, error_map(exc.errors()), ValidationError.status_code)


@app.exception_handler(StarletteHTTPException)
def handle_http_exception(request: Request, exc: StarletteHTTPException):
    return failed(str(exc.detail), status_code=exc.status_code, headers=exc.headers)


@app.get("/health")
def health():
    return success("OK")
