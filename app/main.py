from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException
from app.database import engine, SessionLocal
from app.config import CORS_ORIGINS, IS_PRODUCTION, RUN_MIGRATIONS, LOG_LEVEL, ADMIN_EMAIL, ADMIN_PASSWORD, ADMIN_NAME
from app.dependencies import format_validation_error
from app.domain.model_base import Base
from app.domain.user.service import ensure_admin
from app.exceptions import NotFound
from app.routers import auth, issue, comment, media, develop, router
from app.internal.admin import create_admin
from contextlib import asynccontextmanager
from alembic.config import Config as AlembicConfig
from alembic import command
import logging
import os

# Set up logging
logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger("sudharnayak")

ALEMBIC_INI = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "alembic.ini")

# Functions
def apply_migrations():
    try:
        command.upgrade(AlembicConfig(ALEMBIC_INI), "head")
        logger.info("Migrations applied successfully.")
    except Exception as e:
        logger.error(f"Error during migrations: {e}")
        raise

def seed_admin():
    if not (ADMIN_EMAIL and ADMIN_PASSWORD):
        return

    with SessionLocal() as db:
        ensure_admin(db, name=ADMIN_NAME, email=ADMIN_EMAIL, password=ADMIN_PASSWORD)

@asynccontextmanager
async def lifespan(app: FastAPI):
    if RUN_MIGRATIONS:
        logger.info("Applying migrations...")
        apply_migrations()

    seed_admin()

    yield


def create_db() -> None:
    """
    Function responsible for creating the database.
    """

    Base.metadata.create_all(bind=engine)
    logger.info("Database tables are ready.")


def register_exception_handlers(fapp: FastAPI) -> None:
    """
    Every error leaves the API as `{"message": "..."}`
    """

    @fapp.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        message = exc.detail
        if exc.status_code == status.HTTP_404_NOT_FOUND and not isinstance(exc, NotFound):
            message = f"Not Found - {request.url.path}"

        return JSONResponse(
            status_code=exc.status_code,
            content={"message": message},
            headers=getattr(exc, "headers", None)
        )

    @fapp.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": format_validation_error(exc)}
        )

    @fapp.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": str(exc) or "Internal Server Error"}
        )


def get_application() -> FastAPI:
    """
    Function responsible for preparing the FastAPI application.
    """

    fapp = FastAPI(
        title="SudharNayak API",
        swagger_ui_parameters={
            "syntaxHighlight.theme": "obsidian"
        },
        lifespan=lifespan
    )

    if not RUN_MIGRATIONS:
        create_db()

    fapp.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(fapp)

    fapp.include_router(router)
    fapp.include_router(auth.router)
    fapp.include_router(issue.router)
    fapp.include_router(comment.router)
    fapp.include_router(media.router)

    if not IS_PRODUCTION:
        fapp.include_router(develop.router)

    return fapp



app = get_application()

admin = create_admin(app)
