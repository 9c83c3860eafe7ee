"""FastAPI application entrypoint. No business logic; only wiring and middleware."""

from dotenv import load_dotenv

load_dotenv()

from fastapi import FastAPI

from app.api.v1 import router as v1_router
from app.core.config import settings
from app.web import router as web_router

app = FastAPI(
    title=f"{settings.IFACE_TITLE} API",
    version="0.1.0",
    docs_url="/docs" if settings.APP_ENV == "dev" else None,
    redoc_url="/redoc" if settings.APP_ENV == "dev" else None,
)

app.include_router(v1_router, prefix=settings.API_V1_PREFIX)
app.include_router(web_router)
