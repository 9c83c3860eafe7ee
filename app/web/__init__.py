"""Server-rendered HTML pages."""

from fastapi import APIRouter

from app.web import dashboard, home, login, register

router = APIRouter()
router.include_router(home.router, tags=["pages"])
router.include_router(register.router, tags=["pages"])
router.include_router(login.router, tags=["pages"])
router.include_router(dashboard.router, tags=["pages"])
