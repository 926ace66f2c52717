"""Top-level web router — aggregates the page and health routers."""

from fastapi import APIRouter

from pressroom.presentation.web.endpoints.articles import router as articles_router
from pressroom.presentation.web.endpoints.health import router as health_router

router = APIRouter()
router.include_router(health_router)
router.include_router(articles_router)
