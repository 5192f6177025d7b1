"""
API routes for the portfolio tracker.
"""

from fastapi import APIRouter

from app.api import portfolio, properties, renovations, settings

router = APIRouter()

# Include sub-routers
router.include_router(properties.router, prefix="/properties", tags=["properties"])
router.include_router(renovations.router, prefix="/renovations", tags=["renovations"])
router.include_router(portfolio.router, prefix="/portfolio", tags=["portfolio"])
router.include_router(settings.router, prefix="/settings", tags=["settings"])
