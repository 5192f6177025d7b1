"""
Settings API endpoints: onboarding flag and data reset.
"""

import logging

from fastapi import APIRouter, Depends

from app.api.dependencies import get_record_store
from app.store import RecordStore

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/onboarding")
async def get_onboarding(store: RecordStore = Depends(get_record_store)):
    """Whether the welcome flow has been completed."""
    return {"onboarded": store.is_onboarded()}


@router.post("/onboarding")
async def complete_onboarding(store: RecordStore = Depends(get_record_store)):
    saved = store.set_onboarded()
    return {"onboarded": True, "saved": saved}


@router.delete("/onboarding")
async def reset_onboarding(store: RecordStore = Depends(get_record_store)):
    """Reset onboarding so the welcome flow shows again."""
    saved = store.reset_onboarding()
    return {"onboarded": False, "saved": saved}


@router.post("/clear")
async def clear_all_data(store: RecordStore = Depends(get_record_store)):
    """Remove all properties, renovations and the onboarding flag."""
    cleared = store.clear_all()
    logger.info(f"Cleared all stored data (success={cleared})")
    return {"cleared": cleared}
