"""Health check and settings endpoints."""

from fastapi import APIRouter, HTTPException
from pydantic import ValidationError

from sample_chat import config

router = APIRouter()


@router.get("/health")
async def health():
    """Health check."""
    return {"status": "ok"}


@router.get("/settings")
async def get_settings():
    """Get global settings (example role, default budget, token estimate)."""
    return config.get_config()


@router.patch("/settings")
async def update_settings(body: dict):
    """Update global settings (partial merge)."""
    try:
        return config.update_config(body)
    except ValidationError as e:
        raise HTTPException(422, e.errors(include_url=False))
