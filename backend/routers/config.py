"""Configuration API endpoints"""

from __future__ import annotations

from fastapi import APIRouter
from pydantic import BaseModel

from services.config_manager import ConfigManager

router = APIRouter()


class ConfigResponse(BaseModel):
    """Active settings (read-only)"""

    store: dict
    render: dict


@router.get("", response_model=ConfigResponse)
async def get_config() -> ConfigResponse:
    """Get current configuration"""
    config = ConfigManager.get_instance().get_config()

    store = config.get("store", {})
    # Only the backend name is exposed, not filesystem locations
    return ConfigResponse(
        store={"backend": store.get("backend", "memory")},
        render=config.get("render", {}),
    )
