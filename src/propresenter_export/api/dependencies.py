"""
API Dependencies - Shared settings and export configuration.
"""

import os
from contextlib import asynccontextmanager
from typing import List

from loguru import logger

from ..config import ExportConfig, get_profile


# =============================================================================
# CONFIGURATION
# =============================================================================

class Settings:
    """API configuration settings."""

    VERSION: str = "1.0.0"

    # Export
    DEFAULT_PROFILE: str = os.getenv("PROPRESENTER_PROFILE", "pro6")
    MAX_WORKERS: int = max(1, int(os.getenv("PROPRESENTER_MAX_WORKERS", "1")))

    # API
    CORS_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:5173"]
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")


settings = Settings()


# =============================================================================
# DEPENDENCY FUNCTIONS
# =============================================================================

def get_export_config(profile: str = "") -> ExportConfig:
    """
    Export configuration for one request.

    Raises:
        KeyError: unknown profile name
    """
    return ExportConfig.from_env(
        profile=profile or settings.DEFAULT_PROFILE,
        max_workers=settings.MAX_WORKERS,
    )


# =============================================================================
# LIFESPAN MANAGEMENT
# =============================================================================

@asynccontextmanager
async def lifespan(app):
    """Manage startup and shutdown."""
    logger.info("🚀 Starting export API...")

    try:
        get_profile(settings.DEFAULT_PROFILE)
        logger.info(f"✅ Default profile: {settings.DEFAULT_PROFILE}")
    except KeyError as e:
        logger.warning(f"⚠️ {e}")

    yield

    logger.info("👋 Export API stopped")
