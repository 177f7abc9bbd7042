"""
Core Configuration Module

Centralizes environment configuration for the pooling service.
Provides a singleton Settings object with defaults suitable for local runs.

Engine tunables (weights, thresholds, top-K) are per-request MatchOptions,
not settings.

Usage:
    from poolmatch.core.config import settings

    print(settings.APP_ENV)
    print(settings.MAX_SHIPMENTS_PER_REQUEST)
"""

import os
from typing import List, Optional


class Settings:
    """
    Application settings loaded from environment variables.

    Properties are read on every access so tests can monkeypatch the
    environment without rebuilding the singleton.
    """

    # ==================== Application Settings ====================

    @property
    def APP_ENV(self) -> str:
        """Application environment: dev, staging, production"""
        return os.getenv("APP_ENV", "dev")

    @property
    def LOG_LEVEL(self) -> str:
        """Logging level: DEBUG, INFO, WARNING, ERROR, CRITICAL"""
        return os.getenv("LOG_LEVEL", "INFO")

    # ==================== Request Limits ====================

    @property
    def MAX_SHIPMENTS_PER_REQUEST(self) -> int:
        """Upper bound on shipments per pooling request (clustering is quadratic)"""
        return int(os.getenv("MAX_SHIPMENTS_PER_REQUEST", "500"))

    @property
    def MAX_CARRIERS_PER_REQUEST(self) -> int:
        """Upper bound on carriers per matching request"""
        return int(os.getenv("MAX_CARRIERS_PER_REQUEST", "500"))

    @property
    def POOL_PREVIEW_LIMIT(self) -> int:
        """Default number of pools returned by the cluster preview endpoint"""
        return int(os.getenv("POOL_PREVIEW_LIMIT", "5"))

    # ==================== CORS Settings ====================

    @property
    def CORS_ORIGINS(self) -> List[str]:
        """Allowed CORS origins"""
        origins_str = os.getenv("CORS_ORIGINS", "*")
        if origins_str == "*":
            return ["*"]
        return [origin.strip() for origin in origins_str.split(",")]

    @property
    def CORS_ALLOW_CREDENTIALS(self) -> bool:
        """Allow credentials in CORS requests"""
        return os.getenv("CORS_ALLOW_CREDENTIALS", "true").lower() == "true"


# ==================== Singleton Instance ====================

_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get the singleton Settings instance.

    Example:
        >>> from poolmatch.core.config import get_settings
        >>> settings = get_settings()
        >>> settings.APP_ENV
        'dev'
    """
    global _settings

    if _settings is None:
        _settings = Settings()

    return _settings


# Convenience singleton for direct import
settings = get_settings()

