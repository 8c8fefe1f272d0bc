import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, List

from dotenv import load_dotenv


load_dotenv()


@dataclass(frozen=True)
class SettingKey:
    """Describes one configuration entry and whether it may be exposed to clients."""

    key: str
    title: str = ""
    default_value: Any = None
    is_public: bool = True


@dataclass(frozen=True)
class Config:
    """Application configuration loaded from environment variables."""

    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "production")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    DEFAULT_PAGE_SIZE: str = os.getenv("DEFAULT_PAGE_SIZE", "100")
    CONSOLE_TIMESTAMPS: str = os.getenv("CONSOLE_TIMESTAMPS", "true")
    REFERENCE_HEADER: str = os.getenv("REFERENCE_HEADER", "X-Reference-Name")

    CORS_ALLOWED_ORIGINS_ENV: str = os.getenv("CORS_ALLOWED_ORIGINS", "http://localhost:3000")

    @staticmethod
    def allowed_origins(extra_origins: List[str] | None = None) -> List[str]:
        env_origins = [o.strip() for o in Config.CORS_ALLOWED_ORIGINS_ENV.split(",") if o.strip()]
        merged = list(env_origins)
        if extra_origins:
            merged.extend(extra_origins)
        # Deduplicate while preserving order
        seen = set()
        result: List[str] = []
        for origin in merged:
            if origin not in seen:
                seen.add(origin)
                result.append(origin)
        return result

    @classmethod
    def default_page_size(cls) -> int:
        try:
            return max(int(cls.DEFAULT_PAGE_SIZE), 1)
        except (TypeError, ValueError):
            return 100

    @classmethod
    def console_timestamps(cls) -> bool:
        return cls.CONSOLE_TIMESTAMPS.strip().lower() not in ("0", "false", "no", "off")

    @classmethod
    def validate(cls) -> None:
        try:
            page_size = int(cls.DEFAULT_PAGE_SIZE)
        except (TypeError, ValueError):
            raise ValueError("DEFAULT_PAGE_SIZE environment variable must be an integer")
        if page_size < 1:
            raise ValueError("DEFAULT_PAGE_SIZE environment variable must be at least 1")
        if not isinstance(logging.getLevelName(cls.LOG_LEVEL.upper()), int):
            raise ValueError(f"LOG_LEVEL environment variable has unknown level: {cls.LOG_LEVEL}")
        if not cls.REFERENCE_HEADER.strip():
            raise ValueError("REFERENCE_HEADER environment variable must not be empty")

    @classmethod
    def settings_catalog(cls) -> List[SettingKey]:
        return [
            SettingKey("ENVIRONMENT", "Deployment environment", "production"),
            SettingKey("LOG_LEVEL", "Minimum log level", "INFO", is_public=False),
            SettingKey("DEFAULT_PAGE_SIZE", "Default page size for list queries", "100"),
            SettingKey("CONSOLE_TIMESTAMPS", "Prefix console output with timestamps", "true", is_public=False),
            SettingKey("REFERENCE_HEADER", "Header carrying the caller's reference name", "X-Reference-Name"),
            SettingKey("CORS_ALLOWED_ORIGINS_ENV", "Origins allowed to call the API", "http://localhost:3000", is_public=False),
        ]

    @classmethod
    def public_settings(cls) -> Dict[str, Any]:
        return {
            setting.key: getattr(cls, setting.key, setting.default_value)
            for setting in cls.settings_catalog()
            if setting.is_public
        }
