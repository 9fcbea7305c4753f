"""Centralized configuration — all env vars in one place."""

import os


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.cors_origins: list[str] = os.getenv("CORS_ORIGINS", "*").split(",")
        self.git_sha: str = os.getenv("GIT_SHA", "unknown")
        self.environment: str = os.getenv("ENVIRONMENT", "local")

        # FotMob upstream
        self.api_base_url: str = os.getenv("FOTMOB_API_BASE_URL", "https://www.fotmob.com/api/")
        self.user_agent: str = os.getenv("FOTMOB_USER_AGENT", "Mozilla/5.0")
        self.default_time_zone: str = os.getenv("DEFAULT_TIME_ZONE", "Europe/Paris")

        # x-mas bootstrap service
        self.bootstrap_url: str = os.getenv("XMAS_BOOTSTRAP_URL", "http://46.101.91.154:6006/")
        self.fallback_value: str = os.getenv("XMAS_FALLBACK_VALUE", "static-fallback-value")

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    def validate(self) -> list[str]:
        """Return list of required env vars that are set but empty."""
        required = ["FOTMOB_API_BASE_URL", "XMAS_BOOTSTRAP_URL", "XMAS_FALLBACK_VALUE"]
        return [var for var in required if not getattr(self, _attr_for(var))]


settings = Settings()


def _attr_for(env_var: str) -> str:
    """Map env var name to Settings attribute name."""
    mapping = {
        "FOTMOB_API_BASE_URL": "api_base_url",
        "XMAS_BOOTSTRAP_URL": "bootstrap_url",
        "XMAS_FALLBACK_VALUE": "fallback_value",
    }
    return mapping.get(env_var, env_var.lower())
