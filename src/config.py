"""
Parser bot configuration.
Centralized config management.
"""

import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Config:
    """Application configuration."""

    # Telegram
    BOT_TOKEN: str = os.getenv("TELEGRAM_BOT_TOKEN", "")

    # Parses scoring at or below this go back to the user for correction
    CONFIDENCE_THRESHOLD: int = int(os.getenv("CONFIDENCE_THRESHOLD", "30"))

    # Web server
    WEB_HOST: str = os.getenv("WEB_HOST", "0.0.0.0")
    WEB_PORT: int = int(os.getenv("WEB_PORT", "5000"))

    # Debug
    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"

    def validate(self) -> None:
        """Validate required config."""
        if not self.BOT_TOKEN:
            raise ValueError("TELEGRAM_BOT_TOKEN is required")
        if not 0 <= self.CONFIDENCE_THRESHOLD <= 100:
            raise ValueError("CONFIDENCE_THRESHOLD must be between 0 and 100")


config = Config()
