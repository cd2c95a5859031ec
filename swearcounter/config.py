"""
SwearCounter Configuration

Central settings loaded from environment variables.
"""

import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()

_DEFAULT_PROJECTS_DIR = os.path.join(os.path.expanduser("~"), ".claude", "projects")


@dataclass(frozen=True)
class Settings:
    """Immutable application settings."""

    # --- Versioning ---
    ENGINE_VERSION: str = "1.0.0"

    # --- Detection thresholds ---
    # Not range-checked: >1 rejects every fuzzy candidate, <=0 accepts all.
    FUZZY_THRESHOLD: float = float(
        os.getenv("SWEARCOUNTER_FUZZY_THRESHOLD", "0.7")
    )
    SEMANTIC_THRESHOLD: float = float(
        os.getenv("SWEARCOUNTER_SEMANTIC_THRESHOLD", "0.5")
    )

    # --- Input limits ---
    MAX_TEXT_LENGTH: int = int(os.getenv("SWEARCOUNTER_MAX_TEXT_LENGTH", "50000"))

    # --- Transcripts ---
    PROJECTS_DIR: str = os.getenv("SWEARCOUNTER_PROJECTS_DIR", _DEFAULT_PROJECTS_DIR)

    # --- Server ---
    HOST: str = os.getenv("SWEARCOUNTER_HOST", "0.0.0.0")
    PORT: int = int(os.getenv("SWEARCOUNTER_PORT", "8000"))

    # --- CORS ---
    CORS_ORIGINS: str = os.getenv("SWEARCOUNTER_CORS_ORIGINS", "*")


settings = Settings()
