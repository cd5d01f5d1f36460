"""
Originality Configuration

Central settings loaded from environment variables.
"""

import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    """Immutable application settings."""

    # --- Versioning ---
    ENGINE_VERSION: str = "1.0.0"
    API_VERSION: str = "1"

    # --- Server ---
    HOST: str = os.getenv("ORIGINALITY_HOST", "0.0.0.0")
    PORT: int = int(os.getenv("ORIGINALITY_PORT", "8000"))

    # --- CORS ---
    CORS_ORIGINS: str = os.getenv("ORIGINALITY_CORS_ORIGINS", "*")

    # --- Input bounds (enforced at the API boundary) ---
    MAX_TEXT_LENGTH: int = int(os.getenv("ORIGINALITY_MAX_TEXT_LENGTH", "200000"))
    MAX_MATCHES: int = int(os.getenv("ORIGINALITY_MAX_MATCHES", "500"))
    MAX_SENTENCES: int = int(os.getenv("ORIGINALITY_MAX_SENTENCES", "5000"))
    MAX_BODY_BYTES: int = int(os.getenv("ORIGINALITY_MAX_BODY_BYTES", "2097152"))


settings = Settings()
