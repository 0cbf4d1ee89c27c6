"""Environment-driven settings for the Flask app."""

import os


def _split_origins(raw: str) -> list[str]:
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


class Config:
    CORS_ORIGINS = _split_origins(
        os.environ.get("SIP_CORS_ORIGINS", "http://localhost:5173,http://127.0.0.1:5173")
    )
    LOG_LEVEL = os.environ.get("SIP_LOG_LEVEL", "INFO").upper()
    PORT = int(os.environ.get("SIP_PORT", "5000"))
