"""Health-check helper used by the API."""

from sip_backend import __version__


def get_health_status() -> dict:
    """Return the static status payload for ``GET /api/health``."""
    return {"status": "ok", "version": __version__}
