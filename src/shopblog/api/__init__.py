"""
shopblog.api

API package for the shopblog service.

Responsibilities:
- FastAPI app factory and resource router modules.
- API-layer dependency wiring and request/response models.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# The API layer stays thin: request validation + delegation to repositories.
