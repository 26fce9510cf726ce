"""
shopblog

Top-level package for the shop/blog sample service.

Responsibilities:
- Expose package version metadata.
"""

__all__ = ["__version__"]

__version__ = "0.1.0"


# --- Module Notes -----------------------------------------------------------
# Keep this file minimal; importing `shopblog` must not touch the database.
