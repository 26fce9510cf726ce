"""
shopblog.db

Persistence package (SQLAlchemy async).

Responsibilities:
- Provide ORM models and their associations, engine/session setup,
  repositories and the seed routine.
"""

# Package marker.
