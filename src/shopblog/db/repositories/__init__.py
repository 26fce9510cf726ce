"""
shopblog.db.repositories

Repository package.

Responsibilities:
- Group data-access repositories for the persistence layer.
- Provide the association traversals (posts of a user, categories of a post,
  comments of a commentable, ...) as queries over the declared relationships.
"""

# Package marker; repositories are imported directly from submodules.


# --- Module Notes -----------------------------------------------------------
# Repositories flush but never commit; the caller owns the transaction.
# Storage errors (IntegrityError) propagate unchanged.
