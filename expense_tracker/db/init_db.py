"""
Database initialization helpers.

Models are imported here so their tables get registered on Base.metadata
before ``create_all`` runs.
"""

import logging

from sqlalchemy.engine import Engine

from expense_tracker.db.session import engine as default_engine
from expense_tracker.models.base import Base
from expense_tracker.models import user  # noqa: F401

logger = logging.getLogger(__name__)


def init_db(engine: Engine | None = None) -> None:
    """
    Create all tables based on SQLAlchemy models.
    """
    bind = engine or default_engine
    logger.info("Creating database tables on %s", bind.url.render_as_string(hide_password=True))
    Base.metadata.create_all(bind=bind)
