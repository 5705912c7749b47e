from flask import g

from ..extensions import db
from .repository import JobBoardRepository


def get_repo() -> JobBoardRepository:
    """Per-request repository bound to the Flask-SQLAlchemy session."""
    if "repo" not in g:
        g.repo = JobBoardRepository(db.session)
    return g.repo
