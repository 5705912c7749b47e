# app/models/mixins.py
from datetime import datetime, timezone

from sqlalchemy import event

from ..extensions import db


def utcnow() -> datetime:
    # naive UTC, matching what the DateTime columns store
    return datetime.now(timezone.utc).replace(tzinfo=None)


class TimestampMixin:
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False, index=True)
    updated_at = db.Column(db.DateTime, default=utcnow, onupdate=utcnow, nullable=False)


@event.listens_for(TimestampMixin, "before_insert", propagate=True)
def _stamp_new_row(mapper, connection, target):
    # a row that was never edited has updated_at == created_at
    if target.created_at is None:
        target.created_at = utcnow()
    if target.updated_at is None:
        target.updated_at = target.created_at


class SoftDeleteMixin:
    """Rows are never removed; ``deleted_at`` marks them inactive."""

    deleted_at = db.Column(db.DateTime, nullable=True, index=True)

    def soft_delete(self, when: datetime | None = None):
        self.deleted_at = when or utcnow()

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None
