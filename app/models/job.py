# app/models/job.py
import enum
from datetime import datetime
from ..extensions import db
from .mixins import TimestampMixin, SoftDeleteMixin, utcnow


class JobType(str, enum.Enum):
    FULL_TIME = "FULL_TIME"
    PART_TIME = "PART_TIME"
    CONTRACT = "CONTRACT"

    @property
    def label(self) -> str:
        return self.value.replace("_", " ").title()

    @classmethod
    def coerce(cls, value):
        """Return the member for ``value`` or None when it is not a job type."""
        if isinstance(value, cls):
            return value
        try:
            return cls((value or "").strip().upper())
        except ValueError:
            return None

    @classmethod
    def choices(cls):
        return [(m.value, m.label) for m in cls]


class JobState(str, enum.Enum):
    ACTIVE = "active"
    CLOSED = "closed"
    DELETED = "deleted"

    @property
    def label(self) -> str:
        return self.value.title()


def job_state(closed_at: datetime | None, deleted_at: datetime | None) -> JobState:
    # deleted dominates closed
    if deleted_at is not None:
        return JobState.DELETED
    if closed_at is not None:
        return JobState.CLOSED
    return JobState.ACTIVE


class JobPost(TimestampMixin, SoftDeleteMixin, db.Model):
    __tablename__ = "job_post"

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text, nullable=False)
    location = db.Column(db.String(120), nullable=True)            # e.g. "Nairobi · Hybrid" or "Remote"
    job_type = db.Column(db.Enum(JobType, name="job_type_enum"), nullable=False, default=JobType.FULL_TIME, index=True)
    company_id = db.Column(db.Integer, db.ForeignKey("company.id"), nullable=False, index=True)
    created_by_id = db.Column(db.Integer, db.ForeignKey("user.id"), nullable=False)
    closed_at = db.Column(db.DateTime, nullable=True, index=True)

    company = db.relationship("Company", backref=db.backref("job_posts", lazy="dynamic"))
    created_by = db.relationship("User")

    @property
    def state(self) -> JobState:
        return job_state(self.closed_at, self.deleted_at)

    @property
    def is_active(self) -> bool:
        return self.state is JobState.ACTIVE

    @property
    def is_closed(self) -> bool:
        return self.state is JobState.CLOSED

    def close(self, when: datetime | None = None):
        self.closed_at = when or utcnow()

    def reopen(self):
        self.closed_at = None

    def __repr__(self):
        return f"<JobPost {self.id} {self.title!r} {self.state.value}>"
