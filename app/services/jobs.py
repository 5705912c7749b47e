# app/services/jobs.py
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..models.job import JobPost, JobState, JobType
from .errors import ValidationError

log = logging.getLogger(__name__)


@dataclass
class JobInput:
    title: str = ""
    description: str = ""
    location: Optional[str] = None
    job_type: JobType = JobType.FULL_TIME

    @classmethod
    def from_job(cls, job: JobPost) -> "JobInput":
        return cls(title=job.title, description=job.description, location=job.location, job_type=job.job_type)

    def validate(self) -> "JobInput":
        title = (self.title or "").strip()
        description = (self.description or "").strip()
        if not title:
            raise ValidationError("Job title is required")
        if not description:
            raise ValidationError("Job description is required")
        job_type = JobType.coerce(self.job_type)
        if job_type is None:
            raise ValidationError("Choose a valid job type")
        return JobInput(
            title=title,
            description=description,
            location=(self.location or "").strip() or None,
            job_type=job_type,
        )


def create_job(repo, company_id: int, creator_id: int, data: JobInput) -> JobPost:
    clean = data.validate()
    job = repo.add_job(
        title=clean.title,
        description=clean.description,
        location=clean.location,
        job_type=clean.job_type,
        company_id=company_id,
        created_by_id=creator_id,
    )
    repo.commit()
    log.info("job %s created for company %s", job.id, company_id)
    return job


def update_job(repo, job: JobPost, data: JobInput) -> JobPost:
    clean = data.validate()
    job.title = clean.title
    job.description = clean.description
    job.location = clean.location
    job.job_type = clean.job_type
    repo.commit()
    log.info("job %s updated", job.id)
    return job


def toggle_status(repo, job: JobPost, now: datetime | None = None) -> JobPost:
    """Close an active job or reopen a closed one. Deleted jobs are left alone."""
    state = job.state
    if state is JobState.DELETED:
        return job
    if state is JobState.ACTIVE:
        job.close(now)
    else:
        job.reopen()
    repo.commit()
    log.info("job %s is now %s", job.id, job.state.value)
    return job


def delete_job(repo, job: JobPost, now: datetime | None = None) -> JobPost:
    if job.state is JobState.DELETED:
        return job
    job.soft_delete(now)
    repo.commit()
    log.info("job %s deleted", job.id)
    return job
