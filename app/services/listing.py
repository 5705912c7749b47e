# app/services/listing.py
from dataclasses import dataclass, field, replace
from typing import Iterable, Optional

from ..models.job import JobPost, JobState, JobType

FILTER_FIELDS = ("search", "job_type", "location")


@dataclass(frozen=True)
class JobFilters:
    search: str = ""
    job_type: Optional[JobType] = None
    location: str = ""

    @classmethod
    def from_args(cls, args) -> "JobFilters":
        return cls(
            search=(args.get("search") or "").strip(),
            job_type=JobType.coerce(args.get("job_type")),
            location=(args.get("location") or "").strip(),
        )

    @property
    def active(self) -> bool:
        return bool(self.search or self.job_type or self.location)

    def toggle(self, name: str, value) -> "JobFilters":
        """Single-select chip: picking the current value clears it."""
        if name == "job_type":
            value = JobType.coerce(value)
        if getattr(self, name) == value:
            return self.without(name)
        return replace(self, **{name: value})

    def without(self, name: str) -> "JobFilters":
        return replace(self, **{name: None if name == "job_type" else ""})

    def to_args(self) -> dict:
        """Query-string form; empty filters are left out."""
        args = {}
        if self.search:
            args["search"] = self.search
        if self.job_type:
            args["job_type"] = self.job_type.value
        if self.location:
            args["location"] = self.location
        return args


@dataclass
class JobPartition:
    active: list = field(default_factory=list)
    closed: list = field(default_factory=list)
    deleted: list = field(default_factory=list)

    def tab(self, state: JobState) -> list:
        return getattr(self, state.value)

    @property
    def counts(self) -> dict:
        return {s: len(self.tab(s)) for s in JobState}


def partition_jobs(jobs: Iterable[JobPost]) -> JobPartition:
    """Split jobs into disjoint active/closed/deleted lists, keeping order."""
    part = JobPartition()
    for job in jobs:
        part.tab(job.state).append(job)
    return part


@dataclass(frozen=True)
class Facets:
    job_types: tuple = ()
    locations: tuple = ()


def compute_facets(jobs: Iterable[JobPost]) -> Facets:
    """Distinct job types and locations, in first-seen order.

    Always called with the unfiltered open population so the chips do not
    move as filters are applied.
    """
    job_types, locations = [], []
    for job in jobs:
        if job.job_type and job.job_type not in job_types:
            job_types.append(job.job_type)
        if job.location and job.location not in locations:
            locations.append(job.location)
    return Facets(job_types=tuple(job_types), locations=tuple(locations))


def list_company_jobs(repo, company_id: int) -> JobPartition:
    return partition_jobs(repo.company_jobs(company_id))


def search_open_jobs(repo, filters: JobFilters):
    """Return ``(jobs, all_jobs, facets)`` for the public listing."""
    all_jobs = repo.open_jobs()
    jobs = repo.open_jobs(filters) if filters.active else all_jobs
    return jobs, all_jobs, compute_facets(all_jobs)
