# app/services/repository.py
import logging
from typing import Optional

from sqlalchemy import or_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import joinedload

from ..models.user import User
from ..models.company import Company, EmployerProfile
from ..models.job import JobPost
from .errors import WriteFailure

log = logging.getLogger(__name__)


def _like_escape(term: str) -> str:
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class JobBoardRepository:
    """Data access for the four job board tables.

    Every service function receives one of these instead of touching
    ``db.session`` directly. Writes are staged with ``add``/``flush`` and made
    durable by ``commit``; a failed commit rolls back and raises
    :class:`WriteFailure` carrying the database message.
    """

    def __init__(self, session):
        self.session = session

    # -----------------
    # Users / companies
    # -----------------

    def get_user(self, user_id: int) -> Optional[User]:
        if user_id is None:
            return None
        return self.session.get(User, user_id)

    def owned_companies(self, user_id: int) -> list[Company]:
        return (
            self.session.query(Company)
            .filter(Company.company_owner == user_id, Company.deleted_at.is_(None))
            .order_by(Company.created_at.asc(), Company.id.asc())
            .all()
        )

    def find_company_by_name(self, display_name: str) -> Optional[Company]:
        return (
            self.session.query(Company)
            .filter(Company.display_name == display_name, Company.deleted_at.is_(None))
            .first()
        )

    def add_user(self, user_id: int, name: str) -> User:
        user = User(id=user_id, name=name)
        return self._stage(user)

    def add_company(self, display_name: str, owner_id: int) -> Company:
        company = Company(display_name=display_name, company_owner=owner_id, created_by=owner_id)
        return self._stage(company)

    def add_employer_profile(self, user_id: int, company_id: int) -> EmployerProfile:
        return self._stage(EmployerProfile(user_id=user_id, company_id=company_id))

    # -----------------
    # Job posts
    # -----------------

    def get_job(self, job_id: int) -> Optional[JobPost]:
        return self.session.get(JobPost, job_id)

    def company_jobs(self, company_id: int) -> list[JobPost]:
        # includes soft-deleted rows; the employer view partitions them
        return (
            self.session.query(JobPost)
            .filter(JobPost.company_id == company_id)
            .order_by(JobPost.created_at.desc(), JobPost.id.desc())
            .all()
        )

    def _open_jobs_query(self):
        return (
            self.session.query(JobPost)
            .options(joinedload(JobPost.company))
            .filter(JobPost.deleted_at.is_(None), JobPost.closed_at.is_(None))
        )

    def open_jobs(self, filters=None) -> list[JobPost]:
        qry = self._open_jobs_query()
        if filters is not None:
            if filters.search:
                like = f"%{_like_escape(filters.search)}%"
                qry = qry.filter(or_(JobPost.title.ilike(like, escape="\\"),
                                     JobPost.description.ilike(like, escape="\\")))
            if filters.job_type:
                qry = qry.filter(JobPost.job_type == filters.job_type)
            if filters.location:
                qry = qry.filter(JobPost.location == filters.location)
        return qry.order_by(JobPost.created_at.desc(), JobPost.id.desc()).all()

    def get_open_job(self, job_id: int) -> Optional[JobPost]:
        return self._open_jobs_query().filter(JobPost.id == job_id).first()

    def add_job(self, **fields) -> JobPost:
        return self._stage(JobPost(**fields))

    # -----------------
    # Unit of work
    # -----------------

    def _stage(self, obj):
        self.session.add(obj)
        try:
            self.session.flush()
        except SQLAlchemyError as e:
            self.rollback()
            raise WriteFailure(_db_message(e)) from e
        return obj

    def commit(self):
        try:
            self.session.commit()
        except SQLAlchemyError as e:
            self.rollback()
            raise WriteFailure(_db_message(e)) from e

    def rollback(self):
        self.session.rollback()


def _db_message(exc: SQLAlchemyError) -> str:
    orig = getattr(exc, "orig", None)
    msg = str(orig) if orig is not None else str(exc)
    log.warning("store rejected write: %s", msg)
    return msg
