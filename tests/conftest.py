"""Test configuration and fixtures."""

from datetime import timedelta

import pytest

from app import create_app
from app.config import Config
from app.extensions import db
from app.models import Account, JobType
from app.models.mixins import utcnow
from app.services.onboarding import OnboardingFlow
from app.services.repository import JobBoardRepository

PASSWORD = "secret123"


class TestConfig(Config):
    TESTING = True
    SECRET_KEY = "test-secret"
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    WTF_CSRF_ENABLED = False
    MAIL_SUPPRESS_SEND = True
    MAIL_DEFAULT_SENDER = "noreply@example.com"
    SESSION_COOKIE_SECURE = False
    LOG_LEVEL = "WARNING"
    SENTRY_DSN = ""
    LANGUAGES = ["en"]


@pytest.fixture
def app(tmp_path):
    """Fresh app and in-memory database per test."""
    config = type("Cfg", (TestConfig,), {"LOG_DIR": str(tmp_path / "logs")})
    app = create_app(config)
    with app.app_context():
        db.create_all()
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def ctx(app):
    """App context for tests that talk to the services directly."""
    with app.app_context():
        yield


@pytest.fixture
def repo(ctx):
    return JobBoardRepository(db.session)


# -----------------
# Factories (return ids, never ORM objects that outlive their context)
# -----------------

@pytest.fixture
def make_account(app):
    def _make(email="owner@example.com", name="Olive Owner", password=PASSWORD):
        with app.app_context():
            account = Account(name=name, email=email)
            account.set_password(password)
            db.session.add(account)
            db.session.commit()
            return account.id
    return _make


@pytest.fixture
def onboard(app):
    def _onboard(account_id, name="Olive Owner", company="Acme Corp"):
        with app.app_context():
            flow = OnboardingFlow()
            flow.submit_profile(name)
            return flow.complete(JobBoardRepository(db.session), account_id, company).id
    return _onboard


@pytest.fixture
def make_job(app):
    def _make(company_id, user_id, title="Backend Engineer", description="Build APIs.",
              location="Remote", job_type=JobType.FULL_TIME, age_days=0, closed=False, deleted=False):
        with app.app_context():
            repo = JobBoardRepository(db.session)
            created = utcnow() - timedelta(days=age_days)
            job = repo.add_job(
                title=title,
                description=description,
                location=location,
                job_type=job_type,
                company_id=company_id,
                created_by_id=user_id,
                created_at=created,
                updated_at=created,
                closed_at=created if closed else None,
                deleted_at=created if deleted else None,
            )
            repo.commit()
            return job.id
    return _make


@pytest.fixture
def login(client):
    def _login(email="owner@example.com", password=PASSWORD, **kwargs):
        return client.post("/auth/login", data={"email": email, "password": password}, **kwargs)
    return _login


@pytest.fixture
def employer(make_account, onboard, login):
    """An onboarded, logged-in employer: ``(account_id, company_id)``."""
    account_id = make_account()
    company_id = onboard(account_id)
    login()
    return account_id, company_id
