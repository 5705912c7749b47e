# app/filters.py
import math
from datetime import datetime

from .models.job import JobType
from .models.mixins import utcnow


def job_type_label(value) -> str:
    jt = JobType.coerce(value)
    return jt.label if jt else (value or "")


def truncate_text(text: str, max_length: int = 150) -> str:
    text = text or ""
    return text[:max_length] + "..." if len(text) > max_length else text


def posted_ago(when: datetime, now: datetime | None = None) -> str:
    """'1 day ago', 'N days ago', 'N weeks ago', then the plain date after 30 days."""
    if when is None:
        return ""
    now = now or utcnow()
    days = math.ceil(abs((now - when).total_seconds()) / 86400)
    if days == 1:
        return "1 day ago"
    if days < 7:
        return f"{days} days ago"
    if days < 30:
        return f"{math.ceil(days / 7)} weeks ago"
    return when.strftime("%b %d, %Y")


def paragraphs(text: str) -> list[str]:
    return [p for p in (text or "").split("\n") if p.strip()]


def register_filters(app):
    app.add_template_filter(job_type_label, "job_type_label")
    app.add_template_filter(truncate_text, "truncate_text")
    app.add_template_filter(posted_ago, "posted_ago")
    app.add_template_filter(paragraphs, "paragraphs")
