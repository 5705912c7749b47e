from flask_wtf import FlaskForm
from wtforms import StringField, TextAreaField, SelectField, SubmitField
from wtforms.validators import Length, Optional as Opt

from ...extensions import _l
from ...models.job import JobType
from ...services.jobs import JobInput


class JobForm(FlaskForm):
    """Shared by the create and edit pages."""

    title = StringField(_l("Job Title"), validators=[Length(max=200)])
    location = StringField(_l("Location"), validators=[Opt(), Length(max=120)])
    job_type = SelectField(_l("Job Type"), choices=JobType.choices(), default=JobType.FULL_TIME.value)
    description = TextAreaField(_l("Job Description"))
    submit = SubmitField(_l("Save"))

    def to_input(self) -> JobInput:
        return JobInput(
            title=self.title.data,
            description=self.description.data,
            location=self.location.data,
            job_type=self.job_type.data,
        )

    @classmethod
    def for_job(cls, job):
        if job is None:
            return cls()
        return cls(
            title=job.title,
            location=job.location or "",
            job_type=job.job_type.value,
            description=job.description,
        )
