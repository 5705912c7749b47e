from flask_wtf import FlaskForm
from wtforms import StringField, SubmitField
from wtforms.validators import Length

from ...extensions import _l


# Blank values are rejected by the onboarding flow itself so the same
# message is shown whether the browser or the flow catches it.

class ProfileForm(FlaskForm):
    name = StringField(_l("Full Name"), validators=[Length(max=120)])
    submit = SubmitField(_l("Continue to Company Setup"))


class CompanyForm(FlaskForm):
    company_name = StringField(_l("Company Name"), validators=[Length(max=200)])
    submit = SubmitField(_l("Complete Setup"))
