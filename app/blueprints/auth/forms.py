# app/blueprints/auth/forms.py
from flask_wtf import FlaskForm
from wtforms import (
    StringField,
    PasswordField,
    SubmitField,
    BooleanField,
    HiddenField,
)
from wtforms.validators import (
    DataRequired,
    Email,
    Length,
    EqualTo,
    Regexp,
    ValidationError,
)

from ...extensions import _l
from ...models.account import Account


# ---------------------
# Validators / Helpers
# ---------------------

PASSWORD_VALIDATORS = [
    DataRequired(),
    Length(min=8, message=_l("Password must be at least 8 characters.")),
    Regexp(r"^(?=.*[A-Za-z])(?=.*\d).+$", message=_l("Use letters and numbers.")),
]


def _email_exists(email: str) -> bool:
    return Account.query.filter(Account.email == email.lower().strip()).first() is not None


# -------------
# Auth Forms
# -------------

class RegisterForm(FlaskForm):
    name = StringField(_l("Full name"), validators=[DataRequired(), Length(max=120)])
    email = StringField(_l("Email"), validators=[DataRequired(), Email(), Length(max=255)])
    password = PasswordField(_l("Password"), validators=PASSWORD_VALIDATORS)
    password2 = PasswordField(_l("Confirm password"), validators=[DataRequired(), EqualTo("password", message=_l("Passwords must match."))])
    submit = SubmitField(_l("Create account"))

    def validate_email(self, field):  # type: ignore[override]
        if _email_exists(field.data):
            raise ValidationError(_l("This email is already registered."))


class LoginForm(FlaskForm):
    email = StringField(_l("Email"), validators=[DataRequired(), Email(), Length(max=255)])
    password = PasswordField(_l("Password"), validators=[DataRequired()])
    remember = BooleanField(_l("Keep me signed in"))
    submit = SubmitField(_l("Sign in"))

    next = HiddenField()


class ForgotPasswordForm(FlaskForm):
    email = StringField(_l("Email"), validators=[DataRequired(), Email(), Length(max=255)])
    submit = SubmitField(_l("Send reset link"))


class ResetPasswordForm(FlaskForm):
    password = PasswordField(_l("New password"), validators=PASSWORD_VALIDATORS)
    password2 = PasswordField(_l("Confirm new password"), validators=[DataRequired(), EqualTo("password", message=_l("Passwords must match."))])
    submit = SubmitField(_l("Reset password"))
