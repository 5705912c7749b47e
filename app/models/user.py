# app/models/user.py
from ..extensions import db
from .mixins import TimestampMixin, SoftDeleteMixin


class User(TimestampMixin, SoftDeleteMixin, db.Model):
    """Employer profile, created once per account during onboarding."""

    __tablename__ = "user"

    # same value as account.id; assigned by onboarding, never autoincremented
    id = db.Column(db.Integer, db.ForeignKey("account.id"), primary_key=True, autoincrement=False)
    name = db.Column(db.String(120), nullable=False)

    account = db.relationship("Account", backref=db.backref("profile", uselist=False))

    def __repr__(self):
        return f"<User {self.id} {self.name!r}>"
