# app/models/company.py
from ..extensions import db
from .mixins import TimestampMixin, SoftDeleteMixin


class Company(TimestampMixin, SoftDeleteMixin, db.Model):
    __tablename__ = "company"

    id = db.Column(db.Integer, primary_key=True)
    # unique among non-deleted rows, checked by onboarding before insert
    display_name = db.Column(db.String(200), nullable=False, index=True)
    company_owner = db.Column(db.Integer, db.ForeignKey("user.id"), nullable=False, index=True)
    created_by = db.Column(db.Integer, db.ForeignKey("user.id"), nullable=False)

    owner = db.relationship("User", foreign_keys=[company_owner], backref=db.backref("owned_companies", lazy="dynamic"))
    creator = db.relationship("User", foreign_keys=[created_by])

    def __repr__(self):
        return f"<Company {self.id} {self.display_name!r}>"


class EmployerProfile(TimestampMixin, SoftDeleteMixin, db.Model):
    """Links a user to a company they administer."""

    __tablename__ = "employer_profile"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("user.id"), nullable=False, index=True)
    company_id = db.Column(db.Integer, db.ForeignKey("company.id"), nullable=False, index=True)

    user = db.relationship("User", backref=db.backref("employer_profiles", lazy="dynamic"))
    company = db.relationship("Company", backref=db.backref("employer_profiles", lazy="dynamic"))
