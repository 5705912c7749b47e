# app/services/onboarding.py
"""Two-step employer onboarding: profile name, then company name.

Nothing is written until the company step is submitted. The final write
sequence (user, company, employer profile) commits as one transaction so a
failure part way leaves no partial state behind.
"""
import enum
import logging
from dataclasses import dataclass, asdict

from .errors import ValidationError, DuplicateCompanyName

log = logging.getLogger(__name__)


class Step(str, enum.Enum):
    PROFILE = "profile"
    COMPANY = "company"
    COMPLETE = "complete"


@dataclass
class OnboardingFlow:
    step: Step = Step.PROFILE
    name: str = ""
    company_name: str = ""

    # --- session round trip ---
    def to_dict(self) -> dict:
        data = asdict(self)
        data["step"] = self.step.value
        return data

    @classmethod
    def from_dict(cls, data: dict | None, initial_name: str = ""):
        if not data:
            return cls(name=initial_name or "")
        try:
            step = Step(data.get("step", Step.PROFILE.value))
        except ValueError:
            step = Step.PROFILE
        return cls(step=step, name=data.get("name") or "", company_name=data.get("company_name") or "")

    # --- transitions ---
    def submit_profile(self, name: str):
        name = (name or "").strip()
        self.name = name
        if not name:
            raise ValidationError("Name is required")
        self.step = Step.COMPANY

    def back(self):
        if self.step is Step.COMPANY:
            self.step = Step.PROFILE

    def complete(self, repo, identity: int, company_name: str):
        """Create the profile, company and employer link for ``identity``.

        Returns the new company. Raises ValidationError, DuplicateCompanyName
        or WriteFailure; on any of them the flow stays on the company step.
        """
        self.company_name = (company_name or "").strip()
        name = self.name.strip()
        if not name:
            raise ValidationError("Name is required")
        if not self.company_name:
            raise ValidationError("Company name is required")

        # advisory: a concurrent submission can still slip past this check
        if repo.find_company_by_name(self.company_name) is not None:
            log.info("onboarding: company name %r already taken", self.company_name)
            raise DuplicateCompanyName(self.company_name)

        try:
            user = repo.get_user(identity)
            if user is None:
                user = repo.add_user(identity, name)
            else:
                # left over from an earlier, interrupted onboarding
                user.name = name
            company = repo.add_company(self.company_name, owner_id=user.id)
            repo.add_employer_profile(user.id, company.id)
            repo.commit()
        except Exception:
            repo.rollback()
            raise

        self.step = Step.COMPLETE
        log.info("onboarding complete: user=%s company=%s", user.id, company.id)
        return company
