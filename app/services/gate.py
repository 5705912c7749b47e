# app/services/gate.py
import enum
import logging
from dataclasses import dataclass
from typing import Optional

from ..models.user import User
from ..models.company import Company

log = logging.getLogger(__name__)


class GateStatus(enum.Enum):
    UNAUTHENTICATED = "unauthenticated"
    NEEDS_ONBOARDING = "needs_onboarding"
    AUTHORIZED = "authorized"


@dataclass(frozen=True)
class GateResult:
    status: GateStatus
    user: Optional[User] = None
    company: Optional[Company] = None

    @property
    def authorized(self) -> bool:
        return self.status is GateStatus.AUTHORIZED


def evaluate_gate(repo, identity: Optional[int]) -> GateResult:
    """Decide where a caller belongs: login, onboarding, or the employer area.

    Read-only. A caller is authorized only when both the ``user`` row and at
    least one non-deleted owned company exist. With several owned companies
    the oldest one wins.
    """
    if identity is None:
        return GateResult(GateStatus.UNAUTHENTICATED)

    user = repo.get_user(identity)
    companies = repo.owned_companies(identity)
    if user is None or not companies:
        return GateResult(GateStatus.NEEDS_ONBOARDING, user=user)

    if len(companies) > 1:
        log.warning("user %s owns %d active companies; using company %s",
                    identity, len(companies), companies[0].id)
    return GateResult(GateStatus.AUTHORIZED, user=user, company=companies[0])
