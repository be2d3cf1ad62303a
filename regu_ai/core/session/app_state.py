# ================================
# core/session/app_state.py
# ================================

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

from regu_ai.config.logging_setup import get_logger
from regu_ai.config.params import AppParams, DEFAULT_ACTOR
from regu_ai.config.reference_data import ACCOUNT_CHART, INITIAL_ENTRIES
from regu_ai.core.clinical.workspace import ClinicalWorkspace
from regu_ai.core.ledger.ledger import LedgerManager

logger = get_logger("session")


class Role(str, Enum):
    ADMIN = "admin"
    ACCOUNTANT = "accountant"
    DOCTOR = "doctor"

    @property
    def label(self) -> str:
        return ROLE_LABELS[self]


ROLE_LABELS = {
    Role.ADMIN: "Administrator (Full)",
    Role.ACCOUNTANT: "Accountant (Finance Only)",
    Role.DOCTOR: "Doctor (Clinical Only)",
}


class Area(str, Enum):
    FINANCIAL = "financial"
    CLINICAL = "clinical"

    @property
    def header(self) -> str:
        return AREA_HEADERS[self]


AREA_HEADERS = {
    Area.FINANCIAL: "Financial Compliance & Reporting",
    Area.CLINICAL: "Clinical Documentation & Intelligence",
}

# 表示の出し分けのみ。認可の境界ではない
VISIBLE_AREAS = {
    Role.ADMIN: {Area.FINANCIAL, Area.CLINICAL},
    Role.ACCOUNTANT: {Area.FINANCIAL},
    Role.DOCTOR: {Area.CLINICAL},
}

ACCESS_DENIED_MESSAGES = {
    Area.FINANCIAL: "Access Denied: Financial Data Restricted",
    Area.CLINICAL: "Access Denied: Clinical Data Restricted",
}


def can_view(role: Role, area: Area) -> bool:
    return area in VISIBLE_AREAS[role]


def access_denied_message(area: Area) -> str:
    return ACCESS_DENIED_MESSAGES[area]


@dataclass
class AppState:
    """
    Session state shared by the views.

    The role only decides which area is rendered. It is a cosmetic gate on
    the client side, not an authorization check: every module stays
    importable and callable regardless of the selected role.
    """

    ledger: LedgerManager
    workspace: ClinicalWorkspace = field(default_factory=ClinicalWorkspace)
    role: Role = Role.ADMIN
    area: Area = Area.FINANCIAL
    actor: str = DEFAULT_ACTOR

    def select_role(self, role: Union[Role, str]) -> Role:
        try:
            self.role = Role(role)
        except ValueError:
            raise ValueError(f"Unknown role: {role!r}")
        logger.info("Role switched to %s", self.role.value)
        return self.role

    def select_area(self, area: Union[Area, str]) -> Area:
        self.area = Area(area)
        return self.area

    def can_view(self, area: Optional[Area] = None) -> bool:
        return can_view(self.role, area or self.area)


def new_app_state(params: Optional[AppParams] = None) -> AppState:
    params = params or AppParams()
    ledger = LedgerManager(ACCOUNT_CHART, INITIAL_ENTRIES)
    return AppState(ledger=ledger, actor=params.actor)
