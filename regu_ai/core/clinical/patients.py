# ================================
# core/clinical/patients.py
# ================================

from dataclasses import dataclass, field
from typing import Iterable, Literal

Gender = Literal["male", "female"]


@dataclass(frozen=True)
class HumanName:
    family: str
    given: tuple = ()
    use: str = "official"

    @property
    def given_joined(self) -> str:
        return " ".join(self.given)


@dataclass(frozen=True)
class Identifier:
    system: str
    value: str


@dataclass(frozen=True)
class Patient:
    """
    Simplified, FHIR-like patient record for the demo directory.

    Only the first name entry is used for display and search.
    """

    id: str
    name: tuple
    gender: Gender
    birth_date: str
    identifier: tuple = field(default_factory=tuple)
    resource_type: str = "Patient"

    @property
    def primary_name(self) -> HumanName:
        return self.name[0]

    @property
    def display_name(self) -> str:
        n = self.primary_name
        return f"{n.family}, {n.given_joined}"

    @property
    def full_name(self) -> str:
        n = self.primary_name
        return f"{n.given_joined} {n.family}"

    @property
    def resource_path(self) -> str:
        return f"Patient/FHIR-R4/{self.id}"


def matches(patient: Patient, term: str) -> bool:
    needle = term.lower()
    n = patient.primary_name
    return needle in n.family.lower() or needle in n.given_joined.lower()


def filter_patients(patients: Iterable[Patient], term: str) -> list:
    """Case-insensitive substring search on family or given names."""
    return [p for p in patients if matches(p, term or "")]
