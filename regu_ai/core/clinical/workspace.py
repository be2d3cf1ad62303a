# ================================
# core/clinical/workspace.py
# ================================

from dataclasses import replace
from typing import Optional

from regu_ai.config.logging_setup import get_logger
from regu_ai.core.clinical.notes import ClinicalNote, now_utc
from regu_ai.core.clinical.patients import Patient

logger = get_logger("clinical.workspace")

GENERATION_FAILED_MESSAGE = "Failed to generate summary."


class RequestInFlightError(RuntimeError):
    """A summary request for this workspace has not finished yet."""


class ClinicalWorkspace:
    """
    Per-session clinical documentation state.

    Holds the selected patient, the note being written and its generated
    summary. At most one summary request runs at a time; a second call while
    one is pending raises RequestInFlightError instead of overlapping.
    """

    def __init__(self):
        self.selected_patient: Optional[Patient] = None
        self.note = ClinicalNote()
        self._in_flight = False

    @property
    def is_processing(self) -> bool:
        return self._in_flight

    @property
    def can_generate(self) -> bool:
        return bool(self.note.raw_text.strip()) and not self._in_flight

    def select_patient(self, patient: Optional[Patient]) -> None:
        self.selected_patient = patient

    def set_note_text(self, text: str) -> None:
        if text != self.note.raw_text:
            self.note = replace(self.note, raw_text=text, last_updated=now_utc())

    def discard_summary(self) -> None:
        self.note = replace(self.note, summary=None, last_updated=now_utc())

    async def generate_summary(self, client) -> Optional[str]:
        """
        Send the current note to ``client.summarize_note`` and store the result.

        Returns None without calling the client when the note is blank.
        """
        if not self.note.raw_text.strip():
            return None
        if self._in_flight:
            raise RequestInFlightError("A summary is already being generated.")

        self._in_flight = True
        self.note = replace(self.note, summary=None)
        try:
            summary = await client.summarize_note(self.note.raw_text)
        except Exception:
            logger.exception("Summary generation failed")
            summary = GENERATION_FAILED_MESSAGE
        finally:
            self._in_flight = False

        self.note = replace(self.note, summary=summary, last_updated=now_utc())
        return summary
