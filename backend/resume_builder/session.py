"""
Editing sessions: each one owns a single ResumeDocument and the
idle -> pending -> reviewing|idle enhancement state machine.
"""
import uuid
import logging
from typing import Dict, Optional, Union

from . import editor
from .errors import EnhancementError, SessionStateError, SessionNotFound
from .sample import sample_document
from .schemas import ResumeDocument, Section, SessionStatus, SessionOut

logger = logging.getLogger(__name__)


class ResumeSession:
    def __init__(self, document: Optional[ResumeDocument] = None, session_id: Optional[str] = None):
        self.id = session_id or str(uuid.uuid4())
        self.document = document if document is not None else ResumeDocument.blank()
        self.candidate: Optional[ResumeDocument] = None
        self.status = SessionStatus.idle
        self.last_error: Optional[str] = None

    def _require(self, status: SessionStatus, action: str):
        if self.status is not status:
            raise SessionStateError(f"cannot {action} while {self.status.value}")

    def _edit(self, fn, *args) -> ResumeDocument:
        self._require(SessionStatus.idle, "edit")
        self.document = fn(self.document, *args)
        return self.document

    # ----- edits -----
    def set_personal_field(self, field: str, value: str) -> ResumeDocument:
        return self._edit(editor.set_personal_field, field, value)

    def set_entry_field(self, section: Union[Section, str], index: int, field: str, value: str) -> ResumeDocument:
        return self._edit(editor.set_entry_field, section, index, field, value)

    def set_skill(self, index: int, value: str) -> ResumeDocument:
        return self._edit(editor.set_skill, index, value)

    def add_entry(self, section: Union[Section, str]) -> ResumeDocument:
        return self._edit(editor.add_entry, section)

    def remove_entry(self, section: Union[Section, str], index: int) -> ResumeDocument:
        return self._edit(editor.remove_entry, section, index)

    def load_sample(self) -> ResumeDocument:
        self._require(SessionStatus.idle, "load sample")
        self.document = sample_document()
        return self.document

    # ----- enhancement -----
    async def submit_for_enhancement(self, enhancer) -> ResumeDocument:
        """Run one enhancement; on success the result waits for apply/reject."""
        # Checked and set before the first await, so re-entry is impossible
        self._require(SessionStatus.idle, "submit")
        self.status = SessionStatus.pending
        self.last_error = None
        snapshot = self.document.model_copy(deep=True)
        try:
            candidate = await enhancer.enhance(snapshot)
        except EnhancementError as e:
            self.last_error = e.message
            self.status = SessionStatus.idle
            logger.info(f"Session {self.id}: enhancement failed ({type(e).__name__})")
            raise
        except Exception:
            self.last_error = "Failed to process resume"
            self.status = SessionStatus.idle
            raise
        self.candidate = candidate
        self.status = SessionStatus.reviewing
        return candidate

    def apply(self) -> ResumeDocument:
        self._require(SessionStatus.reviewing, "apply")
        self.document = self.candidate
        self.candidate = None
        self.status = SessionStatus.idle
        return self.document

    def reject(self) -> ResumeDocument:
        self._require(SessionStatus.reviewing, "reject")
        self.candidate = None
        self.status = SessionStatus.idle
        return self.document

    def active_document(self) -> ResumeDocument:
        if self.status is SessionStatus.reviewing and self.candidate is not None:
            return self.candidate
        return self.document

    def to_out(self) -> SessionOut:
        return SessionOut(
            id=self.id,
            status=self.status,
            document=self.document,
            candidate=self.candidate,
            lastError=self.last_error,
        )


class SessionRegistry:
    def __init__(self):
        self._sessions: Dict[str, ResumeSession] = {}

    def create(self, document: Optional[ResumeDocument] = None) -> ResumeSession:
        s = ResumeSession(document)
        self._sessions[s.id] = s
        return s

    def get(self, session_id: str) -> ResumeSession:
        if session_id not in self._sessions:
            raise SessionNotFound(session_id)
        return self._sessions[session_id]

    def delete(self, session_id: str) -> None:
        if self._sessions.pop(session_id, None) is None:
            raise SessionNotFound(session_id)

    def __len__(self):
        return len(self._sessions)


SESSIONS = SessionRegistry()


def get_sessions() -> SessionRegistry:
    return SESSIONS
