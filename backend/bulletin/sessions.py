from __future__ import annotations
import time
import uuid
from typing import Callable, Dict, List, Optional

from .exceptions import GenerationInProgress
from .session_log import SessionLog


SESSION_COOKIE = "bulletin_session"


class BrowserSession:
	def __init__(self, session_id: str, *, last_seen: float = 0.0) -> None:
		self.session_id = session_id
		self.log = SessionLog()
		# Key typed in by the user; lives only as long as this session
		self.api_key: Optional[str] = None
		self.pending = False
		self.last_seen = last_seen

	def has_state(self) -> bool:
		return bool(self.api_key) or len(self.log) > 0

	def begin(self) -> None:
		if self.pending:
			raise GenerationInProgress("A comment is already being generated")
		self.pending = True

	def end(self) -> None:
		self.pending = False


class SessionStore:
	"""In-memory browser sessions, one per cookie.

	A request without a known cookie gets a transient session; it is only
	kept once it holds a key or a saved comment (see ``keep``).
	"""

	def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
		self._sessions: Dict[str, BrowserSession] = {}
		self._clock = clock

	@staticmethod
	def new_id() -> str:
		return uuid.uuid4().hex

	def get(self, session_id: Optional[str]) -> Optional[BrowserSession]:
		if not session_id:
			return None
		return self._sessions.get(session_id)

	def resolve(self, session_id: Optional[str] = None) -> BrowserSession:
		existing = self.get(session_id)
		if existing is not None:
			existing.last_seen = self._clock()
			return existing
		# Unknown ids (expired, forged) get a fresh server-chosen id
		return BrowserSession(self.new_id(), last_seen=self._clock())

	def keep(self, session: BrowserSession) -> bool:
		"""Store the session if it holds state; return whether it is stored."""
		if session.session_id in self._sessions:
			return True
		if not session.has_state():
			return False
		self._sessions[session.session_id] = session
		return True

	def discard(self, session_id: str) -> None:
		self._sessions.pop(session_id, None)

	def idle_ids(self, max_idle_seconds: float) -> List[str]:
		threshold = self._clock() - max_idle_seconds
		return [
			sid for sid, s in self._sessions.items()
			if s.last_seen < threshold and not s.pending
		]

	def __len__(self) -> int:
		return len(self._sessions)
