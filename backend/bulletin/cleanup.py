from __future__ import annotations
import logging

from .sessions import SessionStore

logger = logging.getLogger(__name__)


def purge_idle_sessions(store: SessionStore, max_idle_seconds: float) -> int:
	# Sessions with a generation in flight are left alone
	removed = 0
	for sid in store.idle_ids(max_idle_seconds):
		store.discard(sid)
		removed += 1
	if removed:
		logger.info("Purged %d idle browser session(s)", removed)
	return removed
