"""
tab_state.py — Active-tab state for the dashboard's tab group.

One TabSet per dashboard session. The page owns it and hands it to the
trigger row (which calls select) and the panels (which ask is_active).
Between Dash requests the state lives in the session's dcc.Store, so the
callbacks rebuild the TabSet with from_store() and write back to_store().
"""

import logging

logger = logging.getLogger(__name__)


class TabSet:
    """Holds the active tab id; notifies subscribers when it changes.

    select() does not check the id against tab_ids. An unknown id just means
    no panel is active, which renders an empty tab body.
    """

    def __init__(self, default_id, tab_ids=()):
        self._active = default_id
        self.tab_ids = tuple(tab_ids)
        self._listeners = []

    @property
    def active_id(self):
        return self._active

    def is_active(self, tab_id) -> bool:
        return tab_id == self._active

    def select(self, tab_id):
        if tab_id == self._active:
            return
        previous, self._active = self._active, tab_id
        logger.debug(f"Tab changed: {previous!r} -> {tab_id!r}")
        for listener in list(self._listeners):
            listener(tab_id)

    def subscribe(self, listener):
        """Call listener(new_id) on every change. Returns an unsubscribe function."""
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)
        return unsubscribe

    # ── dcc.Store round trip ─────────────────────────────────────────────
    def to_store(self) -> dict:
        return {"active": self._active}

    @classmethod
    def from_store(cls, data, default_id, tab_ids=()):
        """Rebuild from dcc.Store data; falls back to default_id when empty."""
        tabs = cls(default_id, tab_ids)
        if isinstance(data, dict) and "active" in data:
            tabs._active = data["active"]
        return tabs

    def __repr__(self):
        return f"TabSet(active={self._active!r}, tabs={list(self.tab_ids)!r})"
