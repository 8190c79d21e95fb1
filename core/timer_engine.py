# -*- coding: utf-8 -*-

from typing import Optional

from domain.models import SessionMode, SessionState


class SessionTimer:
    """
    Pure focus/break countdown (no Tkinter).
    Service triggers tick() each second while running.
    """

    def __init__(self, state: Optional[SessionState] = None):
        self._state = state or SessionState.initial()

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def mode(self) -> SessionMode:
        return self._state.mode

    @property
    def seconds_remaining(self) -> int:
        return self._state.seconds_remaining

    @property
    def is_running(self) -> bool:
        return self._state.is_running

    def toggle_running(self) -> None:
        s = self._state
        self._state = SessionState(s.mode, s.seconds_remaining, not s.is_running)

    def tick(self) -> bool:
        """
        Returns True if mode flipped on this tick.
        """
        s = self._state
        if not s.is_running:
            return False

        remaining = s.seconds_remaining - 1

        if remaining <= 0:
            # switch mode, counter never rests on 0
            nxt = s.mode.other()
            self._state = SessionState(nxt, nxt.duration, s.is_running)
            return True

        self._state = SessionState(s.mode, remaining, s.is_running)
        return False
