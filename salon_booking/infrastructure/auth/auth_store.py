from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass
from typing import Callable

from salon_booking.application.ports.auth import AuthPort
from salon_booking.domain.entities.customer import CustomerIdentity


@dataclass(frozen=True)
class AuthState:
    user: CustomerIdentity | None = None
    token: str | None = None
    expires_at: float | None = None


AuthListener = Callable[[AuthState], None]


class AuthStore(AuthPort):
    """
    Holds the signed-in customer and bearer token.

    Entries expire after `ttl_seconds`; listeners are notified on every
    set/clear, including the implicit clear when an entry expires.
    """

    def __init__(self, ttl_seconds: float = 3600.0, clock: Callable[[], float] = time.time) -> None:
        self._ttl_seconds = ttl_seconds
        self._clock = clock
        self._state = AuthState()
        self._listeners: list[AuthListener] = []
        self._lock = threading.Lock()
        self._logger = logging.getLogger(__name__)

    def get_auth(self) -> AuthState:
        expired = False
        with self._lock:
            state = self._state
            if state.expires_at is not None and self._clock() >= state.expires_at:
                self._state = AuthState()
                state = self._state
                expired = True
        if expired:
            self._logger.info("Auth session expired")
            self._notify(state)
        return state

    def get_token(self) -> str | None:
        return self.get_auth().token

    def get_user(self) -> CustomerIdentity | None:
        return self.get_auth().user

    def set_auth(self, user: CustomerIdentity, token: str) -> None:
        with self._lock:
            self._state = AuthState(user=user, token=token, expires_at=self._clock() + self._ttl_seconds)
            state = self._state
        self._notify(state)

    def clear_auth(self) -> None:
        with self._lock:
            self._state = AuthState()
            state = self._state
        self._notify(state)

    def subscribe(self, listener: AuthListener) -> Callable[[], None]:
        """Register a listener. Returns a function that unsubscribes it."""
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, state: AuthState) -> None:
        with self._lock:
            listeners = list(self._listeners)
        for listener in listeners:
            try:
                listener(state)
            except Exception as e:
                self._logger.warning("Auth listener failed", extra={"error": str(e)})
