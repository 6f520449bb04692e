"""Circuit breaker that stops calling a failing target for a while."""

import functools
import threading
import time


class CircuitOpenError(Exception):
    """Raised when a call is refused because the circuit is open."""

    def __init__(self, name="CircuitBreaker"):
        super().__init__(f"{name}: circuit is open")


class CircuitBreaker:
    """Opens after ``consecutive_errors`` failures in a row and stays open for
    ``open_interval`` seconds; the first failure after that opens it again.

    Exceptions matching an ignored error (a class or a specific instance)
    reset the failure count and are still raised.
    """

    def __init__(self, consecutive_errors, open_interval, *args):
        self._max_errors = consecutive_errors
        self._open_interval = open_interval
        self._ignore_errors = args
        self._errors = 0
        self._closes_at = None
        self._lock = threading.Lock()
        self.name = "CircuitBreaker"

    def is_open(self):
        """Return True while calls are being refused."""
        with self._lock:
            return self._closes_at is not None and self._closes_at > time.monotonic()

    def _is_ignored(self, exc):
        return any(
            exc is ignored or (isinstance(ignored, type) and isinstance(exc, ignored))
            for ignored in self._ignore_errors
        )

    def call(self, func, *args, **kwargs):
        """Call ``func`` through the breaker, raising CircuitOpenError while open."""
        if self.is_open():
            raise CircuitOpenError(self.name)
        try:
            result = func(*args, **kwargs)
        except Exception as exc:
            with self._lock:
                if self._is_ignored(exc):
                    self._errors, self._closes_at = 0, None
                else:
                    self._errors += 1
                    if self._errors >= self._max_errors:
                        self._closes_at = time.monotonic() + self._open_interval
            raise
        with self._lock:
            self._errors, self._closes_at = 0, None
        return result


class CircuitBreakerProxy:
    """Wraps an object so that every method call goes through one circuit breaker."""

    def __init__(self, base, consecutive_errors, open_interval, *args):
        self._base = base
        self._breaker = CircuitBreaker(consecutive_errors, open_interval, *args)
        self._breaker.name = f"{type(base).__name__}WithCircuitBreaker"

    def __getattr__(self, name):
        state = vars(self)
        if "_base" not in state:
            raise AttributeError(name)
        attr = getattr(state["_base"], name)
        if not callable(attr):
            return attr
        breaker = state["_breaker"]

        @functools.wraps(attr)
        def wrapped(*args, **kwargs):
            return breaker.call(attr, *args, **kwargs)

        return wrapped