"""Circuit breaker for callables and whole objects (see wrapkit.circuitbreaker)."""

__version__ = "0.1.0"
__all__ = ["circuitbreaker"]