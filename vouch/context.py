"""
Context manager for validation configuration (e.g., exception capture).
"""

from contextlib import contextmanager
from contextvars import ContextVar

# Context variable for rule exception capture
_capture_exceptions: ContextVar[bool] = ContextVar("capture_exceptions", default=False)


def is_capturing() -> bool:
    """Check if rule exceptions are currently converted into failures."""
    return _capture_exceptions.get()


@contextmanager
def validation_context(*, capture_exceptions: bool = False):
    """
    Context manager for validation configuration.

    Args:
        capture_exceptions: If True, a rule that raises is reported as a
               Failure for the field being validated instead of propagating.

    Example:
        from vouch import create, validation_context

        positive = create(lambda f: f"'{f}' must be positive", lambda x: x > 0)

        # Normal: a rule error propagates
        positive("age", "ten")  # TypeError!

        # Capturing: the error becomes a field message
        with validation_context(capture_exceptions=True):
            positive("age", "ten")  # Failure({"age": ["'age' could not be validated: ..."]})
    """
    token = _capture_exceptions.set(capture_exceptions)
    try:
        yield
    finally:
        _capture_exceptions.reset(token)
