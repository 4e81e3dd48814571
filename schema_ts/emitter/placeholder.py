"""
Single-assignment future cell for output nodes that are not built yet.
"""

from typing import Callable, Generic, List, Optional, TypeVar

from ..logging_config import get_logger
from .errors import DoubleResolutionError

logger = get_logger(__name__)

T = TypeVar("T")


class Placeholder(Generic[T]):
    """
    A value that will be produced later in the same traversal.

    The cell is either pending (holding listeners) or resolved (holding the
    value). Listeners fire synchronously, exactly once: immediately when
    registered after resolution, otherwise inside ``set_value``.
    """

    def __init__(self) -> None:
        self._listeners: List[Callable[[T], None]] = []
        self._resolved = False
        self._value: Optional[T] = None

    @property
    def resolved(self) -> bool:
        return self._resolved

    @property
    def value(self) -> Optional[T]:
        """Cached value, ``None`` while pending."""
        return self._value

    def on_value(self, callback: Callable[[T], None]) -> None:
        """Register ``callback`` to receive the value."""
        if self._resolved:
            callback(self._value)
        else:
            self._listeners.append(callback)

    def set_value(self, value: T) -> None:
        """
        Resolve the placeholder and fire pending listeners in registration order.

        Raises:
            DoubleResolutionError: If the placeholder is already resolved
        """
        if self._resolved:
            raise DoubleResolutionError("placeholder value has already been set")

        self._value = value
        self._resolved = True

        listeners = self._listeners
        self._listeners = []
        logger.debug("Resolving placeholder with %d listener(s)", len(listeners))
        for callback in listeners:
            callback(value)

    def __repr__(self) -> str:
        state = "resolved" if self._resolved else "pending"
        return f"<Placeholder {state}>"
