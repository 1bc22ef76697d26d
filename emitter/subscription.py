# emitter/subscription.py

from dataclasses import dataclass
from typing import Any, Callable, Optional

ALL      = "all"
WILDCARD = "*"

# Both spellings are kept as registered; matching treats them as one key.
CATCH_ALL_KEYS = frozenset((ALL, WILDCARD))


@dataclass(eq=False)
class Subscription:
    """
    One registered listener.  Compared by identity so that a store can hold
    the same handler twice and still remove exactly one entry.
    """
    event_name: str
    handler: Callable[..., Any]
    context: Any
    once: bool = False
    bound: bool = False  # context supplied by the caller

    @property
    def catch_all(self) -> bool:
        return self.event_name in CATCH_ALL_KEYS

    def matches(self, event_name: Optional[str] = None, handler: Optional[Callable] = None) -> bool:
        """None matches anything."""
        if event_name is not None and self.event_name != event_name:
            return False
        if handler is None or self.handler is handler:
            return True
        # off() must never raise, even for callables with a broken __eq__.
        try:
            return bool(self.handler == handler)
        except Exception:
            return False
