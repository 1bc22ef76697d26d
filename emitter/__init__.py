# emitter/__init__.py

from emitter.errors import EmitterError, InvalidArgument
from emitter.event_emitter import EventEmitter, create, mixin
from emitter.subscription import ALL, CATCH_ALL_KEYS, WILDCARD, Subscription

__all__ = [
    "ALL",
    "CATCH_ALL_KEYS",
    "WILDCARD",
    "EmitterError",
    "EventEmitter",
    "InvalidArgument",
    "Subscription",
    "create",
    "mixin",
]
