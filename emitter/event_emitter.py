# emitter/event_emitter.py

import logging
from types import MethodType
from typing import Any, Callable, List, Optional

from emitter import config
from emitter.errors import InvalidArgument
from emitter.subscription import Subscription

log = logging.getLogger(__name__)

_MISSING = object()


# ─── Store helpers ──────────────────────────────────
# Module-level so grafted objects, which only receive the public methods,
# share the exact same code path as EventEmitter instances.

def _check_event_name(event_name) -> None:
    if not isinstance(event_name, str) or not event_name:
        raise InvalidArgument(f"event_name must be a non-empty str, got {event_name!r}")


def _check_handler(handler) -> None:
    if not callable(handler):
        raise InvalidArgument(f"handler must be callable, got {handler!r}")


def _store(owner) -> Optional[List[Subscription]]:
    return getattr(owner, "_listeners", None)


def _ensure_store(owner) -> List[Subscription]:
    store = _store(owner)
    if store is None:
        store = owner._listeners = []
    return store


def _subscribe(owner, event_name: str, handler: Callable, context: Any, once: bool):
    _check_event_name(event_name)
    _check_handler(handler)

    bound = context is not None
    sub = Subscription(
        event_name=event_name,
        handler=handler,
        context=context if bound else owner,
        once=once,
        bound=bound
    )
    _ensure_store(owner).append(sub)
    log.debug("[ON] %r once=%s handler=%r", event_name, once, handler)
    return owner


def _invoke(sub: Subscription, event_name: str, args: tuple) -> None:
    handler = MethodType(sub.handler, sub.context) if sub.bound else sub.handler
    if config.TRACE_DISPATCH:
        log.debug("[DISPATCH] %r -> %r%s", event_name, sub.handler, " (once)" if sub.once else "")
    try:
        handler(*args)
    except Exception as e:
        # Nested emits re-raise the same error; log it only where it started.
        if not getattr(e, "_emitter_logged", False):
            log.exception(f"Error in '{event_name}' handler {sub.handler!r}")
            try:
                e._emitter_logged = True
            except AttributeError:
                pass
        raise


def _dispatch(owner, sub: Subscription, event_name: str, args: tuple) -> None:
    if sub.once:
        store = _store(owner)
        # Already consumed, e.g. by a nested emit from an earlier handler.
        if store is None or sub not in store:
            return
        store.remove(sub)
    _invoke(sub, event_name, args)


class EventEmitter:
    """
    Minimal synchronous publish/subscribe.

    Use it standalone (``EventEmitter()`` or ``create()``), as a base class,
    or graft it onto an existing object with ``mixin(target)``.  Every
    operation returns the object it was called on so calls can be chained.

    Listeners registered under ``"all"`` or ``"*"`` fire for every event and
    receive the event name before the payload.
    """

    _listeners: Optional[List[Subscription]] = None

    def __init__(self):
        self._listeners = None

    # ─── Subscribe ──────────────────────────────────

    def on(self, event_name: Optional[str] = None, handler: Optional[Callable] = None, context: Any = None):
        """
        Register `handler` for `event_name`.  If `context` is given the
        handler is bound to it like a method to ``self``.
        """
        return _subscribe(self, event_name, handler, context, once=False)

    def once(self, event_name: Optional[str] = None, handler: Optional[Callable] = None, context: Any = None):
        """Like on(), but the listener is removed just before its first call."""
        return _subscribe(self, event_name, handler, context, once=True)

    # ─── Unsubscribe ────────────────────────────────

    def off(self, event_name: Optional[str] = None, handler: Optional[Callable] = None):
        """
        Remove listeners.  No arguments clears everything; a name removes
        every listener for it; a name plus handler removes only that pair.
        Never raises.
        """
        store = _store(self)
        if not store:
            return self

        if event_name is None and handler is None:
            store.clear()
        else:
            store[:] = [sub for sub in store if not sub.matches(event_name, handler)]
        log.debug("[OFF] %r handler=%r (%d left)", event_name, handler, len(store))
        return self

    # ─── Publish ────────────────────────────────────

    def emit(self, event_name: Optional[str] = None, payload: Any = _MISSING):
        """
        Synchronously call every listener for `event_name` in registration
        order, then every catch-all listener.  Listeners added or removed
        while dispatching take effect from the next emit.  Handler errors
        propagate and stop the dispatch.
        """
        _check_event_name(event_name)

        store = _store(self)
        if not store:
            log.debug("[EMIT] %r (no listeners)", event_name)
            return self

        snapshot = list(store)
        args = () if payload is _MISSING else (payload,)
        log.debug("[EMIT] %r to %d listener(s)", event_name, len(snapshot))

        for sub in snapshot:
            if not sub.catch_all and sub.event_name == event_name:
                _dispatch(self, sub, event_name, args)

        for sub in snapshot:
            if sub.catch_all:
                _dispatch(self, sub, event_name, (event_name, *args))

        return self

    # ─── Introspection ──────────────────────────────

    def listeners(self, event_name: Optional[str] = None) -> List[Subscription]:
        return [sub for sub in (_store(self) or ()) if sub.matches(event_name)]

    def listener_count(self, event_name: Optional[str] = None) -> int:
        return len(self.listeners(event_name))

    def has_listeners(self, event_name: Optional[str] = None) -> bool:
        return any(sub.matches(event_name) for sub in (_store(self) or ()))

    def event_names(self) -> List[str]:
        return list(dict.fromkeys(sub.event_name for sub in (_store(self) or ())))

    # ─── Aliases ────────────────────────────────────

    add_listener = add_event_listener = bind = subscribe = on
    subscribe_once = once
    remove_listener = remove_event_listener = unbind = unsubscribe = off
    trigger = fire = dispatch_event = publish = emit

    @staticmethod
    def mixin(target):
        """
        Graft the emitter operations and a private, empty store onto
        `target` and return it.  An object that already has a store keeps it.
        """
        try:
            for name in GRAFTED_METHODS:
                setattr(target, name, MethodType(getattr(EventEmitter, name), target))
            target.mixin = EventEmitter.mixin
            # Only a store the target owns itself; a grafted class must not
            # hand its list down to a grafted instance.
            if not isinstance(vars(target).get("_listeners"), list):
                target._listeners = None
        except (AttributeError, TypeError) as e:
            raise InvalidArgument(f"cannot graft an emitter onto {target!r}: {e}") from e

        log.debug("[MIXIN] grafted onto %s", type(target).__name__)
        return target


GRAFTED_METHODS = (
    "on", "add_listener", "add_event_listener", "bind", "subscribe",
    "once", "subscribe_once",
    "off", "remove_listener", "remove_event_listener", "unbind", "unsubscribe",
    "emit", "trigger", "fire", "dispatch_event", "publish",
    "listeners", "listener_count", "has_listeners", "event_names",
)

mixin = EventEmitter.mixin


def create() -> EventEmitter:
    """Return a new, independent emitter."""
    return EventEmitter()
