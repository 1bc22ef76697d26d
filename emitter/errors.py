# emitter/errors.py


class EmitterError(Exception):
    """Base class for errors raised by the emitter."""


class InvalidArgument(EmitterError, TypeError):
    """
    An event name or handler failed validation.  Raised before anything
    is recorded or dispatched.
    """
