"""Custom errors with tracking context."""

from utils.timestamp import format_timestamp


class BaseError(Exception):
    """Base error with timestamp and context for tracking."""

    def __init__(self, message, context=None, cause=None):
        super().__init__(message)
        self.timestamp = format_timestamp()
        self.context = context or {}
        self.cause = cause


class PreconditionError(BaseError, ValueError):
    """Caller passed an argument outside its contract (token size, uid prefix)."""

    def __init__(self, message, argument=None, value=None, **kwargs):
        context = kwargs.pop("context", {})
        if argument:
            context["argument"] = argument
            context["value"] = repr(value)
        super().__init__(message, context=context, **kwargs)


class EntropySourceError(BaseError):
    """The secure random source could not supply bytes."""

    def __init__(self, message, requested=None, **kwargs):
        context = kwargs.pop("context", {})
        if requested is not None:
            context["requested"] = requested
        super().__init__(message, context=context, **kwargs)


class PhotoError(BaseError):
    """Photo entity errors."""

    def __init__(self, message, uid=None, **kwargs):
        context = kwargs.pop("context", {})
        if uid:
            context["uid"] = uid
        super().__init__(message, context=context, **kwargs)


class TitleKeptError(PhotoError):
    """Photo keeps a title set by a higher priority source."""


class HealthCheckError(BaseError):
    """Health check failures."""

    def __init__(self, message, component=None, **kwargs):
        context = kwargs.pop("context", {})
        if component:
            context["component"] = component
        super().__init__(message, context=context, **kwargs)
