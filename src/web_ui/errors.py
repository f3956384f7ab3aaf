"""Exceptions raised by web_ui."""


class WebUIError(Exception):
    """Base class for web_ui errors."""


class HandlerError(WebUIError):
    """Raised by an event handler to report a failure to the caller.

    Equivalent to the handler returning the message string: the caller
    receives a failed result whose message is str(error).
    """
