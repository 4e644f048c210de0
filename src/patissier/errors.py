"""Patissier exception hierarchy.

Shared by Cookie, CookieBuilder, and the octet validators so every module
raises the same types. Each concrete error also subclasses the matching
builtin (``ValueError`` / ``TypeError``) so callers can catch either.
"""


class CookieError(Exception):
    """Base for all patissier-specific errors."""


class ValidationError(CookieError, ValueError):
    """Raised when an attribute's content breaks RFC 6265 syntax.

    Covers cookie names, values, domains, paths, and unknown ``SameSite``
    spellings. The message is fixed per attribute.
    """


class TypeValidationError(CookieError, TypeError):
    """Raised when a setter receives an argument of the wrong type.

    The message names the received type so the failing call site is easy
    to spot::

        >>> Cookie().set_path(1)
        TypeValidationError: Cookie path must be a str, got int
    """

    def __init__(self, attribute: str, expected: str, received: object) -> None:
        self.attribute = attribute
        self.expected = expected
        self.received = type(received).__name__
        super().__init__(f"Cookie {attribute} must be a {expected}, got {self.received}")


class StateError(CookieError):
    """Raised when a cookie is rendered or built in an incomplete state.

    Serialization needs both a name and a value. Builders configured to
    enforce ``SameSite=None`` implies ``Secure`` raise this too.
    """
