"""Patissier: RFC 6265 ``Set-Cookie`` values, validated and serialized.

Basic usage::

    from patissier import Cookie

    header = Cookie("biscuits", "with_tea").serialize()
    # "biscuits=with_tea"

Fluent builder::

    from patissier import CookieBuilder, SameSite

    cookie = CookieBuilder().name("session").value(token).path("/").secure().http_only().build()
    response.headers.append("Set-Cookie", str(cookie))

Shared defaults::

    from patissier import CookieBuilder, CookieConfig, SameSite

    config = CookieConfig(path="/", secure=True, http_only=True, same_site=SameSite.LAX)
    cookie = CookieBuilder(config).name("session").value(token).build()
"""

__version__ = "0.1.0"
__all__ = [
    "Cookie",
    "CookieBuilder",
    "CookieConfig",
    "CookieError",
    "SameSite",
    "StateError",
    "TypeValidationError",
    "ValidationError",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import patissier`` cheap while providing a flat top-level API.
    """
    if name in ("Cookie", "SameSite"):
        from patissier import cookie as _cookie

        return getattr(_cookie, name)

    if name == "CookieBuilder":
        from patissier.builder import CookieBuilder

        return CookieBuilder

    if name == "CookieConfig":
        from patissier.config import CookieConfig

        return CookieConfig

    if name in ("CookieError", "StateError", "TypeValidationError", "ValidationError"):
        from patissier import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
