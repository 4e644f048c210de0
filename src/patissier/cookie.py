"""Cookie value object and Set-Cookie serialization.

``Cookie`` owns every attribute, validates each assignment, and renders
the header value in a fixed order::

    name=value; Expires=...; Max-Age=...; Domain=...; Path=...; Secure; HttpOnly; SameSite=...

Unset attributes are omitted entirely. One ``Cookie`` is one
``Set-Cookie`` header; sending several is the HTTP layer's job.

Refer: https://www.rfc-editor.org/rfc/rfc6265
MDN: https://developer.mozilla.org/en-US/docs/Web/HTTP/Headers/Set-Cookie
"""

import logging
from datetime import UTC, datetime, timedelta
from email.utils import format_datetime
from enum import Enum
from typing import Self

from patissier.errors import StateError, TypeValidationError, ValidationError
from patissier.octets import is_valid_domain, is_valid_name, is_valid_path, is_valid_value

logger = logging.getLogger("patissier.cookie")


class SameSite(Enum):
    """Values supported by the ``SameSite`` attribute.

    The member value is the spelling written to the header.
    """

    # Sent in all contexts. Browsers block it unless Secure is also set.
    NONE = "None"
    # Withheld on cross-site subrequests, sent on top-level navigation.
    LAX = "Lax"
    # First-party context only.
    STRICT = "Strict"

    @classmethod
    def parse(cls, same_site: "SameSite | str") -> "SameSite":
        """Coerce a member or a case-insensitive name (``"lax"``) to a member."""
        if isinstance(same_site, cls):
            return same_site
        if not isinstance(same_site, str):
            raise TypeValidationError("same_site", "SameSite or str", same_site)
        for member in cls:
            if member.value.lower() == same_site.lower():
                return member
        msg = "Invalid cookie same_site provided"
        raise ValidationError(msg)


def format_expires(expires: datetime) -> str:
    """Render *expires* as an RFC 1123 date in GMT.

    Naive datetimes are taken to already be in UTC.
    """
    if expires.tzinfo is None:
        expires = expires.replace(tzinfo=UTC)
    return format_datetime(expires.astimezone(UTC), usegmt=True)


class Cookie:
    """An RFC 6265 cookie destined for a ``Set-Cookie`` header.

    Every attribute starts unset (``None``). Setters validate before
    assigning, so a rejected call leaves the cookie as it was, and return
    the cookie for chaining::

        header = Cookie().set_name("biscuits").set_value("with_tea").serialize()
    """

    __slots__ = (
        "_domain",
        "_expires",
        "_http_only",
        "_max_age",
        "_name",
        "_path",
        "_same_site",
        "_secure",
        "_value",
    )

    def __init__(self, name: str | None = None, value: str | None = None) -> None:
        self._name: str | None = None
        self._value: str | None = None
        self._expires: datetime | None = None
        self._max_age: int | None = None
        self._domain: str | None = None
        self._path: str | None = None
        self._secure: bool | None = None
        self._http_only: bool | None = None
        self._same_site: SameSite | None = None
        if name is not None:
            self.set_name(name)
        if value is not None:
            self.set_value(value)

    # -- Attributes --

    @property
    def name(self) -> str | None:
        return self._name

    @property
    def value(self) -> str | None:
        return self._value

    @property
    def expires(self) -> datetime | None:
        return self._expires

    @property
    def max_age(self) -> int | None:
        """Lifetime in seconds. Zero or less tells the client it has expired."""
        return self._max_age

    @property
    def domain(self) -> str | None:
        return self._domain

    @property
    def path(self) -> str | None:
        return self._path

    @property
    def secure(self) -> bool | None:
        return self._secure

    @property
    def http_only(self) -> bool | None:
        return self._http_only

    @property
    def same_site(self) -> SameSite | None:
        """Whether the cookie is restricted to a first-party or same-site context."""
        return self._same_site

    # -- Setters --

    def set_name(self, name: str) -> Self:
        """Set the cookie name.

        A name may hold any printable US-ASCII character except space and
        the separators ``( ) < > @ , ; : \\ " / [ ] ? = { }``.
        """
        if not isinstance(name, str):
            raise TypeValidationError("name", "str", name)
        if not is_valid_name(name):
            msg = "Invalid cookie name provided"
            raise ValidationError(msg)
        self._name = name
        return self

    def set_value(self, value: str) -> Self:
        """Set the cookie value.

        A value may hold any printable US-ASCII character except space,
        double quote, semicolon, and backslash.
        """
        if not isinstance(value, str):
            raise TypeValidationError("value", "str", value)
        if not is_valid_value(value):
            msg = "Invalid cookie value provided"
            raise ValidationError(msg)
        self._value = value
        return self

    def set_same_site(self, same_site: SameSite | str) -> Self:
        self._same_site = SameSite.parse(same_site)
        return self

    def set_expires(self, expires: datetime) -> Self:
        """Set ``Expires``, stored as an aware UTC datetime.

        Naive datetimes are taken to already be in UTC.
        """
        if not isinstance(expires, datetime):
            raise TypeValidationError("expires", "datetime", expires)
        if expires.tzinfo is None:
            expires = expires.replace(tzinfo=UTC)
        try:
            expires = expires.astimezone(UTC)
        except OverflowError:
            msg = "Invalid cookie expires provided"
            raise ValidationError(msg) from None
        self._expires = expires
        return self

    def set_max_age(self, max_age: int | timedelta) -> Self:
        """Set ``Max-Age`` from whole seconds or a ``timedelta``.

        Fractional seconds of a ``timedelta`` are truncated. Floats are
        rejected, even whole ones such as ``3600.0``.
        """
        if isinstance(max_age, timedelta):
            max_age = int(max_age.total_seconds())
        elif isinstance(max_age, bool) or not isinstance(max_age, int):
            raise TypeValidationError("max_age", "int or timedelta", max_age)
        self._max_age = max_age
        return self

    def set_domain(self, domain: str) -> Self:
        if not isinstance(domain, str):
            raise TypeValidationError("domain", "str", domain)
        if not is_valid_domain(domain):
            msg = "Invalid cookie domain provided"
            raise ValidationError(msg)
        self._domain = domain
        return self

    def set_path(self, path: str) -> Self:
        if not isinstance(path, str):
            raise TypeValidationError("path", "str", path)
        if not path.startswith("/"):
            msg = "Cookie path must start with '/'"
            raise ValidationError(msg)
        if not is_valid_path(path):
            msg = "Invalid cookie path provided"
            raise ValidationError(msg)
        self._path = path
        return self

    def set_secure(self, secure: bool) -> Self:
        self._secure = bool(secure)
        return self

    def set_http_only(self, http_only: bool) -> Self:
        self._http_only = bool(http_only)
        return self

    # -- Rendering --

    def _require_pair(self) -> str:
        if self._name is None or self._value is None:
            msg = "Cookie name and value are required"
            raise StateError(msg)
        return f"{self._name}={self._value}"

    def stripped(self) -> str:
        """Return just the ``name=value`` pair."""
        return self._require_pair()

    def _render(self) -> str:
        parts = [self._require_pair()]
        if self._expires is not None:
            parts.append(f"Expires={format_expires(self._expires)}")
        if self._max_age is not None:
            parts.append(f"Max-Age={self._max_age}")
        if self._domain is not None:
            parts.append(f"Domain={self._domain}")
        if self._path is not None:
            parts.append(f"Path={self._path}")
        if self._secure is True:
            parts.append("Secure")
        if self._http_only is True:
            parts.append("HttpOnly")
        if self._same_site is not None:
            parts.append(f"SameSite={self._same_site.value}")
        return "; ".join(parts)

    def serialize(self) -> str:
        """Serialize to a ``Set-Cookie`` header value string.

        Raises:
            StateError: If the name or the value has not been set.
        """
        header = self._render()
        if self._same_site is SameSite.NONE and self._secure is not True:
            logger.warning("Cookie %r uses SameSite=None without Secure; browsers will reject it", self._name)
        return header

    # -- Dunder --

    def _attributes(self) -> tuple[object, ...]:
        return tuple(getattr(self, slot) for slot in self.__slots__)

    def __str__(self) -> str:
        return self.serialize()

    def __repr__(self) -> str:
        if self._name is None or self._value is None:
            return f"Cookie(name={self._name!r}, value={self._value!r})"
        return f"Cookie({self._render()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cookie):
            return NotImplemented
        return self._attributes() == other._attributes()

    __hash__ = None  # type: ignore[assignment]

    def __copy__(self) -> Self:
        clone = type(self).__new__(type(self))
        for slot in self.__slots__:
            setattr(clone, slot, getattr(self, slot))
        return clone
