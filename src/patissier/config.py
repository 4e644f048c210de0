"""Builder configuration.

CookieConfig is a frozen dataclass, immutable after creation and shared
safely between any number of builders.
"""

from dataclasses import dataclass

from patissier.cookie import SameSite


@dataclass(frozen=True, slots=True)
class CookieConfig:
    """Defaults and policy applied by ``CookieBuilder``.

    All fields default to "leave the cookie untouched". Override what you
    need::

        config = CookieConfig(path="/", secure=True, http_only=True)
        session = CookieBuilder(config).name("session").value(token).build()

    Defaults go through the regular ``Cookie`` setters, so an invalid
    default (``path="docs"``) fails as soon as a builder is created.
    """

    # Attribute defaults
    path: str | None = None
    secure: bool = False
    http_only: bool = False
    same_site: SameSite | None = None

    # Policy
    require_secure_for_same_site_none: bool = False  # RFC 6265bis: SameSite=None needs Secure
