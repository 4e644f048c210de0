"""Fluent builder for ``Cookie``.

Usage::

    from patissier import CookieBuilder, SameSite

    cookie = (
        CookieBuilder()
        .name("pepperoni")
        .value("pizza_is_so_good")
        .same_site(SameSite.LAX)
        .max_age(12 * 24 * 60 * 60)
        .domain("example.com")
        .path("/")
        .secure()
        .http_only()
        .build()
    )

Every chain method delegates to the matching ``Cookie`` setter, so
validation errors surface at the call that caused them.
"""

import copy
import logging
from datetime import UTC, datetime, timedelta
from typing import Self

from patissier.config import CookieConfig
from patissier.cookie import Cookie, SameSite
from patissier.errors import StateError

logger = logging.getLogger("patissier.builder")

# Same horizon the Rust cookie crate uses for ``permanent()``.
PERMANENT_MAX_AGE = timedelta(days=365 * 20)

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


class CookieBuilder:
    """Compose a ``Cookie`` one attribute at a time.

    ``build()`` hands back an independent copy, so calling more chain
    methods afterwards never alters a cookie that was already built.
    """

    __slots__ = ("_config", "_cookie")

    def __init__(self, config: CookieConfig | None = None) -> None:
        self._config = config or CookieConfig()
        self._cookie = Cookie()
        self._apply_defaults()

    def _apply_defaults(self) -> None:
        config = self._config
        if config.path is not None:
            self._cookie.set_path(config.path)
        if config.secure:
            self._cookie.set_secure(True)
        if config.http_only:
            self._cookie.set_http_only(True)
        if config.same_site is not None:
            self._cookie.set_same_site(config.same_site)
        if config != CookieConfig():
            logger.debug("Applied cookie defaults from %r", config)

    def name(self, name: str) -> Self:
        self._cookie.set_name(name)
        return self

    def value(self, value: str) -> Self:
        self._cookie.set_value(value)
        return self

    def same_site(self, same_site: SameSite | str) -> Self:
        self._cookie.set_same_site(same_site)
        return self

    def expires(self, expires: datetime) -> Self:
        self._cookie.set_expires(expires)
        return self

    def max_age(self, max_age: int | timedelta) -> Self:
        self._cookie.set_max_age(max_age)
        return self

    def domain(self, domain: str) -> Self:
        self._cookie.set_domain(domain)
        return self

    def path(self, path: str) -> Self:
        self._cookie.set_path(path)
        return self

    def secure(self) -> Self:
        """Set the ``Secure`` attribute on the underlying cookie."""
        self._cookie.set_secure(True)
        return self

    def http_only(self) -> Self:
        """Set the ``HttpOnly`` attribute on the underlying cookie."""
        self._cookie.set_http_only(True)
        return self

    def removal(self) -> Self:
        """Configure a cookie that deletes itself on the client.

        Empties the value, sets ``Max-Age=0`` and an ``Expires`` at the
        Unix epoch. The name and scoping attributes are kept, since the
        client only removes a cookie whose name, domain and path match.
        """
        self._cookie.set_value("").set_max_age(0).set_expires(_EPOCH)
        logger.debug("Configured removal cookie %r", self._cookie.name)
        return self

    def permanent(self) -> Self:
        """Configure a long-lived cookie (twenty years from now)."""
        self._cookie.set_max_age(PERMANENT_MAX_AGE)
        self._cookie.set_expires(datetime.now(UTC) + PERMANENT_MAX_AGE)
        logger.debug("Configured permanent cookie %r", self._cookie.name)
        return self

    def build(self) -> Cookie:
        """Return the composed cookie.

        Completeness is not checked here; a cookie without a name or value
        fails when it is serialized.

        Raises:
            StateError: If the config requires ``Secure`` for
                ``SameSite=None`` and the cookie lacks it.
        """
        cookie = self._cookie
        if (
            self._config.require_secure_for_same_site_none
            and cookie.same_site is SameSite.NONE
            and cookie.secure is not True
        ):
            msg = "SameSite=None requires the Secure attribute"
            raise StateError(msg)
        return copy.copy(cookie)
