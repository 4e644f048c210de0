"""RFC 6265 cookie-octet tables and syntax predicates.

Names must be a ``token`` (RFC 2616 §2.2): printable US-ASCII without
separators. Values are ``cookie-octet`` runs: printable US-ASCII without
whitespace, ``"``, ``;`` or ``\\``. Both tables are constant sets of code
points so every membership test is O(1).

Refer: https://www.rfc-editor.org/rfc/rfc6265#section-4.1.1
"""

import re

_PRINTABLE = range(0x20, 0x7F)

_NAME_SEPARATORS = ' "(),/:;<=>?@[\\]{}'
_VALUE_SEPARATORS = ' ";\\'

NAME_OCTETS: frozenset[int] = frozenset(c for c in _PRINTABLE if chr(c) not in _NAME_SEPARATORS)
VALUE_OCTETS: frozenset[int] = frozenset(c for c in _PRINTABLE if chr(c) not in _VALUE_SEPARATORS)
# path-value: any CHAR except CTLs or ";"
PATH_OCTETS: frozenset[int] = frozenset(c for c in _PRINTABLE if c != ord(";"))

# Optional leading dot, dot-terminated labels, then a 2-6 letter final label.
# A syntax check only, not DNS validation.
_DOMAIN_RE = re.compile(r"\.?(?:[A-Za-z0-9+\-]{1,63}\.)+[A-Za-z]{2,6}")


def is_valid_name(name: str) -> bool:
    """True if every character of *name* is an allowed cookie-name octet."""
    return all(ord(ch) in NAME_OCTETS for ch in name)


def is_valid_value(value: str) -> bool:
    """True if every character of *value* is an allowed cookie-octet."""
    return all(ord(ch) in VALUE_OCTETS for ch in value)


def is_valid_domain(domain: str) -> bool:
    """True if *domain* looks like ``example.com`` or ``.example.com``."""
    return _DOMAIN_RE.fullmatch(domain) is not None


def is_valid_path(path: str) -> bool:
    """True if *path* starts with ``/`` and holds only path-value octets."""
    return path.startswith("/") and all(ord(ch) in PATH_OCTETS for ch in path)
