"""Tests for patissier.octets: cookie-octet tables and syntax predicates."""

import pytest

from patissier.octets import (
    NAME_OCTETS,
    PATH_OCTETS,
    VALUE_OCTETS,
    is_valid_domain,
    is_valid_name,
    is_valid_path,
    is_valid_value,
)

NAME_SEPARATORS = list(' "(),/:;<=>?@[\\]{}')
VALUE_SEPARATORS = list(' ";\\')
CONTROLS = [chr(c) for c in range(0x20)] + ["\x7f"]


class TestTables:
    def test_name_octets_are_printable_ascii(self) -> None:
        assert all(0x20 <= c <= 0x7E for c in NAME_OCTETS)

    def test_value_octets_are_printable_ascii(self) -> None:
        assert all(0x20 <= c <= 0x7E for c in VALUE_OCTETS)

    def test_name_octets_exclude_separators(self) -> None:
        assert not {ord(ch) for ch in NAME_SEPARATORS} & NAME_OCTETS

    def test_value_octets_exclude_separators(self) -> None:
        assert not {ord(ch) for ch in VALUE_SEPARATORS} & VALUE_OCTETS

    def test_table_sizes(self) -> None:
        # 95 printable characters minus the excluded ones
        assert len(NAME_OCTETS) == 95 - 18
        assert len(VALUE_OCTETS) == 95 - 4

    def test_names_are_a_subset_of_values(self) -> None:
        assert NAME_OCTETS < VALUE_OCTETS


class TestIsValidName:
    def test_token(self) -> None:
        assert is_valid_name("session_id")

    def test_every_allowed_octet(self) -> None:
        assert is_valid_name("".join(chr(c) for c in sorted(NAME_OCTETS)))

    def test_empty(self) -> None:
        assert is_valid_name("")

    @pytest.mark.parametrize("char", NAME_SEPARATORS)
    def test_separator_rejected(self, char: str) -> None:
        assert not is_valid_name(f"a{char}b")

    @pytest.mark.parametrize("char", CONTROLS)
    def test_control_rejected(self, char: str) -> None:
        assert not is_valid_name(f"a{char}b")

    def test_non_ascii_rejected(self) -> None:
        assert not is_valid_name("café")


class TestIsValidValue:
    def test_every_allowed_octet(self) -> None:
        assert is_valid_value("".join(chr(c) for c in sorted(VALUE_OCTETS)))

    @pytest.mark.parametrize("char", ["(", ")", ",", "/", ":", "<", "=", ">", "?", "@", "[", "]", "{", "}"])
    def test_name_separators_allowed(self, char: str) -> None:
        assert is_valid_value(f"a{char}b")

    @pytest.mark.parametrize("char", VALUE_SEPARATORS)
    def test_separator_rejected(self, char: str) -> None:
        assert not is_valid_value(f"a{char}b")

    @pytest.mark.parametrize("char", CONTROLS)
    def test_control_rejected(self, char: str) -> None:
        assert not is_valid_value(f"a{char}b")

    def test_empty(self) -> None:
        assert is_valid_value("")

    def test_base64(self) -> None:
        assert is_valid_value("YWJjZGVm+/==")


class TestIsValidDomain:
    @pytest.mark.parametrize(
        "domain",
        ["example.com", ".example.com", "sub.example.co.uk", "my-site.io", "a+b.museum", "x1.example.org"],
    )
    def test_valid(self, domain: str) -> None:
        assert is_valid_domain(domain)

    @pytest.mark.parametrize(
        "domain",
        [
            "not a domain",
            "localhost",
            "",
            ".com",
            "example.c",
            "example.technology",
            "example.c0m",
            "example..com",
            "..example.com",
            "example.com.",
            "example.com\n",
            "exa_mple.com",
        ],
    )
    def test_invalid(self, domain: str) -> None:
        assert not is_valid_domain(domain)


class TestIsValidPath:
    def test_root(self) -> None:
        assert is_valid_path("/")

    def test_nested(self) -> None:
        assert is_valid_path("/cookies/jar")

    def test_relative(self) -> None:
        assert not is_valid_path("cookies")

    def test_empty(self) -> None:
        assert not is_valid_path("")

    @pytest.mark.parametrize("char", [";", "\r", "\n", "\x7f", "\x00", "\t"])
    def test_forbidden_octet_rejected(self, char: str) -> None:
        assert not is_valid_path(f"/a{char}b")

    def test_every_allowed_octet(self) -> None:
        assert is_valid_path("/" + "".join(chr(c) for c in sorted(PATH_OCTETS)))
