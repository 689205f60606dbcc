"""Tests for address family classification and ordering helpers."""

from ghosts.core.domain.address import (
    FAMILY_ORDER,
    classify,
    is_ipv6,
    natural_sorted,
    partition,
    unique,
)
from ghosts.core.domain.models import AddressFamily


class TestClassify:
    """Colon presence decides the family."""

    def test_ipv4_address(self) -> None:
        """Dotted quads are IPv4."""
        assert classify("192.0.2.1") is AddressFamily.IPV4

    def test_ipv6_address(self) -> None:
        """Anything with a colon is IPv6."""
        assert classify("2001:db8::1") is AddressFamily.IPV6
        assert is_ipv6("::1")

    def test_cidr_notation(self) -> None:
        """CIDR suffixes do not change the family."""
        assert classify("192.0.2.0/24") is AddressFamily.IPV4
        assert classify("2001:db8::/32") is AddressFamily.IPV6

    def test_family_order_puts_ipv4_first(self) -> None:
        """IPv4 precedes IPv6 in every combined section."""
        assert FAMILY_ORDER == (AddressFamily.IPV4, AddressFamily.IPV6)

    def test_host_prefix(self) -> None:
        """Single-host prefixes are /32 and /128."""
        assert AddressFamily.IPV4.host_prefix() == 32
        assert AddressFamily.IPV6.host_prefix() == 128

    def test_label(self) -> None:
        """Display labels used in the summary table."""
        assert AddressFamily.IPV4.label() == "IPv4"
        assert AddressFamily.IPV6.label() == "IPv6"


class TestNaturalSort:
    """Digit runs compare numerically."""

    def test_numeric_segments(self) -> None:
        """10.0.0.2 sorts before 10.0.0.10."""
        assert natural_sorted(["10.0.0.10", "10.0.0.2", "9.0.0.1"]) == [
            "9.0.0.1",
            "10.0.0.2",
            "10.0.0.10",
        ]

    def test_cidr_prefix_lengths(self) -> None:
        """Prefix lengths are numeric too."""
        assert natural_sorted(["192.0.2.0/32", "192.0.2.0/24"]) == ["192.0.2.0/24", "192.0.2.0/32"]

    def test_ipv6_mixed_hex(self) -> None:
        """Hex groups mixing letters and digits sort without type errors."""
        values = ["2001:db8::10/128", "2001:db8::2/128", "2001:db8::a/128"]
        assert natural_sorted(values) == ["2001:db8::2/128", "2001:db8::10/128", "2001:db8::a/128"]

    def test_separator_before_digit_group(self) -> None:
        """A shorter group ending in "::" sorts before a longer one."""
        values = [
            "2603:1000::/48",
            "2606:50c0::/32",
            "2603:1000:104::/56",
            "2a0a:a440:1::/48",
            "2603:1000:4::/56",
            "2a0a:a440::/29",
        ]
        assert natural_sorted(values) == [
            "2a0a:a440::/29",
            "2a0a:a440:1::/48",
            "2603:1000::/48",
            "2603:1000:4::/56",
            "2603:1000:104::/56",
            "2606:50c0::/32",
        ]

    def test_digits_before_letters(self) -> None:
        """Digit runs rank below letters, case aside."""
        assert natural_sorted(["2001:db8::B", "2001:db8::9", "2001:db8::a"]) == [
            "2001:db8::9",
            "2001:db8::a",
            "2001:db8::B",
        ]


class TestPartitionAndUnique:
    """Order-preserving helpers."""

    def test_partition_keeps_order(self) -> None:
        """Each family keeps its relative order; empties are dropped."""
        v4, v6 = partition(["2.2.2.2", "2001:db8::1", "", "1.1.1.1", "::1"])
        assert v4 == ["2.2.2.2", "1.1.1.1"]
        assert v6 == ["2001:db8::1", "::1"]

    def test_unique_first_occurrence_wins(self) -> None:
        """Repeats are dropped at their later positions."""
        assert unique(["b", "a", "b", "c", "a"]) == ["b", "a", "c"]
