"""Tests for the domain models."""

import pydantic
import pytest

from ghosts.core.domain.models import DomainRecord, LookupOutcome, MetaDocument


class TestDomainRecord:
    """The normalized per-domain result."""

    def test_from_addresses_sets_primary(self) -> None:
        """The primary address is the first resolved one."""
        record = DomainRecord.from_addresses("github.com", ["1.1.1.1", "2001:db8::1"])
        assert record.primary_address == "1.1.1.1"
        assert record.addresses == ("1.1.1.1", "2001:db8::1")
        assert record.resolved

    def test_failed_record_is_empty(self) -> None:
        """A failed record has no addresses and an empty primary."""
        record = DomainRecord.failed("bad.example")
        assert record.addresses == ()
        assert record.primary_address == ""
        assert not record.resolved

    def test_record_is_frozen(self) -> None:
        """Records are immutable once created."""
        record = DomainRecord.failed("bad.example")
        with pytest.raises(pydantic.ValidationError):
            record.domain = "other"  # type: ignore[misc]

    def test_list_input_becomes_tuple(self) -> None:
        """Addresses given as a list are stored as a tuple."""
        record = DomainRecord(domain="a", primary_address="1.1.1.1", addresses=["1.1.1.1"])
        assert record.addresses == ("1.1.1.1",)


class TestLookupOutcome:
    """Explicit success/empty values for sub-lookups."""

    def test_found(self) -> None:
        """A found outcome is ok and carries its addresses."""
        outcome = LookupOutcome.found(["1.1.1.1"])
        assert outcome.ok
        assert outcome.addresses == ("1.1.1.1",)

    def test_empty_with_error(self) -> None:
        """An empty outcome with an error is not ok."""
        outcome = LookupOutcome.empty("NXDOMAIN")
        assert not outcome.ok
        assert outcome.addresses == ()


class TestMetaDocument:
    """Validation of the GitHub meta payload."""

    def test_unknown_categories_ignored(self) -> None:
        """Keys outside the seven categories are dropped."""
        doc = MetaDocument.model_validate({"web": ["192.0.2.1/32"], "dependabot": ["198.51.100.1/32"]})
        assert doc.all_ranges() == ["192.0.2.1/32"]

    def test_missing_and_non_list_categories_are_empty(self) -> None:
        """Absent or malformed categories count as empty."""
        doc = MetaDocument.model_validate({"api": "192.0.2.1/32", "verifiable_password_authentication": True})
        assert doc.api == []
        assert doc.all_ranges() == []

    def test_category_order(self) -> None:
        """Flattening follows web, api, git, hooks, packages, pages, actions."""
        doc = MetaDocument.model_validate(
            {"actions": ["7"], "web": ["1"], "pages": ["6"], "api": ["2"], "hooks": ["4"], "git": ["3"], "packages": ["5"]}
        )
        assert doc.all_ranges() == ["1", "2", "3", "4", "5", "6", "7"]
