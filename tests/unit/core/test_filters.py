"""Unit tests for the filter engine."""

import pytest

from kglight.core.filters import filter_records, record_matches
from kglight.core.types import FilterDimension, FilterSelection


class TestFilterRecords:
    def test_empty_selection_returns_everything_in_order(self, org_records):
        result = filter_records(org_records, FilterSelection())
        assert result == org_records
        assert result is not org_records

    def test_lifecycle_single_value(self, spec_records):
        result = filter_records(spec_records, FilterSelection(lifecycle={"Active"}))
        assert [(r.producer, r.consumer) for r in result] == [("A", "B")]

    def test_lifecycle_is_or_within_dimension(self, org_records):
        result = filter_records(org_records, FilterSelection(lifecycle={"Deprecated", "Pilot"}))
        assert [r.consumer for r in result] == ["Data Lake", "Mail Gateway"]

    def test_capability_any_selected_tag(self, org_records):
        result = filter_records(org_records, FilterSelection(capability={"Payments", "Messaging"}))
        assert [r.producer for r in result] == ["Billing", "Notifications"]

    def test_capability_matches_plain_and_json_cells(self, org_records):
        # "Invoicing" appears in a JSON array and in a comma-delimited cell
        result = filter_records(org_records, FilterSelection(capability={"Invoicing"}))
        assert [(r.producer, r.consumer) for r in result] == [("Billing", "Ledger"), ("CRM", "Billing")]

    def test_org_level1_matches_either_side(self, org_records):
        result = filter_records(org_records, FilterSelection(org_level1={"Data"}))
        assert [r.consumer for r in result] == ["Data Lake"]

        result = filter_records(org_records, FilterSelection(org_level1={"Sales"}))
        assert [r.consumer for r in result] == ["Billing", "Data Lake"]

    def test_org_level2_matches_either_side(self, org_records):
        result = filter_records(org_records, FilterSelection(org_level2={"Billing Ops"}))
        assert [(r.producer, r.consumer) for r in result] == [("Billing", "Ledger"), ("CRM", "Billing")]

    def test_missing_org_value_never_matches_active_dimension(self, org_records):
        result = filter_records(org_records, FilterSelection(org_level2={"Messaging"}))
        assert result == []

    def test_and_across_dimensions(self, org_records):
        selection = FilterSelection(lifecycle={"Active"}, org_level1={"Sales"})
        result = filter_records(org_records, selection)
        assert [(r.producer, r.consumer) for r in result] == [("CRM", "Billing")]

    def test_excluded_by_one_dimension_is_excluded(self, org_records):
        # CRM -> Data Lake matches capability and org, but not lifecycle
        selection = FilterSelection(
            lifecycle={"Active"},
            capability={"Customer Data"},
            org_level1={"Data"},
        )
        assert filter_records(org_records, selection) == []

    def test_unknown_value_filters_everything(self, org_records):
        assert filter_records(org_records, FilterSelection(lifecycle={"Nope"})) == []

    def test_selection_is_not_mutated(self, org_records):
        selection = FilterSelection(lifecycle={"Active"})
        filter_records(org_records, selection)
        assert selection.lifecycle == frozenset({"Active"})

    def test_monotonic_when_constraints_removed(self, org_records):
        strict = FilterSelection(lifecycle={"Active"}, capability={"Invoicing"}, org_level1={"Finance"})
        looser = strict.with_values(FilterDimension.ORG_LEVEL1, [])
        loosest = looser.with_values(FilterDimension.CAPABILITY, [])

        strict_ids = [id(r) for r in filter_records(org_records, strict)]
        looser_ids = [id(r) for r in filter_records(org_records, looser)]
        loosest_ids = [id(r) for r in filter_records(org_records, loosest)]

        assert set(strict_ids) <= set(looser_ids) <= set(loosest_ids)

    def test_monotonic_when_values_added(self, org_records):
        narrow = FilterSelection(lifecycle={"Active"})
        wide = FilterSelection(lifecycle={"Active", "Pilot"})
        assert set(map(id, filter_records(org_records, narrow))) <= set(map(id, filter_records(org_records, wide)))


class TestRecordMatches:
    def test_record_with_only_required_columns(self, record_factory):
        record = record_factory("X", "Y")
        assert record_matches(record, FilterSelection())
        assert not record_matches(record, FilterSelection(lifecycle={"Active"}))
        assert not record_matches(record, FilterSelection(capability={"x"}))
        assert not record_matches(record, FilterSelection(org_level1={"Finance"}))

    @pytest.mark.parametrize("dimension,value", [
        (FilterDimension.LIFECYCLE, "Active"),
        (FilterDimension.CAPABILITY, "y"),
        (FilterDimension.ORG_LEVEL1, "Finance"),
        (FilterDimension.ORG_LEVEL2, "Accounting"),
    ])
    def test_each_dimension_matches(self, record_factory, dimension, value):
        record = record_factory(
            "A", "B",
            lifecycle_status="Active",
            capabilities_supported='["x", "y"]',
            producer_org_level1="Finance",
            consumer_org_level2="Accounting",
        )
        assert record_matches(record, FilterSelection().with_values(dimension, [value]))
