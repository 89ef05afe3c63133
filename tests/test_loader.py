#!/usr/bin/env python3
"""Tests for YAML loading and saving utilities."""

from datetime import date, datetime
from pathlib import Path

import pytest
import yaml

from estimator import (
    DEFAULT_TABLE,
    DrivingSeverity,
    EstimationRequest,
    IncompleteTableError,
    InvalidTableError,
    IntervalTable,
    OilClass,
    Recommendation,
    VehicleClass,
    check_table_data,
    load_requests,
    load_table,
    parse_date,
    save_table,
    table_from_dict,
    table_to_dict,
)

DEFAULT_TABLE_FILE = Path(__file__).parent.parent / "tables" / "default.yaml"

# =============================================================================
# parse_date tests
# =============================================================================


class TestParseDate:
    """Tests for parse_date."""

    def test_parses_iso_string(self):
        assert parse_date("2025-01-15") == date(2025, 1, 15)

    def test_strips_whitespace(self):
        assert parse_date(" 2025-01-15 ") == date(2025, 1, 15)

    def test_passes_dates_through(self):
        assert parse_date(date(2025, 1, 15)) == date(2025, 1, 15)
        assert parse_date(datetime(2025, 1, 15, 8, 30)) == date(2025, 1, 15)

    def test_empty_is_none(self):
        assert parse_date(None) is None
        assert parse_date("") is None

    def test_malformed_raises(self):
        with pytest.raises(ValueError):
            parse_date("not a date")


# =============================================================================
# load_table / save_table tests
# =============================================================================


class TestLoadTable:
    """Tests for load_table."""

    def test_default_file_matches_builtin_table(self):
        assert load_table(DEFAULT_TABLE_FILE) == DEFAULT_TABLE

    def test_loads_custom_values(self, tmp_path):
        data = table_to_dict(DEFAULT_TABLE)
        data["intervals"]["car"]["synthetic"] = {
            "distanceLimitKm": 20000,
            "timeLimitMonths": 24,
        }
        path = tmp_path / "custom.yaml"
        path.write_text(yaml.safe_dump(data))

        table = load_table(path)

        assert isinstance(table, IntervalTable)
        assert table.get(VehicleClass.CAR, OilClass.SYNTHETIC) == (
            Recommendation(20000, 24)
        )

    def test_missing_entry_raises(self, tmp_path):
        path = tmp_path / "partial.yaml"
        path.write_text("""
intervals:
  car:
    synthetic:
      distanceLimitKm: 15000
      timeLimitMonths: 12
""")
        with pytest.raises(InvalidTableError) as excinfo:
            load_table(path)
        assert "is a required property" in excinfo.value.message

    def test_quoted_limit_raises(self, tmp_path):
        """A string limit is rejected before it can reach estimate()."""
        path = tmp_path / "quoted.yaml"
        path.write_text(
            DEFAULT_TABLE_FILE.read_text().replace(
                "distanceLimitKm: 15000", 'distanceLimitKm: "15000"'
            )
        )
        with pytest.raises(InvalidTableError) as excinfo:
            load_table(path)
        assert excinfo.value.path == "intervals.car.synthetic.distanceLimitKm"

    def test_fractional_months_raises(self, tmp_path):
        path = tmp_path / "fractional.yaml"
        path.write_text(
            DEFAULT_TABLE_FILE.read_text().replace(
                "timeLimitMonths: 9", "timeLimitMonths: 9.5"
            )
        )
        with pytest.raises(InvalidTableError):
            load_table(path)

    def test_zero_months_raises(self, tmp_path):
        path = tmp_path / "zero.yaml"
        path.write_text(
            DEFAULT_TABLE_FILE.read_text().replace(
                "timeLimitMonths: 9", "timeLimitMonths: 0"
            )
        )
        with pytest.raises(InvalidTableError):
            load_table(path)

    def test_unknown_vehicle_raises(self, tmp_path):
        data = table_to_dict(DEFAULT_TABLE)
        data["intervals"]["truck"] = data["intervals"]["car"]
        path = tmp_path / "truck.yaml"
        path.write_text(yaml.safe_dump(data))
        with pytest.raises(InvalidTableError):
            load_table(path)

    def test_empty_file_raises(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        with pytest.raises(InvalidTableError):
            load_table(path)

    def test_invalid_table_error_is_value_error(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("intervals: {}\n")
        with pytest.raises(ValueError):
            load_table(path)


class TestCheckTableData:
    """Tests for check_table_data and table_from_dict."""

    def test_default_table_passes(self):
        check_table_data(table_to_dict(DEFAULT_TABLE))

    def test_custom_schema_is_used(self):
        with pytest.raises(InvalidTableError):
            check_table_data({"intervals": {}}, schema={"type": "string"})

    def test_table_from_dict_still_requires_every_pair(self):
        """Unchecked data still cannot build a partial table."""
        data = table_to_dict(DEFAULT_TABLE)
        del data["intervals"]["car"]["conventional"]
        with pytest.raises(IncompleteTableError) as excinfo:
            table_from_dict(data)
        assert excinfo.value.missing == [(VehicleClass.CAR, OilClass.CONVENTIONAL)]


class TestSaveTable:
    """Tests for save_table."""

    def test_writes_camel_case_keys(self, tmp_path):
        path = tmp_path / "out.yaml"
        save_table(path, DEFAULT_TABLE)

        data = yaml.safe_load(path.read_text())
        assert data["intervals"]["motorcycle_heavy_duty"]["conventional"] == {
            "distanceLimitKm": 6000,
            "timeLimitMonths": 6,
        }

    def test_saved_table_loads_back(self, tmp_path):
        path = tmp_path / "out.yaml"
        save_table(path, DEFAULT_TABLE)
        assert load_table(path) == DEFAULT_TABLE


# =============================================================================
# load_requests tests
# =============================================================================


class TestLoadRequests:
    """Tests for load_requests."""

    def test_loads_full_and_minimal_entries(self, tmp_path):
        path = tmp_path / "batch.yaml"
        path.write_text("""
requests:
  - vehicle: motorcycle_heavy_duty
    oil: conventional
    distanceKm: 3000
    lastChange: 2025-01-10
    severity: severe
  - vehicle: car
    oil: synthetic
    distanceKm: 10000
""")
        requests = load_requests(path)

        assert requests == [
            EstimationRequest(
                VehicleClass.MOTORCYCLE_HEAVY_DUTY,
                OilClass.CONVENTIONAL,
                3000,
                date(2025, 1, 10),
                DrivingSeverity.SEVERE,
            ),
            EstimationRequest(VehicleClass.CAR, OilClass.SYNTHETIC, 10000),
        ]

    def test_quoted_date_and_numeric_string(self, tmp_path):
        path = tmp_path / "batch.yaml"
        path.write_text("""
requests:
  - vehicle: car
    oil: semi_synthetic
    distanceKm: "1500.5"
    lastChange: '2025-03-01'
""")
        (request,) = load_requests(path)
        assert request.distance_driven_km == 1500.5
        assert request.last_change_date == date(2025, 3, 1)

    def test_unparseable_distance_becomes_nan(self, tmp_path):
        path = tmp_path / "batch.yaml"
        path.write_text("""
requests:
  - vehicle: car
    oil: synthetic
    distanceKm: lots
""")
        (request,) = load_requests(path)
        assert request.distance_driven_km != request.distance_driven_km

    def test_unknown_oil_raises(self, tmp_path):
        path = tmp_path / "batch.yaml"
        path.write_text("""
requests:
  - vehicle: car
    oil: castor
    distanceKm: 100
""")
        with pytest.raises(ValueError):
            load_requests(path)

    def test_missing_requests_key_is_empty(self, tmp_path):
        path = tmp_path / "batch.yaml"
        path.write_text("other: 1\n")
        assert load_requests(path) == []

    def test_sample_batch_file_loads(self):
        path = Path(__file__).parent.parent / "batches" / "fleet.yaml"
        assert len(load_requests(path)) == 3
