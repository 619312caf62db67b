"""
Tests for listing CSV loading and normalization.
"""

import io

import pandas as pd
import pytest

from config import LISTING_COLUMNS
from services import data_loader
from utils.helpers import normalize_text, parse_number

LISTINGS_CSV = """Title,apartment_type,category,street_name,street_number,city,monthly_rent,extra
Sunny loft,loft,rent,Main St,12,Berlin,"1.250,50",x
  Garden flat ,flat,rent,Park Ave,,Munich,900,y
No street,studio,rent,,5,Hamburg,,z
"""


@pytest.fixture
def listings_file(tmp_path):
    path = tmp_path / "listings.csv"
    path.write_text(LISTINGS_CSV, encoding="utf-8")
    return path


class TestLoadListings:
    """Tests for reading listings from disk and uploads."""

    def test_columns_aligned_to_schema(self, listings_file):
        listings = data_loader.load_listings(listings_file)

        assert list(listings.columns) == ["row_number", "status"] + LISTING_COLUMNS
        assert "extra" not in listings.columns

    def test_values_stripped_and_headers_lowercased(self, listings_file):
        listings = data_loader.load_listings(listings_file)

        assert listings.loc[1, "title"] == "Garden flat"
        assert listings.loc[0, "title"] == "Sunny loft"
        assert listings.loc[1, "street_number"] == ""

    def test_row_numbers_and_status(self, listings_file):
        listings = data_loader.load_listings(listings_file)

        assert listings["row_number"].tolist() == [1, 2, 3]
        assert listings["status"].tolist() == [
            data_loader.STATUS_LABELS["READY"],
            data_loader.STATUS_LABELS["READY"],
            data_loader.STATUS_LABELS["INCOMPLETE"],
        ]

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            data_loader.load_listings(tmp_path / "missing.csv")

    def test_empty_file_raises_value_error(self, tmp_path):
        path = tmp_path / "empty.csv"
        path.write_text("", encoding="utf-8")

        with pytest.raises(ValueError):
            data_loader.load_listings(path)

    def test_header_only_file_is_empty_dataset(self, tmp_path):
        path = tmp_path / "header.csv"
        path.write_text("title,city\n", encoding="utf-8")
        listings = data_loader.load_listings(path)

        assert listings.empty
        assert data_loader.summarize_listings(listings) == {"total": 0, "ready": 0, "incomplete": 0}

    def test_upload_matches_disk(self, listings_file):
        from_disk = data_loader.load_listings(listings_file)
        from_upload = data_loader.load_uploaded_listings(io.BytesIO(LISTINGS_CSV.encode("utf-8")))

        pd.testing.assert_frame_equal(from_disk, from_upload)

    def test_headers_equal_after_lowercasing_rejected(self):
        upload = io.BytesIO(b"Title,title,apartment_type,category,street_name,city\nA,B,flat,rent,Main,Berlin\n")

        with pytest.raises(ValueError, match="Duplicate column"):
            data_loader.load_uploaded_listings(upload)

    def test_content_fingerprint_tracks_content_not_name(self):
        first = data_loader.content_fingerprint(LISTINGS_CSV.encode("utf-8"))
        same = data_loader.content_fingerprint(LISTINGS_CSV.encode("utf-8"))
        changed = data_loader.content_fingerprint(LISTINGS_CSV.replace("Berlin", "Bonn").encode("utf-8"))

        assert first == same
        assert first != changed


class TestStatus:
    """Tests for readiness labels and summaries."""

    def test_missing_required_fields(self):
        row = {"title": "Loft", "apartment_type": "loft", "category": " ", "city": "Berlin"}

        assert data_loader.missing_required_fields(row) == ["category", "street_name"]

    def test_summary_counts(self, listings_file):
        listings = data_loader.load_listings(listings_file)

        assert data_loader.summarize_listings(listings) == {"total": 3, "ready": 2, "incomplete": 1}

    def test_numeric_view_parses_rent(self, listings_file):
        listings = data_loader.numeric_view(data_loader.load_listings(listings_file))

        assert listings.loc[0, "monthly_rent"] == pytest.approx(1250.5)
        assert listings.loc[1, "monthly_rent"] == pytest.approx(900.0)
        assert pd.isna(listings.loc[2, "monthly_rent"])


class TestHelpers:
    """Tests for text and number normalization."""

    @pytest.mark.parametrize("value,expected", [(None, ""), (float("nan"), ""), ("  a ", "a"), (3, "3")])
    def test_normalize_text(self, value, expected):
        assert normalize_text(value) == expected

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("900", 900.0),
            ("$1,200.75", 1200.75),
            ("1.250,50", 1250.5),
            ("2,5", 2.5),
            ("1,250", 1250.0),
            ("12,345,678", 12345678.0),
            ("€ 2,500.00", 2500.0),
            ("", None),
            ("n/a", None),
        ],
    )
    def test_parse_number(self, value, expected):
        assert parse_number(value) == expected
