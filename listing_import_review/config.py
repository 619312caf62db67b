"""Application configuration constants."""

import os
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parent
DATA_DIR = ROOT_DIR / "data"
ASSETS_DIR = ROOT_DIR / "assets"

LISTINGS_FILE = DATA_DIR / "listings.csv"

LOG_LEVEL = os.getenv("LISTING_REVIEW_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

DEFAULT_PAGE_SIZE = 50
DEFAULT_INITIAL_PAGE = 1
PAGE_SIZE_OPTIONS = [25, 50, 100, 200]

LISTING_COLUMNS = [
    "title",
    "description",
    "apartment_type",
    "category",
    "street_number",
    "street_name",
    "city",
    "region",
    "zip_code",
    "country",
    "monthly_rent",
    "bedrooms",
    "bathrooms",
    "max_guests",
    "square_meters",
]

REQUIRED_LISTING_COLUMNS = ["title", "apartment_type", "category", "street_name", "city"]

FILTER_COLUMNS = ["status", "category", "apartment_type", "city", "region", "country"]

SEARCH_COLUMNS = ["title", "description", "street_name", "city", "zip_code"]

TABLE_COLUMNS = [
    "row_number",
    "status",
    "title",
    "apartment_type",
    "category",
    "street_number",
    "street_name",
    "zip_code",
    "city",
    "region",
    "monthly_rent",
    "bedrooms",
    "bathrooms",
    "square_meters",
]
