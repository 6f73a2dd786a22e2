"""Core constants used across PlasticList modules.

This module centralizes column names, tool names, and query limits.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

DEFAULT_DATA_PATH = "plasticlist-oct-2025.tsv"
DEFAULT_SERVER_NAME = "microplastics-server"
SERVER_VERSION = "1.0.0"
S3_URI_PREFIX = "s3://"
TABLE_DELIMITER = "\t"
DETECTION_LIMIT_PREFIX = "<"

CHEMICAL_NAMES = (
    "DEHP_equivalents",
    "DEHP",
    "DBP",
    "BBP",
    "DINP",
    "BPA",
    "BPS",
    "BPF",
    "DEP",
    "DMP",
    "DEHT",
)
PERCENTILE_CHEMICAL_NAMES = (
    "DEHP_equivalents",
    "DEHP",
    "DBP",
    "BBP",
    "DINP",
    "BPA",
    "BPS",
    "BPF",
)
HEADLINE_CHEMICAL_NAMES = ("DEHP_equivalents", "DEHP", "DBP", "BBP", "BPA", "BPS")
COMPARISON_CHEMICAL_NAMES = ("DEHP_equivalents", "DEHP", "DBP", "BBP", "DINP", "BPA", "BPS", "BPF")
RANKING_CHEMICAL = "DEHP_equivalents"
MEASUREMENT_COLUMN_SUFFIX = "_ng_g"
PERCENTILE_COLUMN_SUFFIX = "_percentile_ng_g"

SEARCH_FIELDS = ("all", "name", "tags", "location")
DEFAULT_SEARCH_FIELD = "all"
PACKAGING_TYPES = ("plastic", "glass", "carton")
ORGANIC_TAG = "organic"
ALL_FOOD_TYPES_LABEL = "all"
PRODUCT_NOT_FOUND_MESSAGE = "Product not found"

DEFAULT_MAX_SAFEST_RESULTS = 10
MAX_PACKAGING_EXAMPLES = 3
MAX_ORGANIC_EXAMPLES = 5
AVERAGE_DECIMAL_PLACES = 2
JSON_INDENT = 2
