# locatecar/utils/constants.py

"""
Global constants for pricing limits, paging and display formats.
These constants are imported by both models and services.
"""

# Display format for timestamps on receipts and reports
DISPLAY_FMT = "%d/%m/%Y %H:%M"

# Suffix format used when naming report artifacts
REPORT_STAMP_FMT = "%Y%m%d_%H%M%S"

DEFAULT_TIMEZONE = "America/Sao_Paulo"
DEFAULT_PAGE_SIZE = 10
TOP_N = 10
TOP_EMAIL_DOMAINS = 5


class Discount:
    INDIVIDUAL_MIN_DAYS = 5
    INDIVIDUAL_RATE = 0.05
    ORGANIZATION_MIN_DAYS = 3
    ORGANIZATION_RATE = 0.10
    PROMOTION_MIN_DAYS = 10
    PROMOTION_RATE = 0.15
    CAP = 0.20


# --- Persistence file names ---
VEHICLES_FILE = "vehicles.pkl"
CUSTOMERS_FILE = "customers.pkl"
RENTALS_FILE = "rentals.pkl"
