"""Centralized configuration for the PF Loan Application Generator.

This module contains the locale rules, letter text, and export constants
used throughout the application.
"""

# =============================================================================
# APPLICATION
# =============================================================================

APP_TITLE = "PF Loan Application Generator"

ORGANIZATION_NAME = "Anglo India Jute & Textile Industries Pvt. Ltd."

# =============================================================================
# LOCALE
# =============================================================================

# Single supported locale (en-IN)
LOCALE = "en-IN"

CURRENCY_CODE = "INR"

CURRENCY_SYMBOL = "₹"

# Letter date layout: day, month name, year (e.g. "05 March 2026")
DATE_FORMAT_LETTER = "{day:02d} {month} {year}"

# English month names, independent of the process locale
MONTH_NAMES_EN = {
    1: "January", 2: "February", 3: "March", 4: "April",
    5: "May", 6: "June", 7: "July", 8: "August",
    9: "September", 10: "October", 11: "November", 12: "December"
}

# Amounts with more integer digits than this format as blank
MAX_AMOUNT_DIGITS = 30

# =============================================================================
# FORM
# =============================================================================

OTHER_REASON = "Other"

LOAN_REASONS = [
    "House Construction",
    "Medical Treatment",
    "Children's Education",
    "Daughter's marriage expenses",
    OTHER_REASON,
]

DEFAULT_LOAN_REASON = LOAN_REASONS[0]

# =============================================================================
# LETTER
# =============================================================================

# Shown in place of any blank slot
PLACEHOLDER = "__________"

AMOUNT_PLACEHOLDER = f"{CURRENCY_SYMBOL} _________"

ADDRESSEE_TITLE = "The Labour Officer"

ADDRESSEE_LINES = [
    ORGANIZATION_NAME,
    "West Ghoshpara Road, Jagaddal, North 24 Parganas",
]

LETTER_SUBJECT = "Request for Non-Refundable Loan Withdrawal against PF"

# =============================================================================
# EXPORT
# =============================================================================

EXPORT_FILENAME_PREFIX = "PF_Loan_Application_"

EXPORT_FALLBACK_NAME = "Letter"

EXPORT_EXTENSION = ".pdf"

# Oversampling factor for rasterization
EXPORT_SCALE = 2

EXPORT_BACKGROUND = "#ffffff"

# A4 portrait in mm
PAGE_WIDTH_MM = 210.0
PAGE_HEIGHT_MM = 297.0

# Width of the letter region in px (A4 at 96 dpi)
LETTER_WIDTH_PX = 794
