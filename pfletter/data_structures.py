from dataclasses import dataclass
from typing import List

from .config import (
    DEFAULT_LOAN_REASON, EXPORT_SCALE, EXPORT_BACKGROUND,
    PAGE_WIDTH_MM, PAGE_HEIGHT_MM
)


@dataclass
class ApplicationDraft:
    """In-memory form values for the current session. Never persisted."""
    employee_name: str = ""
    eb_number: str = ""
    department_designation: str = ""
    loan_amount: str = ""
    loan_reason: str = DEFAULT_LOAN_REASON
    loan_reason_other: str = ""
    mobile_number: str = ""


@dataclass
class LetterPresentation:
    """Slot values for the letter, with placeholders already substituted."""
    date: str
    employee_name: str
    eb_number: str
    department_designation: str
    reason: str
    amount: str
    mobile_number: str
    addressee_title: str
    addressee_lines: List[str]
    subject: str


@dataclass
class PagePlacement:
    page_index: int
    y_offset: float
    width: float
    height: float


@dataclass
class ExportConfig:
    scale: int = EXPORT_SCALE
    background: str = EXPORT_BACKGROUND
    page_width_mm: float = PAGE_WIDTH_MM
    page_height_mm: float = PAGE_HEIGHT_MM


@dataclass
class Bitmap:
    """A rasterized region. `image` is backend specific (e.g. a QImage)."""
    image: object
    width: int
    height: int
