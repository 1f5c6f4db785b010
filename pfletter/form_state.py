"""Form state for the loan application window.

This module holds the single in-memory draft for the session and notifies
a listener whenever a field changes, so the preview can re-render.
"""
from dataclasses import fields, replace
from datetime import date
from typing import Callable, List, Optional

from .config import OTHER_REASON
from .data_structures import ApplicationDraft
from .formatters import format_indian_currency, format_letter_date, resolve_reason


FIELD_NAMES: List[str] = [f.name for f in fields(ApplicationDraft)]


class FormState:
    """Owns the ApplicationDraft and the session date snapshot.
    
    Every setter accepts any string (None is stored as ""), updates the
    draft in place and then calls on_changed with the draft. Derived values
    are computed on access and never cached.
    
    Attributes:
        today_string: Letter date, captured once at construction.
        on_changed: Callback invoked after each field update.
    """
    
    def __init__(self, on_changed: Callable[[ApplicationDraft], None] = None, today: date = None):
        """Initialize FormState.
        
        Args:
            on_changed: Optional callback invoked after each field update.
            today: Date to snapshot for the letter. Defaults to today.
        """
        self._draft = ApplicationDraft()
        self.today_string: str = format_letter_date(today)
        self.on_changed = on_changed
    
    @property
    def draft(self) -> ApplicationDraft:
        """Get a copy of the current draft."""
        return replace(self._draft)
    
    def get(self, name: str) -> str:
        if name not in FIELD_NAMES:
            raise KeyError(f"Unknown form field: {name}")
        return getattr(self._draft, name)
    
    def set_field(self, name: str, value: Optional[str]) -> None:
        """Update one field and notify the listener.
        
        Args:
            name: ApplicationDraft attribute name.
            value: New value; any string is accepted.
            
        Raises:
            KeyError: If name is not a draft field.
        """
        if name not in FIELD_NAMES:
            raise KeyError(f"Unknown form field: {name}")
        setattr(self._draft, name, "" if value is None else str(value))
        if self.on_changed:
            self.on_changed(self.draft)
    
    def set_employee_name(self, value: str) -> None:
        self.set_field("employee_name", value)
    
    def set_eb_number(self, value: str) -> None:
        self.set_field("eb_number", value)
    
    def set_department_designation(self, value: str) -> None:
        self.set_field("department_designation", value)
    
    def set_loan_amount(self, value: str) -> None:
        self.set_field("loan_amount", value)
    
    def set_loan_reason(self, value: str) -> None:
        self.set_field("loan_reason", value)
    
    def set_loan_reason_other(self, value: str) -> None:
        self.set_field("loan_reason_other", value)
    
    def set_mobile_number(self, value: str) -> None:
        self.set_field("mobile_number", value)
    
    @property
    def is_other_reason(self) -> bool:
        """Whether the free-text reason field applies."""
        return self._draft.loan_reason == OTHER_REASON
    
    @property
    def resolved_reason(self) -> str:
        return resolve_reason(self._draft.loan_reason, self._draft.loan_reason_other)
    
    @property
    def formatted_amount(self) -> str:
        return format_indian_currency(self._draft.loan_amount)
