"""Result type for actions triggered from the window.

The exporter itself raises on failure. The window converts that outcome
into a Result so the message box logic lives in one place.
"""
from dataclasses import dataclass
from typing import Optional, TypeVar, Generic

T = TypeVar('T')


@dataclass
class Result(Generic[T]):
    """Outcome of a user action.
    
    Attributes:
        success: Whether the action completed.
        value: The produced value (e.g. the saved file path), None on failure
            or when the action was skipped.
        error: Error message on failure.
        error_type: Error category, one of the ErrorType constants.
    """
    success: bool
    value: Optional[T] = None
    error: Optional[str] = None
    error_type: Optional[str] = None
    
    @classmethod
    def ok(cls, value: T = None) -> 'Result[T]':
        return cls(success=True, value=value)
    
    @classmethod
    def fail(cls, error: str, error_type: str = None) -> 'Result[T]':
        return cls(success=False, error=error, error_type=error_type)
    
    def __bool__(self) -> bool:
        return self.success
    
    @property
    def skipped(self) -> bool:
        """True when the action succeeded without producing anything."""
        return self.success and self.value is None


class ErrorType:
    """Standard error type constants."""
    EXPORT = "EXPORT"
    RASTER = "RASTER"
    IO = "IO"
