"""Custom exceptions for the PF Loan Application Generator."""


class LetterAppError(Exception):
    """Base exception for all application errors."""
    
    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}
    
    def __str__(self):
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class ExportError(LetterAppError):
    """Raised when the letter cannot be exported as a document."""
    
    def __init__(self, message: str, path: str = None):
        details = {}
        if path:
            details['path'] = path
        super().__init__(message, details)


class RasterizationError(ExportError):
    """Raised when the preview region cannot be rendered to an image."""
    
    def __init__(self, width: int = 0, height: int = 0):
        message = f"Could not rasterize letter region ({width}x{height})"
        super().__init__(message)
        self.details['width'] = width
        self.details['height'] = height
