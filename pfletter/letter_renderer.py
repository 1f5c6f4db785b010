"""Letter renderer for the PF loan application.

Projects an ApplicationDraft onto the fixed letter layout. The renderer is
stateless apart from the date snapshot it is given, so rendering the same
draft twice yields the same HTML.
"""
from html import escape

from .config import (
    PLACEHOLDER, AMOUNT_PLACEHOLDER, ADDRESSEE_TITLE, ADDRESSEE_LINES,
    LETTER_SUBJECT
)
from .data_structures import ApplicationDraft, LetterPresentation
from .formatters import format_indian_currency, resolve_reason
from .theme import ThemeManager


def _slot(value: str, placeholder: str = PLACEHOLDER) -> str:
    return value if value else placeholder


class LetterRenderer:
    """Builds the letter preview HTML from a draft."""
    
    def __init__(self, today_string: str, theme_manager: ThemeManager = None):
        """Initialize LetterRenderer.
        
        Args:
            today_string: Date shown in the header and signature block.
            theme_manager: Optional ThemeManager for the letter CSS.
        """
        self.today_string = today_string
        self.theme_manager = theme_manager or ThemeManager()
    
    def prepare_presentation(self, draft: ApplicationDraft) -> LetterPresentation:
        """Compute every slot of the letter, substituting placeholders."""
        amount = format_indian_currency(draft.loan_amount)
        return LetterPresentation(
            date=_slot(self.today_string),
            employee_name=_slot(draft.employee_name),
            eb_number=_slot(draft.eb_number),
            department_designation=_slot(draft.department_designation),
            reason=_slot(resolve_reason(draft.loan_reason, draft.loan_reason_other)),
            amount=_slot(amount, AMOUNT_PLACEHOLDER),
            mobile_number=_slot(draft.mobile_number),
            addressee_title=ADDRESSEE_TITLE,
            addressee_lines=list(ADDRESSEE_LINES),
            subject=LETTER_SUBJECT,
        )
    
    def render_html(self, draft: ApplicationDraft) -> str:
        """Render the letter as an HTML document.
        
        Returns:
            HTML content string.
        """
        p = self.prepare_presentation(draft)

        def e(text):
            return escape(text, quote=False)
        
        addressee = "<br/>".join(e(line) for line in p.addressee_lines)
        
        html = f"""<!DOCTYPE html>
<html><head>
<meta charset="utf-8">
<style>{self.theme_manager.letter_css()}</style>
</head><body>
<div class="letter">
<div class="letterHeader">Date: {e(p.date)}</div>
<div class="letterBody">
<p>To,<br/>
<strong>{e(p.addressee_title)}</strong><br/>
{addressee}</p>

<p><strong>Subject:</strong> {e(p.subject)}</p>

<p>Respected Sir/Madam,</p>

<p>I, <strong>{e(p.employee_name)}</strong> (EB No. <strong>{e(p.eb_number)}</strong>),
working as <strong>{e(p.department_designation)}</strong>, kindly request a
non-refundable withdrawal from my Provident Fund for <strong>{e(p.reason)}</strong>.</p>

<p>The amount requested is <strong>{e(p.amount)}</strong>.</p>

<p>I confirm that the information provided is true and accurate to the best of my knowledge. I request you to kindly
process the withdrawal at the earliest.</p>

<p>For any clarification, I can be reached at <strong>{e(p.mobile_number)}</strong>.</p>

<p>Thank you.</p>

<p>Sincerely,<br/>
<strong>{e(p.employee_name)}</strong><br/>
EB No. {e(p.eb_number)}<br/>
Date: {e(p.date)}</p>
</div>
</div>
</body></html>"""
        
        return html
