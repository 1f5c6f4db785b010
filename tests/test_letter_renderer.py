import sys
import os
import unittest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from pfletter.data_structures import ApplicationDraft
from pfletter.letter_renderer import LetterRenderer
from pfletter.config import PLACEHOLDER, AMOUNT_PLACEHOLDER
from pfletter.theme import ThemeManager


class TestLetterRenderer(unittest.TestCase):
    def setUp(self):
        self.renderer = LetterRenderer("05 March 2026")
        self.draft = ApplicationDraft(
            employee_name="Asha Roy",
            eb_number="E123",
            department_designation="Clerk",
            loan_amount="50000",
            loan_reason="Medical Treatment",
            mobile_number="9999999999",
        )

    def test_filled_letter(self):
        """Test every field value reaches the letter body."""
        html = self.renderer.render_html(self.draft)
        for text in ["Asha Roy", "E123", "Clerk", "Medical Treatment", "₹50,000", "9999999999"]:
            self.assertIn(text, html)
        self.assertIn("Date: 05 March 2026", html)
        self.assertIn("The Labour Officer", html)
        self.assertIn("Request for Non-Refundable Loan Withdrawal against PF", html)
        self.assertNotIn(PLACEHOLDER, html)

    def test_signature_repeats_name_and_eb(self):
        html = self.renderer.render_html(self.draft)
        self.assertEqual(html.count("Asha Roy"), 2)
        self.assertIn("EB No. E123<br/>", html)
        self.assertEqual(html.count("05 March 2026"), 2)

    def test_blank_draft_uses_placeholders(self):
        """Test blank slots never render as empty gaps."""
        pres = self.renderer.prepare_presentation(ApplicationDraft())
        self.assertEqual(pres.employee_name, PLACEHOLDER)
        self.assertEqual(pres.eb_number, PLACEHOLDER)
        self.assertEqual(pres.department_designation, PLACEHOLDER)
        self.assertEqual(pres.mobile_number, PLACEHOLDER)
        self.assertEqual(pres.amount, AMOUNT_PLACEHOLDER)
        self.assertEqual(pres.reason, "House Construction")

        html = self.renderer.render_html(ApplicationDraft())
        self.assertNotIn("<strong></strong>", html)

    def test_invalid_amount_uses_placeholder(self):
        self.draft.loan_amount = "lots"
        pres = self.renderer.prepare_presentation(self.draft)
        self.assertEqual(pres.amount, AMOUNT_PLACEHOLDER)

    def test_huge_amount_uses_placeholder(self):
        for amount in ["1e5000", "1e999999999", "1_000"]:
            self.draft.loan_amount = amount
            pres = self.renderer.prepare_presentation(self.draft)
            self.assertEqual(pres.amount, AMOUNT_PLACEHOLDER)

    def test_letter_css_white_background(self):
        """Test the letter stylesheet keeps the white export background."""
        theme = ThemeManager()
        self.assertIn("background: #FFFFFF", theme.letter_css())
        self.assertIn("QPushButton#primary", theme.window_stylesheet())
        self.assertFalse(hasattr(theme, "get_color"))
        html = LetterRenderer("05 March 2026", theme).render_html(self.draft)
        self.assertIn(theme.letter_css(), html)

    def test_blank_reason_uses_placeholder(self):
        self.draft.loan_reason = ""
        pres = self.renderer.prepare_presentation(self.draft)
        self.assertEqual(pres.reason, PLACEHOLDER)

    def test_other_reason(self):
        self.draft.loan_reason = "Other"
        self.draft.loan_reason_other = "  Home repair "
        html = self.renderer.render_html(self.draft)
        self.assertIn("<strong>Home repair</strong>", html)

        self.draft.loan_reason_other = "   "
        html = self.renderer.render_html(self.draft)
        self.assertIn("<strong>Other</strong>", html)

    def test_user_text_escaped(self):
        self.draft.employee_name = "<b>Asha</b> & Co"
        html = self.renderer.render_html(self.draft)
        self.assertIn("&lt;b&gt;Asha&lt;/b&gt; &amp; Co", html)
        self.assertNotIn("<b>Asha</b>", html)

    def test_apostrophe_kept(self):
        self.draft.loan_reason = "Children's Education"
        html = self.renderer.render_html(self.draft)
        self.assertIn("Children's Education", html)

    def test_idempotent(self):
        """Test rendering an unchanged draft twice gives identical output."""
        first = self.renderer.render_html(self.draft)
        second = self.renderer.render_html(self.draft)
        self.assertEqual(first, second)


if __name__ == "__main__":
    unittest.main()
