import sys
import os
import locale
import unittest
from datetime import date
from decimal import Decimal

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from pfletter.formatters import (
    format_indian_currency, group_indian_digits, resolve_reason,
    format_letter_date, safe_file_stem, export_filename
)


class TestCurrencyFormatter(unittest.TestCase):
    def test_indian_grouping(self):
        """Test lakh/crore grouping of whole rupees."""
        self.assertEqual(format_indian_currency(100000), "₹1,00,000")
        self.assertEqual(format_indian_currency("50000"), "₹50,000")
        self.assertEqual(format_indian_currency(12345678), "₹1,23,45,678")
        self.assertEqual(format_indian_currency(999), "₹999")
        self.assertEqual(format_indian_currency(1000), "₹1,000")

    def test_zero(self):
        self.assertEqual(format_indian_currency(0), "₹0")
        self.assertEqual(format_indian_currency("0"), "₹0")

    def test_fraction_truncated(self):
        """Test fractional input never shows a decimal separator."""
        self.assertEqual(format_indian_currency("12345678.9"), "₹1,23,45,678")
        self.assertEqual(format_indian_currency(99.99), "₹99")
        self.assertEqual(format_indian_currency(Decimal("1500.5")), "₹1,500")
        self.assertNotIn(".", format_indian_currency("100000.75"))

    def test_whitespace_and_exponent(self):
        self.assertEqual(format_indian_currency("  2500 "), "₹2,500")
        self.assertEqual(format_indian_currency("1e5"), "₹1,00,000")

    def test_negative(self):
        self.assertEqual(format_indian_currency(-1500), "-₹1,500")

    def test_not_a_number(self):
        """Test unparsable input degrades to blank."""
        for value in ["abc", "12abc", "1,000", "", "   ", "nan", "inf", "-Infinity", None, True]:
            with self.subTest(value=value):
                self.assertEqual(format_indian_currency(value), "")

    def test_huge_amount_is_blank(self):
        """Test amounts too large to print degrade to blank instead of raising."""
        for value in ["1e5000", "1" + "0" * 4400, "1e999999999", "-1e40", Decimal("1e5000"), Decimal("9e30")]:
            with self.subTest(value=str(value)[:20]):
                self.assertEqual(format_indian_currency(value), "")
        self.assertEqual(format_indian_currency("1e29"), "₹" + group_indian_digits("1" + "0" * 29))

    def test_separators_and_non_ascii_digits_rejected(self):
        for value in ["1_000", "1_00_000", "\u0967\u0966\u0966", "\uff11\uff10\uff10"]:
            with self.subTest(value=value):
                self.assertEqual(format_indian_currency(value), "")

    def test_group_indian_digits(self):
        self.assertEqual(group_indian_digits("1"), "1")
        self.assertEqual(group_indian_digits("123456"), "1,23,456")
        self.assertEqual(group_indian_digits("1234567"), "12,34,567")


class TestReasonResolver(unittest.TestCase):
    def test_other_blank_falls_back(self):
        self.assertEqual(resolve_reason("Other", "  "), "Other")
        self.assertEqual(resolve_reason("Other", ""), "Other")
        self.assertEqual(resolve_reason("Other", None), "Other")

    def test_other_with_text(self):
        self.assertEqual(resolve_reason("Other", "Home repair"), "Home repair")
        self.assertEqual(resolve_reason("Other", "  Home repair  "), "Home repair")

    def test_fixed_choice_ignores_text(self):
        self.assertEqual(resolve_reason("Medical Treatment", "anything"), "Medical Treatment")
        self.assertEqual(resolve_reason("Children's Education", ""), "Children's Education")


class TestDateAndFilename(unittest.TestCase):
    def test_letter_date(self):
        self.assertEqual(format_letter_date(date(2026, 3, 5)), "05 March 2026")
        self.assertEqual(format_letter_date(date(2025, 12, 31)), "31 December 2025")

    def test_letter_date_ignores_process_locale(self):
        """Test the month name stays English under a non-English LC_TIME."""
        saved = locale.setlocale(locale.LC_TIME)
        for candidate in ["de_DE.UTF-8", "de_DE.utf8", "fr_FR.UTF-8", "fr_FR.utf8", "hi_IN.UTF-8", "German_Germany.1252"]:
            try:
                locale.setlocale(locale.LC_TIME, candidate)
                break
            except locale.Error:
                continue
        else:
            self.skipTest("no non-English locale installed")
        try:
            self.assertEqual(format_letter_date(date(2026, 3, 5)), "05 March 2026")
            self.assertEqual(format_letter_date(date(2026, 10, 19)), "19 October 2026")
        finally:
            locale.setlocale(locale.LC_TIME, saved)

    def test_letter_date_all_months(self):
        names = [format_letter_date(date(2026, m, 1)).split(" ")[1] for m in range(1, 13)]
        self.assertEqual(names[0], "January")
        self.assertEqual(names[8], "September")
        self.assertEqual(len(set(names)), 12)

    def test_letter_date_defaults_to_today(self):
        self.assertEqual(format_letter_date(), format_letter_date(date.today()))

    def test_safe_file_stem(self):
        self.assertEqual(safe_file_stem("  Asha   Roy "), "Asha_Roy")
        self.assertEqual(safe_file_stem("Asha\tK  Roy"), "Asha_K_Roy")
        self.assertEqual(safe_file_stem(""), "Letter")
        self.assertEqual(safe_file_stem("   "), "Letter")
        self.assertEqual(safe_file_stem(None), "Letter")

    def test_safe_file_stem_drops_path_chars(self):
        self.assertEqual(safe_file_stem("Asha/Roy"), "AshaRoy")
        self.assertEqual(safe_file_stem("a: b?"), "a_b")
        self.assertEqual(safe_file_stem(" / "), "Letter")

    def test_export_filename(self):
        self.assertEqual(export_filename("Asha Roy"), "PF_Loan_Application_Asha_Roy.pdf")
        self.assertEqual(export_filename(""), "PF_Loan_Application_Letter.pdf")


if __name__ == "__main__":
    unittest.main()
