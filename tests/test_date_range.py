import unittest
from datetime import date

from hmrc_rates.utils.date_range import (
    DateRange,
    end_of_month,
    format_period_date,
    month_range,
    parse_date,
    parse_period_date,
)


class DateRangeTests(unittest.TestCase):
    def test_end_of_month(self) -> None:
        self.assertEqual(end_of_month(date(2025, 8, 15)), date(2025, 8, 31))
        self.assertEqual(end_of_month(date(2025, 4, 1)), date(2025, 4, 30))
        self.assertEqual(end_of_month(date(2024, 2, 10)), date(2024, 2, 29))
        self.assertEqual(end_of_month(date(2023, 2, 10)), date(2023, 2, 28))

    def test_end_of_month_december(self) -> None:
        self.assertEqual(end_of_month(date(2024, 12, 15)), date(2024, 12, 31))

    def test_month_range(self) -> None:
        current = month_range(date(2025, 8, 15))
        self.assertEqual(current, DateRange(start=date(2025, 8, 1), end=date(2025, 8, 31)))
        self.assertEqual(current.as_tuple(), (date(2025, 8, 1), date(2025, 8, 31)))

    def test_parse_period_date(self) -> None:
        self.assertEqual(parse_period_date("01/Aug/2025"), date(2025, 8, 1))
        self.assertEqual(parse_period_date(" 31/Dec/2024 "), date(2024, 12, 31))
        self.assertEqual(format_period_date(date(2025, 8, 1)), "01/Aug/2025")

    def test_parse_period_date_rejects_other_formats(self) -> None:
        for value in ("2025-08-01", "1 Aug 2025", "32/Aug/2025", "01/08/2025"):
            with self.assertRaises(ValueError):
                parse_period_date(value)

    def test_parse_date(self) -> None:
        self.assertEqual(parse_date("2025-08-15"), date(2025, 8, 15))
        today = date(2024, 1, 1)
        self.assertIs(parse_date(today), today)
        with self.assertRaises(ValueError):
            parse_date("15/08/2025")


if __name__ == "__main__":
    unittest.main()
