from datetime import date
from decimal import Decimal
from pathlib import Path

from hmrc_rates import HMRCMonthlyRatesConverter, __version__

print(__version__)  # 0.1.0

# Default usage: the rate documents bundled with the package
converter = HMRCMonthlyRatesConverter()

# Combined "VALUE CURRENCY" input
print(converter.convert("100.00 USD", date(2025, 8, 15)))  # £73.85

# Split input with a pre-parsed amount
gbp = converter.convert_amount(Decimal("100.00"), "eur", date(2025, 8, 15))
print(gbp, gbp.as_decimal())  # £86.60 86.60

# Rates in force on a date
august = converter.rates_for(date(2025, 8, 31))
print(august.period_start, august.period_end, august.rates["JPY"])

# Load a directory of downloaded exrates-monthly-MMYY.xml files instead
downloads = Path("resources")
if downloads.is_dir():
    converter = HMRCMonthlyRatesConverter.from_directory(downloads)
    print(converter.periods())

# Tabular view for analysis
print(converter.to_frame().head())
