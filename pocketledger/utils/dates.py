import re
from datetime import date, datetime

MONTH_PATTERN = re.compile(r"^\d{4}-\d{2}$")

def current_month() -> str:
    return datetime.utcnow().strftime("%Y-%m")

def get_month_range(month: str):
    """
    Half-open [start, end) date range for a YYYY-MM month.

    Raises ValueError for anything that is not a real calendar month.
    """
    if not month or not MONTH_PATTERN.match(month):
        raise ValueError("Invalid month format. Use YYYY-MM")

    year, month_number = (int(part) for part in month.split("-"))
    if year < 1 or not 1 <= month_number <= 12:
        raise ValueError("Invalid month format. Use YYYY-MM")

    start = date(year, month_number, 1)
    if month_number == 12:
        end = date(year + 1, 1, 1)
    else:
        end = date(year, month_number + 1, 1)
    return start, end

def parse_date(value: str) -> date:
    """Accepts YYYY-MM-DD or a full ISO timestamp and keeps only the date part."""
    if not value or not value.strip():
        raise ValueError("Invalid date format")
    value = value.strip()
    try:
        return date.fromisoformat(value)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00")).date()
    except ValueError:
        raise ValueError("Invalid date format") from None
