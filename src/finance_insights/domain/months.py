import calendar
from datetime import date

# Fixed English abbreviations; calendar.month_abbr follows the process locale.
_MONTH_ABBR = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def month_label(value: date) -> str:
    """Short month plus two-digit year, e.g. "Dec 24"."""
    return f"{_MONTH_ABBR[value.month - 1]} {value.year % 100:02d}"


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def next_month(value: date) -> date:
    if value.month == 12:
        return date(value.year + 1, 1, 1)
    return date(value.year, value.month + 1, 1)


def same_month(value: date, reference: date, *, match_year: bool) -> bool:
    if value.month != reference.month:
        return False
    return not match_year or value.year == reference.year


def days_until(deadline: date, today: date) -> int:
    return (deadline - today).days


def previous_month(value: date) -> date:
    if value.month == 1:
        return date(value.year - 1, 12, 1)
    return date(value.year, value.month - 1, 1)
