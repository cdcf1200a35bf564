from calendar import monthrange
from datetime import MAXYEAR, MINYEAR, date, timedelta


def days_in_month(year: int, month: int) -> int:
    return monthrange(year, month)[1]


def clamp_day(year: int, month: int, day: int) -> int:
    return max(1, min(day, days_in_month(year, month)))


def previous_month(year: int, month: int) -> tuple[int, int]:
    if month == 1:
        return year - 1, 12
    return year, month - 1


def following_month(year: int, month: int) -> tuple[int, int]:
    if month == 12:
        return year + 1, 1
    return year, month + 1


def year_in_range(year: int) -> bool:
    return MINYEAR <= year <= MAXYEAR


def add_days(day: date, days: int) -> date:
    if days > 0 and (date.max - day).days < days:
        return date.max
    if days < 0 and (day - date.min).days < -days:
        return date.min
    return day + timedelta(days=days)


def to_iso(day: date) -> str:
    return day.isoformat()
