from datetime import date, datetime
from zoneinfo import ZoneInfo

from ordinals.constants import DAY_PLACEHOLDER, DEFAULT_DATE_FORMAT
from ordinals.formatter import to_ordinal_string
from ordinals.suffix import Suffix, suffix


def day_suffix(when: date) -> Suffix:
    """suffix for the day of the month of `when` (eg 'st' for the 1st)"""
    return suffix(when.day)


def format_date(when: date, fmt: str = DEFAULT_DATE_FORMAT) -> str:
    """
    formats a date with `strftime`, replacing `{day}` in `fmt` with the ordinal day of the month

    args:
        when: the date or datetime to format
        fmt: a strftime format that may contain `{day}`

    returns:
        the formatted date, eg 'Wednesday, March 1st, 2023'
    """
    return when.strftime(fmt.replace(DAY_PLACEHOLDER, to_ordinal_string(when.day)))


def today(tz: ZoneInfo) -> datetime:
    return datetime.now(tz=tz)
