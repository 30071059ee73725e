"""Read-only projections of the cached ideas list for the client views.

Every function takes the list by value and returns a new list or mapping;
the cache itself is only ever changed through IdeasStore.
"""
import calendar
import enum
from collections import Counter
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Dict, Iterable, List, Optional, Union

from ideabank.schemas.idea_schemas import IdeaOut, IdeaStatus
from ideabank.utils.date_utils import DAY_FORMAT


class BankFilter(str, enum.Enum):
    TODAS = "Todas"
    HOJE = "Hoje"
    FAVORITAS = "Favoritas"
    PENDENTES = "Pendentes"


class CalendarFilter(str, enum.Enum):
    TODAS = "Todas"
    PENDENTE = "Pendente"
    CONCLUIDA = "Concluída"


@dataclass(frozen=True)
class DayBucket:
    day: str
    count: int


def day_key(value: Union[date, datetime]) -> str:
    return value.strftime(DAY_FORMAT)


def _idea_day(idea: IdeaOut) -> Optional[str]:
    return day_key(idea.data) if idea.data is not None else None


def sort_by_date(ideas: Iterable[IdeaOut], descending: bool = False) -> List[IdeaOut]:
    # stable, so equal dates keep their incoming order in both directions
    return sorted(ideas, key=lambda i: i.data or datetime.min, reverse=descending)


def bank_view(
    ideas: Iterable[IdeaOut],
    filter_name: Union[BankFilter, str] = BankFilter.TODAS,
    today: Optional[date] = None,
) -> List[IdeaOut]:
    filter_name = BankFilter(filter_name)
    today_key = day_key(today or date.today())

    if filter_name is BankFilter.FAVORITAS:
        selected = [i for i in ideas if i.favorito]
    elif filter_name is BankFilter.PENDENTES:
        selected = [i for i in ideas if i.status == IdeaStatus.PENDENTE]
    elif filter_name is BankFilter.HOJE:
        selected = [i for i in ideas if _idea_day(i) == today_key]
    else:
        selected = list(ideas)

    return sort_by_date(selected, descending=True)


def dashboard_today(ideas: Iterable[IdeaOut], now: Optional[datetime] = None) -> List[IdeaOut]:
    """
    Ideas scheduled for the current day, in date order. With none scheduled,
    falls back to the single nearest idea strictly in the future.

    Exact ties keep the first idea met in ascending date order; that choice is
    incidental and callers should not depend on it.
    """
    now = now or datetime.now()
    ordered = sort_by_date(ideas)
    today_key = day_key(now)

    todays = [i for i in ordered if _idea_day(i) == today_key]
    if todays:
        return todays

    closest = None
    closest_delta = None
    for idea in ordered:
        if idea.data is None or idea.data <= now:
            continue
        delta = idea.data - now
        if closest_delta is None or delta < closest_delta:
            closest, closest_delta = idea, delta

    return [closest] if closest is not None else []


def counts_by_day(ideas: Iterable[IdeaOut]) -> Dict[str, int]:
    return dict(Counter(k for k in map(_idea_day, ideas) if k is not None))


def _buckets(days: Iterable[date], counts: Dict[str, int]) -> List[DayBucket]:
    return [DayBucket(day=day_key(d), count=counts.get(day_key(d), 0)) for d in days]


def week_days(ideas: Iterable[IdeaOut], reference: Optional[date] = None) -> List[DayBucket]:
    """Badges for the ISO week (Monday to Sunday) holding ``reference``."""
    reference = reference or date.today()
    start = reference - timedelta(days=reference.weekday())
    return _buckets((start + timedelta(days=n) for n in range(7)), counts_by_day(ideas))


def month_days(ideas: Iterable[IdeaOut], year: int, month: int) -> List[DayBucket]:
    _, length = calendar.monthrange(year, month)
    return _buckets((date(year, month, n) for n in range(1, length + 1)), counts_by_day(ideas))


def ideas_on_day(
    ideas: Iterable[IdeaOut],
    day: Union[date, str],
    status: Union[CalendarFilter, str] = CalendarFilter.TODAS,
) -> List[IdeaOut]:
    key = day if isinstance(day, str) else day_key(day)
    status = CalendarFilter(status)

    selected = [i for i in ideas if _idea_day(i) == key]
    if status is CalendarFilter.TODAS:
        return selected
    return [i for i in selected if i.status is not None and i.status.value == status.value]
