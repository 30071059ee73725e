from datetime import date, datetime

import pytest

from ideabank.client.filters import (
    BankFilter,
    DayBucket,
    bank_view,
    counts_by_day,
    dashboard_today,
    day_key,
    ideas_on_day,
    month_days,
    sort_by_date,
    week_days,
)
from ideabank.schemas.idea_schemas import IdeaOut


def idea(idea_id, data, **kw):
    fields = {"titulo": f"Ideia {idea_id}", "status": "Pendente", "favorito": False}
    fields.update(kw)
    return IdeaOut(id=idea_id, data=data, **fields)


NOW = datetime(2024, 3, 13, 10, 0)  # a Wednesday

IDEAS = [
    idea(1, datetime(2024, 3, 13, 18, 0), favorito=True),
    idea(2, datetime(2024, 3, 11, 9, 0), status="Concluída"),
    idea(3, datetime(2024, 3, 13, 8, 0)),
    idea(4, datetime(2024, 3, 20, 12, 0), favorito=True, status="Concluída"),
    idea(5, None),
]


def ids(ideas):
    return [i.id for i in ideas]


def test_day_key():
    assert day_key(datetime(2024, 3, 5, 23, 59)) == "2024-03-05"
    assert day_key(date(2024, 12, 1)) == "2024-12-01"


def test_sort_by_date_is_stable_and_puts_undated_first():
    tied = [idea(10, NOW), idea(11, NOW)]
    assert ids(sort_by_date(IDEAS + tied)) == [5, 2, 3, 10, 11, 1, 4]
    assert ids(sort_by_date(tied, descending=True)) == [10, 11]


@pytest.mark.parametrize(
    "name, expected",
    [
        (BankFilter.TODAS, [4, 1, 3, 2, 5]),
        ("Hoje", [1, 3]),
        ("Favoritas", [4, 1]),
        ("Pendentes", [1, 3, 5]),
    ],
)
def test_bank_view(name, expected):
    assert ids(bank_view(IDEAS, name, today=NOW.date())) == expected


def test_bank_view_rejects_unknown_filter():
    with pytest.raises(ValueError):
        bank_view(IDEAS, "Arquivadas")


def test_filters_do_not_touch_input():
    snapshot = list(IDEAS)
    bank_view(IDEAS, "Favoritas", today=NOW.date())
    dashboard_today(IDEAS, now=NOW)
    assert IDEAS == snapshot


def test_dashboard_today_lists_todays_ideas_in_order():
    assert ids(dashboard_today(IDEAS, now=NOW)) == [3, 1]


def test_dashboard_today_falls_back_to_nearest_future():
    ideas = [
        idea(1, datetime(2024, 3, 25, 9, 0)),
        idea(2, datetime(2024, 3, 10, 9, 0)),
        idea(3, datetime(2024, 3, 15, 9, 0)),
        idea(4, None),
    ]
    assert ids(dashboard_today(ideas, now=NOW)) == [3]


def test_dashboard_today_is_empty_without_future_ideas():
    past = [idea(1, datetime(2024, 3, 1, 9, 0))]
    assert dashboard_today(past, now=NOW) == []
    assert dashboard_today([], now=NOW) == []


def test_counts_by_day():
    assert counts_by_day(IDEAS) == {"2024-03-13": 2, "2024-03-11": 1, "2024-03-20": 1}


def test_week_days_start_on_monday():
    week = week_days(IDEAS, reference=NOW.date())
    assert [b.day for b in week] == [
        "2024-03-11", "2024-03-12", "2024-03-13", "2024-03-14",
        "2024-03-15", "2024-03-16", "2024-03-17",
    ]
    assert [b.count for b in week] == [1, 0, 2, 0, 0, 0, 0]


def test_month_days_covers_whole_month():
    month = month_days(IDEAS, 2024, 2)
    assert len(month) == 29
    assert month[0] == DayBucket(day="2024-02-01", count=0)

    march = month_days(IDEAS, 2024, 3)
    assert len(march) == 31
    assert march[12] == DayBucket(day="2024-03-13", count=2)
    assert sum(b.count for b in march) == 4


def test_ideas_on_day_with_status_filter():
    assert ids(ideas_on_day(IDEAS, date(2024, 3, 13))) == [1, 3]
    assert ids(ideas_on_day(IDEAS, "2024-03-20", "Concluída")) == [4]
    assert ids(ideas_on_day(IDEAS, "2024-03-20", "Pendente")) == []
    assert ideas_on_day(IDEAS, "2024-01-01") == []
