import logging
from datetime import date, time

import pytest

from ticketanalyzer.models import DurationResult
from ticketanalyzer.processing.duration import (
    calculate_duration,
    enrich_with_durations,
    parse_date,
    parse_time,
)


def test_same_day_flight():
    assert calculate_duration("01.06.24", "10:00", "01.06.24", "14:30") == DurationResult(270)


def test_overnight_flight_uses_dates():
    assert calculate_duration("12.05.18", "23:50", "13.05.18", "06:10").minutes == 380


def test_month_and_leap_day_boundaries():
    assert calculate_duration("28.02.24", "22:00", "01.03.24", "02:00").minutes == 28 * 60


def test_arrival_before_departure_is_negative():
    assert calculate_duration("01.06.24", "14:30", "01.06.24", "10:00").minutes == -270


def test_two_digit_year_maps_to_2000s():
    assert parse_date("31.12.99") == date(2099, 12, 31)
    assert parse_date("01.01.00") == date(2000, 1, 1)


def test_time_without_zero_padding_is_tolerated():
    assert parse_time("9:05") == time(9, 5)


@pytest.mark.parametrize("bad_time", ["ab:cd", "1000", "", "25:00", "10:61", "1_0:00", " 14:30", "14: 30", "١٤:٣٠", "10:"])
def test_malformed_time_degrades_to_zero(bad_time):
    result = calculate_duration("01.06.24", bad_time, "01.06.24", "14:30")
    assert result.minutes == 0
    assert not result.ok
    assert bad_time in result.warning


@pytest.mark.parametrize("bad_date", ["2024-06-01", "1.6.24", "32.01.24", "00.01.24", "01.13.24", "01.06.2024", "٠١.٠٦.٢٤"])
def test_malformed_date_degrades_to_zero(bad_date):
    result = calculate_duration("01.06.24", "10:00", bad_date, "14:30")
    assert result == DurationResult(0, result.warning)
    assert result.warning


def test_parse_date_raises_value_error():
    with pytest.raises(ValueError, match="dd.mm.yy"):
        parse_date("tomorrow")


def test_enrich_adds_durations_without_touching_input(make_ticket):
    original = make_ticket(departure_time="10:00", arrival_time="14:30",
                           departure_date="01.06.24", arrival_date="01.06.24")
    [enriched] = enrich_with_durations([original])
    assert enriched.duration == 270
    assert original.duration is None
    assert enriched.carrier == original.carrier


def test_enrich_logs_warning_and_continues(make_ticket, caplog):
    tickets = [
        make_ticket(carrier="BAD", departure_time="xx:yy"),
        make_ticket(carrier="TK", departure_time="16:20", arrival_time="22:10"),
    ]
    with caplog.at_level(logging.WARNING):
        enriched = enrich_with_durations(tickets)

    assert [t.duration for t in enriched] == [0, 350]
    assert len(caplog.records) == 1
    assert "BAD" in caplog.records[0].getMessage()
    assert "xx:yy" in caplog.records[0].getMessage()


@pytest.mark.parametrize("date_str, expected", [
    ("29.02.23", date(2023, 2, 28)),
    ("31.04.24", date(2024, 4, 30)),
    ("30.02.24", date(2024, 2, 29)),
    ("31.12.24", date(2024, 12, 31)),
])
def test_day_past_month_end_resolves_to_last_day(date_str, expected):
    assert parse_date(date_str) == expected


def test_day_past_month_end_still_gives_duration():
    assert calculate_duration("28.02.23", "10:00", "29.02.23", "10:00") == DurationResult(1440)


def test_signed_time_parts_are_accepted():
    assert parse_time("+9:05") == time(9, 5)


def test_underscore_and_padded_time_parts_give_warning():
    result = calculate_duration("01.06.24", "1_0:00", "01.06.24", " 14:30")
    assert result.minutes == 0
    assert "non-numeric" in result.warning
