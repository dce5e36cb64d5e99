from datetime import date, timedelta
from itertools import combinations

from cleansync.domain.bookings.slots import day_bounds, is_weekend, suggest_slot

from .conftest import at

DAY = date(2026, 10, 20)  # a Tuesday
SESSION = timedelta(hours=2)


def test_empty_day_gets_window_open():
    assert suggest_slot(DAY, []) == at(DAY, 9)


def test_first_clear_slot_is_picked():
    assert suggest_slot(DAY, [at(DAY, 9)]) == at(DAY, 11)
    assert suggest_slot(DAY, [at(DAY, 9), at(DAY, 11)]) == at(DAY, 13)


def test_nearby_booking_blocks_in_both_directions():
    # 10:00 is within two hours of both 09:00 and 11:00
    assert suggest_slot(DAY, [at(DAY, 10)]) == at(DAY, 13)
    # 12:30 blocks 11:00 and 13:00, leaving 09:00 free
    assert suggest_slot(DAY, [at(DAY, 12, 30)]) == at(DAY, 9)


def test_fully_booked_day_rolls_over_to_next_morning():
    booked = [at(DAY, 9), at(DAY, 11), at(DAY, 13), at(DAY, 15)]
    assert suggest_slot(DAY, booked) == at(DAY + timedelta(days=1), 9)


def test_three_offset_bookings_can_fill_the_day():
    booked = [at(DAY, 10), at(DAY, 12), at(DAY, 14)]
    assert suggest_slot(DAY, booked) == at(DAY + timedelta(days=1), 9)


def test_rollover_does_not_check_the_next_day():
    booked = [at(DAY, 9), at(DAY, 11), at(DAY, 13), at(DAY, 15)]
    next_day = DAY + timedelta(days=1)
    booked += [at(next_day, 9)]
    assert suggest_slot(DAY, booked) == at(next_day, 9)


def test_suggestion_keeps_a_session_away_from_every_booking():
    grid = [at(DAY, 9) + timedelta(minutes=30 * i) for i in range(16)]

    for size in range(4):
        for booked in combinations(grid, size):
            suggested = suggest_slot(DAY, booked)
            assert all(abs(b - suggested) >= SESSION for b in booked), (booked, suggested)


def test_custom_window_and_session_length():
    suggested = suggest_slot(DAY, [at(DAY, 8)], start_hour=8, end_hour=12, session_hours=1)
    assert suggested == at(DAY, 9)

    # A session must end by window close
    assert suggest_slot(DAY, [at(DAY, 8)], start_hour=8, end_hour=9, session_hours=1) == at(
        DAY + timedelta(days=1), 8
    )


def test_day_bounds_cover_one_calendar_day():
    start, end = day_bounds(DAY)
    assert start == at(DAY, 0)
    assert end - start == timedelta(days=1)


def test_is_weekend():
    assert is_weekend(date(2026, 10, 24))
    assert is_weekend(date(2026, 10, 25))
    assert not is_weekend(DAY)
