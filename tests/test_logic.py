import pytest

from destiny.logic import filter_by_travel_length, filter_by_vehicle, matches_preferences, rating
from destiny.model import (
    Destination,
    Month,
    Preferences,
    Rating,
    TravelBy,
    TravelLength,
    UserDefinedDestination,
)


@pytest.mark.parametrize(
    "preferred, specified, expected",
    [
        (None, None, True),
        (None, TravelLength.WEEK, True),
        (TravelLength.WEEK, None, True),
        (TravelLength.WEEK | TravelLength.WEEKEND, TravelLength.WEEKEND, True),
        (TravelLength.WEEK, TravelLength.TWO_WEEKS, False),
        (TravelLength.WEEK, TravelLength(0), False),
    ],
)
def test_filter_by_travel_length(preferred, specified, expected):
    assert filter_by_travel_length(preferred, specified) is expected


@pytest.mark.parametrize(
    "preferred, specified, expected",
    [
        (None, None, True),
        (None, TravelBy.PLANE, True),
        (TravelBy.CAR, None, False),
        (TravelBy.CAR, TravelBy.CAR, True),
        (TravelBy.CAR, TravelBy.CAR | TravelBy.TRAIN, False),
        (TravelBy.CAR | TravelBy.TRAIN, TravelBy.CAR | TravelBy.TRAIN, True),
    ],
)
def test_filter_by_vehicle(preferred, specified, expected):
    assert filter_by_vehicle(preferred, specified) is expected


def _destination(**details):
    return Destination("Somewhere", UserDefinedDestination(**details))


def test_matches_preferences_requires_both_filters():
    prefs = Preferences(Month.JUNE, lengths=TravelLength.WEEK, travel_by=TravelBy.TRAIN)
    assert matches_preferences(prefs, _destination(lengths=TravelLength.WEEK, travel_by=TravelBy.TRAIN))
    assert not matches_preferences(prefs, _destination(lengths=TravelLength.WEEKEND, travel_by=TravelBy.TRAIN))
    assert not matches_preferences(prefs, _destination(lengths=TravelLength.WEEK))


def test_matches_preferences_without_constraints():
    assert matches_preferences(Preferences(Month.JUNE), _destination())


def test_rating_uses_month_entry():
    dest = _destination(month_ratings=[(Month.MAY, Rating.BEST), (Month.JUNE, Rating.GOOD)])
    assert rating(dest, Month.JUNE) is Rating.GOOD
    assert rating(dest, Month.MAY) is Rating.BEST


def test_rating_defaults_to_not_good():
    assert rating(_destination(), Month.MAY) is Rating.NOT_GOOD
    dest = _destination(month_ratings=[(Month.MAY, Rating.BEST)])
    assert rating(dest, Month.DECEMBER) is Rating.NOT_GOOD


def test_rating_takes_first_match():
    dest = _destination(month_ratings=[(Month.MAY, Rating.GOOD), (Month.MAY, Rating.BEST)])
    assert rating(dest, Month.MAY) is Rating.GOOD