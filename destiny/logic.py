"""Filtering and rating of destinations against traveller preferences."""

from __future__ import annotations

from destiny.model import Destination, Month, Preferences, Rating, TravelBy, TravelLength


def filter_by_travel_length(
    preferred: TravelLength | None, specified: TravelLength | None
) -> bool:
    """Allowed unless both are given and they have no length in common."""
    if preferred is None or specified is None:
        return True
    return bool(specified & preferred)


def filter_by_vehicle(preferred: TravelBy | None, specified: TravelBy | None) -> bool:
    """Allowed if no vehicle is preferred, or the specified vehicles match exactly."""
    if preferred is None:
        return True
    if specified is None:
        return False
    return preferred == specified


def matches_preferences(preferences: Preferences, destination: Destination) -> bool:
    details = destination.user_defined_destination
    return filter_by_travel_length(preferences.lengths, details.lengths) and filter_by_vehicle(
        preferences.travel_by, details.travel_by
    )


def rating(destination: Destination, month: Month) -> Rating:
    """The destination's rating for *month*, NOT_GOOD when it has none."""
    ratings = destination.user_defined_destination.month_ratings or ()
    return next((r for m, r in ratings if m == month), Rating.NOT_GOOD)