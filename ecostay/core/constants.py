"""
Domain constants shared across services and views.
"""

from typing import Dict, Final, Tuple, Union

from ecostay.schemas.common.enums import ActivityType

# Points and coins awarded per activity category at creation time
ACTIVITY_AWARDS: Final[Dict[ActivityType, int]] = {
    ActivityType.ENERGY: 50,
    ActivityType.WATER: 40,
    ActivityType.WASTE: 30,
    ActivityType.COMMUNITY: 20,
    ActivityType.EDUCATION: 25,
    ActivityType.BIODIVERSITY: 35,
}
DEFAULT_ACTIVITY_AWARD: Final[int] = 20

SUPPORTED_COUNTRIES: Final[Tuple[str, ...]] = ("tunisia", "morocco", "egypt", "jordan", "uae")
ALL_COUNTRIES: Final[str] = "all"

MIN_RATING: Final[int] = 1
MAX_RATING: Final[int] = 5

TOP_WISHES_LIMIT: Final[int] = 10

RATING_PLACEHOLDER: Final[str] = "—"

# Error messages
ERROR_PASSWORD_MISMATCH: Final[str] = "Passwords do not match"
ERROR_RATING_RANGE: Final[str] = "Please select a rating between 1 and 5"
ERROR_HOSTEL_REQUIRED: Final[str] = "Please create a hostel first"
ERROR_HOSTEL_FIELDS: Final[str] = "Please fill all required fields"
ERROR_HOSTEL_EXISTS: Final[str] = "You already manage a hostel"
ERROR_HOSTEL_COORDINATES: Final[str] = "Please enter valid coordinates"
ERROR_WISH_SIGN_IN: Final[str] = "Please sign in to submit a wish"
ERROR_THREAD_FIELDS: Final[str] = "Please sign in and provide a title"
ERROR_POST_FIELDS: Final[str] = "Please sign in and add some content"
ERROR_FAVORITE_SIGN_IN: Final[str] = "Please sign in to add favorites"

# Chat fallbacks
CHAT_EMPTY_REPLY: Final[str] = "Sorry, I could not get a response."
CHAT_ERROR_REPLY: Final[str] = "Sorry, there was an error contacting Gemini."


def award_for(activity_type: Union[ActivityType, str]) -> int:
    """Derived award (points and coins) for an activity category; unknown categories get the default."""
    try:
        return ACTIVITY_AWARDS[ActivityType(activity_type)]
    except ValueError:
        return DEFAULT_ACTIVITY_AWARD
