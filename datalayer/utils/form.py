"""Form string helpers ("WWLDW", most recent result first)."""
from typing import Optional

from datalayer.models.entities import Form, Streak
from datalayer.models.enums import StreakType

STREAK_TYPES = {
    "W": StreakType.WIN,
    "L": StreakType.LOSS,
    "D": StreakType.DRAW,
}


def parse_streak(form: Optional[str]) -> Optional[Streak]:
    """
    Current streak from a form string: the first result and its run length.

    Examples:
        >>> parse_streak("WWLWD")
        Streak(type=<StreakType.WIN: 'win'>, count=2)
        >>> parse_streak("") is None
        True
    """
    if not form:
        return None

    first = form[0]
    count = 0
    for result in form:
        if result != first:
            break
        count += 1

    return Streak(type=STREAK_TYPES.get(first.upper(), StreakType.NONE), count=count)


def build_form(form: Optional[str]) -> Optional[Form]:
    """Form record with last-5/last-10 slices and the derived streak."""
    if not form:
        return None
    return Form(last5=form[:5], last10=form[:10], streak=parse_streak(form))
