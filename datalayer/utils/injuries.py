"""Injury status normalization shared by every injury source."""
from typing import Optional

from datalayer.models.enums import InjuryStatus


def normalize_injury_status(text: Optional[str]) -> InjuryStatus:
    """
    Map free-text provider status to the closed InjuryStatus set.

    First hit wins: out/missing, doubtful, questionable, probable; anything
    else is day-to-day.

    Examples:
        >>> normalize_injury_status("Missing Fixture")
        <InjuryStatus.OUT: 'out'>
        >>> normalize_injury_status("Questionable")
        <InjuryStatus.QUESTIONABLE: 'questionable'>
        >>> normalize_injury_status(None)
        <InjuryStatus.DAY_TO_DAY: 'day-to-day'>
    """
    status = (text or "").lower()
    if "out" in status or "missing" in status:
        return InjuryStatus.OUT
    if "doubtful" in status:
        return InjuryStatus.DOUBTFUL
    if "questionable" in status:
        return InjuryStatus.QUESTIONABLE
    if "probable" in status:
        return InjuryStatus.PROBABLE
    return InjuryStatus.DAY_TO_DAY
