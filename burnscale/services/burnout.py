from __future__ import annotations

import logging
import math
from enum import Enum
from typing import Iterable

log = logging.getLogger(__name__)


class InvalidInput(ValueError):
    """A check-in value lies outside its allowed domain."""


class Mood(str, Enum):
    HAPPY = "Happy"
    MEH = "Meh"
    SAD = "Sad"
    ANGRY = "Angry"


MOOD_WEIGHTS = {
    Mood.HAPPY: 10,
    Mood.MEH: 40,
    Mood.SAD: 70,
    Mood.ANGRY: 90,
}

SCALE_MIN = 1
SCALE_MAX = 5
POINTS_PER_STEP = 20
STRESS_CAP = 100


def parse_mood(mood: Mood | str) -> Mood:
    try:
        return Mood(mood)
    except ValueError as e:
        allowed = ", ".join(m.value for m in Mood)
        raise InvalidInput(f"mood must be one of {allowed}, got {mood!r}") from e


def _check_scale(name: str, value: int) -> int:
    # bool is an int subclass; a slider never yields True/False
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInput(f"{name} must be an integer, got {value!r}")
    if not SCALE_MIN <= value <= SCALE_MAX:
        raise InvalidInput(f"{name} must be between {SCALE_MIN} and {SCALE_MAX}, got {value}")
    return value


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def compute_burnout_score(
    mood: Mood | str,
    energy: int,
    meaningfulness: int,
    stress_trigger_count: int,
) -> int:
    """
    Map one check-in to a 0-100 burnout score.

    The score is the mean of four components, rounded half-up:
    - mood weight (Happy 10, Meh 40, Sad 70, Angry 90)
    - 100 - energy*20
    - 100 - meaningfulness*20
    - min(triggers*20, 100)

    Raises InvalidInput when an argument is outside its domain.
    """
    weight = MOOD_WEIGHTS[parse_mood(mood)]
    energy = _check_scale("energy", energy)
    meaningfulness = _check_scale("meaningfulness", meaningfulness)
    if isinstance(stress_trigger_count, bool) or not isinstance(stress_trigger_count, int):
        raise InvalidInput(f"stress_trigger_count must be an integer, got {stress_trigger_count!r}")
    if stress_trigger_count < 0:
        raise InvalidInput(f"stress_trigger_count cannot be negative, got {stress_trigger_count}")

    energy_score = 100 - energy * POINTS_PER_STEP
    meaning_score = 100 - meaningfulness * POINTS_PER_STEP
    stress_score = min(stress_trigger_count * POINTS_PER_STEP, STRESS_CAP)

    average = (weight + energy_score + meaning_score + stress_score) / 4
    score = _round_half_up(average)
    log.debug(
        "burnout score %s (mood=%s energy=%s meaning=%s stress=%s)",
        score, weight, energy_score, meaning_score, stress_score,
    )
    return score


def distinct_triggers(stress_triggers: Iterable[str] | None) -> list[str]:
    """Trimmed, non-blank labels in first-seen order, duplicates removed."""
    seen: dict[str, None] = {}
    for label in stress_triggers or ():
        cleaned = label.strip()
        if cleaned:
            seen.setdefault(cleaned, None)
    return list(seen)


def score_checkin(
    mood: Mood | str,
    energy: int,
    meaningfulness: int,
    stress_triggers: Iterable[str] | None,
) -> int:
    return compute_burnout_score(mood, energy, meaningfulness, len(distinct_triggers(stress_triggers)))
