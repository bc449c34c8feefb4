from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Protocol

from burnscale.services.burnout import Mood

STRESS_TRIGGER = "stress_trigger"
RECOVERY_ACTIVITY = "recovery_activity"
CUSTOMIZATION_TYPES = {STRESS_TRIGGER, RECOVERY_ACTIVITY}

DEFAULT_STRESS_TRIGGERS = ("Work", "Sleep", "Finances", "Social", "Health")
DEFAULT_RECOVERY_ACTIVITIES = ("Exercise", "Meditation", "Talking to someone", "Rest", "Music")


class CustomizationLike(Protocol):
    type: str
    value: str
    is_active: bool


@dataclass(slots=True)
class OptionPools:
    moods: list[str]
    stress_triggers: list[str]
    recovery_activities: list[str]


def _pool(kind: str, defaults: Iterable[str], rows: list[CustomizationLike], hidden: set[str]) -> list[str]:
    added = [r.value for r in rows if r.is_active and r.type == kind]
    merged = list(dict.fromkeys([*defaults, *added]))
    return [v for v in merged if f"{kind}:{v.lower()}" not in hidden]


def build_option_pools(rows: Iterable[CustomizationLike]) -> OptionPools:
    """
    Defaults plus the user's active additions, minus anything hidden.
    Hidden values match case-insensitively, so hiding 'work' hides 'Work'.
    """
    rows = list(rows)
    hidden = {f"{r.type}:{r.value.lower()}" for r in rows if not r.is_active}
    return OptionPools(
        moods=[m.value for m in Mood],
        stress_triggers=_pool(STRESS_TRIGGER, DEFAULT_STRESS_TRIGGERS, rows, hidden),
        recovery_activities=_pool(RECOVERY_ACTIVITY, DEFAULT_RECOVERY_ACTIVITIES, rows, hidden),
    )
