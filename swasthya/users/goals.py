# -*- coding: utf-8 -*-
"""Account goal defaults.

The daily calorie goal is derived once, at signup, from the Harris-Benedict
(revised) BMR equation and a fixed moderate-activity multiplier, then stored
as plain data on the account. Later profile edits do not recompute it.

Age is a calendar-year difference (birth year vs. current year), not the
exact elapsed time.
"""

from __future__ import annotations

import math
from datetime import date
from typing import Optional

DEFAULT_STEPS_GOAL = 10000
DEFAULT_WATER_GOAL = 8  # glasses
DEFAULT_SLEEP_GOAL = 8.0  # hours
ACTIVITY_MULTIPLIER = 1.5


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def age_from_birth_date(date_of_birth: date, today: Optional[date] = None) -> int:
    today = today or date.today()
    return today.year - date_of_birth.year


def birth_date_from_age(age: int, today: Optional[date] = None) -> date:
    # Signup collects an age only; pin the birthday to January 1st.
    today = today or date.today()
    return date(today.year - int(age), 1, 1)


def basal_metabolic_rate(*, gender: str, weight_kg: float, height_cm: float, age: int) -> float:
    if gender == "male":
        return 88.362 + 13.397 * weight_kg + 4.799 * height_cm - 5.677 * age
    return 447.593 + 9.247 * weight_kg + 3.098 * height_cm - 4.330 * age


def default_calorie_goal(
    *,
    gender: str,
    weight_kg: float,
    height_cm: float,
    date_of_birth: date,
    today: Optional[date] = None,
) -> int:
    age = age_from_birth_date(date_of_birth, today)
    bmr = basal_metabolic_rate(gender=gender, weight_kg=weight_kg, height_cm=height_cm, age=age)
    return round_half_up(bmr * ACTIVITY_MULTIPLIER)
