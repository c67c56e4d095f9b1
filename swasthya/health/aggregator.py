# -*- coding: utf-8 -*-
"""Daily log aggregation.

Every mutation of a `HealthLog` goes through `refresh_log`, which recomputes
the running totals and the summary from the entry collections:

- steps / water totals (sum of entries)
- per-meal and daily calories consumed
- calories burned, net calories, exercise minutes
- goal-achievement flags

The sleep, exercise and calorie-balance flags use fixed thresholds rather than
the account's own sleep or calorie goals.
"""

from __future__ import annotations

import math
from typing import Dict, Iterable, Optional

from .models import DailySummary, ExerciseEntry, FoodItem, GoalsAchieved, HealthLog, Meal

SLEEP_HOURS_TARGET = 7
EXERCISE_MINUTES_TARGET = 30
CALORIE_BALANCE_TOLERANCE = 200

DEFAULT_BURN_RATE = 4  # kcal/min

# kcal per minute by exercise type and intensity.
CALORIE_BURN_RATES: Dict[str, Dict[str, float]] = {
    "yoga": {"light": 2, "moderate": 3, "vigorous": 4},
    "walking": {"light": 3, "moderate": 4, "vigorous": 5},
    "running": {"light": 6, "moderate": 8, "vigorous": 12},
    "gym": {"light": 4, "moderate": 6, "vigorous": 8},
    "cycling": {"light": 4, "moderate": 6, "vigorous": 10},
    "swimming": {"light": 5, "moderate": 7, "vigorous": 11},
    "dancing": {"light": 3, "moderate": 5, "vigorous": 7},
}


def _enum_value(value: object) -> str:
    return str(getattr(value, "value", value))


def burn_rate(exercise_type: object, intensity: object) -> float:
    rates = CALORIE_BURN_RATES.get(_enum_value(exercise_type), {})
    return rates.get(_enum_value(intensity)) or DEFAULT_BURN_RATE


def estimate_calories_burned(exercise_type: object, intensity: object, duration_min: float) -> int:
    """Rounded (half-up) calories for `duration_min` minutes of the given activity."""
    return int(math.floor(burn_rate(exercise_type, intensity) * duration_min + 0.5))


def resolve_calories_burned(
    supplied: Optional[float], exercise_type: object, intensity: object, duration_min: float
) -> float:
    # A supplied 0 counts as "not supplied".
    if supplied:
        return supplied
    return estimate_calories_burned(exercise_type, intensity, duration_min)


def food_calories(foods: Iterable[FoodItem]) -> float:
    return float(sum(food.calories or 0 for food in foods))


def meal_calories(meal: Meal) -> float:
    return food_calories(meal.foods)


def total_calories_consumed(meals: Iterable[Meal]) -> float:
    return float(sum(meal_calories(meal) for meal in meals))


def total_calories_burned(exercises: Iterable[ExerciseEntry]) -> float:
    return float(sum(exercise.calories_burned or 0 for exercise in exercises))


def total_exercise_minutes(exercises: Iterable[ExerciseEntry]) -> int:
    return int(sum(exercise.duration for exercise in exercises))


def compute_summary(log: HealthLog) -> DailySummary:
    """Summary for `log`. Assumes step/water totals are already current."""
    consumed = total_calories_consumed(log.meals)
    burned = total_calories_burned(log.exercises)
    net = consumed - burned
    minutes = total_exercise_minutes(log.exercises)
    goals = GoalsAchieved(
        steps=log.steps.count >= log.steps.goal,
        water=log.water.glasses >= log.water.goal,
        sleep=log.sleep.hours >= SLEEP_HOURS_TARGET,
        exercise=minutes >= EXERCISE_MINUTES_TARGET,
        calories=abs(net) <= CALORIE_BALANCE_TOLERANCE,
    )
    return DailySummary(
        total_calories_consumed=consumed,
        total_calories_burned=burned,
        net_calories=net,
        total_exercise_minutes=minutes,
        goals_achieved=goals,
        overall_rating=log.summary.overall_rating,
        notes=log.summary.notes,
    )


def refresh_log(log: HealthLog) -> HealthLog:
    """Return a copy of `log` with every derived field recomputed.

    Pure: `refresh_log(refresh_log(x)) == refresh_log(x)`.
    """
    steps = log.steps.model_copy(update={"count": sum(e.count for e in log.steps.entries)})
    water = log.water.model_copy(update={"glasses": sum(e.glasses for e in log.water.entries)})
    meals = [meal.model_copy(update={"total_calories": meal_calories(meal)}) for meal in log.meals]
    refreshed = log.model_copy(update={"steps": steps, "water": water, "meals": meals})
    return refreshed.model_copy(update={"summary": compute_summary(refreshed)})
