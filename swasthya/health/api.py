# -*- coding: utf-8 -*-
"""Health log: API endpoints.

Every write follows the same shape: locate-or-create today's log, append or
replace one entry, recompute the summary, persist, and return the totals
relevant to that entry type.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from ..app_db import iso_now
from ..auth.security import get_current_user
from ..schema import ApiResponse
from .aggregator import meal_calories, resolve_calories_burned
from .foods import search_foods
from .models import (
    BloodPressure,
    BloodSugar,
    ExerciseEntry,
    ExerciseLogRequest,
    ExerciseLogResult,
    FoodItem,
    FoodReference,
    HealthLog,
    HeartRate,
    Meal,
    MealLogRequest,
    MealLogResult,
    Measurements,
    MeasurementsLogRequest,
    Medication,
    MedicationLogRequest,
    Mood,
    MoodLogRequest,
    SleepLogRequest,
    SleepLogResult,
    SleepRecord,
    StepEntry,
    StepsLogRequest,
    StepsLogResult,
    SummaryUpdateRequest,
    Symptom,
    SymptomLogRequest,
    Temperature,
    Vitals,
    VitalsLogRequest,
    WaterEntry,
    WaterLogRequest,
    WaterLogResult,
    WeightReading,
)
from .storage import get_or_create_log, list_history, parse_history_days, update_log

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/health", tags=["Health"])


@router.get("/today", response_model=ApiResponse[HealthLog], summary="Today's health log")
def get_today(user: dict = Depends(get_current_user)):
    return ApiResponse[HealthLog](data=get_or_create_log(user))


@router.post("/steps", response_model=ApiResponse[StepsLogResult], summary="Log steps")
def log_steps(request: StepsLogRequest, user: dict = Depends(get_current_user)):
    def mutate(log: HealthLog) -> None:
        log.steps.entries.append(StepEntry(count=request.count, source=request.source, timestamp=iso_now()))

    log = update_log(user, mutate)
    logger.info("Steps logged for %s: +%s (total %s)", user["id"], request.count, log.steps.count)
    return ApiResponse[StepsLogResult](
        message="Steps logged successfully",
        data=StepsLogResult(total_steps=log.steps.count, goal_achieved=log.summary.goals_achieved.steps),
    )


@router.post("/water", response_model=ApiResponse[WaterLogResult], summary="Log water intake")
def log_water(request: WaterLogRequest, user: dict = Depends(get_current_user)):
    def mutate(log: HealthLog) -> None:
        log.water.entries.append(WaterEntry(glasses=request.glasses, notes=request.notes, timestamp=iso_now()))

    log = update_log(user, mutate)
    logger.info("Water logged for %s: +%s (total %s)", user["id"], request.glasses, log.water.glasses)
    return ApiResponse[WaterLogResult](
        message="Water intake logged successfully",
        data=WaterLogResult(total_glasses=log.water.glasses, goal_achieved=log.summary.goals_achieved.water),
    )


@router.post("/meal", response_model=ApiResponse[MealLogResult], summary="Log a meal")
def log_meal(request: MealLogRequest, user: dict = Depends(get_current_user)):
    meal = Meal(
        type=request.type,
        time=iso_now(),
        foods=[FoodItem.model_validate(food.model_dump()) for food in request.foods],
        meal_rating=request.meal_rating,
        photo=request.photo,
        notes=request.notes,
    )
    calories = meal_calories(meal)

    def mutate(log: HealthLog) -> None:
        log.meals.append(meal)

    log = update_log(user, mutate)
    logger.info("Meal logged for %s: %s (%s kcal)", user["id"], request.type.value, calories)
    return ApiResponse[MealLogResult](
        message="Meal logged successfully",
        data=MealLogResult(meal_calories=calories, total_daily_calories=log.summary.total_calories_consumed),
    )


@router.post("/exercise", response_model=ApiResponse[ExerciseLogResult], summary="Log exercise")
def log_exercise(request: ExerciseLogRequest, user: dict = Depends(get_current_user)):
    calories = resolve_calories_burned(request.calories_burned, request.type, request.intensity, request.duration)
    entry = ExerciseEntry(
        type=request.type,
        name=request.name,
        duration=request.duration,
        intensity=request.intensity,
        calories_burned=calories,
        start_time=request.start_time or iso_now(),
        end_time=request.end_time,
        location=request.location,
        equipment=request.equipment,
        notes=request.notes,
        rating=request.rating,
    )

    def mutate(log: HealthLog) -> None:
        log.exercises.append(entry)

    log = update_log(user, mutate)
    logger.info(
        "Exercise logged for %s: %s %s min (%s kcal)",
        user["id"],
        request.type.value,
        request.duration,
        calories,
    )
    return ApiResponse[ExerciseLogResult](
        message="Exercise logged successfully",
        data=ExerciseLogResult(
            calories_burned=calories,
            total_exercise_minutes=log.summary.total_exercise_minutes,
        ),
    )


@router.post("/sleep", response_model=ApiResponse[SleepLogResult], summary="Log sleep")
def log_sleep(request: SleepLogRequest, user: dict = Depends(get_current_user)):
    def mutate(log: HealthLog) -> None:
        log.sleep = SleepRecord(
            hours=request.hours,
            quality=request.quality,
            bedtime=request.bedtime,
            wake_time=request.wake_time,
            notes=request.notes,
        )

    log = update_log(user, mutate)
    logger.info("Sleep logged for %s: %sh", user["id"], request.hours)
    return ApiResponse[SleepLogResult](
        message="Sleep logged successfully",
        data=SleepLogResult(
            sleep_hours=log.sleep.hours,
            sleep_quality=log.sleep.quality,
            goal_achieved=log.summary.goals_achieved.sleep,
        ),
    )


@router.post("/vitals", response_model=ApiResponse[Vitals], summary="Record vitals")
def log_vitals(request: VitalsLogRequest, user: dict = Depends(get_current_user)):
    now = iso_now()

    def mutate(log: HealthLog) -> None:
        vitals = log.vitals
        if request.blood_pressure:
            vitals.blood_pressure = BloodPressure(**request.blood_pressure.model_dump(), timestamp=now)
        if request.heart_rate:
            vitals.heart_rate = HeartRate(**request.heart_rate.model_dump(), timestamp=now)
        if request.blood_sugar:
            vitals.blood_sugar = BloodSugar(**request.blood_sugar.model_dump(), timestamp=now)
        if request.temperature is not None:
            vitals.temperature = Temperature(value=request.temperature, timestamp=now)

    log = update_log(user, mutate)
    return ApiResponse[Vitals](message="Vitals recorded successfully", data=log.vitals)


@router.post("/measurements", response_model=ApiResponse[Measurements], summary="Record body measurements")
def log_measurements(request: MeasurementsLogRequest, user: dict = Depends(get_current_user)):
    changes = request.model_dump(exclude_none=True)
    weight = changes.pop("weight", None)

    def mutate(log: HealthLog) -> None:
        updates = dict(changes)
        if weight is not None:
            updates["weight"] = WeightReading(value=weight, timestamp=iso_now())
        log.measurements = log.measurements.model_copy(update=updates)

    log = update_log(user, mutate)
    return ApiResponse[Measurements](message="Measurements recorded successfully", data=log.measurements)


@router.post("/mood", response_model=ApiResponse[Mood], summary="Record mood")
def log_mood(request: MoodLogRequest, user: dict = Depends(get_current_user)):
    def mutate(log: HealthLog) -> None:
        log.mood = Mood(**request.model_dump())

    log = update_log(user, mutate)
    return ApiResponse[Mood](message="Mood recorded successfully", data=log.mood)


@router.post("/symptoms", response_model=ApiResponse[List[Symptom]], summary="Record a symptom")
def log_symptom(request: SymptomLogRequest, user: dict = Depends(get_current_user)):
    def mutate(log: HealthLog) -> None:
        log.symptoms.append(Symptom(**request.model_dump(), timestamp=iso_now()))

    log = update_log(user, mutate)
    return ApiResponse[List[Symptom]](message="Symptom recorded successfully", data=log.symptoms)


@router.post("/medications", response_model=ApiResponse[List[Medication]], summary="Record a medication dose")
def log_medication(request: MedicationLogRequest, user: dict = Depends(get_current_user)):
    def mutate(log: HealthLog) -> None:
        data = request.model_dump()
        data["time_taken"] = data.get("time_taken") or iso_now()
        log.medications.append(Medication(**data))

    log = update_log(user, mutate)
    return ApiResponse[List[Medication]](message="Medication recorded successfully", data=log.medications)


@router.put("/today/summary", response_model=ApiResponse[HealthLog], summary="Rate the day / add notes")
def update_summary(request: SummaryUpdateRequest, user: dict = Depends(get_current_user)):
    changes = request.model_dump(exclude_unset=True)

    def mutate(log: HealthLog) -> None:
        log.summary = log.summary.model_copy(update=changes)

    log = update_log(user, mutate)
    return ApiResponse[HealthLog](message="Summary updated successfully", data=log)


@router.get("/history/{days}", response_model=ApiResponse[List[HealthLog]], summary="Logs for the last N days")
def get_history(days: str, user: dict = Depends(get_current_user)):
    logs = list_history(user["id"], parse_history_days(days))
    return ApiResponse[List[HealthLog]](data=logs)


@router.get(
    "/indian-foods",
    response_model=ApiResponse[List[FoodReference]],
    summary="Indian food reference list",
    dependencies=[Depends(get_current_user)],
)
def get_indian_foods(
    category: Optional[str] = Query(default=None, description="staple, dal, vegetable, breakfast, ..."),
    region: Optional[str] = Query(default=None, description="e.g. South Indian"),
    q: Optional[str] = Query(default=None, description="Case-insensitive name search"),
):
    return ApiResponse[List[FoodReference]](data=search_foods(category=category, region=region, q=q))
