# -*- coding: utf-8 -*-
"""Health log: Pydantic models.

A `HealthLog` is the per-user, per-calendar-day document. `summary`, the
`steps.count` / `water.glasses` running totals and each meal's
`total_calories` are derived (see `aggregator.refresh_log`).
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import Field

from ..schema import CamelModel


class StepSource(str, Enum):
    manual = "manual"
    google_fit = "google_fit"
    apple_health = "apple_health"
    fitbit = "fitbit"


class SleepQuality(str, Enum):
    poor = "poor"
    fair = "fair"
    good = "good"
    excellent = "excellent"


class MealType(str, Enum):
    breakfast = "breakfast"
    lunch = "lunch"
    dinner = "dinner"
    snack = "snack"


class ExerciseType(str, Enum):
    yoga = "yoga"
    walking = "walking"
    running = "running"
    gym = "gym"
    cycling = "cycling"
    swimming = "swimming"
    dancing = "dancing"
    sports = "sports"
    strength_training = "strength_training"
    cardio = "cardio"
    other = "other"


class Intensity(str, Enum):
    light = "light"
    moderate = "moderate"
    vigorous = "vigorous"


class Emotion(str, Enum):
    happy = "happy"
    sad = "sad"
    anxious = "anxious"
    stressed = "stressed"
    energetic = "energetic"
    tired = "tired"
    confident = "confident"
    motivated = "motivated"


class Severity(str, Enum):
    mild = "mild"
    moderate = "moderate"
    severe = "severe"


# ---- Log document ----


class StepEntry(CamelModel):
    count: int = Field(..., ge=0)
    timestamp: str
    source: StepSource = StepSource.manual


class StepsRecord(CamelModel):
    count: int = Field(0, ge=0)
    goal: int = Field(10000, ge=0)
    entries: List[StepEntry] = Field(default_factory=list)


class WaterEntry(CamelModel):
    glasses: int = Field(..., ge=0)
    timestamp: str
    notes: Optional[str] = None


class WaterRecord(CamelModel):
    glasses: int = Field(0, ge=0)
    goal: int = Field(8, ge=0)
    entries: List[WaterEntry] = Field(default_factory=list)


class SleepRecord(CamelModel):
    hours: float = Field(0.0, ge=0, le=24)
    quality: Optional[SleepQuality] = None
    bedtime: Optional[str] = None
    wake_time: Optional[str] = None
    notes: Optional[str] = None


class Quantity(CamelModel):
    amount: Optional[float] = Field(None, ge=0)
    unit: Optional[str] = Field(None, max_length=32, description="grams, cups, pieces, ...")


class Nutrients(CamelModel):
    protein: Optional[float] = Field(None, ge=0, description="g")
    carbs: Optional[float] = Field(None, ge=0, description="g")
    fat: Optional[float] = Field(None, ge=0, description="g")
    fiber: Optional[float] = Field(None, ge=0, description="g")
    sugar: Optional[float] = Field(None, ge=0, description="g")


class FoodItem(CamelModel):
    name: str = Field(..., min_length=1, max_length=200)
    quantity: Optional[Quantity] = None
    calories: Optional[float] = Field(None, ge=0)
    nutrients: Optional[Nutrients] = None
    is_indian_food: bool = True
    region: Optional[str] = Field(None, max_length=64)
    is_homemade: bool = True


class Meal(CamelModel):
    type: MealType
    time: str
    foods: List[FoodItem] = Field(default_factory=list)
    total_calories: float = 0.0
    meal_rating: Optional[int] = Field(None, ge=1, le=5)
    photo: Optional[str] = None
    notes: Optional[str] = None


class ExerciseEntry(CamelModel):
    type: ExerciseType
    name: Optional[str] = None
    duration: int = Field(..., ge=1, description="minutes")
    intensity: Intensity = Intensity.moderate
    calories_burned: Optional[float] = Field(None, ge=0)
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    location: Optional[str] = None
    equipment: List[str] = Field(default_factory=list)
    notes: Optional[str] = None
    rating: Optional[int] = Field(None, ge=1, le=5)


class WeightReading(CamelModel):
    value: float = Field(..., ge=0, description="kg")
    timestamp: str


class Measurements(CamelModel):
    weight: Optional[WeightReading] = None
    body_fat: Optional[float] = Field(None, ge=0, le=100, description="%")
    muscle_mass: Optional[float] = Field(None, ge=0, description="kg")
    waist: Optional[float] = Field(None, ge=0, description="cm")
    chest: Optional[float] = Field(None, ge=0, description="cm")
    arms: Optional[float] = Field(None, ge=0, description="cm")
    thighs: Optional[float] = Field(None, ge=0, description="cm")


class BloodPressure(CamelModel):
    systolic: float = Field(..., ge=0)
    diastolic: float = Field(..., ge=0)
    timestamp: Optional[str] = None


class HeartRate(CamelModel):
    resting: Optional[float] = Field(None, ge=0)
    max: Optional[float] = Field(None, ge=0)
    timestamp: Optional[str] = None


class BloodSugar(CamelModel):
    fasting: Optional[float] = Field(None, ge=0)
    post_meal: Optional[float] = Field(None, ge=0)
    timestamp: Optional[str] = None


class Temperature(CamelModel):
    value: float = Field(..., description="Celsius")
    timestamp: Optional[str] = None


class Vitals(CamelModel):
    blood_pressure: Optional[BloodPressure] = None
    heart_rate: Optional[HeartRate] = None
    blood_sugar: Optional[BloodSugar] = None
    temperature: Optional[Temperature] = None


class Mood(CamelModel):
    rating: Optional[int] = Field(None, ge=1, le=10)
    emotions: List[Emotion] = Field(default_factory=list)
    stress_level: Optional[int] = Field(None, ge=1, le=10)
    notes: Optional[str] = None


class Symptom(CamelModel):
    name: str = Field(..., min_length=1, max_length=200)
    severity: Optional[Severity] = None
    duration: Optional[str] = Field(None, description="e.g. '2 hours', '1 day'")
    notes: Optional[str] = None
    timestamp: str


class Medication(CamelModel):
    name: str = Field(..., min_length=1, max_length=200)
    dosage: Optional[str] = None
    time_taken: Optional[str] = None
    notes: Optional[str] = None


class GoalsAchieved(CamelModel):
    steps: bool = False
    water: bool = False
    sleep: bool = False
    exercise: bool = False
    calories: bool = False


class DailySummary(CamelModel):
    total_calories_consumed: float = 0.0
    total_calories_burned: float = 0.0
    net_calories: float = 0.0
    total_exercise_minutes: int = 0
    goals_achieved: GoalsAchieved = Field(default_factory=GoalsAchieved)
    overall_rating: Optional[int] = Field(None, ge=1, le=5)
    notes: Optional[str] = None


class HealthLog(CamelModel):
    id: str
    user_id: str
    date: str = Field(..., description="YYYY-MM-DD")
    steps: StepsRecord = Field(default_factory=StepsRecord)
    water: WaterRecord = Field(default_factory=WaterRecord)
    sleep: SleepRecord = Field(default_factory=SleepRecord)
    meals: List[Meal] = Field(default_factory=list)
    exercises: List[ExerciseEntry] = Field(default_factory=list)
    measurements: Measurements = Field(default_factory=Measurements)
    vitals: Vitals = Field(default_factory=Vitals)
    mood: Mood = Field(default_factory=Mood)
    symptoms: List[Symptom] = Field(default_factory=list)
    medications: List[Medication] = Field(default_factory=list)
    summary: DailySummary = Field(default_factory=DailySummary)
    created_at: str
    updated_at: str


# ---- Requests ----


class StepsLogRequest(CamelModel):
    count: int = Field(..., ge=0, le=200000)
    source: StepSource = StepSource.manual


class WaterLogRequest(CamelModel):
    glasses: int = Field(..., ge=1, le=5)
    notes: Optional[str] = Field(None, max_length=500)


class MealFoodRequest(FoodItem):
    calories: float = Field(..., ge=0)


class MealLogRequest(CamelModel):
    type: MealType
    foods: List[MealFoodRequest] = Field(..., min_length=1)
    meal_rating: Optional[int] = Field(None, ge=1, le=5)
    photo: Optional[str] = Field(None, max_length=2000)
    notes: Optional[str] = Field(None, max_length=2000)


class ExerciseLogRequest(CamelModel):
    type: ExerciseType
    name: Optional[str] = Field(None, max_length=200)
    duration: int = Field(..., ge=1, le=1440, description="minutes")
    intensity: Intensity = Intensity.moderate
    calories_burned: Optional[float] = Field(None, ge=0, description="Estimated from type/intensity when omitted")
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    location: Optional[str] = Field(None, max_length=200)
    equipment: List[str] = Field(default_factory=list)
    notes: Optional[str] = Field(None, max_length=2000)
    rating: Optional[int] = Field(None, ge=1, le=5)


class SleepLogRequest(CamelModel):
    hours: float = Field(..., ge=0, le=24)
    quality: Optional[SleepQuality] = None
    bedtime: Optional[str] = None
    wake_time: Optional[str] = None
    notes: Optional[str] = Field(None, max_length=2000)


class BloodPressureIn(CamelModel):
    systolic: float = Field(..., ge=40, le=300)
    diastolic: float = Field(..., ge=20, le=200)


class HeartRateIn(CamelModel):
    resting: Optional[float] = Field(None, ge=20, le=250)
    max: Optional[float] = Field(None, ge=20, le=250)


class BloodSugarIn(CamelModel):
    fasting: Optional[float] = Field(None, ge=0, le=1000)
    post_meal: Optional[float] = Field(None, ge=0, le=1000)


class VitalsLogRequest(CamelModel):
    blood_pressure: Optional[BloodPressureIn] = None
    heart_rate: Optional[HeartRateIn] = None
    blood_sugar: Optional[BloodSugarIn] = None
    temperature: Optional[float] = Field(None, ge=30, le=45, description="Celsius")


class MeasurementsLogRequest(CamelModel):
    weight: Optional[float] = Field(None, ge=20, le=400, description="kg")
    body_fat: Optional[float] = Field(None, ge=0, le=100)
    muscle_mass: Optional[float] = Field(None, ge=0, le=200)
    waist: Optional[float] = Field(None, ge=0, le=300)
    chest: Optional[float] = Field(None, ge=0, le=300)
    arms: Optional[float] = Field(None, ge=0, le=200)
    thighs: Optional[float] = Field(None, ge=0, le=200)


class MoodLogRequest(CamelModel):
    rating: int = Field(..., ge=1, le=10)
    emotions: List[Emotion] = Field(default_factory=list)
    stress_level: Optional[int] = Field(None, ge=1, le=10)
    notes: Optional[str] = Field(None, max_length=2000)


class SymptomLogRequest(CamelModel):
    name: str = Field(..., min_length=1, max_length=200)
    severity: Optional[Severity] = None
    duration: Optional[str] = Field(None, max_length=100)
    notes: Optional[str] = Field(None, max_length=2000)


class MedicationLogRequest(CamelModel):
    name: str = Field(..., min_length=1, max_length=200)
    dosage: Optional[str] = Field(None, max_length=100)
    time_taken: Optional[str] = None
    notes: Optional[str] = Field(None, max_length=2000)


class SummaryUpdateRequest(CamelModel):
    overall_rating: Optional[int] = Field(None, ge=1, le=5)
    notes: Optional[str] = Field(None, max_length=2000)


# ---- Responses ----


class StepsLogResult(CamelModel):
    total_steps: int
    goal_achieved: bool


class WaterLogResult(CamelModel):
    total_glasses: int
    goal_achieved: bool


class MealLogResult(CamelModel):
    meal_calories: float
    total_daily_calories: float


class ExerciseLogResult(CamelModel):
    calories_burned: float
    total_exercise_minutes: int


class SleepLogResult(CamelModel):
    sleep_hours: float
    sleep_quality: Optional[SleepQuality] = None
    goal_achieved: bool


class FoodReference(CamelModel):
    name: str
    calories: int
    category: str
    region: str
    is_veg: bool
