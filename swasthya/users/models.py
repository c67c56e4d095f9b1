# -*- coding: utf-8 -*-
"""Users: Pydantic models."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import Field

from ..schema import CamelModel

PHONE_PATTERN = r"^\+?[0-9][0-9 \-]{6,18}[0-9]$"


class Gender(str, Enum):
    male = "male"
    female = "female"
    other = "other"


class DietaryPreference(str, Enum):
    vegetarian = "vegetarian"
    vegan = "vegan"
    non_vegetarian = "non-vegetarian"
    eggetarian = "eggetarian"


class Language(str, Enum):
    en = "en"
    hi = "hi"
    ta = "ta"
    te = "te"
    kn = "kn"


class NotificationSettings(CamelModel):
    email: bool = True
    push: bool = True
    sms: bool = False
    water_reminder: bool = True
    exercise_reminder: bool = True
    sleep_reminder: bool = True


class NotificationSettingsUpdate(CamelModel):
    email: Optional[bool] = None
    push: Optional[bool] = None
    sms: Optional[bool] = None
    water_reminder: Optional[bool] = None
    exercise_reminder: Optional[bool] = None
    sleep_reminder: Optional[bool] = None


class UserPublic(CamelModel):
    id: str
    first_name: str
    last_name: str
    full_name: str
    email: str
    phone: str
    date_of_birth: str
    age: int
    gender: Gender
    height: float = Field(..., description="cm")
    weight: float = Field(..., description="kg")
    bmi: float
    bmi_category: str
    dietary_preference: DietaryPreference
    city: str
    daily_steps_goal: int
    daily_water_goal: int
    daily_calories_goal: int
    sleep_goal: float
    language: Language
    notifications: NotificationSettings
    is_active: bool
    last_login: Optional[str] = None
    created_at: str
    updated_at: str


class ProfileUpdateRequest(CamelModel):
    first_name: Optional[str] = Field(None, min_length=2, max_length=50)
    last_name: Optional[str] = Field(None, min_length=2, max_length=50)
    phone: Optional[str] = Field(None, pattern=PHONE_PATTERN)
    height: Optional[float] = Field(None, ge=100, le=250)
    weight: Optional[float] = Field(None, ge=30, le=300)
    dietary_preference: Optional[DietaryPreference] = None
    city: Optional[str] = Field(None, min_length=2, max_length=100)
    language: Optional[Language] = None
    notifications: Optional[NotificationSettingsUpdate] = None


class GoalsUpdateRequest(CamelModel):
    daily_steps_goal: Optional[int] = Field(None, ge=0, le=100000)
    daily_water_goal: Optional[int] = Field(None, ge=1, le=30)
    daily_calories_goal: Optional[int] = Field(None, ge=500, le=10000)
    sleep_goal: Optional[float] = Field(None, ge=1, le=24)
