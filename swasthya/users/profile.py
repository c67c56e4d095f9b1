# -*- coding: utf-8 -*-
"""Read-time profile fields derived from the stored account row."""

from __future__ import annotations

from datetime import date
from typing import Any, Dict, Optional

from .goals import age_from_birth_date
from .models import NotificationSettings, UserPublic


def bmi(weight_kg: float, height_cm: float) -> float:
    height_m = height_cm / 100.0
    return round(weight_kg / (height_m * height_m), 1)


def bmi_category(value: float) -> str:
    if value < 18.5:
        return "Underweight"
    if value < 25:
        return "Normal"
    if value < 30:
        return "Overweight"
    return "Obese"


def user_public(row: Dict[str, Any], today: Optional[date] = None) -> UserPublic:
    dob = date.fromisoformat(row["date_of_birth"])
    user_bmi = bmi(float(row["weight_kg"]), float(row["height_cm"]))
    return UserPublic(
        id=row["id"],
        first_name=row["first_name"],
        last_name=row["last_name"],
        full_name=f"{row['first_name']} {row['last_name']}",
        email=row["email"],
        phone=row["phone"],
        date_of_birth=row["date_of_birth"],
        age=age_from_birth_date(dob, today),
        gender=row["gender"],
        height=float(row["height_cm"]),
        weight=float(row["weight_kg"]),
        bmi=user_bmi,
        bmi_category=bmi_category(user_bmi),
        dietary_preference=row["dietary_preference"],
        city=row["city"],
        daily_steps_goal=int(row["daily_steps_goal"]),
        daily_water_goal=int(row["daily_water_goal"]),
        daily_calories_goal=int(row["daily_calories_goal"]),
        sleep_goal=float(row["sleep_goal"]),
        language=row["language"],
        notifications=NotificationSettings.model_validate(row.get("notifications") or {}),
        is_active=bool(row["is_active"]),
        last_login=row.get("last_login_at"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )
