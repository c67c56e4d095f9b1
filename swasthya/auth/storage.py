# -*- coding: utf-8 -*-
"""Auth: account storage helpers."""

from __future__ import annotations

import json
import sqlite3
from typing import Any, Dict, Optional
from uuid import uuid4

from ..app_db import db_conn, iso_now
from ..config import settings

# Columns a profile or goals edit may touch.
_UPDATABLE_COLUMNS = {
    "first_name",
    "last_name",
    "phone",
    "height_cm",
    "weight_kg",
    "dietary_preference",
    "city",
    "language",
    "notifications",
    "daily_steps_goal",
    "daily_water_goal",
    "daily_calories_goal",
    "sleep_goal",
}


class DuplicateAccountError(Exception):
    """Email or phone number already belongs to an account."""


def _row_to_user(row: Optional[sqlite3.Row]) -> Optional[Dict[str, Any]]:
    if row is None:
        return None
    user = dict(row)
    raw = user.pop("notifications_json", None)
    try:
        user["notifications"] = json.loads(raw) if raw else {}
    except ValueError:
        user["notifications"] = {}
    user["is_active"] = bool(user.get("is_active"))
    return user


def get_user_by_email(email: str) -> Optional[Dict[str, Any]]:
    with db_conn(settings.app_db_path) as conn:
        row = conn.execute("SELECT * FROM users WHERE email = ?", (email.lower().strip(),)).fetchone()
        return _row_to_user(row)


def get_user_by_id(user_id: str) -> Optional[Dict[str, Any]]:
    with db_conn(settings.app_db_path) as conn:
        row = conn.execute("SELECT * FROM users WHERE id = ?", (user_id,)).fetchone()
        return _row_to_user(row)


def find_user_by_email_or_phone(email: str, phone: str) -> Optional[Dict[str, Any]]:
    with db_conn(settings.app_db_path) as conn:
        row = conn.execute(
            "SELECT * FROM users WHERE email = ? OR phone = ?",
            (email.lower().strip(), phone.strip()),
        ).fetchone()
        return _row_to_user(row)


def create_user(
    *,
    first_name: str,
    last_name: str,
    email: str,
    phone: str,
    password_hash: str,
    date_of_birth: str,
    gender: str,
    height_cm: float,
    weight_kg: float,
    dietary_preference: str,
    city: str,
    daily_steps_goal: int,
    daily_water_goal: int,
    daily_calories_goal: int,
    sleep_goal: float,
    notifications: Dict[str, Any],
) -> Dict[str, Any]:
    user_id = str(uuid4())
    now = iso_now()
    row = {
        "id": user_id,
        "first_name": first_name,
        "last_name": last_name,
        "email": email.lower().strip(),
        "phone": phone.strip(),
        "password_hash": password_hash,
        "date_of_birth": date_of_birth,
        "gender": gender,
        "height_cm": float(height_cm),
        "weight_kg": float(weight_kg),
        "dietary_preference": dietary_preference,
        "city": city,
        "daily_steps_goal": int(daily_steps_goal),
        "daily_water_goal": int(daily_water_goal),
        "daily_calories_goal": int(daily_calories_goal),
        "sleep_goal": float(sleep_goal),
        "language": "en",
        "notifications_json": json.dumps(notifications, ensure_ascii=False),
        "is_active": 1,
        "last_login_at": now,
        "created_at": now,
        "updated_at": now,
    }
    columns = ", ".join(row.keys())
    placeholders = ", ".join("?" for _ in row)
    try:
        with db_conn(settings.app_db_path) as conn:
            conn.execute(f"INSERT INTO users ({columns}) VALUES ({placeholders})", tuple(row.values()))
    except sqlite3.IntegrityError as exc:
        raise DuplicateAccountError(str(exc)) from exc
    return _row_to_user(row)  # type: ignore[arg-type,return-value]


def update_user(user_id: str, updates: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    unknown = set(updates) - _UPDATABLE_COLUMNS
    if unknown:
        raise ValueError(f"Cannot update columns: {sorted(unknown)}")
    values: Dict[str, Any] = dict(updates)
    if "notifications" in values:
        values["notifications_json"] = json.dumps(values.pop("notifications"), ensure_ascii=False)
    values["updated_at"] = iso_now()

    assignments = ", ".join(f"{column} = ?" for column in values)
    try:
        with db_conn(settings.app_db_path) as conn:
            conn.execute(
                f"UPDATE users SET {assignments} WHERE id = ?",
                (*values.values(), user_id),
            )
    except sqlite3.IntegrityError as exc:
        raise DuplicateAccountError(str(exc)) from exc
    return get_user_by_id(user_id)


def touch_last_login(user_id: str) -> str:
    now = iso_now()
    with db_conn(settings.app_db_path) as conn:
        conn.execute("UPDATE users SET last_login_at = ? WHERE id = ?", (now, user_id))
    return now
