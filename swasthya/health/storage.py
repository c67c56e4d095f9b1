# -*- coding: utf-8 -*-
"""Health log storage (SQLite, one JSON document per user per day).

Mutations run load -> mutate -> aggregate -> save inside a single
`BEGIN IMMEDIATE` transaction, so concurrent writers to the same day are
serialised by the database write lock instead of racing on a stale read.
"""

from __future__ import annotations

import logging
import re
import sqlite3
from datetime import date, timedelta
from typing import Any, Callable, Dict, List, Optional
from uuid import uuid4

from ..app_db import db_conn, iso_now
from ..config import settings
from ..users.goals import DEFAULT_STEPS_GOAL, DEFAULT_WATER_GOAL
from .aggregator import refresh_log
from .models import HealthLog, StepsRecord, WaterRecord

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_DAYS = 7
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

LogMutation = Callable[[HealthLog], None]


def today() -> str:
    return date.today().isoformat()


def _account_goal(user: Dict[str, Any], key: str, default: int) -> int:
    value = user.get(key)
    return default if value is None else int(value)


def _new_log(user: Dict[str, Any], day: str) -> HealthLog:
    now = iso_now()
    log = HealthLog(
        id=str(uuid4()),
        user_id=user["id"],
        date=day,
        steps=StepsRecord(goal=_account_goal(user, "daily_steps_goal", DEFAULT_STEPS_GOAL)),
        water=WaterRecord(goal=_account_goal(user, "daily_water_goal", DEFAULT_WATER_GOAL)),
        created_at=now,
        updated_at=now,
    )
    return refresh_log(log)


def _load(conn: sqlite3.Connection, user_id: str, day: str) -> Optional[HealthLog]:
    row = conn.execute(
        "SELECT document_json FROM daily_logs WHERE user_id = ? AND log_date = ?",
        (user_id, day),
    ).fetchone()
    if not row:
        return None
    return HealthLog.model_validate_json(row["document_json"])


def _save(conn: sqlite3.Connection, log: HealthLog) -> None:
    conn.execute(
        """
        INSERT INTO daily_logs (id, user_id, log_date, document_json, created_at, updated_at)
        VALUES (?, ?, ?, ?, ?, ?)
        ON CONFLICT(user_id, log_date) DO UPDATE SET
            document_json = excluded.document_json,
            updated_at = excluded.updated_at
        """,
        (
            log.id,
            log.user_id,
            log.date,
            log.model_dump_json(by_alias=True),
            log.created_at,
            log.updated_at,
        ),
    )


def get_or_create_log(user: Dict[str, Any], day: Optional[str] = None) -> HealthLog:
    day = day or today()
    with db_conn(settings.app_db_path) as conn:
        conn.execute("BEGIN IMMEDIATE")
        log = _load(conn, user["id"], day)
        if log is None:
            log = _new_log(user, day)
            _save(conn, log)
            logger.info("Created health log %s for user %s", day, user["id"])
        return log


def update_log(user: Dict[str, Any], mutate: LogMutation, day: Optional[str] = None) -> HealthLog:
    """Apply `mutate` to the user's log for `day` (today by default) and persist it.

    The log is created on demand. The summary is recomputed after `mutate`
    runs, so callers only touch entry collections.
    """
    day = day or today()
    with db_conn(settings.app_db_path) as conn:
        conn.execute("BEGIN IMMEDIATE")
        log = _load(conn, user["id"], day) or _new_log(user, day)
        mutate(log)
        log = refresh_log(log)
        log.updated_at = iso_now()
        _save(conn, log)
    return log


def list_logs_since(user_id: str, start_day: str) -> List[HealthLog]:
    with db_conn(settings.app_db_path) as conn:
        rows = conn.execute(
            "SELECT document_json FROM daily_logs WHERE user_id = ? AND log_date >= ? ORDER BY log_date DESC",
            (user_id, start_day),
        ).fetchall()
    return [HealthLog.model_validate_json(row["document_json"]) for row in rows]


def parse_history_days(raw: str) -> int:
    """Leading integer of `raw` ("30days" -> 30); anything else falls back to 7."""
    match = _LEADING_INT.match(raw or "")
    if not match:
        return DEFAULT_HISTORY_DAYS
    days = int(match.group(1))
    return days if days > 0 else DEFAULT_HISTORY_DAYS


def list_history(user_id: str, days: int) -> List[HealthLog]:
    start = date.today() - timedelta(days=days)
    return list_logs_since(user_id, start.isoformat())
