# -*- coding: utf-8 -*-
"""Users: profile and goal endpoints."""

from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException

from ..auth.security import get_current_user
from ..auth.storage import DuplicateAccountError, update_user
from ..schema import ApiResponse
from .models import GoalsUpdateRequest, NotificationSettings, ProfileUpdateRequest, UserPublic
from .profile import user_public

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/users", tags=["Users"])

# Wire name -> users column, where they differ.
_PROFILE_COLUMNS = {"height": "height_cm", "weight": "weight_kg"}


def _apply(user: Dict[str, Any], updates: Dict[str, Any]) -> Dict[str, Any]:
    if not updates:
        return user
    try:
        row = update_user(user["id"], updates)
    except DuplicateAccountError as exc:
        raise HTTPException(status_code=400, detail="Phone number already in use") from exc
    if not row:
        raise HTTPException(status_code=401, detail="Invalid token")
    return row


@router.get("/profile", response_model=ApiResponse[UserPublic], summary="Get the current profile")
def get_profile(user: dict = Depends(get_current_user)):
    return ApiResponse[UserPublic](data=user_public(user))


@router.put("/profile", response_model=ApiResponse[UserPublic], summary="Update profile fields")
def update_profile(request: ProfileUpdateRequest, user: dict = Depends(get_current_user)):
    changes = request.model_dump(exclude_unset=True, exclude_none=True, mode="json")
    updates: Dict[str, Any] = {}
    for field, value in changes.items():
        if field == "notifications":
            merged = NotificationSettings.model_validate(user.get("notifications") or {}).model_dump()
            merged.update(value)
            updates["notifications"] = merged
        else:
            updates[_PROFILE_COLUMNS.get(field, field)] = value

    row = _apply(user, updates)
    logger.info("Profile updated for %s: %s", user["id"], sorted(updates))
    return ApiResponse[UserPublic](message="Profile updated successfully", data=user_public(row))


@router.put("/goals", response_model=ApiResponse[UserPublic], summary="Update daily goals")
def update_goals(request: GoalsUpdateRequest, user: dict = Depends(get_current_user)):
    updates = request.model_dump(exclude_unset=True, exclude_none=True)
    row = _apply(user, updates)
    logger.info("Goals updated for %s: %s", user["id"], updates)
    return ApiResponse[UserPublic](message="Goals updated successfully", data=user_public(row))
