# -*- coding: utf-8 -*-
"""Auth: API endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from ..schema import MessageResponse
from ..users.goals import (
    DEFAULT_SLEEP_GOAL,
    DEFAULT_STEPS_GOAL,
    DEFAULT_WATER_GOAL,
    birth_date_from_age,
    default_calorie_goal,
)
from ..users.models import NotificationSettings
from ..users.profile import user_public
from .models import AuthResponse, ForgotPasswordRequest, LoginRequest, SignupRequest, VerifyTokenResponse
from .security import create_access_token, get_current_user, hash_password, verify_password
from .storage import (
    DuplicateAccountError,
    create_user,
    find_user_by_email_or_phone,
    get_user_by_email,
    touch_last_login,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["Auth"])

_DUPLICATE_MESSAGE = "User already exists with this email or phone number"
_BAD_CREDENTIALS = "Invalid email or password"


@router.post("/signup", response_model=AuthResponse, status_code=201, summary="Register a new user")
def signup(request: SignupRequest):
    if find_user_by_email_or_phone(request.email, request.phone):
        raise HTTPException(status_code=400, detail=_DUPLICATE_MESSAGE)

    dob = birth_date_from_age(request.age)
    calories_goal = request.daily_calories_goal
    if calories_goal is None:
        calories_goal = default_calorie_goal(
            gender=request.gender.value,
            weight_kg=request.weight,
            height_cm=request.height,
            date_of_birth=dob,
        )

    try:
        user = create_user(
            first_name=request.first_name,
            last_name=request.last_name,
            email=request.email,
            phone=request.phone,
            password_hash=hash_password(request.password),
            date_of_birth=dob.isoformat(),
            gender=request.gender.value,
            height_cm=request.height,
            weight_kg=request.weight,
            dietary_preference=request.dietary_preference.value,
            city=request.city,
            daily_steps_goal=DEFAULT_STEPS_GOAL,
            daily_water_goal=DEFAULT_WATER_GOAL,
            daily_calories_goal=calories_goal,
            sleep_goal=DEFAULT_SLEEP_GOAL,
            notifications=NotificationSettings().model_dump(),
        )
    except DuplicateAccountError as exc:
        # Lost a race with a concurrent signup for the same email/phone.
        raise HTTPException(status_code=400, detail=_DUPLICATE_MESSAGE) from exc

    logger.info("Account created: %s (calorie goal %s)", user["id"], calories_goal)
    token = create_access_token(user_id=user["id"])
    return AuthResponse(message="User created successfully", token=token, user=user_public(user))


@router.post("/login", response_model=AuthResponse, summary="Login")
def login(request: LoginRequest):
    user = get_user_by_email(request.email)
    if not user or not verify_password(request.password, user["password_hash"]):
        raise HTTPException(status_code=401, detail=_BAD_CREDENTIALS)
    if not user.get("is_active"):
        raise HTTPException(status_code=401, detail="Account is deactivated. Please contact support.")

    user["last_login_at"] = touch_last_login(user["id"])
    token = create_access_token(user_id=user["id"])
    return AuthResponse(message="Login successful", token=token, user=user_public(user))


@router.post("/forgot-password", response_model=MessageResponse, summary="Request a password reset")
def forgot_password(request: ForgotPasswordRequest):
    # Same answer whether or not the account exists; reset mail is not wired up.
    user = get_user_by_email(request.email)
    if user:
        logger.info("Password reset requested for account %s", user["id"])
    return MessageResponse(
        message="If an account with that email exists, a password reset link has been sent.",
    )


@router.get("/verify-token", response_model=VerifyTokenResponse, summary="Verify a bearer token")
def verify_token(user: dict = Depends(get_current_user)):
    return VerifyTokenResponse(user=user_public(user))
