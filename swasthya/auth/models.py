# -*- coding: utf-8 -*-
"""Auth: Pydantic models."""

from __future__ import annotations

from typing import Optional

from pydantic import ConfigDict, Field

from ..schema import CamelModel
from ..users.models import PHONE_PATTERN, DietaryPreference, Gender, UserPublic

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class SignupRequest(CamelModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    first_name: str = Field(..., min_length=2, max_length=50)
    last_name: str = Field(..., min_length=2, max_length=50)
    email: str = Field(..., max_length=254, pattern=EMAIL_PATTERN)
    phone: str = Field(..., pattern=PHONE_PATTERN)
    password: str = Field(..., min_length=8, max_length=128)
    age: int = Field(..., ge=13, le=120)
    gender: Gender
    height: float = Field(..., ge=100, le=250, description="cm")
    weight: float = Field(..., ge=30, le=300, description="kg")
    dietary_preference: DietaryPreference
    city: str = Field(..., min_length=2, max_length=100)
    daily_calories_goal: Optional[int] = Field(None, ge=500, le=10000, description="Derived from BMR when omitted")


class LoginRequest(CamelModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    email: str = Field(..., max_length=254, pattern=EMAIL_PATTERN)
    password: str = Field(..., min_length=1, max_length=128)


class ForgotPasswordRequest(CamelModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    email: str = Field(..., max_length=254, pattern=EMAIL_PATTERN)


class AuthResponse(CamelModel):
    success: bool = True
    message: str
    token: str
    user: UserPublic


class VerifyTokenResponse(CamelModel):
    success: bool = True
    user: UserPublic
