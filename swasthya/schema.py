# -*- coding: utf-8 -*-
"""Shared Pydantic base models (camelCase JSON, response envelope)."""

from __future__ import annotations

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """Snake_case in Python, camelCase on the wire; either is accepted on input."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ApiResponse(CamelModel, Generic[T]):
    success: bool = True
    message: Optional[str] = None
    data: T


class MessageResponse(CamelModel):
    success: bool = True
    message: str
