# -*- coding: utf-8 -*-
"""Static Indian food reference list (calories per typical serving)."""

from __future__ import annotations

from typing import List, Optional

from .models import FoodReference

INDIAN_FOODS: List[FoodReference] = [
    # Staples
    FoodReference(name="Roti (Chapati)", calories=104, category="staple", region="North Indian", is_veg=True),
    FoodReference(name="Rice (1 cup cooked)", calories=205, category="staple", region="All India", is_veg=True),
    FoodReference(name="Naan", calories=262, category="bread", region="North Indian", is_veg=True),
    # Dal
    FoodReference(name="Dal Tadka", calories=184, category="dal", region="All India", is_veg=True),
    FoodReference(name="Rajma", calories=245, category="dal", region="North Indian", is_veg=True),
    FoodReference(name="Chana Masala", calories=269, category="dal", region="North Indian", is_veg=True),
    # Vegetables
    FoodReference(name="Aloo Gobi", calories=158, category="vegetable", region="North Indian", is_veg=True),
    FoodReference(name="Palak Paneer", calories=287, category="vegetable", region="North Indian", is_veg=True),
    FoodReference(name="Bhindi Masala", calories=89, category="vegetable", region="All India", is_veg=True),
    # South Indian
    FoodReference(name="Idli (2 pieces)", calories=58, category="breakfast", region="South Indian", is_veg=True),
    FoodReference(name="Dosa (Plain)", calories=168, category="breakfast", region="South Indian", is_veg=True),
    FoodReference(name="Upma", calories=251, category="breakfast", region="South Indian", is_veg=True),
    FoodReference(name="Sambar", calories=74, category="curry", region="South Indian", is_veg=True),
    # Snacks
    FoodReference(name="Samosa", calories=252, category="snack", region="North Indian", is_veg=True),
    FoodReference(name="Pakora (5 pieces)", calories=205, category="snack", region="All India", is_veg=True),
    FoodReference(name="Dhokla (2 pieces)", calories=160, category="snack", region="Gujarati", is_veg=True),
]


def search_foods(
    *,
    category: Optional[str] = None,
    region: Optional[str] = None,
    q: Optional[str] = None,
) -> List[FoodReference]:
    items = INDIAN_FOODS
    if category:
        items = [f for f in items if f.category == category.strip().lower()]
    if region:
        needle = region.strip().lower()
        items = [f for f in items if f.region.lower() == needle]
    if q:
        needle = q.strip().lower()
        items = [f for f in items if needle in f.name.lower()]
    return list(items)
