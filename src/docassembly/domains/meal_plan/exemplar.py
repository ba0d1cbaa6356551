"""Reference meal plan record, as produced upstream for ``food/build-meal-plan``."""

from __future__ import annotations

from typing import Any

EXEMPLAR: dict[str, Any] = {
    "title": "5-Day Mediterranean Diet Plan",
    "targetCalories": 2000,
    "mealsPerDay": 3,
    "dietaryRestrictions": [],
    "macros": {"protein": 120, "carbs": 220, "fat": 70, "proteinPct": 24},
    "days": [
        {
            "dayNumber": 1,
            "meals": [
                {
                    "name": "Greek yogurt parfait",
                    "ingredients": [
                        {"item": "Greek yogurt", "amount": "1 cup"},
                        {"item": "Honey", "amount": "1 tablespoon"},
                        {"item": "Walnuts", "amount": "2 tablespoons, chopped"},
                    ],
                    "calories": 420,
                    "protein": 22,
                    "prepTime": "5 minutes",
                },
                {
                    "name": "Baked salmon with quinoa",
                    "ingredients": [
                        {"item": "Salmon fillet", "amount": "6 oz"},
                        {"item": "Quinoa", "amount": "3/4 cup, cooked"},
                        {"item": "Broccoli", "amount": "1 cup"},
                    ],
                    "calories": 620,
                    "protein": 48,
                    "prepTime": "10 minutes",
                    "cookTime": "25 minutes",
                },
            ],
            "totalCalories": 1040,
        },
    ],
    "groceryList": [
        {"name": "Greek yogurt", "quantity": "1 tub", "category": "Dairy"},
        {"name": "Salmon fillet", "quantity": "2", "category": "Seafood"},
        {"name": "Broccoli", "category": "Produce"},
        {"name": "Honey"},
    ],
}
