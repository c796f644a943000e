"""
Tiffin subscription pricing.
"""

from .plans import MEAL_RATES, apply_addons, combine_plans, create_tiffin_plan

__all__ = ["MEAL_RATES", "apply_addons", "combine_plans", "create_tiffin_plan"]
