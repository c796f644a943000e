import logging
from typing import Any, Dict, Mapping, Optional

logger = logging.getLogger(__name__)

# Price per day in rupees
MEAL_RATES = {
    "veg": 80,
    "nonveg": 120,
    "jain": 90,
}


def create_tiffin_plan(
    name: Optional[str] = None, meal_type: str = "veg", days: int = 30
) -> Optional[Dict[str, Any]]:
    """
    Price a tiffin subscription for one customer.

    Args:
        name: Customer name
        meal_type: One of MEAL_RATES (default "veg")
        days: Length of the plan in days (default 30)

    Returns:
        Plan dict with name, meal_type, days, daily_rate and total_cost,
        or None for a missing name or unknown meal type
    """
    if not name:
        return None

    daily_rate = MEAL_RATES.get(meal_type)
    if daily_rate is None:
        logger.debug(f"Unknown meal type: {meal_type}")
        return None

    return {
        "name": name,
        "meal_type": meal_type,
        "days": days,
        "daily_rate": daily_rate,
        "total_cost": daily_rate * days,
    }


def combine_plans(*plans: Mapping[str, Any]) -> Optional[Dict[str, Any]]:
    """
    Summarise several plans.

    Returns:
        Dict with total_customers, total_revenue and meal_breakdown
        (count per meal type), or None if no plans were given
    """
    if not plans:
        return None

    meal_breakdown = {meal_type: 0 for meal_type in MEAL_RATES}
    total_revenue = 0

    for plan in plans:
        total_revenue += plan["total_cost"]
        meal_type = plan["meal_type"]
        if meal_type not in MEAL_RATES:
            logger.warning(
                f"Plan for {plan.get('name')} has unknown meal type {meal_type}"
            )
        meal_breakdown[meal_type] = meal_breakdown.get(meal_type, 0) + 1

    return {
        "total_customers": len(plans),
        "total_revenue": total_revenue,
        "meal_breakdown": meal_breakdown,
    }


def apply_addons(
    plan: Optional[Mapping[str, Any]], *addons: Mapping[str, Any]
) -> Optional[Dict[str, Any]]:
    """
    Add extras such as raita or papad to a plan.

    Each addon is {"name": str, "price": int} and its price is added to the
    daily rate. The original plan is left unchanged.

    Args:
        plan: Plan from create_tiffin_plan
        *addons: Addons to include

    Returns:
        New plan with updated daily_rate, total_cost and addon_names,
        or None if plan is missing
    """
    if not plan:
        return None

    daily_rate = plan["daily_rate"] + sum(addon["price"] for addon in addons)

    return {
        **plan,
        "daily_rate": daily_rate,
        "total_cost": daily_rate * plan["days"],
        "addon_names": [addon["name"] for addon in addons],
    }
