import logging
from typing import Any, Callable, Dict, Optional

from .session import MINIMUM_VOTING_AGE, as_record

logger = logging.getLogger(__name__)

DEFAULT_VALIDATION_RULES = {
    "min_age": MINIMUM_VOTING_AGE,
    "required_fields": ["id", "name", "age"],
}

MISSING_RECORD = "Voter record is missing"
FIELDS_MISMATCH = "Required fields do not match"
UNDER_AGE = "Voter is below minimum age"


def create_vote_validator(
    rules: Optional[Dict[str, Any]] = None, match_names: bool = False
) -> Callable[[Any], Dict[str, Any]]:
    """
    Build a voter validation function from a set of rules.

    By default a record passes the field check when it has exactly as many
    fields as there are required fields; the names themselves are not
    compared. Pass match_names=True to require every named field instead.

    Args:
        rules: {"min_age": int, "required_fields": [str, ...]}, missing keys
            fall back to DEFAULT_VALIDATION_RULES
        match_names: Check required field names rather than the field count

    Returns:
        Function taking a voter and returning {"valid": bool, "reason": str or None}
    """
    merged = {**DEFAULT_VALIDATION_RULES, **(rules or {})}
    min_age = merged["min_age"]
    required_fields = list(merged["required_fields"])

    def validate(voter: Any) -> Dict[str, Any]:
        record = as_record(voter)
        if record is None:
            return {"valid": False, "reason": MISSING_RECORD}

        if match_names:
            fields_ok = all(field in record for field in required_fields)
        else:
            fields_ok = len(record) == len(required_fields)
        if not fields_ok:
            return {"valid": False, "reason": FIELDS_MISMATCH}

        age = record.get("age")
        is_number = isinstance(age, (int, float)) and not isinstance(age, bool)
        if is_number and age < min_age:
            return {"valid": False, "reason": UNDER_AGE}

        return {"valid": True, "reason": None}

    logger.debug(
        f"Created voter validator (min_age={min_age}, fields={required_fields}, "
        f"match_names={match_names})"
    )
    return validate
