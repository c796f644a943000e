import logging
import operator
from typing import Any, Callable, Dict, List, Mapping, Optional

logger = logging.getLogger(__name__)

Record = Mapping[str, Any]

OPERATORS: Dict[str, Callable[[Any, Any], bool]] = {
    ">": operator.gt,
    "<": operator.lt,
    ">=": operator.ge,
    "<=": operator.le,
    "===": operator.eq,
    "==": operator.eq,
}


def create_filter(field: str, op: str, value: Any) -> Callable[[Record], bool]:
    """
    Build a predicate comparing one field of a record against a value.

    Args:
        field: Field name, e.g. "rating"
        op: One of ">", "<", ">=", "<=", "===" ("==" also accepted)
        value: Value to compare against

    Returns:
        Predicate taking a record. An unknown operator gives a predicate
        that is always False.
    """
    compare = OPERATORS.get(op)
    if compare is None:
        logger.warning(f"Unknown filter operator {op!r}; filter matches nothing")
        return lambda record: False

    def predicate(record: Record) -> bool:
        if field not in record:
            return False
        try:
            return bool(compare(record[field], value))
        except TypeError:
            return False

    return predicate


def _type_group(value: Any) -> int:
    if isinstance(value, (int, float)):
        return 0
    if isinstance(value, str):
        return 1
    return 2


def _compare_values(a: Any, b: Any) -> int:
    group_a, group_b = _type_group(a), _type_group(b)
    if group_a != group_b:
        return -1 if group_a < group_b else 1

    if isinstance(a, str) and isinstance(b, str):
        folded_a, folded_b = a.casefold(), b.casefold()
        if folded_a != folded_b:
            return -1 if folded_a < folded_b else 1

    try:
        return (a > b) - (a < b)
    except TypeError:
        return 0


def create_sorter(field: str, order: str = "asc") -> Callable[[Record, Record], int]:
    """
    Build a comparator ordering records by one field.

    Strings compare case-insensitively first; numbers compare numerically
    and sort before strings. Records where the field is missing or None
    sort last in either order. Use with functools.cmp_to_key for sorted().

    Args:
        field: Field to sort by
        order: "asc" (default) or "desc"
    """
    sign = -1 if order == "desc" else 1

    def comparator(a: Record, b: Record) -> int:
        left, right = a.get(field), b.get(field)
        if left is None or right is None:
            return (left is None) - (right is None)
        return sign * _compare_values(left, right)

    return comparator


def create_mapper(fields: Any) -> Optional[Callable[[Record], Dict[str, Any]]]:
    """
    Build a projection keeping only the given fields of a record.

    Returns None if fields is not a list.
    """
    if not isinstance(fields, list):
        return None

    def mapper(record: Record) -> Dict[str, Any]:
        return {field: record[field] for field in fields if field in record}

    return mapper


def apply_operations(
    data: Any, *operations: Callable[[List[Any]], List[Any]]
) -> List[Any]:
    """
    Pipe data through each operation in turn.

    Args:
        data: List of records
        *operations: Functions taking and returning a list

    Returns:
        Output of the last operation, data itself if there are none,
        or [] if data is not a list
    """
    if not isinstance(data, list):
        return []

    result = data
    for operation in operations:
        result = operation(result)
    return result
