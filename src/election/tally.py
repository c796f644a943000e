"""
Stateless vote counting helpers.
"""

from typing import Any, Dict, Mapping


def count_votes_in_regions(region_tree: Any) -> int:
    """
    Total the votes in a region and all of its sub-regions.

    Args:
        region_tree: {"name": str, "votes": int, "sub_regions": [region, ...]}

    Returns:
        Sum of votes over the whole tree, 0 for a missing or invalid tree
    """
    if not isinstance(region_tree, Mapping):
        return 0

    total = region_tree.get("votes") or 0

    sub_regions = region_tree.get("sub_regions")
    if isinstance(sub_regions, list):
        for sub_region in sub_regions:
            total += count_votes_in_regions(sub_region)

    return total


def tally_pure(current_tally: Mapping[Any, int], candidate_id: Any) -> Dict[Any, int]:
    """Return a new tally with one more vote for candidate_id."""
    return {**current_tally, candidate_id: current_tally.get(candidate_id, 0) + 1}
