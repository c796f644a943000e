"""
Panchayat election simulator.

This module provides:
- ElectionSession / create_election: registration, vote casting and results
- create_vote_validator: rule-based voter record checks
- count_votes_in_regions, tally_pure: stateless counting helpers
"""

from .session import (
    Candidate,
    ElectionSession,
    Voter,
    VoteRejection,
    create_election,
)
from .tally import count_votes_in_regions, tally_pure
from .validation import create_vote_validator

__all__ = [
    "Candidate",
    "ElectionSession",
    "Voter",
    "VoteRejection",
    "create_election",
    "create_vote_validator",
    "count_votes_in_regions",
    "tally_pure",
]
