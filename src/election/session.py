import logging
import threading
from dataclasses import asdict, dataclass, is_dataclass
from enum import Enum
from functools import cmp_to_key
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Set

import pandas as pd

logger = logging.getLogger(__name__)

MINIMUM_VOTING_AGE = 18

Comparator = Callable[[Dict[str, Any], Dict[str, Any]], int]


@dataclass(frozen=True)
class Candidate:
    """A candidate standing in a panchayat election."""
    id: str
    name: str
    party: str


@dataclass(frozen=True)
class Voter:
    """A voter presenting for registration."""
    id: str
    name: str
    age: int


class VoteRejection(str, Enum):
    """Reasons a cast vote can be turned away."""
    NOT_REGISTERED = "Voter not registered"
    UNKNOWN_CANDIDATE = "Candidate does not exist"
    ALREADY_VOTED = "Voter has already voted"


def as_record(value: Any) -> Optional[Dict[str, Any]]:
    """
    Coerce a mapping or dataclass instance into a plain dict.

    Args:
        value: Candidate/voter shaped value

    Returns:
        New dict, or None if the value is not record-like
    """
    if isinstance(value, Mapping):
        return dict(value)
    if is_dataclass(value) and not isinstance(value, type):
        return asdict(value)
    return None


def is_hashable(value: Any) -> bool:
    """Check whether a value can be used as a voter or candidate id."""
    try:
        hash(value)
    except TypeError:
        return False
    return True


class ElectionSession:
    """
    Live state of one election: the registered voters and the vote ledger.

    The candidate list is fixed when the session is created. Registration and
    vote casting only ever add to the session's state; rejected requests leave
    it untouched.
    """

    def __init__(self, candidates: Iterable[Any]):
        """
        Initialize an election session.

        Args:
            candidates: Ordered candidates, each a mapping or Candidate with
                id, name and party
        """
        self._candidates: List[Dict[str, Any]] = []
        for candidate in candidates:
            record = as_record(candidate)
            if record is None:
                logger.warning(f"Ignoring non-record candidate entry: {candidate!r}")
                continue
            self._candidates.append(record)

        usable_ids = [
            c.get("id") for c in self._candidates if is_hashable(c.get("id"))
        ]
        self._candidate_ids = set(usable_ids)
        self._registered: Set[Any] = set()
        self._ledger: Dict[Any, Any] = {}
        self._lock = threading.Lock()

        if len(usable_ids) != len(self._candidates):
            logger.warning("Some candidate ids cannot be voted for")
        if len(self._candidate_ids) != len(usable_ids):
            logger.warning("Candidate list contains duplicate ids")
        logger.info(f"Election session created with {len(self._candidates)} candidates")

    def register_voter(self, voter: Any) -> bool:
        """
        Register a voter by id.

        Args:
            voter: Mapping or Voter with id, name and age

        Returns:
            True if the voter was added, False if the request was rejected
        """
        record = as_record(voter)
        if record is None:
            logger.debug("Registration rejected: voter is not a record")
            return False

        voter_id = record.get("id")
        name = record.get("name")
        age = record.get("age")
        if not voter_id or not name or not age:
            logger.debug("Registration rejected: missing id, name or age")
            return False

        if isinstance(age, bool) or not isinstance(age, (int, float)):
            logger.debug(f"Registration rejected for {voter_id}: age is not a number")
            return False

        if age < MINIMUM_VOTING_AGE:
            logger.debug(f"Registration rejected for {voter_id}: under age")
            return False

        if not is_hashable(voter_id):
            logger.debug(f"Registration rejected for {voter_id!r}: unusable id")
            return False

        with self._lock:
            if voter_id in self._registered:
                logger.debug(
                    f"Registration rejected for {voter_id}: already registered"
                )
                return False
            self._registered.add(voter_id)

        logger.debug(f"Registered voter {voter_id}")
        return True

    def cast_vote(
        self,
        voter_id: Any,
        candidate_id: Any,
        on_success: Callable[[Dict[str, Any]], Any],
        on_error: Callable[[str], Any],
    ) -> Any:
        """
        Record a vote and report the outcome through one of two callbacks.

        Exactly one callback is called, before this method returns.

        Args:
            voter_id: Id of a registered voter
            candidate_id: Id of one of the session's candidates
            on_success: Called with {"voter_id", "candidate_id"} once recorded
            on_error: Called with a VoteRejection reason string

        Returns:
            Whatever the invoked callback returns
        """
        with self._lock:
            rejection = self._check_vote(voter_id, candidate_id)
            if rejection is None:
                self._ledger[voter_id] = candidate_id

        if rejection is not None:
            logger.debug(f"Vote from {voter_id} rejected: {rejection.value}")
            return on_error(rejection.value)

        logger.info(f"Recorded vote from {voter_id} for {candidate_id}")
        return on_success({"voter_id": voter_id, "candidate_id": candidate_id})

    def _check_vote(self, voter_id: Any, candidate_id: Any) -> Optional[VoteRejection]:
        if not is_hashable(voter_id) or voter_id not in self._registered:
            return VoteRejection.NOT_REGISTERED
        if not is_hashable(candidate_id) or candidate_id not in self._candidate_ids:
            return VoteRejection.UNKNOWN_CANDIDATE
        if voter_id in self._ledger:
            return VoteRejection.ALREADY_VOTED
        return None

    def get_results(self, sort_fn: Optional[Comparator] = None) -> List[Dict[str, Any]]:
        """
        Count votes per candidate.

        Args:
            sort_fn: Optional two-argument comparator returning a negative,
                zero or positive number. Defaults to votes descending.

        Returns:
            One row per candidate: the candidate's fields plus "votes"
        """
        with self._lock:
            cast = list(self._ledger.values())

        rows = [
            {**candidate, "votes": cast.count(candidate.get("id"))}
            for candidate in self._candidates
        ]

        # sorted() is stable, so ties keep candidate order
        if sort_fn is not None:
            return sorted(rows, key=cmp_to_key(sort_fn))
        return sorted(rows, key=lambda row: row["votes"], reverse=True)

    def get_winner(self) -> Optional[Dict[str, Any]]:
        """Return the top result row, or None if nobody has a vote yet."""
        results = self.get_results()
        if not results or results[0]["votes"] == 0:
            return None
        return results[0]

    def results_frame(self, sort_fn: Optional[Comparator] = None) -> pd.DataFrame:
        """
        Get results as a DataFrame, in the same order as get_results.

        Returns:
            DataFrame with id, name, party and votes columns
        """
        rows = self.get_results(sort_fn)
        if not rows:
            return pd.DataFrame(columns=["id", "name", "party", "votes"])
        return pd.DataFrame(rows)

    @property
    def registered_count(self) -> int:
        return len(self._registered)

    @property
    def votes_cast(self) -> int:
        return len(self._ledger)


def create_election(candidates: Iterable[Any]) -> ElectionSession:
    """Start a new election session for the given candidates."""
    return ElectionSession(candidates)
