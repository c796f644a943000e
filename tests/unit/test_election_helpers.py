"""
Unit tests for the stateless election helpers: voter validation,
regional vote counting and pure tallying.
"""

import pytest

from election.session import Voter
from election.tally import count_votes_in_regions, tally_pure
from election.validation import (
    FIELDS_MISMATCH,
    MISSING_RECORD,
    UNDER_AGE,
    create_vote_validator,
)

RULES = {"min_age": 18, "required_fields": ["id", "name", "age"]}


@pytest.mark.unit
class TestVoteValidator:
    """Test the voter validator factory."""

    def test_valid_voter(self):
        validate = create_vote_validator(RULES)
        assert validate({"id": "V1", "name": "Mohan", "age": 25}) == {
            "valid": True,
            "reason": None,
        }

    def test_under_age(self):
        validate = create_vote_validator(RULES)
        result = validate({"id": "V1", "name": "Mohan", "age": 16})
        assert result == {"valid": False, "reason": UNDER_AGE}

    def test_custom_min_age(self):
        validate = create_vote_validator({**RULES, "min_age": 21})
        assert not validate({"id": "V1", "name": "Mohan", "age": 19})["valid"]
        assert validate({"id": "V1", "name": "Mohan", "age": 21})["valid"]

    def test_extra_field_fails_count_check(self):
        validate = create_vote_validator(RULES)
        result = validate({"id": "V1", "name": "Mohan", "age": 25, "village": "Rampur"})
        assert result == {"valid": False, "reason": FIELDS_MISMATCH}

    def test_missing_field_fails_count_check(self):
        validate = create_vote_validator(RULES)
        assert validate({"id": "V1", "age": 25})["reason"] == FIELDS_MISMATCH

    def test_count_check_ignores_field_names(self):
        """Default mode only compares the number of fields."""
        validate = create_vote_validator(RULES)
        assert validate({"a": 1, "b": 2, "c": 3})["valid"]

    def test_match_names_checks_field_names(self):
        validate = create_vote_validator(RULES, match_names=True)
        assert not validate({"a": 1, "b": 2, "c": 3})["valid"]
        voter = {"id": "V1", "name": "Mohan", "age": 25, "village": "Rampur"}
        assert validate(voter)["valid"]

    def test_missing_record(self):
        validate = create_vote_validator(RULES)
        assert validate(None) == {"valid": False, "reason": MISSING_RECORD}
        assert validate("V1")["reason"] == MISSING_RECORD

    def test_dataclass_voter(self):
        validate = create_vote_validator(RULES)
        assert validate(Voter("V1", "Mohan", 30))["valid"]

    def test_default_rules(self):
        validate = create_vote_validator()
        assert validate({"id": "V1", "name": "Mohan", "age": 18})["valid"]
        assert not validate({"id": "V1", "name": "Mohan", "age": 17})["valid"]

    def test_validators_are_independent(self):
        strict = create_vote_validator({"min_age": 60})
        lenient = create_vote_validator({"min_age": 10})
        voter = {"id": "V1", "name": "Mohan", "age": 30}
        assert not strict(voter)["valid"]
        assert lenient(voter)["valid"]


@pytest.mark.unit
class TestCountVotesInRegions:
    """Test recursive regional vote totals."""

    def test_nested_regions(self):
        tree = {
            "name": "District",
            "votes": 10,
            "sub_regions": [
                {"name": "Block A", "votes": 5, "sub_regions": []},
                {
                    "name": "Block B",
                    "votes": 3,
                    "sub_regions": [
                        {"name": "Village 1", "votes": 2},
                        {"name": "Village 2", "votes": 4, "sub_regions": []},
                    ],
                },
            ],
        }
        assert count_votes_in_regions(tree) == 24

    def test_single_region(self):
        assert count_votes_in_regions({"name": "Rampur", "votes": 7}) == 7

    @pytest.mark.parametrize("tree", [None, 0, "region", [], {}])
    def test_invalid_tree(self, tree):
        assert count_votes_in_regions(tree) == 0

    def test_missing_votes_counts_as_zero(self):
        tree = {"name": "District", "sub_regions": [{"name": "Block", "votes": 3}]}
        assert count_votes_in_regions(tree) == 3

    def test_invalid_sub_regions_ignored(self):
        tree = {"name": "District", "votes": 4, "sub_regions": "none"}
        assert count_votes_in_regions(tree) == 4

    def test_null_children_skipped(self):
        tree = {"name": "District", "votes": 4, "sub_regions": [None, {"votes": 1}]}
        assert count_votes_in_regions(tree) == 5


@pytest.mark.unit
class TestTallyPure:
    """Test the non-mutating tally update."""

    def test_increments_existing(self):
        assert tally_pure({"C1": 5, "C2": 3}, "C1") == {"C1": 6, "C2": 3}

    def test_adds_missing_candidate(self):
        assert tally_pure({"C1": 5}, "C2") == {"C1": 5, "C2": 1}

    def test_empty_tally(self):
        assert tally_pure({}, "C1") == {"C1": 1}

    @pytest.mark.invariant
    def test_input_not_mutated(self):
        tally = {"C1": 5}
        updated = tally_pure(tally, "C1")
        assert tally == {"C1": 5}
        assert updated is not tally

    def test_folding_votes(self):
        tally = {}
        for candidate_id in ["C1", "C2", "C1", "C1"]:
            tally = tally_pure(tally, candidate_id)
        assert tally == {"C1": 3, "C2": 1}
