#!/usr/bin/env python3
"""
Run a panchayat election from candidate, voter and vote files.
"""

import argparse
import logging
import sys
from pathlib import Path

# Add src to path so we can import our modules
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from election.session import create_election  # noqa: E402
from records.loader import (  # noqa: E402
    export_records,
    load_candidates,
    load_voters,
    load_votes,
)

logger = logging.getLogger(__name__)


def run(candidates_path, voters_path, votes_path):
    """
    Build a session, register voters and cast the votes in file order.

    Returns:
        Tuple of (session, stats dict)
    """
    session = create_election(load_candidates(candidates_path))

    stats = {
        "registered": 0,
        "rejected_registrations": 0,
        "accepted": 0,
        "rejected": {},
    }

    for voter in load_voters(voters_path):
        if session.register_voter(voter):
            stats["registered"] += 1
        else:
            stats["rejected_registrations"] += 1

    for vote in load_votes(votes_path):
        reason = session.cast_vote(
            vote["voter_id"],
            vote["candidate_id"],
            lambda receipt: None,
            lambda error: error,
        )
        if reason is None:
            stats["accepted"] += 1
        else:
            stats["rejected"][reason] = stats["rejected"].get(reason, 0) + 1

    return session, stats


def main(argv=None):
    parser = argparse.ArgumentParser(description="Run a panchayat election")
    parser.add_argument(
        "--candidates", required=True, help="CSV/JSON with id, name, party"
    )
    parser.add_argument("--voters", required=True, help="CSV/JSON with id, name, age")
    parser.add_argument(
        "--votes", required=True, help="CSV/JSON with voter_id, candidate_id"
    )
    parser.add_argument("--export", help="Export results to CSV file")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    try:
        session, stats = run(args.candidates, args.voters, args.votes)
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Could not load election data: {e}")
        sys.exit(1)

    print("\n=== Registration ===")
    print(f"✓ Registered {stats['registered']} voters")
    if stats["rejected_registrations"]:
        print(f"⚠️  Rejected {stats['rejected_registrations']} registrations")

    print("\n=== Voting ===")
    print(f"✓ Accepted {stats['accepted']} votes")
    for reason, count in stats["rejected"].items():
        print(f"⚠️  {reason}: {count}")

    print("\n=== Results ===")
    results = session.results_frame()
    if results.empty:
        print("No candidates")
    else:
        print(results.to_string(index=False))

    winner = session.get_winner()
    if winner is None:
        print("\nNo winner: no votes cast")
    else:
        print(
            f"\n🏆 Winner: {winner['name']} ({winner['party']}) "
            f"with {winner['votes']} votes"
        )

    if args.export:
        export_records(session.get_results(), args.export)
        print(f"\nResults exported to: {args.export}")


if __name__ == "__main__":
    main()
