import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Sequence

import pandas as pd

logger = logging.getLogger(__name__)

ID_COLUMNS = ("id", "voter_id", "candidate_id")
CANDIDATE_COLUMNS = ("id", "name", "party")
VOTER_COLUMNS = ("id", "name", "age")
VOTE_COLUMNS = ("voter_id", "candidate_id")


def read_frame(path: str) -> pd.DataFrame:
    """
    Read a CSV or JSON (list of objects) file into a DataFrame.

    Args:
        path: Path to a .csv or .json file

    Returns:
        DataFrame with id-like columns kept as strings
    """
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"Records file not found: {file_path}")

    suffix = file_path.suffix.lower()
    if suffix == ".csv":
        df = pd.read_csv(file_path)
    elif suffix == ".json":
        df = pd.read_json(file_path, orient="records", dtype=False)
    else:
        raise ValueError(f"Unsupported records format: {suffix or file_path.name}")

    for column in ID_COLUMNS:
        if column in df.columns:
            df[column] = df[column].astype("string")

    logger.info(f"Read {len(df)} rows from {file_path}")
    return df


def frame_to_records(df: pd.DataFrame) -> List[Dict[str, Any]]:
    """Convert a DataFrame to a list of dicts, with missing cells as None."""
    cleaned = df.astype(object).where(df.notna(), None)
    return cleaned.to_dict("records")


def load_records(path: str) -> List[Dict[str, Any]]:
    """Load every row of a CSV or JSON file as a dict."""
    return frame_to_records(read_frame(path))


def _load_with_columns(path: str, required: Sequence[str]) -> List[Dict[str, Any]]:
    df = read_frame(path)
    missing = [column for column in required if column not in df.columns]
    if missing:
        raise ValueError(f"{path} is missing required columns: {', '.join(missing)}")
    return frame_to_records(df)


def load_candidates(path: str) -> List[Dict[str, Any]]:
    """
    Load candidate records.

    Args:
        path: File with id, name and party columns

    Returns:
        Candidate dicts in file order
    """
    return _load_with_columns(path, CANDIDATE_COLUMNS)


def load_voters(path: str) -> List[Dict[str, Any]]:
    """
    Load voter records.

    Args:
        path: File with id, name and age columns

    Returns:
        Voter dicts in file order
    """
    return _load_with_columns(path, VOTER_COLUMNS)


def load_votes(path: str) -> List[Dict[str, Any]]:
    """Load (voter_id, candidate_id) pairs in the order they were cast."""
    return _load_with_columns(path, VOTE_COLUMNS)


def export_records(records: Iterable[Dict[str, Any]], path: str) -> None:
    """Write records to a CSV file."""
    pd.DataFrame(list(records)).to_csv(path, index=False)
    logger.info(f"Exported records to {path}")
