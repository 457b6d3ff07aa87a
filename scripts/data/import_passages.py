"""
Import verses from CSV as memory palaces.

This script:
1. Reads a CSV with columns verse_ref, verse_text and optional
   name, keywords (comma-separated), difficulty
2. For each row, stores the palace in MongoDB and creates its review schedule
3. Prints the preview review plan for each palace

Usage:
    python -m scripts.data.import_passages --csv data/verses.csv [--user ID] [--dry-run]
"""

from __future__ import annotations

import argparse
from datetime import date
from pathlib import Path
from typing import Optional

import pandas as pd
from dotenv import load_dotenv
from pydantic import ValidationError
from pymongo.errors import DuplicateKeyError

from palace import passage_repo, review_service, sm2
from palace.recall import split_verse_into_segments
from palace.schemas import PassageEntry

# Load environment
load_dotenv()

# Configuration
CSV_PATH = Path("data/verses.csv")


def parse_keywords(keywords_str) -> list[str]:
    """Parse comma-separated keywords from CSV."""
    if pd.isna(keywords_str) or not str(keywords_str).strip():
        return []

    keywords = [kw.strip() for kw in str(keywords_str).split(",")]
    return [kw for kw in keywords if kw]


def row_to_entry(row: pd.Series, user_id: str) -> PassageEntry:
    """Convert a CSV row to a PassageEntry."""
    difficulty = row.get("difficulty")
    name = row.get("name")
    return PassageEntry(
        palace_id=passage_repo.generate_palace_id(),
        user_id=user_id,
        name=str(name) if not pd.isna(name) else str(row["verse_ref"]),
        verse_ref=str(row["verse_ref"]),
        verse_text=str(row["verse_text"]),
        keywords=parse_keywords(row.get("keywords", "")),
        difficulty=None if pd.isna(difficulty) else str(difficulty),
    )


def print_schedule(schedule: sm2.ReviewPreviewSchedule) -> None:
    for review in schedule.reviews:
        print(
            f"    #{review.review_number} {review.date.isoformat()} "
            f"(+{review.days_after_start}d) {review.recommendation}"
        )


def import_passages(
    csv_path: Path = CSV_PATH,
    user_id: Optional[str] = None,
    dry_run: bool = False
) -> None:
    """
    Import passages from CSV.

    Args:
        csv_path: CSV file to read
        user_id: Owner of the palaces (defaults to DEFAULT_USER_ID)
        dry_run: If True, only print the preview plans
    """
    if user_id is None:
        user_id = sm2.get_default_user_id()

    if not csv_path.exists():
        raise FileNotFoundError(f"CSV not found: {csv_path}")

    df = pd.read_csv(csv_path)
    print(f"Loaded {len(df)} verses from CSV")

    missing = {"verse_ref", "verse_text"} - set(df.columns)
    if missing:
        raise ValueError(f"CSV is missing columns: {', '.join(sorted(missing))}")

    if not dry_run:
        sm2.init_db()

    today = date.today()
    success_count = 0
    error_count = 0
    duplicate_count = 0

    for idx, row in df.iterrows():
        print(f"\n[{idx+1}/{len(df)}] {row['verse_ref']}")

        try:
            entry = row_to_entry(row, user_id)

            if dry_run:
                difficulty = entry.difficulty or sm2.difficulty_for_segment_count(
                    len(split_verse_into_segments(entry.verse_text))
                )
                schedule = sm2.generate_review_schedule(entry.verse_ref, difficulty, today)
            else:
                schedule = review_service.create_palace(entry, today=today)

            print(f"  ✓ {'[DRY RUN] Would create' if dry_run else 'Created'} ({schedule.difficulty})")
            print_schedule(schedule)
            success_count += 1

        except DuplicateKeyError:
            duplicate_count += 1
            print("  ⚠ Duplicate palace id, skipped")

        except (ValidationError, ValueError) as e:
            error_count += 1
            print(f"  ✗ Error: {e}")

    # Summary
    print(f"\n{'='*60}")
    print("Import complete!")
    print(f"{'='*60}")
    print(f"Successfully processed: {success_count}")
    print(f"Duplicates skipped:    {duplicate_count}")
    print(f"Errors:                {error_count}")
    print(f"Total:                 {len(df)}")

    if dry_run:
        print("\n⚠ DRY RUN MODE - No changes were made")


def main():
    parser = argparse.ArgumentParser(description="Import verses as memory palaces")
    parser.add_argument(
        "--csv",
        type=Path,
        default=CSV_PATH,
        help=f"CSV file to import (default: {CSV_PATH})"
    )
    parser.add_argument(
        "--user",
        help="Owner user id (default: DEFAULT_USER_ID)"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Only print the review plans"
    )

    args = parser.parse_args()

    import_passages(
        csv_path=args.csv,
        user_id=args.user,
        dry_run=args.dry_run
    )


if __name__ == "__main__":
    main()
