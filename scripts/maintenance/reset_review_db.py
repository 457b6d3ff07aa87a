"""
Reset the review database (SM-2 schedules and attempt history).

DANGEROUS: This deletes all review history!
Only use when you want to start fresh for testing.

Shows how many schedule and attempt rows exist before asking for
confirmation. An outdated schema can still be reset; the counts are then
skipped.

Usage:
    python -m scripts.maintenance.reset_review_db
"""

from typing import Optional

from sqlalchemy.exc import SQLAlchemyError

from palace import sm2


def describe_rows() -> Optional[dict[str, int]]:
    """Row counts per table, or None if the tables cannot be read."""
    try:
        return sm2.count_rows()
    except SQLAlchemyError as e:
        print(f"⚠ Could not count rows (missing or outdated schema): {e.__class__.__name__}")
        return None


def main():
    print("=" * 60)
    print("WARNING: Reset Review Database")
    print("=" * 60)
    print()
    print(f"Database: {'TEST' if sm2.is_test_mode() else 'PRODUCTION'}")

    counts = describe_rows()
    if counts is not None:
        print("This will DELETE:")
        print(f"  - {counts['review_schedule']} review schedules (repetition, ease factor, interval)")
        print(f"  - {counts['memorization_attempts']} memorization attempts (scores and feedback)")
        if not any(counts.values()):
            print("\nTables are already empty. Recreating them anyway.")
    print()

    response = input("Are you sure you want to reset? (type 'yes' to confirm): ")

    if response.lower() == "yes":
        print("\nResetting database...")
        sm2.reset_db()
        print("✓ Database reset complete!")
    else:
        print("\nCancelled. No changes made.")


if __name__ == "__main__":
    main()
