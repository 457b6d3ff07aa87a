"""
Pydantic models for memory palaces and attempt submissions.

Passage models define the structure of MongoDB documents; submission
models validate user input before it reaches the scoring engine.
"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


# Configuration
MAX_VERSE_REF_LENGTH = 100
MAX_TEXT_LENGTH = 5000


class DifficultyTier(str, Enum):
    """Preview schedule tiers."""
    EASY = "easy"
    MODERATE = "moderate"
    HARD = "hard"


# ---- Palace Loci ----

class LocusEntry(BaseModel):
    """One place in the palace holding a verse segment."""
    locus_index: int = Field(..., ge=0)
    locus_name: str = Field(..., description="Room and object, e.g. '거실 > 소파'")
    emoji: str = ""
    segment_text: str = Field(..., description="Verse segment placed at this locus")
    keyword: str = Field(..., description="Object or keyword anchoring the segment")
    image_description: str = ""
    image_url: Optional[str] = None


# ---- Main Passage Entry ----

class PassageEntry(BaseModel):
    """
    A memory palace document in MongoDB.

    One document per palace; the review schedule lives in the review database.
    """
    palace_id: str
    user_id: str
    name: str = Field(..., min_length=1, max_length=200)
    verse_ref: str = Field(..., min_length=1, max_length=MAX_VERSE_REF_LENGTH)
    verse_text: str = Field(..., min_length=1, max_length=MAX_TEXT_LENGTH)

    keywords: list[str] = Field(default_factory=list, description="Key words checked in attempts")
    loci: list[LocusEntry] = Field(default_factory=list)
    difficulty: Optional[DifficultyTier] = None  # Derived from segment count when missing

    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    class Config:
        use_enum_values = True  # Store enum values as strings in MongoDB


# ---- Attempt Submission ----

class AttemptSubmission(BaseModel):
    """Validated request body for submitting a recitation attempt."""
    palace_id: str = Field(..., min_length=1)
    user_text: str = Field(..., min_length=1, max_length=MAX_TEXT_LENGTH)
