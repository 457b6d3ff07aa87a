"""
SQLAlchemy ORM Models for the Review Database

Defines ReviewSchedule and MemorizationAttempt models.
One schedule row per (user, palace); attempts are an append-only history.
"""

from sqlalchemy import Column, Date, DateTime, Float, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class ReviewSchedule(Base):
    """
    Persistent SM-2 state for a single palace of a single user.
    """
    __tablename__ = 'review_schedule'
    __table_args__ = (
        UniqueConstraint('user_id', 'palace_id', name='uq_review_schedule_user_palace'),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)

    user_id = Column(String(255), nullable=False, index=True)
    palace_id = Column(String(255), nullable=False)
    difficulty = Column(String(20), nullable=False, default="moderate")

    # SM-2 parameters
    repetition_num = Column(Integer, nullable=False, default=0)
    ease_factor = Column(Float, nullable=False, default=2.5)
    interval_days = Column(Integer, nullable=False, default=1)

    # Review tracking
    next_review_at = Column(Date, nullable=False)
    last_reviewed_at = Column(DateTime(timezone=True), nullable=True)

    def __repr__(self):
        return f"<ReviewSchedule({self.user_id}, {self.palace_id}, rep={self.repetition_num})>"


class MemorizationAttempt(Base):
    """
    Log entry for a single recitation attempt.
    """
    __tablename__ = 'memorization_attempts'

    id = Column(Integer, primary_key=True, autoincrement=True)

    user_id = Column(String(255), nullable=False, index=True)
    palace_id = Column(String(255), nullable=False)

    user_text = Column(Text, nullable=False)
    score = Column(Float, nullable=False)      # 0.0 - 1.0
    quality = Column(Integer, nullable=False)  # SM-2 quality 0-5
    feedback = Column(Text, nullable=False)

    created_at = Column(DateTime(timezone=True), nullable=False)

    def __repr__(self):
        return f"<MemorizationAttempt(id={self.id}, {self.palace_id}, score={self.score})>"
