"""
MongoDB repository for memory palace passages.

Provides functions to store and retrieve palaces (verse text, keywords, loci).
"""

from __future__ import annotations

import os
import uuid
from typing import Optional

from dotenv import load_dotenv
from pymongo import MongoClient
from pymongo.collection import Collection

from palace.schemas import PassageEntry

# Load environment
load_dotenv()

# Configuration
DB_NAME = "bible_palace"
COLLECTION_NAME = "palaces"

# Global connection pool (reused across requests)
_client: Optional[MongoClient] = None
_collection: Optional[Collection] = None


# ---- Connection Management ----

def get_collection() -> Collection:
    """
    Get a connection to the MongoDB palaces collection.

    Uses a persistent connection pool that's reused across requests.

    Returns:
        MongoDB collection object
    """
    global _client, _collection

    if _collection is not None:
        return _collection

    mongo_uri = os.getenv("MONGO_URI")
    if not mongo_uri:
        raise ValueError("MONGO_URI not found in environment variables")

    _client = MongoClient(
        mongo_uri,
        maxPoolSize=10,
        minPoolSize=1,
        maxIdleTimeMS=60000
    )
    db = _client[DB_NAME]
    _collection = db[COLLECTION_NAME]
    _collection.create_index([("user_id", 1), ("palace_id", 1)], unique=True)

    return _collection


# ---- Query Functions ----

def get_passage(user_id: str, palace_id: str) -> Optional[dict]:
    """
    Get a palace owned by the user.

    Returns:
        Palace document, or None if not found
    """
    collection = get_collection()
    return collection.find_one({"user_id": user_id, "palace_id": palace_id}, {"_id": 0})


def get_user_passages(user_id: str) -> list[dict]:
    """Get all palaces of a user, newest first."""
    collection = get_collection()
    cursor = collection.find({"user_id": user_id}, {"_id": 0}).sort("created_at", -1)
    return list(cursor)


def count_passages(user_id: str) -> int:
    """Count the palaces of a user."""
    collection = get_collection()
    return collection.count_documents({"user_id": user_id})


def insert_passage(entry: PassageEntry) -> str:
    """
    Insert a palace document.

    Returns:
        The palace_id of the inserted document
    """
    collection = get_collection()
    collection.insert_one(entry.model_dump())
    return entry.palace_id


def delete_passage(user_id: str, palace_id: str) -> bool:
    """Delete a palace. Returns True if a document was removed."""
    collection = get_collection()
    result = collection.delete_one({"user_id": user_id, "palace_id": palace_id})
    return result.deleted_count > 0


# ---- Utility Functions ----

def generate_palace_id() -> str:
    """
    Generate a unique palace ID (UUID).

    Returns:
        UUID string
    """
    return str(uuid.uuid4())
