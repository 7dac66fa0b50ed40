"""
Pytest configuration for Student Registry tests.

Sets up the test environment and shared fixtures.
"""
import os
import pytest
from unittest.mock import MagicMock

from bson import ObjectId

# Disable config validation during tests
os.environ["VALIDATE_CONFIG"] = "false"

# Set test environment variables
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("MONGO_URL", "mongodb://localhost:27017")
os.environ.setdefault("MONGO_DB_NAME", "student_test_db")


@pytest.fixture
def mock_collection():
    """
    Mock pymongo collection for the `student` collection.

    Every insert_one call returns a fresh ObjectId, like a real server.
    """
    collection = MagicMock()
    collection.insert_one.side_effect = lambda document: MagicMock(
        inserted_id=ObjectId()
    )
    return collection
