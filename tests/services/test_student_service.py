"""
Tests for the student persistence service.

The pymongo collection is mocked; these tests check what add_student sends
to the store and what it hands back.
"""

import pytest
from bson import ObjectId
from unittest.mock import MagicMock
from pymongo.errors import ServerSelectionTimeoutError

from student_api.schemas.students import StudentRecord
from student_api.services.student_service import add_student


class TestAddStudent:
    """Tests for add_student function."""

    def test_add_student_inserts_document_and_sets_id(self, mock_collection):
        """The record comes back with the stringified inserted_id."""
        student = StudentRecord(name="Alice", age=20, email="alice@example.com")

        result = add_student(collection=mock_collection, student=student)

        mock_collection.insert_one.assert_called_once_with(
            {"name": "Alice", "age": 20, "email": "alice@example.com"}
        )
        assert result.id
        assert ObjectId.is_valid(result.id)
        assert result.name == "Alice"
        assert result.age == 20
        assert result.email == "alice@example.com"

    def test_add_student_returns_same_record_object(self, mock_collection):
        student = StudentRecord(name="Bob", age=31, email="bob@example.com")

        result = add_student(collection=mock_collection, student=student)

        assert result is student

    def test_client_supplied_id_is_not_persisted(self, mock_collection):
        """A pre-set id is neither written nor kept."""
        student = StudentRecord(id="client-id", name="Eve", age=22, email="eve@example.com")

        result = add_student(collection=mock_collection, student=student)

        inserted = mock_collection.insert_one.call_args.args[0]
        assert "id" not in inserted
        assert "_id" not in inserted
        assert result.id != "client-id"

    def test_same_data_twice_gives_distinct_ids(self, mock_collection):
        first = add_student(
            collection=mock_collection,
            student=StudentRecord(name="Alice", age=20, email="alice@example.com"),
        )
        second = add_student(
            collection=mock_collection,
            student=StudentRecord(name="Alice", age=20, email="alice@example.com"),
        )

        assert first.id != second.id
        assert mock_collection.insert_one.call_count == 2

    def test_default_record_is_stored_with_default_values(self, mock_collection):
        add_student(collection=mock_collection, student=StudentRecord())

        mock_collection.insert_one.assert_called_once_with(
            {"name": "", "age": 0, "email": ""}
        )

    def test_storage_failure_propagates(self):
        """Store errors reach the caller unchanged."""
        collection = MagicMock()
        collection.insert_one.side_effect = ServerSelectionTimeoutError("no servers")
        student = StudentRecord(name="Alice", age=20, email="alice@example.com")

        with pytest.raises(ServerSelectionTimeoutError):
            add_student(collection=collection, student=student)

        assert student.id is None
