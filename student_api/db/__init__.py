"""
Database access layer for the Student Registry backend.

Holds the process-wide MongoDB client and the accessor for the `student`
collection. Document shapes live in student_api/schemas/students.py.
"""

from .client import close_mongo_client, get_mongo_client, get_student_collection

__all__ = ["get_mongo_client", "get_student_collection", "close_mongo_client"]
