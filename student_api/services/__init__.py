"""
Service layer for the Student Registry backend.

Services sit between routes (HTTP layer) and the database. They receive the
collection to work on explicitly, so routes decide which store is used.
"""

from .student_service import add_student

__all__ = [
    "add_student",
]
