"""
Student persistence service.

Inserts student records into the `student` collection. Store errors are not
caught here: they reach the caller unchanged.
"""

import logging

from pymongo.collection import Collection

from student_api.schemas.students import StudentRecord, to_document

logger = logging.getLogger(__name__)


def add_student(
    collection: Collection,
    student: StudentRecord
) -> StudentRecord:
    """
    Insert a student record and return it with its generated id.

    Args:
        collection: The `student` collection
        student: Record to store; any `id` it carries is ignored

    Returns:
        The same record object, with `id` set to the stringified `_id`
        the store assigned

    Raises:
        pymongo.errors.PyMongoError: On connection loss or a rejected write
    """
    document = to_document(student)

    result = collection.insert_one(document)

    student.id = str(result.inserted_id)
    logger.info(f"Student registered with id {student.id}")

    return student
