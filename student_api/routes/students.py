"""
Student registration endpoint.

POST /add-student binds the JSON body to a StudentRecord and hands it to the
persistence service. There is no authentication and no validation beyond
type coercion.
"""

import logging

from fastapi import APIRouter, status

from student_api.db.client import get_student_collection
from student_api.schemas.students import StudentRecord
from student_api.services import add_student

logger = logging.getLogger(__name__)

router = APIRouter(tags=["students"])


@router.post(
    "/add-student",
    response_model=StudentRecord,
    status_code=status.HTTP_200_OK,
    summary="Register a student",
    description="""
    Store a student record and return it with its generated id.

    This endpoint:
    - Accepts name, age and email (all optional, defaults "", 0, "")
    - Ignores any client-supplied id
    - Inserts exactly one document into the `student` collection

    Errors:
    - 422 when the body is not valid JSON or a field has the wrong type
    - 500 when the database is unreachable or rejects the write
    """
)
def register_student(student: StudentRecord) -> StudentRecord:
    """
    Register a student.

    Parse/Validate Request
    - FastAPI parses the body into StudentRecord, applying field defaults

    Call Service
    - add_student() inserts the document and fills in the id

    Persistence
    - Store failures propagate and surface as a generic 500
    """
    logger.info("Registering student")

    collection = get_student_collection()

    return add_student(collection=collection, student=student)
