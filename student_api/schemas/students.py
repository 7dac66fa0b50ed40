"""
Student record schema and its MongoDB document mapping.

StudentRecord is used both as the POST /add-student request body and as the
response body. No field is required and no value is validated beyond its
type: absent fields take their value from STUDENT_FIELD_DEFAULTS.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from student_api.utils.constants import STUDENT_FIELD_DEFAULTS


class StudentRecord(BaseModel):
    """
    A single student's data as stored and transmitted.

    `id` is assigned by the store on insert. A value sent by the client is
    parsed but never persisted.
    """
    id: Optional[str] = Field(
        None,
        description="Identifier generated by the store on insert"
    )
    name: str = Field(
        default=STUDENT_FIELD_DEFAULTS["name"],
        description="Student name",
        examples=["Alice"]
    )
    age: int = Field(
        default=STUDENT_FIELD_DEFAULTS["age"],
        description="Student age",
        examples=[20]
    )
    email: str = Field(
        default=STUDENT_FIELD_DEFAULTS["email"],
        description="Student email address",
        examples=["alice@example.com"]
    )

    model_config = {
        "json_schema_extra": {
            "example": {
                "name": "Alice",
                "age": 20,
                "email": "alice@example.com"
            }
        }
    }


def to_document(record: StudentRecord) -> Dict[str, Any]:
    """
    Map a record to the document inserted into the `student` collection.

    `id` is left out so the store generates `_id`.
    """
    return {
        "name": record.name,
        "age": record.age,
        "email": record.email,
    }


def from_document(document: Dict[str, Any]) -> StudentRecord:
    """
    Map a stored document back to a StudentRecord.

    `_id` becomes the string `id`; fields missing from the document are
    filled from STUDENT_FIELD_DEFAULTS.
    """
    raw_id = document.get("_id")
    fields = {
        key: document.get(key, default)
        for key, default in STUDENT_FIELD_DEFAULTS.items()
    }
    return StudentRecord(
        id=str(raw_id) if raw_id is not None else None,
        **fields
    )
