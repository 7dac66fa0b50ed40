"""
Storage and record constants.

STUDENT_FIELD_DEFAULTS is the default-value rule table applied whenever a
student field is absent from an inbound body or a stored document.
"""

# Name of the MongoDB collection holding student documents
STUDENT_COLLECTION = "student"

STUDENT_FIELD_DEFAULTS = {
    'name': '',
    'age': 0,
    'email': '',
}
