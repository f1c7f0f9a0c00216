"""
backend/planner/schemas/faculty.py
Fakülte altındaki koleksiyonlar: faculties/{facultyId}/{collection}/{itemId}
"""
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class FacultyCollection(str, Enum):
    """Known sub-collections of a faculty document."""

    COURSES = "courses"
    PROGRAMS = "programs"
    BRANCHES = "branches"
    EVENTS = "events"


class FacultyScopedItem(BaseModel):
    """A course, program, branch or event. Fields beyond `id` are collection specific."""

    model_config = ConfigDict(extra="allow")

    id: str = Field(..., description="Firestore document id")
