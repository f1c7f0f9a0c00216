"""
# backend/planner/routers/courses.py - Courses of a faculty

All endpoints need a valid session token (cookie `token` or Bearer header).

| Endpoint | Query | Result |
|----------|-------|--------|
| `GET /courses/getAllForFaculty` | facultyId | every course of the faculty |
| `GET /courses/getOneById`       | facultyId, courseId | one course (404 if missing) |
| `GET /courses/getAllForProgram` | facultyId, programId (number) | courses with `programId == programId` |
| `GET /courses/getAllForBranch`  | facultyId, branchId (number) | courses with `branchId == branchId` |

Responses: `200 {"result": ...}`, `400` missing/non-numeric parameter,
`401` expired or invalid token, `500` store failure.
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query

from backend.planner.core.auth import get_subject_id
from backend.planner.core.dependencies import get_faculty_repository
from backend.planner.core.errors import PlannerError
from backend.planner.repositories.faculty_collections import FacultyCollectionRepository
from backend.planner.routers.common import dump_all, http_error, parse_numeric, require_param
from backend.planner.schemas.faculty import FacultyCollection

logger = logging.getLogger("planner.courses")

router = APIRouter(prefix="/courses", tags=["Courses"])

COURSES = FacultyCollection.COURSES


@router.get("/getAllForFaculty")
async def get_all_for_faculty(
    faculty_id: Optional[str] = Query(None, alias="facultyId"),
    _uid: str = Depends(get_subject_id),
    repo: FacultyCollectionRepository = Depends(get_faculty_repository),
):
    faculty_id = require_param(faculty_id, "No faculty ID sent")
    try:
        result = await repo.get_all(faculty_id, COURSES)
    except PlannerError as exc:
        raise http_error(exc, "Failed to find courses for faculty") from exc

    logger.info("Found and sent all courses by faculty with id %s", faculty_id)
    return {"result": dump_all(result)}


@router.get("/getOneById")
async def get_one_by_id(
    faculty_id: Optional[str] = Query(None, alias="facultyId"),
    course_id: Optional[str] = Query(None, alias="courseId"),
    _uid: str = Depends(get_subject_id),
    repo: FacultyCollectionRepository = Depends(get_faculty_repository),
):
    faculty_id = require_param(faculty_id, "No faculty ID sent")
    course_id = require_param(course_id, "No course sent")
    try:
        result = await repo.get_by_id(faculty_id, COURSES, course_id)
    except PlannerError as exc:
        raise http_error(exc, "Failed to find course") from exc

    logger.info("Found and sent course with id %s of faculty %s", course_id, faculty_id)
    return {"result": result.model_dump()}


@router.get("/getAllForProgram")
async def get_all_for_program(
    faculty_id: Optional[str] = Query(None, alias="facultyId"),
    program_id: Optional[str] = Query(None, alias="programId"),
    _uid: str = Depends(get_subject_id),
    repo: FacultyCollectionRepository = Depends(get_faculty_repository),
):
    faculty_id = require_param(faculty_id, "No faculty ID sent")
    program_id = require_param(program_id, "No program sent")
    try:
        result = await repo.get_by_filter(faculty_id, COURSES, "programId", parse_numeric(program_id, "programId"))
    except PlannerError as exc:
        raise http_error(exc, "Failed to find courses") from exc

    logger.info("Found and sent courses for program %s of faculty %s", program_id, faculty_id)
    return {"result": dump_all(result)}


@router.get("/getAllForBranch")
async def get_all_for_branch(
    faculty_id: Optional[str] = Query(None, alias="facultyId"),
    branch_id: Optional[str] = Query(None, alias="branchId"),
    _uid: str = Depends(get_subject_id),
    repo: FacultyCollectionRepository = Depends(get_faculty_repository),
):
    faculty_id = require_param(faculty_id, "No faculty ID sent")
    branch_id = require_param(branch_id, "No branch sent")
    try:
        result = await repo.get_by_filter(faculty_id, COURSES, "branchId", parse_numeric(branch_id, "branchId"))
    except PlannerError as exc:
        raise http_error(exc, "Failed to find courses") from exc

    logger.info("Found and sent courses for branch %s of faculty %s", branch_id, faculty_id)
    return {"result": dump_all(result)}
