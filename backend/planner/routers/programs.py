# backend/planner/routers/programs.py
"""Study programs of a faculty (faculties/{facultyId}/programs)."""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query

from backend.planner.core.auth import get_subject_id
from backend.planner.core.dependencies import get_faculty_repository
from backend.planner.core.errors import PlannerError
from backend.planner.repositories.faculty_collections import FacultyCollectionRepository
from backend.planner.routers.common import dump_all, http_error, require_param
from backend.planner.schemas.faculty import FacultyCollection

logger = logging.getLogger("planner.programs")

router = APIRouter(prefix="/programs", tags=["Programs"])


@router.get("/getAllForFaculty")
async def get_all_for_faculty(
    faculty_id: Optional[str] = Query(None, alias="facultyId"),
    _uid: str = Depends(get_subject_id),
    repo: FacultyCollectionRepository = Depends(get_faculty_repository),
):
    faculty_id = require_param(faculty_id, "No faculty ID sent")
    try:
        result = await repo.get_all(faculty_id, FacultyCollection.PROGRAMS)
    except PlannerError as exc:
        raise http_error(exc, "Failed to find programs for faculty") from exc

    logger.info("Found and sent all programs by faculty with id %s", faculty_id)
    return {"result": dump_all(result)}


@router.get("/getOneById")
async def get_one_by_id(
    faculty_id: Optional[str] = Query(None, alias="facultyId"),
    program_id: Optional[str] = Query(None, alias="programId"),
    _uid: str = Depends(get_subject_id),
    repo: FacultyCollectionRepository = Depends(get_faculty_repository),
):
    faculty_id = require_param(faculty_id, "No faculty ID sent")
    program_id = require_param(program_id, "No program sent")
    try:
        result = await repo.get_by_id(faculty_id, FacultyCollection.PROGRAMS, program_id)
    except PlannerError as exc:
        raise http_error(exc, "Failed to find program") from exc

    logger.info("Found and sent program with id %s of faculty %s", program_id, faculty_id)
    return {"result": result.model_dump()}
