# backend/planner/routers/events.py
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query

from backend.planner.core.auth import get_subject_id
from backend.planner.core.dependencies import get_faculty_repository
from backend.planner.core.errors import PlannerError
from backend.planner.repositories.faculty_collections import FacultyCollectionRepository
from backend.planner.routers.common import dump_all, http_error, parse_numeric, require_param
from backend.planner.schemas.faculty import FacultyCollection

logger = logging.getLogger("planner.events")

router = APIRouter(prefix="/events", tags=["Events"])


@router.get("/getAllForFaculty", summary="Timetable events of a faculty")
async def get_all_for_faculty(
    faculty_id: Optional[str] = Query(None, alias="facultyId"),
    _uid: str = Depends(get_subject_id),
    repo: FacultyCollectionRepository = Depends(get_faculty_repository),
):
    faculty_id = require_param(faculty_id, "No faculty ID sent")
    try:
        result = await repo.get_all(faculty_id, FacultyCollection.EVENTS)
    except PlannerError as exc:
        raise http_error(exc, "Failed to find events for faculty") from exc

    logger.info("Found and sent all events by faculty with id %s", faculty_id)
    return {"result": dump_all(result)}


@router.get("/getAllForBranch", summary="Timetable events of one branch")
async def get_all_for_branch(
    faculty_id: Optional[str] = Query(None, alias="facultyId"),
    branch_id: Optional[str] = Query(None, alias="branchId"),
    _uid: str = Depends(get_subject_id),
    repo: FacultyCollectionRepository = Depends(get_faculty_repository),
):
    faculty_id = require_param(faculty_id, "No faculty ID sent")
    branch_id = require_param(branch_id, "No branch sent")
    try:
        result = await repo.get_by_filter(
            faculty_id, FacultyCollection.EVENTS, "branchId", parse_numeric(branch_id, "branchId")
        )
    except PlannerError as exc:
        raise http_error(exc, "Failed to find events") from exc

    logger.info("Found and sent events for branch %s of faculty %s", branch_id, faculty_id)
    return {"result": dump_all(result)}
