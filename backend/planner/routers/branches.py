# backend/planner/routers/branches.py
"""
Branches (smer) of a faculty.
`getAllForProgram` filters on the numeric `programId` field.
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

logger = logging.getLogger("planner.branches")

router = APIRouter(prefix="/branches", tags=["Branches"])

BRANCHES = FacultyCollection.BRANCHES


@router.get("/getAllForFaculty")
async def get_all_for_faculty(
    faculty_id: Optional[str] = Query(None, alias="facultyId"),
    _uid: str = Depends(get_subject_id),
    repo: FacultyCollectionRepository = Depends(get_faculty_repository),
):
    faculty_id = require_param(faculty_id, "No faculty ID sent")
    try:
        result = await repo.get_all(faculty_id, BRANCHES)
    except PlannerError as exc:
        raise http_error(exc, "Failed to find branches for faculty") from exc

    logger.info("Found and sent all branches by faculty with id %s", faculty_id)
    return {"result": dump_all(result)}


@router.get("/getOneById")
async def get_one_by_id(
    faculty_id: Optional[str] = Query(None, alias="facultyId"),
    branch_id: Optional[str] = Query(None, alias="branchId"),
    _uid: str = Depends(get_subject_id),
    repo: FacultyCollectionRepository = Depends(get_faculty_repository),
):
    faculty_id = require_param(faculty_id, "No faculty ID sent")
    branch_id = require_param(branch_id, "No branch sent")
    try:
        result = await repo.get_by_id(faculty_id, BRANCHES, branch_id)
    except PlannerError as exc:
        raise http_error(exc, "Failed to find branch") from exc

    logger.info("Found and sent branch with id %s of faculty %s", branch_id, faculty_id)
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
        result = await repo.get_by_filter(faculty_id, BRANCHES, "programId", parse_numeric(program_id, "programId"))
    except PlannerError as exc:
        raise http_error(exc, "Failed to find branches") from exc

    logger.info("Found and sent branches for program %s of faculty %s", program_id, faculty_id)
    return {"result": dump_all(result)}
