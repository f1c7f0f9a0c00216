"""
# `backend/planner/repositories/faculty_collections.py` - Faculty collection reader

Generic read access to `faculties/{facultyId}/{collection}/{itemId}`.
Courses, programs, branches and events routers all go through this class
instead of building their own Firestore queries.

- `get_all`       → every document of the sub-collection (empty list if none)
- `get_by_id`     → one document, `NotFound` if missing
- `get_by_filter` → single-field equality (`field == value`), empty list if none

Every call is a live query (no cache) bounded by a deadline; store errors come
back as `Unavailable`. Numeric filter values must already be numbers: the
routers parse them, this layer does not coerce.
"""
from typing import Any, Dict, List, Optional, Union

from google.cloud.firestore_v1 import FieldFilter

from backend.planner.core.constants import DEFAULT_REQUEST_TIMEOUT_SECONDS, FACULTIES_COLLECTION
from backend.planner.core.deadline import run_with_deadline
from backend.planner.core.errors import InvalidInput, NotFound
from backend.planner.schemas.faculty import FacultyCollection, FacultyScopedItem

CollectionArg = Union[FacultyCollection, str]


def _collection_name(collection: CollectionArg) -> str:
    try:
        return FacultyCollection(collection).value
    except ValueError as exc:
        raise InvalidInput(f"Unknown faculty collection: {collection}") from exc


def _require_segment(value: Any, label: str) -> str:
    # "/" içeren id başka bir yola işaret eder
    if not isinstance(value, str) or not value.strip() or "/" in value:
        raise InvalidInput(f"Invalid {label}")
    return value


def _normalize_dict(d: Dict[str, Any]) -> Dict[str, Any]:
    """Timestamp benzeri alanları ISO string'e çevirir."""
    out: Dict[str, Any] = {}
    for k, v in (d or {}).items():
        if hasattr(v, "to_datetime"):
            out[k] = v.to_datetime().isoformat()
        elif hasattr(v, "isoformat") and not isinstance(v, str):
            out[k] = v.isoformat()
        else:
            out[k] = v
    return out


def _to_item(snap) -> FacultyScopedItem:
    data = _normalize_dict(snap.to_dict())
    data["id"] = snap.id
    return FacultyScopedItem(**data)


class FacultyCollectionRepository:
    def __init__(self, db, timeout: Optional[float] = DEFAULT_REQUEST_TIMEOUT_SECONDS):
        self._db = db
        self._timeout = timeout

    def _collection(self, faculty_id: str, collection: CollectionArg):
        name = _collection_name(collection)
        _require_segment(faculty_id, "faculty id")
        return (
            self._db.collection(FACULTIES_COLLECTION)
            .document(faculty_id)
            .collection(name)
        )

    def _deadline(self, timeout: Optional[float]) -> Optional[float]:
        return self._timeout if timeout is None else timeout

    @staticmethod
    async def _collect(query) -> List[FacultyScopedItem]:
        return [_to_item(snap) async for snap in query.stream()]

    async def get_all(
        self,
        faculty_id: str,
        collection: CollectionArg,
        timeout: Optional[float] = None,
    ) -> List[FacultyScopedItem]:
        ref = self._collection(faculty_id, collection)
        return await run_with_deadline(
            self._collect(ref),
            self._deadline(timeout),
            operation=f"list {_collection_name(collection)}",
        )

    async def get_by_id(
        self,
        faculty_id: str,
        collection: CollectionArg,
        item_id: str,
        timeout: Optional[float] = None,
    ) -> FacultyScopedItem:
        ref = self._collection(faculty_id, collection)
        _require_segment(item_id, "item id")
        name = _collection_name(collection)

        snap = await run_with_deadline(
            ref.document(item_id).get(),
            self._deadline(timeout),
            operation=f"get {name}",
        )
        if not snap.exists:
            raise NotFound(f"No {name} item {item_id} in faculty {faculty_id}")
        return _to_item(snap)

    async def get_by_filter(
        self,
        faculty_id: str,
        collection: CollectionArg,
        field_name: str,
        field_value: Any,
        timeout: Optional[float] = None,
    ) -> List[FacultyScopedItem]:
        ref = self._collection(faculty_id, collection)
        if not isinstance(field_name, str) or not field_name.strip():
            raise InvalidInput("Filter field name is required")

        query = ref.where(filter=FieldFilter(field_name, "==", field_value))
        return await run_with_deadline(
            self._collect(query),
            self._deadline(timeout),
            operation=f"filter {_collection_name(collection)} by {field_name}",
        )
