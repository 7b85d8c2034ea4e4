"""
Dog endpoints.

These routes create dogs, look them up by name and age the caller's
tracked dog.  The tracked dog is the one the caller most recently
created or found through ``/dog/search``; it is remembered in a signed
cookie (see ``core.security``), so every client tracks its own dog.

Validation failures return ``400`` with an ``{"error": ...}`` body.
Store failures propagate as ``StoreError`` and are rendered as ``500``
by the handler registered in ``main``.
"""

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Query, Request, Response, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from dog_tracker_api.app.core.security import get_tracked_dog_id, set_tracked_dog
from dog_tracker_api.app.schemas.dog import (
    PLACEHOLDER_BREED,
    PLACEHOLDER_NAME,
    DogAge,
    DogCreate,
    DogCreated,
    DogForm,
    DogRead,
    TrackedName,
)
from dog_tracker_api.app.services.dog_service import DogService

logger = logging.getLogger(__name__)

router = APIRouter()

REQUIRED_FIELDS = ("firstname", "lastname", "breed", "age")
MISSING_FIELDS_MESSAGE = "firstname, lastname, breed and age are all required"
MISSING_NAME_MESSAGE = "Name is required to perform a search"
NO_MATCH_MESSAGE = "No dogs found"


def _error(message: str, status_code: int = status.HTTP_400_BAD_REQUEST) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def _read_payload(request: Request) -> Dict[str, Any]:
    """Return the request body as a dict, accepting JSON or form data."""
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        try:
            body = await request.json()
        except ValueError:
            return {}
        return body if isinstance(body, dict) else {}
    form = await request.form()
    return {key: form.get(key) for key in form.keys()}


def _describe_validation_error(exc: ValidationError) -> str:
    first = exc.errors()[0]
    field = ".".join(str(part) for part in first.get("loc", ())) or "body"
    return f"{field}: {first.get('msg', 'invalid value')}"


@router.get("/name", response_model=TrackedName)
async def get_name(tracked_id: Optional[int] = Depends(get_tracked_dog_id)) -> TrackedName:
    """Return the name of the caller's tracked dog.

    Callers that have not created or found a dog yet get the
    placeholder name ``"unknown"``.
    """
    dog = await DogService.get_dog(tracked_id) if tracked_id is not None else None
    return TrackedName(name=dog.name if dog else PLACEHOLDER_NAME)


@router.get("/dog/name", response_model=Optional[DogRead])
async def read_dog(name: Optional[str] = Query(None)) -> Optional[DogRead]:
    """Return the full stored record for ``name``, or ``null``."""
    if name is None:
        return None
    return await DogService.find_by_name(name)


@router.post("/dog", response_model=DogCreated)
async def create_dog(request: Request, response: Response):
    """Create a dog from ``firstname``, ``lastname``, ``breed`` and ``age``.

    Accepts a JSON object or a form‑encoded body.  The new dog becomes
    the caller's tracked dog.
    """
    payload = await _read_payload(request)
    if any(payload.get(field) in (None, "") for field in REQUIRED_FIELDS):
        return _error(MISSING_FIELDS_MESSAGE)
    try:
        form = DogForm(**{field: payload[field] for field in REQUIRED_FIELDS})
    except ValidationError as exc:
        return _error(_describe_validation_error(exc))

    dog = await DogService.create_dog(form.to_create())
    set_tracked_dog(response, dog.id)
    return DogCreated(name=dog.name, breed=dog.breed, age=dog.age)


@router.post("/dog/update", response_model=DogAge)
async def update_tracked_dog(
    response: Response,
    tracked_id: Optional[int] = Depends(get_tracked_dog_id),
) -> DogAge:
    """Increment the age of the caller's tracked dog by one.

    With no tracked dog (or one that no longer exists) the placeholder
    dog is saved with age 1 and becomes the tracked dog.
    """
    dog = await DogService.increment_age(tracked_id) if tracked_id is not None else None
    if dog is None:
        logger.info("No tracked dog; saving placeholder")
        dog = await DogService.create_dog(
            DogCreate(name=PLACEHOLDER_NAME, breed=PLACEHOLDER_BREED, age=1)
        )
        set_tracked_dog(response, dog.id)
    return DogAge(name=dog.name, age=dog.age)


@router.get("/dog/search")
async def search_name(response: Response, name: Optional[str] = Query(None)):
    """Find a dog by exact name and make it the caller's tracked dog."""
    if not name or not name.strip():
        return _error(MISSING_NAME_MESSAGE)

    dog = await DogService.find_by_name(name)
    if dog is None:
        return {"error": NO_MATCH_MESSAGE}

    set_tracked_dog(response, dog.id)
    return DogAge(name=dog.name, age=dog.age)
