"""
Rendered HTML pages.

``/`` shows the caller's tracked dog, ``/page1`` and ``/page4`` list
every stored dog, and ``/page2`` and ``/page3`` are static pages that
hold the create and search forms.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from dog_tracker_api.app.core.security import get_tracked_dog_id
from dog_tracker_api.app.core.templating import templates
from dog_tracker_api.app.schemas.dog import PLACEHOLDER_NAME
from dog_tracker_api.app.services.dog_service import DogService

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
async def host_index(request: Request, tracked_id: Optional[int] = Depends(get_tracked_dog_id)):
    dog = await DogService.get_dog(tracked_id) if tracked_id is not None else None
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "currentName": dog.name if dog else PLACEHOLDER_NAME,
            "title": "Home",
            "pageName": "Home Page",
        },
    )


@router.get("/page1", response_class=HTMLResponse)
async def host_page1(request: Request):
    dogs = await DogService.list_dogs()
    return templates.TemplateResponse(request, "page1.html", {"dogs": dogs})


@router.get("/page2", response_class=HTMLResponse)
async def host_page2(request: Request):
    return templates.TemplateResponse(request, "page2.html", {})


@router.get("/page3", response_class=HTMLResponse)
async def host_page3(request: Request):
    return templates.TemplateResponse(request, "page3.html", {})


@router.get("/page4", response_class=HTMLResponse)
async def host_page4(request: Request):
    # Same data as page1; page4 also offers the "age tracked dog" button.
    dogs = await DogService.list_dogs()
    return templates.TemplateResponse(request, "page4.html", {"dogs": dogs})
