"""
Top‑level router.

Pages and dog endpoints are served from the site root, so neither
router takes a prefix.
"""

from fastapi import APIRouter

from .endpoints import dogs, pages

router = APIRouter()

router.include_router(pages.router, tags=["pages"])
router.include_router(dogs.router, tags=["dogs"])
