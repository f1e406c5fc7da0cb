"""Shared dependencies for API routes."""

import logging
from functools import lru_cache

from fastapi import HTTPException

from config import settings
from services.applicant_catalog import ApplicantRoster
from services.applicant_loader import ApplicantDataError, load_roster

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def _cached_roster() -> ApplicantRoster:
    return load_roster(
        path=settings.applicants_path,
        url=settings.applicants_url,
        timeout=settings.fetch_timeout_seconds,
    )


def get_roster() -> ApplicantRoster:
    """Roster loaded once per process from the configured source."""
    try:
        return _cached_roster()
    except ApplicantDataError as e:
        logger.error("Applicant roster unavailable: %s", e)
        raise HTTPException(status_code=503, detail="Applicant data unavailable")
