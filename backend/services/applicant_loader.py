"""Applicant roster loading and validation.

This is the only place applicant records are shape-checked: missing or null
optional fields are normalised here so the scorers can read every field
without guards. Duplicate emails are rejected because email is the identity
key for lookups and selection.
"""

import json
import logging
from pathlib import Path
from typing import Any

import requests
from pydantic import ValidationError

from models.schemas.applicant import Applicant
from services.applicant_catalog import ApplicantRoster, build_roster

logger = logging.getLogger(__name__)


class ApplicantDataError(ValueError):
    """Roster could not be read, decoded or validated."""


def parse_applicants(raw: Any) -> list[Applicant]:
    """Validate decoded JSON (a list, or ``{"applicants": [...]}``) into applicants."""
    if isinstance(raw, dict) and "applicants" in raw:
        raw = raw["applicants"]
    if not isinstance(raw, list):
        raise ApplicantDataError(
            f"Expected a list of applicants, got {type(raw).__name__}"
        )

    applicants: list[Applicant] = []
    seen: set[str] = set()
    for i, item in enumerate(raw):
        try:
            applicant = Applicant.model_validate(item)
        except ValidationError as e:
            raise ApplicantDataError(f"Invalid applicant at index {i}: {e}") from e
        if applicant.email in seen:
            raise ApplicantDataError(f"Duplicate applicant email: {applicant.email}")
        seen.add(applicant.email)
        applicants.append(applicant)

    return applicants


def load_applicants(path: str | Path) -> list[Applicant]:
    """Read and validate a roster from a JSON file."""
    path = Path(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ApplicantDataError(f"Could not read applicants file {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ApplicantDataError(f"Applicants file {path} is not valid JSON: {e}") from e

    applicants = parse_applicants(raw)
    logger.info("Loaded %d applicants from %s", len(applicants), path)
    return applicants


def fetch_applicants(url: str, timeout: float = 15.0) -> list[Applicant]:
    """Fetch and validate a roster from a remote JSON document."""
    try:
        r = requests.get(url, timeout=timeout)
        r.raise_for_status()
        raw = r.json()
    except requests.RequestException as e:
        logger.error("Failed to fetch applicants from %s: %s", url, e)
        raise ApplicantDataError(f"Could not fetch applicants from {url}: {e}") from e
    except ValueError as e:
        logger.error("Applicants response from %s is not JSON: %s", url, e)
        raise ApplicantDataError(f"Applicants response from {url} is not valid JSON") from e

    applicants = parse_applicants(raw)
    logger.info("Fetched %d applicants from %s", len(applicants), url)
    return applicants


def load_roster(
    path: str | Path | None = None,
    url: str = "",
    timeout: float = 15.0,
) -> ApplicantRoster:
    """Load from ``url`` when given, otherwise from ``path``."""
    if url:
        return build_roster(fetch_applicants(url, timeout=timeout), source=url)
    if path is None:
        raise ApplicantDataError("No applicant source configured")
    return build_roster(load_applicants(path), source=str(path))
