"""Health check for the teacher service."""

from __future__ import annotations

import logging

from tutorweb.service.state import AppState

log = logging.getLogger(__name__)


def health_check_handler(state: AppState) -> str:
    """Report that the service is up and how many health checks came before."""
    log.info("incoming for health check")
    count = state.record_visit()
    return f"{state.health_check_response} {count} times"