"""
Publication operations module.

This module maps the publication, generation and bulk-generation endpoints
onto client methods, along with the waits that poll generation jobs until
they finish.
"""

import logging
from typing import Any, Dict, Optional, Sequence

from ..constants import (
    BULK_MAX_ATTEMPTS,
    BULK_POLL_DELAY,
    DEFAULT_PAGE,
    DEFAULT_PAGE_SIZE,
    DOWNLOAD_FORMATS,
    GENERATION_MAX_ATTEMPTS,
    GENERATION_POLL_DELAY,
)
from ..models import (
    BulkGenerationRequest,
    BulkGenerationResponse,
    BulkStatusResponse,
    DeleteResponse,
    DownloadResponse,
    GenerationRequest,
    GenerationResponse,
    GenerationStatus,
    PublicationResponse,
    PublicationsResponse,
)
from .polling import classify_job_status, make_bulk_classifier, poll_with_fixed_delay

logger = logging.getLogger(__name__)


class PublicationOperations:
    """Publication CRUD, lifecycle and generation endpoints."""

    def get_publications(
        self,
        page: int = DEFAULT_PAGE,
        limit: int = DEFAULT_PAGE_SIZE,
        search: Optional[str] = None,
        status: Optional[str] = None,
        type: Optional[str] = None,
    ) -> PublicationsResponse:
        """List publications, optionally filtered by text, status or type."""
        params = self._list_params(page, limit, search=search, status=status, type=type)
        return self._transport.request("GET", "/publications", params=params)

    def get_publication(self, publication_id: str) -> PublicationResponse:
        return self._transport.request("GET", f"/publications/{publication_id}")

    def create_publication(self, data: Dict[str, Any]) -> PublicationResponse:
        return self._transport.request("POST", "/publications", json_body=data)

    def update_publication(self, publication_id: str, data: Dict[str, Any]) -> PublicationResponse:
        return self._transport.request("PUT", f"/publications/{publication_id}", json_body=data)

    def delete_publication(self, publication_id: str) -> DeleteResponse:
        return self._transport.request("DELETE", f"/publications/{publication_id}")

    def publish_publication(self, publication_id: str) -> PublicationResponse:
        return self._transport.request("POST", f"/publications/{publication_id}/publish")

    def archive_publication(self, publication_id: str) -> PublicationResponse:
        return self._transport.request("POST", f"/publications/{publication_id}/archive")

    def download_publication(self, publication_id: str, format: str = "pdf") -> DownloadResponse:
        """
        Request a download link for a publication.

        Args:
            publication_id: Publication identifier
            format: One of pdf, docx, html, markdown

        Raises:
            ValueError: If ``format`` is not a supported export format
        """
        if format not in DOWNLOAD_FORMATS:
            raise ValueError(
                f"Unsupported download format '{format}', expected one of: {', '.join(DOWNLOAD_FORMATS)}"
            )
        return self._transport.request(
            "POST", f"/publications/{publication_id}/download", json_body={"format": format}
        )

    def generate_publication(self, request: GenerationRequest) -> GenerationResponse:
        """Start generating a publication; the response carries the session id to poll."""
        return self._transport.request("POST", "/publications/generate", json_body=request)

    def check_generation_status(self, session_id: str) -> GenerationStatus:
        return self._transport.request("GET", f"/publications/generation-status/{session_id}")

    def bulk_generate_publications(self, request: BulkGenerationRequest) -> BulkGenerationResponse:
        """Start one generation job per prompt."""
        return self._transport.request("POST", "/publications/bulk-generate", json_body=request)

    def check_bulk_generation_status(self, publication_ids: Sequence[str]) -> BulkStatusResponse:
        """Check every publication in the set with a single round-trip."""
        return self._transport.request(
            "POST",
            "/publications/bulk-status",
            json_body={"publicationIds": list(publication_ids)},
        )

    def wait_for_generation(
        self,
        session_id: str,
        max_attempts: int = GENERATION_MAX_ATTEMPTS,
        delay: float = GENERATION_POLL_DELAY,
    ) -> GenerationStatus:
        """
        Poll a generation session until it completes.

        Args:
            session_id: Session id returned by ``generate_publication``
            max_attempts: Maximum number of status checks
            delay: Seconds between checks

        Returns:
            The completed status snapshot, including the generated content

        Raises:
            JobFailedError: The server reported the generation as failed
            JobTimeoutError: No terminal state within ``max_attempts`` checks
            TransportError: A status check itself failed
        """
        logger.info(f"Waiting for generation {session_id} ({max_attempts} x {delay}s)")
        return poll_with_fixed_delay(
            lambda: self.check_generation_status(session_id),
            classify_job_status,
            max_attempts=max_attempts,
            delay=delay,
            label="Generation",
            job_id=session_id,
        )

    def wait_for_bulk_generation(
        self,
        publication_ids: Sequence[str],
        max_attempts: int = BULK_MAX_ATTEMPTS,
        delay: float = BULK_POLL_DELAY,
    ) -> BulkStatusResponse:
        """
        Poll a set of publications until none remains pending.

        The wait resolves when completed + failed reaches the number of
        tracked publications. Individual failures do not abort the wait;
        an aggregate ``status: "failed"`` does.

        Raises:
            ValueError: If ``publication_ids`` is empty
            JobFailedError: The server reported the bulk job as failed
            JobTimeoutError: Jobs still pending after ``max_attempts`` checks
            TransportError: A status check itself failed
        """
        publication_ids = list(publication_ids)
        if not publication_ids:
            raise ValueError("publication_ids must not be empty")

        logger.info(
            f"Waiting for bulk generation of {len(publication_ids)} publications "
            f"({max_attempts} x {delay}s)"
        )
        return poll_with_fixed_delay(
            lambda: self.check_bulk_generation_status(publication_ids),
            make_bulk_classifier(publication_ids),
            max_attempts=max_attempts,
            delay=delay,
            label="Bulk generation",
            job_id=",".join(publication_ids),
        )
