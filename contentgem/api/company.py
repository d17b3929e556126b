"""
Company operations module.

This module maps the company profile and website-parsing endpoints onto
client methods.
"""

import logging
from typing import Any, Dict

from ..constants import COMPANY_PARSING_MAX_ATTEMPTS, COMPANY_PARSING_POLL_DELAY
from ..models import CompanyParsingResponse, CompanyParsingStatus, CompanyResponse
from .polling import classify_job_status, poll_with_fixed_delay

logger = logging.getLogger(__name__)


class CompanyOperations:
    """Company profile and website parsing."""

    def get_company_info(self) -> CompanyResponse:
        return self._transport.request("GET", "/company")

    def update_company_info(self, company_data: Dict[str, Any]) -> CompanyResponse:
        return self._transport.request("PUT", "/company", json_body=company_data)

    def parse_company_website(self, website_url: str) -> CompanyParsingResponse:
        """Start extracting the company profile from ``website_url``."""
        return self._transport.request(
            "POST", "/company/parse", json_body={"website_url": website_url}
        )

    def get_company_parsing_status(self) -> CompanyParsingStatus:
        return self._transport.request("GET", "/company/parsing-status")

    def wait_for_company_parsing(
        self,
        max_attempts: int = COMPANY_PARSING_MAX_ATTEMPTS,
        delay: float = COMPANY_PARSING_POLL_DELAY,
    ) -> CompanyParsingStatus:
        """Poll the parsing status until the extraction completes or fails."""
        logger.info(f"Waiting for company website parsing ({max_attempts} x {delay}s)")
        return poll_with_fixed_delay(
            self.get_company_parsing_status,
            classify_job_status,
            max_attempts=max_attempts,
            delay=delay,
            label="Company parsing",
            job_id="company",
        )
