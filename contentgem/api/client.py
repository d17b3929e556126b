"""
ContentGem API client module.

This module defines the client that bundles every resource operation on
top of a shared transport, and the factory that builds one from the
loaded environment configuration.
"""

import logging
from typing import Any, Dict, Optional

import httpx

from ..config import Env
from ..models import ClientConfig
from ..utils.logging import mask_api_key
from .company import CompanyOperations
from .images import ImageOperations
from .publications import PublicationOperations
from .statistics import StatisticsOperations
from .subscription import SubscriptionOperations
from .transport import Transport
from .utils import build_list_params

logger = logging.getLogger(__name__)


class ContentGemClient(
    PublicationOperations,
    ImageOperations,
    CompanyOperations,
    SubscriptionOperations,
    StatisticsOperations,
):
    """
    Typed client for the ContentGem REST API.

    Configuration is fixed at construction. Responses are returned as
    decoded JSON envelopes; ``success: false`` envelopes are results, not
    exceptions.
    """

    def __init__(
        self,
        api_key: str,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Initialize the client.

        Args:
            api_key: API key sent with every request
            base_url: API root (defaults to the hosted service)
            timeout: Per-request timeout in seconds (defaults to 30)
            transport: Optional httpx transport, mainly for tests
        """
        self._config = ClientConfig.create(api_key, base_url=base_url, timeout=timeout)
        self._transport = Transport(self._config, transport=transport)
        logger.debug(
            f"ContentGem client created for {self._config.base_url} "
            f"(key {mask_api_key(api_key)}, timeout {self._config.timeout}s)"
        )

    @property
    def config(self) -> ClientConfig:
        return self._config

    @staticmethod
    def _list_params(page: int, limit: int, **filters: Any) -> Dict[str, Any]:
        return build_list_params(page, limit, **filters)

    def close(self) -> None:
        """Release pooled connections."""
        self._transport.close()

    def __enter__(self) -> "ContentGemClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def create_client(transport: Optional[httpx.BaseTransport] = None) -> ContentGemClient:
    """Create a client from the globally loaded environment configuration."""
    env = Env.current()
    client = ContentGemClient(
        api_key=env.CONTENTGEM_API_KEY,
        base_url=env.CONTENTGEM_BASE_URL,
        timeout=env.CONTENTGEM_TIMEOUT,
        transport=transport,
    )
    logger.info(f"ContentGem client initialized for {client.config.base_url}")
    return client
