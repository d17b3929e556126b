"""Usage statistics and health check operations."""

from ..models import HealthResponse, StatisticsOverview, StatisticsResponse


class StatisticsOperations:
    """Usage statistics and health check."""

    def get_statistics_overview(self) -> StatisticsOverview:
        return self._transport.request("GET", "/statistics/overview")

    def get_publication_statistics(self) -> StatisticsResponse:
        return self._transport.request("GET", "/statistics/publications")

    def get_image_statistics(self) -> StatisticsResponse:
        return self._transport.request("GET", "/statistics/images")

    def health_check(self) -> HealthResponse:
        return self._transport.request("GET", "/health")
