"""Health-check payload for the API."""

from savings_compare.domain.frequencies import CompoundingFrequency, ContributionFrequency
from savings_compare.schemas.ping import PingResponse


def build_ping(service: str) -> PingResponse:
    """Report liveness plus the frequency options the engine accepts."""
    return PingResponse(
        message="pong",
        service=service,
        compoundingFrequencies=[frequency.value for frequency in CompoundingFrequency],
        contributionFrequencies=[frequency.value for frequency in ContributionFrequency],
    )
