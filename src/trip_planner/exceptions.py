class TripPlannerError(Exception):
    """Base exception for trip planning errors."""


class ExternalServiceError(TripPlannerError):
    """Raised when an upstream API call fails."""


class MalformedResponseError(TripPlannerError):
    """Raised when an upstream API answers with an unexpected payload."""
