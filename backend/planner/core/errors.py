"""
Planner-wide error taxonomy.

Components raise one of these; only the routers translate them into HTTP
responses. `TokenExpired` is never folded into `Unauthorized`.
"""


class PlannerError(Exception):
    """Base class for every error the planner core raises."""

    default_message = "Planner error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message


class Unauthorized(PlannerError):
    """Bad, missing or malformed credentials or token."""

    default_message = "Unauthorized"


class TokenExpired(PlannerError):
    """Token signature is valid but its expiry has passed."""

    default_message = "Token has expired"


class NotFound(PlannerError):
    """Requested entity does not exist."""

    default_message = "Not found"


class InvalidInput(PlannerError):
    """Caller supplied malformed data (bad email, missing parameter, ...)."""

    default_message = "Invalid input"


class Unavailable(PlannerError):
    """Timeout or document store failure."""

    default_message = "Document store unavailable"
