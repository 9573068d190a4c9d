"""Error taxonomy for the listing wizard.

Every failure is scoped to the current user action. The HTTP layer maps each
class to a status code and renders ``user_message`` as ``{"error": ...}``.
"""


class CrafterError(Exception):
    """Base error for wizard operations."""

    status_code = 500

    def __init__(self, message: str, user_message: str | None = None):
        super().__init__(message)
        self.user_message = user_message or message


class ValidationError(CrafterError):
    """Malformed or missing user input, raised before any external call."""

    status_code = 400


class MissingInputError(ValidationError):
    """A stage was entered without one of its required upstream inputs."""

    status_code = 409

    def __init__(self, stage: str, missing: list[str]):
        self.stage = stage
        self.missing = missing
        super().__init__(
            f"Stage {stage} is missing required input: {', '.join(missing)}",
            user_message=(
                f"Missing required input for {stage.replace('_', ' ')}: "
                f"{', '.join(m.replace('_', ' ') for m in missing)}. "
                "Please complete the previous steps first."
            ),
        )


class NotFoundError(CrafterError):
    """Requested record or artifact does not exist."""

    status_code = 404


class ServiceError(CrafterError):
    """Upstream LLM or document API unreachable, unauthorized, or rate limited."""

    status_code = 503

    def __init__(self, message: str, user_message: str | None = None, service: str | None = None):
        super().__init__(message, user_message)
        self.service = service


class FormatError(CrafterError):
    """Upstream returned unparseable or incomplete structured data."""

    status_code = 502


class StageTransitionError(CrafterError):
    """Raised when a stage state transition is invalid."""

    status_code = 409
