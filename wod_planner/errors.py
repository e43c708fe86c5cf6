"""Planner error types.

Every failure of a planning run is raised as a PlannerError subclass so the
CLI can report it and exit without a partial plan.

Error codes:
- MALFORMED_INPUT: unreadable file, invalid JSON or a record of the wrong shape
- NO_ELIGIBLE_MOVEMENTS: constraints leave nothing to program
"""


class PlannerError(RuntimeError):
    """Raised when a plan cannot be produced.

    Attributes:
        code: Error code (e.g., "MALFORMED_INPUT", "NO_ELIGIBLE_MOVEMENTS")
        message: Human readable explanation
    """

    code = "PLANNER_ERROR"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InputError(PlannerError):
    """Raised when an input file or record is missing or malformed."""

    code = "MALFORMED_INPUT"


class NoEligibleMovementsError(PlannerError):
    """Raised when the profile's constraints leave no movement to select."""

    code = "NO_ELIGIBLE_MOVEMENTS"
