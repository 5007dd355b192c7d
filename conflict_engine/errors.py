"""
Error taxonomy for the conflict engine.

Every error is caller-attributable and recoverable; nothing here is fatal.
"""
from typing import List, Optional


class ConflictEngineError(Exception):
    """Base class for all conflict engine exceptions."""
    def __init__(self, message: str, details: dict = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class InvalidSuggestion(ConflictEngineError):
    """Raised when a suggestion action lacks the fields its type requires."""


class ScheduleNotFound(ConflictEngineError):
    """Raised when an action targets a schedule missing from the snapshot."""
    def __init__(self, schedule_id: str):
        super().__init__(f"Schedule with id {schedule_id} not found", details={"schedule_id": schedule_id})


class SuggestionRejected(ConflictEngineError):
    """
    Raised when re-validation shows the change would collide with other schedules.
    The persistence collaborator is never called once this is raised.
    """
    def __init__(self, message: str, conflicting_titles: Optional[List[str]] = None, details: dict = None):
        self.conflicting_titles = list(conflicting_titles or [])
        super().__init__(message, details={**(details or {}), "conflicting_titles": self.conflicting_titles})
