"""
LyricFinder - Input Validation Layer

Validation for the search form.  Returns a list of ``ValidationError``
instances (empty list means valid).
"""


class ValidationError:
    """Represents a single validation failure."""

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message

    def __repr__(self):
        return f"ValidationError({self.field!r}, {self.message!r})"


def validate_query(track_name: str, artist_name: str) -> list[ValidationError]:
    """Validate the track/artist pair before a lyrics lookup."""
    errors = []
    if not track_name or not track_name.strip():
        errors.append(ValidationError("track_name", "Track name cannot be empty"))
    if not artist_name or not artist_name.strip():
        errors.append(ValidationError("artist_name", "Artist name cannot be empty"))
    return errors


def format_errors(errors: list[ValidationError]) -> str:
    """Join validation messages into one user-facing line."""
    return "; ".join(e.message for e in errors)
