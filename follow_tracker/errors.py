"""
Errors raised by the analysis pipeline.

Ingestion, detection and extraction never raise; they return None or empty
lists. Only the orchestration layer turns those into the errors below, each
carrying a message meant to be shown to the user as-is.
"""

from __future__ import annotations


class AnalysisError(ValueError):
    """Base class for user-facing analysis failures."""


class ParseError(AnalysisError):
    """One or both files are not valid JSON, even after BOM stripping."""

    def __init__(self, positions: list[str]) -> None:
        self.positions = positions
        which = " and ".join(f"{p} file" for p in positions)
        super().__init__(
            f"Failed to parse JSON ({which}). "
            "Make sure both files are valid JSON format."
        )


class UnrecognizedFormatError(AnalysisError):
    """A parsed file matches neither the followers nor the following shape."""

    def __init__(self, position: str, description: str) -> None:
        self.position = position
        self.description = description
        super().__init__(
            f"The {position} file is not a recognized Instagram export: "
            f"found {description}. Expected followers_1.json (an array of entries "
            "with 'string_list_data') or following.json (an object with "
            "'relationships_following')."
        )


class WrongCombinationError(AnalysisError):
    """Both files were recognized but are not a followers/following pair."""

    def __init__(self, first_type: str, second_type: str) -> None:
        self.first_type = first_type
        self.second_type = second_type
        super().__init__(
            f"Wrong files selected. First file is {first_type}, second file is "
            f"{second_type}. Please select followers_1.json first, then following.json."
        )


class EmptyResultError(AnalysisError):
    """Extraction produced no usable accounts for one side."""

    MESSAGES = {
        "followers": (
            "No followers found. Make sure you selected the correct "
            "followers_1.json file."
        ),
        "following": (
            "No following data found. Make sure you selected the correct "
            "following.json file."
        ),
    }

    def __init__(self, side: str) -> None:
        if side not in self.MESSAGES:
            raise ValueError(f"Unknown side '{side}'")
        self.side = side
        super().__init__(self.MESSAGES[side])
