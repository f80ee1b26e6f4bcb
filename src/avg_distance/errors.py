from __future__ import annotations

# --- Error taxonomy ---
# Every condition that stops an estimate early is an AvgDistanceError.
# Library code raises them; only the CLI turns them into a message
# and an exit status.
# ------------------------------------------------------


class AvgDistanceError(Exception):
    """Base class for all recoverable estimate failures."""

    default_message = "Average distance estimate failed."

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)


class EmptyInput(AvgDistanceError):
    default_message = "Error: The edge list is empty. Cannot proceed."


class InputUnavailable(EmptyInput):
    """
    The edge source could not be opened or read.
    A missing source yields no edges, so this is also an EmptyInput.
    """
    default_message = "Error: Could not read a valid edge list from the file."

    def __init__(self, path: str | None = None):
        self.path = path
        message = None
        if path is not None:
            message = f"Error: Could not open edge list file '{path}'."
        super().__init__(message)


class SamplingError(AvgDistanceError):
    """
    Raised after the BFS from the start vertex has run.
    Carries the start vertex and the reachable count so the
    BFS line of the report can still be printed.
    """

    def __init__(self, start: int | None = None, reachable: int = 0):
        self.start = start
        self.reachable = reachable
        super().__init__()


class InsufficientReachableVertices(SamplingError):
    default_message = "Not enough visited vertices to form pairs (need at least 2)."


class NoPairsFormed(SamplingError):
    default_message = "Could not form any distinct pairs."

    def __init__(self, attempts: int = 0, start: int | None = None, reachable: int = 0):
        self.attempts = attempts
        super().__init__(start=start, reachable=reachable)


class AllPairsUnreachable(SamplingError):
    default_message = "None of the selected pairs are reachable from each other."

    def __init__(self, sampled_pairs: int = 0, start: int | None = None, reachable: int = 0):
        self.sampled_pairs = sampled_pairs
        super().__init__(start=start, reachable=reachable)
