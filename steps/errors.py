"""Errors and fixed user-visible messages."""

INVALID_ARRAY = "Please enter a valid array of numbers."
ARRAY_TOO_LARGE = "Please enter at most {max} numbers."
UNSORTED_ARRAY = "Please enter a sorted array of numbers."
INVALID_TARGET = "Please enter a valid number to search."
INVALID_PAIR_TARGET = "Provide an array and a numeric target."
INVALID_WINDOW = "Window size must be an integer between 1 and the array length."
INVALID_RADIX = "Radix sort requires non-negative integers."
INVALID_EDGES = "Please enter a valid list of edges."
INVALID_START = "Start node must be one of the graph's nodes."
DIRECTED_EDGES_REQUIRED = "Topological sort requires directed edges like A->B."
WEIGHTED_EDGES_REQUIRED = "Please enter weighted edges like A-B:4."
INVALID_SIZE = "Please enter a valid number of elements ({min} to {max})."


class ValidationError(ValueError):
    """Invalid user input, reported before any step is produced."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class StepSequenceError(RuntimeError):
    """A producer broke the step sequence contract."""
