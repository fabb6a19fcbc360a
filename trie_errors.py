"""Exception types raised by the DLB trie and its prefix cursor."""


class InvalidArgument(ValueError):
    """A word or character argument is missing, empty or malformed."""


class InvalidState(RuntimeError):
    """The cursor cannot perform the operation from its current state.

    Raised when retreating from, or committing, an empty running prefix.
    """
