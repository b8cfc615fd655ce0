"""Centralized exit codes for the ccdb command group."""


class ExitCodes:
    """Standard exit codes for ccdb commands."""

    SUCCESS = 0

    NO_MATCH = 1

    LOAD_FAILED = 2
