"""Errors raised outside the domain layer."""


class UtilError(Exception):
    """Base for infrastructure and wiring failures."""


class DependencyInjectionError(UtilError):
    """A provider needed to assemble the container is missing."""
