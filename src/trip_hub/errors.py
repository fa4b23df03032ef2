"""Exceptions raised by the static build."""

from __future__ import annotations


class BuildError(Exception):
    """Fatal problem that aborts the whole build."""


class SourceRootError(BuildError):
    """The source directory is missing or is not a directory."""


class BuildConfigError(BuildError):
    """The configuration would make the build unsafe or meaningless."""


class ContractError(BuildError):
    """An embedded page payload does not match its schema."""
