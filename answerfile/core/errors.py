"""Exceptions raised while building an answer file."""

from __future__ import annotations


class AnswerFileError(Exception):
    """Base class for failures that abort a build."""


class TemplateNotFoundError(AnswerFileError, FileNotFoundError):
    """Raised when the answer file template does not exist."""


class MappingNotFoundError(AnswerFileError, FileNotFoundError):
    """Raised when the file mapping table does not exist."""


class MalformedTemplateError(AnswerFileError, ValueError):
    """Raised when the template cannot be parsed or lacks a required anchor."""


class MalformedMappingError(AnswerFileError, ValueError):
    """Raised when the mapping table is missing a required column."""
