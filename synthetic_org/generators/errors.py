"""Exceptions raised by the synthetic organization generators."""


class SyntheticOrgError(Exception):
    """Base class for all generator errors."""


class DuplicateIdentityError(SyntheticOrgError):
    """Two registrations resolved to the same employee id or email."""


class HierarchyError(SyntheticOrgError):
    """A registration would break the single-root, root-first reporting tree."""


class MissingPrerequisiteError(SyntheticOrgError):
    """Phase 2 was started without the registry snapshot written by phase 1."""


class MalformedTemplateError(SyntheticOrgError):
    """A narrative template references a placeholder with no filler."""

    def __init__(self, template: str, unknown: list[str]):
        self.template = template
        self.unknown = unknown
        super().__init__(f"Unknown placeholder(s) {unknown} in template: {template!r}")


class GenerationError(SyntheticOrgError):
    """A generator produced data that failed its own validation."""


class CorruptSnapshotError(SyntheticOrgError):
    """The registry snapshot exists but cannot be parsed back into a registry."""
