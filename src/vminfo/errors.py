class VMInfoError(Exception):
    """Base class for errors raised by vminfo."""


class DiskClassificationError(VMInfoError):
    """A disk source path names neither a zone nor a region."""


class DescribeError(VMInfoError):
    """A describe call against the compute backend failed."""


class MissingDependencyError(VMInfoError):
    """A required external tool is not installed and could not be installed."""
