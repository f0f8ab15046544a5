"""Compute Engine VM report and backup command generator."""

import warnings
from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("vminfo")
except PackageNotFoundError:
    __version__ = "unknown"

# google.api_core warns on import when the interpreter nears end of support
warnings.filterwarnings("ignore", category=FutureWarning, module="google.api_core")
