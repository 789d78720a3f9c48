"""Loading and merging of parser configuration sources."""

from docparse.config.loader import load_configuration, read_document
from docparse.config.merge import DEFAULT_POLICIES, MergePolicy, merge, merge_value

__all__ = [
    "DEFAULT_POLICIES",
    "MergePolicy",
    "load_configuration",
    "merge",
    "merge_value",
    "read_document",
]
