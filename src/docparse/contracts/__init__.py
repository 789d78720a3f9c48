"""Document contracts: the field mapping table and the bundled schema."""

from docparse.contracts.load import validate_document, validate_instance
from docparse.contracts.mapping import (
    FIELDS,
    TRANSIENT_FIELDS,
    FieldDescriptor,
    apply_document,
    from_document,
    to_document,
)

__all__ = [
    "FIELDS",
    "TRANSIENT_FIELDS",
    "FieldDescriptor",
    "apply_document",
    "from_document",
    "to_document",
    "validate_document",
    "validate_instance",
]
