"""Shared field types for request validation."""

import re
from typing import Annotated

from pydantic import AfterValidator, Field, StringConstraints

# Required text: surrounding whitespace stripped, must not be empty afterwards.
NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]

_RESERVED_DOCUMENT_ID = re.compile(r"^(\.|\.\.|__.*__)$")


def _check_document_id(value: str) -> str:
    if _RESERVED_DOCUMENT_ID.match(value):
        raise ValueError("'.', '..' and ids of the form __name__ are reserved")
    return value


# Firestore document ids cannot contain '/' and cannot be '.', '..' or __name__.
DocumentId = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1, max_length=1500, pattern=r"^[^/]+$"),
    AfterValidator(_check_document_id),
]

PositiveAmount = Annotated[float, Field(gt=0)]
