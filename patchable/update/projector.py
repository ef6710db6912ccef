"""Source projection: which document entries an update call will apply."""

from collections.abc import Mapping
from typing import Any

from patchable.update.enums import OperationKind
from patchable.update.fields import FieldDescriptor


def project(
    document: Mapping[str, Any],
    descriptors: Mapping[str, FieldDescriptor],
    operation: OperationKind,
) -> dict[str, Any] | None:
    """Intersect a document with the updatable field table.

    Keys that are not updatable are dropped. For ``REPLACE`` every updatable
    field missing from the document is added as an explicit null, after the
    document's own keys and in declaration order.

    Args:
        document: Parsed JSON object
        descriptors: Updatable field table of the target type
        operation: Operation kind of the call

    Returns:
        Ordered mapping of field name to raw JSON value (``None`` is an
        explicit null), or None when the call has nothing to do and must
        end as ``NoChanges`` before any mutation or validation.
    """
    if not descriptors:
        return None

    projection = {key: value for key, value in document.items() if key in descriptors}

    if operation is OperationKind.MERGE and not projection:
        return None

    if operation is OperationKind.REPLACE:
        for name in descriptors:
            projection.setdefault(name, None)

    return projection
