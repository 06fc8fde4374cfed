"""Business-rule checks on stored files."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from coolfs.core.enums import ErrorType

if TYPE_CHECKING:
    from coolfs.api.services.storage import FileStoreData

logger = logging.getLogger(__name__)


class StorageFacadeValidationComponent:
    """Validates stored files against upload rules.

    Each check returns a mapping of error kind to the offending value; an
    empty mapping means the file passed.
    """

    def validate_file_max_length(
        self,
        file_store_data: FileStoreData,
        max_file_length: int,
    ) -> dict[ErrorType, Any]:
        """Check a stored file against a maximum length.

        Args:
            file_store_data: Stored file to check.
            max_file_length: Largest accepted length in bytes (inclusive).

        Returns:
            ``{MAX_SIZE_EXCEEDED: length}`` if the file is too long, else ``{}``.
        """
        errors: dict[ErrorType, Any] = {}
        if file_store_data.length > max_file_length:
            logger.debug(
                f"File {file_store_data.uuid} is {file_store_data.length} bytes, "
                f"limit is {max_file_length}"
            )
            errors[ErrorType.MAX_SIZE_EXCEEDED] = file_store_data.length
        return errors
