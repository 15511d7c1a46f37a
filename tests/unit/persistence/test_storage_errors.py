"""Unit tests for storage error translation."""

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from chute.domain.error import ConflictError, InternalError
from chute.persistence.errors import storage_errors


class TestStorageErrors:
    """Tests for storage_errors context manager."""

    @pytest.mark.asyncio
    async def test_integrity_error_becomes_conflict(self):
        # Act & Assert
        with pytest.raises(ConflictError, match="credential.save"):
            async with storage_errors("credential.save"):
                raise IntegrityError("INSERT", {}, Exception("duplicate key"))

    @pytest.mark.asyncio
    async def test_other_driver_error_becomes_internal(self):
        # Act & Assert
        with pytest.raises(InternalError, match="connection refused"):
            async with storage_errors("profile.find_by_id"):
                raise OperationalError("SELECT", {}, Exception("connection refused"))

    @pytest.mark.asyncio
    async def test_domain_errors_pass_through(self):
        # Act & Assert
        with pytest.raises(ValueError):
            async with storage_errors("profile.save"):
                raise ValueError("not a storage problem")
