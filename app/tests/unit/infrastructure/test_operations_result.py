"""Unit tests for OperationResult and OperationStatus in infrastructure."""

import pytest

from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus


@pytest.mark.unit
class TestOperationStatus:
    def test_operation_status_success(self):
        assert OperationStatus.SUCCESS.value == "success"

    def test_operation_status_permanent_error(self):
        assert OperationStatus.PERMANENT_ERROR.value == "permanent_error"


@pytest.mark.unit
class TestOperationResultFactories:
    def test_success_factory_minimal(self):
        result = OperationResult.success()
        assert result.status == OperationStatus.SUCCESS
        assert result.is_success
        assert result.message == "ok"

    def test_success_factory_with_data(self):
        result = OperationResult.success(data={"locale": "en"}, message="built en")
        assert result.data == {"locale": "en"}
        assert result.message == "built en"

    def test_permanent_error_factory(self):
        result = OperationResult.permanent_error(
            "Failed to parse fragment", error_code="FRAGMENT_PARSE_ERROR"
        )
        assert result.status == OperationStatus.PERMANENT_ERROR
        assert not result.is_success
        assert result.error_code == "FRAGMENT_PARSE_ERROR"
        assert result.data is None
