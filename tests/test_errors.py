# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Tests for payloadguard error classes."""

import orjson
import pytest

from payloadguard._errors import (
    CapabilityError,
    ExtractionError,
    PayloadGuardError,
    ValidationError,
)
from payloadguard.validation import ValidationIssue


class TestPayloadGuardError:
    """Tests for base PayloadGuardError class."""

    def test_default_initialization(self):
        """Test error with default values."""
        error = PayloadGuardError()
        assert str(error) == "payloadguard error"
        assert error.message == "payloadguard error"
        assert error.details == {}
        assert error.status_code == 500

    def test_custom_message_and_status(self):
        """Test error with custom message and status code."""
        error = PayloadGuardError("Bad thing", status_code=418)
        assert str(error) == "Bad thing"
        assert error.status_code == 418

    def test_with_cause(self):
        """Test error with underlying cause."""
        cause = ValueError("Original error")
        error = PayloadGuardError("Wrapped error", cause=cause)
        assert error.get_cause() is cause
        assert error.__cause__ is cause

    def test_to_dict_basic(self):
        """Test serialization to dictionary."""
        error = PayloadGuardError("Test error", status_code=400)
        assert error.to_dict() == {
            "error": "PayloadGuardError",
            "message": "Test error",
            "status_code": 400,
        }

    def test_to_dict_with_details_and_cause(self):
        """Test serialization with details and cause."""
        error = PayloadGuardError(
            "Error", details={"field": "value"}, cause=KeyError("k")
        )
        result = error.to_dict(include_cause=True)
        assert result["details"] == {"field": "value"}
        assert result["cause"] == repr(KeyError("k"))

    def test_to_dict_without_cause_omits_it(self):
        """Test cause is left out unless requested."""
        error = PayloadGuardError("Error", cause=KeyError("k"))
        assert "cause" not in error.to_dict()


class TestSubclasses:
    """Tests for the specialised errors."""

    @pytest.mark.parametrize(
        "cls, status",
        [
            (CapabilityError, 400),
            (ExtractionError, 400),
            (ValidationError, 422),
        ],
    )
    def test_status_codes(self, cls, status):
        """Test each subclass carries its status code."""
        error = cls()
        assert isinstance(error, PayloadGuardError)
        assert error.status_code == status

    def test_validation_error_from_issues(self):
        """Test ValidationError built from issues serializes them."""
        issues = [
            ValidationIssue(
                path="bar",
                expected="string",
                message="Input should be a valid string",
                value=1,
            )
        ]
        error = ValidationError.from_issues(issues)
        assert orjson.loads(error.message) == [
            {
                "path": "bar",
                "expected": "string",
                "message": "Input should be a valid string",
                "value": 1,
            }
        ]
        assert error.details["errors"][0]["path"] == "bar"
        assert error.status_code == 422

    def test_validation_error_from_issues_custom_message(self):
        """Test an explicit message wins over the serialized issues."""
        issue = ValidationIssue(path="", expected="object", message="no")
        error = ValidationError.from_issues([issue], message="Bad body")
        assert error.message == "Bad body"
        assert len(error.details["errors"]) == 1
