#!/usr/bin/env python3
"""
Unit tests for pmrm-deploy unified error handling.

Tests error types, context management, Rich console integration and the
global handler fallback.

Copyright (c) pmrm-deploy contributors. All rights reserved.
"""

import io
import json
from unittest.mock import Mock, patch

import pytest
from rich.console import Console

from pmrm_deploy.core.errors import (
    AuthenticationError,
    ConfigurationError,
    ConnectionError,
    DeploymentError,
    ErrorCategory,
    ErrorContext,
    ErrorHandler,
    PMRMDeployError,
    TimeoutError,
    ValidationError,
    create_error_context,
    get_error_handler,
    handle_error,
    set_error_handler,
)


class TestErrorContext:
    """Test error context data structure."""

    def test_error_context_creation(self):
        context = ErrorContext(operation="deploy", component="DryRunDeployment")

        assert context.operation == "deploy"
        assert context.component == "DryRunDeployment"
        assert context.phase is None
        assert context.network is None
        assert context.additional_info is None

    def test_create_error_context_function(self):
        context = create_error_context(operation="load_config", network="sepolia")

        assert isinstance(context, ErrorContext)
        assert context.network == "sepolia"

    def test_context_serializable(self):
        context = create_error_context(
            operation="deploy", file_path="deploy.json", additional_info={"k": "v"}
        )

        json_str = json.dumps(context.__dict__, default=str)

        assert "deploy.json" in json_str
        assert '"k": "v"' in json_str


class TestErrorHierarchy:
    """Test error class hierarchy."""

    @pytest.mark.parametrize(
        "error_class,category,recoverable",
        [
            (ValidationError, ErrorCategory.VALIDATION, True),
            (ConfigurationError, ErrorCategory.CONFIGURATION, True),
            (AuthenticationError, ErrorCategory.AUTHENTICATION, True),
            (ConnectionError, ErrorCategory.CONNECTION, True),
            (DeploymentError, ErrorCategory.DEPLOYMENT, False),
            (TimeoutError, ErrorCategory.TIMEOUT, True),
        ],
    )
    def test_error_types(self, error_class, category, recoverable):
        error = error_class("message")

        assert isinstance(error, PMRMDeployError)
        assert error.category == category
        assert error.recoverable is recoverable
        assert str(error) == "message"
        assert error.suggestions == []

    def test_error_with_cause(self):
        original = OSError("socket closed")
        error = DeploymentError("Deployment failed", cause=original)

        assert error.cause is original


class TestErrorHandler:
    """Test ErrorHandler rendering."""

    def setup_method(self):
        self.mock_console = Mock(spec=Console)
        self.error_handler = ErrorHandler(console=self.mock_console, verbose=False)

    def test_handle_structured_error(self):
        error = ValidationError(
            "Signer context has no signing credential",
            context=create_error_context(operation="deploy"),
            suggestions=["Set PMRM_PRIVATE_KEY"],
        )

        self.error_handler.handle_error(error)

        panel = self.mock_console.print.call_args[0][0]
        assert "Validation Error" in panel.title

    def test_handle_generic_error(self):
        self.error_handler.handle_error(ValueError("Generic Python error"))

        panel = self.mock_console.print.call_args[0][0]
        assert "ValueError" in panel.title

    def test_rendered_output_contains_details(self):
        buffer = io.StringIO()
        handler = ErrorHandler(console=Console(file=buffer, width=200))
        error = ConfigurationError(
            "Unknown network: moon",
            context=create_error_context(operation="load_config", network="moon"),
            cause=KeyError("moon"),
            suggestions=["Add it under 'networks'"],
        )

        handler.handle_error(error)

        output = buffer.getvalue()
        assert "Unknown network: moon" in output
        assert "network: moon" in output
        assert "Caused by: KeyError" in output
        assert "Add it under 'networks'" in output

    def test_traceback_in_verbose_mode(self):
        buffer = io.StringIO()
        handler = ErrorHandler(console=Console(file=buffer, width=200), verbose=True)

        try:
            raise RuntimeError("traced failure")
        except RuntimeError as e:
            handler.handle_error(e)

        assert "Traceback" in buffer.getvalue()

    def test_no_traceback_for_unraised_error(self):
        handler = ErrorHandler(console=self.mock_console, verbose=True)

        handler.handle_error(RuntimeError("never raised"))

        # headline and panel only
        assert self.mock_console.print.call_count == 2

    def test_long_message_not_wrapped(self):
        buffer = io.StringIO()
        handler = ErrorHandler(console=Console(file=buffer, width=80))
        message = "execution reverted: 0x" + "ab" * 60

        handler.handle_error(RuntimeError(message))

        assert f"RuntimeError: {message}" in buffer.getvalue()


class TestGlobalErrorHandler:
    """Test global error handler functionality."""

    def test_set_and_get_error_handler(self):
        handler = ErrorHandler(console=Mock(spec=Console))

        set_error_handler(handler)

        assert get_error_handler() is handler

    def test_handle_error_function(self):
        mock_console = Mock(spec=Console)
        set_error_handler(ErrorHandler(console=mock_console))

        handle_error(ValidationError("Test error"))

        mock_console.print.assert_called()

    def test_handle_error_no_global_handler(self):
        set_error_handler(None)

        with patch("pmrm_deploy.core.errors.logging") as mock_logging:
            handle_error(ValueError("Test error"))

            mock_logging.error.assert_called_once()
