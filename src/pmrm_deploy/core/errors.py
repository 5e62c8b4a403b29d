#!/usr/bin/env python3
"""
Unified error handling for pmrm-deploy.

Provides a structured error hierarchy with categories, context and
suggestions, plus a Rich-based handler that renders errors on the
diagnostic console.

Copyright (c) pmrm-deploy contributors. All rights reserved.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional

from rich.console import Console
from rich.panel import Panel
from rich.text import Text
from rich.traceback import Traceback


class ErrorCategory(Enum):
    """Error category enumeration."""

    VALIDATION = "validation"
    CONFIGURATION = "configuration"
    AUTHENTICATION = "authentication"
    CONNECTION = "connection"
    DEPLOYMENT = "deployment"
    TIMEOUT = "timeout"
    RUNTIME = "runtime"


@dataclass
class ErrorContext:
    """Where an error happened."""

    operation: str
    phase: Optional[str] = None
    component: Optional[str] = None
    network: Optional[str] = None
    file_path: Optional[str] = None
    additional_info: Optional[Dict[str, Any]] = None


class PMRMDeployError(Exception):
    """Base class for all pmrm-deploy errors."""

    def __init__(
        self,
        message: str,
        category: ErrorCategory,
        context: Optional[ErrorContext] = None,
        cause: Optional[BaseException] = None,
        recoverable: bool = False,
        suggestions: Optional[List[str]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category
        self.context = context
        self.cause = cause
        self.recoverable = recoverable
        self.suggestions = suggestions or []


class ValidationError(PMRMDeployError):
    """Invalid input or state."""

    def __init__(self, message: str, **kwargs):
        super().__init__(message, ErrorCategory.VALIDATION, recoverable=True, **kwargs)


class ConfigurationError(PMRMDeployError):
    """Invalid or missing configuration."""

    def __init__(self, message: str, **kwargs):
        super().__init__(
            message, ErrorCategory.CONFIGURATION, recoverable=True, **kwargs
        )


class AuthenticationError(PMRMDeployError):
    """Signer credentials are missing or unusable."""

    def __init__(self, message: str, **kwargs):
        super().__init__(
            message, ErrorCategory.AUTHENTICATION, recoverable=True, **kwargs
        )


class ConnectionError(PMRMDeployError):
    """The target network could not be reached."""

    def __init__(self, message: str, **kwargs):
        super().__init__(message, ErrorCategory.CONNECTION, recoverable=True, **kwargs)


class DeploymentError(PMRMDeployError):
    """The deployment routine failed."""

    def __init__(self, message: str, **kwargs):
        super().__init__(
            message, ErrorCategory.DEPLOYMENT, recoverable=False, **kwargs
        )


class TimeoutError(PMRMDeployError):
    """An operation took too long."""

    def __init__(self, message: str, **kwargs):
        super().__init__(message, ErrorCategory.TIMEOUT, recoverable=True, **kwargs)


_CATEGORY_STYLE = {
    ErrorCategory.VALIDATION: ("⚠️", "Validation Error", "yellow"),
    ErrorCategory.CONFIGURATION: ("⚙️", "Configuration Error", "yellow"),
    ErrorCategory.AUTHENTICATION: ("🔐", "Authentication Error", "red"),
    ErrorCategory.CONNECTION: ("🔌", "Connection Error", "red"),
    ErrorCategory.DEPLOYMENT: ("📦", "Deployment Error", "red"),
    ErrorCategory.TIMEOUT: ("⏱️", "Timeout Error", "yellow"),
    ErrorCategory.RUNTIME: ("💥", "Runtime Error", "red"),
}


class ErrorHandler:
    """Renders errors on a Rich console and mirrors them to the logger."""

    def __init__(self, console: Optional[Console] = None, verbose: bool = False):
        self.console = console or Console(stderr=True)
        self.verbose = verbose
        self.logger = logging.getLogger(__name__)

    def handle_error(
        self,
        error: BaseException,
        context: Optional[ErrorContext] = None,
        show_traceback: Optional[bool] = None,
    ) -> None:
        """
        Display an error.

        Args:
            error: The exception to display
            context: Context overriding the one carried by the error
            show_traceback: Force traceback display (defaults to verbose mode)
        """
        if show_traceback is None:
            show_traceback = self.verbose

        if isinstance(error, PMRMDeployError):
            emoji, title, style = _CATEGORY_STYLE[error.category]
            context = context or error.context
            suggestions = error.suggestions
            cause = error.cause
        else:
            emoji, title, style = "💥", type(error).__name__, "red"
            suggestions = []
            cause = None

        message = str(error) or repr(error)
        # Full message on one unwrapped line so it survives narrow consoles
        self.console.print(
            Text(f"{type(error).__name__}: {message}", style="bold red"),
            soft_wrap=True,
        )

        body = Text(message, style="bold")
        if context is not None:
            details = {
                key: value
                for key, value in vars(context).items()
                if value is not None and key != "additional_info"
            }
            if context.additional_info:
                details.update(context.additional_info)
            for key, value in details.items():
                body.append(f"\n{key}: ", style="dim")
                body.append(str(value))
        if cause is not None:
            body.append("\nCaused by: ", style="dim")
            body.append(f"{type(cause).__name__}: {cause}")
        if suggestions:
            body.append("\n\nSuggestions:", style="cyan")
            for suggestion in suggestions:
                body.append(f"\n  • {suggestion}")

        self.console.print(
            Panel(body, title=f"{emoji} {title}", border_style=style, expand=False)
        )
        self.logger.debug("%s: %s", type(error).__name__, error)

        if show_traceback and error.__traceback__ is not None:
            self.console.print(
                Traceback.from_exception(type(error), error, error.__traceback__)
            )


_error_handler: Optional[ErrorHandler] = None


def set_error_handler(handler: Optional[ErrorHandler]) -> None:
    """Install the process-wide error handler."""
    global _error_handler
    _error_handler = handler


def get_error_handler() -> Optional[ErrorHandler]:
    """Return the process-wide error handler, if any."""
    return _error_handler


def handle_error(
    error: BaseException,
    context: Optional[ErrorContext] = None,
    show_traceback: Optional[bool] = None,
) -> None:
    """Handle an error with the global handler, falling back to logging."""
    if _error_handler is not None:
        _error_handler.handle_error(
            error, context=context, show_traceback=show_traceback
        )
    else:
        logging.error("%s: %s", type(error).__name__, error)


def create_error_context(operation: str, **kwargs) -> ErrorContext:
    """Convenience constructor for ErrorContext."""
    return ErrorContext(operation=operation, **kwargs)
