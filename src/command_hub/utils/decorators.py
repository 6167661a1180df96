import logging
import re
from collections.abc import Callable
from functools import wraps
from typing import Any, TypeVar

import requests
from requests.exceptions import HTTPError

from command_hub.exceptions import (
    CommandHubAuthenticationError,
    CommandHubError,
    TicketNotFoundError,
)

logger = logging.getLogger("command-hub.jira")

F = TypeVar("F", bound=Callable[..., Any])

TICKET_KEY_LIKE = re.compile(r"^[A-Za-z][A-Za-z0-9]*-\d+$")


def _subject(args: tuple[Any, ...], capitalize: bool = False) -> str:
    """Name the ticket an operation was about, when its first argument is a key."""
    if args and isinstance(args[0], str) and TICKET_KEY_LIKE.match(args[0]):
        subject = f"ticket {args[0]}"
    else:
        subject = "the requested resource"
    return subject[:1].upper() + subject[1:] if capitalize else subject


def handle_jira_api_errors(service_name: str = "Jira API") -> Callable[[F], F]:
    """
    Decorator translating JIRA HTTP failures into command-hub exceptions.

    401 becomes CommandHubAuthenticationError, 403 an access-denied
    CommandHubAuthenticationError, 404 TicketNotFoundError. Any other HTTP or
    network failure becomes CommandHubError. The original exception is chained.

    Args:
        service_name: Name of the service for error messages.
    """

    def decorator(func: F) -> F:
        @wraps(func)
        def wrapper(self: Any, *args: Any, **kwargs: Any) -> Any:
            operation_name = getattr(func, "__name__", "API operation")
            try:
                return func(self, *args, **kwargs)
            except HTTPError as http_err:
                status = (
                    http_err.response.status_code
                    if http_err.response is not None
                    else None
                )
                if status == 401:
                    error_msg = (
                        f"Authentication failed for {service_name} (401). "
                        "Check JIRA_USERNAME and JIRA_API_TOKEN."
                    )
                    logger.error(error_msg)
                    raise CommandHubAuthenticationError(error_msg) from http_err
                if status == 403:
                    error_msg = (
                        f"Access denied to {_subject(args)} (403). "
                        "Check your permissions."
                    )
                    logger.error(error_msg)
                    raise CommandHubAuthenticationError(error_msg) from http_err
                if status == 404:
                    error_msg = (
                        f"{_subject(args, capitalize=True)} not found. Make sure it "
                        "exists and you have permission to view it."
                    )
                    logger.warning(error_msg)
                    raise TicketNotFoundError(error_msg) from http_err
                logger.error(f"HTTP error during {operation_name}: {http_err}")
                raise CommandHubError(
                    f"{service_name} request failed during {operation_name}: {http_err}"
                ) from http_err
            except requests.RequestException as e:
                logger.error(f"Network error during {operation_name}: {str(e)}")
                raise CommandHubError(
                    f"Could not reach {service_name}: {str(e)}"
                ) from e

        return wrapper  # type: ignore

    return decorator
