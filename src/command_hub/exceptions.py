class CommandHubError(Exception):
    """Base exception for command-hub errors."""

    pass


class CommandHubAuthenticationError(CommandHubError):
    """Raised when JIRA API authentication fails (401/403)."""

    pass


class TicketNotFoundError(CommandHubError):
    """Raised when a JIRA ticket does not exist or is not visible (404)."""

    pass


class InvalidTicketKeyError(CommandHubError, ValueError):
    """Raised when a ticket key is not in PROJECT-123 form."""

    pass
