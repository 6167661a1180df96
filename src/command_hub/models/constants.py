"""Default values used when JIRA responses omit a field."""

EMPTY_STRING = ""
UNKNOWN = "Unknown"
UNASSIGNED = "Unassigned"

JIRA_DEFAULT_ID = "0"
JIRA_DEFAULT_KEY = "UNKNOWN-0"

NO_SUMMARY = "No summary"
NO_DESCRIPTION = "No description"
NO_PRIORITY = "No priority set"
NO_REPORTER = "No reporter"
