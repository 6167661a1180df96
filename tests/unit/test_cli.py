"""Tests for the command-hub command line interface."""

import json
import logging
import os
from unittest.mock import MagicMock, patch

import pytest
from click.testing import CliRunner

from command_hub import main
from command_hub.exceptions import CommandHubError, TicketNotFoundError
from command_hub.models.jira import JiraTicket
from command_hub.models.ticket import CreatedTicket
from command_hub.tickets import CLARIFICATION_MESSAGE, TicketWorkflow
from tests.utils.factories import JiraIssueFactory

DESCRIPTION = "Current: the DTMI order page is blank. Desired: show the last 10 orders"


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def mock_fetcher():
    fetcher = MagicMock()
    fetcher.create_ticket.return_value = CreatedTicket(
        key="FRON-1500",
        id="20001",
        url="https://test.atlassian.net/browse/FRON-1500",
    )
    fetcher.get_ticket.return_value = JiraTicket(
        key="FRON-1151", summary="Checkout totals are wrong"
    )
    return fetcher


@pytest.fixture(autouse=True)
def isolated_environment():
    with patch.dict(os.environ, {}, clear=True):
        yield


@pytest.fixture(autouse=True)
def workflow_with_mock_fetcher(mock_fetcher):
    """Make the CLI build its workflow around the mock fetcher."""
    with patch(
        "command_hub.tickets.TicketWorkflow",
        side_effect=lambda: TicketWorkflow(fetcher=mock_fetcher),
    ):
        yield


class TestParseCommand:
    def test_parse_prints_preview(self, runner, mock_fetcher):
        result = runner.invoke(main, ["parse", DESCRIPTION])

        assert result.exit_code == 0, result.output
        assert "Title: [DTMI] Show order" in result.output
        assert "Project Label: DTMI" in result.output
        assert "Labels: DTMI" in result.output
        mock_fetcher.create_ticket.assert_not_called()

    def test_parse_joins_words(self, runner):
        result = runner.invoke(main, ["parse", "SHM", "login", "fails"])

        assert result.exit_code == 0, result.output
        assert "Type: Bug" in result.output

    def test_parse_without_project(self, runner):
        result = runner.invoke(main, ["parse", "The login page is broken"])

        assert result.exit_code == 1
        assert CLARIFICATION_MESSAGE in result.output


class TestCreateCommand:
    def test_create_with_yes(self, runner, mock_fetcher):
        result = runner.invoke(
            main,
            [
                "create",
                DESCRIPTION,
                "--label",
                "Orders",
                "--priority",
                "High",
                "--yes",
            ],
        )

        assert result.exit_code == 0, result.output
        assert "Ticket Preview" in result.output
        assert "Ticket created successfully: FRON-1500" in result.output
        assert "URL: https://test.atlassian.net/browse/FRON-1500" in result.output

        request = mock_fetcher.create_ticket.call_args.args[0]
        assert request.labels == ["DTMI", "Orders"]
        assert request.priority == "High"

    def test_create_confirmed_interactively(self, runner, mock_fetcher):
        result = runner.invoke(main, ["create", DESCRIPTION], input="y\n")

        assert result.exit_code == 0, result.output
        assert "Create this ticket?" in result.output
        mock_fetcher.create_ticket.assert_called_once()

    def test_create_declined(self, runner, mock_fetcher):
        result = runner.invoke(main, ["create", DESCRIPTION], input="n\n")

        assert result.exit_code == 1
        assert "Aborted" in result.output
        mock_fetcher.create_ticket.assert_not_called()

    def test_create_with_title(self, runner, mock_fetcher):
        result = runner.invoke(
            main, ["create", DESCRIPTION, "--title", "Order history", "-y"]
        )

        assert result.exit_code == 0, result.output
        assert "Title: Order history" in result.output
        assert mock_fetcher.create_ticket.call_args.args[0].summary == "Order history"

    def test_create_without_project(self, runner, mock_fetcher):
        result = runner.invoke(main, ["create", "Fix the login page", "-y"])

        assert result.exit_code == 1
        assert CLARIFICATION_MESSAGE in result.output
        mock_fetcher.create_ticket.assert_not_called()

    def test_create_failure(self, runner, mock_fetcher):
        mock_fetcher.create_ticket.side_effect = CommandHubError("boom")

        result = runner.invoke(main, ["create", DESCRIPTION, "-y"])

        assert result.exit_code == 1
        assert "Failed to create ticket: boom" in result.output


class TestReadCommand:
    def test_read_uppercases_key(self, runner, mock_fetcher):
        result = runner.invoke(main, ["read", "fron-1151"])

        assert result.exit_code == 0, result.output
        mock_fetcher.get_ticket.assert_called_once_with("FRON-1151")
        assert "FRON-1151: Checkout totals are wrong" in result.output

    def test_read_not_found(self, runner, mock_fetcher):
        mock_fetcher.get_ticket.side_effect = TicketNotFoundError(
            "Ticket FRON-9 not found."
        )

        result = runner.invoke(main, ["read", "FRON-9"])

        assert result.exit_code == 1
        assert "Error reading JIRA ticket: Ticket FRON-9 not found." in result.output

    def test_read_invalid_key(self, runner, mock_fetcher):
        mock_fetcher.get_ticket.side_effect = ValueError("Invalid ticket key")

        result = runner.invoke(main, ["read", "nope"])

        assert result.exit_code == 1
        assert "Error reading JIRA ticket: Invalid ticket key" in result.output


class TestGlobalOptions:
    def test_version(self, runner):
        result = runner.invoke(main, ["--version"])

        assert result.exit_code == 0
        assert "command-hub" in result.output

    def test_connection_options_override_environment(self, runner):
        result = runner.invoke(
            main,
            [
                "--jira-url",
                "https://cli.atlassian.net",
                "--jira-username",
                "cli@example.com",
                "--jira-token",
                "cli-token",
                "--no-jira-ssl-verify",
                "parse",
                DESCRIPTION,
            ],
        )

        assert result.exit_code == 0, result.output
        assert os.environ["JIRA_URL"] == "https://cli.atlassian.net"
        assert os.environ["JIRA_USERNAME"] == "cli@example.com"
        assert os.environ["JIRA_API_TOKEN"] == "cli-token"
        assert os.environ["JIRA_SSL_VERIFY"] == "false"

    def test_env_file_is_loaded(self, runner, tmp_path):
        env_file = tmp_path / "jira.env"
        env_file.write_text("JIRA_URL=https://file.atlassian.net\n")

        result = runner.invoke(main, ["--env-file", str(env_file), "parse", DESCRIPTION])

        assert result.exit_code == 0, result.output
        assert os.environ["JIRA_URL"] == "https://file.atlassian.net"

    @pytest.mark.parametrize(
        "flags, expected",
        [([], logging.WARNING), (["-v"], logging.INFO), (["-vv"], logging.DEBUG)],
    )
    def test_verbosity(self, runner, flags, expected):
        result = runner.invoke(main, [*flags, "parse", DESCRIPTION])

        assert result.exit_code == 0, result.output
        assert logging.getLogger("command-hub").level == expected


class TestReportCommand:
    @pytest.fixture
    def done_issues(self, mock_fetcher):
        mock_fetcher.search_done_tickets.return_value = [
            JiraIssueFactory.create("FRON-1", fields={"labels": ["DTMI"]}),
            JiraIssueFactory.create(
                "FRON-2", fields={"labels": ["TRIC"], "summary": "Rollback search"}
            ),
        ]

    def test_report_prints_json_and_summary(self, runner, mock_fetcher, done_issues):
        result = runner.invoke(main, ["report", "2025-07-01", "2025-07-31"])

        assert result.exit_code == 0, result.output
        mock_fetcher.search_done_tickets.assert_called_once_with(
            "2025-07-01", "2025-07-31"
        )
        json_text, summary = result.output.split("\n\n", 1)
        data = json.loads(json_text)
        assert [release["label"] for release in data["releases"]] == [
            "DTMI-Normal",
            "TRIC-Rollback",
        ]
        assert data["metadata"]["total_tickets"] == 2
        assert "Total Releases: 2" in summary
        assert "Period: July 01, 2025 - July 31, 2025" in summary

    def test_report_writes_output_files(self, runner, done_issues, tmp_path):
        prefix = tmp_path / "july"

        result = runner.invoke(
            main,
            ["report", "2025-07-01", "2025-07-31", "--output-prefix", str(prefix)],
        )

        assert result.exit_code == 0, result.output
        data = json.loads((tmp_path / "july.json").read_text(encoding="utf-8"))
        assert data["metadata"]["total_releases"] == 2
        summary = (tmp_path / "july-summary.txt").read_text(encoding="utf-8")
        assert summary.startswith("JIRA Deployment Report")

    def test_report_invalid_date(self, runner, mock_fetcher):
        result = runner.invoke(main, ["report", "someday", "2025-07-31"])

        assert result.exit_code == 1
        assert "Error building deployment report: Invalid date 'someday'" in result.output
        mock_fetcher.search_done_tickets.assert_not_called()

    def test_report_search_failure(self, runner, mock_fetcher):
        mock_fetcher.search_done_tickets.side_effect = CommandHubError("search down")

        result = runner.invoke(main, ["report", "2025-07-01", "2025-07-31"])

        assert result.exit_code == 1
        assert "Error building deployment report: search down" in result.output
