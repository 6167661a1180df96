import os

import click
from dotenv import load_dotenv

__version__ = "0.2.0"

# Installs the contextual logger class before any component logger exists
from .logging_config import log_operation, setup_logger

logger = setup_logger()


def _configure(
    verbose: int,
    env_file: str | None,
    log_dir: str | None,
    log_to_file: bool,
    jira_url: str | None,
    jira_username: str | None,
    jira_token: str | None,
    jira_personal_token: str | None,
    jira_ssl_verify: bool | None,
) -> None:
    logging_level = "WARNING"
    if verbose == 1:
        logging_level = "INFO"
    elif verbose >= 2:
        logging_level = "DEBUG"

    setup_logger(
        name="command-hub",
        level=logging_level,
        log_to_file=log_to_file,
        log_dir=log_dir,
    )

    if env_file:
        logger.info(f"Loading environment from file: {env_file}")
        load_dotenv(env_file)
    else:
        logger.debug("Attempting to load environment from default .env file")
        load_dotenv()

    # Command line values win over the environment
    if jira_url:
        os.environ["JIRA_URL"] = jira_url
    if jira_username:
        os.environ["JIRA_USERNAME"] = jira_username
    if jira_token:
        os.environ["JIRA_API_TOKEN"] = jira_token
    if jira_personal_token:
        os.environ["JIRA_PERSONAL_TOKEN"] = jira_personal_token
    if jira_ssl_verify is not None:
        os.environ["JIRA_SSL_VERIFY"] = str(jira_ssl_verify).lower()
    if log_dir:
        os.environ["LOG_DIR"] = log_dir


@click.group()
@click.version_option(__version__, prog_name="command-hub")
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity (can be used multiple times)",
)
@click.option(
    "--env-file", type=click.Path(exists=True, dir_okay=False), help="Path to .env file"
)
@click.option(
    "--log-dir",
    help="Directory to store log files",
)
@click.option(
    "--log-to-file/--no-log-to-file",
    default=False,
    help="Enable/disable file logging",
)
@click.option(
    "--jira-url",
    help="Jira URL (e.g., https://your-domain.atlassian.net)",
)
@click.option("--jira-username", help="Jira username/email (for Jira Cloud)")
@click.option("--jira-token", help="Jira API token (for Jira Cloud)")
@click.option(
    "--jira-personal-token",
    help="Jira Personal Access Token (for Jira Server/Data Center)",
)
@click.option(
    "--jira-ssl-verify/--no-jira-ssl-verify",
    default=None,
    help="Verify SSL certificates (default: JIRA_SSL_VERIFY or verify)",
)
@click.pass_context
def main(
    ctx: click.Context,
    verbose: int,
    env_file: str | None,
    log_dir: str | None,
    log_to_file: bool,
    jira_url: str | None,
    jira_username: str | None,
    jira_token: str | None,
    jira_personal_token: str | None,
    jira_ssl_verify: bool | None,
) -> None:
    """command-hub - JIRA tickets from plain-language descriptions, plus deployment reports."""
    _configure(
        verbose,
        env_file,
        log_dir,
        log_to_file,
        jira_url,
        jira_username,
        jira_token,
        jira_personal_token,
        jira_ssl_verify,
    )

    from .tickets import TicketWorkflow

    ctx.obj = TicketWorkflow()


@main.command()
@click.argument("description", nargs=-1, required=True)
def parse(description: tuple[str, ...]) -> None:
    """Show how DESCRIPTION would be turned into a ticket, without creating it."""
    from .models.ticket import NeedsClarification, TicketRequest
    from .tickets import classify, render_preview

    result = classify(" ".join(description))
    if isinstance(result, NeedsClarification):
        raise click.ClickException(result.message)

    ticket = result.ticket
    click.echo(render_preview(ticket, TicketRequest.from_parsed(ticket).labels))


@main.command()
@click.argument("description", nargs=-1, required=True)
@click.option("--title", help="Custom ticket title instead of the generated one")
@click.option(
    "--label",
    "labels",
    multiple=True,
    help="Additional label (repeatable); the project label is added automatically",
)
@click.option("--priority", help="Priority name (default: JIRA_DEFAULT_PRIORITY)")
@click.option("--assignee", help="Assignee e-mail, name or account ID")
@click.option("-y", "--yes", is_flag=True, help="Create without asking for confirmation")
@click.pass_obj
def create(
    workflow,
    description: tuple[str, ...],
    title: str | None,
    labels: tuple[str, ...],
    priority: str | None,
    assignee: str | None,
    yes: bool,
) -> None:
    """Create a JIRA ticket from DESCRIPTION after showing a preview."""
    from .exceptions import CommandHubError
    from .tickets import render_preview

    text = " ".join(description)
    options = {
        "title": title,
        "labels": list(labels),
        "priority": priority,
        "assignee": assignee,
    }

    outcome = workflow.create_ticket(text, confirm=False, **options)
    if outcome.status == "clarification":
        raise click.ClickException(outcome.message)

    click.echo(render_preview(outcome.ticket, outcome.labels))
    if not yes:
        click.confirm("Create this ticket?", abort=True)

    try:
        outcome = workflow.create_ticket(text, confirm=True, **options)
    except (CommandHubError, ValueError) as e:
        raise click.ClickException(f"Failed to create ticket: {e}") from e

    click.secho(outcome.message, fg="green")
    click.echo(f"URL: {outcome.created.url}")


@main.command()
@click.argument("ticket_key")
@click.pass_obj
def read(workflow, ticket_key: str) -> None:
    """Fetch and display the JIRA ticket TICKET_KEY (e.g. FRON-1151)."""
    from .exceptions import CommandHubError
    from .tickets import render_ticket

    try:
        ticket = workflow.read_ticket(ticket_key.upper())
    except (CommandHubError, ValueError) as e:
        raise click.ClickException(f"Error reading JIRA ticket: {e}") from e

    click.echo(render_ticket(ticket))


@main.command()
@click.argument("start")
@click.argument("end")
@click.option(
    "--output-prefix",
    type=click.Path(dir_okay=False),
    help="Also write <prefix>.json and <prefix>-summary.txt",
)
@click.pass_obj
def report(workflow, start: str, end: str, output_prefix: str | None) -> None:
    """Report tickets moved to Done between START and END (YYYY-MM-DD)."""
    import json
    from pathlib import Path

    from .exceptions import CommandHubError
    from .reports import render_report_summary

    try:
        deployment_report = workflow.deployment_report(start, end)
    except (CommandHubError, ValueError) as e:
        raise click.ClickException(f"Error building deployment report: {e}") from e

    report_json = json.dumps(deployment_report.to_simplified_dict(), indent=2)
    summary = render_report_summary(deployment_report)
    click.echo(report_json)
    click.echo()
    click.echo(summary)

    if output_prefix:
        Path(f"{output_prefix}.json").write_text(report_json + "\n", encoding="utf-8")
        Path(f"{output_prefix}-summary.txt").write_text(
            summary + "\n", encoding="utf-8"
        )
        click.secho(
            f"Saved {output_prefix}.json and {output_prefix}-summary.txt", fg="green"
        )


__all__ = ["main", "__version__", "setup_logger", "log_operation"]

if __name__ == "__main__":
    main()
