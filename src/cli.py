import json
from typing import Any, Optional

import typer

from api.content_client import ContentAPIClient
from api.error_handling import ContentAPIError
from api.resources import COLLECTIONS, SINGLETONS
from core.models import LegalTopic
from ui.services.content import fetch_terms_tree
from ui.ui_utils import run_async
from utils.logger_setup import setup_logging

logger = setup_logging(logger_name="content_admin_cli", console_output=False)

app = typer.Typer(
    name="content_admin_cli",
    help="Inspect the website content served by the admin API.",
    add_completion=False,
)

RESOURCE_PATHS = {
    **{name: resource.read_path for name, resource in SINGLETONS.items()},
    **{name: resource.path for name, resource in COLLECTIONS.items() if name != "terms"},
}


def _client(base_url: Optional[str]) -> ContentAPIClient:
    try:
        return ContentAPIClient(base_url, logger_obj=logger)
    except ValueError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


def format_terms_tree(tree: list[LegalTopic]) -> str:
    lines = []
    for term in tree:
        lines.append(f"{term.id}. {term.title}")
        for subtopic in term.subtopics:
            lines.append(f"    {subtopic.label} {subtopic.content}")
            for subpoint in subtopic.subpoints:
                lines.append(f"        - {subpoint.point}")
    return "\n".join(lines)


@app.command()
def show(
    resource: str = typer.Argument(..., help=f"One of: {', '.join(RESOURCE_PATHS)}"),
    base_url: Optional[str] = typer.Option(None, "--base-url", "-u", help="Backend base URL (defaults to $CONTENT_API_BASE_URL)."),
):
    """
    Print the JSON the admin API returns for one resource.
    """
    if resource not in RESOURCE_PATHS:
        typer.secho(f"Unknown resource '{resource}'. Choose one of: {', '.join(RESOURCE_PATHS)}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    client = _client(base_url)
    try:
        data: Any = run_async(client.get(RESOURCE_PATHS[resource]))
    except ContentAPIError as e:
        typer.secho(f"Failed to fetch {resource}: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    typer.echo(json.dumps(data, indent=2, ensure_ascii=False))


@app.command("terms-tree")
def terms_tree(
    base_url: Optional[str] = typer.Option(None, "--base-url", "-u", help="Backend base URL (defaults to $CONTENT_API_BASE_URL)."),
):
    """
    Assemble the Terms & Conditions tree and print it.
    """
    client = _client(base_url)
    try:
        tree = run_async(fetch_terms_tree(client, logger))
    except ContentAPIError as e:
        typer.secho(f"Failed to fetch terms: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.echo(format_terms_tree(tree))
    typer.secho(f"{len(tree)} terms, {client.request_count} requests.", fg=typer.colors.GREEN)


if __name__ == "__main__":
    app()
