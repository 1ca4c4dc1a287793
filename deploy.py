# =============================================================================
# deploy.py  —  Cloud Run lifecycle CLI for the MCP servers
# =============================================================================
#
# HOW TO RUN:
#   python deploy.py deploy zoo-mcp-server --module tools.zoo_server
#   python deploy.py grant-invoker zoo-mcp-server serviceAccount:agent@p.iam.gserviceaccount.com
#   python deploy.py url zoo-mcp-server
#   python deploy.py proxy zoo-mcp-server --port 8080
#   python deploy.py delete zoo-mcp-server --repository cloud-run-source-deploy
#
#   Every command accepts --dry-run, which prints the gcloud command instead
#   of running it.  The region comes from --region, then
#   $GOOGLE_CLOUD_LOCATION, then europe-west1.
#
# The commands themselves are built in core/deploy.py; this file is only
# argument parsing and output.
# =============================================================================

import click
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape

from core import deploy as gcloud

console = Console()

_region_option = click.option(
    "--region",
    envvar="GOOGLE_CLOUD_LOCATION",
    default=gcloud.DEFAULT_REGION,
    show_default=True,
    help="Cloud Run region.",
)
_project_option = click.option(
    "--project",
    envvar="GOOGLE_CLOUD_PROJECT",
    default=None,
    help="Google Cloud project (defaults to the gcloud config).",
)
_dry_run_option = click.option(
    "--dry-run", is_flag=True, help="Print the gcloud command without running it."
)


def _execute(argv: list[str], dry_run: bool, capture_output: bool = False) -> str:
    if dry_run:
        console.print(f"[blue]ℹ {escape(gcloud.format_command(argv))}[/blue]", soft_wrap=True)
        return ""
    try:
        result = gcloud.run_gcloud(argv, capture_output=capture_output)
    except gcloud.DeployError as e:
        raise click.ClickException(str(e)) from e
    return (result.stdout or "").strip() if capture_output else ""


def _build(builder, *args, **kwargs) -> list[str]:
    try:
        return builder(*args, **kwargs)
    except ValueError as e:
        raise click.BadParameter(str(e)) from e


@click.group()
def cli():
    """Deploy and manage MCP servers on Cloud Run."""
    load_dotenv()


@cli.command()
@click.argument("service")
@click.option(
    "--module",
    default="tools.zoo_server",
    show_default=True,
    help="Server module the container runs (sets SERVER_MODULE).",
)
@click.option("--source", default=".", show_default=True, help="Source directory to build.")
@click.option(
    "--allow-unauthenticated",
    is_flag=True,
    help="Make the service public. Off by default: callers need roles/run.invoker.",
)
@_region_option
@_project_option
@_dry_run_option
def deploy(service, module, source, allow_unauthenticated, region, project, dry_run):
    """Build SOURCE and deploy it as SERVICE."""
    argv = _build(
        gcloud.deploy_command,
        service,
        region=region,
        source=source,
        allow_unauthenticated=allow_unauthenticated,
        env={"SERVER_MODULE": module},
        project=project,
    )
    _execute(argv, dry_run)
    if not dry_run:
        console.print(f"[green]✓ Deployed {service}[/green]")


@cli.command("grant-invoker")
@click.argument("service")
@click.argument("member")
@_region_option
@_project_option
@_dry_run_option
def grant_invoker(service, member, region, project, dry_run):
    """Let MEMBER (user:..., serviceAccount:...) call SERVICE."""
    argv = _build(
        gcloud.grant_invoker_command, service, member, region=region, project=project
    )
    _execute(argv, dry_run)
    if not dry_run:
        console.print(f"[green]✓ {member} can now invoke {service}[/green]")


@cli.command()
@click.argument("service")
@_region_option
@_project_option
@_dry_run_option
def url(service, region, project, dry_run):
    """Print the MCP endpoint URL of SERVICE."""
    argv = _build(gcloud.describe_url_command, service, region=region, project=project)
    base = _execute(argv, dry_run, capture_output=True)
    if base:
        click.echo(f"{base.rstrip('/')}/mcp/")


@cli.command()
@click.argument("service")
@click.option("--port", default=8080, show_default=True, type=click.IntRange(1, 65535))
@_region_option
@_project_option
@_dry_run_option
def proxy(service, port, region, project, dry_run):
    """Forward localhost:PORT to SERVICE with your credentials."""
    argv = _build(gcloud.proxy_command, service, region=region, port=port, project=project)
    if not dry_run:
        console.print(f"[blue]ℹ Proxying http://localhost:{port}/mcp → {service}[/blue]")
    _execute(argv, dry_run)


@cli.command()
@click.argument("service")
@click.option(
    "--repository",
    default=None,
    help="Also delete this Artifact Registry repository (e.g. cloud-run-source-deploy).",
)
@_region_option
@_project_option
@_dry_run_option
def delete(service, repository, region, project, dry_run):
    """Delete SERVICE (and optionally its image repository)."""
    _execute(_build(gcloud.delete_command, service, region=region, project=project), dry_run)
    if repository:
        _execute(
            gcloud.delete_repository_command(repository, region=region, project=project),
            dry_run,
        )
    if not dry_run:
        console.print(f"[green]✓ Deleted {service}[/green]")


if __name__ == "__main__":
    cli()
