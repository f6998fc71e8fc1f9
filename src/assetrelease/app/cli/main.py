"""CLI main entry point."""

import sys

import click

from ...adapters import S3StorageAdapter, StdLoggerAdapter
from ...core import AssetReleaseConfig, AssetReleaseError, DeployService
from ...core.config import DEFAULT_CACHE_CONTROL
from .render import NO_CHANGES, render_plan, render_summary


def create_service(config: AssetReleaseConfig) -> DeployService:
    """Create service with wired adapters."""
    storage = S3StorageAdapter(
        endpoint_url=config.endpoint_url,
        region=config.region,
        profile=config.profile,
    )
    logger = StdLoggerAdapter(level=config.log_level)
    return DeployService(storage=storage, logger=logger, config=config)


@click.command()
@click.option("--bucket", default="", help="S3 bucket")
@click.option("--source", default=".", show_default=True, help="Source directory")
@click.option("--pattern", default="**/*", show_default=True, help="Assets to deploy")
@click.option("--release", type=int, help="Release number (default: $BUILD_NUMBER)")
@click.option("--keep", type=int, default=10, show_default=True, help="Number of releases to keep")
@click.option("--acl", default="public-read", show_default=True, help="File ACL")
@click.option("--cache-control", default=DEFAULT_CACHE_CONTROL, show_default=True)
@click.option("--clean/--no-clean", default=True, show_default=True, help="Remove old assets")
@click.option("--deploy/--no-deploy", default=True, show_default=True, help="Deploy new assets")
@click.option("--dry-run", is_flag=True, help="Show the plan without executing it")
@click.option("--force", is_flag=True, help="Upload every file, even when unchanged")
@click.option("-y", "--yes", is_flag=True, help="Do not ask for confirmation")
@click.option("-q", "--quiet", is_flag=True, help="Do not say what I'm doing")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option("--workers", type=int, help="Parallel S3 requests (default: 8)")
@click.option("--endpoint-url", help="S3-compatible endpoint URL")
@click.option("--region", help="AWS region")
@click.option("--profile", help="AWS profile")
def cli(
    bucket: str,
    source: str,
    pattern: str,
    release: int | None,
    keep: int,
    acl: str,
    cache_control: str,
    clean: bool,
    deploy: bool,
    dry_run: bool,
    force: bool,
    yes: bool,
    quiet: bool,
    debug: bool,
    workers: int | None,
    endpoint_url: str | None,
    region: str | None,
    profile: str | None,
) -> None:
    """AssetRelease - publish release-tagged static assets to S3.

    Uploads new files, refreshes metadata of existing ones and removes
    objects that fell out of the last KEEP releases.
    """
    if debug:
        log_level: str | None = "DEBUG"
    elif quiet:
        log_level = "WARNING"
    else:
        log_level = None

    config = AssetReleaseConfig.from_env(
        bucket=bucket,
        source=source,
        pattern=pattern,
        release=release,
        keep=keep,
        acl=acl,
        cache_control=cache_control,
        clean=clean,
        deploy=deploy,
        dry_run=dry_run,
        force=force,
        max_workers=workers,
        log_level=log_level,
        endpoint_url=endpoint_url,
        region=region,
        profile=profile,
    )

    try:
        config.validate()
        service = create_service(config)
        plan = service.plan()
    except AssetReleaseError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    verbose = not (quiet and yes)

    if not plan.has_changes:
        if verbose:
            click.echo()
            click.echo(NO_CHANGES)
            click.echo()
        return

    if verbose:
        click.echo()
        for line in render_plan(plan):
            click.echo(line)
        click.echo()
        click.echo(render_summary(plan))
        click.echo()

    if config.dry_run:
        return

    if not yes and not click.confirm("Execute?", default=False):
        click.echo("Abort.")
        return

    result = service.execute(plan)
    if not result.ok:
        click.echo(f"Error: {result.failed_count} operation(s) failed", err=True)
        for key in sorted(result.errors):
            click.echo(f"  {key}: {result.errors[key]}", err=True)
        sys.exit(1)


def main() -> None:
    """Main entry point."""
    cli()
