"""CLI interface for modsync."""

import logging
from pathlib import Path
from typing import Any, Optional

import click

from .cli_progress import SyncProgressDisplay
from .config import config
from .exceptions import ModSyncError
from .output import OutputFormatter
from .paths import resolve_paths
from .remote import DirectoryServer, HTTPServer, Server
from .sync import SyncEngine, SyncPolicy, SyncResult

logger = logging.getLogger(__name__)


def open_server(source: str) -> Server:
    """Create a mod server for a CLI source argument.

    Args:
        source: An http(s) URL or a directory path

    Returns:
        HTTPServer for URLs, DirectoryServer otherwise
    """
    if source.startswith(("http://", "https://")):
        return HTTPServer(source)
    return DirectoryServer(Path(source).expanduser())


def _summary_items(result: SyncResult) -> list[tuple[str, str]]:
    items = [("Written", f"{result.total_writes} mod(s)")]
    if result.replaced:
        items.append(("Replaced", ", ".join(result.replaced)))
    if result.skipped:
        items.append(("Unchanged", f"{len(result.skipped)} mod(s)"))
    if result.backed_up:
        items.append(("Backed up", ", ".join(result.backed_up)))
    return items


@click.group()
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output")
@click.option("--json", is_flag=True, help="Output in JSON format")
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose/debug logging output",
)
@click.version_option(package_name="modsync")
@click.pass_context
def main(ctx: Any, quiet: bool, json: bool, verbose: bool) -> None:
    """modsync - Sync your Minecraft mods with a mod server."""
    ctx.ensure_object(dict)
    ctx.obj["out"] = OutputFormatter(json_output=json, quiet=quiet)
    ctx.obj["verbose"] = verbose

    # Configure logging based on verbose flag
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%H:%M:%S",
        )
        logging.getLogger("modsync").setLevel(logging.DEBUG)
    else:
        logging.basicConfig(level=logging.WARNING)


@main.command()
@click.argument("source", required=False)
@click.option(
    "--keep-existing",
    "-k",
    is_flag=True,
    help="Keep local mods that are not on the server instead of backing them up",
)
@click.option(
    "--force",
    "-f",
    is_flag=True,
    help="Overwrite local mods with server mods even if they look identical",
)
@click.option(
    "--install-dir",
    type=click.Path(file_okay=False, path_type=Path),
    help="Minecraft installation directory (default: platform location)",
)
@click.pass_context
def sync(
    ctx: Any,
    source: Optional[str],
    keep_existing: bool,
    force: bool,
    install_dir: Optional[Path],
) -> None:
    """Sync the mods directory with SOURCE.

    SOURCE is the URL of a mod server or a directory of mods. If omitted,
    the server configured with 'modsync init' is used.

    Examples:
        modsync sync https://mods.example.com/pack   # Sync from a server
        modsync sync /mnt/share/mods                 # Sync from a folder
        modsync sync -k                              # Keep extra local mods
    """
    out: OutputFormatter = ctx.obj["out"]

    try:
        source = source or config.server_url
        if not source:
            out.error(
                "No mod server given. Pass SOURCE or run 'modsync init' first."
            )
            ctx.exit(1)

        mod_paths = resolve_paths(install_dir or config.install_dir)
        policy = SyncPolicy(force=force, keep_existing=keep_existing)

        out.info(f"Syncing: {source} -> {mod_paths.mods_dir}")
        server = open_server(source)

        try:
            if out.quiet or out.json_output:
                result = SyncEngine(mod_paths).sync_server(server, policy)
            else:
                with SyncProgressDisplay() as display:
                    engine = SyncEngine(mod_paths, observer=display)
                    result = engine.sync_server(server, policy)
        finally:
            if isinstance(server, HTTPServer):
                server.close()

    except ModSyncError as e:
        logger.debug("Sync failed", exc_info=True)
        out.error(f"Sync failed: {e}")
        out.warning("The mods directory may be incomplete, run the sync again")
        ctx.exit(1)

    if out.json_output:
        out.output_json(result.to_dict())
    else:
        out.success("Sync complete!")
        out.print_summary("Sync Summary", _summary_items(result))


@main.command()
@click.option(
    "--install-dir",
    type=click.Path(file_okay=False, path_type=Path),
    help="Minecraft installation directory (default: platform location)",
)
@click.pass_context
def paths(ctx: Any, install_dir: Optional[Path]) -> None:
    """Show the directories modsync uses."""
    out: OutputFormatter = ctx.obj["out"]

    try:
        resolved = resolve_paths(install_dir or config.install_dir)
    except ModSyncError as e:
        out.error(str(e))
        ctx.exit(1)

    if out.json_output:
        out.output_json(
            {
                "install_dir": str(resolved.install_dir),
                "mods_dir": str(resolved.mods_dir),
                "backup_dir": str(resolved.backup_dir),
            }
        )
        return

    click.echo(f"Install dir: {resolved.install_dir}")
    click.echo(f"Mods dir:    {resolved.mods_dir}")
    click.echo(f"Backup dir:  {resolved.backup_dir}")


@main.command()
@click.option(
    "--server-url",
    prompt="Mod server URL or directory",
    help="Default mod server to sync from",
)
@click.option(
    "--install-dir",
    type=click.Path(file_okay=False, path_type=Path),
    help="Minecraft installation directory override",
)
@click.pass_context
def init(ctx: Any, server_url: str, install_dir: Optional[Path]) -> None:
    """Save the default mod server and installation directory."""
    out: OutputFormatter = ctx.obj["out"]

    try:
        config.save(server_url=server_url, install_dir=install_dir)
    except ModSyncError as e:
        out.error(f"Initialization failed: {e}")
        ctx.exit(1)

    out.print_summary(
        "Initialization Complete",
        [
            ("Status", "✓ Configuration saved successfully"),
            ("Config file", str(config.get_config_path())),
        ],
    )


if __name__ == "__main__":
    main()
