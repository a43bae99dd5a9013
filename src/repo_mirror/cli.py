"""CLI for repo-mirror."""

import sys
from pathlib import Path

import click
import pydantic

from repo_mirror.config.logging import configure_logging
from repo_mirror.config.settings import PROMPT_MODES, Settings, get_settings
from repo_mirror.core.exceptions import PreconditionError
from repo_mirror.core.models import DiscoveredRepository, LineError, RepositoryRecord, ScanReport
from repo_mirror.git.client import GitClient
from repo_mirror.git.scanner import RepositoryScanner
from repo_mirror.git.url_resolver import URLResolver
from repo_mirror.services.cloning import CloneReporter, CloneService
from repo_mirror.services.scanning import ScanReporter, ScanService, resolve_base_path

RULE = "================================"


def _status(color: str, message: str) -> None:
    click.secho(message, fg=color)


def _host_label(host: str) -> str:
    return "GitHub" if host == "github.com" else host


def _load_settings() -> Settings:
    try:
        return get_settings()
    except pydantic.ValidationError as e:
        click.secho(f"❌ Invalid settings: {e}", fg="red", err=True)
        sys.exit(1)


def _setup(ctx: click.Context, verbose: bool) -> Settings:
    settings = _load_settings()
    group_verbose = bool(ctx.obj and ctx.obj.get("verbose"))
    configure_logging("DEBUG" if verbose or group_verbose else settings.log_level)
    return settings


class ConsoleScanReporter(ScanReporter):
    """Prints scan progress as coloured status lines."""

    def __init__(self, host: str) -> None:
        self._label = _host_label(host)

    def found(self, repo: DiscoveredRepository) -> None:
        _status("yellow", f"📁 Found repository: {repo.path}")

    def accepted(self, repo: DiscoveredRepository) -> None:
        _status("green", f"   ✅ {self._label} repo: {repo.name}")
        _status("green", f"   🌿 Branch: {repo.branch}")
        click.echo()

    def non_host(self, repo: DiscoveredRepository) -> None:
        _status("yellow", f"   ⚠️  Non-{self._label} repo: {repo.remote_url}")
        click.echo()

    def no_remote(self, repo: DiscoveredRepository) -> None:
        _status("red", "   ❌ No remote URL found")
        click.echo()


class ConsoleCloneReporter(CloneReporter):
    """Prints clone progress as coloured status lines."""

    def template_created(self, path: Path) -> None:
        _status("green", f"✅ Created example config file: {path}")
        _status("yellow", "Please edit the file and run the command again.")

    def started(self, record: RepositoryRecord) -> None:
        _status("blue", f"📦 Cloning: {record.remote_url}")
        _status("blue", f"   Path: {record.target_path}")
        _status("blue", f"   Branch: {record.branch}")

    def exists(self, record: RepositoryRecord) -> None:
        _status("yellow", f"⚠️  Directory already exists: {record.target_path}")

    def removed(self, record: RepositoryRecord) -> None:
        _status("green", "✅ Removed existing directory")

    def skipped(self, record: RepositoryRecord) -> None:
        _status("yellow", f"⏭️  Skipping: {record.target_path}")
        click.echo()

    def cloned(self, record: RepositoryRecord) -> None:
        _status("green", f"✅ Successfully cloned: {record.name}")
        click.echo()

    def failed(self, record: RepositoryRecord, reason: str) -> None:
        _status("red", f"❌ Failed to clone: {record.remote_url}")
        if reason:
            click.echo(f"   {reason}")
        click.echo()

    def line_error(self, error: LineError) -> None:
        _status("red", f"❌ {error.message}")


def _show_generated(report: ScanReport) -> None:
    click.echo()
    _status("blue", "📋 Generated Configuration:")
    click.echo(RULE)
    for record in report.sorted_records():
        _status("green", f"📦 {record.name}")
        click.echo(f"   URL: {record.remote_url}")
        click.echo(f"   Path: {record.target_path}")
        click.echo(f"   Branch: {record.branch}")
        click.echo()


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.version_option(package_name="repo-mirror")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """repo-mirror: record GitHub checkouts and clone them elsewhere."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose


@cli.command()
@click.argument("base_path", required=False, type=click.Path(path_type=Path))
@click.argument("output_file", required=False, type=click.Path(path_type=Path))
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.pass_context
def scan(ctx: click.Context, base_path: Path | None, output_file: Path | None, verbose: bool) -> None:
    """Scan BASE_PATH for repositories and write OUTPUT_FILE.

    BASE_PATH defaults to the current directory and OUTPUT_FILE to
    repos_generated.txt.
    """
    settings = _setup(ctx, verbose)
    output = output_file or Path(settings.output_file)
    label = _host_label(settings.git_host)

    _status("blue", "🚀 Repository Scanner")
    click.echo()

    try:
        base = resolve_base_path(base_path or Path.cwd())
    except PreconditionError as e:
        _status("red", f"❌ {e.message}")
        sys.exit(1)

    _status("green", f"📂 Base path: {base}")
    _status("green", f"📄 Output file: {output}")
    click.echo()

    scanner = RepositoryScanner(
        GitClient(settings.git_executable),
        primary_remote=settings.primary_remote,
        default_branch=settings.default_branch,
    )
    service = ScanService(scanner, URLResolver(settings.git_host), ConsoleScanReporter(settings.git_host))

    _status("blue", f"🔍 Scanning for Git repositories in: {base}")
    click.echo()
    try:
        report = service.scan(base)
        written = service.write(report, output, base)
    except PreconditionError as e:
        _status("red", f"❌ {e.message}")
        sys.exit(1)
    except OSError as e:
        _status("red", f"❌ Cannot write {output}: {e.strerror}")
        sys.exit(1)

    if written is None:
        _status("red", f"❌ No {label} repositories found in: {base}")
    else:
        _status("green", f"✅ Found {report.count} {label} repositories")
        _status("green", f"📝 Configuration saved to: {written}")
        _show_generated(report)

    click.echo(RULE)
    _status("green", "🏁 Scan completed!")
    if written is not None:
        _status("yellow", f"💡 You can now use '{written}' with the clone command")


@cli.command()
@click.argument("config_file", required=False, type=click.Path(path_type=Path))
@click.option(
    "--mode",
    "-m",
    type=click.Choice(PROMPT_MODES),
    default=None,
    help="How to resolve existing directories (default: from settings, 'batch')",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.pass_context
def clone(ctx: click.Context, config_file: Path | None, mode: str | None, verbose: bool) -> None:
    """Clone every repository listed in CONFIG_FILE (default: repos.txt).

    A missing CONFIG_FILE is created with example entries instead.
    """
    settings = _setup(ctx, verbose)
    config_path = config_file or Path(settings.config_file)
    label = _host_label(settings.git_host)

    _status("blue", f"🚀 {label} Repository Cloner")
    click.echo()

    if config_path.exists():
        _status("green", f"📋 Using configuration file: {config_path}")
        click.echo()
    else:
        _status("red", f"❌ Configuration file not found: {config_path}")
        click.echo()
        _status("yellow", "Creating example configuration file...")

    service = CloneService(
        GitClient(settings.git_executable),
        URLResolver(settings.git_host),
        mode=mode or settings.prompt_mode,
        reporter=ConsoleCloneReporter(),
    )
    try:
        summary = service.run(config_path)
    except PreconditionError as e:
        _status("red", f"❌ {e.message}")
        sys.exit(1)

    if summary.bootstrapped:
        return

    click.echo(RULE)
    _status(
        "green",
        f"✅ Successfully processed: {summary.succeeded} repositories "
        f"({summary.cloned} cloned, {summary.skipped} skipped)",
    )
    if summary.failed:
        _status(
            "red",
            f"❌ Failed: {summary.failed} "
            f"({summary.clone_failures} clone failures, {len(summary.line_errors)} invalid lines)",
        )
    _status("blue", "🏁 Cloning process completed!")


if __name__ == "__main__":
    cli()
