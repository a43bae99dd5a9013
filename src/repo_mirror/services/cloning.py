"""Cloning service: replay a configuration file onto this machine."""

import shutil
from collections.abc import Callable
from enum import Enum
from pathlib import Path

import click
import structlog

from repo_mirror.config.settings import PROMPT_MODES
from repo_mirror.configfile import read_config, write_template
from repo_mirror.core.exceptions import (
    CloneError,
    ConfigurationError,
    PreconditionError,
    RepositoryError,
)
from repo_mirror.core.models import (
    CloneOutcome,
    CloneSummary,
    LineError,
    RepositoryRecord,
    RunContext,
)
from repo_mirror.git.client import GitClient
from repo_mirror.git.url_resolver import URLResolver

logger = structlog.get_logger(__name__)

Prompt = Callable[[str], str]

BATCH_QUESTION = "[r]e-clone, [s]kip, skip [a]ll, re-clone a[l]l"
PER_ITEM_QUESTION = "Do you want to remove it and re-clone? (y/N)"


class Choice(str, Enum):
    """Operator answer for a target directory that already exists."""

    RECLONE = "reclone"
    SKIP = "skip"
    SKIP_ALL = "skip_all"
    RECLONE_ALL = "reclone_all"


_BATCH_ANSWERS = {
    "r": Choice.RECLONE,
    "s": Choice.SKIP,
    "a": Choice.SKIP_ALL,
    "l": Choice.RECLONE_ALL,
}


def parse_choice(answer: str, mode: str = "batch") -> Choice:
    """Map a typed answer to a choice. Anything unrecognised means skip."""
    answer = answer.strip().lower()
    if mode == "per-item":
        return Choice.RECLONE if answer in ("y", "yes") else Choice.SKIP
    return _BATCH_ANSWERS.get(answer, Choice.SKIP)


def terminal_prompt(question: str) -> str:
    """Ask the operator on stdin and return the answer line.

    End of input (no operator, stdin closed) reads as an empty answer.
    """
    click.echo(f"{question}: ", nl=False)
    answer = click.get_text_stream("stdin").readline()
    if not answer:
        click.echo()
    return answer.strip()


class CloneReporter:
    """Receives per-record progress from a clone run. Does nothing by default."""

    def template_created(self, path: Path) -> None:
        pass

    def started(self, record: RepositoryRecord) -> None:
        pass

    def exists(self, record: RepositoryRecord) -> None:
        pass

    def removed(self, record: RepositoryRecord) -> None:
        pass

    def skipped(self, record: RepositoryRecord) -> None:
        pass

    def cloned(self, record: RepositoryRecord) -> None:
        pass

    def failed(self, record: RepositoryRecord, reason: str) -> None:
        pass

    def line_error(self, error: LineError) -> None:
        pass


class CloneService:
    """Clones configured repositories one after another.

    Pre-existing targets are resolved through ``prompt``: in ``batch`` mode
    the operator can skip or re-clone every remaining conflict at once, in
    ``per-item`` mode every conflict is a separate y/N question.
    """

    def __init__(
        self,
        git: GitClient,
        resolver: URLResolver,
        prompt: Prompt | None = None,
        mode: str = "batch",
        reporter: CloneReporter | None = None,
    ) -> None:
        if mode not in PROMPT_MODES:
            raise ConfigurationError(
                f"Unknown prompt mode: {mode}",
                details={"mode": mode, "allowed": list(PROMPT_MODES)},
            )
        self._git = git
        self._resolver = resolver
        self._prompt = prompt or terminal_prompt
        self._mode = mode
        self._reporter = reporter or CloneReporter()

    def _ask(self) -> Choice:
        question = PER_ITEM_QUESTION if self._mode == "per-item" else BATCH_QUESTION
        return parse_choice(self._prompt(question), self._mode)

    def _should_replace(self, context: RunContext) -> bool:
        """Decide what to do with an existing target, updating the batch policy."""
        if context.skip_all:
            return False
        if context.reclone_all:
            return True

        choice = self._ask()
        if choice is Choice.SKIP_ALL:
            context.skip_all = True
            return False
        if choice is Choice.RECLONE_ALL:
            context.reclone_all = True
            return True
        return choice is Choice.RECLONE

    def clone(self, record: RepositoryRecord, context: RunContext) -> CloneOutcome:
        """Make ``record.target_path`` a single-branch clone of ``record.branch``."""
        target = Path(record.target_path)
        self._reporter.started(record)

        try:
            try:
                target.parent.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise CloneError(
                    f"Cannot create parent directory: {target.parent}",
                    details={"path": str(target.parent), "error": str(e)},
                ) from e

            if target.is_dir():
                self._reporter.exists(record)
                if not self._should_replace(context):
                    logger.debug("Skipping existing target", path=str(target))
                    self._reporter.skipped(record)
                    return CloneOutcome.SKIPPED
                try:
                    shutil.rmtree(target)
                except OSError as e:
                    raise CloneError(
                        f"Cannot remove existing directory: {target}",
                        details={"path": str(target), "error": str(e)},
                    ) from e
                self._reporter.removed(record)

            self._git.clone_single_branch(record.remote_url, target, record.branch)
        except RepositoryError as e:
            reason = getattr(e, "stderr", "") or e.message
            logger.error(
                "Clone failed",
                url=record.remote_url,
                path=str(target),
                branch=record.branch,
                line_number=record.line_number,
                error=reason,
            )
            self._reporter.failed(record, reason)
            return CloneOutcome.FAILED

        logger.info("Cloned repository", url=record.remote_url, path=str(target), branch=record.branch)
        self._reporter.cloned(record)
        return CloneOutcome.CLONED

    def bootstrap(self, config_path: Path | str) -> bool:
        """Write the example file when ``config_path`` does not exist.

        Returns True when a file was created.
        """
        path = Path(config_path)
        if path.exists():
            return False
        try:
            write_template(path)
        except OSError as e:
            raise PreconditionError(
                f"Cannot create configuration file: {path}",
                details={"path": str(path), "error": str(e)},
            ) from e
        logger.info("Example configuration created", path=str(path))
        self._reporter.template_created(path)
        return True

    def run(self, config_path: Path | str) -> CloneSummary:
        """Clone every valid record of a configuration file.

        Neither bad lines nor failed clones stop the run.
        """
        if self.bootstrap(config_path):
            return CloneSummary(bootstrapped=True)

        summary = CloneSummary()
        context = RunContext()
        for item in read_config(config_path, self._resolver):
            if isinstance(item, LineError):
                summary.line_errors.append(item)
                self._reporter.line_error(item)
                continue
            summary.record(self.clone(item, context))

        logger.info(
            "Clone run finished",
            cloned=summary.cloned,
            skipped=summary.skipped,
            failed=summary.failed,
        )
        return summary
