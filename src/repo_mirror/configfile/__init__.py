"""Reading and writing the REPO_URL|TARGET_PATH|BRANCH configuration format."""

from repo_mirror.configfile.parser import expand_target_path, iter_config, parse_line, read_config
from repo_mirror.configfile.writer import TEMPLATE, render_config, write_config, write_template

__all__ = [
    "expand_target_path",
    "parse_line",
    "iter_config",
    "read_config",
    "render_config",
    "write_config",
    "write_template",
    "TEMPLATE",
]
