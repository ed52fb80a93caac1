# topmark:header:start
#
#   project      : LogCast
#   file         : io.py
#   file_relpath : src/logcast/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load broadcaster configuration from TOML.

Configuration may live in a project's ``pyproject.toml`` under ``[tool.logcast]``
or in a standalone file under a top-level ``[logcast]`` table. Parsing is done
with `tomlkit` and returned as plain ``dict`` structures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from logcast.config.logging import get_logger
from logcast.config.model import BroadcasterConfig, MutableBroadcasterConfig
from logcast.constants import PYPROJECT_SECTION, PYPROJECT_TOML_NAME, STANDALONE_SECTION
from logcast.core.errors import LogcastConfigError

if TYPE_CHECKING:
    from pathlib import Path

    from logcast.config.logging import LogcastLogger

TomlTable = dict[str, Any]

logger: LogcastLogger = get_logger(__name__)


def parse_toml_text(text: str, *, path: Path | None = None) -> TomlTable:
    """Parse TOML text into a plain dict.

    Args:
        text (str): The TOML document.
        path (Path | None): Source path, used in error messages only.

    Returns:
        TomlTable: The unwrapped document.

    Raises:
        LogcastConfigError: If the text is not valid TOML.
    """
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as e:
        logger.error("Invalid TOML in %s: %s", path or "<string>", e)
        raise LogcastConfigError(f"invalid TOML: {e}", path=path) from e
    return cast("TomlTable", doc.unwrap())


def load_toml_file(path: Path) -> TomlTable:
    """Read and parse a TOML file.

    Args:
        path (Path): The file to read.

    Returns:
        TomlTable: The unwrapped document.

    Raises:
        LogcastConfigError: If the file cannot be read or parsed.
    """
    logger.debug("Loading TOML config from %s", path)
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as e:
        logger.error("Cannot read config file %s: %s", path, e)
        raise LogcastConfigError(f"cannot read file: {e}", path=path) from e
    return parse_toml_text(text, path=path)


def extract_logcast_table(doc: TomlTable, *, pyproject: bool) -> TomlTable:
    """Return the LogCast table from a parsed document.

    Args:
        doc (TomlTable): Parsed TOML document.
        pyproject (bool): If True, look under ``[tool.logcast]``; otherwise under
            a top-level ``[logcast]``.

    Returns:
        TomlTable: The table, or an empty dict when absent or not a table.
    """
    section: tuple[str, ...] = PYPROJECT_SECTION if pyproject else STANDALONE_SECTION
    node: Any = doc
    for key in section:
        if not isinstance(node, dict):
            return {}
        node = cast("TomlTable", node).get(key)
    if not isinstance(node, dict):
        if node is not None:
            logger.warning("Expected a table at [%s], got %r", ".".join(section), node)
        return {}
    return cast("TomlTable", node)


def load_config(path: Path, *, base: BroadcasterConfig | None = None) -> BroadcasterConfig:
    """Load a `BroadcasterConfig` from a TOML file.

    ``pyproject.toml`` files are read from ``[tool.logcast]``; any other file from
    a top-level ``[logcast]`` table. Missing keys fall back to ``base``.

    Args:
        path (Path): The TOML file.
        base (BroadcasterConfig | None): Values for unset keys; defaults to
            ``BroadcasterConfig()``.

    Returns:
        BroadcasterConfig: The resolved configuration.
    """
    doc: TomlTable = load_toml_file(path)
    table: TomlTable = extract_logcast_table(doc, pyproject=path.name == PYPROJECT_TOML_NAME)
    draft: MutableBroadcasterConfig = MutableBroadcasterConfig.from_mapping(table)
    return draft.freeze(base)


def to_toml(config: BroadcasterConfig, *, pyproject: bool = False) -> str:
    """Render a config as TOML text under the appropriate section.

    Args:
        config (BroadcasterConfig): The config to render.
        pyproject (bool): If True, nest under ``[tool.logcast]``.

    Returns:
        str: The TOML document.
    """
    table: Any = config.to_dict()
    for key in reversed(PYPROJECT_SECTION if pyproject else STANDALONE_SECTION):
        table = {key: table}
    return tomlkit.dumps(table)
