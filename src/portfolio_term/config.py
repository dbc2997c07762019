"""Configuration loaded from small YAML files.

Config files live in ``configs/<name>.yml``. They are read with a minimal,
dependency-free YAML subset parser supporting:
- Scalars (strings, numbers, booleans, null)
- Nested mappings (key: value, indented children)
- Lists of scalars (- item)
- Comments (# ...) and single/double quoted strings
"""

from __future__ import annotations

from dataclasses import dataclass, field
from importlib.resources import as_file, files
from pathlib import Path

# --- Minimal YAML Parser ---


def parse_simple_yaml(text: str) -> dict:
    """Parse a simple YAML document into a dict."""
    lines = []
    for raw in text.split("\n"):
        stripped = raw.lstrip()
        if not stripped or stripped.startswith("#"):
            continue
        lines.append((len(raw) - len(stripped), stripped.rstrip()))
    result, _ = _parse_block(lines, 0, 0)
    return result if isinstance(result, dict) else {}


def _parse_block(lines: list[tuple[int, str]], i: int, indent: int) -> tuple[dict | list, int]:
    """Parse consecutive lines at `indent` starting at index i."""
    result: dict | list = {}
    while i < len(lines):
        line_indent, content = lines[i]
        if line_indent < indent:
            break

        if content == "-" or content.startswith("- "):
            if not isinstance(result, list):
                if result:
                    break
                result = []
            result.append(_parse_value(_remove_inline_comment(content[1:].strip())))
            i += 1
            continue

        if isinstance(result, list):
            break
        colon = _find_unquoted_colon(content)
        if colon <= 0:
            i += 1
            continue
        key = content[:colon].strip()
        value = _remove_inline_comment(content[colon + 1 :].strip())
        i += 1
        if value:
            result[key] = _parse_value(value)
        elif i < len(lines) and lines[i][0] > line_indent:
            result[key], i = _parse_block(lines, i, lines[i][0])
        elif i < len(lines) and lines[i][0] == line_indent and lines[i][1].startswith("-"):
            # Block list written at the same indent as its key
            result[key], i = _parse_block(lines, i, line_indent)
        else:
            result[key] = None
    return result, i


def _find_unquoted_colon(s: str) -> int:
    """Position of the first key separator (': ' or trailing ':') outside quotes."""
    quote = None
    for i, c in enumerate(s):
        if quote:
            if c == quote:
                quote = None
        elif c in ("'", '"'):
            quote = c
        elif c == ":" and (i + 1 == len(s) or s[i + 1] == " "):
            return i
    return -1


def _remove_inline_comment(s: str) -> str:
    """Strip a ' #' comment that is not inside quotes."""
    quote = None
    for i, c in enumerate(s):
        if quote:
            if c == quote:
                quote = None
        elif c in ("'", '"'):
            quote = c
        elif c == "#" and (i == 0 or s[i - 1] == " "):
            return s[:i].rstrip()
    return s


def _parse_value(s: str) -> str | int | float | bool | None:
    """Parse a scalar YAML value."""
    s = s.strip()
    if not s or s.lower() in ("null", "~", "none"):
        return None
    if s.lower() in ("true", "yes", "on"):
        return True
    if s.lower() in ("false", "no", "off"):
        return False
    if len(s) >= 2 and s[0] == s[-1] and s[0] in ("'", '"'):
        body = s[1:-1]
        if s[0] == "'":
            return body.replace("''", "'")
        return body.replace('\\"', '"').replace("\\n", "\n").replace("\\t", "\t").replace("\\\\", "\\")
    try:
        return float(s) if "." in s else int(s)
    except ValueError:
        return s


# --- Configuration Dataclasses ---


@dataclass
class ContentConfig:
    """Where the portfolio content JSON is fetched from."""

    source: str = "data.json"


@dataclass
class TerminalConfig:
    """Shell simulation settings."""

    prompt: str = "root@portfolio:~$"
    welcome: bool = True


@dataclass
class UIConfig:
    """Curses rendering settings."""

    color: bool = True


@dataclass
class Config:
    """Complete application configuration."""

    content: ContentConfig = field(default_factory=ContentConfig)
    terminal: TerminalConfig = field(default_factory=TerminalConfig)
    ui: UIConfig = field(default_factory=UIConfig)


# --- Config Loading ---


def _get_user_data_dir() -> Path:
    """Get the user's data directory ($HOME/.portfolio-term)."""
    return Path.home() / ".portfolio-term"


def _is_path(config_name_or_path: str) -> bool:
    return (
        "/" in config_name_or_path
        or "\\" in config_name_or_path
        or config_name_or_path.endswith(".yml")
    )


def _find_config_file(config_name_or_path: str) -> Path | None:
    """Find a config file by name or path.

    Search order:
    1. If it looks like a path (contains / or \\ or ends in .yml), use it
    2. $HOME/.portfolio-term/configs/<name>.yml
    3. ./configs/<name>.yml
    4. Bundled portfolio_term.configs/<name>.yml
    """
    if _is_path(config_name_or_path):
        path = Path(config_name_or_path).expanduser()
        return path if path.is_file() else None

    config_filename = f"{config_name_or_path}.yml"

    user_config = _get_user_data_dir() / "configs" / config_filename
    if user_config.is_file():
        return user_config

    cwd_config = Path.cwd() / "configs" / config_filename
    if cwd_config.is_file():
        return cwd_config

    try:
        config_ref = files("portfolio_term.configs").joinpath(config_filename)
        with as_file(config_ref) as p:
            if p.is_file():
                return Path(p)
    except (ModuleNotFoundError, FileNotFoundError, TypeError):
        pass

    return None


def _get_config_search_paths(config_name: str) -> list[str]:
    config_filename = f"{config_name}.yml"
    return [
        str(_get_user_data_dir() / "configs" / config_filename),
        str(Path.cwd() / "configs" / config_filename),
        f"portfolio_term.configs/{config_filename} (bundled)",
    ]


def load_config(config_name_or_path: str | None = None) -> Config:
    """Load configuration from a YAML file, merged over the defaults.

    Raises:
        FileNotFoundError: If a non-default config is named but not found.
    """
    if not config_name_or_path:
        config_name_or_path = "default"

    config_path = _find_config_file(config_name_or_path)
    config = Config()

    if config_path is None:
        if config_name_or_path == "default":
            return config
        if _is_path(config_name_or_path):
            raise FileNotFoundError(f"Config file not found: {config_name_or_path}")
        paths_str = "\n  - ".join(_get_config_search_paths(config_name_or_path))
        raise FileNotFoundError(
            f"Config '{config_name_or_path}' not found. Searched:\n  - {paths_str}"
        )

    with open(config_path, encoding="utf-8") as f:
        _merge_config(config, parse_simple_yaml(f.read()))
    return config


def _merge_config(config: Config, data: dict):
    """Merge parsed YAML data into a Config object."""
    if not isinstance(data, dict):
        return

    content = data.get("content")
    if isinstance(content, dict) and content.get("source"):
        config.content.source = str(content["source"])

    terminal = data.get("terminal")
    if isinstance(terminal, dict):
        if terminal.get("prompt") is not None:
            config.terminal.prompt = str(terminal["prompt"])
        if "welcome" in terminal:
            config.terminal.welcome = bool(terminal["welcome"])

    ui = data.get("ui")
    if isinstance(ui, dict) and "color" in ui:
        config.ui.color = bool(ui["color"])


def get_default_config() -> Config:
    """Return a Config with all default values."""
    return Config()
