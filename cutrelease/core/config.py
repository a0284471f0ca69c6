"""Typed configuration loading and access.

Configuration is optional. It is read from, in order:

1. an explicit ``--config`` path;
2. ``cutrelease.toml`` in the working directory;
3. the ``[tool.cutrelease]`` table of ``pyproject.toml``;
4. built-in defaults (the zsh-claude plugin release profile).
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path
from typing import TypeVar

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_str, get_str_list, get_table

__all__ = [
    "BranchPolicy",
    "ChangelogConfig",
    "Config",
    "ConfigError",
    "DuplicatePolicy",
    "GitConfig",
    "PolicyConfig",
    "ProductConfig",
    "SyncPolicy",
    "UrlPolicy",
    "find_config_file",
    "load_config",
    "load_project_config",
]

CONFIG_FILENAME = "cutrelease.toml"
PYPROJECT_FILENAME = "pyproject.toml"
PYPROJECT_TOOL_KEY = "cutrelease"


class BranchPolicy(StrEnum):
    """What to do when releasing from a branch other than the main one."""

    PROMPT = "prompt"
    PROCEED = "proceed"
    ABORT = "abort"


class SyncPolicy(StrEnum):
    """Whether a failed fetch/pull stops the release."""

    STRICT = "strict"
    BEST_EFFORT = "best-effort"


class UrlPolicy(StrEnum):
    """Whether a failed release URL lookup fails the run."""

    BEST_EFFORT = "best-effort"
    STRICT = "strict"


class DuplicatePolicy(StrEnum):
    """Changelog behaviour when the version already has a section."""

    APPEND = "append"
    SKIP = "skip"


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class GitConfig:
    main_branch: str = "main"
    remote: str = "origin"
    fallback_remote: str = "upstream"


@dataclass(frozen=True, slots=True)
class ChangelogConfig:
    """Where and how the README changelog is updated."""

    path: str = "README.md"
    marker: str = "## 📋 Changelog"
    placeholder: str = "- Bug fixes and improvements"
    on_duplicate: DuplicatePolicy = DuplicatePolicy.APPEND


@dataclass(frozen=True, slots=True)
class PolicyConfig:
    branch: BranchPolicy = BranchPolicy.PROMPT
    sync: SyncPolicy = SyncPolicy.STRICT
    url: UrlPolicy = UrlPolicy.BEST_EFFORT


_DEFAULT_FEATURES = (
    "AI-powered command suggestions",
    "Command explanations with Claude",
    "Cross-platform compatibility",
    "Plugin manager support",
)

_DEFAULT_HIGHLIGHTS = (
    "Users can install via git clone or plugin managers",
    "Tagged source code is available for download",
    "Release includes installation and usage instructions",
)

_DEFAULT_NEXT_STEPS = (
    "Get Claude API key from console.anthropic.com/settings/keys",
    "Install dependencies: jq, curl",
    "Clone and configure with claude-setup",
    "Use Option+\\ (macOS) or Alt+\\ (Linux) for suggestions",
)

_DEFAULT_USAGE = (
    "**macOS**: Option+\\ (suggest), Option+Shift+\\ (explain)",
    "**Linux/Windows**: Alt+\\ (suggest), Alt+Shift+\\ (explain)",
)

_DEFAULT_SETUP = (
    "Get API key: [console.anthropic.com/settings/keys](https://console.anthropic.com/settings/keys)",
    "Install dependencies: `brew install jq` (macOS) or `sudo apt install jq` (Ubuntu)",
    "Configure: Run `claude-setup`",
)


@dataclass(frozen=True, slots=True)
class ProductConfig:
    """Text used in the tag message, release title, notes and summary.

    The release title is rendered as ``"<emoji> <version>: <product> for <shell>"``.
    """

    name: str = "zsh-claude"
    repo_url: str = "https://github.com/HundredAcreStudio/zsh-claude"
    tagline: str = "AI-powered command suggestions and explanations for Zsh using Claude AI"
    description: str = "Zsh plugin for Claude AI command suggestions and explanations."
    emoji: str = "🤖"
    product: str = "Claude AI"
    shell: str = "Zsh"
    features: tuple[str, ...] = _DEFAULT_FEATURES
    highlights: tuple[str, ...] = _DEFAULT_HIGHLIGHTS
    next_steps: tuple[str, ...] = _DEFAULT_NEXT_STEPS
    usage: tuple[str, ...] = _DEFAULT_USAGE
    setup: tuple[str, ...] = _DEFAULT_SETUP
    attribution: tuple[str, ...] = ("Tagged-by: cutrelease",)
    farewell: str = "🎉 Happy commanding with Claude AI!"
    notes_footer: str = "Transform natural language into executable commands with Claude AI! 🧠→⚡"


@dataclass(frozen=True, slots=True)
class Config:
    """Main configuration container."""

    git: GitConfig = field(default_factory=GitConfig)
    changelog: ChangelogConfig = field(default_factory=ChangelogConfig)
    policy: PolicyConfig = field(default_factory=PolicyConfig)
    product: ProductConfig = field(default_factory=ProductConfig)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from a mapping (parsed TOML).

        Missing keys take their defaults.

        Raises:
            ValueError: A key holds a value of the wrong type, a blank
                string, or an unknown policy name. The message names the key.
        """
        git = _table(data, "git")
        changelog = _table(data, "changelog")
        policy = _table(data, "policy")
        product = _table(data, "product")

        git_defaults = GitConfig()
        changelog_defaults = ChangelogConfig()
        policy_defaults = PolicyConfig()
        product_defaults = ProductConfig()

        return cls(
            git=GitConfig(
                main_branch=_str_value(git, "main_branch", git_defaults.main_branch),
                remote=_str_value(git, "remote", git_defaults.remote),
                fallback_remote=_str_value(git, "fallback_remote", git_defaults.fallback_remote),
            ),
            changelog=ChangelogConfig(
                path=_str_value(changelog, "path", changelog_defaults.path),
                marker=_str_value(changelog, "marker", changelog_defaults.marker),
                placeholder=_str_value(changelog, "placeholder", changelog_defaults.placeholder),
                on_duplicate=_enum_value(
                    DuplicatePolicy, changelog, "on_duplicate", changelog_defaults.on_duplicate
                ),
            ),
            policy=PolicyConfig(
                branch=_enum_value(BranchPolicy, policy, "branch", policy_defaults.branch),
                sync=_enum_value(SyncPolicy, policy, "sync", policy_defaults.sync),
                url=_enum_value(UrlPolicy, policy, "url", policy_defaults.url),
            ),
            product=ProductConfig(
                name=_str_value(product, "name", product_defaults.name),
                repo_url=_str_value(product, "repo_url", product_defaults.repo_url),
                tagline=_str_value(product, "tagline", product_defaults.tagline),
                description=_str_value(product, "description", product_defaults.description),
                emoji=_str_value(product, "emoji", product_defaults.emoji),
                product=_str_value(product, "product", product_defaults.product),
                shell=_str_value(product, "shell", product_defaults.shell),
                features=_str_list(product, "features", product_defaults.features),
                highlights=_str_list(product, "highlights", product_defaults.highlights),
                next_steps=_str_list(product, "next_steps", product_defaults.next_steps),
                usage=_str_list(product, "usage", product_defaults.usage),
                setup=_str_list(product, "setup", product_defaults.setup),
                attribution=_str_list(product, "attribution", product_defaults.attribution),
                farewell=_str_value(product, "farewell", product_defaults.farewell),
                notes_footer=_str_value(product, "notes_footer", product_defaults.notes_footer),
            ),
        )


def _table(data: Mapping[str, object], key: str) -> StrDict:
    if key not in data:
        return {}
    table = get_table(data, key)
    if table is None:
        raise ValueError(f"[{key}]: expected a table")
    return table


def _str_value(table: Mapping[str, object], key: str, default: str) -> str:
    if key not in table:
        return default
    value = get_str(table, key)
    if value is None:
        raise ValueError(f"{key}: expected a non-empty string")
    return value


_EnumT = TypeVar("_EnumT", bound=StrEnum)


def _enum_value(
    enum_type: type[_EnumT], table: Mapping[str, object], key: str, default: _EnumT
) -> _EnumT:
    raw = table.get(key)
    if raw is None:
        return default
    if not isinstance(raw, str):
        raise ValueError(f"{key}: expected a string")
    try:
        return enum_type(raw.strip())
    except ValueError:
        allowed = ", ".join(m.value for m in enum_type)
        raise ValueError(f"{key}: unknown value {raw!r} (expected one of: {allowed})") from None


def _str_list(table: Mapping[str, object], key: str, default: tuple[str, ...]) -> tuple[str, ...]:
    if key not in table:
        return default
    items = get_str_list(table, key)
    if items is None:
        raise ValueError(f"{key}: expected a list of strings")
    return items


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    """Parse a TOML file, handling read and syntax errors."""
    import tomllib

    try:
        content = path.read_bytes()
        data_obj: object = tomllib.loads(content.decode("utf-8"))
        data = as_str_dict(data_obj)
        if data is None:
            return Err(ConfigError("Config root must be a TOML table", path=path))
        return Ok(data)
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))


def _select_table(path: Path, data: StrDict) -> StrDict:
    # pyproject.toml keeps our settings under [tool.cutrelease]
    if path.name != PYPROJECT_FILENAME:
        return data
    tool: StrDict = get_table(data, "tool") or {}
    return get_table(tool, PYPROJECT_TOOL_KEY) or {}


def load_config(path: Path) -> Result[Config, ConfigError]:
    """Load and parse configuration from a TOML file.

    Args:
        path: ``cutrelease.toml`` or a ``pyproject.toml``

    Returns:
        Ok(Config) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        config = Config.from_dict(_select_table(path, result.value))
        return Ok(config)
    except (KeyError, TypeError, ValueError) as e:
        return Err(ConfigError(f"Invalid config structure: {e}", path=path))


def find_config_file(root: Path) -> Path | None:
    """Find the configuration file for a project root, if any."""
    candidate = root / CONFIG_FILENAME
    if candidate.is_file():
        return candidate

    pyproject = root / PYPROJECT_FILENAME
    if not pyproject.is_file():
        return None

    parsed = _parse_toml(pyproject)
    if isinstance(parsed, Err):
        return None
    tool: StrDict = get_table(parsed.value, "tool") or {}
    if get_table(tool, PYPROJECT_TOOL_KEY) is None:
        return None
    return pyproject


def load_project_config(root: Path, explicit: Path | None = None) -> Result[Config, ConfigError]:
    """Load the configuration for a project, falling back to defaults."""
    if explicit is not None:
        return load_config(explicit)

    path = find_config_file(root)
    if path is None:
        return Ok(Config())
    return load_config(path)
