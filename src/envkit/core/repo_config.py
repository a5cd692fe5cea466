"""Repository-level envkit configuration.

Stored in pyproject.toml under [tool.envkit]:

    [tool.envkit]
    excludes = ["third_party/**"]

    [tool.envkit.hooks.hadolint]
    enable = false
    excludes = ["docker/legacy/*"]
"""

import tomllib
from pathlib import Path

import tomlkit
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from envkit.core.hooks.types import HookDefaults


class ConfigError(ValueError):
    """Raised when [tool.envkit] is malformed."""


class HookSettings(BaseModel):
    """Per-hook settings layered over the built registry."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    enable: bool | None = None
    excludes: list[str] | None = None


class EnvkitConfig(BaseModel):
    """Contents of the [tool.envkit] table."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    excludes: list[str] = Field(default_factory=list)
    tools_prefix: str = ""
    hooks: dict[str, HookSettings] = Field(default_factory=dict)

    def hook_defaults(self) -> HookDefaults:
        """Defaults passed to the registry builder."""
        return HookDefaults(excludes=frozenset(self.excludes), tools_prefix=self.tools_prefix)


def read_envkit_config(repo_root: Path) -> EnvkitConfig:
    """Read [tool.envkit] from pyproject.toml.

    Returns default configuration when pyproject.toml or the table is absent.

    Raises:
        ConfigError: If pyproject.toml is not valid TOML or the table does not
            match the expected schema
    """
    pyproject_path = repo_root / "pyproject.toml"

    if not pyproject_path.exists():
        return EnvkitConfig()

    try:
        with pyproject_path.open("rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {pyproject_path}: {e}") from e

    tool_section = data.get("tool")
    if tool_section is None:
        return EnvkitConfig()

    envkit_section = tool_section.get("envkit")
    if envkit_section is None:
        return EnvkitConfig()

    try:
        return EnvkitConfig.model_validate(envkit_section)
    except ValidationError as e:
        raise ConfigError(f"Invalid [tool.envkit] in {pyproject_path}:\n{e}") from e


def write_hook_enabled(repo_root: Path, hook_id: str, enabled: bool) -> None:
    """Set [tool.envkit.hooks.<hook_id>] enable in pyproject.toml.

    Preserves existing formatting and comments using tomlkit.
    """
    pyproject_path = repo_root / "pyproject.toml"

    if pyproject_path.exists():
        with pyproject_path.open("r", encoding="utf-8") as f:
            doc = tomlkit.load(f)
    else:
        doc = tomlkit.document()

    if "tool" not in doc:
        doc["tool"] = tomlkit.table(is_super_table=True)  # type: ignore[index]

    if "envkit" not in doc["tool"]:  # type: ignore[operator]
        doc["tool"]["envkit"] = tomlkit.table()  # type: ignore[index]

    if "hooks" not in doc["tool"]["envkit"]:  # type: ignore[operator,index]
        doc["tool"]["envkit"]["hooks"] = tomlkit.table(is_super_table=True)  # type: ignore[index]

    hooks = doc["tool"]["envkit"]["hooks"]  # type: ignore[index]
    if hook_id not in hooks:  # type: ignore[operator]
        hooks[hook_id] = tomlkit.table()  # type: ignore[index]

    hooks[hook_id]["enable"] = enabled  # type: ignore[index]

    with pyproject_path.open("w", encoding="utf-8") as f:
        tomlkit.dump(doc, f)
