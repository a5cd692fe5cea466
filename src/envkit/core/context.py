"""Application context with dependency injection."""

from dataclasses import dataclass
from pathlib import Path

from envkit.core.host.abc import HostPlatform
from envkit.core.host.real import RealHostPlatform
from envkit.core.repo_config import EnvkitConfig, read_envkit_config


@dataclass(frozen=True)
class EnvkitContext:
    """Immutable context holding all dependencies for envkit commands.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.
    """

    host: HostPlatform
    cwd: Path  # Current working directory at CLI invocation
    repo_root: Path
    config: EnvkitConfig

    @staticmethod
    def for_test(
        *,
        host: HostPlatform,
        cwd: Path | None = None,
        repo_root: Path | None = None,
        config: EnvkitConfig | None = None,
    ) -> "EnvkitContext":
        """Create a context for tests with sensible defaults for unset fields."""
        cwd = cwd if cwd is not None else Path("/test/repo")
        return EnvkitContext(
            host=host,
            cwd=cwd,
            repo_root=repo_root if repo_root is not None else cwd,
            config=config if config is not None else EnvkitConfig(),
        )


def find_repo_root(start: Path) -> Path:
    """Walk up from start to the nearest directory holding .git or pyproject.toml.

    Returns start itself when no such directory exists.
    """
    for candidate in (start, *start.parents):
        if (candidate / ".git").exists() or (candidate / "pyproject.toml").exists():
            return candidate
    return start


def create_context() -> EnvkitContext:
    """Create production context with real implementations.

    Example:
        >>> ctx = create_context()
        >>> registry = build_registry(ctx.config.hook_defaults())
    """
    cwd = Path.cwd()
    repo_root = find_repo_root(cwd)
    return EnvkitContext(
        host=RealHostPlatform(),
        cwd=cwd,
        repo_root=repo_root,
        config=read_envkit_config(repo_root),
    )
