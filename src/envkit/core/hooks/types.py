"""Hook registry data structures.

HookSpec values are fully constructed when the registry is built and are never
mutated afterwards. The external hook runner only reads them.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


def _frozen_mapping(value: Mapping[str, str]) -> Mapping[str, str]:
    return MappingProxyType(dict(value))


@dataclass(frozen=True)
class RustToolchain:
    """Cargo and rustfmt binaries layered onto the rustfmt hook."""

    cargo: str
    rustfmt: str


@dataclass(frozen=True)
class HookDefaults:
    """Process-wide defaults threaded explicitly into the registry builder.

    Attributes:
        excludes: Path patterns excluded from every hook that does not
            override them
        nightly_rust: Rust toolchain whose cargo/rustfmt replace the stock ones
            for the rustfmt hook
        tools_prefix: Directory prefix for declarative entry binaries. Empty
            means bare logical names resolved through PATH.
    """

    excludes: frozenset[str] = frozenset()
    nightly_rust: RustToolchain = field(
        default_factory=lambda: RustToolchain(cargo="cargo +nightly", rustfmt="rustfmt +nightly")
    )
    tools_prefix: str = ""


@dataclass(frozen=True)
class HookSpec:
    """One entry in the hook registry.

    `types` is advisory: the hook runner decides which files to pass to
    `entry` from it. An empty set means all file types.
    """

    id: str
    enabled: bool
    name: str
    description: str
    types: frozenset[str]
    excludes: frozenset[str]
    entry: str
    package_overrides: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "package_overrides", _frozen_mapping(self.package_overrides))

    def __hash__(self) -> int:
        return hash(
            (
                self.id,
                self.enabled,
                self.name,
                self.description,
                self.types,
                self.excludes,
                self.entry,
                tuple(sorted(self.package_overrides.items())),
            )
        )


@dataclass(frozen=True)
class HookDeclaration:
    """Static table row describing a hook before defaults are merged in.

    `excludes` is None when the row inherits `HookDefaults.excludes`.
    """

    id: str
    entry: str
    name: str | None = None
    description: str = ""
    types: frozenset[str] = frozenset()
    excludes: frozenset[str] | None = None
    enabled: bool = True
    package_overrides: Mapping[str, str] = field(default_factory=dict)
