"""Toolchain selection.

Combines the platform-independent compiler baseline with a linker choice that
depends on the host platform. The result is always a complete ToolchainSpec;
there is no step at which a partially overridden spec exists.
"""

import logging

from envkit.core.host.abc import HostPlatform
from envkit.core.toolchain.types import Baseline, Platform, ToolchainSpec

logger = logging.getLogger(__name__)

PREFERRED_LINKER = "mold"

# Platforms each non-default linker can run on. mold has no Mach-O support.
LINKER_SUPPORT: dict[str, frozenset[Platform]] = {
    "mold": frozenset({Platform.LINUX}),
}

_SYSTEM_NAMES: dict[str, Platform] = {
    "linux": Platform.LINUX,
    "darwin": Platform.DARWIN,
}


def linker_supports(linker: str, platform: Platform) -> bool:
    """Check whether a linker from LINKER_SUPPORT runs on the platform."""
    return platform in LINKER_SUPPORT.get(linker, frozenset())


def select_linker(platform: Platform, baseline: Baseline) -> str:
    """Pick the preferred linker when the platform supports it.

    Falls back to the baseline's default linker otherwise, which includes
    Platform.OTHER.
    """
    if linker_supports(PREFERRED_LINKER, platform):
        return PREFERRED_LINKER
    return baseline.default_linker


def select_toolchain(platform: Platform, baseline: Baseline) -> ToolchainSpec:
    """Compute the toolchain for a build host.

    Args:
        platform: Detected host platform
        baseline: Compiler frontend, standard library and runtime to build on

    Returns:
        Fully populated ToolchainSpec. The linker is never one that
        LINKER_SUPPORT excludes for `platform`.
    """
    linker = select_linker(platform, baseline)
    logger.debug(
        "Selected toolchain: platform=%s, frontend=%s, stdlib=%s, linker=%s",
        platform,
        baseline.compiler_frontend,
        baseline.standard_library,
        linker,
    )
    return ToolchainSpec(
        compiler_frontend=baseline.compiler_frontend,
        standard_library=baseline.standard_library,
        linker=linker,
        platform=platform,
        compiler_runtime=baseline.compiler_runtime,
    )


def detect_platform(host: HostPlatform) -> Platform:
    """Map the host's operating system name onto Platform.

    Unrecognized systems map to Platform.OTHER.
    """
    system = host.system_name()
    platform = _SYSTEM_NAMES.get(system.lower(), Platform.OTHER)
    logger.debug("Detected platform %s from system name %r", platform, system)
    return platform
