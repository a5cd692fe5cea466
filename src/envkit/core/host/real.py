"""Real host implementation using platform.system()."""

import platform

from envkit.core.host.abc import HostPlatform


class RealHostPlatform(HostPlatform):
    """Production implementation reading the running interpreter's host."""

    def system_name(self) -> str:
        return platform.system()
