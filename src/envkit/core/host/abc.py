"""Host operating system abstraction for testing.

Toolchain selection only needs the OS name; going through this ABC lets tests
pick any platform without monkeypatching the platform module.
"""

from abc import ABC, abstractmethod


class HostPlatform(ABC):
    """Abstract host inspection for dependency injection."""

    @abstractmethod
    def system_name(self) -> str:
        """Return the operating system name, e.g. "Linux" or "Darwin"."""
        ...
