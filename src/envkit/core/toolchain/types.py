"""Toolchain data structures."""

from dataclasses import dataclass
from enum import StrEnum


class Platform(StrEnum):
    """Host operating systems the toolchain selection branches on."""

    LINUX = "linux"
    DARWIN = "darwin"
    OTHER = "other"


@dataclass(frozen=True)
class Baseline:
    """Precomputed compiler environment that selection starts from.

    Produced by an LLVM environment builder and treated as opaque input.
    `default_linker` is whatever linker the compiler driver picks on its own.
    """

    compiler_frontend: str
    standard_library: str
    default_linker: str
    compiler_runtime: str


@dataclass(frozen=True)
class ToolchainSpec:
    """The single composed build environment handed to the build system."""

    compiler_frontend: str
    standard_library: str
    linker: str
    platform: Platform
    compiler_runtime: str


def llvm_baseline() -> Baseline:
    """Clang with libc++ and compiler-rt, linker left to the driver."""
    return Baseline(
        compiler_frontend="clang",
        standard_library="libc++",
        default_linker="default",
        compiler_runtime="compiler-rt",
    )
