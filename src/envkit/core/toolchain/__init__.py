from envkit.core.toolchain.selector import detect_platform, select_toolchain
from envkit.core.toolchain.types import Baseline, Platform, ToolchainSpec, llvm_baseline

__all__ = [
    "Baseline",
    "Platform",
    "ToolchainSpec",
    "detect_platform",
    "llvm_baseline",
    "select_toolchain",
]
