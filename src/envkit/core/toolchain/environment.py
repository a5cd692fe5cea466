"""Render a ToolchainSpec as build-system environment variables."""

from envkit.core.toolchain.types import ToolchainSpec

_CXX_DRIVERS = {
    "clang": "clang++",
    "gcc": "g++",
}


def cxx_driver(compiler_frontend: str) -> str:
    """Return the C++ driver paired with a C compiler frontend."""
    return _CXX_DRIVERS.get(compiler_frontend, compiler_frontend)


def toolchain_environment(spec: ToolchainSpec) -> dict[str, str]:
    """Environment consumed by make/CMake style builds and Cargo.

    The linker is only forced when the spec names something other than the
    driver's default.
    """
    link_args: list[str] = [f"-rtlib={spec.compiler_runtime}"]
    if spec.linker != "default":
        link_args.insert(0, f"-fuse-ld={spec.linker}")

    rustflags = [f"-C linker={spec.compiler_frontend}"]
    rustflags.extend(f"-C link-arg={arg}" for arg in link_args)

    return {
        "CC": spec.compiler_frontend,
        "CXX": cxx_driver(spec.compiler_frontend),
        "CXXFLAGS": f"-stdlib={spec.standard_library}",
        "LDFLAGS": " ".join(link_args),
        "RUSTFLAGS": " ".join(rustflags),
    }
