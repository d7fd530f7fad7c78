"""The version of dasel that is running."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

VERSION = "development"


def resolve_version(base, build_version):
    """Combine the configured version with the installed build version."""
    if base != "development":
        return base
    if build_version in (None, "", "(devel)"):
        return base
    return f"{base}-{build_version}"


def current_version():
    """Return the version string of the running program."""
    try:
        build_version = version("dasel")
    except PackageNotFoundError:
        build_version = None
    return resolve_version(VERSION, build_version)