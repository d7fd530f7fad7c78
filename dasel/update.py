"""Updating the running program to the latest release."""

from __future__ import annotations

import platform
import re
import sys
from typing import Optional, TextIO

from .errors import DaselError
from .selfupdate import Updater


class HaveLatestVersionError(DaselError):
    """Raised when the latest version is already installed."""

    def __init__(self) -> None:
        super().__init__("you already have the latest version")


class NewerVersionError(DaselError):
    """Raised when the installed version is newer than the latest release."""

    def __init__(self) -> None:
        super().__init__("current version is newer than the latest release")


class IgnoredDevError(DaselError):
    """Raised when a development build is updated without asking for it."""

    def __init__(self) -> None:
        super().__init__("ignoring update for development version")


_ARCH_NAMES = {
    "x86_64": "amd64",
    "amd64": "amd64",
    "aarch64": "arm64",
    "arm64": "arm64",
    "i386": "386",
    "i686": "386",
    "x86": "386",
    "armv6l": "arm",
    "armv7l": "arm",
}


def _system_name() -> str:
    name = sys.platform
    if name.startswith("linux"):
        return "linux"
    if name.startswith("win"):
        return "windows"
    return re.sub(r"\d+$", "", name)


def _arch_name() -> str:
    machine = platform.machine().lower()
    return _ARCH_NAMES.get(machine, machine)


def run_update(
    updater: Updater,
    out: TextIO,
    update_development: bool = False,
    system: Optional[str] = None,
    arch: Optional[str] = None,
) -> None:
    """Replace the running program with the latest release, reporting to ``out``."""
    system = system or _system_name()
    arch = arch or _arch_name()

    current = updater.current_version()
    out.write(f"Updating...\nCurrent version: {current}\n")

    if current.is_development() and not update_development:
        raise IgnoredDevError()

    try:
        release = updater.find_latest_release()
    except DaselError as err:
        raise DaselError(f"could not find latest release: {err}") from err
    if release is None:
        raise DaselError("could not find latest release")

    release_version = release.version()
    out.write(f"Release version: {release_version}\n")

    if not current.is_development():
        comparison = current.compare(release_version)
        if comparison > 0:
            raise NewerVersionError()
        if comparison == 0:
            raise HaveLatestVersionError()

    asset = release.find_asset_for_system(system, arch)
    if asset is None:
        raise DaselError(f"could not find asset for {system} {arch}")

    try:
        download_path = updater.download_asset(asset)
    except DaselError as err:
        raise DaselError(f"could not download asset: {err}") from err

    try:
        try:
            latest = updater.get_version(download_path)
        except DaselError as err:
            raise DaselError(f"could not get version information: {err}") from err
        out.write(f"New version: {latest}\n")
        updater.replace(download_path)
        out.write("Successfully updated\n")
    finally:
        updater.clean_up(download_path)