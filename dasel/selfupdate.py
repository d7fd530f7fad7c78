"""Finding, downloading and installing newer releases."""

from __future__ import annotations

import json
import os
import re
import shutil
import subprocess
import sys
import urllib.error
import urllib.request
from dataclasses import dataclass, field
from typing import Callable, Optional

from .errors import DaselError

GITHUB_API = "https://api.github.com"

_VERSION_PATTERN = re.compile(r"v([0-9]+)\.([0-9]+)\.([0-9]+)")


@dataclass
class Version:
    """A semantic version."""

    raw: str
    major: int = 0
    minor: int = 0
    patch: int = 0

    def __str__(self) -> str:
        if self.is_development() or (self.major, self.minor, self.patch) == (0, 0, 0):
            return self.raw
        return f"v{self.major}.{self.minor}.{self.patch}"

    def is_development(self) -> bool:
        """Return True for a development build."""
        return self.raw in ("development", "dev") or self.raw.startswith("development-")

    def compare(self, other: "Version") -> int:
        """Return 1 if newer than other, -1 if older, 0 if the same."""
        mine = (self.major, self.minor, self.patch)
        theirs = (other.major, other.minor, other.patch)
        return (mine > theirs) - (mine < theirs)


def version_from_string(version: str) -> Version:
    """Parse a version out of free text."""
    raw = version.strip()
    match = _VERSION_PATTERN.search(raw)
    if match is None:
        return Version(raw=raw)
    major, minor, patch = (int(part) for part in match.groups())
    return Version(raw=raw, major=major, minor=minor, patch=patch)


@dataclass
class ReleaseAsset:
    """A downloadable file attached to a release."""

    url: str = ""
    name: str = ""
    browser_download_url: str = ""


@dataclass
class Release:
    """A published release."""

    url: str = ""
    assets: list[ReleaseAsset] = field(default_factory=list)
    name: str = ""
    tag_name: str = ""

    def find_asset_for_system(self, os_name: str, arch: str) -> Optional[ReleaseAsset]:
        """Return the asset built for the given operating system and architecture."""
        ext = ".exe" if os_name == "windows" else ""
        matches = [f"dasel_{os_name}_{arch}{ext}"]
        if os_name == "darwin":
            matches.append(f"dasel_macos_{arch}{ext}")
        return next(
            (asset for asset in self.assets for name in matches if asset.name == name),
            None,
        )

    def version(self) -> Version:
        """Return the version of the release."""
        return version_from_string(self.tag_name)


def release_from_dict(data: dict) -> Release:
    """Build a release from its decoded JSON description."""
    assets = [
        ReleaseAsset(
            url=asset.get("url", ""),
            name=asset.get("name", ""),
            browser_download_url=asset.get("browser_download_url", ""),
        )
        for asset in data.get("assets") or []
    ]
    return Release(
        url=data.get("url", ""),
        assets=assets,
        name=data.get("name", ""),
        tag_name=data.get("tag_name", ""),
    )


def fetch_github_release(user: str, repo: str, tag: str, timeout: float = 10.0) -> Optional[Release]:
    """Fetch release information; return None if the release is not available."""
    if tag != "latest":
        tag = f"tags/{tag}"
    url = f"{GITHUB_API}/repos/{user}/{repo}/releases/{tag}"
    request = urllib.request.Request(url, method="GET")
    try:
        with urllib.request.urlopen(request, timeout=timeout) as response:
            if response.status != 200:
                return None
            body = response.read()
    except urllib.error.HTTPError:
        return None
    except OSError as err:
        raise DaselError(f"could not perform request to get latest release: {err}") from err
    try:
        data = json.loads(body)
    except ValueError as err:
        raise DaselError(f"could not parse response: {err}") from err
    return release_from_dict(data)


def download_file(url: str, dest: str) -> None:
    """Download the given URL to a local file."""
    with urllib.request.urlopen(url) as response, open(dest, "wb") as out:
        shutil.copyfileobj(response, out)


def execute_cmd(name: str, *args: str) -> bytes:
    """Run a command and return its standard output."""
    return subprocess.run([name, *args], capture_output=True, check=True).stdout


def _executable() -> str:
    return os.path.realpath(sys.argv[0])


@dataclass
class Updater:
    """Replaces the running program with a newer published release."""

    installed_version: str
    owner: str
    repo: str
    timeout: float = 10.0
    fetch_release_fn: Callable[[str, str, str, float], Optional[Release]] = fetch_github_release
    download_file_fn: Callable[[str, str], None] = download_file
    chmod_fn: Callable[[str, int], None] = os.chmod
    execute_cmd_fn: Callable[..., bytes] = execute_cmd
    executable_fn: Callable[[], str] = _executable
    rename_fn: Callable[[str, str], None] = os.replace
    remove_fn: Callable[[str], None] = os.remove

    def find_latest_release(self) -> Optional[Release]:
        """Return the latest published release."""
        return self.fetch_release_fn(self.owner, self.repo, "latest", self.timeout)

    def download_asset(self, asset: ReleaseAsset) -> str:
        """Download the asset next to the working directory and return its path."""
        path = os.path.abspath(asset.name)
        try:
            self.download_file_fn(asset.browser_download_url, path)
        except Exception as err:
            raise DaselError(f"could not download file: {err}") from err
        try:
            self.chmod_fn(path, 0o777)
        except Exception as err:
            raise DaselError(f"could not make executable: {err}") from err
        return path

    def current_version(self) -> Version:
        """Return the version that is installed."""
        return version_from_string(self.installed_version)

    def get_version(self, path: str) -> Version:
        """Return the version reported by the given executable."""
        try:
            output = self.execute_cmd_fn(path, "--version")
        except Exception as err:
            raise DaselError(f"could not get new version: {err}") from err
        if isinstance(output, bytes):
            output = output.decode("utf-8", errors="replace")
        return version_from_string(output)

    def replace(self, path: str) -> None:
        """Move the given executable over the running one."""
        try:
            current_path = self.executable_fn()
        except Exception as err:
            raise DaselError(f"cannot get current executable path: {err}") from err
        try:
            self.rename_fn(path, current_path)
        except Exception as err:
            raise DaselError(f"could not replace old executable: {err}") from err

    def clean_up(self, path: str) -> None:
        """Remove a downloaded file, ignoring failures."""
        try:
            self.remove_fn(path)
        except OSError:
            pass