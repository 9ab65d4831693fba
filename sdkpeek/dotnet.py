"""Detection of the .NET SDK version that applies to a directory."""

from __future__ import annotations

import json
import logging
import subprocess
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

log = logging.getLogger(__name__)

GLOBAL_JSON_FILE = "global.json"
PROJECT_JSON_FILE = "project.json"

_PROJECT_EXTENSIONS = frozenset({"csproj", "fsproj", "xproj"})


class FileType(Enum):
    """Kinds of files that mark a directory as a .NET project."""

    PROJECT_JSON = "project_json"
    PROJECT_FILE = "project_file"
    GLOBAL_JSON = "global_json"
    SOLUTION_FILE = "solution_file"


@dataclass(frozen=True)
class DotNetFile:
    """A .NET-relevant file found in a directory."""

    path: Path
    file_type: FileType


def get_dotnet_file_type(path: str | Path) -> FileType | None:
    """Classify a path by its name, or return None if it is not relevant."""
    path = Path(path)
    name = path.name.lower()
    if name == GLOBAL_JSON_FILE:
        return FileType.GLOBAL_JSON
    if name == PROJECT_JSON_FILE:
        return FileType.PROJECT_JSON

    extension = path.suffix[1:].lower()
    if extension == "sln":
        return FileType.SOLUTION_FILE
    if extension in _PROJECT_EXTENSIONS:
        return FileType.PROJECT_FILE
    return None


def find_dotnet_files(directory: str | Path) -> list[DotNetFile]:
    """List the .NET-relevant entries of a directory, sorted by path.

    Raises OSError if the directory cannot be read.
    """
    files = []
    for entry in sorted(Path(directory).iterdir()):
        file_type = get_dotnet_file_type(entry)
        if file_type is not None:
            files.append(DotNetFile(entry, file_type))
    return files


def find_repo_root(path: str | Path) -> Path | None:
    """Return the nearest directory at or above path that holds a .git entry."""
    path = Path(path).resolve()
    for candidate in (path, *path.parents):
        if (candidate / ".git").exists():
            return candidate
    return None


def get_pinned_sdk_version(json_text: str) -> str | None:
    """Read the pinned SDK version from global.json text, prefixed with 'v'."""
    try:
        parsed = json.loads(json_text)
    except ValueError:
        return None
    if not isinstance(parsed, dict):
        return None
    sdk = parsed.get("sdk")
    if not isinstance(sdk, dict):
        return None
    version = sdk.get("version")
    if not isinstance(version, str):
        return None
    return f"v{version}"


def get_pinned_sdk_version_from_file(path: str | Path) -> str | None:
    """Read a global.json file and return its pinned SDK version, if any."""
    path = Path(path)
    try:
        json_text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return None
    log.debug("Checking if .NET SDK version is pinned in: %s", path)
    return get_pinned_sdk_version(json_text)


def check_directory_for_global_json(path: str | Path) -> str | None:
    """Return the pinned version from path/global.json, if it exists."""
    global_json_path = Path(path) / GLOBAL_JSON_FILE
    log.debug("Checking if global.json exists at: %s", global_json_path)
    if global_json_path.exists():
        return get_pinned_sdk_version_from_file(global_json_path)
    return None


def try_find_nearby_global_json(
    current_dir: str | Path, repo_root: str | Path | None
) -> str | None:
    """Look for a pinned version in the parent directory or the repository root.

    The parent is skipped when the current directory is the repository root,
    and neither the current directory nor a directory twice is scanned.
    """
    current_dir = Path(current_dir)
    repo_root = Path(repo_root) if repo_root is not None else None

    parent_dir: Path | None = None
    if repo_root != current_dir and current_dir.parent != current_dir:
        parent_dir = current_dir.parent

    check_dirs: list[Path] = []
    for directory in (parent_dir, repo_root):
        if directory is not None and (not check_dirs or check_dirs[-1] != directory):
            check_dirs.append(directory)

    for directory in check_dirs:
        if directory == current_dir:
            continue
        version = check_directory_for_global_json(directory)
        if version is not None:
            return version
    return None


def parse_list_sdks(output: str) -> str | None:
    """Pick the latest SDK version from the output of `dotnet --list-sdks`."""
    lines = [stripped for line in output.splitlines() if (stripped := line.strip())]
    if lines:
        latest = lines[-1]
        bracket = latest.find("[")
        take_until = bracket - 1
        if bracket >= 1 and take_until > 1:
            return f"v{latest[:take_until]}"
    log.warning("Unable to parse the output from `dotnet --list-sdks`.")
    return None


def _exec_cmd(command: str, *args: str) -> str | None:
    """Run a command and return its stdout, or None if it failed to run or succeed."""
    try:
        result = subprocess.run(
            [command, *args], capture_output=True, text=True, check=False
        )
    except OSError:
        return None
    if result.returncode != 0:
        return None
    return result.stdout


def get_version_from_cli() -> str | None:
    """Ask `dotnet --version` for the SDK version."""
    output = _exec_cmd("dotnet", "--version")
    if output is None:
        return None
    return f"v{output.strip()}"


def get_latest_sdk_from_cli() -> str | None:
    """Ask `dotnet --list-sdks` for the latest SDK, falling back to `--version`."""
    output = _exec_cmd("dotnet", "--list-sdks")
    if output is None:
        log.warning(
            "Received a non-success exit code from `dotnet --list-sdks`. "
            "Falling back to `dotnet --version`."
        )
        return get_version_from_cli()
    return parse_list_sdks(output)


def estimate_dotnet_version(
    files: list[DotNetFile],
    current_dir: str | Path,
    repo_root: str | Path | None,
) -> str | None:
    """Estimate the SDK version from the files present, without `dotnet --version`."""
    relevant = next(
        (f for f in files if f.file_type is FileType.GLOBAL_JSON), None
    ) or next((f for f in files if f.file_type is FileType.SOLUTION_FILE), None)
    if relevant is None:
        relevant = next(iter(files), None)
    if relevant is None:
        return None

    if relevant.file_type is FileType.GLOBAL_JSON:
        return get_pinned_sdk_version_from_file(relevant.path) or get_latest_sdk_from_cli()
    if relevant.file_type is FileType.SOLUTION_FILE:
        return get_latest_sdk_from_cli()
    return try_find_nearby_global_json(current_dir, repo_root) or get_latest_sdk_from_cli()


def detect_dotnet_version(
    current_dir: str | Path,
    repo_root: str | Path | None = None,
    heuristic: bool = True,
) -> str | None:
    """Return the SDK version for a directory, or None if it is not a .NET directory."""
    try:
        files = find_dotnet_files(current_dir)
    except OSError:
        return None
    if not files:
        return None
    if heuristic:
        return estimate_dotnet_version(files, current_dir, repo_root)
    return get_version_from_cli()