# sdkpeek

Show which .NET SDK version a directory uses, for display in a shell prompt.

sdkpeek looks for .NET project files in a directory: `global.json`,
`project.json`, `*.sln`, `*.csproj`, `*.fsproj` or `*.xproj`. File names and
extensions are matched without regard to case. When none are present it
prints nothing. When one is present it prints a short segment such as
`via •NET v1.2.3 `.

## How the version is found

By default sdkpeek estimates the version without running `dotnet --version`,
which is usually about twice as fast:

- A `global.json` in the directory that pins `sdk.version` gives that version.
  If it pins nothing, the latest installed SDK is used.
- A solution file (`*.sln`) means the latest installed SDK is used. This is
  read from the last line of the output of `dotnet --list-sdks`.
- Any other project file makes sdkpeek look for a pinned `global.json` in the
  parent directory and at the root of the enclosing git repository (the
  nearest directory with a `.git` entry). The parent directory is skipped when
  the directory itself is the repository root. If no pinned version turns up,
  the latest installed SDK is used.
- If `dotnet --list-sdks` cannot be run or exits with an error, sdkpeek falls
  back to `dotnet --version`.

Versions are shown with a leading `v`, for example `v2.2.402`. If no version
can be found at all, nothing is printed.

## Installation

```
pip install sdkpeek
```

## Command line

```
sdkpeek
```

This prints the segment for the current directory, for example
`via •NET v1.2.3 `. Options:

- `--path DIR` inspects another directory.
- `--symbol TEXT` replaces the default symbol `•NET `.
- `--no-heuristic` always runs `dotnet --version` instead of estimating.

## Library use

```python
from pathlib import Path

from sdkpeek.dotnet import detect_dotnet_version, get_pinned_sdk_version
from sdkpeek.cli import render

get_pinned_sdk_version('{"sdk": {"version": "1.2.3"}}')   # "v1.2.3"
get_pinned_sdk_version("{}")                               # None

detect_dotnet_version(Path("."), None, True)   # "v1.2.3", or None when no project files
render(Path("."), True, "•NET ")                 # "via •NET v1.2.3 ", or "" when nothing to show
```

Other helpers in `sdkpeek.dotnet` are useful on their own:

- `find_dotnet_files(directory)` lists the relevant files, sorted by path, as
  `DotNetFile` entries, each with a `FileType`.
- `get_dotnet_file_type(path)` classifies a single path.
- `find_repo_root(path)` returns the enclosing git repository root, or `None`.
- `try_find_nearby_global_json(current_dir, repo_root)` searches the parent
  directory and repository root for a pinned version.
- `parse_list_sdks(output)` reads the latest version from `dotnet --list-sdks`
  output.

## What sdkpeek does not do

sdkpeek produces only the .NET segment of a prompt. It does not draw a whole
prompt, add colours or other styling, or read a configuration file; the
directory, symbol and heuristic are chosen through the command-line options
or function arguments above.