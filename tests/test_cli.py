import subprocess
from unittest import mock

import pytest

from sdkpeek.cli import main, render

LIST_SDKS = "2.1.802 [/usr/share/dotnet/sdk]\n2.2.402 [/usr/share/dotnet/sdk]\n"


def fake_run(cmd, **kwargs):
    if cmd == ["dotnet", "--list-sdks"]:
        return subprocess.CompletedProcess(cmd, 0, stdout=LIST_SDKS, stderr="")
    if cmd == ["dotnet", "--version"]:
        return subprocess.CompletedProcess(cmd, 0, stdout="2.2.402\n", stderr="")
    raise FileNotFoundError(cmd[0])


def pinned_json(version):
    return '\n{\n    "sdk": {\n        "version": "%s"\n    }\n}\n' % version


def touch(root, relative, contents=""):
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(contents)


@pytest.fixture
def dotnet_cli():
    with mock.patch("sdkpeek.dotnet.subprocess.run", fake_run):
        yield


def test_shows_nothing_in_directory_with_zero_relevant_files(tmp_path, dotnet_cli):
    assert render(tmp_path) == ""


@pytest.mark.parametrize(
    "name",
    ["solution.sln", "project.csproj", "project.fsproj", "project.xproj", "project.json"],
)
def test_shows_latest(tmp_path, dotnet_cli, name):
    touch(tmp_path, name)
    assert "•NET v2.2.402" in render(tmp_path)


def test_shows_pinned_in_directory_with_global_json(tmp_path, dotnet_cli):
    touch(tmp_path, "global.json", pinned_json("1.2.3"))
    assert "•NET v1.2.3" in render(tmp_path)


def test_shows_pinned_in_project_below_root_with_global_json(tmp_path, dotnet_cli):
    touch(tmp_path, "global.json", pinned_json("1.2.3"))
    touch(tmp_path, "project/project.csproj")
    assert "•NET v1.2.3" in render(tmp_path / "project")


def test_shows_pinned_in_deeply_nested_project_within_repository(tmp_path, dotnet_cli):
    (tmp_path / ".git").mkdir()
    touch(tmp_path, "global.json", pinned_json("1.2.3"))
    touch(tmp_path, "deep/path/to/project/project.csproj")
    assert "•NET v1.2.3" in render(tmp_path / "deep/path/to/project")


def test_render_full_format(tmp_path, dotnet_cli):
    touch(tmp_path, "solution.sln")
    assert render(tmp_path, True, "N ") == "via N v2.2.402 "


def test_main_prints_segment(tmp_path, dotnet_cli, capsys):
    touch(tmp_path, "global.json", pinned_json("1.2.3"))
    assert main(["--path", str(tmp_path)]) == 0
    assert capsys.readouterr().out == "via •NET v1.2.3 "


def test_main_without_heuristic(tmp_path, dotnet_cli, capsys):
    touch(tmp_path, "global.json", pinned_json("1.2.3"))
    assert main(["--path", str(tmp_path), "--no-heuristic"]) == 0
    assert capsys.readouterr().out == "via •NET v2.2.402 "


def test_main_prints_nothing_for_empty_directory(tmp_path, dotnet_cli, capsys):
    assert main(["--path", str(tmp_path)]) == 0
    assert capsys.readouterr().out == ""