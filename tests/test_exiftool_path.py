import subprocess
import sys

import pytest

from photo_meta.exif_io.exiftool_path import (
    get_exiftool_executable_name,
    get_exiftool_path,
    get_exiftool_version,
)


@pytest.fixture
def app_dir(monkeypatch, tmp_path):
    d = tmp_path / "app"
    d.mkdir()
    monkeypatch.setattr(sys, "platform", "linux")
    monkeypatch.setattr(sys, "argv", [str(d / "main.py")])
    monkeypatch.delattr(sys, "frozen", raising=False)
    return d


def test_executable_name_per_platform(monkeypatch):
    monkeypatch.setattr(sys, "platform", "win32")
    assert get_exiftool_executable_name() == "exiftool.exe"
    monkeypatch.setattr(sys, "platform", "darwin")
    assert get_exiftool_executable_name() == "exiftool"
    monkeypatch.setattr(sys, "platform", "linux")
    assert get_exiftool_executable_name() == "exiftool"


def test_prefers_binary_next_to_application(app_dir):
    (app_dir / "exiftool").write_text("")
    (app_dir / "resources").mkdir()
    (app_dir / "resources" / "exiftool").write_text("")
    assert get_exiftool_path() == str(app_dir / "exiftool")


def test_falls_back_to_resources_subdirectory(app_dir):
    (app_dir / "resources").mkdir()
    (app_dir / "resources" / "exiftool").write_text("")
    assert get_exiftool_path() == str(app_dir / "resources" / "exiftool")


def test_falls_back_to_bare_name(app_dir):
    assert get_exiftool_path() == "exiftool"


def test_windows_uses_exe_suffix(app_dir, monkeypatch):
    monkeypatch.setattr(sys, "platform", "win32")
    (app_dir / "exiftool").write_text("")  # 非 Windows 命名，忽略
    assert get_exiftool_path() == "exiftool.exe"
    (app_dir / "exiftool.exe").write_text("")
    assert get_exiftool_path() == str(app_dir / "exiftool.exe")


def test_directory_with_tool_name_is_not_a_match(app_dir):
    (app_dir / "exiftool").mkdir()
    assert get_exiftool_path() == "exiftool"


def test_frozen_app_uses_executable_directory(monkeypatch, tmp_path):
    bundle = tmp_path / "bundle"
    (bundle / "resources").mkdir(parents=True)
    (bundle / "resources" / "exiftool").write_text("")
    monkeypatch.setattr(sys, "platform", "linux")
    monkeypatch.setattr(sys, "frozen", True, raising=False)
    monkeypatch.setattr(sys, "executable", str(bundle / "PhotoMeta"))
    monkeypatch.setattr(sys, "argv", [str(tmp_path / "elsewhere" / "x.py")])
    assert get_exiftool_path() == str(bundle / "resources" / "exiftool")


def test_override_wins_when_it_exists(app_dir, tmp_path):
    custom = tmp_path / "custom-exiftool"
    custom.write_text("")
    (app_dir / "exiftool").write_text("")
    assert get_exiftool_path(str(custom)) == str(custom)


def test_missing_override_is_ignored(app_dir, tmp_path):
    assert get_exiftool_path(str(tmp_path / "nope")) == "exiftool"


def test_version_probe(fake_run):
    fake_run.stdout = "13.44\n"
    assert get_exiftool_version("/opt/exiftool") == "13.44"
    assert fake_run.calls == [["/opt/exiftool", "-ver"]]


@pytest.mark.parametrize(
    "exc",
    [FileNotFoundError(2, "No such file"), PermissionError(13, "denied"), subprocess.TimeoutExpired("exiftool", 3)],
)
def test_version_probe_returns_none_when_unusable(fake_run, exc):
    fake_run.exc = exc
    assert get_exiftool_version("exiftool") is None


def test_version_probe_nonzero_exit(fake_run):
    fake_run.returncode = 1
    fake_run.stdout = "13.44"
    assert get_exiftool_version("exiftool") is None
