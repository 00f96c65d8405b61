import subprocess

import pytest
from PIL import Image


class FakeRun:
    """代替 subprocess.run：记录命令行，返回预设的 CompletedProcess 或抛出预设异常。"""

    def __init__(self):
        self.calls = []
        self.returncode = 0
        self.stdout = ""
        self.stderr = ""
        self.exc = None

    def __call__(self, cmd, **kwargs):
        self.calls.append(list(cmd))
        if self.exc is not None:
            raise self.exc
        return subprocess.CompletedProcess(cmd, self.returncode, self.stdout, self.stderr)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    # 测试不读用户目录下的真实配置
    path = tmp_path / "settings" / "photo_meta.json"
    monkeypatch.setenv("PHOTO_META_CONFIG", str(path))
    return path


@pytest.fixture
def fake_run(monkeypatch):
    fake = FakeRun()
    monkeypatch.setattr("photo_meta.exif_io.writer.subprocess.run", fake)
    return fake


@pytest.fixture
def image_file(tmp_path):
    p = tmp_path / "sunset.jpg"
    Image.new("RGB", (16, 12), color=(200, 90, 10)).save(p, format="JPEG", quality=85)
    return str(p)
