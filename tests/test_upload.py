import io
import os

import pytest
from werkzeug.datastructures import FileStorage

from services.errors import MissingUploadError
from utils.upload import UploadReceiver


def make_file(name, content=b"bytes"):
    return FileStorage(stream=io.BytesIO(content), filename=name)


def test_save_prefixes_timestamp(tmp_path):
    receiver = UploadReceiver(str(tmp_path / "scratch"))
    path = receiver.save(make_file("pack shot.jpg", b"xyz"))
    name = os.path.basename(path)
    stamp, rest = name.split("-", 1)
    assert stamp.isdigit()
    assert rest == "pack_shot.jpg"
    with open(path, "rb") as f:
        assert f.read() == b"xyz"


def test_save_sanitizes_path_traversal(tmp_path):
    receiver = UploadReceiver(str(tmp_path))
    path = receiver.save(make_file("../../etc/passwd"))
    assert os.path.dirname(path) == str(tmp_path)


def test_save_falls_back_when_name_sanitizes_away(tmp_path):
    path = UploadReceiver(str(tmp_path)).save(make_file("../.."))
    assert path.endswith("-upload")


@pytest.mark.parametrize("upload", [None, make_file("")])
def test_missing_upload_raises(tmp_path, upload):
    with pytest.raises(MissingUploadError):
        UploadReceiver(str(tmp_path)).save(upload)


def test_discard_removes_file(tmp_path):
    receiver = UploadReceiver(str(tmp_path))
    path = receiver.save(make_file("a.png"))
    receiver.discard(path)
    assert not os.path.exists(path)
    receiver.discard(path)
