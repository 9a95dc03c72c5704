import io
import pytest
from PIL import Image

from app import create_app
from services.analyzer import MedicineAnalyzer
from services.normalizer import ResponseNormalizer
from utils.config import Config
from tests.fakes import FakeClient


@pytest.fixture
def config(tmp_path, monkeypatch):
    monkeypatch.delenv("AI_PROVIDER", raising=False)
    cfg = Config()
    cfg.UPLOAD_DIR = str(tmp_path / "uploads")
    cfg.DELETE_UPLOADS = False
    cfg.STRICT_SCHEMA = False
    return cfg


@pytest.fixture
def fake_client():
    return FakeClient()


@pytest.fixture
def app(config, fake_client):
    analyzer = MedicineAnalyzer(fake_client, ResponseNormalizer())
    app = create_app(analyzer=analyzer, config=config)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def png_bytes():
    buf = io.BytesIO()
    Image.new("RGB", (4, 4), color="white").save(buf, format="PNG")
    return buf.getvalue()
