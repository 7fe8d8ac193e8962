from pathlib import Path

import pytest

from petcare_web.config import ServerConfig
from petcare_web.server.app import create_app

INDEX_HTML = b"<html>root</html>"

# 1x1 transparent PNG
PNG_BYTES = bytes.fromhex(
    "89504e470d0a1a0a0000000d4948445200000001000000010806000000"
    "1f15c4890000000d4944415478da63f8cf00000301010018dd8db00000"
    "000049454e44ae426082"
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep a PORT from the outer environment out of the tests."""
    monkeypatch.delenv("PORT", raising=False)


@pytest.fixture
def assets_dir(tmp_path: Path) -> Path:
    """A small Flutter-style web build under ``tmp_path/build/web``."""
    root = tmp_path / "build" / "web"
    root.mkdir(parents=True)
    (root / "index.html").write_bytes(INDEX_HTML)
    (root / "style.css").write_text("body{}")
    (root / "main.dart.js").write_text("console.log('main');")
    (root / "manifest.json").write_text('{"name": "PetCare"}')

    (root / "icons").mkdir()
    (root / "icons" / "Icon-192.png").write_bytes(PNG_BYTES)

    fonts = root / "assets" / "fonts"
    fonts.mkdir(parents=True)
    (fonts / "MaterialIcons-Regular.otf").write_bytes(b"OTTO\x00\x01\x02")

    (root / "docs").mkdir()
    (root / "docs" / "index.html").write_text("<html>docs</html>")
    (root / "empty").mkdir()

    # outside the assets root, must never be served
    (tmp_path / "secret.txt").write_text("secret")
    return root


@pytest.fixture
def index_html() -> bytes:
    return INDEX_HTML


@pytest.fixture
def png_bytes() -> bytes:
    return PNG_BYTES


@pytest.fixture
def app(assets_dir: Path):
    return create_app(ServerConfig(assets_dir=assets_dir))


@pytest.fixture
def client(app):
    with app.test_client() as client:
        yield client
