"""Shared fixtures: a small bundle directory and an HTTP client over it."""

import pytest
from fastapi.testclient import TestClient

from asset_bundle import AssetBundle
from web_app import create_app


INDEX_HTML = b"<!doctype html>\n<html><head><title>Bridge</title></head><body><div id=\"root\"></div></body></html>\n"
APP_JS = b"console.log('bridge');\n"
APP_CSS = b"body{margin:0}\n"
LOGO = bytes(range(256))

FILES = {
    "index.html": INDEX_HTML,
    "assets/app.js": APP_JS,
    "assets/app.css": APP_CSS,
    "assets/logo.bin": LOGO,
    "docs/index.html": b"<h1>docs</h1>",
    "empty/.keep": b"",
    ".well-known/security.txt": b"Contact: mailto:security@example.com\n",
}


def write_tree(root, files):
    for name, data in files.items():
        target = root.joinpath(*name.split("/"))
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(data)
    return root


@pytest.fixture
def dist_dir(tmp_path):
    return write_tree(tmp_path / "dist", FILES)


@pytest.fixture
def bundle(dist_dir):
    return AssetBundle.from_directory(dist_dir)


@pytest.fixture
def client(bundle):
    return TestClient(create_app(bundle))
