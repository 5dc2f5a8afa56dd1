import json

import httpx
import pytest
import pytest_asyncio

from home_service_api.app.core.config import settings
from home_service_api.app.main import app


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    """Point the record store at an empty per-test directory."""
    monkeypatch.setattr(settings, "data_dir", str(tmp_path))
    return tmp_path


@pytest.fixture
def write_collection(data_dir):
    def _write(name, data):
        (data_dir / f"{name}.json").write_text(json.dumps(data), encoding="utf-8")
    return _write


@pytest.fixture
def read_collection(data_dir):
    def _read(name):
        return json.loads((data_dir / f"{name}.json").read_text(encoding="utf-8"))
    return _read


@pytest_asyncio.fixture
async def client(data_dir):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
