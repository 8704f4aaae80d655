"""Test fixtures — temporary served root and an httpx client bound to the app."""

import os

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from shs.config import Settings
from shs.main import create_app

T1_NS = 1_600_000_000 * 1_000_000_000
T2_NS = 1_700_000_000 * 1_000_000_000

def set_mtime(path, ns: int) -> None:
    os.utime(path, ns=(ns, ns))

@pytest.fixture
def root(tmp_path):
    """Served root with ``docs/{a.txt,b.txt,img/}`` and an empty directory."""
    served = tmp_path / "root"
    docs = served / "docs"
    (docs / "img").mkdir(parents=True)
    (docs / "b.txt").write_bytes(b"x" * 10)
    (docs / "a.txt").write_bytes(b"x" * 20)
    set_mtime(docs / "b.txt", T1_NS)
    set_mtime(docs / "a.txt", T2_NS)
    (served / "empty").mkdir()
    (served / "hello.txt").write_text("hello")
    return served

@pytest.fixture
def outside(tmp_path):
    """A directory next to the served root that must never be reachable."""
    secret_dir = tmp_path / "outside"
    secret_dir.mkdir()
    (secret_dir / "secret.txt").write_text("top secret")
    return secret_dir

@pytest.fixture
def t1_ns():
    """mtime of docs/b.txt."""
    return T1_NS

@pytest.fixture
def t2_ns():
    """mtime of docs/a.txt."""
    return T2_NS

@pytest.fixture
def settings(root):
    return Settings(root=root)

@pytest.fixture
def client_for():
    """Build an httpx client for an app with custom settings."""

    def _make(settings: Settings) -> AsyncClient:
        transport = ASGITransport(app=create_app(settings))
        return AsyncClient(transport=transport, base_url="http://test")

    return _make

@pytest_asyncio.fixture
async def client(settings, client_for):
    async with client_for(settings) as c:
        yield c
