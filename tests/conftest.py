import os

import pytest
from fastapi.testclient import TestClient

from app.core import config
from app.services.document_store import DocumentStore
from app.services.template_renderer import TemplateRenderer

SAMPLE_XML = """<?xml version="1.0" encoding="UTF-8"?>
<db>
	<nextId>3</nextId>
	<user>
		<name>alice</name>
		<address>alice@example.com</address>
	</user>
	<user>
		<name>bob</name>
		<address>bob@example.com</address>
	</user>
	<part>
		<name>core</name>
		<id>1</id>
		<bug>
			<id>0</id>
			<subject>Crash on startup</subject>
			<change>
				<when>2024-03-01T09:30:00.123456789+01:00</when>
				<who>alice</who>
				<status>1</status>
				<comment>Reproduced</comment>
			</change>
			<change>
				<when>2024-03-02T10:00:00Z</when>
				<who>bob</who>
				<status>2</status>
				<comment>Patched</comment>
			</change>
		</bug>
		<bug>
			<id>2</id>
			<subject>Slow save</subject>
		</bug>
	</part>
	<part>
		<name>ui</name>
		<id>7</id>
		<bug>
			<id>1</id>
			<subject>Button &amp; label misaligned</subject>
		</bug>
	</part>
</db>
"""

EMPTY_XML = """<?xml version="1.0" encoding="UTF-8"?>
<db>
	<nextId>0</nextId>
	<part>
		<name>core</name>
		<id>1</id>
	</part>
</db>
"""


def _write_store(tmp_path, content):
    path = tmp_path / "bugs.xml"
    path.write_text(content, encoding="utf-8")
    store = DocumentStore(str(path))
    store.load()
    return store


@pytest.fixture
def sample_store(tmp_path):
    return _write_store(tmp_path, SAMPLE_XML)


@pytest.fixture
def empty_store(tmp_path):
    return _write_store(tmp_path, EMPTY_XML)


@pytest.fixture
def renderer():
    return TemplateRenderer(config.TEMPLATE_DIR)


def _client(store, renderer):
    from main import create_app
    app = create_app(
        store=store,
        renderer=renderer,
        static_dir=os.path.join(config.PROJECT_ROOT, "static"),
    )
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def client(sample_store, renderer):
    with _client(sample_store, renderer) as c:
        yield c


@pytest.fixture
def empty_client(empty_store, renderer):
    with _client(empty_store, renderer) as c:
        yield c
