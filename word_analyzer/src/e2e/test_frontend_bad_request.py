from pathlib import Path
import pytest
from analyzer.engine import Engine
from analyzer_web.web import create_app

@pytest.fixture
def engine(tmp_path: Path):
    p = tmp_path / "words.txt"
    p.write_text("apple", encoding="utf-8")
    eng = Engine(p); eng.start()
    yield eng
    eng.shutdown()

@pytest.mark.e2e
@pytest.mark.parametrize("body", [{}, {"text": None}, {"text": 42}, ["text"]])
def test_missing_or_invalid_text_is_400(engine, body):
    client = create_app(engine).test_client()
    rv = client.post("/analyze", json=body)
    assert rv.status_code == 400
    assert "error" in rv.get_json()
    engine.store.drain()
    assert engine.store.snapshot() == ["apple"]

@pytest.mark.e2e
def test_malformed_json_is_400(engine):
    client = create_app(engine).test_client()
    rv = client.post("/analyze", data="{not json", content_type="application/json")
    assert rv.status_code == 400

@pytest.mark.e2e
def test_only_post_analyze_is_routed(engine):
    client = create_app(engine).test_client()
    assert client.get("/analyze").status_code == 405
    assert client.post("/other", json={"text": "a"}).status_code == 404
