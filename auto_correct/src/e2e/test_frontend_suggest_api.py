import json
from pathlib import Path
import pytest
import frontend
import frontend.web as webmod
from frontend.__main__ import main as cli_main
from frontend.web import app as flask_app
from autocorrect.engine import Engine
from autocorrect import config as CFG
from autocorrect.models import EngineConfig

def _seed(tmp: Path) -> str:
    p = tmp / "small.txt"
    p.write_text("4\ncat\ncats\ncot\ndog\n", encoding="utf-8")
    return str(p)

@pytest.fixture
def client(tmp_path: Path, monkeypatch):
    eng = Engine(EngineConfig(gram=2, short_len=2))
    eng.build_from_file(_seed(tmp_path))
    monkeypatch.setattr(webmod, "_engine", eng)
    yield flask_app.test_client()
    eng.shutdown()

@pytest.mark.e2e
def test_api_suggest_json(client):
    rv = client.get("/api/suggest?q=coat")
    assert rv.status_code == 200
    data = rv.get_json()
    assert data == {"query": "coat", "exact": False, "suggestions": ["cot", "cat", "cats"]}

@pytest.mark.e2e
def test_api_exact_and_empty(client):
    assert client.get("/api/suggest?q=dog").get_json()["exact"] is True
    assert client.get("/api/suggest?q=").get_json()["suggestions"] == []
    assert client.get("/api/suggest?q=c%40t").get_json()["suggestions"] == []

@pytest.mark.e2e
def test_health_and_home(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.get_json() == {"ok": True, "words": 4}
    home = client.get("/")
    assert home.status_code == 200
    assert "autocorrect" in home.data.decode("utf-8").lower()

@pytest.mark.e2e
def test_uninitialized_engine(monkeypatch):
    monkeypatch.setattr(webmod, "_engine", None)
    c = flask_app.test_client()
    assert c.get("/health").status_code == 503
    assert c.get("/api/suggest?q=coat").status_code == 503

@pytest.mark.e2e
def test_module_api(tmp_path: Path):
    frontend.initialize(_seed(tmp_path), config=EngineConfig(gram=2, short_len=2))
    assert frontend.suggest("coat").suggestions == ("cot", "cat", "cats")
    assert frontend.suggest("cat").is_exact_match

@pytest.mark.e2e
def test_cli_single_query_json(tmp_path: Path, capsys):
    rc = cli_main([_seed(tmp_path), "--gram", "2", "--short-len", "2", "--q", "coat", "--json"])
    assert rc == 0
    out = json.loads(capsys.readouterr().out)
    assert out == {"query": "coat", "exact": False, "suggestions": ["cot", "cat", "cats"]}

@pytest.mark.e2e
def test_cli_repl(tmp_path: Path, capsys, monkeypatch):
    answers = iter(["cax", "dog", ""])
    monkeypatch.setattr("builtins.input", lambda _prompt="": next(answers))
    rc = cli_main([_seed(tmp_path), "--repl"])
    assert rc == 0
    out = capsys.readouterr().out
    assert "Did you mean:" in out and "1   cat" in out
    assert "'dog' is a dictionary word." in out

@pytest.mark.e2e
def test_web_main_accepts_extended_alphabet(tmp_path: Path, monkeypatch):
    p = tmp_path / "hy.txt"
    p.write_text("2\nwell-known\ncat\n", encoding="utf-8")
    seen = {}
    def fake_run(**kwargs):
        seen["words"] = len(webmod._engine.index)
    monkeypatch.setattr(webmod, "_engine", None)
    monkeypatch.setattr(flask_app, "run", fake_run)
    assert webmod.main([str(p), "--extended"]) == 0
    assert seen["words"] == 2
    assert webmod._engine.config.alphabet == CFG.EXTENDED_ALPHABET

@pytest.mark.e2e
def test_home_page_renders_words_as_text(client):
    html = client.get("/").data.decode("utf-8")
    assert "textContent" in html
    assert "<span class=\"exact\">“${word}”" not in html
    assert "`<li>${w}</li>`" not in html
