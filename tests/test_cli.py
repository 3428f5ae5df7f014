import json

import pytest

from phishscore import cli


def test_legitimate_url_exits_zero(capsys):
    assert cli.main(["http://example.com"]) == 0
    out = capsys.readouterr().out
    assert "URL: http://example.com" in out
    assert "Legitimate (score 0)" in out


def test_suspicious_url_exits_one(capsys):
    assert cli.main(["http://example.com", "  http://192.168.1.1/login  "]) == 1
    out = capsys.readouterr().out
    assert "Suspicious Risk: Medium (score 55)" in out


def test_json_output(capsys):
    assert cli.main(["--json", "not a url", "http://example.com"]) == 1
    data = json.loads(capsys.readouterr().out)
    assert [d["verdict"] for d in data] == ["Error: Invalid URL", "Legitimate"]
    assert data[0]["phish_score"] == 100
    assert data[0]["feature_results"] == []


def test_requires_a_url():
    with pytest.raises(SystemExit) as exc_info:
        cli.main([])
    assert exc_info.value.code == 2
