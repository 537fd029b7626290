from __future__ import annotations

import argparse
import json

import pytest

from policy_preview.app.cli import main, parse_label


@pytest.fixture
def policies_file(tmp_path):
    path = tmp_path / "policies.json"
    path.write_text(
        json.dumps(
            {
                "policies": [
                    {"id": "P1", "matchers": [{"name": "team", "operator": "=", "value": "infra"}], "receiver": "ops"},
                    {"id": "P2", "matchers": [{"name": "severity", "operator": "=", "value": "warning"}]},
                    {"id": "P3", "matchers": []},
                ]
            }
        ),
        encoding="utf-8",
    )
    return path


def test_parse_label():
    assert parse_label("team=infra") == ("team", "infra")
    assert parse_label("empty=") == ("empty", "")
    assert parse_label("expr=a=b") == ("expr", "a=b")


def test_parse_label_requires_key_and_equals():
    with pytest.raises(argparse.ArgumentTypeError):
        parse_label("team")
    with pytest.raises(argparse.ArgumentTypeError):
        parse_label("=value")


def test_preview_command_prints_json(policies_file, capsys):
    """Test that the preview command prints both buckets as JSON."""
    exit_code = main(
        ["preview", "--policies", str(policies_file), "--label", "team=infra", "--label", "severity=critical"]
    )

    assert exit_code == 0
    out = capsys.readouterr().out
    output = json.loads(out[out.index("{") :])
    assert [r["policy_id"] for r in output["matching"]] == ["P1", "P3"]
    assert [r["policy_id"] for r in output["available"]] == ["P2"]
    assert output["uses_root_route"] is False


def test_preview_command_reports_invalid_matcher(tmp_path, capsys):
    """Test that an invalid regex exits non-zero with a message."""
    path = tmp_path / "policies.json"
    path.write_text(
        json.dumps({"policies": [{"id": "bad", "matchers": [{"name": "x", "operator": "=~", "value": "("}]}]}),
        encoding="utf-8",
    )

    exit_code = main(["preview", "--policies", str(path), "--label", "x=1"])

    assert exit_code == 2
    assert "Invalid regular expression" in capsys.readouterr().err


def test_preview_command_missing_file(tmp_path, capsys):
    exit_code = main(["preview", "--policies", str(tmp_path / "missing.json")])

    assert exit_code == 2
    assert "not found" in capsys.readouterr().err


def test_no_command_prints_help(capsys):
    assert main([]) == 0
    assert "preview" in capsys.readouterr().out


def test_preview_command_reports_unknown_invalid_matcher_mode(monkeypatch, capsys):
    """Test that a misconfigured invalid matcher mode exits non-zero with a message."""
    from policy_preview.app import factory
    from policy_preview.settings import Settings

    monkeypatch.setattr(factory, "get_settings", lambda: Settings(invalid_matcher_mode="skip"))

    exit_code = main(["preview"])

    assert exit_code == 2
    assert "Invalid matcher mode 'skip'" in capsys.readouterr().err
