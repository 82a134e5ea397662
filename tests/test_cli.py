"""
Smoke tests for the command line entry point.
"""

import json
import sys

import pytest

import main
from conftest import make_profile_dict


def _run(monkeypatch, *argv):
    monkeypatch.setattr(sys, "argv", ["ideaforge", *argv])
    main.cli()


class TestCLI:
    def test_generate_from_techs(self, monkeypatch, capsys):
        _run(monkeypatch, "generate", "--tech", "React", "--interest", "Web Development",
             "--seed", "1", "--json")
        data = json.loads(capsys.readouterr().out)
        assert data["category"] == "web"
        assert data["stack"] == ["React", "JavaScript", "HTML/CSS"]
        assert data["timeEstimate"] == "1-2 weeks"

    def test_generate_from_profile_and_export(self, monkeypatch, capsys, tmp_path):
        profile_path = tmp_path / "profile.json"
        profile_path.write_text(json.dumps(make_profile_dict()))
        _run(monkeypatch, "generate", "--profile", str(profile_path), "--category", "game",
             "--export", str(tmp_path))

        out = capsys.readouterr().out
        assert "Multiplayer Strategy Game" in out
        exported = json.loads((tmp_path / "multiplayer-strategy-game.json").read_text())
        assert exported["category"] == "game"
        assert exported["difficulty"] == "intermediate"

    def test_invalid_profile_exits(self, monkeypatch, capsys, tmp_path):
        profile_path = tmp_path / "profile.json"
        profile_path.write_text(json.dumps(make_profile_dict(stacks=[])))
        with pytest.raises(SystemExit) as exc:
            _run(monkeypatch, "generate", "--profile", str(profile_path))
        assert exc.value.code == 1
        assert "stacks" in capsys.readouterr().err

    def test_popularity_from_profile(self, monkeypatch, capsys, tmp_path):
        profile_path = tmp_path / "profile.json"
        profile_path.write_text(json.dumps(make_profile_dict()))
        _run(monkeypatch, "popularity", "--profile", str(profile_path), "--limit", "5")

        out = capsys.readouterr().out
        assert "Blended 1 external projects" in out
        # React in the only project: 100 * 0.7 + 85 * 0.3 = 95.5
        assert "React: 96" in out

    @pytest.mark.parametrize("limit", ["0", "-3"])
    def test_popularity_limit_must_be_positive(self, monkeypatch, capsys, limit):
        with pytest.raises(SystemExit) as exc:
            _run(monkeypatch, "popularity", "--limit", limit)
        assert exc.value.code == 2
        assert "must be >= 1" in capsys.readouterr().err

    def test_options(self, monkeypatch, capsys):
        _run(monkeypatch, "options")
        assert "Web Development" in json.loads(capsys.readouterr().out)["interests"]

    def test_no_command(self, monkeypatch):
        with pytest.raises(SystemExit):
            _run(monkeypatch)
