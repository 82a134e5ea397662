"""
Tests for profile loading/validation, the model wire shape, and idea
delivery (export document, saved-idea filter).
"""

import json
from datetime import datetime, timezone

import pytest

from conftest import make_profile, make_profile_dict
from delivery.output import (
    deliver_cli,
    export_filename,
    export_idea,
    export_json,
    filter_ideas,
    save_idea,
    share_text,
)
from models import (
    Difficulty,
    GenerationFilters,
    InvalidProfileError,
    ProjectIdea,
    TechCategory,
    UserProfile,
)
from profiles.loader import (
    load_profile,
    parse_profile,
    quick_profile,
    save_profile,
    validate_profile_dict,
)
from profiles.options import category_for, options_summary


def _make_idea(**overrides) -> ProjectIdea:
    base = dict(
        id="idea-1718000000000-abc123def",
        title="Interactive Dashboard Builder",
        description="Create a drag-and-drop dashboard builder. Focus on core functionality with simple UI",
        stack=["React", "JavaScript", "HTML/CSS"],
        difficulty=Difficulty.BEGINNER,
        features=["Drag-and-drop", "Charts", "Widgets"],
        time_estimate="1-2 weeks",
        category="web",
        tags=["dashboard", "beginner"],
        created_at=datetime(2024, 6, 10, 8, 0, tzinfo=timezone.utc),
    )
    base.update(overrides)
    return ProjectIdea(**base)


# ──────────────────────────────────────────────
# Validation
# ──────────────────────────────────────────────

class TestValidateProfileDict:
    def test_valid(self):
        assert validate_profile_dict(make_profile_dict()) == []

    def test_bad_enums(self):
        errors = validate_profile_dict(make_profile_dict(developerType="wizard", skillLevel="guru"))
        assert any("developerType" in e for e in errors)
        assert any("skillLevel" in e for e in errors)

    def test_empty_stacks(self):
        errors = validate_profile_dict(make_profile_dict(stacks=[]))
        assert any("stacks" in e for e in errors)

    def test_duplicate_stack(self):
        errors = validate_profile_dict(make_profile_dict(stacks=[{"name": "Go"}, {"name": "Go"}]))
        assert any("duplicate" in e for e in errors)

    def test_stack_fields(self):
        errors = validate_profile_dict(make_profile_dict(stacks=[
            {"name": ""}, {"name": "Go", "category": "embedded"}, {"name": "Rust", "proficiency": "god"}, "x",
        ]))
        assert len(errors) == 4

    def test_interests_must_be_strings(self):
        errors = validate_profile_dict(make_profile_dict(interests="Web Development"))
        assert any("interests" in e for e in errors)

    def test_external_project_entries(self):
        errors = validate_profile_dict(make_profile_dict(externalProjects=[
            {"name": "x", "technologies": []},
            {"id": "p2", "technologies": "React"},
            {"id": "p3", "technologies": ["React", 3]},
            "https://example.com",
        ]))
        assert errors == [
            "externalProjects[0] missing field: id",
            "externalProjects[1] technologies must be an array of strings",
            "externalProjects[2] technologies must be an array of strings",
            "externalProjects[3] must be an object",
        ]

    def test_external_projects_not_a_list(self):
        errors = validate_profile_dict(make_profile_dict(externalProjects={"id": "p1"}))
        assert errors == ["externalProjects must be an array"]

    def test_social_connection_entries(self):
        errors = validate_profile_dict(make_profile_dict(socialConnections=[
            {"connected": True}, {"provider": "myspace"}, ["github"],
        ]))
        assert len(errors) == 3
        assert "socialConnections[0] provider" in errors[0]
        assert "'myspace'" in errors[1]
        assert errors[2] == "socialConnections[2] must be an object"

    def test_bad_timestamps(self):
        d = make_profile_dict(createdAt="last tuesday")
        d["externalProjects"][0]["lastFetched"] = "soon"
        errors = validate_profile_dict(d)
        assert any(e.startswith("createdAt") for e in errors)
        assert any("lastFetched" in e for e in errors)

    def test_bad_entries_raise_invalid_profile(self):
        d = make_profile_dict(externalProjects=[{"name": "x", "technologies": []}])
        with pytest.raises(InvalidProfileError, match="externalProjects"):
            parse_profile(d)

    def test_parse_raises_with_all_errors(self):
        with pytest.raises(InvalidProfileError, match="skillLevel") as exc:
            parse_profile(make_profile_dict(skillLevel="x", stacks=[]))
        assert "stacks" in str(exc.value)

    def test_parse_non_object(self):
        with pytest.raises(InvalidProfileError):
            parse_profile([1, 2])


# ──────────────────────────────────────────────
# Wire shape
# ──────────────────────────────────────────────

class TestProfileWireShape:
    def test_from_browser_shape(self):
        profile = parse_profile(make_profile_dict())
        assert profile.skill_level == Difficulty.INTERMEDIATE
        assert profile.technology_names == ["React", "Node.js"]
        assert profile.stacks[0].popularity == 85
        assert profile.stacks[1].popularity is None
        assert profile.created_at == datetime(2024, 6, 10, 8, 0, tzinfo=timezone.utc)
        assert profile.external_projects[0].technologies == ["React", "Express.js"]
        assert profile.social_connections[0].username == "user_github"

    def test_round_trip(self):
        profile = parse_profile(make_profile_dict())
        again = UserProfile.from_dict(profile.to_dict())
        assert again == profile

    def test_optional_sections_missing(self):
        d = make_profile_dict()
        del d["socialConnections"]
        del d["externalProjects"]
        del d["createdAt"]
        profile = parse_profile(d)
        assert profile.external_projects == []
        assert profile.created_at is not None

    def test_save_and_load(self, tmp_path):
        path = tmp_path / "nested" / "profile.json"
        save_profile(parse_profile(make_profile_dict()), path)
        loaded = load_profile(path)
        assert loaded.id == "1718000000000"
        assert json.loads(path.read_text())["skillLevel"] == "intermediate"

    def test_load_missing_file(self, tmp_path):
        with pytest.raises(InvalidProfileError, match="not found"):
            load_profile(tmp_path / "nope.json")

    def test_load_bad_json(self, tmp_path):
        path = tmp_path / "p.json"
        path.write_text("{not json")
        with pytest.raises(InvalidProfileError, match="not valid JSON"):
            load_profile(path)

    def test_filters_from_dict(self):
        f = GenerationFilters.from_dict({"difficulty": "advanced", "category": "", "timeEstimate": None})
        assert f == GenerationFilters(difficulty=Difficulty.ADVANCED)
        assert GenerationFilters.from_dict(None) == GenerationFilters()


# ──────────────────────────────────────────────
# Options / quick profiles
# ──────────────────────────────────────────────

class TestOptions:
    def test_category_for(self):
        assert category_for("Flask") == TechCategory.BACKEND
        assert category_for("Expo") == TechCategory.MOBILE
        assert category_for("Elm") == TechCategory.OTHER

    def test_summary(self):
        summary = options_summary()
        assert summary["technologies"]["ai-ml"][0] == "TensorFlow"
        assert len(summary["interests"]) == 18
        assert len(summary["goals"]) == 12
        assert set(summary["developerTypes"]) == {"self-taught", "bootcamp", "professional", "student"}
        assert summary["socialProviders"] == ["github", "gmail", "linkedin", "discord"]

    def test_quick_profile(self):
        profile = quick_profile(["React", "Flask", "React"], "advanced", ["Mobile Apps"])
        assert profile.technology_names == ["React", "Flask"]
        assert profile.stacks[1].category == TechCategory.BACKEND
        assert profile.skill_level == Difficulty.ADVANCED
        assert profile.interests == ["Mobile Apps"]

    def test_quick_profile_needs_tech(self):
        with pytest.raises(InvalidProfileError):
            quick_profile([])


# ──────────────────────────────────────────────
# Delivery
# ──────────────────────────────────────────────

class TestExport:
    def test_export_shape(self):
        text = export_json(_make_idea())
        data = json.loads(text)
        assert list(data) == [
            "title", "description", "stack", "features", "timeEstimate", "difficulty", "category",
        ]
        assert data["difficulty"] == "beginner"
        assert text.splitlines()[1] == '  "title": "Interactive Dashboard Builder",'

    def test_non_ascii_kept(self):
        text = export_json(_make_idea(title="Café Tracker"))
        assert "Café" in text

    def test_filename(self):
        assert export_filename(_make_idea()) == "interactive-dashboard-builder.json"
        assert export_filename(_make_idea(title="Habit  Tracker\tApp")) == "habit-tracker-app.json"

    def test_export_to_directory(self, tmp_path):
        path = export_idea(_make_idea(), tmp_path)
        assert path == tmp_path / "interactive-dashboard-builder.json"
        assert json.loads(path.read_text(encoding="utf-8"))["timeEstimate"] == "1-2 weeks"

    def test_export_to_file(self, tmp_path):
        path = export_idea(_make_idea(), tmp_path / "out" / "idea.json")
        assert path.exists()


class TestSavedIdeas:
    def test_save_idea(self):
        idea = _make_idea()
        saved = save_idea(idea, notes="weekend project")
        assert saved.id == idea.id
        assert saved.is_favorite is False
        d = saved.to_dict()
        assert d["notes"] == "weekend project"
        assert d["isFavorite"] is False
        assert "savedAt" in d

    def test_share_text(self):
        text = share_text(_make_idea())
        assert text.endswith("Tech Stack: React, JavaScript, HTML/CSS")

    def test_filter_ideas(self):
        ideas = [
            _make_idea(id="a"),
            _make_idea(id="b", title="Multiplayer Strategy Game", description="Turn-based",
                       category="game", difficulty=Difficulty.ADVANCED),
            _make_idea(id="c", title="Habit Tracker", description="A DASHBOARD of habits",
                       category="mobile"),
        ]
        assert [i.id for i in filter_ideas(ideas)] == ["a", "b", "c"]
        assert [i.id for i in filter_ideas(ideas, search="dashboard")] == ["a", "c"]
        assert [i.id for i in filter_ideas(ideas, difficulty="advanced")] == ["b"]
        assert [i.id for i in filter_ideas(ideas, search="dashboard", category="mobile")] == ["c"]
        assert filter_ideas(ideas, category="api") == []

    def test_deliver_cli(self, capsys):
        deliver_cli(_make_idea())
        out = capsys.readouterr().out
        assert "Interactive Dashboard Builder" in out
        assert "Stack: React, JavaScript, HTML/CSS" in out
        assert "  - Charts" in out
