"""
Profile loading and validation.

Profiles arrive as JSON documents in the browser app's shape. They are
validated up front so generation never sees a half-filled profile.
"""

import json
import logging
from pathlib import Path

from models import (
    DeveloperType,
    Difficulty,
    InvalidProfileError,
    Proficiency,
    TechCategory,
    TechStack,
    UserProfile,
    parse_timestamp,
)
from profiles.options import SOCIAL_PROVIDERS, category_for

log = logging.getLogger(__name__)

_DEVELOPER_TYPES = {d.value for d in DeveloperType}
_SKILL_LEVELS = {d.value for d in Difficulty}
_CATEGORIES = {c.value for c in TechCategory}
_PROFICIENCIES = {p.value for p in Proficiency}


def validate_profile_dict(d: dict) -> list[str]:
    """Validate a profile dict. Returns list of error messages."""
    errors = []

    if not isinstance(d.get("id"), (str, int)) or str(d.get("id", "")).strip() == "":
        errors.append("Missing or empty required field: id")

    if d.get("developerType") not in _DEVELOPER_TYPES:
        errors.append(
            f"developerType must be one of {sorted(_DEVELOPER_TYPES)}, "
            f"got {d.get('developerType')!r}"
        )
    if d.get("skillLevel") not in _SKILL_LEVELS:
        errors.append(
            f"skillLevel must be one of {sorted(_SKILL_LEVELS)}, "
            f"got {d.get('skillLevel')!r}"
        )

    stacks = d.get("stacks")
    if not isinstance(stacks, list) or not stacks:
        errors.append("stacks must be a non-empty array")
    else:
        seen = set()
        for i, s in enumerate(stacks):
            if not isinstance(s, dict):
                errors.append(f"stacks[{i}] must be an object")
                continue
            name = s.get("name")
            if not isinstance(name, str) or not name.strip():
                errors.append(f"stacks[{i}] missing field: name")
            elif name in seen:
                errors.append(f"stacks[{i}] duplicate technology: {name}")
            else:
                seen.add(name)
            if "category" in s and s["category"] not in _CATEGORIES:
                errors.append(f"stacks[{i}] unknown category: {s['category']!r}")
            if "proficiency" in s and s["proficiency"] not in _PROFICIENCIES:
                errors.append(f"stacks[{i}] unknown proficiency: {s['proficiency']!r}")

    for key in ("interests", "goals"):
        value = d.get(key, [])
        if not _is_string_list(value):
            errors.append(f"{key} must be an array of strings")

    if not _valid_timestamp(d.get("createdAt")):
        errors.append(f"createdAt is not an ISO-8601 timestamp: {d.get('createdAt')!r}")

    connections = d.get("socialConnections") or []
    if not isinstance(connections, list):
        errors.append("socialConnections must be an array")
    else:
        for i, c in enumerate(connections):
            if not isinstance(c, dict):
                errors.append(f"socialConnections[{i}] must be an object")
            elif c.get("provider") not in SOCIAL_PROVIDERS:
                errors.append(
                    f"socialConnections[{i}] provider must be one of {list(SOCIAL_PROVIDERS)}, "
                    f"got {c.get('provider')!r}"
                )

    projects = d.get("externalProjects") or []
    if not isinstance(projects, list):
        errors.append("externalProjects must be an array")
    else:
        for i, p in enumerate(projects):
            if not isinstance(p, dict):
                errors.append(f"externalProjects[{i}] must be an object")
                continue
            if not isinstance(p.get("id"), (str, int)) or str(p.get("id", "")).strip() == "":
                errors.append(f"externalProjects[{i}] missing field: id")
            if not _is_string_list(p.get("technologies", [])):
                errors.append(f"externalProjects[{i}] technologies must be an array of strings")
            if not _valid_timestamp(p.get("lastFetched")):
                errors.append(
                    f"externalProjects[{i}] lastFetched is not an ISO-8601 timestamp: "
                    f"{p.get('lastFetched')!r}"
                )

    return errors


def _is_string_list(value) -> bool:
    return isinstance(value, list) and all(isinstance(v, str) for v in value)


def _valid_timestamp(value) -> bool:
    try:
        parse_timestamp(value)
    except (ValueError, TypeError):
        return False
    return True


def parse_profile(d) -> UserProfile:
    """
    Build a UserProfile from a decoded JSON document.

    Raises:
        InvalidProfileError: listing every problem found.
    """
    if not isinstance(d, dict):
        raise InvalidProfileError(f"Expected JSON object, got {type(d).__name__}")

    errors = validate_profile_dict(d)
    if errors:
        raise InvalidProfileError("Invalid profile:\n" + "\n".join(errors))
    return UserProfile.from_dict(d)


def load_profile(path: Path) -> UserProfile:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        raise InvalidProfileError(f"Profile not found: {path}")
    except json.JSONDecodeError as e:
        raise InvalidProfileError(f"Profile {path} is not valid JSON: {e}") from e

    profile = parse_profile(data)
    log.debug(f"Loaded profile {profile.id} with {len(profile.stacks)} technologies")
    return profile


def save_profile(profile: UserProfile, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(profile.to_dict(), indent=2, ensure_ascii=False), encoding="utf-8")


def quick_profile(
    technologies: list[str],
    skill_level: Difficulty | str = Difficulty.BEGINNER,
    interests: list[str] | None = None,
) -> UserProfile:
    """A throwaway profile for one-off generation from the command line."""
    if not technologies:
        raise InvalidProfileError("At least one technology is required")
    return UserProfile(
        id="cli",
        developer_type=DeveloperType.SELF_TAUGHT,
        skill_level=Difficulty(skill_level),
        stacks=[
            TechStack(name=t, category=category_for(t))
            for t in dict.fromkeys(technologies)
        ],
        interests=list(interests or []),
    )
