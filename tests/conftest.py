"""
Shared fixtures and factories.
"""

import sys
from pathlib import Path

import pytest

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from models import DeveloperType, Difficulty, TechCategory, TechStack, UserProfile


class ScriptedRandom:
    """
    Stand-in for random.Random. choice() returns seq[i] for the next
    scripted index i, so tests can pin every random pick.
    """

    def __init__(self, *indices: int):
        self._indices = list(indices)
        self.calls: list[tuple] = []

    def choice(self, seq):
        seq = tuple(seq)
        self.calls.append(seq)
        index = self._indices.pop(0) if self._indices else 0
        return seq[index]


def make_profile(
    techs=("React",),
    skill_level="beginner",
    interests=("Web Development",),
    **overrides,
) -> UserProfile:
    """Factory for a valid profile."""
    base = dict(
        id="profile-1",
        developer_type=DeveloperType.SELF_TAUGHT,
        skill_level=Difficulty(skill_level),
        stacks=[TechStack(name=t, category=TechCategory.FRONTEND) for t in techs],
        interests=list(interests),
        goals=["Build Portfolio"],
    )
    base.update(overrides)
    return UserProfile(**base)


def make_profile_dict(**overrides) -> dict:
    """The browser app's JSON shape for a profile."""
    base = {
        "id": "1718000000000",
        "developerType": "bootcamp",
        "skillLevel": "intermediate",
        "stacks": [
            {"name": "React", "category": "frontend", "proficiency": "proficient", "popularity": 85},
            {"name": "Node.js", "category": "backend", "proficiency": "familiar"},
        ],
        "interests": ["Web Development", "AI/ML"],
        "goals": ["Build Portfolio"],
        "createdAt": "2024-06-10T08:00:00.000Z",
        "socialConnections": [{"provider": "github", "connected": True, "username": "user_github"}],
        "externalProjects": [
            {
                "id": "1718000000001",
                "name": "Project 1",
                "apiUrl": "https://example.com/package.json",
                "technologies": ["React", "Express.js"],
                "lastFetched": "2024-06-10T08:05:00.000Z",
            }
        ],
    }
    base.update(overrides)
    return base


@pytest.fixture
def profile():
    return make_profile()
