"""
Difficulty policy: how much of a template a given level gets to build,
how long it should take, and what the description adds.
"""

from dataclasses import dataclass
from types import MappingProxyType

from models import Difficulty


@dataclass(frozen=True)
class DifficultyRule:
    time_estimate: str
    max_features: int | None        # None = keep all
    narrative_suffix: str
    extra_feature: str | None = None

    def truncate(self, features) -> list[str]:
        features = list(features)
        if self.max_features is None:
            return features
        return features[:self.max_features]


DIFFICULTY_RULES = MappingProxyType({
    Difficulty.BEGINNER: DifficultyRule(
        time_estimate="1-2 weeks",
        max_features=3,
        narrative_suffix="Focus on core functionality with simple UI",
    ),
    Difficulty.INTERMEDIATE: DifficultyRule(
        time_estimate="2-4 weeks",
        max_features=5,
        narrative_suffix="Include user authentication and data persistence",
        extra_feature="User authentication and profiles",
    ),
    Difficulty.ADVANCED: DifficultyRule(
        time_estimate="1-3 months",
        max_features=None,
        narrative_suffix="Implement advanced features like real-time updates and AI integration",
        extra_feature="Advanced analytics and reporting",
    ),
})


def rule_for(difficulty: Difficulty | str) -> DifficultyRule:
    """Raises ValueError for an unknown level string."""
    return DIFFICULTY_RULES[Difficulty(difficulty)]


def shape_features(features, difficulty: Difficulty | str) -> list[str]:
    """Truncate for the level, then append the level's extra feature (if any)."""
    rule = rule_for(difficulty)
    shaped = rule.truncate(features)
    if rule.extra_feature:
        shaped.append(rule.extra_feature)
    return shaped
