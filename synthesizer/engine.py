"""
Idea synthesis engine. Takes a user profile + optional filters, produces
one concrete ProjectIdea from the template catalog.

All randomness goes through one injected random.Random so a seeded
instance makes a whole generation reproducible.
"""

import logging
import random
import re
import string
import time
from datetime import datetime, timezone

from models import (
    Difficulty,
    GenerationFilters,
    InvalidProfileError,
    ProjectIdea,
    ProjectTemplate,
    UserProfile,
)
from synthesizer.difficulty import rule_for, shape_features
from synthesizer.stack import compose_stack
from synthesizer.templates import CATEGORIES, templates_for

log = logging.getLogger(__name__)

MAX_TAGS = 8

# Interest -> category, checked in this order. api/tool are never inferred.
INTEREST_CATEGORIES: tuple[tuple[str, str], ...] = (
    ("Web Development", "web"),
    ("Mobile Apps", "mobile"),
    ("Game Development", "game"),
)

TITLE_WORD_PATTERN = re.compile(r"\b(Builder|Platform|Engine|Tracker|App)\b")
TITLE_ALTERNATIVES = ("Hub", "Studio", "Manager", "System", "Tool")

_ID_ALPHABET = string.ascii_lowercase + string.digits


def _slug_tag(interest: str) -> str:
    return re.sub(r"\s+", "-", interest.lower())


def _new_idea_id() -> str:
    """Timestamp plus random suffix. Best-effort unique, no collision check."""
    suffix = "".join(random.choices(_ID_ALPHABET, k=9))
    return f"idea-{int(time.time() * 1000)}-{suffix}"


class IdeaSynthesizer:
    def __init__(self, rng: random.Random | None = None):
        self._rng = rng or random.Random()

    def generate(
        self,
        profile: UserProfile,
        filters: GenerationFilters | None = None,
    ) -> ProjectIdea:
        """
        Generate one project idea for `profile`.

        Raises:
            InvalidProfileError: if the profile declares no technologies.
        """
        filters = filters or GenerationFilters()
        if not profile.stacks:
            raise InvalidProfileError("Profile has no technologies; add at least one stack")

        category = self.resolve_category(profile, filters)
        template = self._rng.choice(templates_for(category))

        difficulty = Difficulty(filters.difficulty or profile.skill_level)
        rule = rule_for(difficulty)

        stack = compose_stack(profile.technology_names, self._rng)
        features = shape_features(template.features, difficulty)
        title = self.vary_title(template.title)

        tags = [
            *template.tags,
            *(_slug_tag(i) for i in profile.interests),
            difficulty.value,
        ][:MAX_TAGS]

        idea = ProjectIdea(
            id=_new_idea_id(),
            title=title,
            description=f"{template.description} {rule.narrative_suffix}",
            stack=stack,
            difficulty=difficulty,
            features=features,
            time_estimate=filters.time_estimate or rule.time_estimate,
            category=template.category,
            tags=tags,
            created_at=datetime.now(timezone.utc),
        )
        log.debug(
            f"Generated {idea.title!r} (requested category={category}, "
            f"difficulty={difficulty.value}, stack={len(stack)}, tags={len(tags)})"
        )
        return idea

    def resolve_category(self, profile: UserProfile, filters: GenerationFilters) -> str:
        if filters.category:
            return filters.category
        for interest, category in INTEREST_CATEGORIES:
            if interest in profile.interests:
                return category
        return self._rng.choice(CATEGORIES)

    def vary_title(self, title: str) -> str:
        """
        Either the title as written or with its first Builder/Platform/...
        word swapped. Titles without such a word come back unchanged.
        """
        variant = TITLE_WORD_PATTERN.sub(
            lambda _m: self._rng.choice(TITLE_ALTERNATIVES), title, count=1,
        )
        return self._rng.choice((title, variant))


def generate_project_idea(
    profile: UserProfile,
    filters: GenerationFilters | None = None,
    rng: random.Random | None = None,
) -> ProjectIdea:
    """One-off convenience wrapper around IdeaSynthesizer."""
    return IdeaSynthesizer(rng).generate(profile, filters)


def template_summary() -> list[dict]:
    """The whole catalog as plain dicts, category order preserved."""
    summary = []
    for category in CATEGORIES:
        templates: tuple[ProjectTemplate, ...] = templates_for(category)
        summary.extend(t.to_dict() for t in templates)
    return summary
