"""
Stack composer. Turns a user's declared technologies into a recommended
stack: one random primary, its usual companions, then a couple more of
the user's own picks.
"""

import logging
import random
from dataclasses import replace
from types import MappingProxyType

from models import InvalidProfileError, TechStack

log = logging.getLogger(__name__)

MAX_STACK_SIZE = 6
MAX_EXTRA_USER_TECH = 2

# Primary technology -> the stack it usually ships with (primary included).
STACK_MAPPINGS = MappingProxyType({
    "JavaScript": ("JavaScript", "HTML/CSS"),
    "TypeScript": ("TypeScript", "JavaScript", "HTML/CSS"),
    "React": ("React", "JavaScript", "HTML/CSS"),
    "Vue.js": ("Vue.js", "JavaScript", "HTML/CSS"),
    "Angular": ("Angular", "TypeScript", "HTML/CSS"),
    "Node.js": ("Node.js", "JavaScript"),
    "Python": ("Python", "Flask"),
    "Django": ("Django", "Python", "PostgreSQL"),
    "Java": ("Java", "Spring Boot"),
    "C#": ("C#", ".NET"),
    "PHP": ("PHP", "Laravel", "MySQL"),
    "React Native": ("React Native", "JavaScript"),
    "Flutter": ("Flutter", "Firebase"),
    "MongoDB": ("MongoDB", "Node.js"),
    "PostgreSQL": ("PostgreSQL", "Node.js"),
    "GraphQL": ("GraphQL", "Node.js"),
    "Tailwind CSS": ("Tailwind CSS", "HTML/CSS"),
})


def compose_stack(technologies: list[str], rng: random.Random | None = None) -> list[str]:
    """
    Build a recommended stack from the user's declared technologies.

    Non-deterministic by design: the primary is picked at random, so the
    same profile can yield different stacks. Pass a seeded `rng` to pin it.

    Raises:
        InvalidProfileError: if `technologies` is empty.
    """
    if not technologies:
        raise InvalidProfileError("Cannot compose a stack from an empty technology list")

    rng = rng or random.Random()
    primary = rng.choice(technologies)
    stack = [primary]

    for tech in STACK_MAPPINGS.get(primary, ()):
        if tech not in stack:
            stack.append(tech)

    added = 0
    for tech in technologies:
        if added >= MAX_EXTRA_USER_TECH:
            break
        if tech not in stack:
            stack.append(tech)
            added += 1

    log.debug(f"Composed stack from primary {primary!r}: {stack[:MAX_STACK_SIZE]}")
    return stack[:MAX_STACK_SIZE]


def annotate_popularity(stacks: list[TechStack], table: dict[str, int]) -> list[TechStack]:
    """Copies of `stacks` with popularity filled from `table` (0 if unknown)."""
    return [replace(s, popularity=table.get(s.name, 0)) for s in stacks]
