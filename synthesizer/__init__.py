from synthesizer.engine import IdeaSynthesizer, generate_project_idea
from synthesizer.stack import annotate_popularity, compose_stack
from synthesizer.templates import CATEGORIES, templates_for

__all__ = [
    "IdeaSynthesizer",
    "generate_project_idea",
    "annotate_popularity",
    "compose_stack",
    "CATEGORIES",
    "templates_for",
]
