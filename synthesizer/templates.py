"""
Project template catalog. Author-written outlines that ideas are built from.

Grouped by category key. Every category has at least one template.
Loaded once at import, never mutated.
"""

from types import MappingProxyType

from models import ProjectTemplate

DEFAULT_CATEGORY = "web"


# ──────────────────────────────────────────────
# WEB
# ──────────────────────────────────────────────

_WEB = (
    ProjectTemplate(
        title="Interactive Dashboard Builder",
        description=(
            "Create a drag-and-drop dashboard builder where users can create custom "
            "analytics dashboards with real-time data visualization. Include widgets "
            "for charts, tables, and KPI metrics."
        ),
        category="web",
        features=(
            "Drag-and-drop interface for dashboard creation",
            "Real-time data visualization with charts and graphs",
            "Customizable widgets and layouts",
            "Data source integration (APIs, databases)",
            "Export and sharing capabilities",
            "User authentication and saved dashboards",
        ),
        tags=("dashboard", "analytics", "visualization", "real-time"),
    ),
    ProjectTemplate(
        title="Recipe Recommendation Engine",
        description=(
            "Build a smart recipe platform that learns user preferences and dietary "
            "restrictions to recommend personalized recipes. Include meal planning "
            "and grocery list generation."
        ),
        category="web",
        features=(
            "User preference learning algorithm",
            "Dietary restriction filtering",
            "Meal planning calendar",
            "Automated grocery list generation",
            "Recipe rating and review system",
            "Social sharing and recipe collections",
        ),
        tags=("food", "recommendation", "ai", "social"),
    ),
    ProjectTemplate(
        title="Collaborative Code Review Platform",
        description=(
            "Create a platform for teams to conduct code reviews with real-time "
            "collaboration, commenting, and approval workflows. Include integration "
            "with popular version control systems."
        ),
        category="web",
        features=(
            "Real-time collaborative code reviewing",
            "Inline commenting and suggestions",
            "Approval workflows and permissions",
            "Git integration and branch management",
            "Code quality metrics and analytics",
            "Team management and notifications",
        ),
        tags=("collaboration", "code-review", "git", "team"),
    ),
)


# ──────────────────────────────────────────────
# MOBILE
# ──────────────────────────────────────────────

_MOBILE = (
    ProjectTemplate(
        title="Habit Tracker with AI Insights",
        description=(
            "Develop a mobile app that tracks daily habits and uses AI to provide "
            "personalized insights and recommendations for building better routines."
        ),
        category="mobile",
        features=(
            "Daily habit tracking with streaks",
            "AI-powered insights and recommendations",
            "Customizable habit categories",
            "Progress visualization and analytics",
            "Reminder notifications",
            "Social challenges and accountability",
        ),
        tags=("habits", "ai", "productivity", "analytics"),
    ),
    ProjectTemplate(
        title="Local Business Discovery App",
        description=(
            "Create a location-based app that helps users discover local businesses, "
            "events, and services with personalized recommendations and social features."
        ),
        category="mobile",
        features=(
            "Location-based business discovery",
            "Personalized recommendations",
            "Event and service listings",
            "User reviews and ratings",
            "Social check-ins and sharing",
            "Business owner dashboard",
        ),
        tags=("location", "discovery", "social", "business"),
    ),
)


# ──────────────────────────────────────────────
# GAME / API / TOOL
# ──────────────────────────────────────────────

_GAME = (
    ProjectTemplate(
        title="Multiplayer Strategy Game",
        description=(
            "Build a turn-based strategy game with real-time multiplayer capabilities, "
            "featuring resource management, tactical combat, and empire building."
        ),
        category="game",
        features=(
            "Turn-based strategy gameplay",
            "Real-time multiplayer sessions",
            "Resource management system",
            "Tactical combat mechanics",
            "Empire building and progression",
            "Leaderboards and achievements",
        ),
        tags=("strategy", "multiplayer", "real-time", "combat"),
    ),
)

_API = (
    ProjectTemplate(
        title="Content Aggregation API",
        description=(
            "Build a RESTful API that aggregates content from multiple sources, "
            "provides intelligent filtering, and offers real-time updates with "
            "webhook support."
        ),
        category="api",
        features=(
            "Multi-source content aggregation",
            "Intelligent filtering and categorization",
            "Real-time updates with webhooks",
            "Rate limiting and API key management",
            "Caching and performance optimization",
            "Comprehensive documentation and SDKs",
        ),
        tags=("api", "aggregation", "webhooks", "performance"),
    ),
)

_TOOL = (
    ProjectTemplate(
        title="Code Quality Analyzer",
        description=(
            "Create a developer tool that analyzes code quality, suggests improvements, "
            "and tracks technical debt across different programming languages."
        ),
        category="tool",
        features=(
            "Multi-language code analysis",
            "Quality metrics and scoring",
            "Technical debt tracking",
            "Improvement suggestions",
            "CI/CD pipeline integration",
            "Team collaboration features",
        ),
        tags=("code-quality", "analysis", "developer-tools", "ci-cd"),
    ),
)


PROJECT_TEMPLATES = MappingProxyType({
    "web": _WEB,
    "mobile": _MOBILE,
    "game": _GAME,
    "api": _API,
    "tool": _TOOL,
})

CATEGORIES: tuple[str, ...] = tuple(PROJECT_TEMPLATES)


def templates_for(category: str | None) -> tuple[ProjectTemplate, ...]:
    """Templates for a category key. Unknown keys get the web list."""
    return PROJECT_TEMPLATES.get(category or "") or PROJECT_TEMPLATES[DEFAULT_CATEGORY]
