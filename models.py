"""
Core data types. No behavior beyond (de)serialization.

Wire shapes use the camelCase keys of the browser app the profiles
come from, so an exported profile loads unchanged.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from enum import Enum


class InvalidProfileError(ValueError):
    """Raised when a profile can't be used for idea generation."""
    pass


class Difficulty(Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class TechCategory(Enum):
    FRONTEND = "frontend"
    BACKEND = "backend"
    DATABASE = "database"
    MOBILE = "mobile"
    DEVOPS = "devops"
    AI_ML = "ai-ml"
    OTHER = "other"


class Proficiency(Enum):
    LEARNING = "learning"
    FAMILIAR = "familiar"
    PROFICIENT = "proficient"
    EXPERT = "expert"


class DeveloperType(Enum):
    SELF_TAUGHT = "self-taught"
    BOOTCAMP = "bootcamp"
    PROFESSIONAL = "professional"
    STUDENT = "student"


def _now() -> datetime:
    return datetime.now(timezone.utc)


def parse_timestamp(value) -> datetime | None:
    """ISO-8601 string to datetime. Raises ValueError on a malformed string."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    # JS toISOString() emits a trailing "Z"
    return datetime.fromisoformat(str(value).replace("Z", "+00:00"))


def _iso(value: datetime | None) -> str | None:
    return value.isoformat() if value else None


@dataclass
class TechStack:
    """One declared technology. Identity is `name`."""
    name: str
    category: TechCategory = TechCategory.OTHER
    proficiency: Proficiency = Proficiency.FAMILIAR
    popularity: int | None = None   # 0-100, display only

    def to_dict(self) -> dict:
        d = {
            "name": self.name,
            "category": self.category.value,
            "proficiency": self.proficiency.value,
        }
        if self.popularity is not None:
            d["popularity"] = self.popularity
        return d

    @classmethod
    def from_dict(cls, d: dict) -> "TechStack":
        return cls(
            name=d["name"],
            category=TechCategory(d.get("category", "other")),
            proficiency=Proficiency(d.get("proficiency", "familiar")),
            popularity=d.get("popularity"),
        )


@dataclass
class SocialConnection:
    provider: str           # "github" | "gmail" | "linkedin" | "discord"
    connected: bool = True
    username: str | None = None

    def to_dict(self) -> dict:
        d = {"provider": self.provider, "connected": self.connected}
        if self.username:
            d["username"] = self.username
        return d

    @classmethod
    def from_dict(cls, d: dict) -> "SocialConnection":
        return cls(
            provider=d["provider"],
            connected=bool(d.get("connected", True)),
            username=d.get("username"),
        )


@dataclass
class ExternalProject:
    """Technologies detected at one external URL."""
    id: str
    name: str
    api_url: str
    technologies: list[str] = field(default_factory=list)
    last_fetched: datetime | None = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "apiUrl": self.api_url,
            "technologies": list(self.technologies),
            "lastFetched": _iso(self.last_fetched),
        }

    @classmethod
    def from_dict(cls, d: dict) -> "ExternalProject":
        return cls(
            id=str(d["id"]),
            name=d.get("name", ""),
            api_url=d.get("apiUrl", ""),
            technologies=list(d.get("technologies", [])),
            last_fetched=parse_timestamp(d.get("lastFetched")),
        )


@dataclass
class UserProfile:
    id: str
    developer_type: DeveloperType
    skill_level: Difficulty
    stacks: list[TechStack] = field(default_factory=list)
    interests: list[str] = field(default_factory=list)
    goals: list[str] = field(default_factory=list)
    created_at: datetime = field(default_factory=_now)
    social_connections: list[SocialConnection] = field(default_factory=list)
    external_projects: list[ExternalProject] = field(default_factory=list)

    @property
    def technology_names(self) -> list[str]:
        return [s.name for s in self.stacks]

    def with_external_project(self, project: ExternalProject) -> "UserProfile":
        """Return a copy with `project` appended. The original is untouched."""
        return replace(self, external_projects=[*self.external_projects, project])

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "developerType": self.developer_type.value,
            "skillLevel": self.skill_level.value,
            "stacks": [s.to_dict() for s in self.stacks],
            "interests": list(self.interests),
            "goals": list(self.goals),
            "createdAt": _iso(self.created_at),
            "socialConnections": [c.to_dict() for c in self.social_connections],
            "externalProjects": [p.to_dict() for p in self.external_projects],
        }

    @classmethod
    def from_dict(cls, d: dict) -> "UserProfile":
        return cls(
            id=str(d["id"]),
            developer_type=DeveloperType(d["developerType"]),
            skill_level=Difficulty(d["skillLevel"]),
            stacks=[TechStack.from_dict(s) for s in d.get("stacks", [])],
            interests=list(d.get("interests", [])),
            goals=list(d.get("goals", [])),
            created_at=parse_timestamp(d.get("createdAt")) or _now(),
            social_connections=[
                SocialConnection.from_dict(c) for c in d.get("socialConnections") or []
            ],
            external_projects=[
                ExternalProject.from_dict(p) for p in d.get("externalProjects") or []
            ],
        )


@dataclass(frozen=True)
class ProjectTemplate:
    """Catalog entry. Never shown to users directly."""
    title: str
    description: str
    category: str
    features: tuple[str, ...]
    tags: tuple[str, ...]

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "description": self.description,
            "category": self.category,
            "features": list(self.features),
            "tags": list(self.tags),
        }


@dataclass
class GenerationFilters:
    """Optional overrides for a single generation call."""
    difficulty: Difficulty | None = None
    category: str | None = None
    time_estimate: str | None = None

    @classmethod
    def from_dict(cls, d: dict | None) -> "GenerationFilters":
        d = d or {}
        difficulty = d.get("difficulty")
        return cls(
            difficulty=Difficulty(difficulty) if difficulty else None,
            category=d.get("category") or None,
            time_estimate=d.get("timeEstimate") or None,
        )


# Keys of the exported idea document, in emitted order.
EXPORT_FIELDS = (
    "title", "description", "stack", "features",
    "timeEstimate", "difficulty", "category",
)


@dataclass
class ProjectIdea:
    """One generated idea. Built fresh per call, not modified afterwards."""
    id: str
    title: str
    description: str
    stack: list[str]
    difficulty: Difficulty
    features: list[str]
    time_estimate: str
    category: str
    tags: list[str]
    created_at: datetime = field(default_factory=_now)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "stack": list(self.stack),
            "difficulty": self.difficulty.value,
            "features": list(self.features),
            "timeEstimate": self.time_estimate,
            "category": self.category,
            "tags": list(self.tags),
            "createdAt": _iso(self.created_at),
        }

    def to_export_dict(self) -> dict:
        full = self.to_dict()
        return {key: full[key] for key in EXPORT_FIELDS}

    @classmethod
    def from_dict(cls, d: dict) -> "ProjectIdea":
        return cls(
            id=str(d.get("id", "")),
            title=d["title"],
            description=d["description"],
            stack=list(d.get("stack", [])),
            difficulty=Difficulty(d["difficulty"]),
            features=list(d.get("features", [])),
            time_estimate=d.get("timeEstimate", ""),
            category=d.get("category", ""),
            tags=list(d.get("tags", [])),
            created_at=parse_timestamp(d.get("createdAt")) or _now(),
        )

    def __repr__(self) -> str:
        return f"ProjectIdea({self.title!r}, {self.difficulty.value}, stack={self.stack})"


@dataclass
class SavedIdea(ProjectIdea):
    """An idea the user chose to keep."""
    saved_at: datetime = field(default_factory=_now)
    is_favorite: bool = False
    notes: str | None = None

    def to_dict(self) -> dict:
        d = super().to_dict()
        d["savedAt"] = _iso(self.saved_at)
        d["isFavorite"] = self.is_favorite
        if self.notes is not None:
            d["notes"] = self.notes
        return d


@dataclass
class FetchResult:
    """
    Outcome of one external fetch. `technologies` is always a list;
    `error` is set when the fetch failed and the list is empty.
    """
    url: str
    technologies: list[str] = field(default_factory=list)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict:
        return {
            "apiUrl": self.url,
            "technologies": list(self.technologies),
            "error": self.error,
        }
