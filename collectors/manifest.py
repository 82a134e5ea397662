"""
External project collector. Reads technology names out of an arbitrary
JSON resource: a GitHub repository API response, a package.json-style
manifest, or a custom document listing technologies.

Best effort. Anything that goes wrong yields an empty list.
"""

import logging
import uuid
from datetime import datetime, timezone
from types import MappingProxyType

import requests

from collectors.base import Collector
from config.settings import Config, load_config
from models import ExternalProject, FetchResult, UserProfile

log = logging.getLogger(__name__)

# npm/pip package name -> display name used in the popularity table.
DEPENDENCY_MAP = MappingProxyType({
    "react": "React",
    "vue": "Vue.js",
    "angular": "Angular",
    "svelte": "Svelte",
    "express": "Express.js",
    "django": "Django",
    "flask": "Flask",
    "mongodb": "MongoDB",
    "mongoose": "MongoDB",
    "postgresql": "PostgreSQL",
    "pg": "PostgreSQL",
    "mysql": "MySQL",
    "redis": "Redis",
    "firebase": "Firebase",
    "supabase": "Supabase",
    "tailwindcss": "Tailwind CSS",
    "bootstrap": "Bootstrap",
    "sass": "Sass/SCSS",
    "typescript": "TypeScript",
    "graphql": "GraphQL",
    "apollo": "GraphQL",
    "docker": "Docker",
    "aws-sdk": "AWS",
    "azure": "Azure",
    "gcp": "Google Cloud",
    "tensorflow": "TensorFlow",
    "pytorch": "PyTorch",
    "pandas": "Pandas",
    "numpy": "NumPy",
    "electron": "Electron",
    "react-native": "React Native",
    "flutter": "Flutter",
    "expo": "Expo",
})


def map_dependencies(names) -> list[str]:
    """Map dependency keys to display names. Unknown keys are dropped."""
    mapped = []
    for dep in names:
        clean = str(dep).lower().lstrip("@^~")
        tech = DEPENDENCY_MAP.get(clean)
        if tech:
            mapped.append(tech)
    return mapped


def extract_technologies(payload) -> list[str]:
    """
    Pull technology names out of a decoded JSON payload.

    Checked in order: `language`, `dependencies`, `devDependencies`,
    `technologies`, `techStack`. Duplicates are dropped, first one wins.
    """
    if not isinstance(payload, dict):
        return []

    techs: list[str] = []

    # GitHub repository API. `languages_url` would need a second request, skipped.
    language = payload.get("language")
    if isinstance(language, str) and language:
        techs.append(language)

    # package.json
    for key in ("dependencies", "devDependencies"):
        deps = payload.get(key)
        if isinstance(deps, dict):
            techs.extend(map_dependencies(deps.keys()))

    # Custom shapes
    for key in ("technologies", "techStack"):
        values = payload.get(key)
        if isinstance(values, list):
            techs.extend(values)

    return list(dict.fromkeys(techs))


class ManifestCollector(Collector):
    def __init__(self, config: Config):
        self._timeout = config.fetch_timeout
        self._session = requests.Session()
        self._session.headers["Accept"] = "application/json"
        self._session.headers["Content-Type"] = "application/json"
        self._session.headers["User-Agent"] = config.user_agent

    def name(self) -> str:
        return "manifest"

    def collect(self, url: str) -> FetchResult:
        try:
            resp = self._session.get(url, timeout=self._timeout)
        except requests.RequestException as e:
            log.warning(f"[{self.name()}] Failed to fetch {url}: {e}")
            return FetchResult(url=url, error=f"request failed: {e}")

        if not 200 <= resp.status_code < 300:
            log.warning(f"[{self.name()}] {url}: HTTP {resp.status_code}")
            return FetchResult(url=url, error=f"HTTP {resp.status_code}")

        try:
            payload = resp.json()
        except ValueError as e:
            log.warning(f"[{self.name()}] {url}: invalid JSON ({e})")
            return FetchResult(url=url, error=f"invalid JSON: {e}")

        techs = extract_technologies(payload)
        log.info(f"[{self.name()}] Detected {len(techs)} technologies at {url}")
        return FetchResult(url=url, technologies=techs)


def import_external_project(
    profile: UserProfile,
    api_url: str,
    collector: Collector,
) -> tuple[UserProfile, FetchResult]:
    """
    Fetch `api_url` and attach the result to a copy of `profile`.

    A failed fetch still attaches the project, with no technologies.
    """
    result = collector.collect(api_url)
    project = ExternalProject(
        id=uuid.uuid4().hex[:12],
        name=f"Project {len(profile.external_projects) + 1}",
        api_url=api_url,
        technologies=result.technologies,
        last_fetched=datetime.now(timezone.utc),
    )
    return profile.with_external_project(project), result


def fetch_technologies(api_url: str, config: Config | None = None) -> list[str]:
    """One-off fetch. Returns [] on any failure, never raises."""
    return ManifestCollector(config or load_config()).technologies(api_url)
