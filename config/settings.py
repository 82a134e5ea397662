"""
Configuration. All settings from env vars or a .env file.
No YAML. No TOML parsing. Just a dataclass with env-backed defaults.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path

# Auto-load .env file so you don't need `export $(grep ...)` every time
from dotenv import load_dotenv
load_dotenv()


def _optional_int(name: str) -> int | None:
    raw = os.environ.get(name, "").strip()
    return int(raw) if raw else None


@dataclass
class Config:
    # ── External project fetches ──
    # Passed straight to requests; the engine itself never times out.
    fetch_timeout: float = float(os.environ.get("IDEAFORGE_FETCH_TIMEOUT", "15"))
    user_agent: str = os.environ.get("IDEAFORGE_USER_AGENT", "ideaforge/0.1")

    # ── Generation ──
    # Unset = system randomness. Set it to make `generate` reproducible.
    seed: int | None = field(default_factory=lambda: _optional_int("IDEAFORGE_SEED"))

    # Profile JSON used when the CLI isn't given --profile
    profile_path: Path = Path(os.environ.get("IDEAFORGE_PROFILE_PATH", "data/profile.json"))

    # ── API server ──
    host: str = os.environ.get("IDEAFORGE_HOST", "127.0.0.1")
    port: int = int(os.environ.get("IDEAFORGE_PORT", "5002"))


def load_config() -> Config:
    return Config()
