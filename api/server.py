"""
JSON API for the idea engine. Stateless: every request carries the
profile or project lists it needs. Nothing is stored.

Run: python main.py serve
"""

import random

from flask import Flask, jsonify, request

from collectors.base import Collector
from collectors.manifest import ManifestCollector
from config.settings import Config, load_config
from delivery.output import export_json
from models import GenerationFilters, InvalidProfileError, ProjectIdea
from popularity.blender import blend, top_technologies
from popularity.table import BASELINE_POPULARITY
from profiles.loader import parse_profile
from profiles.options import options_summary
from synthesizer.engine import IdeaSynthesizer, template_summary


def _parse_int(value: str | None, default: int | None, name: str) -> tuple[int | None, str | None]:
    """Parse an integer query param. Returns (value, error_message)."""
    if value is None:
        return default, None
    try:
        return int(value), None
    except (ValueError, TypeError):
        return default, f"Invalid value for '{name}': expected integer, got '{value}'"


def _json_body() -> tuple[dict, str | None]:
    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        return {}, "Request body must be a JSON object"
    return body, None


def create_app(config: Config | None = None, collector: Collector | None = None):
    config = config or load_config()
    collector = collector or ManifestCollector(config)
    app = Flask(__name__)

    # ── CORS for development ──
    @app.after_request
    def add_cors(response):
        response.headers["Access-Control-Allow-Origin"] = "*"
        response.headers["Access-Control-Allow-Headers"] = "Content-Type"
        response.headers["Access-Control-Allow-Methods"] = "GET, POST, OPTIONS"
        return response

    # ── Idea Routes ──

    @app.route("/api/ideas", methods=["POST"])
    def generate_idea():
        body, err = _json_body()
        if err:
            return jsonify({"error": err}), 400

        seed = body.get("seed", config.seed)
        if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
            return jsonify({"error": "seed must be an integer"}), 400

        try:
            profile = parse_profile(body.get("profile"))
            filters = GenerationFilters.from_dict(body.get("filters"))
        except InvalidProfileError as e:
            return jsonify({"error": str(e)}), 400
        except ValueError as e:
            return jsonify({"error": f"Invalid filters: {e}"}), 400

        rng = random.Random(seed) if seed is not None else None
        idea = IdeaSynthesizer(rng).generate(profile, filters)
        return jsonify(idea.to_dict())

    @app.route("/api/ideas/export", methods=["POST"])
    def export_idea():
        body, err = _json_body()
        if err:
            return jsonify({"error": err}), 400
        try:
            idea = ProjectIdea.from_dict(body.get("idea") or {})
        except (KeyError, ValueError) as e:
            return jsonify({"error": f"Invalid idea: {e}"}), 400
        return app.response_class(export_json(idea), mimetype="application/json")

    @app.route("/api/templates")
    def list_templates():
        return jsonify({"templates": template_summary()})

    @app.route("/api/options")
    def list_options():
        return jsonify(options_summary())

    # ── Popularity Routes ──

    @app.route("/api/popularity")
    def get_popularity():
        limit, err = _parse_int(request.args.get("limit"), None, "limit")
        if err:
            return jsonify({"error": err}), 400
        if limit is not None and limit < 0:
            return jsonify({"error": "limit must be >= 0"}), 400

        rows = top_technologies(BASELINE_POPULARITY, limit)
        return jsonify({"popularity": dict(rows), "total": len(BASELINE_POPULARITY)})

    @app.route("/api/popularity/blend", methods=["POST"])
    def blend_popularity():
        body, err = _json_body()
        if err:
            return jsonify({"error": err}), 400

        projects = body.get("projects", [])
        if not isinstance(projects, list) or not all(
            isinstance(p, list) and all(isinstance(t, str) for t in p) for p in projects
        ):
            return jsonify({"error": "projects must be an array of string arrays"}), 400

        return jsonify({"popularity": blend(projects), "projectCount": len(projects)})

    # ── External Project Routes ──

    @app.route("/api/projects/fetch", methods=["POST"])
    def fetch_project():
        body, err = _json_body()
        if err:
            return jsonify({"error": err}), 400

        api_url = body.get("apiUrl")
        if not isinstance(api_url, str) or not api_url.strip():
            return jsonify({"error": "apiUrl is required"}), 400

        # Fetch failures are reported in the body, not as an HTTP error
        result = collector.collect(api_url.strip())
        return jsonify(result.to_dict())

    @app.route("/")
    def index():
        return jsonify({
            "message": "ideaforge API",
            "endpoints": [
                "POST /api/ideas",
                "POST /api/ideas/export",
                "GET /api/templates",
                "GET /api/options",
                "GET /api/popularity",
                "POST /api/popularity/blend",
                "POST /api/projects/fetch",
            ],
        })

    return app
