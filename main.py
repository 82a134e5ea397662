#!/usr/bin/env python3
"""
ideaforge: personalized project ideas from your declared tech stack.

Usage:
    python main.py generate --profile p.json      # One idea for a saved profile
    python main.py generate --tech React --tech Node.js --interest "Web Development"
    python main.py popularity --profile p.json    # Popularity blended with imported projects
    python main.py fetch URL                      # Technologies detected at a URL
    python main.py import-project --profile p.json URL
    python main.py options                        # Selectable technologies, interests, goals
    python main.py serve                          # Start the JSON API
"""

import argparse
import json
import logging
import random
import sys
from pathlib import Path

from collectors import ManifestCollector, import_external_project
from config import load_config
from delivery import deliver_cli, deliver_popularity, export_idea
from models import GenerationFilters, InvalidProfileError
from popularity import blend, top_technologies
from profiles import load_profile, options_summary, save_profile
from profiles.loader import quick_profile
from synthesizer import CATEGORIES, IdeaSynthesizer, annotate_popularity


def setup_logging(verbose: bool = False):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def _positive_int(value: str) -> int:
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {n}")
    return n


def _profile_from_args(config, args):
    if args.tech:
        return quick_profile(args.tech, args.level, args.interest)
    return load_profile(Path(args.profile) if args.profile else config.profile_path)


def cmd_generate(config, args):
    """Generate one idea and print or export it."""
    profile = _profile_from_args(config, args)
    filters = GenerationFilters.from_dict({
        "difficulty": args.difficulty,
        "category": args.category,
        "timeEstimate": args.time,
    })

    seed = args.seed if args.seed is not None else config.seed
    rng = random.Random(seed) if seed is not None else None
    idea = IdeaSynthesizer(rng).generate(profile, filters)

    if args.json:
        print(json.dumps(idea.to_dict(), indent=2, ensure_ascii=False))
    else:
        deliver_cli(idea)

    if args.export is not None:
        path = export_idea(idea, Path(args.export) if args.export else None)
        print(f"Exported to {path}")


def cmd_popularity(config, args):
    """Blend imported project data (profile + --project URLs) into the baseline."""
    project_lists = []
    highlight = set()

    if args.profile:
        profile = load_profile(Path(args.profile))
        project_lists.extend(p.technologies for p in profile.external_projects)
        highlight = set(profile.technology_names)

    if args.project:
        collector = ManifestCollector(config)
        for url in args.project:
            result = collector.collect(url)
            if not result.ok:
                print(f"Warning: {url}: {result.error}", file=sys.stderr)
            project_lists.append(result.technologies)

    table = blend(project_lists)
    print(f"Blended {len(project_lists)} external projects")
    deliver_popularity(top_technologies(table, args.limit), highlight)

    if args.profile:
        for stack in annotate_popularity(profile.stacks, table):
            print(f"  {stack.name}: {stack.popularity}")


def cmd_fetch(config, url: str):
    result = ManifestCollector(config).collect(url)
    if not result.ok:
        print(f"Fetch failed: {result.error}", file=sys.stderr)
    print(f"Detected {len(result.technologies)} technologies")
    for tech in result.technologies:
        print(f"  {tech}")


def cmd_import_project(config, args):
    """Fetch a URL and store it as an external project on the profile."""
    path = Path(args.profile) if args.profile else config.profile_path
    profile = load_profile(path)
    updated, result = import_external_project(profile, args.url, ManifestCollector(config))
    save_profile(updated, path)

    project = updated.external_projects[-1]
    print(f"Added {project.name} ({len(result.technologies)} technologies) to {path}")
    if not result.ok:
        print(f"Warning: {result.error}", file=sys.stderr)


def cmd_options():
    print(json.dumps(options_summary(), indent=2, ensure_ascii=False))


def cmd_serve(config, args):
    """Start the API server."""
    from api.server import create_app

    app = create_app(config)
    host = args.host or config.host
    port = args.port or config.port
    print(f"Starting server at http://{host}:{port}")
    app.run(host=host, port=port, debug=args.verbose)


def cli():
    parser = argparse.ArgumentParser(
        prog="ideaforge",
        description="Personalized project ideas from your tech stack",
    )

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("-v", "--verbose", action="store_true", help="Verbose logging")

    sub = parser.add_subparsers(dest="command", help="Command to run")

    gen_parser = sub.add_parser("generate", parents=[common], help="Generate a project idea")
    gen_parser.add_argument("--profile", type=str, default=None, help="Profile JSON file")
    gen_parser.add_argument(
        "--tech", action="append", default=[],
        help="Technology to build with (repeatable). Skips the profile file.",
    )
    gen_parser.add_argument(
        "--interest", action="append", default=[], help="Interest (repeatable, with --tech)",
    )
    gen_parser.add_argument(
        "--level", choices=["beginner", "intermediate", "advanced"], default="beginner",
        help="Skill level (with --tech)",
    )
    gen_parser.add_argument("--difficulty", choices=["beginner", "intermediate", "advanced"])
    gen_parser.add_argument("--category", choices=list(CATEGORIES))
    gen_parser.add_argument("--time", type=str, default=None, help="Override time estimate")
    gen_parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible output")
    gen_parser.add_argument("--json", action="store_true", help="Print the idea as JSON")
    gen_parser.add_argument(
        "--export", nargs="?", const="", default=None,
        help="Write the export JSON. Optional path; defaults to <title>.json in cwd.",
    )

    pop_parser = sub.add_parser("popularity", parents=[common], help="Show technology popularity")
    pop_parser.add_argument("--profile", type=str, default=None, help="Profile JSON file")
    pop_parser.add_argument("--project", action="append", default=[], help="External project URL")
    pop_parser.add_argument("--limit", type=_positive_int, default=20, help="Rows to show (default 20)")

    fetch_parser = sub.add_parser("fetch", parents=[common], help="Detect technologies at a URL")
    fetch_parser.add_argument("url", help="JSON resource URL")

    import_parser = sub.add_parser(
        "import-project", parents=[common], help="Add an external project to a profile",
    )
    import_parser.add_argument("--profile", type=str, default=None, help="Profile JSON file")
    import_parser.add_argument("url", help="JSON resource URL")

    sub.add_parser("options", parents=[common], help="List profile options")

    serve_parser = sub.add_parser("serve", parents=[common], help="Start the JSON API")
    serve_parser.add_argument("--port", type=int, default=None, help="Port (default 5002)")
    serve_parser.add_argument("--host", type=str, default=None, help="Host (default 127.0.0.1)")

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    setup_logging(args.verbose)
    config = load_config()

    try:
        match args.command:
            case "generate":
                cmd_generate(config, args)
            case "popularity":
                cmd_popularity(config, args)
            case "fetch":
                cmd_fetch(config, args.url)
            case "import-project":
                cmd_import_project(config, args)
            case "options":
                cmd_options()
            case "serve":
                cmd_serve(config, args)
            case _:
                parser.print_help()
    except InvalidProfileError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    cli()
