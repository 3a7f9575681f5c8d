"""MazeMaster engine CLI entry point.

Provides subcommands for running the JSON API server and for exercising the
engine from a shell (maze generation, hook resolution). Accepts configuration
via flags and environment variables, with optional .env loading.

Run `python run.py --help` for details.
"""

import argparse
import json
import os
import signal
import sys
from textwrap import dedent

from dotenv import load_dotenv


def _parse_param(raw: str):
    if "=" not in raw:
        raise argparse.ArgumentTypeError(f"expected key=value, got {raw!r}")
    key, value = raw.split("=", 1)
    return key, value


def parse_args(argv: list[str]) -> argparse.Namespace:
    description = """
    MazeMaster Engine

    Serve the maze/combat/hook engine over HTTP, or call it directly from the
    command line. Configuration can be provided via CLI flags or environment
    variables. If both are present, CLI flags take precedence.
    """

    epilog = dedent(
        """
        Environment variables:
          HOST                    Bind address for the web server (default: 0.0.0.0)
          PORT                    Port for the web server (default: 5000)
          MAZEMASTER_MAZE_SIZE    Default maze size (default: 10)
          MAZEMASTER_MAX_STEPS    Default pathfinding budget (default: 50)
          MAZEMASTER_SEED         Fixed seed for generation (default: random)
          MAZEMASTER_LOG_LEVEL    debug | info | warn | error (default: info)

        Examples:
          # Run the server on a custom port
          python run.py server --port 8080

          # Print a seeded 8x8 maze as JSON
          python run.py generate --size 8 --seed 42

          # Resolve a hook from a profile file
          python run.py fire-hook profile.json onDamage --param amount=12 --param source=trap
        """
    )

    parser = argparse.ArgumentParser(
        prog="MazeMaster",
        description=dedent(description),
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "--env-file",
        dest="env_file",
        help="Path to a .env file to load before processing flags",
    )
    parser.add_argument("--version", action="store_true", help="Print the engine version and exit")

    subparsers = parser.add_subparsers(dest="command")

    server_parser = subparsers.add_parser(
        "server",
        help="Run the JSON API server",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    server_parser.add_argument("--host", default=None, help="Host interface to bind (default: env HOST or 0.0.0.0)")
    server_parser.add_argument("--port", type=int, default=None, help="Port to listen on (default: env PORT or 5000)")
    server_parser.add_argument("--debug", action="store_true", help="Enable Flask debug mode")

    gen_parser = subparsers.add_parser("generate", help="Generate a maze and print it as JSON")
    gen_parser.add_argument("--size", type=int, default=None, help="Maze size (default: env MAZEMASTER_MAZE_SIZE)")
    gen_parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible output")

    hook_parser = subparsers.add_parser("fire-hook", help="Resolve a hook template from a profile JSON file")
    hook_parser.add_argument("profile", help="Path to profile JSON")
    hook_parser.add_argument("hook", help="Hook name, e.g. onMove")
    hook_parser.add_argument(
        "--param", dest="params", action="append", type=_parse_param, default=[], help="key=value (repeatable)"
    )
    hook_parser.add_argument("--seed", type=int, default=None, help="Seed for dice/random macros")

    if len(argv) == 0:
        argv = ["server"]
    return parser.parse_args(argv)


def main(argv: list[str]) -> int:
    args = parse_args(argv)
    if getattr(args, "env_file", None):
        load_dotenv(args.env_file)
    else:
        load_dotenv()

    # Import after env is loaded so EngineConfig.from_env sees .env values.
    from mazemaster import __version__, engine_config
    from mazemaster.logging_utils import log

    if args.version:
        print(f"MazeMaster Engine {__version__}")
        return 0

    mode = (getattr(args, "command", None) or "server").lower()

    if mode == "generate":
        from mazemaster.maze import MazeGenerator, grid_to_dict

        size = args.size or engine_config.maze_size
        seed = args.seed if args.seed is not None else engine_config.seed
        grid = MazeGenerator(size, seed).run()
        print(json.dumps({"size": size, "seed": seed, "grid": grid_to_dict(grid)}))
        return 0

    if mode == "fire-hook":
        from mazemaster.hooks import fire_hook
        from mazemaster.rng import make_rng

        if not os.path.exists(args.profile):
            print(f"[ERROR] File not found: {args.profile}")
            return 1
        with open(args.profile, "r", encoding="utf-8") as f:
            profile = json.load(f)
        rng = make_rng(args.seed) if args.seed is not None else None
        result = fire_hook(profile, args.hook, dict(args.params), rng=rng)
        print(json.dumps(result.to_dict()))
        return 0 if result.executed else 1

    def handle_sigint(sig, frame):
        print("\n[INFO] Shutting down server...")
        sys.exit(0)

    signal.signal(signal.SIGINT, handle_sigint)

    host = getattr(args, "host", None) or os.getenv("HOST", "0.0.0.0")
    port = int(getattr(args, "port", None) or os.getenv("PORT", "5000"))
    debug = bool(getattr(args, "debug", False) or os.getenv("FLASK_DEBUG") == "1")

    divider = "=" * 40
    print(
        "\n".join(
            [
                divider,
                "  MazeMaster Engine Bootup",
                divider,
                f"  {'Host:':12} {host}",
                f"  {'Port:':12} {port}",
                f"  {'Maze size:':12} {engine_config.maze_size}",
                f"  {'Max steps:':12} {engine_config.max_steps}",
                divider,
                "",
            ]
        )
    )
    log.info(event="startup", mode=mode, host=host, port=port)

    from mazemaster.server import start_server

    start_server(host=host, port=port, debug=debug)
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
