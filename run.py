"""Tombs of the Ancient Kings CLI entry point.

Provides subcommands for serving the game's JSON API and for playing a
headless game with the scripted agent. Accepts configuration via flags and
environment variables, with optional .env loading.

Run `python run.py --help` for details.
"""

import argparse
import os
import signal
import sys
from textwrap import dedent

from colorama import Fore, Style
from colorama import init as _color_init
from dotenv import load_dotenv

_color_init()
# Disable colors if output is not a real terminal (e.g., during pytest capture)
_COLOR_ENABLED = sys.stdout.isatty()


def _load_version() -> str:
    path = os.path.join(os.path.dirname(os.path.abspath(__file__)), "VERSION")
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read().strip()
    except OSError:
        return "0.1.0"


__version__ = _load_version()


def parse_args(argv: list[str]) -> argparse.Namespace:
    description = """
    Tombs of the Ancient Kings

    Serve the game over a JSON API, or play a headless game with a scripted
    agent. Configuration can be provided via CLI flags or environment
    variables. If both are present, CLI flags take precedence.
    """

    epilog = dedent(
        """
        Environment variables:
          HOST                Bind address for the web server (default: 0.0.0.0)
          PORT                Port for the web server (default: 5000)
          TOMBS_SEED          Fixed dungeon seed for new sessions
          TOMBS_MAX_SESSIONS  Sessions kept in memory before the oldest is dropped (default: 8)
          TOMBS_LOG_LEVEL     debug | info | warn | error (default: info)
          TOMBS_LOG_JSON      Emit log events as JSON lines when set to 1

        Examples:
          # Run the server on the default host and port
          python run.py server

          # Run the server on a custom port
          python run.py server --port 8080

          # Play 200 steps of a seeded game in the terminal
          python run.py simulate --seed 42 --turns 200

          # Load variables from .env then run the server
          python run.py --env-file .env server
        """
    )

    parser = argparse.ArgumentParser(
        prog="tombs",
        description=dedent(description),
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )

    parser.add_argument(
        "--env-file",
        dest="env_file",
        help="Path to a .env file to load before processing flags",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"Tombs of the Ancient Kings {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command")

    # server subcommand
    server_parser = subparsers.add_parser(
        "server",
        help="Run the JSON API server",
        formatter_class=argparse.RawTextHelpFormatter,
        description="Serve game sessions over HTTP",
    )
    server_parser.add_argument(
        "--host",
        default=None,
        help="Host interface to bind (default: env HOST or 0.0.0.0)",
    )
    server_parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to listen on (default: env PORT or 5000)",
    )
    server_parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable Flask debug mode with verbose error pages",
    )
    server_parser.set_defaults(command="server")

    # simulate subcommand
    sim_parser = subparsers.add_parser(
        "simulate",
        help="Play a headless game with the scripted agent",
        formatter_class=argparse.RawTextHelpFormatter,
        description=dedent(
            """
            Generate a dungeon and let the scripted agent play it: it fights the
            nearest visible monster, collects items and drinks healing potions
            when hurt. Prints the final map and the latest messages.
            """
        ),
    )
    sim_parser.add_argument("--seed", type=int, default=None, help="Dungeon seed (default: env TOMBS_SEED or random)")
    sim_parser.add_argument("--turns", type=int, default=100, help="Agent steps to play (default: 100)")
    sim_parser.set_defaults(command="simulate")

    if not argv:
        argv = ["server"]

    args = parser.parse_args(argv)
    return args


def _banner(mode: str, rows: list[tuple[str, str | int]]) -> str:
    title = (
        f"{Fore.CYAN}{Style.BRIGHT}Tombs of the Ancient Kings{Style.RESET_ALL}"
        if _COLOR_ENABLED
        else "Tombs of the Ancient Kings"
    )

    def label(text: str) -> str:
        return f"{Fore.YELLOW}{text}{Style.RESET_ALL}" if _COLOR_ENABLED else text

    def value(val: str | int) -> str:
        return f"{Fore.GREEN}{val}{Style.RESET_ALL}" if _COLOR_ENABLED else str(val)

    divider = (Fore.MAGENTA + "=" * 40 + Style.RESET_ALL) if _COLOR_ENABLED else "=" * 40
    lines = [divider, f"  {title}", divider, f"  {label('Mode:'):12} {value(mode.upper())}"]
    lines += [f"  {label(name + ':'):12} {value(val)}" for name, val in rows]
    lines += [divider, ""]
    return "\n".join(lines)


def run_simulation(seed: int | None, turns: int) -> int:
    from tombs.config import GameRules
    from tombs.dungeon.config import DungeonConfig
    from tombs.models.game_session import GameSession
    from tombs.services.autoplay import simulate
    from tombs.services.view import render_ascii

    session = GameSession.new(DungeonConfig.from_env(), GameRules.from_env(), seed=seed)
    print(_banner("simulate", [("Seed", session.seed), ("Turns", turns)]))
    played = simulate(session, turns)
    print("\n".join(render_ascii(session)))
    fighter = session.player.fighter
    status = "alive" if session.player_alive else "dead"
    print(f"\nHP: {fighter.hp}/{fighter.max_hp}  Turn: {session.turn}  Steps: {played}  Player: {status}")
    for text, _color in session.messages.tail(session.rules.message_tail):
        print(f"  {text}")
    return 0


def main(argv: list[str]) -> int:
    args = parse_args(argv)
    if getattr(args, "env_file", None):
        load_dotenv(args.env_file)
    else:
        # Load default .env if present (no error if missing)
        load_dotenv()

    mode = (getattr(args, "command", None) or "server").lower()

    from tombs.logging_utils import log

    if mode == "simulate":
        seed = args.seed
        if seed is None and os.getenv("TOMBS_SEED"):
            seed = int(os.environ["TOMBS_SEED"])
        log.info(event="startup", mode=mode, seed=seed, turns=args.turns)
        return run_simulation(seed, args.turns)

    host = getattr(args, "host", None) or os.getenv("HOST", "0.0.0.0")
    port = int(getattr(args, "port", None) or os.getenv("PORT", "5000"))
    debug = bool(getattr(args, "debug", False) or os.getenv("FLASK_DEBUG") == "1")

    def handle_sigint(sig, frame):
        print("\n[INFO] Shutting down server...")
        sys.exit(0)

    signal.signal(signal.SIGINT, handle_sigint)

    # Import server entrypoints only after environment is ready
    from tombs.server import start_server

    print(
        _banner(
            mode,
            [
                ("Host", host),
                ("Port", port),
                ("Sessions", os.getenv("TOMBS_MAX_SESSIONS", "8")),
                ("Debug", "YES" if debug else "NO"),
            ],
        )
    )
    log.info(event="startup", mode=mode, host=host, port=port, debug=debug)
    start_server(host=host, port=port, debug=debug)
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
