"""
Command-line interface for x2-colon
"""
import argparse
import json
import logging
import os
import sys
from typing import List, Optional

from .config import Config, ConfigError
from .core import calculate_durations, clean_script
from .core.errors import ParseError
from .services import server as server_svc

logger = logging.getLogger(__name__)


def read_input(path: Optional[str]) -> str:
    """Read the script from ``path``, or from stdin when ``path`` is missing or ``-``."""
    if not path or path == '-':
        return sys.stdin.read()
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def find_default_config(cwd: Optional[str] = None) -> Optional[str]:
    """Return ``config.yml`` or ``config.yaml`` from ``cwd`` if one exists."""
    cwd = cwd or os.getcwd()
    for name in ('config.yml', 'config.yaml'):
        candidate = os.path.join(cwd, name)
        if os.path.exists(candidate):
            return candidate
    return None


def run_durations(text: str, as_json: bool = False) -> int:
    try:
        output = calculate_durations(text)
    except ParseError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if as_json:
        print(json.dumps(output.model_dump(), indent=2, ensure_ascii=False))
        return 0

    for line in output.lines:
        print(f"{line.id}. {line.input} = {line.result.format}")
    print(f"Total: {output.total.format}")
    return 0


def run_clean(text: str) -> int:
    sys.stdout.write(clean_script(text))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='x2colon',
        description='Sum timestamp ranges like (0:00-1:23) in a script, or strip them out',
    )
    parser.add_argument('--config', type=str, help='Path to the YAML configuration file')
    parser.add_argument('--log-level', type=str, help='Logging level (DEBUG, INFO, WARNING, ...)')
    sub = parser.add_subparsers(dest='command', required=True)

    durations = sub.add_parser('durations', help='Print the duration of every range line and the total')
    durations.add_argument('file', nargs='?', help="Input file (default: stdin, or '-')")
    durations.add_argument('--json', action='store_true', help='Print the result as JSON')

    clean = sub.add_parser('clean', help='Print the script with every range removed')
    clean.add_argument('file', nargs='?', help="Input file (default: stdin, or '-')")

    serve = sub.add_parser('serve', help='Run the HTTP API')
    serve.add_argument('--host', type=str, help='Address to bind')
    serve.add_argument('--port', type=int, help='Port to bind')

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Parse ``argv``, load configuration and run the selected subcommand."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = Config(config_file=args.config or find_default_config())
        config.update_from_env()
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    # Command-line arguments take precedence
    config.update_from_args({
        'log_level': args.log_level,
        'host': getattr(args, 'host', None),
        'port': getattr(args, 'port', None),
    })

    level = str(config.get('log_level', 'INFO')).upper()
    logging.basicConfig(level=getattr(logging, level, logging.INFO))
    logger.debug("Configuration: %s", config.get_all())

    if args.command == 'serve':
        server_svc.serve(config.get('host'), int(config.get('port')), config.get('cors'))
        return 0

    try:
        text = read_input(args.file)
    except OSError as e:
        print(f"Error: cannot read {args.file}: {e}", file=sys.stderr)
        return 2

    if args.command == 'durations':
        return run_durations(text, as_json=args.json)
    return run_clean(text)


if __name__ == "__main__":
    sys.exit(main())
