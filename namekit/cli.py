#!/usr/bin/env python3
"""
namekit CLI
===========
Command-line interface for name generation and rendering.

Usage:
    namekit generate -n 10 --script hangul --seed demo
    namekit generate --min 6 --max 6 --all-scripts
    namekit render ka-lin-mo --script hebrew
    namekit scripts
"""

import argparse
import logging
import sys

from rich.console import Console
from rich.table import Table

from namekit import __version__
from namekit.generators import Name, NameGenerator, SeededRandom, validate_lengths
from namekit.scripts import Script, UnreachableSyllableError
from namekit.settings import generate_defaults, get_setting

logger = logging.getLogger(__name__)

# Exit codes
EXIT_OK = 0
EXIT_ERROR = 1
EXIT_USAGE = 2
EXIT_INTERRUPTED = 130


# =============================================================================
# Utilities
# =============================================================================

class Output:
    """Handles CLI output with quiet mode support."""

    def __init__(self, quiet: bool = False):
        self.quiet = quiet
        self.console = Console(highlight=False)

    def print(self, *args, **kwargs):
        if not self.quiet:
            print(*args, **kwargs)

    def result(self, text: str, end: str = '\n'):
        """Print a result line; results are shown even in quiet mode."""
        sys.stdout.write(text + end)

    def error(self, msg: str):
        print(f"Error: {msg}", file=sys.stderr)

    def table(self, title: str, headers: list, rows: list):
        """Print a Rich table."""
        table = Table(title=title)
        for header in headers:
            table.add_column(header)
        for row in rows:
            table.add_row(*(str(c) for c in row))
        self.console.print(table)


def configure_logging(verbose: bool = False):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
        stream=sys.stderr,
    )


def resolve_script(name: str, out: Output):
    """Script from its CLI spelling, or None after reporting the error."""
    try:
        return Script.from_name(name)
    except ValueError as e:
        out.error(str(e))
        return None


def make_rng(seed):
    """Seeded generator for --seed, OS entropy otherwise."""
    if seed is None:
        return SeededRandom()
    return SeededRandom.from_text(seed)


def script_rows(name: Name):
    return [(script.value, text) for script, text in name.render_all().items()]


# =============================================================================
# Commands
# =============================================================================

def cmd_generate(args, out: Output) -> int:
    """Generate names."""
    ok, message = validate_lengths(args.min, args.max)
    if not ok:
        out.error(message)
        return EXIT_USAGE
    if args.count < 0:
        out.error("Count must not be negative")
        return EXIT_USAGE

    script = resolve_script(args.script, out)
    if script is None:
        return EXIT_USAGE

    gen = NameGenerator(args.min, args.max)
    rng = make_rng(args.seed)
    logger.debug("Generating %d names (seed=%r, script=%s)", args.count, args.seed, script.value)

    separator = generate_defaults().separator
    for i in range(args.count):
        name = gen.generate_name(rng)
        if args.all_scripts:
            out.table(f"{i + 1}. {name.romanized}", ['Script', 'Rendering'], script_rows(name))
        else:
            out.result(name.write(script), end=separator)
    return EXIT_OK


def cmd_render(args, out: Output) -> int:
    """Render a given syllable sequence."""
    try:
        name = Name.parse(args.syllables)
    except ValueError as e:
        out.error(str(e))
        return EXIT_USAGE

    script = resolve_script(args.script, out)
    if script is None:
        return EXIT_USAGE

    try:
        if args.all_scripts:
            out.table(name.romanized, ['Script', 'Rendering'], script_rows(name))
        else:
            out.result(name.write(script))
    except UnreachableSyllableError as e:
        out.error(str(e))
        return EXIT_USAGE
    return EXIT_OK


def cmd_scripts(args, out: Output) -> int:
    """List available scripts with a sample rendering."""
    sample = Name.parse(get_setting('scripts.sample', 'ka-lin-mo'))
    out.table(f"Scripts (sample: {sample.romanized})", ['Script', 'Sample'], script_rows(sample))
    return EXIT_OK


# =============================================================================
# Main
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='namekit',
        description='namekit - Pronounceable Name Synthesizer',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s generate -n 10
  %(prog)s generate -n 5 --script hangul --seed demo
  %(prog)s generate --min 6 --max 6 --all-scripts
  %(prog)s render ka-lin-mo --script orkhon
  %(prog)s scripts
"""
    )

    parser.add_argument('--version', '-V', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--quiet', '-q', action='store_true', help='Suppress non-essential output')
    parser.add_argument('--verbose', '-v', action='store_true', help='Debug logging and tracebacks')

    defaults = generate_defaults()

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # --- generate ---
    p = subparsers.add_parser('generate', aliases=['gen', 'g'], help='Generate names')
    p.add_argument('-n', '--count', type=int, default=defaults.count,
                   help='Number of names (default: %(default)s)')
    p.add_argument('--min', type=int, default=defaults.min_length,
                   help='Minimum length (default: %(default)s)')
    p.add_argument('--max', type=int, default=defaults.max_length,
                   help='Maximum length (default: unbounded)')
    p.add_argument('--script', '-s', default=defaults.script,
                   help='Script to render in (default: %(default)s)')
    p.add_argument('--seed', help='Seed text for reproducible output')
    p.add_argument('--all-scripts', '-a', action='store_true', help='Render each name in every script')

    # --- render ---
    p = subparsers.add_parser('render', aliases=['r'], help='Render given syllables')
    p.add_argument('syllables', help='Hyphen-separated syllables (e.g., ka-lin-mo)')
    p.add_argument('--script', '-s', default=defaults.script,
                   help='Script to render in (default: %(default)s)')
    p.add_argument('--all-scripts', '-a', action='store_true', help='Render in every script')

    # --- scripts ---
    subparsers.add_parser('scripts', aliases=['ls'], help='List available scripts')

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return EXIT_OK

    configure_logging(args.verbose)

    # Handle aliases
    cmd_map = {
        'gen': 'generate', 'g': 'generate',
        'r': 'render',
        'ls': 'scripts',
    }
    command = cmd_map.get(args.command, args.command)

    out = Output(quiet=args.quiet)

    commands = {
        'generate': cmd_generate,
        'render': cmd_render,
        'scripts': cmd_scripts,
    }

    handler = commands.get(command)
    if handler:
        try:
            return handler(args, out)
        except KeyboardInterrupt:
            out.print("\nCancelled.", file=sys.stderr)
            return EXIT_INTERRUPTED
        except Exception as e:
            out.error(str(e))
            if args.verbose:
                import traceback
                traceback.print_exc()
            return EXIT_ERROR

    parser.print_help()
    return EXIT_OK


if __name__ == '__main__':
    sys.exit(main())
