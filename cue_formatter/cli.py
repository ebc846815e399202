"""
Command-line interface for the cue file formatter
"""
import argparse
import logging
import os
import sys
from typing import List, Optional

from .config import Config
from .core import (
    CUSTOM_FORMAT_ID,
    DEFAULT_FORMAT_ID,
    OFFSET_HELP,
    TOKEN_OPTIONS,
    build_format_options,
    format_cue,
    resolve_template,
)
from .services import cue_file as cue_file_svc
from .services.errors import CueFormatterError


logger = logging.getLogger(__name__)

DEFAULT_CONFIG_NAMES = (
    'cue-formatter.yml',
    'cue-formatter.yaml',
    'config.yml',
    'config.yaml',
)


def find_default_config(directory: Optional[str] = None) -> Optional[str]:
    """Return the first default config file found in ``directory`` (cwd)."""
    directory = directory or os.getcwd()
    for name in DEFAULT_CONFIG_NAMES:
        candidate = os.path.join(directory, name)
        if os.path.exists(candidate):
            return candidate
    return None


def read_cue_text(path: Optional[str]) -> str:
    """Read cue text from ``path``, or from stdin when it is None or ``-``."""
    if path is None or path == '-':
        logger.debug("Reading cue text from stdin")
        return sys.stdin.read()
    return cue_file_svc.load_cue_file(path)


def print_formats(options) -> None:
    """Print the available export formats with their templates."""
    print("Export formats:")
    for option in options:
        print(f"  {option.id:<24} {option.label}")
        print(f"  {'':<24} {option.template}")


def print_tokens() -> None:
    """Print the template tokens."""
    print("Available tokens:")
    for token in TOKEN_OPTIONS:
        print(f"  {token.token:<20} {token.description}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='cue-formatter',
        description='Convert rekordbox .cue files into clean tracklists',
    )
    parser.add_argument('cue_file', nargs='?', help="Path to the .cue file ('-' or omitted reads stdin)")
    parser.add_argument('--config', type=str, help='Path to the YAML configuration file')
    parser.add_argument('-f', '--format', type=str, help='Export format id (see --list-formats)')
    parser.add_argument('-t', '--template', type=str, help="Custom template, e.g. '{start} {title}' (implies --format custom)")
    parser.add_argument('-o', '--offset', type=str, help='Shift all start times: seconds (+5, -2) or time (+00:30, -00:01:10); write negative values as --offset=-2')
    parser.add_argument('--output', dest='output_file', type=str, help='Write the tracklist to a file instead of stdout')
    parser.add_argument('--list-formats', action='store_true', help='List the export formats and exit')
    parser.add_argument('--list-tokens', action='store_true', help='List the template tokens and exit')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Funzione principale CLI"""
    parser = build_parser()
    args = parser.parse_args(argv)

    # Logging minimale su stderr; stdout resta riservato alla tracklist.
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(levelname)s %(name)s: %(message)s',
        stream=sys.stderr,
    )

    # Carica configurazione (--config oppure un file di default nella cwd)
    try:
        config = Config(config_file=args.config or find_default_config())
    except Exception as e:
        print(str(e), file=sys.stderr)
        return 1

    format_id = args.format
    if format_id is None and args.template is not None:
        format_id = CUSTOM_FORMAT_ID

    # Gli argomenti CLI hanno precedenza sul file di configurazione
    config.update_from_args({
        'format': format_id,
        'custom_template': args.template,
        'offset': args.offset,
        'output_file': args.output_file,
    })

    try:
        options = build_format_options(config.get('formats'))
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    if args.list_formats or args.list_tokens:
        if args.list_formats:
            print_formats(options)
        if args.list_tokens:
            print_tokens()
        return 0

    # Un "format:" vuoto nel YAML equivale al formato di default
    selected_format = config.get('format')
    if selected_format is None:
        selected_format = DEFAULT_FORMAT_ID

    try:
        template = resolve_template(
            str(selected_format), config.get('custom_template'), options
        )
    except ValueError as e:
        parser.print_usage(sys.stderr)
        print(f"{parser.prog}: error: {e}", file=sys.stderr)
        return 2

    try:
        cue_text = read_cue_text(args.cue_file)
    except CueFormatterError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    result = format_cue(cue_text, template, str(config.get('offset') or ''))
    print(f"Parsed tracks: {result.track_count}", file=sys.stderr)

    if not result.offset_valid:
        print(OFFSET_HELP, file=sys.stderr)
        return 1

    if not result.track_count:
        print("No tracks parsed yet.", file=sys.stderr)
        return 0

    output_file = config.get('output_file')
    if output_file:
        try:
            cue_file_svc.write_output(result.output, output_file)
        except CueFormatterError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        print(f"✓ Tracklist: {output_file}", file=sys.stderr)
    else:
        print(result.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
