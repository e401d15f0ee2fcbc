"""Command line entry point for lsh"""

import argparse
import dataclasses
import sys
from typing import List, Optional

from . import __version__
from .config import ShellConfig
from .exit_codes import EXIT_FAILURE, EXIT_SUCCESS
from .logger import setup_logging
from .shell import Shell


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='lsh',
        description='A small line-oriented command interpreter.',
    )
    parser.add_argument('script', nargs='?',
                        help='read commands from this file instead of stdin')
    parser.add_argument('-c', '--command', dest='command',
                        help='execute a single command line and exit')
    parser.add_argument('--prompt', help='prompt shown before each line (env: LSH_PROMPT)')
    parser.add_argument('--log-level', help='logging level (env: LSH_LOG_LEVEL)')
    parser.add_argument('--log-file', help='write the log to this file (env: LSH_LOG_FILE)')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    return parser


def load_config(args: argparse.Namespace) -> ShellConfig:
    """Environment settings overridden by whatever flags were given"""
    config = ShellConfig.from_env()
    overrides = {}
    if args.prompt is not None:
        overrides['prompt'] = args.prompt
    if args.log_level is not None:
        overrides['log_level'] = args.log_level.upper()
    if args.log_file is not None:
        overrides['log_file'] = args.log_file
    if args.script is not None and args.prompt is None:
        overrides['prompt'] = ''
    config = dataclasses.replace(config, **overrides)
    config.validate()
    return config


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args)
    except ValueError as e:
        parser.error(str(e))

    setup_logging(config.log_level_number, config.log_file)

    try:
        if args.command is not None:
            Shell(config).execute(args.command)
        elif args.script is not None:
            try:
                script = open(args.script, encoding='utf-8')
            except OSError as e:
                sys.stderr.write(f"lsh: {args.script}: {e.strerror or e}\n")
                return EXIT_FAILURE
            with script:
                Shell(config, stdin=script).loop()
        else:
            Shell(config).loop()
    except MemoryError:
        sys.stderr.write("lsh: allocation error\n")
        return EXIT_FAILURE

    return EXIT_SUCCESS


if __name__ == '__main__':
    sys.exit(main())
