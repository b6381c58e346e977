#!/usr/bin/env python3
"""`_kn`: the binary behind the `kn` and `kni` shell functions.

It never changes the directory itself. `query` and `interactive` print the
target on stdout (or into a file) and the shell function cds into it.
"""

import argparse
import sys
from pathlib import Path
from typing import Iterable, List, Optional

from kn_common import *
from kn_common.config_utils import KnConfig, load_config, resolve_config_path
from kn_common.custom_structures import ToolTemplate
from kn_common.format_utils import format_findings_table
from kn_common.input_utils import run_interactive_navigator
from kn_common.shell_utils import Shell, get_init_script
from kn_common.tools_utils import build_examples_epilog
from kn_core.errors import InternalError, KnError
from kn_core.fs import DefaultFileSystem
from kn_core.query import query


def get_tool_templates() -> List[ToolTemplate]:
    return [
        ToolTemplate(
            name="Set up kn for bash",
            extra_description="Add this line to ~/.bashrc: eval \"$(_kn init bash --exclude-old-pwd)\"",
            command=CMD_INIT,
            args={ARG_EXCLUDE_OLD_PWD: True},
            positionals=["bash"],
        ),
        ToolTemplate(
            name="Best match for an abbreviation",
            extra_description="Finds e.g. ./projects/kn-tools/src",
            command=CMD_QUERY,
            positionals=["--", "pr/kn/s"],
        ),
        ToolTemplate(
            name="All candidates, allowing gaps between fragments",
            extra_description="Up to 2 components may be skipped before and between fragments",
            command=CMD_QUERY,
            args={ARG_FIRST_DEPTH: 2, ARG_NEXT_DEPTH: 2, ARG_LIST: True},
            positionals=["--", "src", "test"],
        ),
        ToolTemplate(
            name="Wildcard and literal prefix",
            extra_description="`..` is taken literally, `-` matches any single component",
            command=CMD_QUERY,
            positionals=["--", "../-/doc"],
        ),
    ]


def parse_args(argv: Optional[Iterable[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog=QUERY_BIN_NAME,
        description="Find a directory from abbreviations of its path components.",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.epilog = build_examples_epilog(get_tool_templates(), QUERY_BIN_NAME)
    subparsers = parser.add_subparsers(dest="command", required=True)

    query_parser = subparsers.add_parser(CMD_QUERY, help="Print the best matching directory.")
    query_parser.add_argument(
        ARG_ABBR,
        nargs="+",
        help="Abbreviation(s) like `pr/kn` or `../-/doc`. Each argument is matched as one sequence.",
    )
    query_parser.add_argument(ARG_EXCLUDE, default=None, help="Path to skip when it ties with other best matches.")
    query_parser.add_argument(ARG_FIRST_DEPTH, type=int, default=None,
                              help="Components that may be skipped before a sequence's first match (overrides config).")
    query_parser.add_argument(ARG_NEXT_DEPTH, type=int, default=None,
                              help="Components that may be skipped between matches of a sequence (overrides config).")
    query_parser.add_argument(ARG_LIST, action="store_true", help="Print every ranked candidate as a table.")
    query_parser.add_argument(ARG_CONFIG, default=None, help="Config file (default: $KN_CONFIG or ~/.config/kn/config.yaml).")
    query_parser.add_argument(ARG_VERBOSE, action="store_true", help="Trace the search on stderr.")
    query_parser.set_defaults(handler=handle_query)

    init_parser = subparsers.add_parser(CMD_INIT, help="Print the shell init script.")
    init_parser.add_argument(ARG_SHELL, help=f"One of: {', '.join(shell.value for shell in Shell)}.")
    init_parser.add_argument(ARG_EXCLUDE_OLD_PWD, action="store_true",
                             help="Skip the previous directory when other directories match equally well.")
    init_parser.set_defaults(handler=handle_init)

    interactive_parser = subparsers.add_parser(CMD_INTERACTIVE, help="Pick a directory component by component.")
    interactive_parser.add_argument(ARG_TMP_FILE, nargs="?", default=None,
                                    help="File receiving the chosen path (stdout when omitted).")
    interactive_parser.add_argument(ARG_CONFIG, default=None, help="Config file.")
    interactive_parser.set_defaults(handler=handle_interactive)

    return parser.parse_args(argv)


def get_config(args: argparse.Namespace) -> KnConfig:
    return load_config(resolve_config_path(args.config))


def handle_query(args: argparse.Namespace) -> int:
    config = get_config(args).with_overrides(first_depth=args.first_depth, next_depth=args.next_depth)
    findings = query(
        args.abbr,
        config.to_search_opts(Path(CURRENT_DIR)),
        file_system=DefaultFileSystem(follow_symlinks=config.follow_symlinks),
        # shells pass an empty string when there is no previous directory
        excluded=args.exclude or None,
        allow_last_wildcard=config.allow_last_wildcard,
        log_sink=LOG_TO_STDERR if args.verbose else None,
    )
    if args.list:
        print(format_findings_table(findings))
    else:
        print(findings[0].path)
    return EXIT_OK


def handle_init(args: argparse.Namespace) -> int:
    print(get_init_script(Shell.from_name(args.shell), exclude_old_pwd=args.exclude_old_pwd), end="")
    return EXIT_OK


def handle_interactive(args: argparse.Namespace) -> int:
    config = get_config(args)
    path = run_interactive_navigator(
        Path(CURRENT_DIR),
        DefaultFileSystem(follow_symlinks=config.follow_symlinks),
        max_suggestions=config.max_suggestions,
    )
    if args.tmp_file:
        with open(args.tmp_file, "w", encoding="utf-8") as f:
            f.write(str(path))
    else:
        print(path)
    return EXIT_OK


def main(argv: Optional[Iterable[str]] = None) -> int:
    args = parse_args(argv)
    try:
        return args.handler(args)
    except InternalError as e:
        LOG_EXCEPTION(e, msg="This is a bug in kn, please report it with the details above", exit=False)
        return EXIT_INTERNAL_ERROR
    except KnError as e:
        print(f"{SHELL_FUNCTION_NAME}: {e}", file=sys.stderr)
        return EXIT_USER_ERROR
    except Exception as e:
        LOG_EXCEPTION(e, msg=f"Unexpected error while running `{args.command}`", exit=False)
        return EXIT_INTERNAL_ERROR


if __name__ == "__main__":
    sys.exit(main())
