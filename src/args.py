"""Argument parsing functionality for assetmerge."""

import argparse


def parse_args(argv=None):
    """Parses the arguments passed to the program."""
    parser = argparse.ArgumentParser(
        prog="assetmerge",
        description=(
            "assetmerge - Merge CSS/JS resources, inline @import and minify"
        ),
        add_help=True,
    )

    input_group = parser.add_mutually_exclusive_group(required=True)
    input_group.add_argument("-r", "--resource",
                        dest="RESOURCES",
                        help="Resource URI to merge (repeat to build a group, order is kept)",
                        action="append", type=str)
    input_group.add_argument("-l", "--load_list",
                        dest="LIST_FROM_FILE",
                        help="Load the resource URIs of the group from a file, one per line",
                        action="store", type=str)

    parser.add_argument("-o", "--output",
                        dest="OUTPUT",
                        help="Path to output file (default: standard output)",
                        action="store",
                        type=str)
    parser.add_argument("--no-minimize",
                        dest="MINIMIZE",
                        help="Skip minifier processors for the group",
                        action="store_false",
                        default=None)
    parser.add_argument("--encoding",
                        dest="ENCODING",
                        help="Character encoding of the resources (default: UTF-8)",
                        action="store",
                        type=str)
    parser.add_argument("--context-root",
                        dest="CONTEXT_ROOT",
                        help="Directory serving URIs that start with '/'",
                        action="store",
                        type=str)
    parser.add_argument("--base-dir",
                        dest="BASE_DIR",
                        help="Directory relative file URIs are resolved against (default: .)",
                        action="store",
                        type=str)
    parser.add_argument("--loglevel",
                        dest="LOG_LEVEL",
                        help="Set the logging level",
                        action="store",
                        type=str,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'])
    parser.add_argument("--logfile",
                        dest="LOG_FILE",
                        help="Log output file",
                        action="store",
                        type=str)
    parser.add_argument("--error-on-warnings",
                        dest="ERROR_ON_WARNINGS",
                        help="Exit with a non-zero status code if warnings (import cycles, duplicates) are present.",
                        action="store_true")
    parser.add_argument("-q", "--quiet",
                        dest="QUIET",
                        help="Do not output logs to console.",
                        action="store_true")

    parser.add_argument("-c", "--config",
                        dest="CONFIG",
                        help="Path to configuration file (YAML, YML, or JSON)",
                        action="store",
                        type=str)
    parser.add_argument("--set",
                        dest="CONFIG_SET",
                        help="Set configuration override (KEY=VALUE format, can be used multiple times)",
                        action="append",
                        type=str,
                        default=[])

    return parser.parse_args(argv)
