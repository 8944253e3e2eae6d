"""assetmerge - merge CSS/JS resources into one processed stream

    Returns:
        int: Exit code
"""
import logging
import os
import sys

from args import parse_args
from common.logging_utils import configure_logging, extra_context, is_debug_enabled
from config.loader import load_configuration
from constants import Constants, ExitCodes
from errors import (
    ConfigurationError,
    ProcessingError,
    RemoteResourceError,
    ResourceIOError,
    ResourceNotFoundError,
)
from manager import build_manager, resources_from_uris
from processor.context import ProcessingContext

logger = logging.getLogger(__name__)


def load_uris_file(file_name):
    """Loads resource URIs from a file.

    Blank lines and lines starting with ``#`` are ignored.

    Args:
        file_name (str): File path containing the list of URIs.

    Returns:
        list: List of URIs, in file order.
    """
    try:
        with open(file_name, encoding='utf-8') as file:
            return [
                line.strip() for line in file
                if line.strip() and not line.strip().startswith("#")
            ]
    except FileNotFoundError as e:
        logging.error("File not found: %s, aborting", e)
        sys.exit(ExitCodes.FILE_ERROR.value)
    except IOError as e:
        logging.error("IO error: %s, aborting", e)
        sys.exit(ExitCodes.FILE_ERROR.value)


def write_output(content, path, encoding):
    """Writes merged content to ``path``, or to standard output when no path is given."""
    if not path:
        sys.stdout.write(content)
        sys.stdout.flush()
        return
    try:
        with open(path, 'w', encoding=encoding, newline='') as file:
            file.write(content)
        logging.info("Merged output written to: %s", path)
    except OSError as e:
        logging.error("Failed to write output %s: %s", path, e)
        sys.exit(ExitCodes.FILE_ERROR.value)


def _build_config(args):
    """Config file and --set overrides first, then explicit CLI flags on top."""
    try:
        config = load_configuration(args.CONFIG, args.CONFIG_SET)
        return config.with_overrides(
            encoding=args.ENCODING,
            context_root=args.CONTEXT_ROOT,
            base_dir=args.BASE_DIR,
            minimize=args.MINIMIZE,
            log_level=args.LOG_LEVEL,
            log_file=args.LOG_FILE,
        )
    except ConfigurationError as e:
        logging.error("Configuration error: %s", e)
        sys.exit(ExitCodes.FILE_ERROR.value)


def main(argv=None):
    """Main function of the program."""
    args = parse_args(argv)
    # Honor CLI --loglevel by passing it to centralized logger via env
    if getattr(args, "LOG_LEVEL", None):
        os.environ[Constants.ENV_LOG_LEVEL] = str(args.LOG_LEVEL).upper()
    configure_logging(log_file=args.LOG_FILE, quiet=args.QUIET)

    config = _build_config(args)
    if config.log_file and config.log_file != args.LOG_FILE:
        configure_logging(log_file=config.log_file, quiet=args.QUIET)
    if not args.LOG_LEVEL:
        logging.getLogger().setLevel(getattr(logging, str(config.log_level).upper(), logging.INFO))

    if is_debug_enabled(logger):
        logger.debug(
            "CLI start",
            extra=extra_context(event="function_entry", component="cli", action="main")
        )

    uris = args.RESOURCES or load_uris_file(args.LIST_FROM_FILE)
    if not uris:
        logging.error("No resources to merge.")
        sys.exit(ExitCodes.FILE_ERROR.value)

    try:
        resources = resources_from_uris(uris)
    except ValueError as e:
        logging.error("%s", e)
        sys.exit(ExitCodes.FILE_ERROR.value)

    manager = build_manager(config)
    context = ProcessingContext.create(config.encoding)
    try:
        merged = manager.merge(resources, context=context)
    except ResourceNotFoundError as e:
        logging.error("Resource not found: %s", e.uri)
        sys.exit(ExitCodes.FILE_ERROR.value)
    except RemoteResourceError as e:
        logging.error("Remote resource error: %s", e)
        sys.exit(ExitCodes.CONNECTION_ERROR.value)
    except ResourceIOError as e:
        logging.error("Resource read error: %s", e)
        sys.exit(ExitCodes.FILE_ERROR.value)
    except ProcessingError as e:
        logging.error("Processing failed: %s", e)
        sys.exit(ExitCodes.PROCESSING_ERROR.value)

    write_output(merged, args.OUTPUT, config.encoding)

    if context.warnings:
        logging.warning("%d warning(s) raised while merging.", len(context.warnings))
        if args.ERROR_ON_WARNINGS:
            logging.error("Warnings present, exiting with non-zero status code.")
            sys.exit(ExitCodes.EXIT_WARNINGS.value)

    if is_debug_enabled(logger):
        logger.debug(
            "CLI finished",
            extra=extra_context(
                event="function_exit",
                component="cli",
                action="main",
                outcome="success"
            )
        )
    sys.exit(ExitCodes.SUCCESS.value)


if __name__ == "__main__":
    main()
