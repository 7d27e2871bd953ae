from __future__ import annotations

import logging
import logging.config
import os
import sys
from argparse import ArgumentParser, ArgumentTypeError, Namespace
from collections.abc import Sequence
from pathlib import Path

import yaml

from vieta.config import ConfigValidationError, PipelineConfig
from vieta.exceptions import PipelineError
from vieta.logging import LOG_DIR_ENV, LOGGING_CONFIG
from vieta.pipeline import run_pipeline

logger = logging.getLogger(__name__)


def valid_file(fname: str) -> str:
    if not os.path.isfile(fname):
        raise ArgumentTypeError(f"File was not found: {fname}")
    return fname


def get_vieta_parser(parser: ArgumentParser | None = None) -> ArgumentParser:
    if parser is None:
        parser = ArgumentParser(
            description=(
                "Write a quadratic polynomial with Base64 encoded roots to a "
                "JSON document, read it back and derive the constant "
                "coefficient c from the roots"
            )
        )
    parser.add_argument(
        "--config",
        type=valid_file,
        help="YAML file overriding the example values and output path",
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="Path to the document file, defaults to polynomial.json",
    )
    parser.add_argument(
        "--logdir",
        default="./logs",
        help="Directory where vieta will write the log files",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print logs to stdout",
    )
    return parser


def vieta_parser(parser: ArgumentParser | None, args: Sequence[str]) -> Namespace:
    return get_vieta_parser(parser).parse_args(args)


def load_config(args: Namespace) -> PipelineConfig:
    config = (
        PipelineConfig.from_file(args.config) if args.config else PipelineConfig()
    )
    if args.output is not None:
        config = config.model_copy(update={"output": args.output})
    return config


def main() -> None:
    args = vieta_parser(None, sys.argv[1:])

    log_dir = os.path.abspath(args.logdir)
    try:
        os.makedirs(log_dir, exist_ok=True)
    except PermissionError as err:
        sys.exit(str(err))

    os.environ[LOG_DIR_ENV] = log_dir

    with open(LOGGING_CONFIG, encoding="utf-8") as conf_file:
        config_dict = yaml.safe_load(conf_file)
        try:
            logging.config.dictConfig(config_dict)
        except ValueError as err:
            if "handler 'file'" in str(err):
                exit_msg = (
                    f"Could not configure log handler for files. "
                    f"Check if you have write-access to the logs-directory ({log_dir})."
                )
            else:
                exit_msg = str(err)
            os.environ.pop(LOG_DIR_ENV)
            sys.exit(exit_msg)

    logger = logging.getLogger(__name__)
    if args.verbose:
        root_logger = logging.getLogger()
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(logging.INFO)
        root_logger.addHandler(handler)
    try:
        logger.info(f"Running vieta with {args} in {os.getcwd()}")
        run_pipeline(load_config(args), sys.stdout)
    except ConfigValidationError as err:
        err_msg = err.cli_message()
        logger.debug(err_msg)
        sys.exit(err_msg)
    except PipelineError as err:
        logger.debug(str(err))
        sys.exit(str(err))
    except BaseException as err:
        logger.exception(f'vieta crashed unexpectedly with "{err}"')

        logfiles = set()  # Use set to avoid duplicates...
        for loghandler in logging.getLogger().handlers:
            if isinstance(loghandler, logging.FileHandler):
                logfiles.add(loghandler.baseFilename)

        msg = f'vieta crashed unexpectedly with "{err}".\nSee logfile(s) for details:'
        msg += "\n   " + "\n   ".join(logfiles)

        sys.exit(msg)
    finally:
        os.environ.pop(LOG_DIR_ENV)


if __name__ == "__main__":
    main()
