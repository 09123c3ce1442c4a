from __future__ import annotations

import argparse
import logging
import os
from logging.handlers import RotatingFileHandler
from numsort.file_processor import LOG_FORMAT, FileProcessor, get_logger


def setup_logger(logfile: str | None = None) -> logging.Logger:
    logger = get_logger()
    if not logfile:
        return logger

    logfile = os.path.abspath(logfile)
    if any(getattr(h, "baseFilename", None) == logfile for h in logger.handlers):
        return logger

    # Rotating file handler to avoid unbounded log growth
    handler = RotatingFileHandler(logfile, maxBytes=10 * 1024 * 1024, backupCount=5, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return logger


# Edit these defaults as needed
DEFAULT_OUTPUT_DIR = "./output"
DEFAULT_FILE_NAME = "random_numbers.txt"
DEFAULT_COUNT = 100
DEFAULT_LOW = 1
DEFAULT_HIGH = 1000


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Fill a file with random integers and sort it in place")
    parser.add_argument(
        "--dir", "-d",
        default=DEFAULT_OUTPUT_DIR,
        help=f"Directory to create the numbers file in (default {DEFAULT_OUTPUT_DIR})"
    )
    parser.add_argument(
        "--file", "-f",
        default=DEFAULT_FILE_NAME,
        help=f"Name of the numbers file (default {DEFAULT_FILE_NAME})"
    )
    parser.add_argument("--count", "-n", type=int, default=DEFAULT_COUNT, help="How many integers to write")
    parser.add_argument("--low", type=int, default=DEFAULT_LOW, help="Smallest value to generate (inclusive)")
    parser.add_argument("--high", type=int, default=DEFAULT_HIGH, help="Largest value to generate (inclusive)")
    parser.add_argument("--logdir", "-l", default=None, help="Directory to write a rotating log file to")
    parser.add_argument("--atomic", action="store_true", help="Rewrite the sorted file via a temp file and rename")
    return parser.parse_args(argv)


def run_once(processor: FileProcessor, dir_path: str, file_path: str, args: argparse.Namespace) -> None:
    processor.ensure_directory(dir_path)
    processor.create_and_fill(file_path, count=args.count, lower_bound=args.low, upper_bound=args.high)
    processor.sort_in_place(file_path, atomic=args.atomic)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    dir_path = args.dir
    file_path = os.path.join(dir_path, args.file)

    logfile = None
    if args.logdir:
        log_dir = os.path.abspath(args.logdir)
        os.makedirs(log_dir, exist_ok=True)
        logfile = os.path.join(log_dir, "numsort.log")
    logger = setup_logger(logfile)
    processor = FileProcessor(logger=logger)

    try:
        run_once(processor, dir_path, file_path, args)
    except Exception as ex:
        logger.error("Exception caught: %s", ex)
        return 0

    logger.info("Done: %s", file_path)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
