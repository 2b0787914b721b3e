# File: src/permit_pricing/main.py
"""
Main application entry point for Campus Parking Permit Pricing
Sets up logging and runs the interactive quote loop
"""

from pathlib import Path
from typing import List, Optional
import argparse
import logging
import sys

from .presentation.console import AppConfig, ConsoleQuoteApp

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: str = "WARNING", log_file: Optional[Path] = None) -> logging.Logger:
    """Setup application logging configuration"""
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=LOG_FORMAT,
        handlers=handlers,
        force=True
    )
    return logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="permit-quote",
        description=f"{AppConfig.APP_NAME} - interactive permit price quotes"
    )
    parser.add_argument('--log-level', default='WARNING',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Logging level (default: WARNING)')
    parser.add_argument('--log-file', type=Path, default=None,
                        help='Also write logs to this file')
    parser.add_argument('--version', action='version',
                        version=f"%(prog)s {AppConfig.VERSION}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the application"""
    args = build_parser().parse_args(argv)
    logger = setup_logging(args.log_level, args.log_file)
    logger.info(f"Starting {AppConfig.APP_NAME}...")

    try:
        return ConsoleQuoteApp().run()
    except Exception as e:
        logger.exception(f"Fatal error in main: {e}")
        return 1
    finally:
        logger.info("Application shutting down...")


if __name__ == "__main__":
    sys.exit(main())
