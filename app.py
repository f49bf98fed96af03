#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
EnvSettings - Environment Settings Panel

Entry point for the NiceGUI-based settings preview application.
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))


def setup_logging():
    """Configure logging to console and file.

    Log file location: ~/.envsettings/logs/envsettings.log

    Returns:
        tuple: (console_handler, file_handler) to keep references alive
    """
    logs_dir = Path.home() / ".envsettings" / "logs"
    log_file_path = logs_dir / "envsettings.log"

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(logging.Formatter(
        '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt='%H:%M:%S'
    ))

    file_handler = None
    try:
        logs_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file_path, mode='a', encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
    except OSError as e:
        # Console-only logging
        print(f"[WARNING] Failed to create log file {log_file_path}: {e}", file=sys.stderr)
        file_handler = None

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    root_logger.addHandler(console_handler)
    if file_handler:
        root_logger.addHandler(file_handler)

    # Suppress verbose logging from third-party libraries
    for name in ['uvicorn', 'uvicorn.error', 'uvicorn.access', 'starlette',
                 'python_multipart', 'PIL', 'asyncio']:
        logging.getLogger(name).setLevel(logging.WARNING)

    return console_handler, file_handler


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="EnvSettings - environment settings panel")
    parser.add_argument('--host', default=None, help="Host to bind (default: from settings)")
    parser.add_argument('--port', type=int, default=None, help="Port to bind (default: from settings)")
    parser.add_argument('--native', action='store_true', default=None,
                        help="Open in a native window (requires pywebview)")
    parser.add_argument('--settings', type=Path, default=None,
                        help="Path to config/settings.json")
    return parser.parse_args(argv)


_global_log_handlers = None


def main():
    """Main entry point

    Note: Import is inside main() to prevent double initialization
    in native mode (pywebview uses multiprocessing).
    """
    import multiprocessing

    multiprocessing.freeze_support()

    global _global_log_handlers
    _global_log_handlers = setup_logging()  # Keep reference to prevent garbage collection

    logger = logging.getLogger(__name__)
    args = parse_args()

    from envsettings.ui.app import run_app

    try:
        run_app(
            host=args.host,
            port=args.port,
            native=args.native,
            settings_path=args.settings,
        )
    except KeyboardInterrupt:
        logger.debug("Application shutdown via KeyboardInterrupt")


if __name__ in {"__main__", "__mp_main__"}:
    main()
