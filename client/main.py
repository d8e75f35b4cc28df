# -*- coding: utf-8 -*-
"""
Posts browser desktop entry point.
"""

from __future__ import annotations

import argparse
import logging
import sys
from logging.handlers import RotatingFileHandler

from PySide6.QtWidgets import QApplication

import config
from client.app_controller import PostsAppController
from client.ui.theme import apply_theme


_LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'


def setup_logging(level: str = 'INFO', log_path: str | None = None) -> None:
    resolved_level = getattr(logging, str(level or 'INFO').upper(), logging.INFO)
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_path:
        try:
            file_handler = RotatingFileHandler(
                log_path,
                maxBytes=config.LOG_MAX_BYTES,
                backupCount=config.LOG_BACKUP_COUNT,
                encoding='utf-8',
            )
            file_handler.setFormatter(logging.Formatter(_LOG_FORMAT))
            handlers.insert(0, file_handler)
        except (PermissionError, OSError):
            # console only when the log file is not writable
            pass
    logging.basicConfig(level=resolved_level, format=_LOG_FORMAT, handlers=handlers, force=True)
    # httpx logs every request at INFO
    logging.getLogger('httpx').setLevel(max(resolved_level, logging.WARNING))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=f'{config.APP_NAME} v{config.VERSION}')
    parser.add_argument('--base-url', default=config.POSTS_API_BASE_URL, help='posts API base URL')
    parser.add_argument('--debounce-ms', type=int, default=config.SEARCH_DEBOUNCE_MS, help='search quiet period')
    parser.add_argument('--timeout', type=float, default=config.POSTS_HTTP_TIMEOUT, help='HTTP timeout in seconds')
    parser.add_argument(
        '--no-initial-fetch',
        dest='fetch_on_startup',
        action='store_false',
        default=config.FETCH_ON_STARTUP,
        help='do not load posts until the fetch button is pressed',
    )
    parser.add_argument('--log-level', default=config.LOG_LEVEL)
    parser.add_argument('--log-file', default=config.LOG_PATH)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level, args.log_file)
    logger = logging.getLogger(__name__)
    logger.info(f'{config.APP_NAME} v{config.VERSION} starting (api: {args.base_url})')

    qt_app = QApplication(sys.argv[:1])
    qt_app.setApplicationName(config.APP_NAME)
    apply_theme(qt_app)

    controller = PostsAppController(
        qt_app,
        args.base_url,
        debounce_ms=args.debounce_ms,
        timeout=args.timeout,
        fetch_on_startup=args.fetch_on_startup,
        app_name=config.APP_NAME,
    )
    qt_app.aboutToQuit.connect(controller.shutdown)
    controller.start()
    exit_code = qt_app.exec()
    controller.shutdown()
    return int(exit_code)


if __name__ == '__main__':
    sys.exit(main())
