"""
Entry point for the Exam Archive Browser GUI.
"""
import logging
import sys
from typing import Optional, Sequence

from exam_archive.config import BrowserConfig, build_arg_parser, config_from_args
from exam_archive.gui.utils.logging_utils import configure_logging

logger = logging.getLogger(__name__)

APP_NAME = "Exam Archive"


def run(config: Optional[BrowserConfig] = None) -> int:
    """
    Start the application and block until the window is closed.

    Returns:
        The Qt event loop's exit code.
    """
    from PySide6.QtWidgets import QApplication

    from exam_archive import __version__
    from exam_archive.gui.controller import BrowserController
    from exam_archive.gui.main_window import MainWindow
    from exam_archive.gui.styles.theme import apply_global_stylesheet

    config = config or BrowserConfig()

    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    app.setApplicationDisplayName(config.window_title)
    app.setApplicationVersion(__version__)
    apply_global_stylesheet(app)

    window = MainWindow(config)
    controller = BrowserController(window, config)
    app.aboutToQuit.connect(controller.shutdown)

    logger.info(f"Catalog: {config.catalog_url}")
    logger.info(f"Translations: {config.translations_url}")
    controller.start()
    window.show()

    return app.exec()


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    try:
        config = config_from_args(args)
    except ValueError as e:
        parser.error(str(e))
    return run(config)


if __name__ == "__main__":
    sys.exit(main())
