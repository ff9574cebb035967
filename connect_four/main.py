"""Application entry point."""

from __future__ import annotations

import logging
import random

from connect_four.app.controller import SessionController
from connect_four.app.engine_factory import build_engine
from connect_four.app.pacing import RevealPacing
from connect_four.infra.config import load_app_config, load_default_env_files
from connect_four.infra.logging import setup_logging

logger = logging.getLogger(__name__)

_WINDOW_MARGIN = 160


def main() -> int:
    """Run the Connect Four application."""
    load_default_env_files()
    setup_logging()
    config = load_app_config()
    logger.info(
        "app_config rows=%d cols=%d ai=%s playouts=%d seed=%s",
        config.rows,
        config.cols,
        config.ai,
        config.ai_playouts,
        config.seed,
    )

    from connect_four.qt.bootstrap import create_qt_application, create_qt_frontend
    from connect_four.qt.timer import QtTimerScheduler

    create_qt_application()
    rng = random.Random(config.seed)
    scheduler = QtTimerScheduler()
    controller = SessionController(
        build_engine(config, rng),
        scheduler,
        rng=rng,
        pacing=RevealPacing(base_ms=config.reveal_base_ms, spread_ms=config.reveal_spread_ms),
    )
    frontend = create_qt_frontend(controller, config, scheduler)
    controller.initialize()
    width, height = config.canvas_size
    frontend.window.sync_ui()
    frontend.window.show_windowed(width + _WINDOW_MARGIN // 2, height + _WINDOW_MARGIN)
    try:
        return frontend.run_event_loop()
    finally:
        controller.close()
        frontend.shutdown()


if __name__ == "__main__":
    raise SystemExit(main())
