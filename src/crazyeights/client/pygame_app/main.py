from __future__ import annotations

import argparse
import logging

import pygame  # type: ignore[import-not-found]

from crazyeights.logging_utils import LOG_LEVEL, setup_logging
from crazyeights.paths import get_paths
from crazyeights.services.content import ContentService
from crazyeights.services.telemetry import TelemetryService

from .app import App, GameContext
from .asset_manager import AssetManager
from .scenes.boot import BootScene

logger = logging.getLogger(__name__)


def main() -> int:
    parser = argparse.ArgumentParser(prog="crazyeights")
    parser.add_argument("--width", type=int, default=1024)
    parser.add_argument("--height", type=int, default=768)
    parser.add_argument("--seed", type=int, default=None, help="seed the shuffle for a reproducible deal")
    parser.add_argument("--log-level", default=LOG_LEVEL)
    args = parser.parse_args()

    setup_logging(args.log_level)

    pygame.init()
    screen = pygame.display.set_mode((args.width, args.height))
    pygame.display.set_caption("Crazy Eights")

    clock = pygame.time.Clock()
    paths = get_paths()
    logger.info("starting (seed=%s, data=%s)", args.seed, paths.data_dir)

    ctx = GameContext(
        screen=screen,
        clock=clock,
        paths=paths,
        assets=AssetManager(),
        content=ContentService(data_dir=paths.data_dir, schema_dir=paths.schema_dir),
        telemetry=TelemetryService(paths.userdata_dir / "telemetry.jsonl"),
        seed=args.seed,
    )

    app = App(ctx, BootScene(ctx))
    try:
        return app.run()
    finally:
        pygame.quit()


if __name__ == "__main__":
    raise SystemExit(main())
