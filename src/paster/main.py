#!/usr/bin/env python3

import argparse
import logging
import signal
import sys
import time
from dataclasses import replace
from typing import Optional

from paster.config import PasterConfig
from paster.models.card import Card
from paster.services.paster_service import PasterService

logger = logging.getLogger(__name__)


class PasterApp:

    def __init__(self, config: PasterConfig, service: Optional[PasterService] = None):
        self.config = config
        self.service = service or PasterService(config=config)
        self.hotkeys = None
        self.server = None
        self.running = False

    def _on_card_created(self, card: Card) -> None:
        logger.info(f"New card [{card.content_type.value}] {card.title}")

    def _on_show_panel(self) -> None:
        logger.info(f"Panel shown with {len(self.service.get_all_cards())} cards")

    def start(self) -> None:
        if self.running:
            return

        self.running = True
        self.service.on_card_created(self._on_card_created)
        self.service.on_show_panel(self._on_show_panel)
        self.service.start()

        if self.config.enable_hotkeys:
            try:
                from paster.hotkeys import HotkeyBinder
                self.hotkeys = HotkeyBinder(
                    self.service,
                    capture_hotkey=self.config.capture_hotkey,
                    panel_hotkey=self.config.panel_hotkey,
                )
                if not self.hotkeys.bind():
                    logger.warning("Some hotkeys could not be registered")
            except Exception as e:
                logger.warning(f"Hotkeys unavailable, continuing without them: {e}")
                self.hotkeys = None

        print("Paster running. Press Ctrl+C to stop")

    def stop(self) -> None:
        if not self.running:
            return

        self.running = False

        if self.hotkeys:
            self.hotkeys.unbind()
            self.hotkeys = None

        if self.server:
            self.server.should_exit = True

        self.service.stop()
        self.service.clear()
        print("Paster stopped")

    def run_forever(self) -> None:
        self.start()

        try:
            if self.config.enable_api:
                self._serve()
            else:
                while self.running:
                    time.sleep(1.0)
        except KeyboardInterrupt:
            print("\nStopping...")
        finally:
            self.stop()

    def _serve(self) -> None:
        import uvicorn
        from paster.api.server import create_app

        app = create_app(self.service)
        uv_config = uvicorn.Config(
            app,
            host=self.config.api_host,
            port=self.config.api_port,
            log_level="warning",
        )
        self.server = uvicorn.Server(uv_config)
        logger.info(f"API listening on http://{self.config.api_host}:{self.config.api_port}")
        self.server.run()


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Paster - clipboard history cards"
    )

    parser.add_argument(
        "-i", "--poll-interval",
        type=float,
        default=None,
        help="Clipboard polling interval in seconds (default: 0.5)"
    )

    parser.add_argument(
        "-c", "--capacity",
        type=int,
        default=None,
        help="Number of cards kept in history (default: 50)"
    )

    parser.add_argument(
        "--host",
        type=str,
        default=None,
        help="API host (default: 127.0.0.1)"
    )

    parser.add_argument(
        "-p", "--port",
        type=int,
        default=None,
        help="API port (default: 5174)"
    )

    parser.add_argument(
        "--no-api",
        action="store_true",
        help="Do not start the local HTTP API"
    )

    parser.add_argument(
        "--no-hotkeys",
        action="store_true",
        help="Do not register global hotkeys"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose debug logging"
    )

    return parser.parse_args(argv)


def build_config(args, base: Optional[PasterConfig] = None) -> PasterConfig:
    config = base or PasterConfig.from_env()
    overrides = {}
    if args.poll_interval is not None:
        overrides["poll_interval"] = args.poll_interval
    if args.capacity is not None:
        overrides["capacity"] = args.capacity
    if args.host is not None:
        overrides["api_host"] = args.host
    if args.port is not None:
        overrides["api_port"] = args.port
    if args.no_api:
        overrides["enable_api"] = False
    if args.no_hotkeys:
        overrides["enable_hotkeys"] = False
    return replace(config, **overrides)


def main(argv=None):
    args = parse_args(argv)

    logging.basicConfig(level=logging.INFO, format='%(levelname)s: %(message)s')
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        config = build_config(args)
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(2)

    app = PasterApp(config)

    def signal_handler(signum, frame):
        app.stop()
        sys.exit(0)

    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)

    try:
        app.run_forever()
    except Exception as e:
        logger.error(f"Fatal error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
