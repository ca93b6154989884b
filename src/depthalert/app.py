"""depthalert CLI entry point and main loop."""

import argparse
import logging
import time

from depthalert.config import load_config
from depthalert.utils.logging import setup_logging
from depthalert.bus import LocalBus
from depthalert.engine import create_engine
from depthalert.errors import FrameShapeError
from depthalert.hardware import create_announcer, create_haptics, create_source

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="depthalert — depth-based obstacle warnings")
    parser.add_argument("--hardware", default=None,
                        help="Hardware config override (e.g., 'realsense'; default is mock)")
    parser.add_argument("--config", default=None,
                        help="Path to additional config file to merge")
    parser.add_argument("--max-frames", type=int, default=None,
                        help="Stop after this many frames (default: run until Ctrl+C)")
    parser.add_argument("--log-file", default=None,
                        help="Also write logs to this file")
    parser.add_argument("overrides", nargs="*",
                        help="OmegaConf dot-notation overrides (e.g., engine.cooldowns.speech=5)")
    return parser.parse_args(argv)


def main(argv=None) -> None:
    args = parse_args(argv)

    cfg = load_config(
        config_path=args.config,
        hardware_override=args.hardware,
        cli_overrides=args.overrides if args.overrides else None,
    )

    setup_logging(cfg.get("log_level", "INFO"), log_file=args.log_file)
    logger.info("depthalert starting — source=%s", cfg.hardware.source.type)

    bus = LocalBus()
    source = create_source(cfg.hardware)
    announcer = create_announcer(cfg.hardware)
    haptics = create_haptics(cfg.hardware)
    engine = create_engine(cfg, announcer, haptics, bus=bus)

    tick_duration = 1.0 / cfg.get("loop_hz", 30)
    frames = 0

    # Frames are processed as they come; a slow tick drops frames, never queues them
    with source:
        try:
            while args.max_frames is None or frames < args.max_frames:
                t0 = time.monotonic()
                frame = source.read()
                try:
                    engine.process_frame(frame, now=t0)
                except FrameShapeError:
                    pass  # already logged by the engine, wait for the next frame
                frames += 1

                elapsed = time.monotonic() - t0
                sleep_time = tick_duration - elapsed
                if sleep_time > 0:
                    time.sleep(sleep_time)
                elif elapsed > tick_duration * 1.5:
                    logger.warning("Loop overrun: %.1fms (budget: %.1fms)",
                                   elapsed * 1000, tick_duration * 1000)
        except KeyboardInterrupt:
            logger.info("Ctrl+C received, stopping...")
        finally:
            announcer.stop()
            haptics.stop()

    logger.info("depthalert stopped after %d frames", frames)


if __name__ == "__main__":
    main()
