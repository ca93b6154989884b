"""Intel RealSense depth source, mounted in portrait."""

import logging

import numpy as np
from omegaconf import DictConfig

from depthalert.bus.messages import DepthFrame
from depthalert.hardware.base import DepthSource

logger = logging.getLogger(__name__)


class RealSenseDepthSource(DepthSource):
    """Wraps a pyrealsense2 pipeline streaming depth only.

    The camera is expected to be mounted rotated 90 degrees (portrait), so the
    buffer layout matches what BufferGeometry assumes.
    """

    def __init__(self, cfg: DictConfig) -> None:
        self._cfg = cfg
        self._pipeline = None
        self._frame_id = 0

    def start(self) -> None:
        import pyrealsense2 as rs

        self._pipeline = rs.pipeline()
        config = rs.config()

        width = self._cfg.get("width", 640)
        height = self._cfg.get("height", 480)
        fps = self._cfg.get("fps", 30)

        config.enable_stream(rs.stream.depth, width, height, rs.format.z16, fps)
        profile = self._pipeline.start(config)

        device = profile.get_device()
        try:
            usb_type = device.get_info(rs.camera_info.usb_type_descriptor)
            if usb_type and float(usb_type) < 3.0:
                logger.warning("RealSense connected via USB %s — USB 3.0 recommended for full FPS", usb_type)
            else:
                logger.info("RealSense connected via USB %s", usb_type)
        except (RuntimeError, ValueError):
            logger.debug("RealSense USB descriptor unavailable")

        logger.info("RealSenseDepthSource started (%dx%d @ %dfps)", width, height, fps)

    def read(self) -> DepthFrame:
        frames = self._pipeline.wait_for_frames()
        depth_frame = frames.get_depth_frame()

        # uint16 sensor units -> float32 meters, 0 stays 0 (invalid)
        depth_raw = np.asanyarray(depth_frame.get_data())
        depth = depth_raw.astype(np.float32) * depth_frame.get_units()
        h, w = depth.shape

        self._frame_id += 1
        return DepthFrame(
            width=w,
            height=h,
            samples=depth.reshape(-1),
            frame_id=self._frame_id,
        )

    def stop(self) -> None:
        if self._pipeline:
            self._pipeline.stop()
            self._pipeline = None
        logger.info("RealSenseDepthSource stopped")
