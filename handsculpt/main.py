"""
HandSculpt - Main Entry Point.
==============================

This module serves as the central bootloader for the HandSculpt system.
It wires the one-way frame pipeline together:
1. Initializing the Perception Layer (MediaPipe + Camera Thread).
2. Routing every landmark frame through the HandController.
3. Ticking the SceneSink (idle animation + particles) once per rendered frame.
4. Rendering the Feedback Loop (HUD).

Usage:
    Run directly to start the application:
    $ python -m handsculpt.main
"""
import logging
import threading
import time
from typing import Optional, Tuple

import cv2
import numpy as np

# Internal Modules
from handsculpt.config import CONFIG, PATHS, init_environment, setup_logging
from handsculpt.control.controller import HandController
from handsculpt.control.scene_sink import SceneSink
from handsculpt.core.types import ResetIntent, Status
from handsculpt.hand_utils import frame_from_results
from handsculpt.ui.hud import HUD

logger = logging.getLogger(__name__)

class ThreadedCamera:
    """
    High-Performance Camera Reader.

    Runs the camera I/O in a separate daemon thread so the main loop always
    gets the *freshest* frame available. `frame_id` increases with every new
    frame; the main loop uses it to run detection only on frames it has not
    seen yet, while the render tick keeps running at its own pace.
    """
    def __init__(self, src: int = 0):
        self.cap = cv2.VideoCapture(src)
        if not self.cap.isOpened():
            raise RuntimeError(f"Camera {src} could not be opened")
        self.cap.set(cv2.CAP_PROP_FRAME_WIDTH, CONFIG["CAMERA_WIDTH"])
        self.cap.set(cv2.CAP_PROP_FRAME_HEIGHT, CONFIG["CAMERA_HEIGHT"])
        self.cap.set(cv2.CAP_PROP_FPS, CONFIG.get("TARGET_FPS", 30))

        self.ret, self.frame = self.cap.read()
        self.frame_id = 0
        self.running = True
        self.lock = threading.Lock()

        # Start the I/O thread
        threading.Thread(target=self._reader, daemon=True).start()

    def _reader(self):
        """Background thread loop for frame grabbing."""
        while self.running:
            ret, frame = self.cap.read()
            if not ret:
                self.running = False
                break
            # Lock ensures we don't read a half-written frame
            with self.lock:
                self.ret, self.frame = ret, frame
                self.frame_id += 1

    def read(self) -> Tuple[bool, Optional[np.ndarray], int]:
        """
        Returns the most recent frame and its id.
        Non-blocking.
        """
        with self.lock:
            frame = self.frame.copy() if self.frame is not None else None
            return self.ret, frame, self.frame_id

    def release(self):
        """Safely stops the thread and releases hardware."""
        self.running = False
        self.cap.release()

def open_detector(state, config=None):
    """
    Loads MediaPipe and builds the Hands tracker.
    A missing or broken detector is fatal to startup, like a missing camera.
    """
    config = config or CONFIG
    state.set_status(Status.INITIALIZING)
    try:
        import mediapipe as mp
        return mp.solutions.hands.Hands(
            static_image_mode=False,
            max_num_hands=config["MAX_NUM_HANDS"],
            model_complexity=config["MODEL_COMPLEXITY"],
            min_detection_confidence=config["MIN_DETECTION_CONFIDENCE"],
            min_tracking_confidence=config["MIN_TRACKING_CONFIDENCE"],
        )
    except (ImportError, AttributeError, RuntimeError) as exc:
        state.set_status(Status.error(f"MediaPipe unavailable: {exc}"))
        logger.error("Startup failed: %s", exc)
        raise SystemExit(1)

def main():
    """
    Main Event Loop.
    """
    # 1. Boot Sequence
    init_environment()
    setup_logging(CONFIG["LOG_LEVEL"], PATHS["LOG_FILE"])
    print("🚀 HANDSCULPT: ONLINE")
    print("   -> Press 'ESC' to Exit")
    print("   -> Press 'R' to Reset the object")

    # 2. Initialize Subsystems
    sink = SceneSink()
    controller = HandController(sink=sink)
    state = controller.state
    hud = HUD()
    window_name = "HandSculpt"

    state.set_status(Status.LOADING)
    try:
        cam = ThreadedCamera(CONFIG["CAMERA_INDEX"])
    except RuntimeError as exc:
        state.set_status(Status.error(str(exc)))
        logger.error("Startup failed: %s", exc)
        raise SystemExit(1)

    try:
        hands = open_detector(state)
    except SystemExit:
        cam.release()
        raise
    state.set_status(Status.READY)
    cv2.namedWindow(window_name)

    start = time.time()
    prev_time = start
    last_frame_id = -1
    current_hands = ()

    try:
        while True:
            ret, frame, frame_id = cam.read()
            if not ret or frame is None:
                if not cam.running:
                    state.set_status(Status.error("camera stream ended"))
                    break
                continue

            if CONFIG["MIRROR_VIEW"]:
                frame = cv2.flip(frame, 1)

            # --- 1. PERCEPTION (only on fresh camera frames) ---
            if frame_id != last_frame_id:
                last_frame_id = frame_id
                rgb = cv2.cvtColor(frame, cv2.COLOR_BGR2RGB)
                current_hands = frame_from_results(hands.process(rgb))

                # --- 2. CONTROL ---
                controller.process(current_hands)

            # --- 3. ANIMATION (every rendered frame) ---
            curr = time.time()
            dt = curr - prev_time
            prev_time = curr
            sink.tick(state, dt, curr - start)

            # --- 4. FEEDBACK (The HUD) ---
            hud.render(frame, current_hands, sink, state)
            fps = 1 / dt if dt > 0 else 0
            hud.draw_fps(frame, fps)
            cv2.imshow(window_name, frame)

            # Input Handling
            k = cv2.waitKey(1) & 0xFF
            if k == 27: break # ESC
            elif k in (ord('r'), ord('R')):
                state.reset()
                sink.apply([ResetIntent()])
                state.set_status(Status.RESET)

    finally:
        # Graceful Shutdown
        hands.close()
        cam.release()
        cv2.destroyAllWindows()
        print("🔴 SYSTEM OFFLINE")

if __name__ == "__main__":
    main()
