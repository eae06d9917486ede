"""Image classification services used to spot cats in camera frames."""

import os
import random
import time
from typing import List, Optional, Tuple

import cv2
import numpy as np
from PIL import Image

from ..config.defaults import MODEL_SETTINGS
from .interfaces import ImageServiceInterface, NDArray
from ..logging_config import get_logger

logger = get_logger("image_service")


def load_image(image_path: str) -> NDArray:
    """Read an image file into an RGB numpy array."""
    with Image.open(image_path) as image:
        return np.asarray(image.convert("RGB"))


class FakeImageService(ImageServiceInterface):
    """Image service that randomly reports a cat, ignoring the threshold."""

    def __init__(self, seed: Optional[int] = None, detection_rate: float = 0.5):
        self._random = random.Random(seed)
        self.detection_rate = detection_rate

    def image_contains_cat(self, image: NDArray, confidence_threshold: float) -> bool:
        result = self._random.random() < self.detection_rate
        logger.debug(f"Fake classification result: {result}")
        return result


class OpenCVImageService(ImageServiceInterface):
    """Cat detector using OpenCV Haar cascades.

    Each cascade hit gets a confidence from its size and how close it sits to
    the frame centre. The image contains a cat when any hit reaches the
    requested threshold, given in percent.
    """

    def __init__(self, cascade_path: str = ""):
        self.scale_factor = MODEL_SETTINGS["scale_factor"]
        self.min_neighbors = MODEL_SETTINGS["min_neighbors"]
        self.min_detection_size = MODEL_SETTINGS["min_size"]
        self.max_detection_size = MODEL_SETTINGS["max_size"]

        # Preprocessing parameters
        self.blur_kernel_size = 3
        self.contrast_alpha = 1.2
        self.brightness_beta = 10

        self.haar_cascade = self._load_cascade(cascade_path)

    def image_contains_cat(self, image: NDArray, confidence_threshold: float) -> bool:
        start_time = time.time()

        processed = self._preprocess_frame(image)
        confidences = self.score_detections(self._detect(processed), image.shape)
        threshold = confidence_threshold / 100.0
        result = any(confidence >= threshold for confidence in confidences)

        logger.debug(f"Classified frame in {time.time() - start_time:.4f}s: "
                     f"{len(confidences)} candidates, cat={result}")
        return result

    def _load_cascade(self, cascade_path: str) -> "cv2.CascadeClassifier":
        """Load the given cascade, or the first cat cascade bundled with OpenCV."""
        if cascade_path:
            candidates = [cascade_path]
        else:
            candidates = [os.path.join(cv2.data.haarcascades, name)
                          for name in MODEL_SETTINGS["cascade_files"]]

        for path in candidates:
            if not os.path.exists(path):
                continue
            cascade = cv2.CascadeClassifier(path)
            if not cascade.empty():
                logger.info(f"Loaded Haar Cascade model from {path}")
                return cascade

        raise FileNotFoundError(f"No usable Haar cascade found in {candidates}")

    def _preprocess_frame(self, frame: NDArray) -> NDArray:
        """Convert to an equalized greyscale frame."""
        if len(frame.shape) == 3:
            gray = cv2.cvtColor(frame.astype(np.uint8), cv2.COLOR_RGB2GRAY)
        else:
            gray = frame.astype(np.uint8)

        blurred = cv2.GaussianBlur(gray, (self.blur_kernel_size, self.blur_kernel_size), 0)
        enhanced = cv2.convertScaleAbs(blurred, alpha=self.contrast_alpha, beta=self.brightness_beta)
        return cv2.equalizeHist(enhanced)

    def _detect(self, frame: NDArray) -> List[Tuple[int, int, int, int]]:
        detections = self.haar_cascade.detectMultiScale(
            frame,
            scaleFactor=self.scale_factor,
            minNeighbors=self.min_neighbors,
            minSize=self.min_detection_size,
            maxSize=self.max_detection_size,
            flags=cv2.CASCADE_SCALE_IMAGE
        )
        return [(int(x), int(y), int(w), int(h)) for x, y, w, h in detections]

    def score_detections(self, detections: List[Tuple[int, int, int, int]],
                         frame_shape: Tuple[int, ...]) -> List[float]:
        """Score each detection between 0.6 and 1.0.

        Larger detections nearer the centre of the frame score higher.
        """
        frame_h, frame_w = frame_shape[:2]
        max_dist = (frame_w ** 2 + frame_h ** 2) ** 0.5
        max_area = self.max_detection_size[0] * self.max_detection_size[1]

        confidences = []
        for x, y, w, h in detections:
            center_x = x + w // 2
            center_y = y + h // 2

            center_dist = ((center_x - frame_w // 2) ** 2 + (center_y - frame_h // 2) ** 2) ** 0.5
            center_factor = 1.0 - (center_dist / max_dist)
            size_factor = min(1.0, (w * h) / max_area)

            confidence = 0.6 + 0.2 * center_factor + 0.2 * size_factor
            confidences.append(max(0.0, min(1.0, confidence)))

        return confidences
