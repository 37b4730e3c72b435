"""
Local media inspection before handoff to the media host
"""

import logging

import cv2

logger = logging.getLogger(__name__)


def probe_duration(local_path: str) -> float:
    """Duration in seconds, 0.0 for anything OpenCV can't read as video"""
    cap = cv2.VideoCapture(local_path)
    try:
        if not cap.isOpened():
            return 0.0
        fps = cap.get(cv2.CAP_PROP_FPS)
        frame_count = cap.get(cv2.CAP_PROP_FRAME_COUNT)
        if fps <= 0 or frame_count <= 0:
            return 0.0
        return round(frame_count / fps, 2)
    except cv2.error as e:
        logger.warning(f"Could not probe {local_path}: {e}")
        return 0.0
    finally:
        cap.release()
