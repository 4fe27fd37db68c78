# Copyright (c) 2026 Pixelhue
# SPDX-License-Identifier: MIT

"""
Image acquisition boundary.

Turns whatever the host application received (file path, upload bytes,
pasted clipboard blob, PIL image, or an existing array) into a uint8
pixel buffer the engine can sample. Decoding is done by Pillow and is all
or nothing: a payload that cannot be decoded raises, so no partial image
ever reaches the sampler.

Colors are read as stored. There is no ICC profile conversion.
"""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import BinaryIO, Optional, Union

import numpy as np
from numpy.typing import NDArray
from PIL import Image, UnidentifiedImageError

logger = logging.getLogger(__name__)

ImageSource = Union[str, Path, bytes, bytearray, BinaryIO, Image.Image, NDArray[np.uint8]]


def is_image_mime(mime_type: Optional[str]) -> bool:
    """
    True if a clipboard or upload payload should be handed to the engine.

    Only ``image/*`` types are accepted; everything else is ignored by
    the caller.
    """
    if not mime_type:
        return False
    return mime_type.strip().lower().startswith("image/")


def load_image(image: ImageSource) -> tuple[NDArray[np.uint8], int, int]:
    """
    Decode an image source into an RGB pixel buffer.

    Args:
        image: One of:
            - Path to an image file (str or Path)
            - Raw encoded bytes (e.g. an upload or clipboard blob)
            - Binary file object opened for reading
            - PIL Image
            - NumPy array of shape (H, W, 3) or (H, W, 4) with uint8 values

    Returns:
        (pixels, height, width) where pixels has shape (H, W, 3).
        The buffer is a read-only copy; later changes to a source array
        do not reach it.

    Raises:
        ValueError: If the payload cannot be decoded, or an array has the
            wrong shape or dtype
        TypeError: If the source type is not supported
    """
    if isinstance(image, np.ndarray):
        pixels = _validate_array(image)
    elif isinstance(image, Image.Image):
        pixels = _to_rgb_array(image)
    elif isinstance(image, (str, Path, bytes, bytearray)) or hasattr(image, "read"):
        pixels = _decode(image)
    else:
        raise TypeError(
            f"Expected file path, bytes, file object, PIL image or numpy array, "
            f"got {type(image)}"
        )

    height, width = pixels.shape[:2]
    if height < 1 or width < 1:
        raise ValueError(f"Image has no pixels ({width}x{height})")

    pixels.flags.writeable = False

    logger.debug("Loaded %dx%d image", width, height)
    return pixels, height, width


def _decode(source: Union[str, Path, bytes, bytearray, BinaryIO]) -> NDArray[np.uint8]:
    """Decode an encoded image with Pillow."""
    if isinstance(source, (bytes, bytearray)):
        source = io.BytesIO(source)

    try:
        with Image.open(source) as img:
            img.load()
            return _to_rgb_array(img)
    except FileNotFoundError:
        raise
    except (UnidentifiedImageError, OSError) as e:
        logger.warning("Could not decode image: %s", e)
        raise ValueError(f"Could not decode image: {e}") from e


def _to_rgb_array(img: Image.Image) -> NDArray[np.uint8]:
    if img.mode != "RGB":
        img = img.convert("RGB")
    return np.array(img, dtype=np.uint8)


def _validate_array(pixels: NDArray) -> NDArray[np.uint8]:
    """Check an array is (H, W, 3|4) uint8 and copy it without alpha."""
    if pixels.ndim != 3 or pixels.shape[2] not in (3, 4):
        raise ValueError(
            f"Expected (H, W, 3) or (H, W, 4) array, got shape {pixels.shape}"
        )

    if pixels.dtype != np.uint8:
        raise ValueError(
            f"Expected uint8 array, got {pixels.dtype}"
        )

    return pixels[:, :, :3].copy()
