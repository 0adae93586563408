# raytracer/renderer/image_writer.py
import os

import numpy as np
from PIL import Image

from raytracer.core.errors import ImageWriteError


def save_image(pixels: np.ndarray, filename: str) -> str:
    """
    Write an 8-bit RGB image to disk.

    Args:
        pixels: uint8 array of shape (height, width, 3)
        filename: Output path; the extension selects the image format

    Returns:
        The path written to

    Raises:
        ImageWriteError: If the image cannot be encoded or written
    """
    if pixels.dtype != np.uint8 or pixels.ndim != 3 or pixels.shape[2] != 3:
        raise ImageWriteError(f"expected a (height, width, 3) uint8 image, got {pixels.dtype} {pixels.shape}")

    try:
        Image.fromarray(pixels).save(filename)
    except (OSError, ValueError) as e:
        raise ImageWriteError(f"Error writing image {filename}: {str(e)}") from e
    return os.fspath(filename)
