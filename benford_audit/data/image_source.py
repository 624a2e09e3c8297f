"""Image datasets: one observation per pixel.

A pixel's magnitude is the product of its R, G, B and A channels with zero
channels counted as 1; the observation is that magnitude's leading digit.
"""

from __future__ import annotations

from typing import Optional

import numpy as np
from PIL import Image, UnidentifiedImageError

from benford_audit.data import DatasetSource, IngestResult
from benford_audit.digits.extraction import leading_digits, pixel_magnitudes
from benford_audit.exceptions import DataSourceError


def image_digit_counts(rgba: np.ndarray) -> np.ndarray:
    """Counts of leading digits 0-9 for an ``(h, w, 4)`` RGBA array."""
    digits = leading_digits(pixel_magnitudes(rgba))
    return np.bincount(digits, minlength=10)


def read_image_digits(source: DatasetSource, *, column: Optional[str] = None) -> IngestResult:
    try:
        with Image.open(source.path) as img:
            rgba = np.asarray(img.convert("RGBA"), dtype=np.uint8)
    except (OSError, UnidentifiedImageError, Image.DecompressionBombError) as exc:
        raise DataSourceError(f"Cannot decode image {source.path}: {exc}") from exc

    counts = image_digit_counts(rgba)
    result = IngestResult(source=source, rejected=int(counts[0]))
    result.accumulator.add_counts([int(c) for c in counts[1:10]])
    return result


__all__ = ["image_digit_counts", "read_image_digits"]
