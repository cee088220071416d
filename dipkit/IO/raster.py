# -*- coding: utf-8 -*-
"""
Raster IO - Pillow-backed reading and writing of common image formats.

Decodes PNG, JPEG, BMP, PPM/PGM, TIFF and every other format Pillow
registers into ``Image`` objects, and encodes them back by file
extension.

Decoded pixel modes map to element types as follows:

==========  ============  ========
Pillow      ElementType   channels
==========  ============  ========
``L``       UINT8         1
``LA``      UINT8         2
``RGB``     UINT8         3
``RGBA``    UINT8         4
``I;16*``   UINT16        1
``I``       UINT16        1  (values must fit in 16 bits)
``F``       FLOAT32       1
``1``       UINT8         1  (0 / 255)
==========  ============  ========

Palette and other modes are expanded to ``RGBA`` when they carry
transparency, otherwise to ``RGB``.

Dependencies
------------
Pillow

Author
------
Steven Siebert

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-02-11

Modified
--------
2026-03-02
"""

# Standard library
import logging
import warnings
from pathlib import Path
from typing import Any, Dict, Optional, Union

# Third-party
import numpy as np
from PIL import Image as PILImage
from PIL import UnidentifiedImageError

# dipkit internal
from dipkit.IO.base import ImageReader, ImageWriter
from dipkit.core.image import Image
from dipkit.core.types import ElementType
from dipkit.exceptions import (
    InvalidArgumentError,
    UnsupportedTypeError,
)

logger = logging.getLogger(__name__)

# Pillow mode -> (element type, channels) for modes decoded as-is.
_NATIVE_MODES = {
    'L': (ElementType.UINT8, 1),
    'LA': (ElementType.UINT8, 2),
    'RGB': (ElementType.UINT8, 3),
    'RGBA': (ElementType.UINT8, 4),
    'I;16': (ElementType.UINT16, 1),
    'I;16L': (ElementType.UINT16, 1),
    'I;16B': (ElementType.UINT16, 1),
    'I;16N': (ElementType.UINT16, 1),
    'I': (ElementType.UINT16, 1),
    'F': (ElementType.FLOAT32, 1),
}

# Requested channel count -> 8-bit Pillow mode.
_CHANNEL_MODES = {1: 'L', 2: 'LA', 3: 'RGB', 4: 'RGBA'}


def _target_mode(pil_image: PILImage.Image, channels: Optional[int]) -> str:
    """Pillow mode the decoded image is converted to before copying."""
    if channels is not None:
        return _CHANNEL_MODES[channels]
    mode = pil_image.mode
    if mode in _NATIVE_MODES:
        return mode
    if mode == '1':
        return 'L'
    if 'A' in mode or 'transparency' in pil_image.info:
        return 'RGBA'
    return 'RGB'


def _check_channels(channels: Optional[int]) -> None:
    if channels is not None and channels not in _CHANNEL_MODES:
        raise InvalidArgumentError(
            f"channels must be 1, 2, 3 or 4, got {channels}"
        )


def _open(filepath: Path) -> PILImage.Image:
    try:
        return PILImage.open(filepath)
    except UnidentifiedImageError as exc:
        raise InvalidArgumentError(
            f"Cannot decode image file: {filepath}"
        ) from exc


class RasterReader(ImageReader):
    """Read an image file through Pillow.

    Parameters
    ----------
    filepath : str or Path
        Image file.
    channels : int, optional
        Force 1 (gray), 2 (gray + alpha), 3 (RGB) or 4 (RGBA) UINT8
        channels. By default the file's native layout is kept.

    Raises
    ------
    FileNotFoundError
        If *filepath* does not exist.
    InvalidArgumentError
        If Pillow cannot identify the file or *channels* is invalid.

    Examples
    --------
    >>> with RasterReader('photo.jpg', channels=1) as reader:
    ...     gray = reader.read()
    """

    def __init__(
        self,
        filepath: Union[str, Path],
        channels: Optional[int] = None,
    ) -> None:
        _check_channels(channels)
        self._channels = channels
        self._pil: Optional[PILImage.Image] = None
        super().__init__(filepath)

    def _load_metadata(self) -> None:
        self._pil = _open(self.filepath)
        mode = _target_mode(self._pil, self._channels)
        if mode in _NATIVE_MODES:
            element_type, channels = _NATIVE_MODES[mode]
        else:
            element_type, channels = ElementType.UINT8, len(mode)
        width, height = self._pil.size
        self.metadata = {
            'format': self._pil.format,
            'mode': self._pil.mode,
            'width': width,
            'height': height,
            'channels': channels,
            'element_type': element_type,
        }

    def read(self) -> Image:
        """Decode the full image.

        Raises
        ------
        InvalidArgumentError
            If the pixel data cannot be decoded.
        UnsupportedTypeError
            If a 32-bit integer image holds values outside 16 bits.
        """
        pil = self._pil
        mode = _target_mode(pil, self._channels)
        try:
            if pil.mode != mode:
                pil = pil.convert(mode)
            data = np.asarray(pil)
        except OSError as exc:
            raise InvalidArgumentError(
                f"Cannot decode pixel data of {self.filepath}"
            ) from exc

        if mode == 'I':
            if data.size and (data.min() < 0 or data.max() > 0xFFFF):
                raise UnsupportedTypeError(
                    f"{self.filepath} holds 32-bit integer samples outside "
                    f"the UINT16 range"
                )
            data = data.astype(np.uint16)
        elif mode.startswith('I;16'):
            data = data.astype(np.uint16)

        logger.debug("Read %s: %s %s", self.filepath, data.shape, data.dtype)
        return Image.from_array(data)

    def close(self) -> None:
        if self._pil is not None:
            self._pil.close()
            self._pil = None


def _to_uint8(image: Image) -> np.ndarray:
    """Samples of *image* as a uint8 ``(H, W[, K])`` array for Pillow."""
    element_type = image.element_type
    data = image.to_array()
    if element_type is ElementType.UINT8:
        return data
    if not element_type.is_integer:
        warnings.warn(
            f"{element_type.name} image auto-normalized to uint8 [0, 255] "
            f"for output.",
            UserWarning,
            stacklevel=3,
        )
        dmin = data.min()
        dmax = data.max()
        if dmax - dmin > 0:
            data = (data - dmin) / (dmax - dmin) * 255.0
        else:
            data = np.zeros_like(data)
        return data.astype(np.uint8)
    raise UnsupportedTypeError(
        f"Cannot write {element_type.name} images; convert to UINT8 first"
    )


class RasterWriter(ImageWriter):
    """Write an image through Pillow; the format follows the extension.

    UINT8 images with 1-4 channels are written as-is. FLOAT32 and FLOAT64
    images are min-max normalized to UINT8 with a ``UserWarning``.

    Parameters
    ----------
    filepath : str or Path
        Output file. The extension selects the encoder.

    Examples
    --------
    >>> with RasterWriter('out.png') as writer:
    ...     writer.write(image)
    """

    def write(self, image: Image) -> None:
        """Encode *image*.

        Raises
        ------
        InvalidArgumentError
            If the image is empty, has more than four channels, the
            extension is not a known format, or the format cannot hold the
            image's channel layout.
        UnsupportedTypeError
            For integer element types other than UINT8.
        """
        if image.empty:
            raise InvalidArgumentError("Cannot write an empty image")
        if image.channels > 4:
            raise InvalidArgumentError(
                f"Cannot write {image.channels}-channel images"
            )
        data = _to_uint8(image)
        pil = PILImage.fromarray(np.ascontiguousarray(data))
        try:
            pil.save(self.filepath)
        except (KeyError, ValueError) as exc:
            raise InvalidArgumentError(
                f"Unsupported output format for {self.filepath}"
            ) from exc
        except OSError as exc:
            # Pillow reports modes the encoder cannot hold as OSError
            raise InvalidArgumentError(
                f"Cannot write {pil.mode} image as {self.filepath.suffix}: "
                f"{exc}"
            ) from exc
        logger.debug("Wrote %s (%s)", self.filepath, pil.mode)


def load_image(
    filepath: Union[str, Path],
    channels: Optional[int] = None,
) -> Image:
    """Read an image file into a new ``Image``.

    See :class:`RasterReader` for *channels* and errors.
    """
    with RasterReader(filepath, channels=channels) as reader:
        return reader.read()


def save_image(image: Image, filepath: Union[str, Path]) -> None:
    """Write *image* to *filepath*. See :class:`RasterWriter`."""
    with RasterWriter(filepath) as writer:
        writer.write(image)


def is_supported_format(filepath: Union[str, Path]) -> bool:
    """Whether Pillow has a codec registered for the file's extension."""
    suffix = Path(filepath).suffix.lower()
    return bool(suffix) and suffix in PILImage.registered_extensions()


def get_image_info(filepath: Union[str, Path]) -> Dict[str, Any]:
    """Width, height, channels and element type without decoding pixels.

    Raises
    ------
    FileNotFoundError
        If *filepath* does not exist.
    InvalidArgumentError
        If Pillow cannot identify the file.
    """
    with RasterReader(filepath) as reader:
        return dict(reader.metadata)
