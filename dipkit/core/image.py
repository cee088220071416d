# -*- coding: utf-8 -*-
"""
Image - Multi-channel pixel buffer built on ``Matrix``.

An ``Image`` is a ``Matrix`` plus a channel count ``K``. Rows hold ``W``
pixels with their channels interleaved, so pixel ``(x, y)`` channel
``c`` lives at matrix row ``y``, column ``x * K + c``. The image width is
therefore ``cols // K`` and every matrix column count is a multiple of
``K``.

Pixel access comes in a strict flavor (``pixel`` / ``put_pixel``) that
raises on bad coordinates, and a lenient flavor (``get_pixel`` /
``set_pixel``) that returns a default or does nothing outside the image.

Author
------
Duane Smalley, PhD
duane.d.smalley@gmail.com

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-02-06

Modified
--------
2026-03-02
"""

# Standard library
from typing import Iterator, List, Optional, Sequence, Tuple, Union

# Third-party
import numpy as np

# dipkit internal
from dipkit.core.matrix import Matrix, _cast_value
from dipkit.core.types import ElementType, Rect, Size
from dipkit.core.vector import Vec
from dipkit.exceptions import (
    ChannelMismatchError,
    ChannelOutOfRangeError,
    InvalidArgumentError,
    OutOfRangeError,
)

Number = Union[int, float]


class Image(Matrix):
    """Channel-interleaved image.

    Parameters
    ----------
    width : int
        Pixels per row.
    height : int
        Number of rows.
    channels : int
        Samples per pixel. Must be at least 1. Default 1.
    element_type : ElementType
        Numeric representation of every sample. Default ``UINT8``.

    Raises
    ------
    InvalidArgumentError
        If *channels* is below 1 or a dimension is negative.

    Examples
    --------
    >>> img = Image(4, 3, channels=3)
    >>> img.zeros()
    >>> img.put_pixel(1, 2, 0, 200)
    >>> img.pixel(1, 2)
    200
    >>> img.get_pixel(10, 10, default=-1)
    -1
    """

    def __init__(
        self,
        width: int = 0,
        height: int = 0,
        channels: int = 1,
        element_type: ElementType = ElementType.UINT8,
    ) -> None:
        if channels < 1:
            raise InvalidArgumentError(
                f"channels must be >= 1, got {channels}"
            )
        if width < 0:
            raise InvalidArgumentError(f"width must be >= 0, got {width}")
        super().__init__(height, width * channels, element_type)
        self._channels = int(channels)

    @classmethod
    def _from_matrix(cls, matrix: Matrix, channels: int) -> 'Image':
        """Adopt the storage of a freshly built *matrix*."""
        image = cls.__new__(cls)
        image.__dict__.update(matrix.__dict__)
        image._channels = channels
        return image

    @classmethod
    def from_array(cls, array: np.ndarray) -> 'Image':
        """Copy a NumPy array into a new image.

        Parameters
        ----------
        array : np.ndarray
            Shape ``(H, W)`` for a single-channel image or ``(H, W, K)``
            for a ``K``-channel image.

        Returns
        -------
        Image

        Raises
        ------
        InvalidArgumentError
            If *array* is not 2D or 3D.
        UnsupportedTypeError
            If the dtype has no ``ElementType`` counterpart.
        """
        array = np.asarray(array)
        if array.ndim == 2:
            array = array[:, :, np.newaxis]
        if array.ndim != 3:
            raise InvalidArgumentError(
                f"Image.from_array expects a 2D or 3D array, got shape "
                f"{array.shape}"
            )
        height, width, channels = array.shape
        if channels < 1:
            raise InvalidArgumentError("Image.from_array needs at least one channel")
        element_type = ElementType.from_dtype(array.dtype)
        image = cls(width, height, channels, element_type)
        if not image.empty:
            image.pixels[...] = array
        return image

    def create(  # type: ignore[override]
        self,
        width: int,
        height: int,
        channels: int = 1,
        element_type: ElementType = ElementType.UINT8,
    ) -> None:
        """Reallocate as a ``width x height x channels`` image."""
        if channels < 1:
            raise InvalidArgumentError(
                f"channels must be >= 1, got {channels}"
            )
        super().create(height, width * channels, element_type)
        self._channels = int(channels)

    # -----------------------------------------------------------------
    # Properties
    # -----------------------------------------------------------------
    @property
    def width(self) -> int:
        return self.cols // self._channels

    @property
    def height(self) -> int:
        return self.rows

    @property
    def channels(self) -> int:
        return self._channels

    @property
    def size(self) -> Size:
        """``Size(width, height)`` in pixels."""
        return Size(self.width, self.height)

    @property
    def pixels(self) -> np.ndarray:
        """Writable ``(height, width, channels)`` view of the samples."""
        if self.empty:
            return np.empty((0, 0, self._channels),
                            dtype=self.element_type.dtype)
        return self.array.reshape(self.height, self.width, self._channels)

    def to_array(self) -> np.ndarray:
        """Copy of the samples, ``(H, W)`` for one channel else ``(H, W, K)``."""
        data = self.pixels.copy()
        if self._channels == 1:
            return data[:, :, 0]
        return data

    # -----------------------------------------------------------------
    # Strict pixel access
    # -----------------------------------------------------------------
    def _check_pixel(self, x: int, y: int, channel: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise OutOfRangeError(
                f"Pixel ({x}, {y}) out of range for "
                f"{self.width}x{self.height} image"
            )
        if not 0 <= channel < self._channels:
            raise ChannelOutOfRangeError(
                f"Channel {channel} out of range [0, {self._channels})"
            )

    def pixel(self, x: int, y: int, channel: int = 0) -> Number:
        """Read one sample.

        Raises
        ------
        OutOfRangeError
            If ``(x, y)`` is outside the image.
        ChannelOutOfRangeError
            If *channel* is outside ``[0, channels)``.
        """
        self._check_pixel(x, y, channel)
        return self.array[y, x * self._channels + channel].item()

    def put_pixel(self, x: int, y: int, channel: int, value: Number) -> None:
        """Write one sample, cast to the element type.

        Raises
        ------
        OutOfRangeError
            If ``(x, y)`` is outside the image.
        ChannelOutOfRangeError
            If *channel* is outside ``[0, channels)``.
        """
        self._check_pixel(x, y, channel)
        self.array[y, x * self._channels + channel] = _cast_value(
            value, self.element_type
        )

    def pixel_vec(self, x: int, y: int) -> Vec:
        """All channels of pixel ``(x, y)`` as a ``Vec``.

        Only defined for 2, 3 or 4 channel images.

        Raises
        ------
        OutOfRangeError
            If ``(x, y)`` is outside the image.
        InvalidArgumentError
            If the channel count is not 2, 3 or 4.
        """
        self._check_pixel(x, y, 0)
        values = self.pixels[y, x].tolist()
        return Vec(*values, element_type=self.element_type)

    # -----------------------------------------------------------------
    # Lenient pixel access
    # -----------------------------------------------------------------
    def _inside(self, x: int, y: int, channel: int) -> bool:
        return (0 <= x < self.width and 0 <= y < self.height
                and 0 <= channel < self._channels)

    def get_pixel(
        self,
        x: int,
        y: int,
        channel: int = 0,
        default: Number = 0,
    ) -> Number:
        """Read one sample, or *default* when the address is invalid."""
        if not self._inside(x, y, channel):
            return default
        return self.array[y, x * self._channels + channel].item()

    def set_pixel(self, x: int, y: int, channel: int, value: Number) -> None:
        """Write one sample; silently ignored when the address is invalid."""
        if self._inside(x, y, channel):
            self.array[y, x * self._channels + channel] = _cast_value(
                value, self.element_type
            )

    def set_pixel_vec(self, x: int, y: int, vec: Sequence[Number]) -> None:
        """Write the leading ``len(vec)`` channels of pixel ``(x, y)``.

        Ignored when the pixel is outside the image or the image has
        fewer channels than *vec* has components.
        """
        if len(vec) > self._channels:
            return
        for channel, value in enumerate(vec):
            self.set_pixel(x, y, channel, value)

    def iter_pixels(self) -> Iterator[Tuple[int, int]]:
        """Yield every ``(x, y)`` address in row-major order."""
        for y in range(self.height):
            for x in range(self.width):
                yield x, y

    # -----------------------------------------------------------------
    # Regions and conversion
    # -----------------------------------------------------------------
    def sub_image(self, region: Rect) -> 'Image':
        """Copy a pixel-coordinate rectangle into a new image.

        The rectangle's ``x`` and ``width`` are scaled by the channel
        count and the work is delegated to ``extract_subregion``.

        Raises
        ------
        InvalidRegionError
            If *region* is not contained in the image.
        """
        x, y, width, height = region
        k = self._channels
        block = self.extract_subregion(Rect(x * k, y, width * k, height))
        return Image._from_matrix(block, k)

    def convert_to(self, element_type: ElementType) -> 'Image':
        """Cast every sample into a new image with the same channels."""
        converted = super().convert_to(element_type)
        if isinstance(converted, Image):
            return converted
        return Image._from_matrix(converted, self._channels)

    # -----------------------------------------------------------------
    # Channels
    # -----------------------------------------------------------------
    def channel(self, index: int) -> 'Image':
        """Copy channel *index* into a single-channel image.

        Raises
        ------
        ChannelOutOfRangeError
            If *index* is outside ``[0, channels)``.
        """
        if not 0 <= index < self._channels:
            raise ChannelOutOfRangeError(
                f"Channel {index} out of range [0, {self._channels})"
            )
        result = Image(self.width, self.height, 1, self.element_type)
        if not result.empty:
            result.pixels[:, :, 0] = self.pixels[:, :, index]
        return result

    def split_channels(self) -> List['Image']:
        return [self.channel(c) for c in range(self._channels)]

    @staticmethod
    def merge_channels(images: Sequence['Image']) -> 'Image':
        """Interleave single-channel images into one multi-channel image.

        Parameters
        ----------
        images : sequence of Image
            Single-channel images sharing width, height and element type.

        Returns
        -------
        Image
            ``len(images)`` channels. An empty sequence yields an empty
            image.

        Raises
        ------
        ChannelMismatchError
            If the inputs disagree in size or type, or one of them has
            more than one channel.
        """
        if not images:
            return Image()
        first = images[0]
        for img in images:
            if (img.size != first.size
                    or img.element_type is not first.element_type):
                raise ChannelMismatchError(
                    "All channels must have the same size and element type"
                )
            if img.channels != 1:
                raise ChannelMismatchError(
                    f"merge_channels expects single-channel images, got "
                    f"{img.channels} channels"
                )
        result = Image(first.width, first.height, len(images),
                       first.element_type)
        if not result.empty:
            for c, img in enumerate(images):
                result.pixels[:, :, c] = img.pixels[:, :, 0]
        return result

    # -----------------------------------------------------------------
    # Comparison and display
    # -----------------------------------------------------------------
    def __eq__(self, other: object) -> bool:
        if isinstance(other, Image):
            return (self._channels == other._channels
                    and super().__eq__(other))
        if isinstance(other, Matrix):
            return False
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (f"Image({self.width}x{self.height}x{self._channels}, "
                f"type={self.element_type.name})")


def same_geometry(a: Image, b: Image, check_type: bool = True) -> bool:
    """Whether two images share width, height, channels and optionally type."""
    if a.size != b.size or a.channels != b.channels:
        return False
    return not check_type or a.element_type is b.element_type


def allocate_like(
    src: Image,
    width: Optional[int] = None,
    height: Optional[int] = None,
) -> Image:
    """Uninitialized image with *src*'s channels and element type."""
    return Image(
        src.width if width is None else width,
        src.height if height is None else height,
        src.channels,
        src.element_type,
    )
