# -*- coding: utf-8 -*-
"""
IO Base Classes - Abstract interfaces for image readers and writers.

Readers produce ``Image`` objects with the channel-interleaved layout;
writers consume them. Both are context managers.

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
2026-01-30

Modified
--------
2026-03-02
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Union

from dipkit.core.image import Image
from dipkit.core.types import ElementType, Size


class ImageReader(ABC):
    """
    Abstract base class for image readers.

    Attributes
    ----------
    filepath : Path
        Path to the image file.
    metadata : Dict[str, Any]
        Format metadata gathered when the reader is opened. Always holds
        ``width``, ``height``, ``channels`` and ``element_type``.
    """

    def __init__(self, filepath: Union[str, Path]) -> None:
        """
        Initialize the image reader.

        Parameters
        ----------
        filepath : Union[str, Path]
            Path to the image file.

        Raises
        ------
        FileNotFoundError
            If the specified filepath does not exist.
        """
        self.filepath = Path(filepath)
        if not self.filepath.exists():
            raise FileNotFoundError(f"File not found: {self.filepath}")

        self.metadata: Dict[str, Any] = {}
        self._load_metadata()

    @abstractmethod
    def _load_metadata(self) -> None:
        """Populate ``self.metadata`` without decoding pixel data."""
        pass

    @abstractmethod
    def read(self) -> Image:
        """
        Decode the full image.

        Returns
        -------
        Image
            Newly allocated image.
        """
        pass

    def get_size(self) -> Size:
        return Size(self.metadata['width'], self.metadata['height'])

    def get_channels(self) -> int:
        return self.metadata['channels']

    def get_element_type(self) -> ElementType:
        return self.metadata['element_type']

    def close(self) -> None:
        """
        Close the reader and release resources.

        Default implementation does nothing.
        """
        pass

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
        return False


class ImageWriter(ABC):
    """
    Abstract base class for image writers.

    Attributes
    ----------
    filepath : Path
        Path where the image will be written.
    """

    def __init__(self, filepath: Union[str, Path]) -> None:
        self.filepath = Path(filepath)

    @abstractmethod
    def write(self, image: Image) -> None:
        """
        Encode *image* to ``self.filepath``.

        Parameters
        ----------
        image : Image
            Image to write.
        """
        pass

    def close(self) -> None:
        pass

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
        return False
