# -*- coding: utf-8 -*-
"""
Pipeline - Composable sequence of image transforms.

Chains ``ImageTransform`` instances into a single transform. The output
image of each step feeds the next.

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
2026-02-06

Modified
--------
2026-03-02
"""

# Standard library
import logging
from typing import Any, List, Sequence

# dipkit internal
from dipkit.algorithms.base import ImageTransform
from dipkit.core.image import Image
from dipkit.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)


class Pipeline(ImageTransform):
    """Sequential chain of image transforms.

    The pipeline is itself an ``ImageTransform`` and can be nested.

    Parameters
    ----------
    steps : Sequence[ImageTransform]
        Ordered transforms. Must contain at least one.

    Raises
    ------
    InvalidArgumentError
        If *steps* is empty.
    TypeError
        If a step is not an ``ImageTransform``.

    Examples
    --------
    >>> from dipkit.algorithms import Pipeline, BilinearZoom, Rotate
    >>> pipe = Pipeline([BilinearZoom(scale=2.0), Rotate(theta=0.5)])
    >>> result = pipe.apply(image)
    """

    __processor_version__ = '1.0.0'

    def __init__(self, steps: Sequence[ImageTransform]) -> None:
        if not steps:
            raise InvalidArgumentError("Pipeline requires at least one transform")
        for i, step in enumerate(steps):
            if not isinstance(step, ImageTransform):
                raise TypeError(
                    f"Step {i} is not an ImageTransform: {type(step).__name__}"
                )
        self._steps: List[ImageTransform] = list(steps)

    @property
    def steps(self) -> List[ImageTransform]:
        """Shallow copy of the step list."""
        return list(self._steps)

    def __len__(self) -> int:
        return len(self._steps)

    def __repr__(self) -> str:
        step_names = [type(s).__name__ for s in self._steps]
        return f"Pipeline({step_names})"

    def apply(self, source: Image, **kwargs: Any) -> Image:
        """Apply all transforms in sequence.

        Parameters
        ----------
        source : Image
            Input image.
        **kwargs
            Forwarded to every step's ``apply()``. Each step picks up
            only the parameters it declares.

        Returns
        -------
        Image
            Output of the last step.
        """
        n = len(self._steps)
        result = source
        for i, step in enumerate(self._steps):
            logger.debug("Pipeline step %d/%d: %s", i + 1, n,
                         type(step).__qualname__)
            result = step.apply(result, **kwargs)
        return result
