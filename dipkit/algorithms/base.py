# -*- coding: utf-8 -*-
"""
Processor Base Classes - Abstract interfaces for image algorithms.

Defines the ``ImageProcessor`` common base class and the
``ImageTransform`` ABC for algorithms that map one ``Image`` to a new
``Image``. ``ImageProcessor`` provides version checking at first
instantiation and ``typing.Annotated``-based tunable parameter
declarations with automatic ``__init__`` generation and per-call
overrides through ``**kwargs``.

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

# Standard library
import logging
import warnings
from abc import ABC, abstractmethod
from typing import Any, Dict, Tuple

# dipkit internal
from dipkit.algorithms.params import ParamSpec, collect_param_specs, _make_init
from dipkit.core.image import Image

logger = logging.getLogger(__name__)


class ImageProcessor(ABC):
    """
    Common base class for all image processors.

    Provides two cross-cutting capabilities:

    **Version checking**: Concrete subclasses that do not declare a
    processor version via ``@processor_version('x.y.z')`` trigger a
    ``UserWarning`` at first instantiation. The check uses ``__new__``
    rather than ``__init_subclass__`` so that decorators have been
    applied by the time it runs.

    **Tunable parameter flow**: Subclasses declare tunable parameters as
    ``typing.Annotated`` class-body fields using constraint markers from
    :mod:`dipkit.algorithms.params` (``Range``, ``Options``, ``Desc``).
    ``__init_subclass__`` collects these into ``__param_specs__`` and
    generates an ``__init__`` unless the subclass defines its own. At
    runtime, ``_resolve_params(kwargs)`` merges instance values with
    keyword-argument overrides and validates constraints.
    """

    # Classes already checked, so each warns only once.
    _version_warned_classes: set = set()

    #: Tuple of :class:`~dipkit.algorithms.params.ParamSpec` built by
    #: ``__init_subclass__`` from ``Annotated`` fields.
    __param_specs__: Tuple[ParamSpec, ...] = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls.__param_specs__ = collect_param_specs(cls)
        if cls.__param_specs__ and '__init__' not in cls.__dict__:
            cls.__init__ = _make_init(cls.__param_specs__)

    def __new__(cls, *args: Any, **kwargs: Any) -> 'ImageProcessor':
        if cls not in ImageProcessor._version_warned_classes:
            ImageProcessor._version_warned_classes.add(cls)
            if (
                not getattr(cls, '__processor_version__', None)
                and not getattr(cls, '__abstractmethods__', None)
            ):
                warnings.warn(
                    f"{cls.__qualname__} does not declare a processor version. "
                    f"Use @processor_version('x.y.z') to declare one.",
                    UserWarning,
                    stacklevel=2,
                )
        logger.debug("Instantiating %s", cls.__qualname__)
        return super().__new__(cls)

    def _resolve_params(self, kwargs: Dict[str, Any]) -> Dict[str, Any]:
        """Merge instance values with runtime *kwargs* overrides.

        For each declared parameter, the *kwargs* value wins over the
        instance attribute. Every resolved value is validated.

        Parameters
        ----------
        kwargs : Dict[str, Any]
            Runtime keyword arguments. Keys that are not declared
            parameters are ignored.

        Returns
        -------
        Dict[str, Any]
            ``{param_name: resolved_value}`` for every declared param.

        Raises
        ------
        TypeError
            If a value has the wrong type.
        InvalidArgumentError
            If a value violates range or choices constraints.
        """
        resolved: Dict[str, Any] = {}
        for spec in type(self).__param_specs__:
            if spec.name in kwargs:
                value = kwargs[spec.name]
            else:
                value = getattr(self, spec.name)
            spec.validate(value)
            resolved[spec.name] = value
        return resolved

    def get_params(self) -> Dict[str, Any]:
        """Current instance values of every declared parameter."""
        return {spec.name: getattr(self, spec.name)
                for spec in type(self).__param_specs__}


class ImageTransform(ImageProcessor):
    """
    Abstract base class for image-to-image algorithms.

    Subclasses implement ``apply``, which reads a source ``Image`` and
    returns a newly allocated ``Image``. The source is never modified.
    """

    @abstractmethod
    def apply(self, source: Image, **kwargs: Any) -> Image:
        """
        Apply the transform to a source image.

        Parameters
        ----------
        source : Image
            Input image.
        **kwargs
            Per-call overrides of declared tunable parameters.

        Returns
        -------
        Image
            Newly allocated output image.
        """
        ...

    def __call__(self, source: Image, **kwargs: Any) -> Image:
        return self.apply(source, **kwargs)
