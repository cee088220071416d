# -*- coding: utf-8 -*-
"""
Processor Versioning - Version and capability-tag class decorators.

Provides the ``@processor_version`` class decorator for stamping semantic
version strings on processor classes, and ``@processor_tags`` for
category and description metadata used by the CLI to list and describe
operations.

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
import importlib.metadata
from typing import Optional, Type, TypeVar

# dipkit internal
from dipkit.vocabulary import ProcessorCategory

T = TypeVar('T')


def processor_version(version: Optional[str] = None):
    """Class decorator that stamps a processor version on a processor class.

    Sets ``__processor_version__`` as a class attribute. When *version*
    is omitted the installed ``dipkit`` package version is used.

    Parameters
    ----------
    version : str, optional
        Semantic version string (e.g., ``'1.0.0'``).

    Returns
    -------
    Callable
        Class decorator.

    Examples
    --------
    >>> @processor_version('1.0.0')
    ... class Identity(ImageTransform):
    ...     def apply(self, source, **kwargs):
    ...         return source.clone()
    >>> Identity.__processor_version__
    '1.0.0'
    """
    def decorator(cls: Type[T]) -> Type[T]:
        if version:
            cls.__processor_version__ = version
        else:
            try:
                cls.__processor_version__ = importlib.metadata.version('dipkit')
            except importlib.metadata.PackageNotFoundError:
                cls.__processor_version__ = "unknown"
        return cls
    return decorator


def processor_tags(
    category: Optional[ProcessorCategory] = None,
    description: Optional[str] = None,
):
    """Class decorator for processor capability metadata.

    Stamps ``__processor_tags__`` on the class.

    Parameters
    ----------
    category : ProcessorCategory, optional
        Processing category.
    description : str, optional
        Short human-readable description of the processor's purpose.

    Raises
    ------
    TypeError
        If *category* is not a ``ProcessorCategory``.
    """
    if category is not None and not isinstance(category, ProcessorCategory):
        raise TypeError(
            f"category must be a ProcessorCategory member, got {category!r}"
        )

    def decorator(cls: Type[T]) -> Type[T]:
        cls.__processor_tags__ = {
            'category': category,
            'description': description,
        }
        return cls
    return decorator
