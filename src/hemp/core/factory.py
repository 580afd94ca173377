"""
Presenting single records.

``present`` is the one entry point that turns a record and a presenter
specification into a presented value. A specification is either a class
(usually a :class:`~hemp.core.presenter.Presenter` subclass) or an inline
callable that maps the record to its output.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, ClassVar, Dict, Iterator, Mapping, Optional, Union

from hemp.core.exceptions import (
    NoPresenterError,
    PropertyNotResolvableError,
    UnwritableError,
)
from hemp.core.types.records import json_default

logger = logging.getLogger(__name__)

PresenterSpec = Union[type, Callable[[Any], Any]]


class PresentedAttributes:
    """Read-only view over the mapping returned by an inline presenter.

    Values are reachable both as attributes and as items.
    """

    __slots__ = ("_attributes",)

    def __init__(self, attributes: Mapping[str, Any]) -> None:
        object.__setattr__(self, "_attributes", dict(attributes))

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._attributes[name]
        except KeyError:
            raise PropertyNotResolvableError(name) from None

    def __setattr__(self, name: str, value: Any) -> None:
        raise UnwritableError(f"Presented attributes are read-only; cannot set {name!r}")

    def __delattr__(self, name: str) -> None:
        raise UnwritableError(f"Presented attributes are read-only; cannot delete {name!r}")

    def __getitem__(self, key: str) -> Any:
        return self._attributes[key]

    def __setitem__(self, key: str, value: Any) -> None:
        raise UnwritableError(f"Presented attributes are read-only; cannot set {key!r}")

    def __delitem__(self, key: str) -> None:
        raise UnwritableError(f"Presented attributes are read-only; cannot delete {key!r}")

    def __contains__(self, key: object) -> bool:
        return key in self._attributes

    def __iter__(self) -> Iterator[str]:
        return iter(self._attributes)

    def __len__(self) -> int:
        return len(self._attributes)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, PresentedAttributes):
            return self._attributes == other._attributes
        if isinstance(other, Mapping):
            return self._attributes == dict(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def to_dict(self) -> Dict[str, Any]:
        return dict(self._attributes)

    def to_json(self) -> str:
        return json.dumps(self._attributes, default=json_default)

    def __str__(self) -> str:
        return self.to_json()

    def __repr__(self) -> str:
        return f"PresentedAttributes({self._attributes!r})"


def present(model: Any, presenter: Optional[PresenterSpec] = None) -> Any:
    """
    Present ``model`` with ``presenter``.

    Args:
        model: The record to present
        presenter: A class instantiated with the record, or a callable whose
            result is returned (mappings are wrapped in a read-only
            :class:`PresentedAttributes`). Defaults to the record's
            ``default_presenter``.

    Returns:
        The presented value

    Raises:
        NoPresenterError: If no presenter is given and the record has no default
        TypeError: If ``presenter`` is neither a class nor callable
    """
    if presenter is None:
        presenter = getattr(model, "default_presenter", None)
        if presenter is None:
            raise NoPresenterError(
                f"No presenter or default presenter passed to present() "
                f"for {type(model).__name__}"
            )
        logger.debug("Using default presenter %r for %s", presenter, type(model).__name__)

    if isinstance(presenter, type):
        return presenter(model)

    if not callable(presenter):
        raise TypeError(
            f"presenter must be a class or a callable, got {type(presenter).__name__}"
        )

    result = presenter(model)
    if isinstance(result, Mapping):
        return PresentedAttributes(result)
    return result


class Presentable:
    """
    Mixin giving a model class a ``present()`` method.

    Set ``default_presenter`` on the model class to allow ``present()``
    without arguments. Inline callables must be wrapped in ``staticmethod``
    so they are not bound to the instance.
    """

    default_presenter: ClassVar[Optional[PresenterSpec]] = None

    def present(self, presenter: Optional[PresenterSpec] = None) -> Any:
        """Present this instance using ``presenter`` or the default presenter."""
        return present(self, presenter)


__all__ = ["PresentedAttributes", "Presentable", "PresenterSpec", "present"]
