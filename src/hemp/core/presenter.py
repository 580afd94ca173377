"""
Presenter - read-only decorator over a data record.

A presenter wraps one record and controls how it is exposed: it adds
computed attributes, narrows or trims the record's fields, and re-cases
output keys before conversion to a dict or JSON.

Computed attributes are declared on the presenter class, either through
the ``get_<field>_attribute(self, model)`` naming convention or with the
:func:`computed` decorator. Both forms are collected into an ordered
registry when the class is defined.

Example:
    class UserPresenter(Presenter):
        hidden = ["email"]

        def get_full_name_attribute(self, model):
            return "Mx. " + model.name

    UserPresenter(user).to_dict()
    # {"id": 1, "name": "David Hemphill", "full_name": "Mx. David Hemphill"}
"""

from __future__ import annotations

import inspect
import json
import logging
import re
from functools import update_wrapper
from typing import (
    Any,
    Callable,
    ClassVar,
    Dict,
    Iterable,
    Iterator,
    KeysView,
    Optional,
    Sequence,
    Union,
    overload,
)

from hemp.core.config import get_config
from hemp.core.exceptions import PropertyNotResolvableError, UnwritableError
from hemp.core.types.casing import Casing
from hemp.core.types.records import json_default, read_field, record_fields

logger = logging.getLogger(__name__)

Accessor = Callable[[Any, Any], Any]

_ACCESSOR_NAME = re.compile(r"^get_(?P<field>\w+?)_attribute$")


class ComputedAttribute:
    """Descriptor for an explicitly declared computed attribute.

    Reading it on a presenter instance calls the wrapped function with the
    presenter and the wrapped record.
    """

    def __init__(self, func: Accessor, name: Optional[str] = None) -> None:
        self.func = func
        self.name = name
        update_wrapper(self, func)  # type: ignore[arg-type]

    def __set_name__(self, owner: type, attr_name: str) -> None:
        if self.name is None:
            self.name = attr_name

    def __get__(self, instance: Any, owner: Optional[type] = None) -> Any:
        if instance is None:
            return self
        return self.func(instance, instance.get_model())


@overload
def computed(arg: Accessor) -> ComputedAttribute: ...


@overload
def computed(arg: Optional[str] = None) -> Callable[[Accessor], ComputedAttribute]: ...


def computed(arg: Union[Accessor, str, None] = None) -> Any:
    """Declare a computed attribute on a presenter.

    Usable bare (``@computed``, output key is the function name) or with an
    explicit output key (``@computed("full_name")``).
    """
    if callable(arg):
        return ComputedAttribute(arg)

    def decorator(func: Accessor) -> ComputedAttribute:
        return ComputedAttribute(func, name=arg)

    return decorator


class Presenter:
    """
    Base class for all presenters.

    Class attributes:
        hidden: Record fields removed from the output (deny-list)
        visible: Record fields kept in the output (allow-list). When
            non-empty it wins and ``hidden`` is ignored.
        casing: Output key casing; ``None`` defers to the configured
            ``default_casing``

    Computed attributes are never filtered by ``hidden``/``visible`` and
    always override raw fields of the same name.
    """

    hidden: Sequence[str] = ()
    visible: Sequence[str] = ()
    casing: ClassVar[Optional[Union[Casing, str]]] = None

    __computed_attributes__: ClassVar[Dict[str, Accessor]] = {}

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)

        # Bases first so overrides keep the position of the first declaration.
        registry: Dict[str, Accessor] = {}
        for klass in reversed(cls.__mro__):
            for attr_name, member in vars(klass).items():
                if isinstance(member, ComputedAttribute):
                    registry[member.name or attr_name] = member.func
                    continue
                if not inspect.isfunction(member):
                    continue
                match = _ACCESSOR_NAME.match(attr_name)
                if match:
                    registry[match.group("field")] = member

        cls.__computed_attributes__ = registry
        if registry:
            logger.debug(
                "Registered computed attributes for %s: %s",
                cls.__qualname__,
                list(registry),
            )

    def __init__(
        self,
        model: Any,
        *,
        hidden: Optional[Iterable[str]] = None,
        visible: Optional[Iterable[str]] = None,
        casing: Optional[Union[Casing, str]] = None,
    ) -> None:
        self._model = model
        self._casing: Optional[Casing] = None
        if hidden is not None:
            self.hidden = tuple(hidden)
        if visible is not None:
            self.visible = tuple(visible)
        if casing is not None:
            self._casing = Casing.coerce(casing)

    @classmethod
    def make(cls, model: Any, presenter: Any = None) -> Any:
        """Present ``model`` with ``presenter``, or with this class when omitted."""
        from hemp.core.factory import present

        if presenter is None and cls is not Presenter:
            return cls(model)
        return present(model, presenter)

    @classmethod
    def collection(cls, records: Iterable[Any], presenter: Any = None) -> Any:
        """Present every record, in order, returning a :class:`Collection`."""
        from hemp.core.collection import present_all

        if presenter is None and cls is not Presenter:
            presenter = cls
        return present_all(records, presenter)

    def get_model(self) -> Any:
        """Return the wrapped record itself (not a copy)."""
        return self._model

    @property
    def model(self) -> Any:
        return self._model

    # Casing

    @property
    def active_casing(self) -> Casing:
        if self._casing is not None:
            return self._casing
        if type(self).casing is not None:
            return Casing.coerce(type(self).casing)
        return get_config().default_casing

    @property
    def is_snake_case(self) -> bool:
        return self.active_casing is Casing.SNAKE

    def use_camel_case(self) -> "Presenter":
        self._casing = Casing.CAMEL
        return self

    def use_snake_case(self) -> "Presenter":
        self._casing = Casing.SNAKE
        return self

    # Attribute resolution

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup on the presenter fails.
        if name.startswith("__") and name.endswith("__"):
            raise AttributeError(name)
        try:
            model = self.__dict__["_model"]
        except KeyError:
            raise AttributeError(name) from None

        # A declared descriptor that raised AttributeError has already run once.
        if isinstance(inspect.getattr_static(type(self), name, None), ComputedAttribute):
            raise PropertyNotResolvableError(name)

        accessor = type(self).__computed_attributes__.get(name)
        if accessor is not None:
            return accessor(self, model)

        try:
            return read_field(model, name)
        except (AttributeError, LookupError) as exc:
            logger.debug("%s could not resolve %r: %s", type(self).__name__, name, exc)
            raise PropertyNotResolvableError(name) from exc

    # Serialization

    def _filter_fields(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        if self.visible:
            allowed = set(self.visible)
            return {key: value for key, value in fields.items() if key in allowed}
        if self.hidden:
            denied = set(self.hidden)
            return {key: value for key, value in fields.items() if key not in denied}
        return fields

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the presented record to a dictionary.

        Raw fields come first in record order, filtered by ``visible`` or
        ``hidden``; computed attributes follow in declaration order. Keys are
        re-cased with the active casing, and a raw field whose re-cased key
        matches a computed attribute is replaced by it.

        Returns:
            Dict representation of the presented record
        """
        casing = self.active_casing
        computed_values = {
            casing.apply(name): accessor(self, self._model)
            for name, accessor in type(self).__computed_attributes__.items()
        }

        result: Dict[str, Any] = {}
        for key, value in self._filter_fields(record_fields(self._model)).items():
            cased = casing.apply(key)
            if cased not in computed_values:
                result[cased] = value
        result.update(computed_values)
        return result

    def to_json(self) -> str:
        """
        Convert the presented record to a JSON string.

        Returns:
            ``json.dumps`` of :meth:`to_dict` with default formatting
        """
        return json.dumps(self.to_dict(), default=json_default)

    def __str__(self) -> str:
        return self.to_json()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._model!r})"

    # Read-only item access over the presented output

    def __getitem__(self, key: str) -> Any:
        return self.to_dict()[key]

    def __contains__(self, key: object) -> bool:
        return key in self.to_dict()

    def keys(self) -> KeysView[str]:
        return self.to_dict().keys()

    def __iter__(self) -> Iterator[str]:
        return iter(self.to_dict())

    def __len__(self) -> int:
        return len(self.to_dict())

    def __setitem__(self, key: str, value: Any) -> None:
        raise UnwritableError(
            f"{type(self).__name__} output is read-only; cannot set {key!r}"
        )

    def __delitem__(self, key: str) -> None:
        raise UnwritableError(
            f"{type(self).__name__} output is read-only; cannot delete {key!r}"
        )


__all__ = ["Presenter", "ComputedAttribute", "computed"]
