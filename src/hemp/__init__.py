"""
hemp: presenters for data models
================================

A presenter wraps a model instance and decides how it is exposed: it adds
computed attributes, hides or whitelists fields, and re-cases keys before
the model is turned into a dict or JSON. Works with mappings, pydantic
models, dataclasses and plain objects.

Examples:
    from hemp import Presenter, present, present_all

    class UserPresenter(Presenter):
        hidden = ["email"]

        def get_full_name_attribute(self, model):
            return "Mx. " + model.name

    presenter = present(user, UserPresenter)
    presenter.full_name          # "Mx. David Hemphill"
    presenter.to_dict()          # {"id": 1, "name": ..., "full_name": ...}
    presenter.to_json()

    # Inline presenters
    present(user, lambda u: {"name": u.name.lower()}).name

    # Collections, including re-presentation
    users = present_all(records, UserPresenter)
    cards = users.present(CardPresenter)
"""

from __future__ import annotations

from hemp.core import (
    Collection,
    ComputedAttribute,
    HempError,
    NoPresenterError,
    Page,
    Presentable,
    PresentedAttributes,
    Presenter,
    PropertyNotResolvableError,
    UnwritableError,
    computed,
    paginate,
    present,
    present_all,
)
from hemp.core.config import ConfigError, PresenterConfig, get_config, load_config, set_config
from hemp.core.types import Casing, camel_case, snake_case, studly_case
from hemp.core.utils.logging import configure_logging

__version__ = "0.4.0"

__all__ = [
    # Presenting
    "Presenter",
    "ComputedAttribute",
    "computed",
    "present",
    "present_all",
    "Presentable",
    "PresentedAttributes",
    "Collection",
    "Page",
    "paginate",
    # Casing
    "Casing",
    "snake_case",
    "camel_case",
    "studly_case",
    # Configuration
    "PresenterConfig",
    "load_config",
    "get_config",
    "set_config",
    "configure_logging",
    # Errors
    "HempError",
    "NoPresenterError",
    "PropertyNotResolvableError",
    "UnwritableError",
    "ConfigError",
    "__version__",
]
