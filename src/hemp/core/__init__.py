"""Core components of hemp."""

from __future__ import annotations

from hemp.core.exceptions import (
    HempError,
    NoPresenterError,
    PropertyNotResolvableError,
    UnwritableError,
)
from hemp.core.presenter import ComputedAttribute, Presenter, computed
from hemp.core.factory import Presentable, PresentedAttributes, present
from hemp.core.collection import Collection, Page, paginate, present_all

__all__ = [
    "Presenter",
    "ComputedAttribute",
    "computed",
    "Presentable",
    "PresentedAttributes",
    "present",
    "Collection",
    "Page",
    "paginate",
    "present_all",
    "HempError",
    "NoPresenterError",
    "PropertyNotResolvableError",
    "UnwritableError",
]
