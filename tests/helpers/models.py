"""Shared records and presenters used across the test suite."""

from datetime import datetime
from typing import Any, ClassVar, Optional

from pydantic import BaseModel

from hemp import Casing, Presentable, Presenter

FIXED_NOW = datetime(2019, 10, 14)


class User(Presentable, BaseModel):
    id: int = 1
    name: str = "David Hemphill"
    email: str = "david@example.com"
    created_at: datetime = datetime(2019, 10, 10)
    updated_at: datetime = FIXED_NOW

    def say_hello(self) -> str:
        return "Hello from the Model!"

    def greet(self, greeting: str, punctuation: str = "!") -> str:
        return f"{greeting}, {self.name}{punctuation}"


class UserProfilePresenter(Presenter):
    """Presents a user without any changes."""


class UserWithDefaultPresenter(User):
    default_presenter: ClassVar[Optional[Any]] = UserProfilePresenter


class CamelCaseAttributesPresenter(Presenter):
    casing = Casing.CAMEL

    def get_first_name_attribute(self, model):
        return self.name.split(" ")[0]

    def get_last_name_attribute(self, model):
        return self.name.split(" ")[1]


class HiddenAttributesPresenter(Presenter):
    hidden = ["id", "created_at", "updated_at"]


class VisibleAttributesPresenter(Presenter):
    visible = ["id", "email"]


class HiddenAndVisibleAttributesPresenter(Presenter):
    hidden = ["id", "created_at", "name", "updated_at"]
    visible = ["name"]


class FullNamePresenter(Presenter):
    hidden = ["email"]

    def get_full_name_attribute(self, model):
        return "Mx. " + self.name


def make_user(**overrides: Any) -> User:
    return User(**overrides)
