# -*- encoding: utf-8 -*-
# @File   : abstract.py
# @Time   : 2026/10/12 21:37:20
# @Author : Kariko Lin

"""Base of everything loading an `IniDocument` from (or saving it to) a file.

See `ini.parser.IniParser` and `ini.parser.IniYamlParser`.
"""

from abc import ABCMeta, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")


class FileHandler(Generic[T], metaclass=ABCMeta):
    """Binds a file path; `read()` builds a `T` from it,
    `write()` replaces the file content with `T`."""

    def __init__(self, filename: str) -> None:
        self._fn = filename

    @abstractmethod
    def read(self) -> T:
        raise NotImplementedError

    @abstractmethod
    def write(self, instance: T) -> None:
        raise NotImplementedError

    def __str__(self) -> str:
        return self._fn
