# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2026/10/12 21:40:18
# @Author : Kariko Lin

"""
Basically INI Structure: named sections, each of them a dict of `str: str`.

Nothing here reads or writes text. A scanner (see `ini.parser`) is expected
to drive `IniDocument.insert_section()` and `IniDocument.insert_entry()`
line by line, then anyone may query the document.

Enumeration is always *newest first*, i.e. position 0 is the section (or key)
inserted most recently.
"""

from collections.abc import Iterator, Mapping, Reversible
from itertools import islice

__all__ = ['IniSection', 'IniDocument', 'create', 'destroy']


def _check_str(what: str, obj: object) -> None:
    if not isinstance(obj, str):
        raise TypeError(f'{what} should be str, got {type(obj).__name__}.')


def _nth_newest(names: Reversible[str], position: int) -> str | None:
    if not isinstance(position, int):
        raise TypeError(
            f'position should be int, got {type(position).__name__}.')
    # negative or huge positions are simply "not found".
    if position < 0:
        return None
    return next(islice(reversed(names), position, None), None)


class IniSection(Mapping[str, str]):
    """A named group of key-value pairs, read only to user.

    Pairs could only be added through `IniDocument.insert_entry()`,
    and the first value of a key always wins.
    """

    def __init__(self, section_name: str) -> None:
        self._name = section_name
        # insertion ordered, so the newest pair sits at the tail.
        self.__data: dict[str, str] = {}

    @property
    def name(self) -> str:
        return self._name

    def __getitem__(self, key: str) -> str:
        return self.__data[key]

    def __contains__(self, key: object) -> bool:
        return key in self.__data

    def __len__(self) -> int:
        return len(self.__data)

    def __iter__(self) -> Iterator[str]:
        return reversed(self.__data)

    def __str__(self) -> str:
        return f"[{self._name}]"

    def __repr__(self) -> str:
        return '[%s] { .cnt = %d }' % (self._name, len(self.__data))

    def _insert(self, key: str, value: str) -> bool:
        """Returns `False` if `key` already exists (and keeps the old value)."""
        if key in self.__data:
            return False
        self.__data[key] = value
        return True

    def key_at(self, position: int) -> str | None:
        return _nth_newest(self.__data, position)

    def _pairs(self) -> Iterator[tuple[str, str]]:
        """Pairs in the order they were inserted (oldest first)."""
        return iter(self.__data.items())

    def _clear(self) -> None:
        self.__data.clear()


class IniDocument(Mapping[str, IniSection]):
    """INI document representation, like:

        ```ini
        [section]     ; insert_section('section')
        key = val     ; insert_entry('key', 'val')
        key = val2    ; dropped, first write wins.
        [another]
        foo = bar
        [section]     ; only moves the cursor back.
        extra = 1
        ```

    `len(doc)` and `doc.section_count()` both count sections,
    `iter(doc)` yields section names newest first.

    The cursor (`self.current`) is the section receiving `insert_entry()`.
    It stays `None` until the first `insert_section()`.
    """

    def __init__(self, name: str) -> None:
        _check_str('document name', name)
        self._name = name
        self.__sections: dict[str, IniSection] = {}
        self.__current: IniSection | None = None

    @property
    def name(self) -> str:
        """Where the document comes from, commonly a file path."""
        return self._name

    @property
    def current(self) -> IniSection | None:
        return self.__current

    def __getitem__(self, key: str) -> IniSection:
        return self.__sections[key]

    def __contains__(self, key: object) -> bool:
        return key in self.__sections

    def __len__(self) -> int:
        return len(self.__sections)

    def __iter__(self) -> Iterator[str]:
        return reversed(self.__sections)

    def __repr__(self) -> str:
        return '<IniDocument %r { .sections = %d }>' % (
            self._name, len(self.__sections))

    def insert_section(self, name: str) -> 'IniDocument':
        """Select section `name`, creating it if absent.

        An existing section is neither duplicated nor reordered,
        it just becomes the current one for further `insert_entry()`.
        """
        _check_str('section name', name)
        section = self.__sections.get(name)
        if section is None:
            # only linked once built.
            section = IniSection(name)
            self.__sections[name] = section
        self.__current = section
        return self

    def insert_entry(self, key: str, value: str) -> 'IniDocument | None':
        """Add `key = value` into the *current* section.

        Returns `None` if no section has been selected yet.
        An existing key is kept as is (first write wins).
        """
        _check_str('key', key)
        _check_str('value', value)
        if not self.__sections or self.__current is None:
            return None
        self.__current._insert(key, value)
        return self

    def section_count(self) -> int:
        return len(self.__sections)

    def key_count(self, section: str) -> int:
        """Number of keys in `section`, or 0 if there's no such section."""
        sect = self.__sections.get(section)
        return 0 if sect is None else len(sect)

    def section_name_at(self, position: int) -> str | None:
        return _nth_newest(self.__sections, position)

    def key_name_at(self, section: str, position: int) -> str | None:
        sect = self.__sections.get(section)
        if sect is None:
            return None
        return sect.key_at(position)

    def value_of(self, section: str, key: str) -> str | None:
        sect = self.__sections.get(section)
        if sect is None:
            return None
        return sect.get(key)

    def _sections(self) -> Iterator[IniSection]:
        """Sections in the order they were created (oldest first)."""
        return iter(self.__sections.values())

    def destroy(self) -> None:
        """Drop every section and pair, and reset the cursor.

        Calling it twice (or on a fresh document) does nothing harmful.
        """
        for sect in self.__sections.values():
            sect._clear()
        self.__sections.clear()
        self.__current = None


def create(name: str | None) -> IniDocument | None:
    """Unchecked flavor of `IniDocument(name)`: `None` for a bad name."""
    if not isinstance(name, str):
        return None
    return IniDocument(name)


def destroy(document: IniDocument | None) -> None:
    # Do nothing with None
    if document is None:
        return
    document.destroy()
