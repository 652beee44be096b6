# -*- encoding: utf-8 -*-
# @File   : errors.py
# @Time   : 2026/10/13 00:12:47
# @Author : Kariko Lin


class InvalidIniRecord(Exception):
    """To record errors when reading INI (or YAML) files in strict mode."""
    def __init__(self, message: str, lineno: int | None = None) -> None:
        if lineno is not None:
            message = f'line {lineno}: {message}'
        super().__init__(message)
        self.lineno = lineno


class NoActiveSection(InvalidIniRecord):
    """A key-value pair shows up before any section declaration."""
    pass
