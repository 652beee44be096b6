# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2026/10/13 00:20:03
# @Author : Kariko Lin

"""Line-oriented INI reader and writers.

Only the plainest INI dialect is concerned:

    ```ini
    ; comment, and so does `# comment`
    [section]          ; text after `]` is ignored
    key = value        ; inline comments (after a blank) are cut by default
    ```

Every line is turned into one call of `IniDocument.insert_section()` or
`IniDocument.insert_entry()`, so duplicated keys keep their *first* value,
and a re-declared section just gets more pairs appended.
"""

import logging
import warnings
from collections.abc import Iterable
from io import StringIO, TextIOBase
from typing import Any

import chardet
import yaml

from ..abstract import FileHandler
from .errors import InvalidIniRecord, NoActiveSection
from .model import IniDocument, IniSection

__all__ = ['IniParser', 'IniYamlParser']


class IniParser(FileHandler[IniDocument]):
    def __init__(
        self, filename: str, encoding: str | None = None, *,
        delimiter: str = '=',
        comment_prefixes: Iterable[str] = (';', '#'),
        inline_comments: bool = True,
        strict: bool = False
    ) -> None:
        """`strict=True` raises `InvalidIniRecord` on malformed lines,
        otherwise they're skipped with a warning."""
        super().__init__(filename)
        self._codec = encoding
        self._delim = delimiter
        self._comments = tuple(comment_prefixes)
        self._inline = inline_comments
        self._strict = strict

    def __reject(self, lineno: int, line: str, reason: str) -> None:
        if self._strict:
            raise InvalidIniRecord(f'{reason}: {line!r}', lineno)
        warnings.warn(
            f'{self._fn}, line {lineno}: {reason}, skipped.\n\t{line}')

    def __cut_comment(self, text: str) -> str:
        """Inline comments need a whitespace before the prefix,
        so `color=#fff` and `url=a;b` keep their values."""
        for pos in range(1, len(text)):
            if text[pos - 1].isspace() and text.startswith(
                    self._comments, pos):
                return text[:pos]
        return text

    def _feed(self, ins: IniDocument, lineno: int, line: str) -> None:
        i = line.strip()
        if self._inline:
            i = self.__cut_comment(i).rstrip()
        if not i or i.startswith(self._comments):
            return
        if i[0] == '[':
            end = i.find(']')
            decl = i[1:end].strip() if end > 0 else ''
            if not decl:
                self.__reject(lineno, i, 'bad section declaration')
                return
            ins.insert_section(decl)
        elif self._delim in i:
            key, val = i.split(self._delim, 1)
            key = key.strip()
            if not key:
                self.__reject(lineno, i, 'empty key')
                return
            if any(c in key for c in self._comments):
                self.__reject(lineno, i, 'comment sign in key')
                return
            val = val.strip()

            if ins.current is not None and key in ins.current:
                logging.debug(
                    f'{self._fn}, line {lineno}: '
                    f'{ins.current}{key} already exists, keep the first one.')
            if ins.insert_entry(key, val) is None:
                if self._strict:
                    raise NoActiveSection(
                        f'"{key}" comes before any section.', lineno)
                warnings.warn(
                    f'{self._fn}, line {lineno}: '
                    f'"{key}" comes before any section, skipped.')
        else:
            self.__reject(lineno, i, 'neither a section nor a pair')

    def readstream(
        self, buf: TextIOBase, name: str | None = None
    ) -> IniDocument:
        """读取解码好的字符串流。文档名默认为文件名。

        如没有特殊需求，直接调用`self.read()`便是。
        """
        ins = IniDocument(self._fn if name is None else name)
        lineno = 0
        while i := buf.readline():
            lineno += 1
            self._feed(ins, lineno, i)
        return ins

    @staticmethod
    def _decode_file(filename: str) -> StringIO:
        with open(filename, 'rb') as fp:
            raw = fp.read()

        codec = chardet.detect(raw)
        if codec['encoding'] is None or codec['confidence'] < 0.8:
            codec = {'encoding': 'utf-8'}

        # fallbacks
        try:
            buf = raw.decode(codec['encoding'])
        except UnicodeDecodeError:
            logging.warning(
                f'{filename} is not in {codec["encoding"]}, try gbk.')
            buf = raw.decode('gbk')
        return StringIO(buf)

    def read(self) -> IniDocument:
        """读取`IniParser`实例指定的文件。

        May raise `OSError`.
        """
        try:
            # when encoding is None, `open()` would fallback to system default.
            # and when encoding got wrong,
            # just `UnicodeDecodeError` and fallback to `chardet`.
            with open(self._fn, 'r', encoding=self._codec) as fp:
                return self.readstream(fp)
        except UnicodeDecodeError:
            logging.info(f'Failed to decode {self._fn}, guessing codec.')
            return self.readstream(self._decode_file(self._fn))

    def __unreadable(self, text: str) -> bool:
        """Whether `text` would come back different after `_feed()`."""
        return (
            text != text.strip()
            or '\n' in text or '\r' in text
            or (self._inline and self.__cut_comment(text) != text))

    def _check_section(self, sect: IniSection) -> None:
        decl = sect.name
        if not decl or ']' in decl or self.__unreadable(decl):
            raise InvalidIniRecord(
                f'{self._fn}: [{decl}] is unable to read back.')
        for k, v in sect._pairs():
            if (not k or k[0] == '[' or self._delim in k
                    or any(c in k for c in self._comments)
                    or self.__unreadable(k) or self.__unreadable(v)):
                raise InvalidIniRecord(
                    f'{self._fn}: {sect}{k} = {v!r} is unable to read back.')

    def _check_document(self, instance: IniDocument) -> None:
        for sect in instance._sections():
            self._check_section(sect)

    def __output_section(self, sect: IniSection, delimiter: str) -> str:
        ret = f'[{sect.name}]'
        for k, v in sect._pairs():
            ret += f'\n{k}{delimiter}{v}'
        return ret

    def writestream(
        self, instance: IniDocument, buf: TextIOBase, *,
        blank_lines: int = 1,
        delimiter: str | None = None
    ) -> None:
        """Sections and pairs go out oldest first,
        so reading the output back gives the same enumeration order.

        Raises `InvalidIniRecord` before writing anything if some section
        or pair can't be read back as is, like `k = ' padded '`.
        """
        if delimiter is None:
            delimiter = self._delim
        self._check_document(instance)
        for sect in instance._sections():
            buf.write(self.__output_section(sect, delimiter))
            buf.write('\n' * (blank_lines + 1))

    def write(
        self, instance: IniDocument, *,
        blank_lines: int = 1,
        delimiter: str | None = None
    ) -> None:
        """保存到*一个* INI 文件。"""
        # the file is left untouched on a bad pair.
        self._check_document(instance)
        with open(self._fn, 'w', encoding=self._codec) as fp:
            self.writestream(
                instance, fp, blank_lines=blank_lines, delimiter=delimiter)

    def __str__(self) -> str:
        return "INI: " + super().__str__() + f"({self._codec})"


class IniYamlParser(FileHandler[IniDocument]):
    """Keeps an `IniDocument` as `{section: {key: value}}` YAML."""

    def __init__(self, filename: str, encoding: str = 'utf-8') -> None:
        super().__init__(filename)
        self._codec = encoding

    @staticmethod
    def load(data: Any, name: str) -> IniDocument:
        """Build a document from loaded YAML data, via the same
        `insert_section()` / `insert_entry()` calls a scanner does."""
        ret = IniDocument(name)
        if data is None:
            return ret
        if not isinstance(data, dict):
            raise InvalidIniRecord(
                f'{name}: top level should be a mapping of sections.')
        for decl, pairs in data.items():
            ret.insert_section(str(decl))
            if pairs is None:
                continue
            if not isinstance(pairs, dict):
                raise InvalidIniRecord(
                    f'{name}: [{decl}] should be a mapping of pairs.')
            for k, v in pairs.items():
                # may there be some pure digits considered as int
                ret.insert_entry(str(k), '' if v is None else str(v))
        return ret

    @staticmethod
    def dump(instance: IniDocument) -> dict[str, dict[str, str]]:
        return {
            sect.name: dict(sect._pairs()) for sect in instance._sections()}

    def read(self) -> IniDocument:
        with open(self._fn, 'r', encoding=self._codec) as fp:
            data = yaml.safe_load(fp)
        return self.load(data, self._fn)

    def write(self, instance: IniDocument) -> None:
        with open(self._fn, 'w', encoding=self._codec) as fp:
            yaml.safe_dump(
                self.dump(instance), fp,
                allow_unicode=True, sort_keys=False)
