# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/12 21:36:45
# @Author : Kariko Lin

import logging

from .ini import (
    IniDocument, IniSection, IniParser, IniYamlParser,
    InvalidIniRecord, NoActiveSection,
    create, destroy
)

__all__ = [
    'IniDocument', 'IniSection', 'IniParser', 'IniYamlParser',
    'InvalidIniRecord', 'NoActiveSection',
    'create', 'destroy'
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')
