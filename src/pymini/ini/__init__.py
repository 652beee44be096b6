# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/12 21:38:02
# @Author : Kariko Lin

from .errors import InvalidIniRecord, NoActiveSection
from .model import IniDocument, IniSection, create, destroy
from .parser import IniParser, IniYamlParser
