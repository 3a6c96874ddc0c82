"""
Flagpick CLI

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .acquirer import HelpTextAcquirer, fetch_flags
from .extractor import extract_flags
from .flag import Flag
from .language import Language
from .selection_model import SelectionModel
from .supervisor import ProcessSupervisor

logger = logging.getLogger("flagpick")


__all__ = [
    "Flag",
    "HelpTextAcquirer",
    "Language",
    "ProcessSupervisor",
    "SelectionModel",
    "extract_flags",
    "fetch_flags",
]
