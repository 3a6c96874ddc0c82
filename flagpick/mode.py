# Flagpick CLI — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `FlagpickMode`, an enum representing the different ways the flagpick CLI
presents the flags it discovered.
"""
from enum import Enum


class FlagpickMode(Enum):
    MENU = "menu"
    LIST = "list"
    PRINT = "print"
