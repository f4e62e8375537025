"""
SGR code tables

Static mappings from directive keywords to their numeric SGR codes. The
tables are module constants and are never mutated, so they are shared
freely between compilations.
"""

from typing import Dict, Optional

# {+Keyword}
STYLE_ADD: Dict[str, int] = {
    "Reset": 0,
    "Bold": 1,
    "Dim": 2,
    "Italic": 3,
    "Underline": 4,
    "Blinking": 5,
    "Inverse": 7,
    "Hidden": 8,
    "Strikethrough": 9,
}

# {-Keyword}; Bold and Dim share "normal intensity"
STYLE_REMOVE: Dict[str, int] = {
    "Bold": 22,
    "Dim": 22,
    "Italic": 23,
    "Underline": 24,
    "Blinking": 25,
    "Inverse": 27,
    "Hidden": 28,
    "Strikethrough": 29,
}

_COLOR_BASE: Dict[str, int] = {
    "Black": 0,
    "Red": 1,
    "Green": 2,
    "Yellow": 3,
    "Blue": 4,
    "Magenta": 5,
    "Cyan": 6,
    "White": 7,
    "Default": 9,
}

# {#NameFg} / {#NameBg}
COLOR_NAMES: Dict[str, int] = {}
for _name, _offset in _COLOR_BASE.items():
    COLOR_NAMES[f"{_name}Fg"] = 30 + _offset
    COLOR_NAMES[f"{_name}Bg"] = 40 + _offset

# Extended color introducers and their selectors
FOREGROUND = 38
BACKGROUND = 48
INDEXED = 5
TRUECOLOR = 2


def styleAdd_lookup(keyword: str) -> Optional[int]:
    """Code for a {+Keyword} directive, or None if unknown"""
    return STYLE_ADD.get(keyword)


def styleRemove_lookup(keyword: str) -> Optional[int]:
    """Code for a {-Keyword} directive, or None if unknown"""
    return STYLE_REMOVE.get(keyword)


def colorName_lookup(name: str) -> Optional[int]:
    return COLOR_NAMES.get(name)
