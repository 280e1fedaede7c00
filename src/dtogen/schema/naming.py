# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

import json
import re
from typing import Sequence

# Matched against a per-character class string: "A" upper, "a" other letter,
# "0" digit, " " anything else
WORD_PATTERN = re.compile(r"A+(?=Aa)|A?a+|A+|0+")

PATH_SEPARATOR = "-"

FALLBACK_SHAPE_PREFIX = "Shape"


def character_class(char: str) -> str:
    if char.isdecimal():
        return "0"
    if char.isupper():
        return "A"
    if char.isalpha():
        return "a"
    return " "


def split_words(text: str) -> list[str]:
    """
    Split text into words on separators, case changes and letter/digit boundaries.

    "user_name" -> ["user", "name"], "HTTPServer" -> ["HTTP", "Server"],
    "item2price" -> ["item", "2", "price"], "caféBar" -> ["café", "Bar"]
    """
    classes = "".join(character_class(c) for c in text)
    return [text[m.start() : m.end()] for m in WORD_PATTERN.finditer(classes)]


def upper_first(text: str) -> str:
    return text[:1].upper() + text[1:]


def camel_case(text: str) -> str:
    words = split_words(text)
    if not words:
        return ""
    return words[0].lower() + "".join(upper_first(w.lower()) for w in words[1:])


def pascal_case(text: str) -> str:
    return upper_first(camel_case(text))


def allocate_shape_name(path_segments: Sequence[str]) -> str:
    """
    Derive the shape name for the object found at the given key path.

    Identical paths always give identical names, but different paths may
    collapse to the same name (["a_b"] and ["a", "b"] both give "AB").
    """
    name = pascal_case(PATH_SEPARATOR.join(path_segments))
    if not name or name[0].isdecimal():
        name = FALLBACK_SHAPE_PREFIX + name
    return name


def field_identifier(source_key: str) -> str:
    identifier = camel_case(source_key)
    if not identifier or identifier[0].isdecimal():
        # Not a valid identifier, fall back to a quoted property name
        return json.dumps(source_key, ensure_ascii=False)
    return identifier
