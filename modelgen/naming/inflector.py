"""
Word helpers used to turn table and column names into model and accessor names.

Singular and plural forms come from the ``inflect`` package. Only the last word
of a compound name is inflected: ``order_items`` -> ``order_item``,
``orderItem`` -> ``orderItems``.
"""

import re
from typing import Tuple

import inflect

_engine = inflect.engine()

_WORD_SEPARATORS = re.compile(r"[-_\s]+")
_LAST_CAMEL_WORD = re.compile(r"^(.*?)([A-Z]?[a-z0-9]+)$")
_SINGULAR_ENDINGS = re.compile(r"(ss|us|is)$")


def _split_last_word(value: str) -> Tuple[str, str]:
    """Split a snake_case or camelCase name into (head, last word)."""
    underscore = max(value.rfind("_"), value.rfind("-"))
    head, last = value[:underscore + 1], value[underscore + 1:]
    
    match = _LAST_CAMEL_WORD.match(last)
    if match:
        return head + match.group(1), match.group(2)
    return head, last


def _match_case(word: str, template: str) -> str:
    if template[:1].isupper():
        return word[:1].upper() + word[1:]
    return word


def singularize(value: str) -> str:
    head, last = _split_last_word(value)
    if not last:
        return value
    
    word = last.lower()
    if _SINGULAR_ENDINGS.search(word):
        return value
    
    singular = _engine.singular_noun(word)
    # inflect strips a trailing "s" from singular words too (address -> addres)
    if not singular or _engine.plural_noun(singular) != word:
        return value
    return head + _match_case(singular, last)


def pluralize(value: str) -> str:
    head, last = _split_last_word(value)
    if not last:
        return value
    
    plural = _engine.plural_noun(last.lower())
    return head + _match_case(plural, last)


def studly(value: str) -> str:
    """``order_item`` -> ``OrderItem``. Existing capitals are kept."""
    words = [word for word in _WORD_SEPARATORS.split(value) if word]
    return "".join(word[:1].upper() + word[1:] for word in words)


def camel(value: str) -> str:
    """``order_item`` -> ``orderItem``."""
    studly_value = studly(value)
    return studly_value[:1].lower() + studly_value[1:]


def lcfirst(value: str) -> str:
    return value[:1].lower() + value[1:]


def past_participle(word: str) -> str:
    """
    Rough past-tense form of a snake_case stem: ``author`` -> ``authored``,
    ``like`` -> ``liked``, ``reply`` -> ``replied``.

    Irregular verbs are not handled (``write`` -> ``writed``).
    """
    if not word:
        return word
    if word.endswith("e"):
        return word + "d"
    if word.endswith("y"):
        return word[:-1] + "ied"
    return word + "ed"
