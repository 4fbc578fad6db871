"""Classification rules for candidate reference tokens.

Each rule names the token source it inspects (the element's tag name, its
text content, or one attribute value) and the bucket a matching token is
collected into: ``record`` for tokens that may name another definition,
``code`` for external implementation symbols. New heuristics are added here
without touching graph resolution.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

RECORD = "record"
CODE = "code"

TAG = "tag"
CONTENT = "content"
ATTRIBUTE = "attribute"

DEF_NAME_TAG = "defName"
LIST_ITEM_TAG = "li"
CLASS_ATTR = "Class"

NON_REFERENCE_TAGS = frozenset({DEF_NAME_TAG, LIST_ITEM_TAG})


@dataclass(frozen=True, slots=True)
class ReferenceRule:
    source: str
    bucket: str
    applies: Callable[[str, str], bool]  # (tag_name, attribute_key) -> bool
    description: str = ""


REFERENCE_RULES: tuple[ReferenceRule, ...] = (
    ReferenceRule(
        source=TAG,
        bucket=RECORD,
        applies=lambda tag, _key: tag not in NON_REFERENCE_TAGS,
        description="tag names like <Muffalo>0.1</Muffalo>, except defName and li",
    ),
    ReferenceRule(
        source=CONTENT,
        bucket=RECORD,
        applies=lambda tag, _key: tag != DEF_NAME_TAG,
        description="text content, except the record's own defName",
    ),
    ReferenceRule(
        source=ATTRIBUTE,
        bucket=CODE,
        applies=lambda _tag, key: key == CLASS_ATTR,
        description="Class attributes name implementation types",
    ),
    ReferenceRule(
        source=ATTRIBUTE,
        bucket=RECORD,
        applies=lambda _tag, key: key != CLASS_ATTR,
        description="any other attribute value",
    ),
)


def classify(
    source: str,
    tag: str,
    key: str = "",
    rules: tuple[ReferenceRule, ...] = REFERENCE_RULES,
) -> list[str]:
    """Return the buckets a token from ``source`` on element ``tag`` belongs to."""
    return [rule.bucket for rule in rules if rule.source == source and rule.applies(tag, key)]
