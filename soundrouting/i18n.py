"""Translation helpers for user-facing route labels."""

import gettext
from functools import lru_cache
from pathlib import Path

DOMAIN = "soundrouting"
LOCALE_DIR = Path(__file__).parent / "locale"


@lru_cache(maxsize=None)
def get_translations(languages: tuple[str, ...] | None = None) -> gettext.NullTranslations:
    """Return the catalog for ``languages``, or the environment's locale when None.

    Falls back to untranslated labels when no catalog is installed.
    """
    return gettext.translation(
        DOMAIN,
        localedir=LOCALE_DIR,
        languages=list(languages) if languages is not None else None,
        fallback=True,
    )


def _(message: str) -> str:
    return get_translations().gettext(message)
