"""Username comparison rules."""

import unicodedata


def username_key(username: str) -> str:
    """Return the lookup key used to compare usernames.

    Case is ignored, diacritics are not: ``"Zoe"`` and ``"ZOE"`` share a key,
    ``"Zoe"`` and ``"Zoë"`` do not. NFC normalization makes composed and
    decomposed accents compare equal.
    """
    return unicodedata.normalize("NFC", username).casefold()
