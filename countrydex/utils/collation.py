import unicodedata


def collation_key(text: str) -> tuple[str, str]:
    """Sort key that orders names the way a browser's localeCompare does.

    Accents and case only break ties: "Åland Islands" sorts among the A's,
    "Curaçao" right after "Cuba", and "cuba" before "Cuba".
    """
    decomposed = unicodedata.normalize("NFKD", text)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base.casefold(), text.swapcase()
