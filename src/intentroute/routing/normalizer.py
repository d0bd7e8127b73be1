"""Text normalization for keyword matching.

Both the keyword lists and incoming utterances go through the same
pipeline, so a keyword only matches if it survives normalization the same
way the user's text does:

1. Lowercase
2. Strip accents (NFD, drop combining marks, NFC)
3. Replace anything that is not a-z / 0-9 with a single space
4. Stem each word with a small set of Portuguese suffix rules

The stemmer is deliberately coarse ("RSLP-lite"). It collapses plurals,
gerunds, infinitives and diminutives toward a shared root so that
"notícias", "notícia" and "Noticias" all land on the same token. It is not
idempotent for multi-step reductions: normalize(normalize(x)) may strip
one more suffix than normalize(x). The keyword lists are tuned against this
exact behavior, so the rules must not be "fixed" in isolation.
"""

import re
import unicodedata

_NON_ALNUM = re.compile(r"[^a-z0-9]+")

# Words shorter than this are left alone by the stemmer
MIN_STEM_LENGTH = 4

_INFINITIVE_SUFFIXES = ("ar", "er", "ir", "or")
_DIMINUTIVE_SUFFIXES = ("inho", "inha")


def strip_accents(text: str) -> str:
    """Remove combining diacritical marks, keeping the base letters."""
    decomposed = unicodedata.normalize("NFD", text)
    stripped = "".join(ch for ch in decomposed if unicodedata.category(ch) != "Mn")
    return unicodedata.normalize("NFC", stripped)


def stem(word: str) -> str:
    """Apply the Portuguese suffix rules to a single lowercase token."""
    if len(word) < MIN_STEM_LENGTH:
        return word

    # Adverbs: rapidamente -> rapida
    if word.endswith("mente"):
        return word[: -len("mente")]

    # Naive plural, the remaining rules still apply afterwards
    if word.endswith("s"):
        word = word[:-1]

    # Gerund: correndo -> corre
    if word.endswith("ndo"):
        return word[:-3]

    # Infinitive / agent noun: correr -> corr
    if word.endswith(_INFINITIVE_SUFFIXES):
        return word[:-2]

    if word.endswith(_DIMINUTIVE_SUFFIXES):
        return word[:-4]

    # ões -> ão (accents are already gone at this point)
    if word.endswith("oes"):
        return word[:-3] + "ao"

    return word


def tokenize(text: str) -> list[str]:
    """Normalize text and return its stemmed tokens."""
    text = strip_accents(text.lower())
    text = _NON_ALNUM.sub(" ", text)
    return [stem(word) for word in text.split()]


def normalize(text: str) -> str:
    """Normalize text for matching.

    Args:
        text: Raw utterance or keyword.

    Returns:
        Lowercase, accent-free, punctuation-free, stemmed text with words
        separated by single spaces. Empty input yields "".
    """
    return " ".join(tokenize(text))
