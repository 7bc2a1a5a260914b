from __future__ import annotations
import re  ## utile pour les expressions régulières
from typing import Iterable, Iterator, Optional


class KeywordNormalizer:
    """
    Transforme un mot brut en mot-clé canonique, ou le rejette (None).
    Un mot-clé est un mot en minuscule, sans chiffre, débarrassé de sa
    ponctuation finale, sans ponctuation interne et qui n'est pas un mot vide.
    """
    ## ponctuation retirée en fin de mot uniquement
    TRAILING_PUNCTUATION = ".,?:;!"
    ## si l'un de ces caractères reste dans le mot (début ou milieu) on rejette le mot
    FORBIDDEN_CHARS = set(".,'-?:;!")
    DIGIT_REGEXP = re.compile(r"\d")

    def __init__(self, noise_words: Iterable[str] = ()):
        # les mots vides sont comparés en minuscule
        self.noise_words = {w.lower() for w in noise_words}

    def is_noise_word(self, word: str) -> bool:
        return word.lower() in self.noise_words

    def normalize(self, word: str) -> Optional[str]:
        s = word.strip().lower()
        if not s:
            return None
        # chiffre n'importe où dans le mot
        if self.DIGIT_REGEXP.search(s):
            return None
        # "World?!" => "world" ; la ponctuation de début n'est pas retirée
        s = s.rstrip(self.TRAILING_PUNCTUATION)
        if not s:
            return None
        # "we're", "equi-distant", "what,ever", ",hello" sont rejetés
        if any(c in self.FORBIDDEN_CHARS for c in s):
            return None
        if self.is_noise_word(s):
            return None
        return s

    def iter_keywords(self, tokens: Iterable[str]) -> Iterator[str]:
        ## les mots-clés d'une suite de mots bruts, dans l'ordre, les rejets en moins
        for t in tokens:
            kw = self.normalize(t)
            if kw is not None:
                yield kw
