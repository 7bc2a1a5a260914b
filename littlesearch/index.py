# littlesearch/index.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from tqdm import tqdm

from littlesearch.corpus import CorpusReader
from littlesearch.preprocess import KeywordNormalizer


@dataclass
class Occurrence:
    # document dans lequel le mot-clé apparait, et combien de fois
    document: str
    frequency: int

    def __str__(self) -> str:
        return f"({self.document},{self.frequency})"


class KeywordIndex:
    """
    Index inversé en mémoire :
      - keywords_index: mot-clé -> [Occurrence(doc, tf), ...] trié par fréquence décroissante
      - documents:      documents indexés, dans l'ordre de construction
    """
    def __init__(self):
        self.keywords_index: Dict[str, List[Occurrence]] = {}
        self.documents: List[str] = []

    def __len__(self) -> int:
        return len(self.keywords_index)

    def __contains__(self, keyword: str) -> bool:
        return keyword in self.keywords_index

    # ---------- Construction ----------
    def build(self, doc_ids: Iterable[str], reader: CorpusReader, preproc: KeywordNormalizer, progress: bool = False):
        ## pour chaque document, dans l'ordre : chargement puis fusion dans l'index
        # DocumentNotFound n'est pas rattrapée : la construction s'arrête là,
        # les documents déjà fusionnés restent dans l'index
        for doc_id in tqdm(doc_ids, desc="Indexation", disable=not progress):
            kws = self.load_keywords(doc_id, reader.read_tokens(doc_id), preproc)
            self.merge_keywords(kws)
            self.documents.append(doc_id)

    #mots-clés d'un document avec leur fréquence
    def load_keywords(self, doc_id: str, tokens: Iterable[str], preproc: KeywordNormalizer) -> Dict[str, Occurrence]:
        kws: Dict[str, Occurrence] = {}
        for kw in preproc.iter_keywords(tokens):
            occ = kws.get(kw)
            if occ is None:
                kws[kw] = Occurrence(doc_id, 1)
            else:
                occ.frequency += 1
        return kws

    def merge_keywords(self, kws: Dict[str, Occurrence]):
        for kw, occ in kws.items():
            occs = self.keywords_index.get(kw)
            if occs is None:
                self.keywords_index[kw] = [occ]
                continue
            occs.append(occ)
            self.insert_last_occurrence(occs)

    @staticmethod
    def insert_last_occurrence(occs: List[Occurrence]) -> List[int]:
        """
        Replace le dernier élément de occs à sa place (fréquences décroissantes)
        par recherche dichotomique ; occs[0..n-2] est déjà trié.
        Renvoie la suite des indices milieu examinés (vide si len(occs) == 1),
        utile uniquement pour les tests.
        """
        mids: List[int] = []
        if len(occs) <= 1:
            return mids
        last = occs.pop()
        low, high = 0, len(occs)
        while low < high:
            mid = (low + high) // 2
            mids.append(mid)
            f = occs[mid].frequency
            if last.frequency == f:
                break
            if last.frequency > f:
                high = mid
            else:
                low = mid + 1
        # même valeur que le dernier milieu si on est sorti sur une égalité
        occs.insert((low + high) // 2, last)
        return mids

    # ---------- Recherche ----------
    #Retourne la liste d'occurrences d'un mot-clé (copie), vide s'il n'est pas indexé
    def lookup_occurrences(self, keyword: str) -> List[Occurrence]:
        return list(self.keywords_index.get(keyword, []))

    def top_k_search(self, kw1: str, kw2: str, k: int = 5) -> List[str]:
        """
        Documents contenant kw1 OU kw2, par fréquence décroissante, au plus k.
        A fréquence égale kw1 passe avant kw2 ; un document n'apparait qu'une fois.
        Les mots-clés doivent déjà être normalisés.
        """
        if k <= 0:
            return []
        occ_kw1 = self.keywords_index.get(kw1)
        occ_kw2 = self.keywords_index.get(kw2)
        if occ_kw1 is None and occ_kw2 is None:
            return []

        candidates: List[Occurrence] = list(occ_kw1 or [])
        for occ in occ_kw2 or []:
            # même document ET même fréquence
            if occ not in candidates:
                candidates.append(occ)

        # sorted() est stable, y compris avec reverse=True
        candidates = sorted(candidates, key=lambda o: o.frequency, reverse=True)

        docs: List[str] = []
        seen = set()
        for occ in candidates:
            if occ.document in seen:
                continue
            seen.add(occ.document)
            docs.append(occ.document)
            if len(docs) >= k:
                break
        return docs

    def describe(self, keyword: str) -> Optional[str]:
        ## affichage "[(doc,tf), (doc,tf)]"
        occs = self.keywords_index.get(keyword)
        if occs is None:
            return None
        return "[" + ", ".join(str(o) for o in occs) + "]"
