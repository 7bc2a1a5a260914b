from __future__ import annotations
from typing import Iterable, List

from littlesearch.corpus import CorpusReader
from littlesearch.index import KeywordIndex
from littlesearch.preprocess import KeywordNormalizer


class SearchEngine:
    def __init__(self, docs_dir="data", docs_file="docs.txt", noise_file="noisewords.txt", progress=True):
        self.docs_dir = docs_dir
        self.docs_file = docs_file
        self.noise_file = noise_file
        self.progress = progress
        self.reader = CorpusReader(docs_dir)
        self.preproc = KeywordNormalizer()
        self.index = KeywordIndex()

    def build_index(self, doc_ids: Iterable[str], noise_words: Iterable[str]) -> KeywordIndex:
        doc_ids = list(doc_ids)
        print(f"Construction de l'index… ({len(doc_ids)} documents)")
        self.preproc = KeywordNormalizer(noise_words)
        self.index = KeywordIndex()
        # en cas de DocumentNotFound self.index garde les documents déjà traités
        self.index.build(doc_ids, self.reader, self.preproc, progress=self.progress)
        print(f"Index créé : {len(self.index.documents)} documents, {len(self.index)} mots-clés.")
        return self.index

    def make_index(self, docs_file: str | None = None, noise_file: str | None = None) -> KeywordIndex:
        ## lit les mots vides puis la liste des documents, et construit l'index
        noise_words = self.reader.read_noise_words(noise_file or self.noise_file)
        doc_ids = self.reader.read_doc_list(docs_file or self.docs_file)
        return self.build_index(doc_ids, noise_words)

    def normalize(self, word: str) -> str | None:
        return self.preproc.normalize(word)

    def search(self, kw1: str, kw2: str, top_k: int = 5) -> List[str]:
        # saisie utilisateur : on normalise d'abord, un mot rejeté ne peut pas être dans l'index
        q1 = self.normalize(kw1) or kw1.lower()
        q2 = self.normalize(kw2) or kw2.lower()
        return self.index.top_k_search(q1, q2, k=top_k)

    def top5_search(self, kw1: str, kw2: str) -> List[str]:
        return self.index.top_k_search(kw1, kw2, k=5)
