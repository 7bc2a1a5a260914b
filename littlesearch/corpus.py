# littlesearch/corpus.py
from __future__ import annotations
import os
from typing import Iterator, List, Set


class DocumentNotFound(FileNotFoundError):
    """Levée quand un document de la liste n'existe pas dans docs_dir."""

    def __init__(self, doc_id: str, path: str):
        super().__init__(f"Document introuvable: {doc_id} ({path})")
        self.doc_id = doc_id
        self.path = path


class CorpusReader:
    def __init__(self, docs_dir: str = "data"):
        self.docs_dir = docs_dir

    ## chemin complet d'un document à partir de son identifiant (nom de fichier)
    def path_for(self, doc_id: str) -> str:
        return os.path.join(self.docs_dir, doc_id)

    def read_doc_list(self, docs_file: str) -> List[str]:
        # un ou plusieurs noms de documents par ligne, l'ordre est conservé
        with open(self.path_for(docs_file), encoding="utf-8") as f:
            return f.read().split()

    def read_noise_words(self, noise_file: str) -> Set[str]:
        with open(self.path_for(noise_file), encoding="utf-8") as f:
            ## set pour enlever les doublons, en minuscule car la comparaison est insensible à la casse
            return {w.lower() for w in f.read().split()}

    def read_tokens(self, doc_id: str) -> Iterator[str]:
        path = self.path_for(doc_id)
        # on vérifie tout de suite pour que l'erreur ne soit pas retardée à la première lecture
        if not os.path.isfile(path):
            raise DocumentNotFound(doc_id, path)
        return self._iter_tokens(path)

    def _iter_tokens(self, path: str) -> Iterator[str]:
        with open(path, encoding="utf-8") as f:
            for line in f:
                ## split() sans argument coupe sur tous les blancs
                yield from line.split()
