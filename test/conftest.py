from __future__ import annotations
from pathlib import Path
from typing import Dict

import pytest

from littlesearch.index import KeywordIndex, Occurrence
from littlesearch.preprocess import KeywordNormalizer

SAMPLE_DATA_DIR = Path(__file__).resolve().parents[1] / "data"


def index_from_docs(docs: Dict[str, Dict[str, int]]) -> KeywordIndex:
    """Fusionne des tables {doc: {mot-clé: tf}} dans un nouvel index, dans l'ordre du dict."""
    idx = KeywordIndex()
    for doc_id, counts in docs.items():
        idx.merge_keywords({kw: Occurrence(doc_id, tf) for kw, tf in counts.items()})
        idx.documents.append(doc_id)
    return idx


@pytest.fixture
def make_index():
    return index_from_docs


@pytest.fixture
def preproc() -> KeywordNormalizer:
    return KeywordNormalizer(["a", "the", "between", "is", "and", "of"])


@pytest.fixture
def corpus_dir(tmp_path: Path) -> Path:
    (tmp_path / "alice.txt").write_text(
        "Alice was beginning to get very tired of sitting by her sister.\n"
        "The White Rabbit ran close by her; the rabbit said: Oh dear!\n"
        "Alice, the rabbit and the hole.\n",
        encoding="utf-8",
    )
    (tmp_path / "wow.txt").write_text(
        "What a wonderful world! The world is deep, the sea is deep.\n"
        "Deep deep DEEP. 42 rabbits we're equi-distant\n",
        encoding="utf-8",
    )
    (tmp_path / "empty.txt").write_text("", encoding="utf-8")
    (tmp_path / "docs.txt").write_text("alice.txt\nwow.txt\nempty.txt\n", encoding="utf-8")
    (tmp_path / "noisewords.txt").write_text("a\nThe\nis\nand\nof\nto\nby\nher\nwas\n", encoding="utf-8")
    return tmp_path
