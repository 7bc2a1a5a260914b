from littlesearch.corpus import CorpusReader, DocumentNotFound
from littlesearch.index import KeywordIndex, Occurrence
from littlesearch.preprocess import KeywordNormalizer
from littlesearch.search import SearchEngine

__all__ = [
    "CorpusReader",
    "DocumentNotFound",
    "KeywordIndex",
    "KeywordNormalizer",
    "Occurrence",
    "SearchEngine",
]
