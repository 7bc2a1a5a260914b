#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Petit moteur de recherche : index des mots-clés + recherche "kw1 OR kw2".

Exemples:
  python3 main.py deep world
  python3 main.py --top_k 3 alice rabbit
  python3 main.py --keyword "World?!" --keyword "we're"
  python3 main.py --show_occurrences rabbit
  python3 main.py            (mode interactif)
"""
from __future__ import annotations
import argparse
import sys

from littlesearch.search import SearchEngine

DOCS_DIR = "data"
DOCS_FILE = "docs.txt"
NOISE_FILE = "noisewords.txt"


def parse_args():
    p = argparse.ArgumentParser(description="Little search engine (top-k kw1 OR kw2).")
    p.add_argument("keywords", nargs="*", help="Deux mots-clés à rechercher.")
    p.add_argument("--docs_dir", type=str, default=DOCS_DIR, help="Dossier des documents.")
    p.add_argument("--docs_file", type=str, default=DOCS_FILE,
                   help="Fichier (dans docs_dir) listant les documents à indexer.")
    p.add_argument("--noise_file", type=str, default=NOISE_FILE,
                   help="Fichier (dans docs_dir) des mots vides.")
    p.add_argument("--top_k", type=int, default=5, help="Nombre de documents à afficher.")
    p.add_argument("--keyword", action="append", default=[],
                   help="Affiche la normalisation d'un mot (répétable).")
    p.add_argument("--show_occurrences", action="store_true",
                   help="Affiche la liste d'occurrences de chaque mot-clé demandé.")
    return p.parse_args()


def print_results(eng: SearchEngine, kw1: str, kw2: str, top_k: int):
    docs = eng.search(kw1, kw2, top_k=top_k)
    if not docs:
        print("Aucun résultat.")
        return
    for r, doc in enumerate(docs, 1):
        print(f"{r:2d}. {doc}")


def main() -> int:
    args = parse_args()
    eng = SearchEngine(docs_dir=args.docs_dir, docs_file=args.docs_file, noise_file=args.noise_file)

    try:
        eng.make_index()
    except FileNotFoundError as e:
        # DocumentNotFound compris : pas d'index partiel utilisable
        print(f"Fichier introuvable: {e}", file=sys.stderr)
        return 1

    for w in args.keyword:
        print(f"{w!r} -> {eng.normalize(w)!r}")

    if args.show_occurrences:
        for w in args.keywords:
            kw = eng.normalize(w) or w.lower()
            print(f"{kw}: {eng.index.describe(kw) or '[]'}")
        return 0

    if len(args.keywords) == 2:
        print_results(eng, args.keywords[0], args.keywords[1], args.top_k)
        return 0
    if args.keywords:
        print("Il faut exactement deux mots-clés.", file=sys.stderr)
        return 2
    if args.keyword:
        return 0

    while True:
        try:
            q = input("\nDeux mots-clés (ENTER pour quitter) > ").strip()
        except (EOFError, KeyboardInterrupt):
            # Ctrl-D / Ctrl-C ou entrée standard fermée
            print()
            break
        if not q:
            break
        words = q.split()
        if len(words) != 2:
            print("Il faut exactement deux mots-clés.")
            continue
        print_results(eng, words[0], words[1], args.top_k)
    return 0


if __name__ == "__main__":
    sys.exit(main())
