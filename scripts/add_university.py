#!/usr/bin/env python3
"""
Cadastrar uma universidade diretamente no catalogo JSON.

Uso:
  python scripts/add_university.py --name "Alpha U" --type Public [--college Engineering --college Arts]
"""
from __future__ import annotations

import argparse
import sys

from edupath.app import build_catalog
from edupath.core.config import get_settings


def main(argv: list[str] | None = None) -> None:
    ap = argparse.ArgumentParser(description="Cadastrar universidade no catalogo")
    ap.add_argument("--name", required=True, help="Nome da universidade")
    ap.add_argument("--type", default="", help="Categoria (Public, Private, National...)")
    ap.add_argument("--college", action="append", default=[], help="Faculdade (pode repetir)")
    args = ap.parse_args(argv)

    name = (args.name or "").strip()
    if not name:
        raise SystemExit("Nome invalido")

    catalog = build_catalog(get_settings())
    institution = catalog.create(
        {"name": name, "type": args.type.strip(), "colleges": [{"name": c.strip()} for c in args.college if c.strip()]}
    )
    print("OK: universidade cadastrada")
    print(f"  ID: {institution.id}")
    print(f"  Nome: {institution.name}")
    if institution.colleges:
        print(f"  Faculdades: {', '.join(c['name'] for c in institution.colleges)}")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - uso CLI
        sys.stderr.write(f"Erro: {exc}\n")
        raise SystemExit(1)
