"""
recipemd_core.cli
=================

Punto de entrada mínimo para ejecutar el pipeline sobre un archivo:

1) Leer el documento RecipeMD.
2) Parsearlo a `Recipe` (modo estricto o permisivo).
3) Exportarlo a JSON, HTML o markdown.
4) Imprimir la salida o escribirla a disco.

Uso:

    python -m recipemd_core.cli receta.md --format html --profile schema_org_v1
    python -m recipemd_core.cli receta.md --mode permissive --save

Los defaults salen de `get_settings()` (variables de entorno / `.env`).
Las advertencias se reportan por stderr; cualquier `RecipeMDError` termina con
código de salida 1.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import get_settings
from .domain_models import PARSE_MODES
from .domains.recipes.profiles import PROFILES
from .engine import run_recipe_pipeline
from .exceptions import RecipeMDError, RecipeWarningsError
from .export import OUTPUT_FORMATS

logger = logging.getLogger(__name__)

_EXTENSIONS = {"json": ".json", "html": ".html", "markdown": ".md"}


def _configure_logging(level_name: str) -> None:
    log_level = getattr(logging, level_name, logging.INFO)
    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="recipemd",
        description="Extrae la estructura de una receta RecipeMD y la exporta.",
    )
    parser.add_argument("file", type=Path, help="Documento RecipeMD (.md)")
    parser.add_argument("--format", choices=OUTPUT_FORMATS, default=settings.output_format)
    parser.add_argument("--mode", choices=PARSE_MODES, default=settings.parse_mode)
    parser.add_argument(
        "--profile",
        choices=sorted(PROFILES),
        default=settings.html_profile,
        help="Perfil de presentación (solo para --format html)",
    )
    output = parser.add_mutually_exclusive_group()
    output.add_argument("--out", type=Path, default=None, help="Archivo de salida (default: stdout)")
    output.add_argument(
        "--save",
        action="store_true",
        help=f"Guardar en {settings.output_dir}/<nombre>.<ext>",
    )
    parser.add_argument(
        "--fail-on-warning",
        action="store_true",
        help="Tratar cualquier advertencia como error",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Ejecuta la CLI.

    Returns
    -------
    int
        0 si todo salió bien, 1 ante cualquier `RecipeMDError`.
    """
    settings = get_settings()
    _configure_logging(settings.log_level)
    args = build_parser().parse_args(argv)

    source = args.file.read_text(encoding="utf-8")

    try:
        result = run_recipe_pipeline(
            source=source,
            mode=args.mode,
            output_format=args.format,
            profile_id=args.profile if args.format == "html" else None,
        )
        for warning in result["warnings"]:
            print(f"⚠️  {args.file}: {warning}", file=sys.stderr)
        if args.fail_on_warning and result["warnings"]:
            raise RecipeWarningsError(result["warnings"])
    except RecipeMDError as e:
        logger.error("No se pudo procesar %s: %s", args.file, e)
        print(f"❌ {args.file}: {e}", file=sys.stderr)
        return 1

    out_path = args.out
    if args.save:
        out_path = Path(settings.output_dir) / f"{args.file.stem}{_EXTENSIONS[args.format]}"

    if out_path is None:
        sys.stdout.write(result["output"])
        return 0

    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(result["output"], encoding="utf-8")
    print(f"✅ Salida generada en: {out_path.resolve()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
