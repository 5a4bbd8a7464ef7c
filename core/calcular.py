# calcular.py
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from electrical.catalogos import buscar_por_modelo
from reportes.exportar_excel import construir_hoja, exportar_excel, nombre_archivo
from reportes.generar_charts import generar_chart_strings

from .configuracion import DEFAULTS
from .entradas import construir_contexto
from .orquestador import ejecutar_calculo
from .rutas import fmt_num, preparar_salida

logger = logging.getLogger(__name__)


def _parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Tensiones de string FV corregidas por temperatura -> Excel")
    ap.add_argument("--modelo", default=None, help="Modelo del catálogo (electrical/catalogos/data/modulos.yaml). Default: módulo precargado.")
    ap.add_argument("--modo", choices=["standard", "compatibility"], default="standard")
    ap.add_argument("--n-inicio", default=None)
    ap.add_argument("--n-fin", default=None)
    ap.add_argument("--v-max", default=None, help="Tensión máxima del sistema (V)")
    ap.add_argument(
        "--temps", nargs="+", default=None,
        help="Temperaturas (°C): separadas por espacio (--temps -20 -15 25) o por coma (--temps=-20,-15,25)",
    )
    ap.add_argument("--out", default=None, help="Ruta del .xlsx (default: salidas/<nombre automático>)")
    ap.add_argument("--chart", action="store_true", help="Guardar también el gráfico Voc string vs temperatura (PNG)")
    ap.add_argument("-v", "--verbose", action="store_true")
    return ap


def _temps_desde_args(tokens: List[str]) -> List[str]:
    # "-20 -15 25" llega como varios tokens; "--temps=-20,-15,25" como uno solo
    return [t for tok in tokens for t in tok.split(",") if t.strip()]


def _datos_desde_args(args: argparse.Namespace) -> Dict[str, Any]:
    datos: Dict[str, Any] = dict(DEFAULTS)

    if args.modelo:
        m = buscar_por_modelo(args.modelo)
        if m is None:
            raise KeyError(f"Modelo no encontrado en catálogo: {args.modelo}")
        datos.update(
            marca=m.marca, modelo=m.modelo, pmax_stc=m.pmax, voc_stc=m.voc, vmp_stc=m.vmp,
            isc_stc=m.isc, imp_stc=m.imp, alpha=m.alpha, beta=m.beta, gamma=m.gamma,
        )

    datos["modo"] = args.modo
    if args.n_inicio is not None:
        datos["n_inicio"] = args.n_inicio
    if args.n_fin is not None:
        datos["n_fin"] = args.n_fin
    if args.v_max is not None:
        datos["v_max_sistema"] = args.v_max
    if args.temps is not None:
        datos["temperaturas"] = _temps_desde_args(args.temps)
    return datos


def main(argv: Optional[List[str]] = None) -> int:
    args = _parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    ctx = construir_contexto(_datos_desde_args(args))
    resultado = ejecutar_calculo(ctx)

    if not resultado.ok:
        for e in resultado.errores:
            logger.error(e)
        return 2

    for w in resultado.warnings:
        logger.warning(w)

    if args.out:
        destino = Path(args.out)
        chart_path = destino.with_suffix(".png")
    else:
        paths = preparar_salida("salidas")
        destino = Path(paths["out_dir"]) / nombre_archivo(ctx.config)
        chart_path = Path(paths["chart_strings"])

    exportar_excel(construir_hoja(ctx, resultado), destino)

    if args.chart:
        import matplotlib.pyplot as plt

        fig = generar_chart_strings(resultado, str(chart_path))
        plt.close(fig)
        logger.info("Gráfico generado en %s", chart_path)

    peor = max(
        (s.voc_sistema for f in resultado.filas for s in f.strings),
        default=None,
    )
    logger.info(
        "%s %s | series %s-%s | Voc string máx %s V (límite %s V)%s",
        ctx.marca, ctx.modelo, ctx.config.n_inicio, ctx.config.n_fin,
        fmt_num(peor, 1), fmt_num(ctx.config.v_max_sistema, 1),
        " | HAY SOBRETENSIÓN" if resultado.hay_sobretension else "",
    )
    logger.info("Excel generado en %s", destino)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
