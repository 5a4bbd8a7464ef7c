# core/orquestador.py
from __future__ import annotations

import logging
from typing import List, Optional

from electrical.paneles import agregar_strings, corregir_modulo

from .modelo import ContextoCalculo, FilaResultado, ResultadoCalculo
from .validacion import avisos_config_series, validar_config_series

logger = logging.getLogger(__name__)


# ==========================================================
# Helpers
# ==========================================================
def _calcular_fila(ctx: ContextoCalculo, temp_c: Optional[float]) -> FilaResultado:
    # fila vacía / inválida: se omite sin tumbar la pasada
    if temp_c is None:
        return FilaResultado(temp_c=None)

    valores = corregir_modulo(ctx.spec, ctx.modo, temp_c)
    strings = list(agregar_strings(valores, ctx.config))
    return FilaResultado(temp_c=float(temp_c), valores=valores, strings=strings)


def _rechazado(ctx: ContextoCalculo, errores: List[str]) -> ResultadoCalculo:
    return ResultadoCalculo(
        ok=False,
        errores=errores,
        warnings=[],
        series=[],
        filas=[],
        modo=ctx.modo,
        v_max_sistema=float(ctx.config.v_max_sistema),
    )


# ==========================================================
# ENTRYPOINT
# ==========================================================
def ejecutar_calculo(ctx: ContextoCalculo) -> ResultadoCalculo:
    """
    Una pasada completa: todas las filas de temperatura x todas las series del rango.

    - Rango inválido (n_inicio > n_fin): ok=False, sin filas.
    - Rango amplio: se calcula igual y se deja el aviso en warnings.
    - Se recalcula todo en cada llamada; no hay cache ni estado entre pasadas.
    """
    try:
        validar_config_series(ctx.config)
    except ValueError as e:
        logger.debug("Cálculo rechazado: %s", e)
        return _rechazado(ctx, [str(e)])

    warnings = avisos_config_series(ctx.config)
    filas = [_calcular_fila(ctx, t) for t in ctx.temperaturas]

    omitidas = sum(1 for f in filas if not f.valida)
    if omitidas:
        logger.debug("%d fila(s) de temperatura omitidas por valor inválido", omitidas)

    logger.debug(
        "Cálculo ok: %d filas, series %s-%s, modo=%s",
        len(filas),
        ctx.config.n_inicio,
        ctx.config.n_fin,
        ctx.modo.value,
    )

    return ResultadoCalculo(
        ok=True,
        errores=[],
        warnings=warnings,
        series=ctx.config.series,
        filas=filas,
        modo=ctx.modo,
        v_max_sistema=float(ctx.config.v_max_sistema),
    )
