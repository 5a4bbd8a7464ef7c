# Agregación en serie: tensión de string por cantidad de módulos y chequeo contra Vmax del sistema.
from __future__ import annotations

from typing import Iterator

from core.modelo import SeriesConfig, ValoresModulo, ValoresString


def excede_tension(v: float, v_max: float) -> bool:
    # igual al límite no es sobretensión
    return float(v) > float(v_max)


def agregar_strings(valores: ValoresModulo, config: SeriesConfig) -> Iterator[ValoresString]:
    """
    Genera un ValoresString por cada n en [n_inicio, n_fin].

    Es un generador: cada llamada arranca de cero y no guarda nada entre llamadas.
    Sin redondeo; el formato queda para la presentación.
    """
    for n in range(int(config.n_inicio), int(config.n_fin) + 1):
        voc_sistema = valores.voc_t * n
        vmp_sistema = valores.vmp_t * n
        yield ValoresString(
            n=n,
            voc_sistema=voc_sistema,
            vmp_sistema=vmp_sistema,
            sobretension=excede_tension(voc_sistema, config.v_max_sistema),
        )
