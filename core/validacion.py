# core/validacion.py
from __future__ import annotations

from typing import List

from .configuracion import RANGO_SERIES_AVISO
from .modelo import SeriesConfig


def validar_config_series(config: SeriesConfig) -> None:
    if int(config.n_inicio) > int(config.n_fin):
        raise ValueError(
            f"El inicio del rango de series ({config.n_inicio}) debe ser menor o igual al final ({config.n_fin})."
        )


def avisos_config_series(config: SeriesConfig) -> List[str]:
    avisos: List[str] = []
    ancho = int(config.n_fin) - int(config.n_inicio)
    if ancho > RANGO_SERIES_AVISO:
        avisos.append(
            f"Rango de series muy amplio ({config.n_inicio}–{config.n_fin}, {ancho + 1} columnas): "
            "la tabla puede ser difícil de leer."
        )
    return avisos
