# Chequeo rápido de tolerancia: rango mín/máx de una tensión con tolerancias +/- en %.
from __future__ import annotations

from typing import Any, Optional, Tuple

from core.entradas import parse_numero


def calcular_tolerancia(v: Any, tol_mas_pct: Any, tol_menos_pct: Any) -> Optional[Tuple[float, float]]:
    """
    v_min = V * (100 - tol-) / 100
    v_max = V * (100 + tol+) / 100

    Acepta texto con unidades ("1500 V", "3 %"). Retorna None si falta algún dato (en la UI se muestra "-").
    """
    tension = parse_numero(v)
    tol_mas = parse_numero(tol_mas_pct)
    tol_menos = parse_numero(tol_menos_pct)
    if tension is None or tol_mas is None or tol_menos is None:
        return None

    v_min = tension * ((100.0 - tol_menos) / 100.0)
    v_max = tension * ((100.0 + tol_mas) / 100.0)
    return v_min, v_max
