# core/rutas.py
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from pathlib import Path
from typing import Dict, Optional, Union


def preparar_salida(nombre_carpeta: str = "salidas", base: Optional[Union[str, Path]] = None) -> Dict[str, str]:
    """Carpeta de salida bajo `base` (por defecto el directorio de trabajo, no el del paquete instalado)."""
    out_dir = Path(base or Path.cwd()).resolve() / nombre_carpeta
    out_dir.mkdir(parents=True, exist_ok=True)

    return {
        "out_dir": str(out_dir),
        "chart_strings": str(out_dir / "pv_chart_strings.png"),
    }


def redondear(x: float, nd: int = 2) -> float:
    """Redondeo con empates alejándose de cero (820.25 -> 820.3), como toLocaleString del navegador."""
    q = Decimal(float(x)).quantize(Decimal(1).scaleb(-nd), rounding=ROUND_HALF_UP)
    return float(q)


def num(x: float, nd: int = 2) -> str:
    return f"{redondear(x, nd):,.{nd}f}"


def fmt_num(x: Optional[float], max_dec: int = 2) -> str:
    """
    Separador de miles y como máximo `max_dec` decimales, sin ceros de relleno.
    1234.5 -> "1,234.5" ; 48.0 -> "48" ; None -> "-"
    """
    if x is None:
        return "-"
    s = num(float(x), max_dec)
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    return s
