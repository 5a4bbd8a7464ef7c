# core/configuracion.py
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List

# Temperatura de referencia STC (°C)
T_STC_C: float = 25.0

# Por encima de este ancho (n_fin - n_inicio) se avisa que la tabla es grande
RANGO_SERIES_AVISO: int = 20

N_INICIO_DEFAULT: int = 14
N_FIN_DEFAULT: int = 19
V_MAX_SISTEMA_DEFAULT: float = 1500.0

TEMPERATURAS_DEFAULT: List[float] = [-20, -15, -10, -5, 0, 10, 20, 25, 48.9, 49.5, 60.9, 60, 70, 80]

# Módulo precargado al abrir la calculadora
DEFAULTS: Dict[str, Any] = {
    "marca": "Astronergy",
    "modelo": "CHSM78N(DG)/F-BH-635",
    "pmax_stc": 635.0,
    "voc_stc": 56.41,
    "vmp_stc": 46.79,
    "isc_stc": 14.35,
    "imp_stc": 13.68,
    "alpha": 0.043,
    "beta": -0.25,
    "gamma": -0.29,
    "n_inicio": N_INICIO_DEFAULT,
    "n_fin": N_FIN_DEFAULT,
    "v_max_sistema": V_MAX_SISTEMA_DEFAULT,
}

# catálogo de módulos: viaja como package-data de electrical.catalogos
DATA_DIR = Path(__file__).resolve().parents[1] / "electrical" / "catalogos" / "data"
