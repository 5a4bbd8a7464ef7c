# core/entradas.py
# Normaliza lo que llega de UI/CLI (texto libre o números) al ContextoCalculo; no hace cálculos eléctricos.
from __future__ import annotations

import math
import re
from typing import Any, List, Mapping, Optional, Sequence

from .configuracion import (
    N_FIN_DEFAULT,
    N_INICIO_DEFAULT,
    TEMPERATURAS_DEFAULT,
    V_MAX_SISTEMA_DEFAULT,
)
from .modelo import ContextoCalculo, ModoCorreccion, ModuloSpec, SeriesConfig

# prefijo numérico al inicio del texto ("12.5 V" -> 12.5), como parseFloat del navegador
_NUM_PREFIJO = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
# prefijo entero ("14.7" -> 14, "1e1" -> 1), como parseInt
_INT_PREFIJO = re.compile(r"^\s*([+-]?\d+)")

_CAMPOS_SPEC = ("pmax_stc", "voc_stc", "vmp_stc", "isc_stc", "imp_stc", "alpha", "beta", "gamma")


def parse_numero(x: Any) -> Optional[float]:
    """Número desde texto libre o numérico; None si está vacío, es ilegible o no es finito."""
    if x is None or isinstance(x, bool):
        return None
    if isinstance(x, (int, float)):
        v = float(x)
    else:
        m = _NUM_PREFIJO.match(str(x))
        if not m:
            return None
        try:
            v = float(m.group(1))
        except ValueError:
            return None
    return v if math.isfinite(v) else None


def _entero(x: Any) -> Optional[int]:
    if x is None or isinstance(x, bool):
        return None
    if isinstance(x, (int, float)):
        v = parse_numero(x)
        return int(v) if v is not None else None  # trunca hacia cero
    m = _INT_PREFIJO.match(str(x))
    return int(m.group(1)) if m else None


def parse_float(x: Any, default: float = 0.0) -> float:
    """Vacío, ilegible o 0 -> default (igual que `parseFloat(x) || default`)."""
    v = parse_numero(x)
    if not v:
        return float(default)
    return v


def parse_int(x: Any, default: int = 0) -> int:
    n = _entero(x)
    return n if n else int(default)


def parse_temperatura(x: Any) -> Optional[float]:
    # aquí 0 °C es válido; None marca la fila para omitirla
    return parse_numero(x)


def parse_modo(x: Any) -> ModoCorreccion:
    if isinstance(x, ModoCorreccion):
        return x
    if isinstance(x, bool):
        return ModoCorreccion.COMPATIBILIDAD if x else ModoCorreccion.ESTANDAR
    try:
        return ModoCorreccion(str(x).strip().lower())
    except ValueError:
        return ModoCorreccion.ESTANDAR


def parse_temperaturas(valores: Optional[Sequence[Any]]) -> List[Optional[float]]:
    if valores is None:
        return [float(t) for t in TEMPERATURAS_DEFAULT]
    if isinstance(valores, str):
        valores = valores.split(",")
    return [parse_temperatura(v) for v in valores]


def construir_spec(datos: Mapping[str, Any]) -> ModuloSpec:
    return ModuloSpec(**{k: parse_float(datos.get(k), 0.0) for k in _CAMPOS_SPEC})


def construir_config(datos: Mapping[str, Any]) -> SeriesConfig:
    return SeriesConfig(
        n_inicio=parse_int(datos.get("n_inicio"), N_INICIO_DEFAULT),
        n_fin=parse_int(datos.get("n_fin"), N_FIN_DEFAULT),
        v_max_sistema=parse_float(datos.get("v_max_sistema"), V_MAX_SISTEMA_DEFAULT),
    )


def construir_contexto(datos: Mapping[str, Any]) -> ContextoCalculo:
    """
    Traduce un dict plano (session_state / argparse) -> ContextoCalculo.

    Nunca levanta error por números mal escritos: se usan los defaults.
    El rango de series se valida después, en core.validacion.
    """
    datos = datos or {}
    return ContextoCalculo(
        spec=construir_spec(datos),
        config=construir_config(datos),
        modo=parse_modo(datos.get("modo", ModoCorreccion.ESTANDAR)),
        temperaturas=parse_temperaturas(datos.get("temperaturas")),
        marca=str(datos.get("marca") or "").strip(),
        modelo=str(datos.get("modelo") or "").strip(),
    )
