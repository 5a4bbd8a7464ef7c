# ui/estado.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from core.configuracion import DEFAULTS, TEMPERATURAS_DEFAULT
from core.modelo import ResultadoCalculo

CAMPOS_MODULO = ("pmax_stc", "voc_stc", "vmp_stc", "isc_stc", "imp_stc", "alpha", "beta", "gamma")


def modulo_default() -> Dict[str, Any]:
    m: Dict[str, Any] = {k: str(DEFAULTS[k]) for k in CAMPOS_MODULO}
    m["marca"] = DEFAULTS["marca"]
    m["seleccion"] = f"{DEFAULTS['marca']} / {DEFAULTS['modelo']}"
    m["modelo_custom"] = ""
    return m


def sistema_default() -> Dict[str, Any]:
    return {
        "n_inicio": str(DEFAULTS["n_inicio"]),
        "n_fin": str(DEFAULTS["n_fin"]),
        "v_max_sistema": str(int(DEFAULTS["v_max_sistema"])),
        "compatibilidad": False,
    }


# ==========================================================
# Contexto de la calculadora (una sesión de navegador)
# ==========================================================
@dataclass
class CalculadoraCtx:
    # ------------------------------------------------------
    # Navegación
    # ------------------------------------------------------
    paso_actual: int = 1
    completado: Dict[int, bool] = field(default_factory=dict)
    errores: List[str] = field(default_factory=list)

    # ------------------------------------------------------
    # Entradas (texto tal como lo escribe el usuario)
    # ------------------------------------------------------
    modulo: Dict[str, Any] = field(default_factory=modulo_default)
    sistema: Dict[str, Any] = field(default_factory=sistema_default)

    # filas de temperatura: orden del usuario, duplicados permitidos
    temperaturas: List[Optional[float]] = field(default_factory=lambda: [float(t) for t in TEMPERATURAS_DEFAULT])
    # base del editor de tabla; solo cambia al entrar al paso o al restablecer
    temperaturas_base: List[Optional[float]] = field(default_factory=lambda: [float(t) for t in TEMPERATURAS_DEFAULT])

    tolerancia: Dict[str, str] = field(default_factory=lambda: {"v": "", "tol_mas": "", "tol_menos": ""})

    # ------------------------------------------------------
    # Última pasada de cálculo (se reemplaza completa en cada render)
    # ------------------------------------------------------
    resultado: Optional[ResultadoCalculo] = None


# ==========================================================
# Obtener contexto
# ==========================================================
def ctx_get(st) -> CalculadoraCtx:
    """
    Obtiene el contexto desde session_state.
    Si no existe, lo crea automáticamente.
    """
    if "calc_ctx" not in st.session_state:
        st.session_state["calc_ctx"] = CalculadoraCtx()
    return st.session_state["calc_ctx"]


def ctx_set_paso(st, paso: int) -> None:
    ctx = ctx_get(st)
    ctx.paso_actual = int(paso)


def ctx_invalidate_from(ctx: CalculadoraCtx, paso_desde: int) -> None:
    """Marca como NO completados los pasos >= paso_desde y descarta el resultado."""
    for k in list(ctx.completado.keys()):
        if int(k) >= int(paso_desde):
            ctx.completado[k] = False
    ctx.resultado = None
