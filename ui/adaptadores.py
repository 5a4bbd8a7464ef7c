# ui/adaptadores.py
from __future__ import annotations

from typing import Any, Dict

from core.entradas import construir_contexto
from core.modelo import ContextoCalculo, ModoCorreccion

from ui.estado import CAMPOS_MODULO

OPCION_CUSTOM = "__custom__"


def nombre_modelo(m: Dict[str, Any]) -> str:
    """Modelo efectivo: el del catálogo, o el texto libre si es personalizado."""
    sel = str(m.get("seleccion") or "")
    if sel == OPCION_CUSTOM or not sel:
        return str(m.get("modelo_custom") or "").strip()
    # "marca / modelo"
    return sel.split(" / ", 1)[-1].strip()


def datos_desde_ctx(ctx) -> Dict[str, Any]:
    """
    Traduce CalculadoraCtx -> dict plano para core.entradas.
    app.py no debe mapear campos uno por uno.
    """
    m = ctx.modulo or {}
    s = ctx.sistema or {}

    datos: Dict[str, Any] = {k: m.get(k) for k in CAMPOS_MODULO}
    datos.update(
        marca=m.get("marca", ""),
        modelo=nombre_modelo(m),
        n_inicio=s.get("n_inicio"),
        n_fin=s.get("n_fin"),
        v_max_sistema=s.get("v_max_sistema"),
        modo=ModoCorreccion.COMPATIBILIDAD if bool(s.get("compatibilidad")) else ModoCorreccion.ESTANDAR,
        temperaturas=list(ctx.temperaturas or []),
    )
    return datos


def contexto_desde_ctx(ctx) -> ContextoCalculo:
    return construir_contexto(datos_desde_ctx(ctx))
