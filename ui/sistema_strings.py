# ui/sistema_strings.py
from __future__ import annotations

import math
from typing import Any, Dict, List, Optional, Tuple

import pandas as pd
import streamlit as st

from core.configuracion import TEMPERATURAS_DEFAULT
from core.entradas import construir_config, parse_temperatura
from core.validacion import avisos_config_series, validar_config_series
from ui.estado import sistema_default
from ui.state_helpers import ensure_dict, merge_defaults, seed_widgets

_PREFIJO = "sis"
_CAMPOS_WIDGET = ("n_inicio", "n_fin", "v_max_sistema", "compatibilidad")
_EDITOR_KEY = "editor_temperaturas"
_COL_TEMP = "Temperatura (°C)"
# fila agregada con "+" en el editor arranca en STC
TEMP_FILA_NUEVA = 25.0


# ==========================================================
# Temperaturas <-> DataFrame del editor
# ==========================================================
def temps_a_df(temps: List[Optional[float]]) -> pd.DataFrame:
    return pd.DataFrame({_COL_TEMP: [t if t is not None else math.nan for t in temps]}, dtype="float64")


def df_a_temps(df: pd.DataFrame) -> List[Optional[float]]:
    # celda vacía -> None (la fila se omite en el cálculo)
    if df is None or _COL_TEMP not in df:
        return []
    return [parse_temperatura(v) for v in df[_COL_TEMP].tolist()]


def columnas_editor() -> Dict[str, Any]:
    return {
        _COL_TEMP: st.column_config.NumberColumn(
            _COL_TEMP, format="%.1f", step=0.1, default=TEMP_FILA_NUEVA,
        )
    }


def restablecer_temperaturas(ctx) -> None:
    ctx.temperaturas = [float(t) for t in TEMPERATURAS_DEFAULT]
    ctx.temperaturas_base = list(ctx.temperaturas)


# ==========================================================
# UI
# ==========================================================
def _ui_series(s: Dict[str, Any]) -> None:
    st.markdown("#### Rango de series y límite de tensión")
    c1, c2, c3 = st.columns(3)
    with c1:
        s["n_inicio"] = st.text_input("Series desde (n)", key=f"{_PREFIJO}_n_inicio", help="Vacío = 14")
    with c2:
        s["n_fin"] = st.text_input("Series hasta (n)", key=f"{_PREFIJO}_n_fin", help="Vacío = 19")
    with c3:
        s["v_max_sistema"] = st.text_input(
            "Tensión máx. del sistema (V)", key=f"{_PREFIJO}_v_max_sistema", help="Vacío = 1500 V"
        )


def _ui_modo(s: Dict[str, Any]) -> None:
    s["compatibilidad"] = st.toggle(
        "Modo compatibilidad (γ corrige la tensión)",
        key=f"{_PREFIJO}_compatibilidad",
        help="Estándar: Voc/Vmp se corrigen con β. Compatibilidad: con γ. Pmax siempre usa γ.",
    )
    st.caption("Modo actual: " + ("**Compatibilidad (γ)**" if s["compatibilidad"] else "Estándar (β)"))


def _ui_temperaturas(ctx) -> None:
    st.markdown("#### Temperaturas de celda")

    # editor recién creado (primer render o volviendo de otro paso): la base es lo último guardado
    if _EDITOR_KEY not in st.session_state:
        ctx.temperaturas_base = list(ctx.temperaturas)

    editado = st.data_editor(
        temps_a_df(ctx.temperaturas_base),
        key=_EDITOR_KEY,
        num_rows="dynamic",
        hide_index=True,
        use_container_width=True,
        column_config=columnas_editor(),
    )
    ctx.temperaturas = df_a_temps(editado)

    if st.button("Restablecer temperaturas por defecto"):
        restablecer_temperaturas(ctx)
        st.session_state.pop(_EDITOR_KEY, None)
        st.rerun()


def render(ctx) -> None:
    s = ensure_dict(ctx, "sistema", dict)
    merge_defaults(s, sistema_default())
    seed_widgets(st.session_state, _PREFIJO, s, _CAMPOS_WIDGET)

    st.markdown("### Strings y temperaturas")
    _ui_series(s)
    for w in avisos_config_series(construir_config(s)):
        st.warning(w)
    _ui_modo(s)
    st.divider()
    _ui_temperaturas(ctx)


def validar(ctx) -> Tuple[bool, List[str]]:
    errores: List[str] = []
    config = construir_config(getattr(ctx, "sistema", None) or {})
    try:
        validar_config_series(config)
    except ValueError as e:
        errores.append(str(e))

    if not any(t is not None for t in (getattr(ctx, "temperaturas", None) or [])):
        errores.append("Agregue al menos una temperatura válida.")

    return (len(errores) == 0), errores
