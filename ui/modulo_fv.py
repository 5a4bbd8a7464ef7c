# ui/modulo_fv.py
from __future__ import annotations

from typing import Any, Dict, List, Tuple

import streamlit as st

from electrical.catalogos import ModuloCatalogo, modulos_por_marca
from ui.adaptadores import OPCION_CUSTOM, nombre_modelo
from ui.estado import CAMPOS_MODULO, ctx_invalidate_from, sistema_default
from ui.state_helpers import ensure_dict, merge_defaults, overwrite_widgets, seed_widgets
from ui.validaciones_ui import campos_en_cero_modulo

_PREFIJO = "mod"
_CAMPOS_WIDGET = CAMPOS_MODULO + ("seleccion", "marca", "modelo_custom")

_LABELS = {
    "pmax_stc": "Pmax STC (W)",
    "voc_stc": "Voc STC (V)",
    "vmp_stc": "Vmp STC (V)",
    "isc_stc": "Isc STC (A)",
    "imp_stc": "Imp STC (A)",
    "alpha": "α Isc (%/°C)",
    "beta": "β Voc (%/°C)",
    "gamma": "γ Pmax (%/°C)",
}


# ==========================================================
# Catálogo -> opciones UI
# ==========================================================
def _opciones_catalogo() -> Tuple[List[str], Dict[str, ModuloCatalogo]]:
    mapa: Dict[str, ModuloCatalogo] = {}
    try:
        grupos = modulos_por_marca()
    except ValueError as e:
        st.warning(f"No se pudo leer electrical/catalogos/data/modulos.yaml: {e}")
        grupos = {}

    for modulos in grupos.values():
        for m in modulos:
            mapa[m.clave] = m
    return [""] + list(mapa.keys()) + [OPCION_CUSTOM], mapa


def _format_opcion(op: str) -> str:
    if op == "":
        return "Seleccione un modelo"
    if op == OPCION_CUSTOM:
        return "Personalizado (ingreso manual)"
    return op


def _spec_desde_catalogo(m: ModuloCatalogo) -> Dict[str, str]:
    return {
        "pmax_stc": f"{m.pmax:g}",
        "voc_stc": f"{m.voc:g}",
        "vmp_stc": f"{m.vmp:g}",
        "isc_stc": f"{m.isc:g}",
        "imp_stc": f"{m.imp:g}",
        "alpha": f"{m.alpha:g}",
        "beta": f"{m.beta:g}",
        "gamma": f"{m.gamma:g}" if m.gamma is not None else "",
    }


def _spec_vacia() -> Dict[str, str]:
    return {k: "" for k in CAMPOS_MODULO}


def aplicar_seleccion(mod: Dict[str, Any], seleccion: str, mapa: Dict[str, ModuloCatalogo]) -> None:
    """
    Cambio de modelo:
      - catálogo -> llena specs y marca
      - personalizado -> limpia specs y deja la marca editable
      - vacío -> limpia todo
    """
    mod["seleccion"] = seleccion
    if seleccion == OPCION_CUSTOM:
        mod.update(_spec_vacia())
        mod["marca"] = ""
        return

    m = mapa.get(seleccion)
    if m is None:
        mod.update(_spec_vacia())
        mod["marca"] = ""
        return

    mod.update(_spec_desde_catalogo(m))
    mod["marca"] = m.marca
    mod["modelo_custom"] = ""


def limpiar_entradas(ctx) -> None:
    ctx.modulo = {**_spec_vacia(), "seleccion": "", "marca": "", "modelo_custom": ""}
    ctx.sistema = {**sistema_default(), "n_inicio": "", "n_fin": "", "v_max_sistema": ""}
    ctx.tolerancia = {"v": "", "tol_mas": "", "tol_menos": ""}
    ctx_invalidate_from(ctx, 1)


# ==========================================================
# UI
# ==========================================================
def _ui_seleccion(mod: Dict[str, Any]) -> None:
    opciones, mapa = _opciones_catalogo()
    if mod.get("seleccion") not in opciones:
        mod["seleccion"] = ""
        overwrite_widgets(st.session_state, _PREFIJO, mod, ("seleccion",))

    sel = st.selectbox("Modelo", options=opciones, format_func=_format_opcion, key=f"{_PREFIJO}_seleccion")

    if sel != mod.get("seleccion"):
        aplicar_seleccion(mod, sel, mapa)
        # los campos todavía no se dibujaron en este run: se pueden pisar
        overwrite_widgets(st.session_state, _PREFIJO, mod, CAMPOS_MODULO + ("marca", "modelo_custom"))

    custom = sel == OPCION_CUSTOM
    c1, c2 = st.columns(2)
    with c1:
        mod["marca"] = st.text_input("Marca", key=f"{_PREFIJO}_marca", disabled=not custom)
    with c2:
        if custom:
            mod["modelo_custom"] = st.text_input("Modelo (manual)", key=f"{_PREFIJO}_modelo_custom")


def _ui_specs(mod: Dict[str, Any]) -> None:
    st.markdown("#### Características eléctricas (STC)")
    cols = st.columns(5)
    for col, k in zip(cols, ("pmax_stc", "voc_stc", "vmp_stc", "isc_stc", "imp_stc")):
        with col:
            mod[k] = st.text_input(_LABELS[k], key=f"{_PREFIJO}_{k}")

    st.markdown("#### Coeficientes de temperatura")
    cols = st.columns(3)
    for col, k in zip(cols, ("alpha", "beta", "gamma")):
        with col:
            mod[k] = st.text_input(_LABELS[k], key=f"{_PREFIJO}_{k}")


def _ui_limpiar(ctx) -> None:
    if st.session_state.get("confirmar_limpiar"):
        st.warning("¿Borrar todas las entradas?")
        c1, c2 = st.columns(2)
        if c1.button("Sí, borrar", type="primary"):
            limpiar_entradas(ctx)
            # los widgets ya existen en este run: se sincronizan al inicio del siguiente
            st.session_state["mod_resync"] = True
            st.session_state["confirmar_limpiar"] = False
            st.rerun()
        if c2.button("Cancelar"):
            st.session_state["confirmar_limpiar"] = False
            st.rerun()
    elif st.button("Limpiar entradas"):
        st.session_state["confirmar_limpiar"] = True
        st.rerun()


def render(ctx) -> None:
    mod = ensure_dict(ctx, "modulo", dict)
    merge_defaults(mod, {**_spec_vacia(), "seleccion": "", "marca": "", "modelo_custom": ""})
    if st.session_state.pop("mod_resync", False):
        overwrite_widgets(st.session_state, _PREFIJO, mod, _CAMPOS_WIDGET)
    else:
        seed_widgets(st.session_state, _PREFIJO, mod, _CAMPOS_WIDGET)

    st.markdown("### Módulo FV")
    _ui_seleccion(mod)
    _ui_specs(mod)

    for aviso in campos_en_cero_modulo(ctx):
        st.caption(f"⚠️ {aviso}")

    st.divider()
    _ui_limpiar(ctx)


def validar(ctx) -> Tuple[bool, List[str]]:
    errores: List[str] = []
    mod = getattr(ctx, "modulo", None) or {}
    if mod.get("seleccion") == OPCION_CUSTOM and not nombre_modelo(mod):
        errores.append("Ingrese el nombre del modelo personalizado.")
    return (len(errores) == 0), errores
