# ui/resultados.py
from __future__ import annotations

from typing import Any, Dict, List, Tuple

import matplotlib.pyplot as plt
import pandas as pd
import streamlit as st

from core.modelo import ContextoCalculo, ModoCorreccion, ResultadoCalculo
from core.orquestador import ejecutar_calculo
from core.rutas import fmt_num
from electrical.paneles import calcular_tolerancia, coeficiente_tension
from reportes.exportar_excel import DEC_MODULO, DEC_STRING, construir_hoja, encabezado_resultados, exportar_excel, nombre_archivo
from reportes.generar_charts import generar_chart_strings
from ui.adaptadores import contexto_desde_ctx
from ui.state_helpers import ensure_dict, seed_widgets

_CSS_SOBRETENSION = "color: #dc2626; font-weight: bold"


# ==========================================================
# Resultado -> tabla de pantalla
# ==========================================================
def _tabla_display(resultado: ResultadoCalculo) -> pd.DataFrame:
    """Mismas columnas que la planilla, pero como texto formateado (miles y decimales máx.)."""
    columnas = encabezado_resultados(resultado.series)
    filas: List[List[str]] = []
    for f in resultado.filas:
        v = f.valores
        fila = [
            fmt_num(f.temp_c, 1),
            fmt_num(v.voc_t if v else None, DEC_MODULO),
            fmt_num(v.vmp_t if v else None, DEC_MODULO),
            fmt_num(v.pmax_t if v else None, DEC_MODULO),
            fmt_num(v.ratio_t if v else None, DEC_MODULO),
        ]
        if f.strings:
            for s in f.strings:
                fila += [fmt_num(s.voc_sistema, DEC_STRING), fmt_num(s.vmp_sistema, DEC_STRING)]
        else:
            fila += ["-"] * (2 * len(resultado.series))
        filas.append(fila)
    return pd.DataFrame(filas, columns=columnas)


def _mascara_sobretension(resultado: ResultadoCalculo) -> pd.DataFrame:
    columnas = encabezado_resultados(resultado.series)
    filas: List[List[bool]] = []
    for f in resultado.filas:
        fila = [False] * 5
        if f.strings:
            for s in f.strings:
                fila += [bool(s.sobretension), False]
        else:
            fila += [False] * (2 * len(resultado.series))
        filas.append(fila)
    return pd.DataFrame(filas, columns=columnas)


def _estilo_tabla(resultado: ResultadoCalculo):
    df = _tabla_display(resultado)
    mask = _mascara_sobretension(resultado)
    css = pd.DataFrame(
        [[_CSS_SOBRETENSION if x else "" for x in fila] for fila in mask.itertuples(index=False)],
        columns=mask.columns,
    )
    return df.style.apply(lambda _: css, axis=None)


# ==========================================================
# Secciones
# ==========================================================
def _ui_resumen(ctx_calc: ContextoCalculo, resultado: ResultadoCalculo) -> None:
    c1, c2, c3 = st.columns(3)
    c1.metric("Modo", "Compatibilidad (γ)" if ctx_calc.modo is ModoCorreccion.COMPATIBILIDAD else "Estándar (β)")
    c2.metric("Coef. de tensión", f"{coeficiente_tension(ctx_calc.spec, ctx_calc.modo) * 100:g} %/°C")
    c3.metric("Vmax sistema", f"{fmt_num(resultado.v_max_sistema, 1)} V")

    if resultado.hay_sobretension:
        st.error(f"Hay strings cuya Voc supera {fmt_num(resultado.v_max_sistema, 1)} V (marcadas en rojo).")
    else:
        st.success("Ningún string del rango supera la tensión máxima del sistema.")


def _ui_descarga(ctx_calc: ContextoCalculo, resultado: ResultadoCalculo) -> None:
    data = exportar_excel(construir_hoja(ctx_calc, resultado))
    st.download_button(
        "Descargar Excel",
        data=data,
        file_name=nombre_archivo(ctx_calc.config),
        mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    )


def _ui_chart(resultado: ResultadoCalculo) -> None:
    if not any(f.valida for f in resultado.filas):
        return
    with st.expander("Gráfico Voc del string vs temperatura", expanded=False):
        fig = generar_chart_strings(resultado)
        st.pyplot(fig)
        plt.close(fig)


def _ui_tolerancia(ctx) -> None:
    t: Dict[str, Any] = ensure_dict(ctx, "tolerancia", dict)
    seed_widgets(st.session_state, "tol", t, ("v", "tol_mas", "tol_menos"))

    st.markdown("#### Chequeo rápido de tolerancia")
    c1, c2, c3 = st.columns(3)
    with c1:
        t["v"] = st.text_input("Tensión (V)", key="tol_v")
    with c2:
        t["tol_mas"] = st.text_input("Tolerancia + (%)", key="tol_tol_mas")
    with c3:
        t["tol_menos"] = st.text_input("Tolerancia − (%)", key="tol_tol_menos")

    rango = calcular_tolerancia(t["v"], t["tol_mas"], t["tol_menos"])
    v_min, v_max = rango if rango else (None, None)
    a, b = st.columns(2)
    a.metric("Mínimo (V)", fmt_num(v_min, 2))
    b.metric("Máximo (V)", fmt_num(v_max, 2))


# ==========================================================
# RENDER
# ==========================================================
def render(ctx) -> None:
    st.markdown("### Resultados")

    # recálculo completo en cada run: lo anterior se descarta
    ctx_calc = contexto_desde_ctx(ctx)
    resultado = ejecutar_calculo(ctx_calc)
    ctx.resultado = resultado

    # rango inválido: el router muestra el error (validar) y no hay tabla
    if resultado.ok:
        continuar = True
        if resultado.warnings:
            for w in resultado.warnings:
                st.warning(w)
            continuar = st.checkbox("Continuar de todas formas", key="confirmar_rango_amplio")

        if continuar:
            _ui_resumen(ctx_calc, resultado)
            st.dataframe(_estilo_tabla(resultado), hide_index=True, use_container_width=True)
            _ui_chart(resultado)
            _ui_descarga(ctx_calc, resultado)

    st.divider()
    _ui_tolerancia(ctx)


def validar(ctx) -> Tuple[bool, List[str]]:
    res = getattr(ctx, "resultado", None)
    if res is not None and not res.ok:
        return False, list(res.errores)
    return True, []
