# reportes/exportar_excel.py
from __future__ import annotations

import io
import logging
from datetime import date
from pathlib import Path
from typing import Any, List, Optional, Union

import pandas as pd
from openpyxl.utils import get_column_letter

from core.modelo import ContextoCalculo, ResultadoCalculo, SeriesConfig
from core.rutas import redondear

logger = logging.getLogger(__name__)

HOJA = "Resultados"
VACIO = "-"

# decimales como se muestran en pantalla
DEC_MODULO = 2
DEC_STRING = 1

_ANCHOS_FIJOS = [15, 12, 12, 12, 10]
_ANCHO_SERIE = 12


def _r(x: Optional[float], nd: int) -> Union[float, str]:
    if x is None:
        return VACIO
    return redondear(x, nd)


def encabezado_resultados(series: List[int]) -> List[str]:
    fila = ["Temp (°C)", "Voc (V)", "Vmp (V)", "Pmax (W)", "Ratio (%)"]
    for n in series:
        fila.append(f"{n} serie Voc")
        fila.append(f"{n} serie Vmp")
    return fila


def _bloque_parametros(ctx: ContextoCalculo) -> List[List[Any]]:
    s = ctx.spec
    c = ctx.config
    return [
        ["Ítem", "Valor", "Unidad"],
        ["Marca", ctx.marca, ""],
        ["Modelo", ctx.modelo, ""],
        ["Pmax (STC)", s.pmax_stc, "W"],
        ["Voc (STC)", s.voc_stc, "V"],
        ["Vmp (STC)", s.vmp_stc, "V"],
        ["Isc (STC)", s.isc_stc, "A"],
        ["Imp (STC)", s.imp_stc, "A"],
        ["Rango de series", f"{c.n_inicio} ~ {c.n_fin}", "series"],
        ["Coef. β (tensión)", s.beta, "%/°C"],
        ["Coef. γ (potencia)", s.gamma, "%/°C"],
        ["Coef. α (corriente)", s.alpha, "%/°C"],
        ["Tensión máx. del sistema", c.v_max_sistema, "V"],
        ["Modo de cálculo", ctx.modo.etiqueta, ""],
    ]


def construir_hoja(ctx: ContextoCalculo, resultado: ResultadoCalculo) -> List[List[Any]]:
    """
    Dataset plano para la planilla: bloque de parámetros + grilla de resultados.

    Una fila de cuerpo por cada fila de temperatura (1:1, incluso las inválidas).
    Las celdas sin dato llevan "-"; el resto son números (no texto formateado).
    """
    hoja: List[List[Any]] = [
        ["Características de temperatura del módulo FV", "", "", "", ""],
        [""],
        ["[Parámetros]"],
    ]
    hoja.extend(_bloque_parametros(ctx))
    hoja.append([""])
    hoja.append(["[Resultados]"])
    hoja.append(encabezado_resultados(resultado.series))

    for fila in resultado.filas:
        v = fila.valores
        temp = fila.temp_c if fila.temp_c is not None else VACIO
        cuerpo: List[Any] = [
            temp,
            _r(v.voc_t if v else None, DEC_MODULO),
            _r(v.vmp_t if v else None, DEC_MODULO),
            _r(v.pmax_t if v else None, DEC_MODULO),
            _r(v.ratio_t if v else None, DEC_MODULO),
        ]
        if fila.strings:
            for s in fila.strings:
                cuerpo.append(_r(s.voc_sistema, DEC_STRING))
                cuerpo.append(_r(s.vmp_sistema, DEC_STRING))
        else:
            cuerpo.extend([VACIO] * (2 * len(resultado.series)))
        hoja.append(cuerpo)

    return hoja


def nombre_archivo(config: SeriesConfig, fecha: Optional[date] = None) -> str:
    fecha = fecha or date.today()
    return f"PV_resultados_{config.n_inicio}-{config.n_fin}series_{fecha.strftime('%Y%m%d')}.xlsx"


def _ajustar_anchos(ws, n_columnas: int) -> None:
    for i in range(n_columnas):
        ancho = _ANCHOS_FIJOS[i] if i < len(_ANCHOS_FIJOS) else _ANCHO_SERIE
        ws.column_dimensions[get_column_letter(i + 1)].width = ancho


def exportar_excel(hoja: List[List[Any]], destino: Optional[Union[str, Path]] = None) -> bytes:
    """Escribe la hoja en un .xlsx (una sola pestaña) y retorna los bytes; opcionalmente también a disco."""
    df = pd.DataFrame(hoja)

    buffer = io.BytesIO()
    with pd.ExcelWriter(buffer, engine="openpyxl") as writer:
        df.to_excel(writer, sheet_name=HOJA, index=False, header=False)
        _ajustar_anchos(writer.sheets[HOJA], df.shape[1])

    data = buffer.getvalue()

    if destino is not None:
        p = Path(destino)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_bytes(data)
        logger.debug("Excel escrito en %s (%d bytes)", p, len(data))

    return data
