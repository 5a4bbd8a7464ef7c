# reportes/generar_charts.py
from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Tuple

import matplotlib.pyplot as plt

from core.modelo import ResultadoCalculo


def _curvas_voc(resultado: ResultadoCalculo) -> Tuple[List[float], List[Tuple[int, List[float]]]]:
    """
    Ordena por temperatura las filas válidas y arma una curva Voc_string(T) por cada n.
    Las filas inválidas no entran al gráfico.
    """
    filas = sorted((f for f in resultado.filas if f.valida), key=lambda f: float(f.temp_c))
    temps = [float(f.temp_c) for f in filas]

    curvas: List[Tuple[int, List[float]]] = []
    for i, n in enumerate(resultado.series):
        curvas.append((n, [f.strings[i].voc_sistema for f in filas]))
    return temps, curvas


def generar_chart_strings(resultado: ResultadoCalculo, out_path: Optional[str] = None):
    """
    Voc del string vs temperatura (una línea por n) + línea de Vmax del sistema.

    Retorna la figura (para st.pyplot). Si se da out_path también guarda el PNG.
    """
    temps, curvas = _curvas_voc(resultado)

    fig, ax = plt.subplots(figsize=(8, 4.5))
    for n, ys in curvas:
        ax.plot(temps, ys, marker="o", markersize=3, label=f"{n} serie")

    ax.axhline(float(resultado.v_max_sistema), color="red", linestyle="--", linewidth=1.2,
               label=f"Vmax sistema {resultado.v_max_sistema:,.0f} V")

    ax.set_xlabel("Temperatura de celda (°C)")
    ax.set_ylabel("Voc string (V)")
    ax.grid(True, alpha=0.3)
    if curvas:
        ax.legend(fontsize=7, ncol=2)
    fig.tight_layout()

    if out_path:
        Path(out_path).parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(out_path, dpi=160)

    return fig
