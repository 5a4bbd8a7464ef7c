# Corrección por temperatura del módulo FV: Voc/Vmp/Pmax a temperatura de celda arbitraria.
from __future__ import annotations

from core.configuracion import T_STC_C
from core.modelo import ModoCorreccion, ModuloSpec, ValoresModulo


def coeficiente_tension(spec: ModuloSpec, modo: ModoCorreccion) -> float:
    """Coeficiente de tensión como fracción/°C (beta en modo estándar, gamma en compatibilidad)."""
    coef_pct = spec.gamma if modo == ModoCorreccion.COMPATIBILIDAD else spec.beta
    return float(coef_pct) / 100.0


def coeficiente_potencia(spec: ModuloSpec) -> float:
    # gamma gobierna la potencia en ambos modos
    return float(spec.gamma) / 100.0


def corregir_modulo(spec: ModuloSpec, modo: ModoCorreccion, temp_c: float) -> ValoresModulo:
    """
    Aproximación lineal de primer orden respecto a STC:

      X(T) = X_STC * (1 + coef%/°C/100 * (T - 25))

    Voc y Vmp usan el coeficiente de tensión del modo; Pmax siempre usa gamma.
    """
    delta_t = float(temp_c) - T_STC_C

    factor_v = 1.0 + coeficiente_tension(spec, modo) * delta_t
    factor_p = 1.0 + coeficiente_potencia(spec) * delta_t

    voc_t = float(spec.voc_stc) * factor_v
    vmp_t = float(spec.vmp_stc) * factor_v
    pmax_t = float(spec.pmax_stc) * factor_p
    ratio_t = (pmax_t / float(spec.pmax_stc)) * 100.0 if spec.pmax_stc else 0.0

    return ValoresModulo(voc_t=voc_t, vmp_t=vmp_t, pmax_t=pmax_t, ratio_t=ratio_t)
