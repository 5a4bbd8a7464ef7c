# Paneles FV: corrección por temperatura, strings en serie y tolerancia.
from __future__ import annotations

from .agregacion_strings import agregar_strings, excede_tension
from .correccion_temperatura import coeficiente_potencia, coeficiente_tension, corregir_modulo
from .tolerancia import calcular_tolerancia

__all__ = [
    # Corrección por temperatura
    "corregir_modulo",
    "coeficiente_tension",
    "coeficiente_potencia",
    # Strings en serie
    "agregar_strings",
    "excede_tension",
    # Herramienta de tolerancia
    "calcular_tolerancia",
]
