# app.py
from __future__ import annotations

import sys
from pathlib import Path

import streamlit as st

# === asegurar imports del repo ===
ROOT = Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from ui.router import PasoWizard, render_wizard
from ui import modulo_fv, sistema_strings, resultados


def pasos_wizard() -> list[PasoWizard]:
    return [
        PasoWizard(1, "Módulo FV", modulo_fv.render, modulo_fv.validar, requiere=[]),
        PasoWizard(2, "Strings y temperaturas", sistema_strings.render, sistema_strings.validar, requiere=[1]),
        PasoWizard(3, "Resultados", resultados.render, resultados.validar, requiere=[1, 2]),
    ]


def main() -> None:
    st.set_page_config(page_title="Calculadora FV • Strings", layout="wide")
    st.title("Tensiones de string FV corregidas por temperatura")
    render_wizard(pasos_wizard())


if __name__ == "__main__":
    main()
