from __future__ import annotations

from typing import Any, List

from core.entradas import parse_float


def _as_dict(x: Any) -> dict:
    return x if isinstance(x, dict) else {}


def campos_en_cero_modulo(ctx: Any) -> List[str]:
    """
    Campos STC que quedarán en 0 (vacíos o ilegibles).

    No bloquea el cálculo: solo se avisa, la tabla se genera igual.
    """
    m = _as_dict(getattr(ctx, "modulo", {}))
    avisos: List[str] = []

    for k, label in (("pmax_stc", "Pmax (STC)"), ("voc_stc", "Voc (STC)"), ("vmp_stc", "Vmp (STC)")):
        if parse_float(m.get(k), 0.0) == 0.0:
            avisos.append(f"{label} vacío o no numérico: se usará 0.")

    if parse_float(m.get("beta"), 0.0) == 0.0:
        avisos.append("Coeficiente β vacío: en modo estándar la tensión no varía con la temperatura.")
    if parse_float(m.get("gamma"), 0.0) == 0.0:
        avisos.append("Coeficiente γ vacío: Pmax no varía con la temperatura.")

    return avisos
