# electrical/catalogos/catalogos.py
from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional

from core.modelo import ModuloSpec

from .catalogos_yaml import cargar_modulos_yaml
from .modelos import ModuloCatalogo

# ==========================================================
# Catálogo base (hardcoded): el módulo por defecto de la calculadora
# ==========================================================

_MODULOS: List[ModuloCatalogo] = [
    ModuloCatalogo(
        marca="Astronergy",
        modelo="CHSM78N(DG)/F-BH-635",
        pmax=635.0,
        voc=56.41,
        vmp=46.79,
        isc=14.35,
        imp=13.68,
        alpha=0.043,
        beta=-0.25,
        gamma=-0.29,
    ),
]


def _merge_modulos(data_dir: Optional[Path] = None) -> List[ModuloCatalogo]:
    # YAML pisa al base si repite marca+modelo
    por_clave: Dict[tuple, ModuloCatalogo] = {(m.marca, m.modelo): m for m in _MODULOS}
    for m in cargar_modulos_yaml("modulos.yaml", data_dir=data_dir):
        por_clave[(m.marca, m.modelo)] = m
    return list(por_clave.values())


# ==========================================================
# API pública (fuente de verdad)
# ==========================================================

def catalogo_modulos(data_dir: Optional[Path] = None) -> List[ModuloCatalogo]:
    return sorted(_merge_modulos(data_dir), key=lambda m: (m.marca, m.modelo))


def modulos_por_marca(data_dir: Optional[Path] = None) -> Dict[str, List[ModuloCatalogo]]:
    """Agrupa por marca (marcas en orden alfabético, modelos ordenados dentro de cada marca)."""
    grupos: Dict[str, List[ModuloCatalogo]] = {}
    for m in _merge_modulos(data_dir):
        grupos.setdefault(m.marca, []).append(m)
    return {marca: sorted(grupos[marca], key=lambda m: m.modelo) for marca in sorted(grupos)}


def get_modulo(marca: str, modelo: str, data_dir: Optional[Path] = None) -> ModuloCatalogo:
    for m in _merge_modulos(data_dir):
        if m.marca == marca and m.modelo == modelo:
            return m
    raise KeyError(f"Módulo no existe en catálogo: {marca} / {modelo}")


def buscar_por_modelo(modelo: str, data_dir: Optional[Path] = None) -> Optional[ModuloCatalogo]:
    # el selector de la UI trabaja solo con el nombre de modelo
    for m in catalogo_modulos(data_dir):
        if m.modelo == modelo:
            return m
    return None


def modulo_a_spec(m: ModuloCatalogo) -> ModuloSpec:
    return ModuloSpec(
        pmax_stc=float(m.pmax),
        voc_stc=float(m.voc),
        vmp_stc=float(m.vmp),
        isc_stc=float(m.isc),
        imp_stc=float(m.imp),
        alpha=float(m.alpha),
        beta=float(m.beta),
        gamma=float(m.gamma) if m.gamma is not None else 0.0,
    )
