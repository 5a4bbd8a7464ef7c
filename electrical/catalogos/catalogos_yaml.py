# electrical/catalogos/catalogos_yaml.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List

import yaml

from core.configuracion import DATA_DIR

from .modelos import ModuloCatalogo

logger = logging.getLogger(__name__)


def _read_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    return yaml.safe_load(path.read_text(encoding="utf-8")) or {}


def _req(d: Dict[str, Any], k: str, ctx: str) -> Any:
    if k not in d or d[k] is None:
        raise ValueError(f"Falta '{k}' en {ctx}")
    return d[k]


def _req_num(d: Dict[str, Any], k: str, ctx: str) -> float:
    v = _req(d, k, ctx)
    try:
        return float(v)
    except Exception as e:
        raise ValueError(f"'{k}' debe ser numérico en {ctx}. Valor={v!r}") from e


def _opt_num(d: Dict[str, Any], k: str, ctx: str, default: float | None = None) -> float | None:
    if k not in d or d[k] is None or d[k] == "":
        return default
    v = d[k]
    try:
        return float(v)
    except Exception as e:
        raise ValueError(f"'{k}' debe ser numérico en {ctx}. Valor={v!r}") from e


def _modulo_desde_dict(i: int, m: Dict[str, Any]) -> ModuloCatalogo:
    ctx = f"modulos[{i}]"
    if not isinstance(m, dict):
        raise ValueError(f"{ctx} debe ser un mapeo, no {type(m).__name__}")

    return ModuloCatalogo(
        marca=str(_req(m, "marca", ctx)).strip(),
        modelo=str(_req(m, "modelo", ctx)).strip(),
        pmax=_req_num(m, "pmax", ctx),
        voc=_req_num(m, "voc", ctx),
        vmp=_req_num(m, "vmp", ctx),
        isc=_req_num(m, "isc", ctx),
        imp=_req_num(m, "imp", ctx),
        alpha=_req_num(m, "alpha", ctx),
        beta=_req_num(m, "beta", ctx),
        gamma=_opt_num(m, "gamma", ctx, None),
    )


def cargar_modulos_yaml(path: str | Path = "modulos.yaml", data_dir: Path | None = None) -> List[ModuloCatalogo]:
    """
    Lee `modulos:` (lista) desde electrical/catalogos/data/modulos.yaml.

    Archivo inexistente -> []. Entradas mal formadas -> ValueError con la ruta del campo.
    """
    p = Path(path)
    if not p.is_absolute():
        p = (data_dir or DATA_DIR) / p

    doc = _read_yaml(p)
    modulos = (doc.get("modulos") or []) if isinstance(doc, dict) else []

    out = [_modulo_desde_dict(i, m) for i, m in enumerate(modulos)]
    logger.debug("Catálogo YAML %s: %d módulos", p, len(out))
    return out
