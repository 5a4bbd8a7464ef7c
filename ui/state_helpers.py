# ui/state_helpers.py
from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, MutableMapping


def ensure_dict(ctx: Any, key: str, default_factory: Callable[[], Dict[str, Any]] | None = None) -> Dict[str, Any]:
    if default_factory is None:
        default_factory = dict

    cur = getattr(ctx, key, None)
    if not isinstance(cur, dict):
        cur = default_factory() or {}
        setattr(ctx, key, cur)
    return cur


def merge_defaults(dst: Dict[str, Any], defaults: Dict[str, Any]) -> Dict[str, Any]:
    for k, v in (defaults or {}).items():
        dst.setdefault(k, v)
    return dst


def widget_key(prefijo: str, campo: str) -> str:
    return f"{prefijo}_{campo}"


def seed_widgets(session: MutableMapping[str, Any], prefijo: str, src: Dict[str, Any], campos: Iterable[str]) -> None:
    """
    Carga en session_state los valores guardados en ctx antes de dibujar los widgets.

    Streamlit borra las keys de widgets que no se dibujaron en el último run
    (al cambiar de paso), por eso ctx es la copia que persiste.
    """
    for c in campos:
        session.setdefault(widget_key(prefijo, c), src.get(c))


def overwrite_widgets(session: MutableMapping[str, Any], prefijo: str, src: Dict[str, Any], campos: Iterable[str]) -> None:
    # para cuando cambian datos desde código (selección de catálogo, limpiar)
    for c in campos:
        session[widget_key(prefijo, c)] = src.get(c)
