# electrical/catalogos/modelos.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ModuloCatalogo:
    marca: str
    modelo: str
    pmax: float   # W (STC)
    voc: float    # V
    vmp: float    # V
    isc: float    # A
    imp: float    # A
    alpha: float  # %/°C
    beta: float   # %/°C
    gamma: Optional[float] = None  # %/°C; algunos datasheets no lo publican

    @property
    def clave(self) -> str:
        return f"{self.marca} / {self.modelo}"
