# core/modelo.py
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from .configuracion import N_FIN_DEFAULT, N_INICIO_DEFAULT, V_MAX_SISTEMA_DEFAULT


class ModoCorreccion(str, Enum):
    ESTANDAR = "standard"            # beta corrige tensión
    COMPATIBILIDAD = "compatibility"  # gamma corrige tensión

    @property
    def etiqueta(self) -> str:
        if self is ModoCorreccion.COMPATIBILIDAD:
            return "Compatibilidad (γ corrige tensión)"
        return "Estándar (β corrige tensión)"


@dataclass(frozen=True)
class ModuloSpec:
    pmax_stc: float = 0.0   # W
    voc_stc: float = 0.0    # V
    vmp_stc: float = 0.0    # V
    isc_stc: float = 0.0    # A
    imp_stc: float = 0.0    # A
    alpha: float = 0.0      # %/°C corriente (no entra en el cálculo)
    beta: float = 0.0       # %/°C tensión
    gamma: float = 0.0      # %/°C potencia


@dataclass(frozen=True)
class SeriesConfig:
    n_inicio: int = N_INICIO_DEFAULT
    n_fin: int = N_FIN_DEFAULT
    v_max_sistema: float = V_MAX_SISTEMA_DEFAULT

    @property
    def series(self) -> List[int]:
        return list(range(int(self.n_inicio), int(self.n_fin) + 1))


@dataclass(frozen=True)
class ValoresModulo:
    voc_t: float
    vmp_t: float
    pmax_t: float
    ratio_t: float  # % de Pmax STC


@dataclass(frozen=True)
class ValoresString:
    n: int
    voc_sistema: float
    vmp_sistema: float
    sobretension: bool


@dataclass
class ContextoCalculo:
    """
    Todo lo que necesita una pasada de cálculo.

    Lo arma la capa que llama (UI o CLI); el motor no guarda estado propio.
    """
    spec: ModuloSpec
    config: SeriesConfig
    modo: ModoCorreccion = ModoCorreccion.ESTANDAR
    temperaturas: List[Optional[float]] = field(default_factory=list)

    # descriptivos (solo exportación)
    marca: str = ""
    modelo: str = ""


@dataclass(frozen=True)
class FilaResultado:
    temp_c: Optional[float]
    valores: Optional[ValoresModulo] = None
    strings: List[ValoresString] = field(default_factory=list)

    @property
    def valida(self) -> bool:
        return self.valores is not None


@dataclass
class ResultadoCalculo:
    ok: bool
    errores: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    series: List[int] = field(default_factory=list)
    filas: List[FilaResultado] = field(default_factory=list)
    modo: ModoCorreccion = ModoCorreccion.ESTANDAR
    v_max_sistema: float = V_MAX_SISTEMA_DEFAULT

    @property
    def hay_sobretension(self) -> bool:
        return any(s.sobretension for f in self.filas for s in f.strings)
