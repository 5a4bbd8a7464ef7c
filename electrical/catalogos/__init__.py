# API pública del dominio catalogos

from .modelos import ModuloCatalogo

from .catalogos import (
    buscar_por_modelo,
    catalogo_modulos,
    get_modulo,
    modulo_a_spec,
    modulos_por_marca,
)
from .catalogos_yaml import cargar_modulos_yaml

__all__ = [
    # modelos
    "ModuloCatalogo",

    # funciones catálogo
    "catalogo_modulos",
    "modulos_por_marca",
    "get_modulo",
    "buscar_por_modelo",
    "modulo_a_spec",
    "cargar_modulos_yaml",
]
