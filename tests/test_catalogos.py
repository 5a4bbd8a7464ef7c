import tempfile
import textwrap
import unittest
from pathlib import Path

from core.configuracion import DATA_DIR
from electrical.catalogos import (
    buscar_por_modelo,
    cargar_modulos_yaml,
    catalogo_modulos,
    get_modulo,
    modulo_a_spec,
    modulos_por_marca,
)

_YAML = textwrap.dedent(
    """
    modulos:
      - marca: Zeta
        modelo: Z-400
        pmax: 400
        voc: 48
        vmp: 40
        isc: 10.5
        imp: 10
        alpha: 0.05
        beta: -0.3
        gamma: -0.38
      - marca: Astronergy
        modelo: CHSM78N(DG)/F-BH-635
        pmax: 640
        voc: 56.5
        vmp: 46.9
        isc: 14.4
        imp: 13.7
        alpha: 0.043
        beta: -0.25
      - marca: Alfa
        modelo: B-2
        pmax: 300
        voc: "40.1"
        vmp: 33
        isc: 9
        imp: 8.5
        alpha: 0.06
        beta: -0.31
        gamma: -0.4
      - marca: Alfa
        modelo: A-1
        pmax: 310
        voc: 40.5
        vmp: 33.5
        isc: 9.2
        imp: 8.7
        alpha: 0.06
        beta: -0.31
        gamma: -0.4
    """
)


class _ConDirTemporal(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.data_dir = Path(self._tmp.name)

    def tearDown(self):
        self._tmp.cleanup()

    def escribir(self, texto: str) -> None:
        (self.data_dir / "modulos.yaml").write_text(texto, encoding="utf-8")


class TestCargaYaml(_ConDirTemporal):
    def test_archivo_inexistente_es_lista_vacia(self):
        self.assertEqual([], cargar_modulos_yaml(data_dir=self.data_dir))

    def test_lee_y_convierte_numeros(self):
        self.escribir(_YAML)
        mods = cargar_modulos_yaml(data_dir=self.data_dir)
        self.assertEqual(4, len(mods))
        b2 = next(m for m in mods if m.modelo == "B-2")
        self.assertEqual(40.1, b2.voc)
        self.assertEqual("Alfa / B-2", b2.clave)

    def test_gamma_opcional(self):
        self.escribir(_YAML)
        astro = next(m for m in cargar_modulos_yaml(data_dir=self.data_dir) if m.marca == "Astronergy")
        self.assertIsNone(astro.gamma)

    def test_falta_campo_obligatorio(self):
        self.escribir("modulos:\n  - marca: X\n    modelo: Y\n    pmax: 100\n")
        with self.assertRaises(ValueError) as cm:
            cargar_modulos_yaml(data_dir=self.data_dir)
        self.assertIn("modulos[0]", str(cm.exception))

    def test_campo_no_numerico(self):
        self.escribir(_YAML.replace("pmax: 400", "pmax: cuatrocientos"))
        with self.assertRaises(ValueError):
            cargar_modulos_yaml(data_dir=self.data_dir)


class TestCatalogo(_ConDirTemporal):
    def test_sin_yaml_queda_el_modulo_base(self):
        mods = catalogo_modulos(self.data_dir)
        self.assertEqual(1, len(mods))
        self.assertEqual("CHSM78N(DG)/F-BH-635", mods[0].modelo)
        self.assertEqual(635.0, mods[0].pmax)

    def test_yaml_pisa_al_base(self):
        self.escribir(_YAML)
        m = get_modulo("Astronergy", "CHSM78N(DG)/F-BH-635", self.data_dir)
        self.assertEqual(640.0, m.pmax)
        self.assertEqual(4, len(catalogo_modulos(self.data_dir)))

    def test_agrupado_y_ordenado(self):
        self.escribir(_YAML)
        grupos = modulos_por_marca(self.data_dir)
        self.assertEqual(["Alfa", "Astronergy", "Zeta"], list(grupos.keys()))
        self.assertEqual(["A-1", "B-2"], [m.modelo for m in grupos["Alfa"]])

    def test_get_modulo_inexistente(self):
        with self.assertRaises(KeyError):
            get_modulo("Nadie", "N-0", self.data_dir)

    def test_buscar_por_modelo(self):
        self.escribir(_YAML)
        self.assertEqual("Zeta", buscar_por_modelo("Z-400", self.data_dir).marca)
        self.assertIsNone(buscar_por_modelo("no-existe", self.data_dir))

    def test_modulo_a_spec_gamma_ausente(self):
        self.escribir(_YAML)
        spec = modulo_a_spec(get_modulo("Astronergy", "CHSM78N(DG)/F-BH-635", self.data_dir))
        self.assertEqual(0.0, spec.gamma)
        self.assertEqual(-0.25, spec.beta)
        self.assertEqual(56.5, spec.voc_stc)


class TestCatalogoIncluido(unittest.TestCase):
    def test_data_modulos_yaml_valido(self):
        grupos = modulos_por_marca()
        self.assertIn("Astronergy", grupos)
        self.assertTrue(all(len(v) > 0 for v in grupos.values()))

    def test_yaml_viaja_dentro_del_paquete(self):
        import electrical.catalogos as catalogos

        yaml_pkg = Path(catalogos.__file__).resolve().parent / "data" / "modulos.yaml"
        self.assertTrue(yaml_pkg.exists())
        self.assertEqual(yaml_pkg, (DATA_DIR / "modulos.yaml").resolve())
        self.assertIsNotNone(buscar_por_modelo("Mono PERC 550 W"))


if __name__ == "__main__":
    unittest.main()
