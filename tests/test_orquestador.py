import unittest

from core.entradas import construir_contexto
from core.modelo import ContextoCalculo, ModoCorreccion, ModuloSpec, SeriesConfig
from core.orquestador import ejecutar_calculo


def _ctx(**kw) -> ContextoCalculo:
    datos = {
        "pmax_stc": 635, "voc_stc": 56.41, "vmp_stc": 46.79, "isc_stc": 14.35, "imp_stc": 13.68,
        "alpha": 0.043, "beta": -0.25, "gamma": -0.29,
        "n_inicio": 14, "n_fin": 19, "v_max_sistema": 1500,
        "temperaturas": [-20, 25, 80],
    }
    datos.update(kw)
    return construir_contexto(datos)


class TestOrquestador(unittest.TestCase):
    def test_pasada_completa_filas_por_series(self):
        res = ejecutar_calculo(_ctx())
        self.assertTrue(res.ok)
        self.assertEqual([14, 15, 16, 17, 18, 19], res.series)
        self.assertEqual(3, len(res.filas))
        for f in res.filas:
            self.assertEqual(6, len(f.strings))

        stc = res.filas[1]
        self.assertEqual(25.0, stc.temp_c)
        self.assertEqual(100.0, stc.valores.ratio_t)

    def test_escenario_b_sin_sobretension_a_80c(self):
        res = ejecutar_calculo(_ctx(temperaturas=[80]))
        fila = res.filas[0]
        self.assertAlmostEqual(56.41 * 0.8625 * 19, fila.strings[-1].voc_sistema, places=9)
        self.assertFalse(any(s.sobretension for s in fila.strings))
        self.assertEqual([], res.warnings)

    def test_frio_extremo_marca_sobretension(self):
        # -20 °C: Voc = 56.41 * 1.1125 = 62.756 -> n=19 da ~1192 V; con límite 1000 V se pasa
        res = ejecutar_calculo(_ctx(temperaturas=[-20], v_max_sistema=1000))
        flags = {s.n: s.sobretension for s in res.filas[0].strings}
        self.assertFalse(flags[15])
        self.assertTrue(flags[16])
        self.assertTrue(res.hay_sobretension)

    def test_escenario_c_rango_invertido_rechazado(self):
        res = ejecutar_calculo(_ctx(n_inicio=20, n_fin=19))
        self.assertFalse(res.ok)
        self.assertEqual(1, len(res.errores))
        self.assertEqual([], res.filas)
        self.assertEqual([], res.series)

    def test_rango_amplio_avisa_pero_calcula(self):
        res = ejecutar_calculo(_ctx(n_inicio=1, n_fin=30))
        self.assertTrue(res.ok)
        self.assertEqual(1, len(res.warnings))
        self.assertEqual(30, len(res.filas[0].strings))

    def test_rango_de_21_columnas_no_avisa(self):
        res = ejecutar_calculo(_ctx(n_inicio=1, n_fin=21))
        self.assertEqual([], res.warnings)

    def test_fila_invalida_se_omite(self):
        res = ejecutar_calculo(_ctx(temperaturas=[10, "", None, 0]))
        self.assertEqual(4, len(res.filas))
        self.assertTrue(res.filas[0].valida)
        self.assertFalse(res.filas[1].valida)
        self.assertEqual([], res.filas[1].strings)
        self.assertFalse(res.filas[2].valida)
        self.assertTrue(res.filas[3].valida)
        self.assertEqual(0.0, res.filas[3].temp_c)

    def test_orden_y_duplicados_se_respetan(self):
        res = ejecutar_calculo(_ctx(temperaturas=[60, -5, 60]))
        self.assertEqual([60.0, -5.0, 60.0], [f.temp_c for f in res.filas])
        self.assertEqual(res.filas[0], res.filas[2])

    def test_idempotente(self):
        ctx = _ctx(modo=ModoCorreccion.COMPATIBILIDAD)
        self.assertEqual(ejecutar_calculo(ctx), ejecutar_calculo(ctx))

    def test_contexto_explicito_sin_entradas(self):
        ctx = ContextoCalculo(
            spec=ModuloSpec(voc_stc=50.0, vmp_stc=40.0, pmax_stc=400.0, beta=-0.3, gamma=-0.35),
            config=SeriesConfig(n_inicio=2, n_fin=2, v_max_sistema=100.0),
            temperaturas=[25.0],
        )
        res = ejecutar_calculo(ctx)
        self.assertEqual(100.0, res.filas[0].strings[0].voc_sistema)
        self.assertFalse(res.filas[0].strings[0].sobretension)
        self.assertIs(ModoCorreccion.ESTANDAR, res.modo)


if __name__ == "__main__":
    unittest.main()
