import tempfile
import unittest
from pathlib import Path

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402

from core.entradas import construir_contexto  # noqa: E402
from core.orquestador import ejecutar_calculo  # noqa: E402
from reportes.generar_charts import _curvas_voc, generar_chart_strings  # noqa: E402


class TestChartStrings(unittest.TestCase):
    def setUp(self):
        ctx = construir_contexto({
            "voc_stc": 56.41, "vmp_stc": 46.79, "pmax_stc": 635, "beta": -0.25, "gamma": -0.29,
            "n_inicio": 14, "n_fin": 15, "temperaturas": [60, None, -10, 25],
        })
        self.resultado = ejecutar_calculo(ctx)

    def test_curvas_ordenadas_sin_invalidas(self):
        temps, curvas = _curvas_voc(self.resultado)
        self.assertEqual([-10.0, 25.0, 60.0], temps)
        self.assertEqual([14, 15], [n for n, _ in curvas])
        self.assertAlmostEqual(56.41 * 15, curvas[1][1][1])

    def test_guarda_png(self):
        with tempfile.TemporaryDirectory() as tmp:
            out = Path(tmp) / "chart.png"
            fig = generar_chart_strings(self.resultado, str(out))
            try:
                self.assertTrue(out.exists())
                # 2 curvas + línea de Vmax
                self.assertEqual(3, len(fig.axes[0].get_lines()))
            finally:
                plt.close(fig)


if __name__ == "__main__":
    unittest.main()
