import math
import unittest

from electrical.catalogos import ModuloCatalogo
from ui.adaptadores import OPCION_CUSTOM, contexto_desde_ctx, datos_desde_ctx, nombre_modelo
from ui.estado import CalculadoraCtx, ctx_invalidate_from
from ui.modulo_fv import aplicar_seleccion, limpiar_entradas
from ui.sistema_strings import TEMP_FILA_NUEVA, columnas_editor, df_a_temps, restablecer_temperaturas, temps_a_df
from ui.state_helpers import ensure_dict, merge_defaults, overwrite_widgets, seed_widgets
from ui.validaciones_ui import campos_en_cero_modulo
from core.modelo import ModoCorreccion


class _Obj:
    pass


_M = ModuloCatalogo(
    marca="Alfa", modelo="A-1", pmax=310, voc=40.5, vmp=33.5, isc=9.2, imp=8.7,
    alpha=0.06, beta=-0.31, gamma=None,
)


class TestStateHelpers(unittest.TestCase):
    def test_ensure_dict_crea_y_reutiliza(self):
        o = _Obj()
        d = ensure_dict(o, "datos", dict)
        d["x"] = 1
        self.assertIs(d, ensure_dict(o, "datos", dict))
        o.datos = "no es dict"
        self.assertEqual({}, ensure_dict(o, "datos"))

    def test_merge_defaults_no_pisa(self):
        d = {"a": "1"}
        merge_defaults(d, {"a": "9", "b": "2"})
        self.assertEqual({"a": "1", "b": "2"}, d)

    def test_seed_no_pisa_y_overwrite_si(self):
        session = {"mod_voc_stc": "50"}
        src = {"voc_stc": "56.41", "vmp_stc": "46.79"}
        seed_widgets(session, "mod", src, ("voc_stc", "vmp_stc"))
        self.assertEqual("50", session["mod_voc_stc"])
        self.assertEqual("46.79", session["mod_vmp_stc"])

        overwrite_widgets(session, "mod", src, ("voc_stc",))
        self.assertEqual("56.41", session["mod_voc_stc"])


class TestContextoCalculadora(unittest.TestCase):
    def test_defaults_del_modulo_precargado(self):
        ctx = CalculadoraCtx()
        self.assertEqual("56.41", ctx.modulo["voc_stc"])
        self.assertEqual("Astronergy / CHSM78N(DG)/F-BH-635", ctx.modulo["seleccion"])
        self.assertEqual(14, len(ctx.temperaturas))
        self.assertIsNot(ctx.temperaturas, ctx.temperaturas_base)

    def test_nombre_modelo(self):
        self.assertEqual("CHSM78N(DG)/F-BH-635", nombre_modelo({"seleccion": "Astronergy / CHSM78N(DG)/F-BH-635"}))
        self.assertEqual("Mi panel", nombre_modelo({"seleccion": OPCION_CUSTOM, "modelo_custom": " Mi panel "}))
        self.assertEqual("", nombre_modelo({"seleccion": ""}))

    def test_datos_y_contexto_desde_ctx(self):
        ctx = CalculadoraCtx()
        ctx.sistema["compatibilidad"] = True
        ctx.sistema["n_fin"] = ""
        ctx.temperaturas = [25.0, None]

        datos = datos_desde_ctx(ctx)
        self.assertIs(ModoCorreccion.COMPATIBILIDAD, datos["modo"])
        self.assertEqual("CHSM78N(DG)/F-BH-635", datos["modelo"])

        calc = contexto_desde_ctx(ctx)
        self.assertEqual(19, calc.config.n_fin)
        self.assertEqual(56.41, calc.spec.voc_stc)
        self.assertEqual([25.0, None], calc.temperaturas)
        self.assertEqual("Astronergy", calc.marca)

    def test_invalidate_from(self):
        ctx = CalculadoraCtx()
        ctx.completado = {1: True, 2: True, 3: True}
        ctx.resultado = object()
        ctx_invalidate_from(ctx, 2)
        self.assertEqual({1: True, 2: False, 3: False}, ctx.completado)
        self.assertIsNone(ctx.resultado)


class TestSeleccionModulo(unittest.TestCase):
    def test_catalogo_llena_specs(self):
        mod = {}
        aplicar_seleccion(mod, _M.clave, {_M.clave: _M})
        self.assertEqual("40.5", mod["voc_stc"])
        self.assertEqual("310", mod["pmax_stc"])
        self.assertEqual("", mod["gamma"])
        self.assertEqual("Alfa", mod["marca"])

    def test_personalizado_limpia(self):
        mod = {"voc_stc": "40.5", "marca": "Alfa"}
        aplicar_seleccion(mod, OPCION_CUSTOM, {_M.clave: _M})
        self.assertEqual("", mod["voc_stc"])
        self.assertEqual("", mod["marca"])
        self.assertEqual(OPCION_CUSTOM, mod["seleccion"])

    def test_limpiar_entradas(self):
        ctx = CalculadoraCtx()
        limpiar_entradas(ctx)
        self.assertEqual("", ctx.modulo["voc_stc"])
        self.assertEqual("", ctx.sistema["n_inicio"])
        self.assertFalse(ctx.sistema["compatibilidad"])

        # vacíos -> defaults en el cálculo
        calc = contexto_desde_ctx(ctx)
        self.assertEqual((14, 19, 1500.0), (calc.config.n_inicio, calc.config.n_fin, calc.config.v_max_sistema))
        self.assertEqual(0.0, calc.spec.voc_stc)

    def test_avisos_campos_en_cero(self):
        ctx = CalculadoraCtx()
        self.assertEqual([], campos_en_cero_modulo(ctx))
        ctx.modulo["voc_stc"] = ""
        ctx.modulo["gamma"] = "abc"
        avisos = campos_en_cero_modulo(ctx)
        self.assertEqual(2, len(avisos))


class TestTablaTemperaturas(unittest.TestCase):
    def test_df_ida_y_vuelta_con_vacios(self):
        df = temps_a_df([-20.0, None, 0.0])
        self.assertTrue(math.isnan(df.iloc[1, 0]))
        self.assertEqual([-20.0, None, 0.0], df_a_temps(df))

    def test_fila_nueva_arranca_en_25(self):
        cfg = columnas_editor()["Temperatura (°C)"]
        self.assertEqual(25.0, cfg["default"])
        self.assertEqual(25.0, TEMP_FILA_NUEVA)

    def test_df_sin_columna(self):
        self.assertEqual([], df_a_temps(None))

    def test_restablecer(self):
        ctx = CalculadoraCtx()
        ctx.temperaturas = [1.0]
        ctx.temperaturas_base = [1.0]
        restablecer_temperaturas(ctx)
        self.assertEqual(14, len(ctx.temperaturas))
        self.assertEqual(ctx.temperaturas, ctx.temperaturas_base)


if __name__ == "__main__":
    unittest.main()
