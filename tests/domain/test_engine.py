import unittest
from datetime import date, time
from unittest.mock import AsyncMock

from vedic_charts.domain.charts.converters import (
    vedic_charts_from_payload,
    vedic_charts_to_payload,
)
from vedic_charts.domain.charts.divisional.d1 import D1Calculator
from vedic_charts.domain.charts.engine import VedicChartEngine, build_vedic_charts
from vedic_charts.domain.charts.errors import MissingAscendantError, ProviderError
from vedic_charts.domain.charts.schemas import BirthInput, CoreApiResponse, Planet, PlanetRaw
from vedic_charts.providers.static_provider import StaticProvider


def make_birth(**overrides) -> BirthInput:
    fields = dict(
        birth_date=date(1985, 6, 9),
        birth_time=time(14, 45),
        tz_offset=3,
        latitude=55.7558,
        longitude=37.6176,
    )
    fields.update(overrides)
    return BirthInput(**fields)


LEO_RISING = CoreApiResponse(
    planets=(
        PlanetRaw(key=Planet.SUN, lon=95.0),
        PlanetRaw(key=Planet.RAHU, lon=200.0),
        PlanetRaw(key=Planet.ASCENDANT, lon=125.0),
    ),
    ayanamsha=23.65,
    house_cusps=tuple(float(30 * i) for i in range(12)),
)


class TestD1Calculator(unittest.TestCase):
    def test_house_table_is_cyclic_from_ascendant(self):
        for asc_sign in range(12):
            core = CoreApiResponse(
                planets=(PlanetRaw(key=Planet.ASCENDANT, lon=asc_sign * 30 + 1.0),)
            )
            chart = D1Calculator().calculate(core)

            self.assertEqual([h.house for h in chart.houses], list(range(1, 13)))
            self.assertEqual(chart.houses[0].sign, asc_sign)
            self.assertEqual(sorted(h.sign for h in chart.houses), list(range(12)))

    def test_missing_ascendant(self):
        core = CoreApiResponse(planets=(PlanetRaw(key=Planet.SUN, lon=95.0),))
        with self.assertRaises(MissingAscendantError):
            D1Calculator().calculate(core)


class TestVedicChartEngine(unittest.IsolatedAsyncioTestCase):
    async def test_leo_rising_scenario(self):
        charts = await build_vedic_charts(make_birth(), StaticProvider(LEO_RISING))

        d1 = charts.d1
        self.assertEqual((d1.houses[0].house, d1.houses[0].sign), (1, 4))
        self.assertEqual(d1.asc.sign, 4)
        self.assertEqual(d1.asc.house, 1)

        sun = d1.planet(Planet.SUN)
        self.assertEqual(sun.sign, 3)
        self.assertEqual(sun.house, 12)

    async def test_ketu_derived_and_ascendant_excluded_from_planets(self):
        charts = await build_vedic_charts(make_birth(), StaticProvider(LEO_RISING))

        keys = [p.key for p in charts.d1.planets]
        self.assertEqual(keys, [Planet.SUN, Planet.RAHU, Planet.KETU])
        self.assertEqual(charts.d1.planet(Planet.KETU).lon, 20.0)
        self.assertEqual([p.key for p in charts.d9.planets], keys)

    async def test_meta(self):
        charts = await build_vedic_charts(make_birth(), StaticProvider(LEO_RISING))

        self.assertEqual(charts.meta.system, "sidereal-lahiri")
        self.assertEqual(charts.meta.ayanamsha, 23.65)
        self.assertEqual(charts.meta.node_type, "true")
        self.assertEqual(charts.meta.house_cusps, LEO_RISING.house_cusps)

    async def test_node_type_defaults_to_true_for_provider(self):
        provider = StaticProvider(LEO_RISING)

        await build_vedic_charts(make_birth(), provider)

        self.assertEqual(provider.calls[0].node_type, "true")

    async def test_mean_node_passed_through(self):
        provider = StaticProvider(LEO_RISING)

        charts = await build_vedic_charts(make_birth(node_type="mean"), provider)

        self.assertEqual(provider.calls[0].node_type, "mean")
        self.assertEqual(charts.meta.node_type, "mean")

    async def test_missing_ascendant_aborts(self):
        core = CoreApiResponse(planets=(PlanetRaw(key=Planet.SUN, lon=95.0),))
        with self.assertRaises(MissingAscendantError):
            await build_vedic_charts(make_birth(), StaticProvider(core))

    async def test_provider_error_propagates_unchanged(self):
        error = ProviderError("API error 503: unavailable")
        provider = AsyncMock()
        provider.get_core.side_effect = error

        with self.assertRaises(ProviderError) as ctx:
            await VedicChartEngine(provider).generate(make_birth())

        self.assertIs(ctx.exception, error)
        provider.get_core.assert_awaited_once()

    async def test_russian_names(self):
        charts = await build_vedic_charts(make_birth(), StaticProvider(LEO_RISING), locale="ru")

        self.assertEqual(charts.d1.asc.sign_name, "Лев")
        self.assertEqual(charts.d1.houses[0].sign_name, "Лев")


class TestConverters(unittest.IsolatedAsyncioTestCase):
    async def test_payload_shape(self):
        charts = await build_vedic_charts(make_birth(), StaticProvider(LEO_RISING))

        payload = vedic_charts_to_payload(charts)

        self.assertEqual(set(payload), {"meta", "D1", "D9"})
        self.assertEqual(payload["meta"]["nodeType"], "true")
        self.assertEqual(payload["meta"]["system"], "sidereal-lahiri")
        self.assertEqual(len(payload["meta"]["houseCusps"]), 12)
        self.assertEqual(payload["D1"]["houses"][0], {"house": 1, "sign": 4, "signName": "Leo"})
        self.assertEqual(payload["D1"]["asc"]["key"], "Asc")

        sun = payload["D1"]["planets"][0]
        self.assertEqual(sun["key"], "Sun")
        self.assertEqual(sun["dmsInSign"], {"deg": 5, "min": 0, "sec": 0})
        self.assertEqual(sun["nakshatra"], {"index": 7, "name": "Pushya", "pada": 1})
        self.assertIn("degInSign", sun)

    async def test_payload_restores_domain_object(self):
        charts = await build_vedic_charts(make_birth(), StaticProvider(LEO_RISING))

        self.assertEqual(vedic_charts_from_payload(vedic_charts_to_payload(charts)), charts)


if __name__ == "__main__":
    unittest.main()
