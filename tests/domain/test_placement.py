import unittest

from vedic_charts.domain.charts.angles import normalize
from vedic_charts.domain.charts.placement import (
    NAKSHATRA_SPAN,
    degree_in_sign,
    house_of,
    nakshatra_of,
    planet_to_placement,
    sign_of_longitude,
)
from vedic_charts.domain.charts.schemas import Planet


class TestSignAndDegree(unittest.TestCase):
    def test_sign_degree_partition(self):
        for lon in [-725.3, -0.5, 0.0, 29.99, 30.0, 95.0, 181.75, 359.9, 400.0]:
            sign = sign_of_longitude(lon)
            self.assertIn(sign, range(12))
            self.assertAlmostEqual(sign * 30 + degree_in_sign(lon), normalize(lon), places=9)

    def test_wraparound(self):
        self.assertEqual(sign_of_longitude(-1.0), 11)
        self.assertEqual(sign_of_longitude(360.0), 0)
        self.assertAlmostEqual(degree_in_sign(-1.0), 29.0)


class TestHouses(unittest.TestCase):
    def test_house_numbers_are_a_bijection(self):
        for asc_sign in range(12):
            houses = sorted(house_of(sign, asc_sign) for sign in range(12))
            self.assertEqual(houses, list(range(1, 13)))

    def test_ascendant_sign_is_first_house(self):
        for asc_sign in range(12):
            placement = planet_to_placement(Planet.SUN, asc_sign * 30 + 15, asc_sign)
            self.assertEqual(placement.house, 1)

    def test_house_behind_ascendant(self):
        self.assertEqual(house_of(3, 4), 12)


class TestNakshatra(unittest.TestCase):
    def test_coverage(self):
        lon = -10.0
        while lon < 370.0:
            info = nakshatra_of(lon)
            self.assertTrue(0 <= info.index <= 26, lon)
            self.assertTrue(1 <= info.pada <= 4, lon)
            lon += 0.77

    def test_exact_span_boundary(self):
        info = nakshatra_of(NAKSHATRA_SPAN)
        self.assertEqual((info.index, info.pada), (1, 1))
        self.assertEqual(info.name, "Bharani")

    def test_exact_pada_boundaries(self):
        self.assertEqual(nakshatra_of(10 / 3).pada, 2)
        self.assertEqual(nakshatra_of(20 / 3).pada, 3)
        self.assertEqual(nakshatra_of(10.0).pada, 4)

        info = nakshatra_of(80 / 3)
        self.assertEqual((info.index, info.pada), (2, 1))

    def test_each_pada_starts_at_its_boundary(self):
        for k in range(108):
            info = nakshatra_of(k * 10 / 3)
            self.assertEqual((info.index, info.pada), (k // 4, k % 4 + 1), k)

    def test_padas(self):
        self.assertEqual(nakshatra_of(0.0).pada, 1)
        self.assertEqual(nakshatra_of(3.4).pada, 2)
        self.assertEqual(nakshatra_of(13.0).pada, 4)

    def test_end_of_zodiac(self):
        info = nakshatra_of(359.999)
        self.assertEqual((info.index, info.name, info.pada), (26, "Revati", 4))
        self.assertEqual(nakshatra_of(-5.0).pada, 3)

    def test_russian_names(self):
        self.assertEqual(nakshatra_of(0.0, locale="ru").name, "Ашвини")


class TestPlanetPlacement(unittest.TestCase):
    def test_sun_in_cancer_under_leo_ascendant(self):
        sun = planet_to_placement(Planet.SUN, 95.0, asc_sign=4)

        self.assertEqual(sun.key, Planet.SUN)
        self.assertEqual(sun.lon, 95.0)
        self.assertEqual(sun.sign, 3)
        self.assertEqual(sun.sign_name, "Cancer")
        self.assertAlmostEqual(sun.deg_in_sign, 5.0)
        self.assertEqual((sun.dms_in_sign.deg, sun.dms_in_sign.min, sun.dms_in_sign.sec), (5, 0, 0))
        self.assertEqual(sun.house, 12)
        self.assertEqual(sun.nakshatra.index, 7)
        self.assertEqual(sun.nakshatra.name, "Pushya")
        self.assertEqual(sun.nakshatra.pada, 1)

    def test_unnormalized_longitude_is_stored_normalized(self):
        placement = planet_to_placement(Planet.MOON, -30.0, asc_sign=0)
        self.assertEqual(placement.lon, 330.0)
        self.assertEqual(placement.sign, 11)
        self.assertEqual(placement.house, 12)


if __name__ == "__main__":
    unittest.main()
