import unittest
from datetime import date

from oilsync.services.vin import FALLBACK_YEAR, decode_vin, decode_year, is_valid_vin


class TestVinDecoder(unittest.TestCase):
    """VIN validation and decoding."""

    def test_rejects_malformed_vins(self):
        """Wrong length and the letters I, O, Q are invalid"""
        self.assertFalse(is_valid_vin("WAU8V1ZZZKA12345"))
        self.assertFalse(is_valid_vin("WAU8V1ZZZKA1234567"))
        self.assertFalse(is_valid_vin("WAU8V1ZZZKA12345O"))
        self.assertFalse(is_valid_vin(""))
        self.assertIsNone(decode_vin("not-a-vin"))

    def test_accepts_lowercase_and_whitespace(self):
        decoded = decode_vin("  wau8v1zzzka123456 ")
        self.assertIsNotNone(decoded)
        self.assertEqual(decoded.vin, "WAU8V1ZZZKA123456")

    def test_decodes_audi(self):
        decoded = decode_vin("WAU8V1ZZZKA123456")
        self.assertEqual(decoded.make, "Audi")
        self.assertEqual(decoded.model, "A3")
        self.assertEqual(decoded.year, 2019)
        self.assertEqual(decoded.manufacturer_group, "VAG")

    def test_decodes_volkswagen_and_porsche(self):
        golf = decode_vin("WVW5K1ZZZLW123456")
        self.assertEqual((golf.make, golf.model, golf.year), ("Volkswagen", "Golf", 2020))

        macan = decode_vin("WP195BZZZNL123456")
        self.assertEqual((macan.make, macan.model, macan.year), ("Porsche", "Macan", 2022))

    def test_unknown_vag_model_code(self):
        decoded = decode_vin("WAUZZZ8V1KA123456")
        self.assertEqual(decoded.make, "Audi")
        self.assertEqual(decoded.model, "Unknown Audi Model")

    def test_vag_unknown_year_uses_current_year(self):
        decoded = decode_vin("WAU8V1ZZZZA123456")
        self.assertEqual(decoded.year, date.today().year)

    def test_other_manufacturer_gets_default_model(self):
        decoded = decode_vin("1HGCV1F30JA123456")
        self.assertEqual((decoded.make, decoded.model, decoded.year), ("Honda", "Civic", 2018))
        self.assertIsNone(decoded.manufacturer_group)

    def test_other_manufacturer_unknown_year_falls_back(self):
        decoded = decode_vin("WBA3A5C50Z1234567")
        self.assertEqual(decoded.make, "BMW")
        self.assertEqual(decoded.year, FALLBACK_YEAR)

    def test_unknown_manufacturer(self):
        self.assertIsNone(decode_vin("ZZZ8V1ZZZKA123456"))

    def test_year_codes(self):
        self.assertEqual(decode_year("A"), 2010)
        self.assertEqual(decode_year("Y"), 2030)
        self.assertEqual(decode_year("1"), 2001)
        self.assertEqual(decode_year("9"), 2009)
        self.assertIsNone(decode_year("Z"))
        self.assertIsNone(decode_year("0"))

    def test_to_dict(self):
        data = decode_vin("WAU8V1ZZZKA123456").to_dict()
        self.assertEqual(set(data), {"vin", "make", "model", "year", "manufacturer_group"})


if __name__ == '__main__':
    unittest.main(verbosity=2)
