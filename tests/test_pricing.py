import unittest
from datetime import date

from oilsync.services.pricing import BASE_PRICE, calculate_price

TODAY = date(2024, 6, 1)


class TestPricing(unittest.TestCase):

    def test_base_price(self):
        self.assertEqual(calculate_price("Honda", "Civic", 2015, today=TODAY), BASE_PRICE)

    def test_luxury_surcharge(self):
        """Luxury makes are matched case-insensitively"""
        self.assertEqual(calculate_price("BMW", "X3", 2015, today=TODAY), 79.99)
        self.assertEqual(calculate_price("audi", "A4", 2015, today=TODAY), 79.99)
        self.assertEqual(calculate_price("Mercedes-Benz", "GLC", 2015, today=TODAY), 79.99)

    def test_new_vehicle_surcharge(self):
        self.assertEqual(calculate_price("Honda", "Civic", 2023, today=TODAY), 69.99)
        self.assertEqual(calculate_price("Honda", "Civic", "2022", today=TODAY), 69.99)
        self.assertEqual(calculate_price("Honda", "Civic", 2021, today=TODAY), BASE_PRICE)

    def test_both_surcharges(self):
        self.assertEqual(calculate_price("Porsche", "Macan", 2024, today=TODAY), 89.99)

    def test_unparseable_year_has_no_surcharge(self):
        self.assertEqual(calculate_price("Ford", "F-150", "unknown", today=TODAY), BASE_PRICE)


if __name__ == '__main__':
    unittest.main(verbosity=2)
