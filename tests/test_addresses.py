import unittest

from oilsync.services.addresses import (
    DEFAULT_LIMIT, AddressSuggestion, _street_match_score, generate_addresses, generate_house_numbers,
    get_address_book, score_address, search_addresses,
)


class TestAddressBook(unittest.TestCase):
    """Generated Waterloo Region address book."""

    def test_dataset_is_deterministic(self):
        first = generate_addresses()
        second = generate_addresses()
        self.assertEqual(first, second)

    def test_ids_are_unique(self):
        ids = [address.id for address in get_address_book()]
        self.assertEqual(len(ids), len(set(ids)))

    def test_postal_codes_look_canadian(self):
        for address in get_address_book()[:200]:
            self.assertRegex(address.postal_code, r"^[A-Z]\d[A-Z] \d[A-Z]\d$")
            self.assertEqual(address.province, "ON")

    def test_house_number_ranges(self):
        major = generate_house_numbers("King Street West")
        self.assertLessEqual(len(major), 40)
        self.assertIn(1, major)
        self.assertIn(11, major)

        residential = generate_house_numbers("Adam Court")
        self.assertTrue(all(n <= 80 for n in residential))


class TestAddressSearch(unittest.TestCase):

    def test_short_queries_return_nothing(self):
        self.assertEqual(search_addresses(""), [])
        self.assertEqual(search_addresses("k"), [])
        self.assertEqual(search_addresses("   "), [])
        self.assertEqual(search_addresses(" k "), [])

    def test_limit(self):
        self.assertEqual(len(search_addresses("king")), DEFAULT_LIMIT)
        self.assertEqual(len(search_addresses("king", limit=3)), 3)

    def test_house_number_and_street_rank_first(self):
        results = search_addresses("101 king street west")
        self.assertTrue(results)
        self.assertEqual(results[0].address, "101 King Street West")

    def test_street_prefix_matches(self):
        results = search_addresses("erb street")
        self.assertTrue(results)
        self.assertIn("Erb Street", results[0].address)

    def test_city_and_street_names_match(self):
        results = search_addresses("cambridge")
        self.assertTrue(results)
        for result in results:
            self.assertTrue("cambridge" in result.address.lower() or result.city == "Cambridge")
        # the street in the city of the same name outranks the others
        self.assertEqual(results[0].city, "Cambridge")

    def test_house_number_zero_searches_the_whole_query(self):
        results = search_addresses("0 king")
        self.assertTrue(results)
        self.assertIn("king", results[0].address.lower())

    def test_equal_scores_keep_address_book_order(self):
        positions = {address.id: index for index, address in enumerate(get_address_book())}
        results = search_addresses("king", limit=50)
        keys = [
            (-score_address(result, "king", ["king"], None, "king"), positions[result.id])
            for result in results
        ]
        self.assertEqual(keys, sorted(keys))


class TestAddressScoring(unittest.TestCase):
    """Scores worked out by hand for a single Kitchener address."""

    def setUp(self):
        self.suggestion = AddressSuggestion(
            id="kitchener_KingStreetWest_101",
            address="101 King Street West",
            city="Kitchener",
            postal_code="N2G 1A1",
        )

    def test_exact_address(self):
        # exact 1000, number 900 + 500, street 800, prefix 300, popular word 50
        score = score_address(self.suggestion, "101 king street west",
                              ["101", "king", "street", "west"], 101, "king street west")
        self.assertEqual(score, 3550)

    def test_address_and_city_prefix(self):
        # full prefix 1000, number 900, two partial words 100 + 100, city 200, popular word 50
        query = "101 king street west, kit"
        score = score_address(self.suggestion, query, query.split(), 101, "king street west, kit")
        self.assertEqual(score, 2350)

    def test_nearby_house_number(self):
        # within ten 100, street prefix 600, popular word 50
        score = score_address(self.suggestion, "105 king", ["105", "king"], 105, "king")
        self.assertEqual(score, 750)

    def test_street_abbreviation(self):
        # one partial word 50, "rd" for road 200
        self.assertEqual(_street_match_score("highland road west", "highland rd", ["highland", "rd"]), 250)

    def test_several_partial_words(self):
        # two partial words 100, abbreviation 200, bonus 100
        score = _street_match_score("highland road west", "high wes rd", ["high", "wes", "rd"])
        self.assertEqual(score, 400)

    def test_street_tiers(self):
        self.assertEqual(_street_match_score("erb street", "erb street", ["erb", "street"]), 800)
        self.assertEqual(_street_match_score("erb street", "erb", ["erb"]), 600)
        self.assertEqual(_street_match_score("erb street west", "street erb", ["street", "erb"]), 400)


if __name__ == '__main__':
    unittest.main(verbosity=2)
