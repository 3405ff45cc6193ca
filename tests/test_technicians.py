import unittest

from helpers import API, ApiTestCase

NEW_TECHNICIAN = {
    "firstName": "Alex",
    "lastName": "Rivera",
    "email": "alex@oilsync.com",
    "phone": "519 555 0303",
    "hourlyRate": 26.5,
}


class TestTechnicians(ApiTestCase):

    def setUp(self):
        super().setUp()
        self.admin = self.admin_headers()

    def test_seeded_roster_sorted_by_rating(self):
        response = self.client.get(f"{API}/technicians")
        self.assertEqual(response.status_code, 200)
        roster = response.json()["data"]
        self.assertEqual([t["firstName"] for t in roster], ["Sarah", "John"])
        self.assertEqual(roster[0]["rating"], 4.9)
        self.assertIn("Synthetic Oil", roster[0]["specializations"])
        self.assertIsNotNone(roster[0]["userId"])

    def test_create_requires_admin(self):
        response = self.client.post(f"{API}/technicians", json=NEW_TECHNICIAN)
        self.assertEqual(response.status_code, 401)

        customer = self.customer_headers()
        response = self.client.post(f"{API}/technicians", json=NEW_TECHNICIAN, headers=customer)
        self.assertEqual(response.status_code, 403)
        self.assertEqual(response.json()["message"], "Admin access required")

    def test_create_get_and_delete(self):
        response = self.client.post(f"{API}/technicians", json=NEW_TECHNICIAN, headers=self.admin)
        self.assertEqual(response.status_code, 201, response.text)
        technician = response.json()["data"]
        self.assertEqual(technician["status"], "active")
        self.assertEqual(technician["phone"], "(519) 555-0303")
        self.assertEqual(technician["specializations"], ["Oil Change"])
        self.assertEqual(technician["totalJobs"], 0)

        response = self.client.get(f"{API}/technicians/{technician['id']}")
        self.assertEqual(response.json()["data"]["email"], "alex@oilsync.com")

        response = self.client.delete(f"{API}/technicians/{technician['id']}", headers=self.admin)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(self.client.get(f"{API}/technicians/{technician['id']}").status_code, 404)

    def test_duplicate_email(self):
        self.client.post(f"{API}/technicians", json=NEW_TECHNICIAN, headers=self.admin)
        response = self.client.post(f"{API}/technicians", json=NEW_TECHNICIAN, headers=self.admin)
        self.assertEqual(response.status_code, 409)

    def test_status_update_and_filter(self):
        sarah = self.client.get(f"{API}/technicians").json()["data"][0]
        response = self.client.patch(f"{API}/technicians/{sarah['id']}/status",
                                     json={"status": "busy"}, headers=self.admin)
        self.assertEqual(response.status_code, 200, response.text)
        self.assertEqual(response.json()["data"]["status"], "busy")

        active = self.client.get(f"{API}/technicians", params={"status": "active"}).json()["data"]
        self.assertEqual([t["firstName"] for t in active], ["John"])

        response = self.client.patch(f"{API}/technicians/{sarah['id']}/status",
                                     json={"status": "asleep"}, headers=self.admin)
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["message"], "Invalid status. Must be 'active', 'inactive', or 'busy'")

    def test_delete_keeps_bookings(self):
        technician = self.client.post(f"{API}/technicians", json=NEW_TECHNICIAN, headers=self.admin).json()["data"]
        booking = self.client.post(f"{API}/bookings", json={
            "vehicleInfo": {"make": "Toyota", "model": "Camry", "year": 2016},
            "serviceAddress": "12 Erb Street West, Waterloo",
            "customerInfo": {"email": "guest@example.com", "phone": "519-555-0404"},
        }).json()["data"]["booking"]
        self.client.patch(f"{API}/bookings/{booking['id']}/status",
                          json={"status": "confirmed", "technicianId": technician["id"]}, headers=self.admin)

        self.client.delete(f"{API}/technicians/{technician['id']}", headers=self.admin)

        response = self.client.get(f"{API}/bookings/{booking['id']}", headers=self.admin)
        self.assertEqual(response.status_code, 200)
        self.assertIsNone(response.json()["data"]["booking"]["technicianId"])

    def test_missing_technician(self):
        response = self.client.get(f"{API}/technicians/9999")
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()["message"], "Technician not found")


if __name__ == '__main__':
    unittest.main(verbosity=2)
