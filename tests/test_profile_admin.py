import unittest

from helpers import API, ApiTestCase


class TestProfile(ApiTestCase):

    def setUp(self):
        super().setUp()
        self.data = self.register()
        self.headers = self.auth(self.data["token"])

    def test_get_profile(self):
        response = self.client.get(f"{API}/profile", headers=self.headers)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["data"]["id"], self.data["user"]["id"])

    def test_requires_login(self):
        self.assertEqual(self.client.get(f"{API}/profile").status_code, 401)

    def test_update_name(self):
        response = self.client.patch(f"{API}/profile", json={"firstName": "  Janet "}, headers=self.headers)
        self.assertEqual(response.status_code, 200, response.text)
        self.assertEqual(response.json()["data"]["firstName"], "Janet")
        self.assertEqual(response.json()["data"]["lastName"], "Doe")

        response = self.client.patch(f"{API}/profile", json={"lastName": " "}, headers=self.headers)
        self.assertEqual(response.status_code, 400)

    def test_phone_change_clears_verification(self):
        admin = self.admin_headers()
        self.client.post(f"{API}/profile/verification", headers=admin, json={
            "userId": self.data["user"]["id"], "type": "phone",
        })

        # same number in another format is not a change
        response = self.client.patch(f"{API}/profile", json={"phone": "5195550101"}, headers=self.headers)
        self.assertTrue(response.json()["data"]["phoneVerified"])

        response = self.client.patch(f"{API}/profile", json={"phone": "519-555-0999"}, headers=self.headers)
        data = response.json()["data"]
        self.assertEqual(data["phone"], "(519) 555-0999")
        self.assertFalse(data["phoneVerified"])


class TestAdmin(ApiTestCase):

    def test_seeding_is_open_until_an_admin_exists(self):
        result = self.seed_accounts()
        self.assertTrue(result["adminCreated"])
        self.assertEqual(result["techniciansCreated"], 2)
        self.assertEqual(result["accounts"], ["admin@oilsync.com", "john@oilsync.com", "sarah@oilsync.com"])

        response = self.client.post(f"{API}/admin/seed-accounts")
        self.assertEqual(response.status_code, 401)

        customer = self.customer_headers()
        response = self.client.post(f"{API}/admin/seed-accounts", headers=customer)
        self.assertEqual(response.status_code, 403)

    def test_seeding_again_as_admin_is_a_no_op(self):
        headers = self.admin_headers()
        response = self.client.post(f"{API}/admin/seed-accounts", headers=headers)
        self.assertEqual(response.status_code, 200)
        data = response.json()["data"]
        self.assertFalse(data["adminCreated"])
        self.assertEqual(data["techniciansCreated"], 0)

    def test_seeding_refuses_a_registered_admin_email(self):
        token = self.register(email=self.settings.admin_email)["token"]

        response = self.client.post(f"{API}/admin/seed-accounts")
        self.assertEqual(response.status_code, 409, response.text)
        self.assertEqual(response.json()["errorType"], "conflict")

        # the squatted account keeps its role and the route does not report success
        me = self.client.get(f"{API}/auth/me", headers=self.auth(token))
        self.assertEqual(me.json()["data"]["role"], "customer")
        response = self.client.post(f"{API}/admin/seed-accounts", headers=self.auth(token))
        self.assertEqual(response.status_code, 409)

    def test_admin_routes_require_admin(self):
        self.seed_accounts()
        technician = self.auth(self.login("sarah@oilsync.com", "tech123"))
        for path in ("/admin/dashboard", "/admin/users", "/admin/users/stats", "/admin/otp-stats"):
            self.assertEqual(self.client.get(f"{API}{path}").status_code, 401)
            self.assertEqual(self.client.get(f"{API}{path}", headers=technician).status_code, 403)

    def test_dashboard(self):
        headers = self.admin_headers()
        customer = self.customer_headers()
        self.client.post(f"{API}/bookings", headers=customer, json={
            "vehicleInfo": {"make": "BMW", "model": "X3", "year": 2015},
            "serviceAddress": "101 King Street West, Kitchener",
            "customerInfo": {"email": "jane@example.com", "phone": "519-555-0101"},
        })

        response = self.client.get(f"{API}/admin/dashboard", headers=headers)
        self.assertEqual(response.status_code, 200, response.text)
        data = response.json()["data"]
        self.assertEqual(len(data["pendingBookings"]), 1)
        self.assertEqual(data["pendingBookings"][0]["vehicle"]["make"], "BMW")
        self.assertEqual(len(data["technicians"]), 2)
        self.assertEqual([c["email"] for c in data["recentCustomers"]], ["jane@example.com"])
        self.assertEqual(data["stats"]["totalBookings"], 1)
        self.assertEqual(data["stats"]["activeCustomers"], 1)
        self.assertEqual(data["stats"]["revenue"], 0.0)

    def test_users_and_stats(self):
        headers = self.admin_headers()
        self.register()

        users = self.client.get(f"{API}/admin/users", headers=headers).json()["data"]
        self.assertEqual(len(users), 4)
        customers = self.client.get(f"{API}/admin/users", params={"role": "customer"},
                                    headers=headers).json()["data"]
        self.assertEqual([u["email"] for u in customers], ["jane@example.com"])

        stats = self.client.get(f"{API}/admin/users/stats", headers=headers).json()["data"]
        self.assertEqual(stats, {
            "totalUsers": 4, "customers": 1, "technicians": 2, "admins": 1,
            "verified": 3, "unverified": 1,
        })

    def test_manual_verification(self):
        headers = self.admin_headers()
        user = self.register()["user"]
        response = self.client.post(f"{API}/profile/verification", headers=headers, json={
            "userId": user["id"], "type": "email", "verified": True,
        })
        self.assertEqual(response.status_code, 200, response.text)
        self.assertTrue(response.json()["data"]["emailVerified"])

        response = self.client.post(f"{API}/profile/verification", headers=headers, json={
            "userId": 9999, "type": "email",
        })
        self.assertEqual(response.status_code, 404)

    def test_otp_stats_and_cleanup(self):
        headers = self.admin_headers()
        self.client.post(f"{API}/auth/send-otp", json={
            "identifier": "jane@example.com", "type": "email", "purpose": "verify_email",
        })
        stats = self.client.get(f"{API}/admin/otp-stats", headers=headers).json()["data"]
        self.assertEqual(stats["total"], 1)
        self.assertEqual(stats["active"], 1)

        self.client.post(f"{API}/auth/logout", headers=headers)
        headers = self.auth(self.login(self.settings.admin_email, self.settings.admin_password))
        response = self.client.post(f"{API}/admin/maintenance/cleanup", headers=headers)
        self.assertEqual(response.status_code, 200, response.text)
        self.assertEqual(response.json()["data"], {"expiredOtps": 0, "expiredSessions": 1})


if __name__ == '__main__':
    unittest.main(verbosity=2)
