import unittest

from helpers import API, ApiTestCase


class TestHealth(ApiTestCase):

    def test_root(self):
        response = self.client.get("/")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["docs"], "/docs")

    def test_health(self):
        response = self.client.get(f"{API}/health")
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["status"], "healthy")
        self.assertEqual(body["environment"], "test")
        self.assertTrue(body["timestamp"].endswith("Z"))

    def test_detailed_health(self):
        response = self.client.get(f"{API}/health/detailed")
        self.assertEqual(response.status_code, 200)
        checks = response.json()["checks"]
        self.assertEqual(checks["database"]["status"], "healthy")
        self.assertEqual(checks["email"]["status"], "dev_mode")
        self.assertEqual(checks["sms"]["status"], "dev_mode")

    def test_request_id_header(self):
        response = self.client.get(f"{API}/health")
        self.assertRegex(response.headers["X-Request-ID"], r"^req_[0-9a-f]{12}$")

        response = self.client.get(f"{API}/health", headers={"X-Request-ID": "trace-123"})
        self.assertEqual(response.headers["X-Request-ID"], "trace-123")

    def test_unknown_route_uses_error_envelope(self):
        response = self.client.get(f"{API}/nowhere")
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json(), {"success": False, "message": "Not Found", "errorType": "not_found"})


class TestDevEndpoints(ApiTestCase):

    def test_config_hides_secrets(self):
        response = self.client.get(f"{API}/dev/config")
        self.assertEqual(response.status_code, 200)
        data = response.json()["data"]
        self.assertFalse(data["email"]["configured"])
        self.assertFalse(data["sms"]["accountSid"])
        self.assertNotIn("test-secret", response.text)

    def test_latest_otp(self):
        self.client.post(f"{API}/auth/send-otp", json={
            "identifier": "jane@example.com", "type": "email", "purpose": "verify_email",
        })
        response = self.client.get(f"{API}/dev/otp", params={
            "identifier": "Jane@example.com", "purpose": "verify_email",
        })
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["data"]["code"], self.notifier.last_code())

        response = self.client.get(f"{API}/dev/otp", params={
            "identifier": "nobody@example.com", "purpose": "verify_email",
        })
        self.assertIsNone(response.json()["data"]["code"])
        self.assertEqual(response.json()["message"], "No active OTP")


class TestProductionMode(ApiTestCase):
    settings_overrides = {"environment": "production"}

    def test_dev_routes_are_hidden(self):
        self.assertEqual(self.client.get(f"{API}/dev/config").status_code, 404)
        self.assertEqual(self.client.get(f"{API}/dev/otp", params={
            "identifier": "jane@example.com", "purpose": "verify_email",
        }).status_code, 404)

    def test_seeding_needs_an_admin(self):
        response = self.client.post(f"{API}/admin/seed-accounts")
        self.assertEqual(response.status_code, 401)

    def test_unconfigured_notifiers_degrade_health(self):
        response = self.client.get(f"{API}/health/detailed")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["status"], "degraded")


if __name__ == '__main__':
    unittest.main(verbosity=2)
