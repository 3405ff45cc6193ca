import unittest

from helpers import API, ApiTestCase


class TestRegistration(ApiTestCase):

    def test_register_returns_token_and_user(self):
        data = self.register(email="Jane@Example.com", phone="519.555.0101")
        self.assertTrue(data["token"])
        self.assertEqual(data["tokenType"], "bearer")
        user = data["user"]
        self.assertEqual(user["email"], "jane@example.com")
        self.assertEqual(user["phone"], "(519) 555-0101")
        self.assertEqual(user["role"], "customer")
        self.assertFalse(user["emailVerified"])
        self.assertNotIn("hashedPassword", user)

    def test_missing_fields(self):
        response = self.client.post(f"{API}/auth/register", json={"email": "jane@example.com"})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(
            response.json()["message"],
            "Missing required fields: firstName, lastName, phone, password",
        )

    def test_invalid_values(self):
        base = {"firstName": "Jane", "lastName": "Doe", "email": "jane@example.com",
                "phone": "(519) 555-0101", "password": "password123"}
        for field, value, message in (
            ("email", "not-an-email", "Invalid email format"),
            ("phone", "12345", "Invalid phone number format"),
            ("password", "short", "Password must be at least 8 characters long"),
        ):
            response = self.client.post(f"{API}/auth/register", json={**base, field: value})
            self.assertEqual(response.status_code, 400)
            self.assertEqual(response.json()["message"], message)
            self.assertEqual(response.json()["errorType"], "validation_error")

    def test_duplicate_email(self):
        self.register()
        response = self.client.post(f"{API}/auth/register", json={
            "firstName": "Jane", "lastName": "Again", "email": "JANE@example.com",
            "phone": "(519) 555-0199", "password": "password123",
        })
        self.assertEqual(response.status_code, 409)
        self.assertEqual(response.json()["message"], "Email already registered")


class TestLogin(ApiTestCase):

    def setUp(self):
        super().setUp()
        self.register()

    def _login(self, password):
        return self.client.post(f"{API}/auth/login", json={"email": "jane@example.com", "password": password})

    def test_login_and_me(self):
        token = self.login("jane@example.com", "password123")
        response = self.client.get(f"{API}/auth/me", headers=self.auth(token))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["data"]["email"], "jane@example.com")
        self.assertIsNotNone(response.json()["data"]["lastLogin"])

    def test_missing_credentials(self):
        response = self.client.post(f"{API}/auth/login", json={"email": "jane@example.com"})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["message"], "Email and password are required")

    def test_unknown_email(self):
        response = self.client.post(f"{API}/auth/login", json={"email": "who@example.com", "password": "x"})
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json()["message"], "Invalid email or password")

    def test_lockout_after_five_failures(self):
        """Remaining attempts are counted down, the fifth failure locks the account"""
        for remaining in (4, 3, 2, 1):
            response = self._login("wrong-password")
            self.assertEqual(response.status_code, 401)
            self.assertEqual(
                response.json()["message"],
                f"Invalid email or password. {remaining} attempts remaining.",
            )

        response = self._login("wrong-password")
        self.assertEqual(response.status_code, 403)
        self.assertEqual(
            response.json()["message"],
            "Account locked due to too many failed login attempts. Please try again in 30 minutes.",
        )

        # even the right password is refused while locked
        response = self._login("password123")
        self.assertEqual(response.status_code, 403)
        self.assertIn("Account is locked", response.json()["message"])

    def test_success_resets_failure_count(self):
        self._login("wrong-password")
        self._login("wrong-password")
        self.assertEqual(self._login("password123").status_code, 200)
        response = self._login("wrong-password")
        self.assertIn("4 attempts remaining", response.json()["message"])


class TestSessions(ApiTestCase):

    def test_requires_token(self):
        response = self.client.get(f"{API}/auth/me")
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json()["message"], "Authentication required")

    def test_rejects_garbage_token(self):
        response = self.client.get(f"{API}/auth/me", headers=self.auth("not.a.jwt"))
        self.assertEqual(response.status_code, 401)

    def test_logout_revokes_only_that_session(self):
        first = self.register()["token"]
        second = self.login("jane@example.com", "password123")

        response = self.client.post(f"{API}/auth/logout", headers=self.auth(first))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["message"], "Logged out successfully")

        self.assertEqual(self.client.get(f"{API}/auth/me", headers=self.auth(first)).status_code, 401)
        self.assertEqual(self.client.get(f"{API}/auth/me", headers=self.auth(second)).status_code, 200)


class TestPasswords(ApiTestCase):

    def setUp(self):
        super().setUp()
        self.headers = self.auth(self.register()["token"])

    def _change(self, current, new):
        return self.client.post(f"{API}/auth/change-password", headers=self.headers, json={
            "currentPassword": current, "newPassword": new,
        })

    def test_change_password(self):
        response = self._change("password123", "newpassword456")
        self.assertEqual(response.status_code, 200, response.text)
        self.login("jane@example.com", "newpassword456")

    def test_change_password_errors(self):
        self.assertEqual(self._change("wrong-password", "newpassword456").status_code, 401)
        response = self._change("password123", "password123")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["message"], "New password must be different from current password")
        response = self._change("password123", None)
        self.assertEqual(response.json()["message"], "Current password and new password are required")

    def test_reset_password_with_otp(self):
        self.client.post(f"{API}/auth/send-otp", json={
            "identifier": "jane@example.com", "type": "email", "purpose": "reset_password",
        })
        response = self.client.post(f"{API}/auth/reset-password", json={
            "identifier": "jane@example.com",
            "newPassword": "resetpassword789",
            "otpCode": self.notifier.last_code(),
        })
        self.assertEqual(response.status_code, 200, response.text)
        self.assertEqual(response.json()["message"], "Password reset successful")
        self.login("jane@example.com", "resetpassword789")

    def test_reset_password_by_phone(self):
        self.client.post(f"{API}/auth/send-otp", json={
            "identifier": "5195550101", "type": "sms", "purpose": "reset_password",
        })
        response = self.client.post(f"{API}/auth/reset-password", json={
            "identifier": "(519) 555-0101",
            "newPassword": "resetpassword789",
            "otpCode": self.notifier.last_code(),
        })
        self.assertEqual(response.status_code, 200, response.text)

    def test_reset_password_bad_code(self):
        self.client.post(f"{API}/auth/send-otp", json={
            "identifier": "jane@example.com", "type": "email", "purpose": "reset_password",
        })
        code = self.notifier.last_code()
        response = self.client.post(f"{API}/auth/reset-password", json={
            "identifier": "jane@example.com",
            "newPassword": "resetpassword789",
            "otpCode": "000000" if code != "000000" else "111111",
        })
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["message"], "Invalid OTP code")


class TestVerification(ApiTestCase):

    def setUp(self):
        super().setUp()
        self.register()

    def test_verify_email(self):
        self.client.post(f"{API}/auth/send-otp", json={
            "identifier": "jane@example.com", "type": "email", "purpose": "verify_email",
        })
        response = self.client.post(f"{API}/auth/verify-email", json={
            "identifier": "jane@example.com", "otpCode": self.notifier.last_code(),
        })
        self.assertEqual(response.status_code, 200, response.text)
        self.assertTrue(response.json()["data"]["emailVerified"])

    def test_verify_phone(self):
        self.client.post(f"{API}/auth/send-otp", json={
            "identifier": "(519) 555-0101", "type": "sms", "purpose": "verify_phone",
        })
        response = self.client.post(f"{API}/auth/verify-phone", json={
            "identifier": "519-555-0101", "otpCode": self.notifier.last_code(),
        })
        self.assertEqual(response.status_code, 200, response.text)
        self.assertTrue(response.json()["data"]["phoneVerified"])

    def test_code_for_other_purpose_is_refused(self):
        self.client.post(f"{API}/auth/send-otp", json={
            "identifier": "jane@example.com", "type": "email", "purpose": "login",
        })
        response = self.client.post(f"{API}/auth/verify-email", json={
            "identifier": "jane@example.com", "otpCode": self.notifier.last_code(),
        })
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["message"], "No OTP found or OTP expired")


if __name__ == '__main__':
    unittest.main(verbosity=2)
