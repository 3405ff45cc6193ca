"""
Shared fixtures: an application on a private in-memory database with OTP
delivery captured instead of sent.
"""
import unittest

from fastapi.testclient import TestClient

from oilsync.config import Settings
from oilsync.database import create_engine, create_sessionmaker, init_db
from oilsync.main import create_app

API = "/api"


def make_settings(**overrides) -> Settings:
    values = {
        "environment": "test",
        "database_url": "sqlite+aiosqlite://",
        "secret_key": "test-secret",
        "bcrypt_rounds": 4,
        "mail_server": None,
        "mail_username": None,
        "mail_password": None,
        "twilio_account_sid": None,
        "twilio_auth_token": None,
        "twilio_phone_number": None,
        "seed_on_startup": False,
        "log_level": "WARNING",
    }
    values.update(overrides)
    return Settings(**values)


class RecordingNotifier:
    """Stands in for email/SMS delivery and remembers every code sent."""

    def __init__(self, succeed: bool = True):
        self.succeed = succeed
        self.sent = []

    async def send_email_otp(self, email, code, purpose):
        self.sent.append(("email", email, code, purpose))
        return self.succeed

    async def send_sms_otp(self, phone, code, purpose):
        self.sent.append(("sms", phone, code, purpose))
        return self.succeed

    def last_code(self) -> str:
        return self.sent[-1][2]


class ApiTestCase(unittest.TestCase):
    """Test case with a fresh application and client per test."""

    settings_overrides = {}

    def setUp(self):
        self.settings = make_settings(**self.settings_overrides)
        self.app = create_app(self.settings)
        self.notifier = RecordingNotifier()
        self.app.state.notifier = self.notifier
        self.client = TestClient(self.app)
        self.client.__enter__()
        self.addCleanup(self.client.__exit__, None, None, None)

    # ---- helpers ----

    def register(self, email="jane@example.com", password="password123", phone="(519) 555-0101",
                 first_name="Jane", last_name="Doe"):
        response = self.client.post(f"{API}/auth/register", json={
            "firstName": first_name,
            "lastName": last_name,
            "email": email,
            "phone": phone,
            "password": password,
        })
        self.assertEqual(response.status_code, 201, response.text)
        return response.json()["data"]

    def login(self, email, password):
        response = self.client.post(f"{API}/auth/login", json={"email": email, "password": password})
        self.assertEqual(response.status_code, 200, response.text)
        return response.json()["data"]["token"]

    def seed_accounts(self):
        response = self.client.post(f"{API}/admin/seed-accounts")
        self.assertEqual(response.status_code, 200, response.text)
        return response.json()["data"]

    def admin_headers(self):
        self.seed_accounts()
        return self.auth(self.login(self.settings.admin_email, self.settings.admin_password))

    def customer_headers(self, **kwargs):
        return self.auth(self.register(**kwargs)["token"])

    @staticmethod
    def auth(token):
        return {"Authorization": f"Bearer {token}"}


class ServiceTestCase(unittest.IsolatedAsyncioTestCase):
    """Async test case with a session on a private in-memory database."""

    settings_overrides = {}

    async def asyncSetUp(self):
        self.settings = make_settings(**self.settings_overrides)
        self.engine = create_engine(self.settings.database_url)
        await init_db(self.engine)
        self.db = create_sessionmaker(self.engine)()

    async def asyncTearDown(self):
        await self.db.close()
        await self.engine.dispose()
