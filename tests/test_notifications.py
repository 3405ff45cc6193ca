import unittest
from urllib.parse import parse_qs

import httpx

from helpers import make_settings
from oilsync.models.otp import OTPPurpose
from oilsync.services.notifications import Notifier, render_otp_email, render_otp_sms, to_e164

TWILIO = {
    "twilio_account_sid": "AC123",
    "twilio_auth_token": "token",
    "twilio_phone_number": "+15195550000",
}


class TestRendering(unittest.TestCase):

    def test_email_body(self):
        body = render_otp_email("123456", OTPPurpose.RESET_PASSWORD, 5)
        self.assertIn("123456", body)
        self.assertIn("reset your password", body)
        self.assertIn("expires in 5 minutes", body)

    def test_sms_body(self):
        self.assertEqual(
            render_otp_sms("123456", 5),
            "Your OilSync verification code is 123456. It expires in 5 minutes.",
        )

    def test_e164(self):
        self.assertEqual(to_e164("(519) 555-0101"), "+15195550101")
        self.assertEqual(to_e164("+44 20 7946 0958"), "+442079460958")


class TestNotifier(unittest.IsolatedAsyncioTestCase):

    async def test_dev_mode_reports_success(self):
        notifier = Notifier(make_settings())
        self.assertTrue(await notifier.send_email_otp("jane@example.com", "123456", OTPPurpose.LOGIN))
        self.assertTrue(await notifier.send_sms_otp("(519) 555-0101", "123456", OTPPurpose.LOGIN))

    async def test_sms_posts_to_twilio(self):
        requests = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(201, json={"sid": "SM1"})

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            notifier = Notifier(make_settings(**TWILIO), http_client=client)
            sent = await notifier.send_sms_otp("(519) 555-0101", "654321", OTPPurpose.VERIFY_PHONE)

        self.assertTrue(sent)
        request = requests[0]
        self.assertTrue(str(request.url).endswith("/Accounts/AC123/Messages.json"))
        self.assertTrue(request.headers["Authorization"].startswith("Basic "))
        form = parse_qs(request.content.decode())
        self.assertEqual(form["To"], ["+15195550101"])
        self.assertEqual(form["From"], ["+15195550000"])
        self.assertIn("654321", form["Body"][0])

    async def test_sms_failure(self):
        transport = httpx.MockTransport(lambda request: httpx.Response(400, json={"message": "bad number"}))
        async with httpx.AsyncClient(transport=transport) as client:
            notifier = Notifier(make_settings(**TWILIO), http_client=client)
            self.assertFalse(await notifier.send_sms_otp("(519) 555-0101", "654321", OTPPurpose.VERIFY_PHONE))


if __name__ == '__main__':
    unittest.main(verbosity=2)
