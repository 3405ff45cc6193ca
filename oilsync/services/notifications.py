"""
Email and SMS delivery of OTP codes.

Email goes out over SMTP through fastapi-mail, SMS through the Twilio REST API.
A channel without credentials runs in development mode: the message is logged
instead of sent and the call reports success.
"""
import logging
import re
from typing import Optional

import httpx
from fastapi_mail import ConnectionConfig, FastMail, MessageSchema, MessageType

from oilsync.config import Settings
from oilsync.logging_config import mask_email, mask_phone
from oilsync.models.otp import OTPPurpose

logger = logging.getLogger(__name__)

PURPOSE_TEXT = {
    OTPPurpose.LOGIN: "sign in to your account",
    OTPPurpose.REGISTER: "complete your registration",
    OTPPurpose.RESET_PASSWORD: "reset your password",
    OTPPurpose.VERIFY_EMAIL: "verify your email address",
    OTPPurpose.VERIFY_PHONE: "verify your phone number",
}


def render_otp_email(code: str, purpose: OTPPurpose, expire_minutes: int) -> str:
    action = PURPOSE_TEXT.get(purpose, "continue")
    return f"""
    <html>
    <body style="font-family: Arial, sans-serif; line-height: 1.6; color: #333;">
        <div style="max-width: 600px; margin: 0 auto; padding: 20px;">
            <h2 style="color: #2c3e50;">Your OilSync Verification Code</h2>
            <p>Use the code below to {action}:</p>
            <div style="text-align: center; margin: 30px 0;">
                <span style="font-size: 32px; font-weight: bold; letter-spacing: 8px; background-color: #f4f4f4; padding: 12px 24px; border-radius: 5px;">{code}</span>
            </div>
            <p style="color: #e74c3c; font-weight: bold;">This code expires in {expire_minutes} minutes.</p>
            <p>If you did not request this code, please ignore this email.</p>
            <p>Best regards,<br>OilSync Team</p>
        </div>
    </body>
    </html>
    """


def render_otp_sms(code: str, expire_minutes: int) -> str:
    return f"Your OilSync verification code is {code}. It expires in {expire_minutes} minutes."


def to_e164(phone: str) -> str:
    """``(555) 123-4567`` -> ``+15551234567``. Numbers with a country code are kept."""
    if phone.strip().startswith("+"):
        return "+" + re.sub(r"\D", "", phone)
    digits = re.sub(r"\D", "", phone)
    return f"+1{digits}" if len(digits) == 10 else f"+{digits}"


class Notifier:
    """Sends OTP codes by email and SMS."""

    def __init__(self, settings: Settings, http_client: Optional[httpx.AsyncClient] = None):
        self.settings = settings
        self._http_client = http_client
        self._mail: Optional[FastMail] = None
        if settings.email_configured:
            self._mail = FastMail(ConnectionConfig(
                MAIL_USERNAME=settings.mail_username,
                MAIL_PASSWORD=settings.mail_password,
                MAIL_FROM=settings.mail_from,
                MAIL_FROM_NAME=settings.mail_from_name,
                MAIL_PORT=settings.mail_port,
                MAIL_SERVER=settings.mail_server,
                MAIL_STARTTLS=settings.mail_starttls,
                MAIL_SSL_TLS=settings.mail_ssl_tls,
                USE_CREDENTIALS=True,
            ))

    def _log_dev_delivery(self, channel: str, recipient: str, code: str) -> None:
        if self.settings.is_production:
            logger.warning(f"{channel} not configured, OTP for {recipient} was not sent")
        else:
            logger.info(f"[DEV MODE] {channel} OTP for {recipient}: {code}")

    async def send_email_otp(self, email: str, code: str, purpose: OTPPurpose) -> bool:
        masked = mask_email(email)
        if not self._mail:
            self._log_dev_delivery("Email", masked, code)
            return True

        message = MessageSchema(
            subject="Your OilSync Verification Code",
            recipients=[email],
            body=render_otp_email(code, purpose, self.settings.otp_expire_minutes),
            subtype=MessageType.html,
        )
        try:
            await self._mail.send_message(message)
        except Exception as e:
            logger.error(f"Failed to send OTP email to {masked}: {e}")
            return False

        logger.info(f"Sent {purpose.value} OTP email to {masked}")
        return True

    async def send_sms_otp(self, phone: str, code: str, purpose: OTPPurpose) -> bool:
        masked = mask_phone(phone)
        if not self.settings.sms_configured:
            self._log_dev_delivery("SMS", masked, code)
            return True

        sid = self.settings.twilio_account_sid
        url = f"{self.settings.twilio_api_url}/Accounts/{sid}/Messages.json"
        data = {
            "To": to_e164(phone),
            "From": self.settings.twilio_phone_number,
            "Body": render_otp_sms(code, self.settings.otp_expire_minutes),
        }
        try:
            if self._http_client:
                response = await self._http_client.post(url, data=data, auth=(sid, self.settings.twilio_auth_token))
            else:
                async with httpx.AsyncClient(timeout=10.0) as client:
                    response = await client.post(url, data=data, auth=(sid, self.settings.twilio_auth_token))
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error(f"Failed to send OTP SMS to {masked}: {e}")
            return False

        logger.info(f"Sent {purpose.value} OTP SMS to {masked}")
        return True
