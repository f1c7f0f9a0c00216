import asyncio
import html as html_lib
import smtplib
import ssl
from email.message import EmailMessage
from typing import Optional

from backend.planner.config import Settings
from backend.planner.core.errors import Unavailable


async def send_email(settings: Settings, to: str, subject: str, html: str, sender_name: Optional[str] = None):
    """
    Basit ve güvenli SMTP gönderici.
    - 465 ise SSL başlar; 587 ve smtp_use_starttls=True ise STARTTLS yapar.
    - Async uyumlu: bloklayan işlemi thread'e offload eder.
    """
    from_addr = settings.smtp_from or settings.smtp_user
    if not (settings.smtp_host and settings.smtp_port and settings.mailer_enabled and from_addr):
        raise RuntimeError("SMTP config eksik: host/port/user/password/from kontrol edin")

    msg = EmailMessage()
    msg["To"] = to
    msg["From"] = f"{sender_name} <{from_addr}>" if sender_name else from_addr
    msg["Subject"] = subject
    msg.set_content("HTML içerik için e-postayı HTML olarak görüntüleyin.")
    msg.add_alternative(html, subtype="html")

    password = settings.smtp_password.get_secret_value()

    def _send_blocking():
        context = ssl.create_default_context()
        if settings.smtp_use_starttls:
            # 587 / STARTTLS
            with smtplib.SMTP(settings.smtp_host, settings.smtp_port) as server:
                server.ehlo()
                server.starttls(context=context)
                server.ehlo()
                server.login(settings.smtp_user, password)
                server.send_message(msg)
        else:
            # 465 / SSL
            with smtplib.SMTP_SSL(settings.smtp_host, settings.smtp_port, context=context) as server:
                server.login(settings.smtp_user, password)
                server.send_message(msg)

    loop = asyncio.get_running_loop()
    try:
        await loop.run_in_executor(None, _send_blocking)
    except (smtplib.SMTPException, OSError) as exc:
        raise Unavailable("Verification mail could not be sent") from exc


def verification_mailer(settings: Settings):
    """UserProfileService'e verilecek `(uid, email)` gönderici; SMTP ayarı yoksa None."""
    if not settings.mailer_enabled:
        return None

    async def _send(uid: str, email: str) -> None:
        html = f"""<div style="font-family:Arial,sans-serif">
          <h2>E-mail verification</h2>
          <p>This address was registered for the timetable account <b>{html_lib.escape(uid)}</b>.</p>
          <p>If this was not you, you can ignore this message.</p>
        </div>"""
        await send_email(settings, email, "Verify your e-mail address", html)

    return _send
