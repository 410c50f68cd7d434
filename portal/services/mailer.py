import logging
import smtplib
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText

from portal.core.config import MailSettings, settings

logger = logging.getLogger(__name__)


class Mailer:
    """
    Sends plain-text mail over SMTP.
    Without SMTP credentials every message is logged instead of sent.
    """

    def __init__(self, config: MailSettings = None):
        self.config = config or settings.mail

    def send(self, to_email: str, subject: str, body: str) -> None:
        if not self.config.enabled:
            logger.info(f"[EMAIL MOCK] To: {to_email} | Subject: {subject}", extra={"body": body})
            return

        msg = MIMEMultipart("alternative")
        msg["Subject"] = subject
        msg["From"] = f"{self.config.sender_name} <{self.config.smtp_user}>"
        msg["To"] = to_email
        msg.attach(MIMEText(body, "plain"))
        with smtplib.SMTP(self.config.smtp_host, self.config.smtp_port) as server:
            server.starttls()
            server.login(self.config.smtp_user, self.config.smtp_pass)
            server.sendmail(self.config.smtp_user, to_email, msg.as_string())
        logger.info(f"Sent email to {to_email}", extra={"subject": subject})
