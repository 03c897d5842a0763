"""
Email service for sending transactional email.

This module provides the outbound email capability used by the notifier. It
abstracts away the delivery provider behind a single ``send`` call that takes
``{from, to, subject, html}`` and returns either ``{"data": ...}`` or
``{"error": ...}``, mirroring the shape of the Resend API. Three transports
are supported:

- ``resend``: HTTPS call to the Resend email API (default)
- ``smtp``: direct delivery through an SMTP relay
- ``log``: writes the message to the log only, for local development

No transport retries a failed send; callers decide what a failure means.
"""

import logging
import smtplib
import uuid
from datetime import datetime, timezone
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from email.utils import format_datetime, parseaddr
from typing import Any, Dict, List, Optional, Union

import requests

from services.service_constants import (
    DEFAULT_FROM_EMAIL,
    EMAIL_TRANSPORTS,
    RESEND_API_URL,
    TRANSPORT_LOG,
    TRANSPORT_RESEND,
    TRANSPORT_SMTP,
)

logger = logging.getLogger(__name__)


class DeliveryError(Exception):
    """Exception raised when an email could not be delivered."""
    pass


class EmailService:
    """
    Service for handling email sending and delivery.

    This class sends single HTML messages through the configured transport
    and reports provider failures as data rather than exceptions from
    ``send``; ``send_email`` converts them into :class:`DeliveryError`.
    """

    def __init__(self,
                 transport: str = TRANSPORT_RESEND,
                 api_key: Optional[str] = None,
                 api_url: str = RESEND_API_URL,
                 from_email: str = DEFAULT_FROM_EMAIL,
                 smtp_server: Optional[str] = None,
                 port: int = 587,
                 username: Optional[str] = None,
                 password: Optional[str] = None,
                 use_tls: bool = True,
                 timeout: int = 30):
        """
        Initialize the email service.

        Args:
            transport: Delivery transport ('resend', 'smtp' or 'log')
            api_key: Resend API key
            api_url: Resend email endpoint
            from_email: Default sender, e.g. 'Brand <hello@example.com>'
            smtp_server: SMTP server address
            port: SMTP server port
            username: SMTP username
            password: SMTP password
            use_tls: Whether to upgrade the SMTP connection with STARTTLS
            timeout: Timeout in seconds for HTTP and SMTP operations

        Raises:
            ValueError: If the transport is not supported
        """
        if transport not in EMAIL_TRANSPORTS:
            raise ValueError(f"Unsupported email transport: {transport}")

        self.transport = transport
        self.api_key = api_key
        self.api_url = api_url
        self.from_email = from_email
        self.smtp_server = smtp_server
        self.port = port
        self.username = username
        self.password = password
        self.use_tls = use_tls
        self.timeout = timeout

    def send(self, params: Dict[str, Any]) -> Dict[str, Any]:
        """
        Send one message.

        Args:
            params: Message with 'to', 'subject', 'html' and optional 'from'

        Returns:
            ``{"data": {"id": ...}}`` on success, ``{"error": {"message": ..., "name": ...}}``
            on failure
        """
        message = dict(params)
        message['from'] = message.get('from') or self.from_email
        message['to'] = _as_list(message.get('to'))

        if not message['to']:
            return _error('At least one recipient is required', 'validation_error')

        if self.transport == TRANSPORT_SMTP:
            return self._send_via_smtp(message)
        if self.transport == TRANSPORT_LOG:
            return self._send_via_log(message)
        return self._send_via_resend(message)

    def send_email(self,
                   to: Union[str, List[str]],
                   subject: str,
                   html_content: str,
                   from_email: Optional[str] = None) -> Dict[str, Any]:
        """
        Send an HTML email, raising on failure.

        Args:
            to: Recipient email address or list of addresses
            subject: Email subject line
            html_content: HTML body
            from_email: Sender override

        Returns:
            Provider data for the sent message (contains the message 'id')

        Raises:
            DeliveryError: If the transport reports an error
        """
        result = self.send({
            'from': from_email,
            'to': to,
            'subject': subject,
            'html': html_content,
        })

        error = result.get('error')
        if error:
            logger.error("Email delivery failed via %s: %s", self.transport, error.get('message'))
            raise DeliveryError(f"{self.transport} error: {error.get('message')}")

        data = result.get('data') or {}
        logger.info("Email sent via %s. Message ID: %s", self.transport, data.get('id'))
        return data

    def _send_via_resend(self, message: Dict[str, Any]) -> Dict[str, Any]:
        if not self.api_key:
            return _error('RESEND_API_KEY is not configured', 'missing_api_key')

        try:
            response = requests.post(
                self.api_url,
                json={
                    'from': message['from'],
                    'to': message['to'],
                    'subject': message.get('subject', ''),
                    'html': message.get('html', ''),
                },
                headers={'Authorization': f"Bearer {self.api_key}"},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            return _error(str(e), 'request_error')

        try:
            body = response.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}

        if response.status_code >= 400:
            return _error(
                body.get('message') or f"HTTP {response.status_code}",
                body.get('name', 'api_error'),
                status_code=response.status_code,
            )

        return {'data': body}

    def _send_via_smtp(self, message: Dict[str, Any]) -> Dict[str, Any]:
        if not self.smtp_server:
            return _error('SMTP_SERVER is not configured', 'missing_smtp_server')

        message_id = uuid.uuid4().hex
        _, sender_address = parseaddr(message['from'])
        domain = sender_address.split('@')[-1] or 'localhost'

        msg = MIMEMultipart('alternative')
        msg['Subject'] = message.get('subject', '')
        msg['From'] = message['from']
        msg['To'] = ', '.join(message['to'])
        msg['Message-ID'] = f"<{message_id}@{domain}>"
        msg['Date'] = format_datetime(datetime.now(timezone.utc))
        msg.attach(MIMEText(message.get('html', ''), 'html', 'utf-8'))

        try:
            with smtplib.SMTP(self.smtp_server, self.port, timeout=self.timeout) as smtp:
                if self.use_tls:
                    smtp.starttls()
                if self.username and self.password:
                    smtp.login(self.username, self.password)
                smtp.sendmail(sender_address, message['to'], msg.as_string())
        except (smtplib.SMTPException, OSError) as e:
            return _error(str(e), type(e).__name__)

        return {'data': {'id': message_id}}

    def _send_via_log(self, message: Dict[str, Any]) -> Dict[str, Any]:
        message_id = uuid.uuid4().hex
        logger.info("Email [%s] to %s: %s", message_id, ', '.join(message['to']), message.get('subject'))
        logger.debug("Email [%s] body:\n%s", message_id, message.get('html'))
        return {'data': {'id': message_id}}


def _as_list(value: Union[None, str, List[str]]) -> List[str]:
    if not value:
        return []
    if isinstance(value, str):
        return [value]
    return [v for v in value if v]


def _error(message: str, name: str, status_code: Optional[int] = None) -> Dict[str, Any]:
    error: Dict[str, Any] = {'message': message, 'name': name}
    if status_code is not None:
        error['status_code'] = status_code
    return {'error': error}


def create_email_service(config: Dict[str, Any]) -> EmailService:
    """
    Build an email service from application configuration.

    Args:
        config: Flask configuration mapping

    Returns:
        EmailService configured for the selected transport
    """
    return EmailService(
        transport=config.get('EMAIL_TRANSPORT', TRANSPORT_RESEND),
        api_key=config.get('RESEND_API_KEY'),
        api_url=config.get('RESEND_API_URL', RESEND_API_URL),
        from_email=config.get('FROM_EMAIL') or DEFAULT_FROM_EMAIL,
        smtp_server=config.get('SMTP_SERVER'),
        port=config.get('SMTP_PORT', 587),
        username=config.get('SMTP_USERNAME'),
        password=config.get('SMTP_PASSWORD'),
        use_tls=config.get('SMTP_USE_TLS', True),
        timeout=config.get('EMAIL_TIMEOUT', 30),
    )
