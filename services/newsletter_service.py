"""
Newsletter service for signup confirmations and signup digests.

This module provides the notifier used by the signup workflow and the report
generator. It renders the HTML confirmation sent to a new subscriber and the
HTML digest of recent signups sent to the operations inbox, then hands both
to the email service for delivery.

Templates live in ``services/templates/emails`` and are rendered with HTML
autoescaping, so names typed into the signup form are never interpreted as
markup.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Sequence

from jinja2 import Environment, FileSystemLoader, select_autoescape

from models.signup_record import CHILDREN_NAMES_SENTINEL
from services.email_service import EmailService
from services.service_constants import (
    CHILDREN_NOT_SPECIFIED,
    CONFIRMATION_SUBJECT_TEMPLATE,
    DEFAULT_BRAND_NAME,
    DEFAULT_REPORT_RECIPIENT,
    DEFAULT_SUPPORT_EMAIL,
    DIGEST_SUBJECT_TEMPLATE,
)

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).resolve().parent / 'templates' / 'emails'


def create_template_environment(template_dir: Path = TEMPLATE_DIR) -> Environment:
    return Environment(
        loader=FileSystemLoader(str(template_dir)),
        autoescape=select_autoescape(['html']),
    )


class NewsletterService:
    """
    Service for rendering and sending newsletter emails.

    Confirmation emails go to the subscriber; digests always go to the fixed
    report recipient. Delivery failures surface as
    :class:`services.email_service.DeliveryError` and are never retried here.
    """

    def __init__(self,
                 email_service: EmailService,
                 report_recipient: str = DEFAULT_REPORT_RECIPIENT,
                 brand_name: str = DEFAULT_BRAND_NAME,
                 support_email: str = DEFAULT_SUPPORT_EMAIL,
                 templates: Optional[Environment] = None):
        """
        Initialize the newsletter service.

        Args:
            email_service: Transport used to deliver messages
            report_recipient: Operational address receiving signup digests
            brand_name: Newsletter brand shown in subjects and bodies
            support_email: Contact address shown in the confirmation
            templates: Jinja2 environment, defaults to the bundled email templates
        """
        self.email_service = email_service
        self.report_recipient = report_recipient
        self.brand_name = brand_name
        self.support_email = support_email
        self.templates = templates or create_template_environment()

    def render_confirmation(self, email: str, parent_name: str,
                            children_names: str = CHILDREN_NAMES_SENTINEL) -> str:
        """
        Render the welcome email for a new subscriber.

        Args:
            email: Subscriber address, echoed in the footer
            parent_name: Name used in the greeting
            children_names: Comma-joined children names or the 'N/A' sentinel

        Returns:
            Rendered HTML
        """
        if children_names and children_names != CHILDREN_NAMES_SENTINEL:
            children_label = children_names
        else:
            children_label = CHILDREN_NOT_SPECIFIED

        return self.templates.get_template('confirmation.html').render(
            email=email,
            parent_name=parent_name,
            children_label=children_label,
            brand_name=self.brand_name,
            support_email=self.support_email,
        )

    def send_confirmation(self, email: str, parent_name: str,
                          children_names: str = CHILDREN_NAMES_SENTINEL) -> Dict[str, Any]:
        """
        Send the welcome email to a new subscriber.

        Args:
            email: Subscriber address
            parent_name: Name used in the greeting
            children_names: Comma-joined children names or the 'N/A' sentinel

        Returns:
            Provider data for the sent message

        Raises:
            DeliveryError: If the email could not be sent
        """
        logger.info("Sending confirmation email to: %s", email)
        html = self.render_confirmation(email, parent_name, children_names)
        return self.email_service.send_email(
            to=email,
            subject=CONFIRMATION_SUBJECT_TEMPLATE.format(brand=self.brand_name),
            html_content=html,
        )

    def render_digest(self, records: Sequence[Mapping[str, Any]], label: str,
                      generated_at: Optional[datetime] = None) -> str:
        """
        Render the signup digest table.

        Args:
            records: Signup rows keyed by spreadsheet column header
            label: Report title, e.g. 'Daily Report'
            generated_at: Timestamp shown in the footer, defaults to now

        Returns:
            Rendered HTML
        """
        generated_at = generated_at or datetime.now()
        return self.templates.get_template('digest.html').render(
            records=list(records),
            label=label,
            generated_at=generated_at.strftime('%Y-%m-%d %H:%M:%S'),
        )

    def send_digest(self, records: Sequence[Mapping[str, Any]], label: str,
                    subject: Optional[str] = None) -> str:
        """
        Render a digest and send it to the report recipient.

        Args:
            records: Signup rows keyed by spreadsheet column header
            label: Report title
            subject: Subject override, defaults to '<label> - New Newsletter Signups'

        Returns:
            The rendered report HTML

        Raises:
            DeliveryError: If the email could not be sent
        """
        html = self.render_digest(records, label)
        logger.info("Sending %s with %d signups to %s", label, len(records), self.report_recipient)
        self.email_service.send_email(
            to=self.report_recipient,
            subject=subject or DIGEST_SUBJECT_TEMPLATE.format(label=label),
            html_content=html,
        )
        return html


def create_newsletter_service(config: Mapping[str, Any], email_service: EmailService) -> NewsletterService:
    return NewsletterService(
        email_service=email_service,
        report_recipient=config.get('REPORT_RECIPIENT') or DEFAULT_REPORT_RECIPIENT,
        brand_name=config.get('NEWSLETTER_BRAND') or DEFAULT_BRAND_NAME,
        support_email=config.get('SUPPORT_EMAIL') or DEFAULT_SUPPORT_EMAIL,
    )
