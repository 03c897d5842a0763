"""
Signup service for processing newsletter form submissions.

This module provides the workflow behind the signup endpoint: it normalizes
and validates the submitted form, builds the canonical signup record, writes
it to the signup store on a best-effort basis, and sends the confirmation
email.

Store failures are logged and do not fail the signup. Delivery failures do:
a subscriber who never receives the confirmation should be told to retry.
"""

import logging
import re
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from enum import Enum
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

from models.signup_record import CHILDREN_NAMES_SENTINEL, SignupRecord
from services.newsletter_service import NewsletterService
from services.service_constants import (
    CHILDREN_NAME_KEYS,
    EMAIL_PATTERN,
    MESSAGE_INVALID_EMAIL,
    MESSAGE_MISSING_FIELDS,
    MESSAGE_SIGNUP_PROCESSED,
)
from services.signup_store import SignupStore, StoreError

logger = logging.getLogger(__name__)

EMAIL_RE = re.compile(EMAIL_PATTERN)


class ValidationError(Exception):
    """Exception raised for missing or malformed signup input."""
    pass


class ChildrenNamesKind(Enum):
    """Shape of the children names submitted with a signup."""
    MISSING = 'missing'
    SINGLE = 'single'
    MULTIPLE = 'multiple'


@dataclass(frozen=True)
class ChildrenNames:
    kind: ChildrenNamesKind
    names: Tuple[str, ...] = ()

    def as_text(self) -> str:
        """Text stored in the signup record: names joined by ', ' or 'N/A'."""
        if self.kind is ChildrenNamesKind.MISSING:
            return CHILDREN_NAMES_SENTINEL
        return ', '.join(self.names)


def _clean(value: Any) -> str:
    # Lists, objects and booleans are not usable as a name or an address
    if value is None or isinstance(value, bool) or not isinstance(value, (str, int, float)):
        return ''
    return str(value).strip()


def normalize_children_names(payload: Mapping[str, Any]) -> ChildrenNames:
    """
    Normalize the children names of a signup form.

    The first of ``childrenNames``, ``childName`` and ``children`` that is
    present and not null is used. Lists are trimmed and blank entries are
    dropped; strings are trimmed.

    Args:
        payload: Submitted form data

    Returns:
        ChildrenNames tagged as MISSING, SINGLE or MULTIPLE
    """
    raw = next((payload[key] for key in CHILDREN_NAME_KEYS if payload.get(key) is not None), None)

    if isinstance(raw, (list, tuple)):
        names = tuple(name for name in (_clean(item) for item in raw) if name)
        if not names:
            return ChildrenNames(ChildrenNamesKind.MISSING)
        return ChildrenNames(ChildrenNamesKind.MULTIPLE, names)

    text = _clean(raw)
    if not text:
        return ChildrenNames(ChildrenNamesKind.MISSING)
    return ChildrenNames(ChildrenNamesKind.SINGLE, (text,))


@dataclass
class SignupResult:
    record: SignupRecord
    stored: bool
    success: bool = True
    message: str = MESSAGE_SIGNUP_PROCESSED
    delivery: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'success': self.success,
            'message': self.message,
            'record': self.record.to_dict(),
            'stored': self.stored,
        }


def utc_today() -> date:
    return datetime.now(timezone.utc).date()


class SignupService:
    """
    Workflow for one newsletter signup submission.

    Args:
        store: Spreadsheet store receiving the signup row
        notifier: Newsletter service sending the confirmation
        persistence_enabled: False on read-only deployments, where the store
            append is skipped entirely
        today: Clock returning the submission date
    """

    def __init__(self,
                 store: SignupStore,
                 notifier: NewsletterService,
                 persistence_enabled: bool = True,
                 today: Optional[Callable[[], date]] = None):
        self.store = store
        self.notifier = notifier
        self.persistence_enabled = persistence_enabled
        self.today = today or utc_today

    def process(self, payload: Optional[Mapping[str, Any]]) -> SignupResult:
        """
        Validate a signup form, record it, and send the confirmation email.

        Args:
            payload: Form data with 'parentName', 'parentEmail' and optional
                children names

        Returns:
            SignupResult with the stored record

        Raises:
            ValidationError: If name or email is missing or the email is malformed
            DeliveryError: If the confirmation email could not be sent
        """
        if not isinstance(payload, Mapping):
            payload = {}

        parent_name = _clean(payload.get('parentName'))
        parent_email = _clean(payload.get('parentEmail'))
        children = normalize_children_names(payload)

        if not parent_name or not parent_email:
            logger.info("Signup rejected: missing required fields")
            raise ValidationError(MESSAGE_MISSING_FIELDS)

        if not EMAIL_RE.match(parent_email):
            logger.info("Signup rejected: invalid email format: %s", parent_email)
            raise ValidationError(MESSAGE_INVALID_EMAIL)

        record = SignupRecord(
            date=self.today(),
            parent_name=parent_name,
            parent_email=parent_email,
            children_names=children.as_text(),
        )
        logger.info("Signup record created for %s", parent_email)

        stored = self._store(record)

        delivery = self.notifier.send_confirmation(
            record.parent_email,
            record.parent_name,
            record.children_names,
        )

        return SignupResult(record=record, stored=stored, delivery=delivery or {})

    def _store(self, record: SignupRecord) -> bool:
        if not self.persistence_enabled:
            logger.info("Persistence disabled (read-only deployment): skipping store append")
            return False

        try:
            self.store.append(record)
        except StoreError as e:
            logger.warning("Signup store append failed (continuing without it): %s", e)
            return False
        return True
