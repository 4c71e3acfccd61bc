"""
Explicit edit context for admin forms.

Callers own an EditSession and pass it to form submission, so an edit in
progress on one form never leaks into another form's submission.

Dependencies: None
System role: Scoped form edit state
"""

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass
class EditSession:
    """Which form is mid-edit, and on which record."""

    form_id: str | None = None
    record_id: str | None = None

    @property
    def is_editing(self) -> bool:
        return self.form_id is not None and self.record_id is not None

    def begin(self, form_id: str, record_id: str) -> None:
        """Start editing a record in the given form."""
        self.form_id = form_id
        self.record_id = record_id
        logger.info("Edit mode activated", extra={"form_id": form_id, "record_id": record_id})

    def clear(self) -> None:
        """Leave edit mode."""
        if self.is_editing:
            logger.info("Edit mode cleared", extra={"form_id": self.form_id})
        self.form_id = None
        self.record_id = None

    def is_editing_form(self, form_id: str) -> bool:
        return self.is_editing and self.form_id == form_id
