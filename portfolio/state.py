from __future__ import annotations

import asyncio
import logging
from typing import Any

import reflex as rx

from .contact import (
    FIELD_NAMES,
    ContactForm,
    ContactFormError,
    ContactMessage,
    ContactStatus,
)

logger = logging.getLogger(__name__)


class ContactState(rx.State):
    """Contact form fields and the status of the simulated send."""

    name: str = ""
    email: str = ""
    subject: str = ""
    message: str = ""
    status: str = ContactStatus.IDLE.value
    form_error: str = ""
    _ticket: int = 0

    def _form(self) -> ContactForm:
        return ContactForm(
            ContactMessage(
                name=self.name,
                email=self.email,
                subject=self.subject,
                message=self.message,
            ),
            status=ContactStatus(self.status),
            ticket=self._ticket,
        )

    def _store(self, form: ContactForm) -> None:
        for field in FIELD_NAMES:
            setattr(self, field, getattr(form.message, field))
        self.status = form.status.value
        self._ticket = form.ticket

    @rx.var
    def status_label(self) -> str:
        return ContactStatus(self.status).label

    @rx.event
    def set_field(self, field: str, value: str) -> None:
        form = self._form()
        form.update(field, value)
        self._store(form)

    @rx.event(background=True)
    async def handle_submit(self, form_data: dict[str, Any]):
        """Pretend to send the message, then clear the form."""

        async with self:
            form = ContactForm.from_mapping(
                form_data,
                status=ContactStatus(self.status),
                ticket=self._ticket,
            )
            try:
                ticket = form.begin()
            except ContactFormError as exc:
                logger.debug("Contact form rejected: %s", exc)
                self.form_error = str(exc)
                return
            self.form_error = ""
            self._store(form)
            delay = form.delay

        await asyncio.sleep(delay)

        async with self:
            form = self._form()
            if form.complete(ticket):
                self._store(form)

    @rx.event
    def cancel_pending(self) -> None:
        """Discard a send still waiting when the form goes away."""

        form = self._form()
        form.cancel()
        self._store(form)
