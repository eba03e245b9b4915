from __future__ import annotations

import reflex as rx

from ..content import PORTFOLIO, ContactChannel
from ..core.layout import section
from ..core.theme import tone
from ..state import ContactState


def _channel(channel: ContactChannel) -> rx.Component:
    return rx.hstack(
        rx.center(
            rx.icon(channel.icon, color="#2563eb"),
            background="#dbeafe",
            padding="0.75rem",
            border_radius="9999px",
        ),
        rx.vstack(
            rx.text(channel.label, size="2", color="#6b7280"),
            rx.link(
                channel.value,
                href=channel.href,
                is_external=channel.external,
                color=tone("text-link"),
            ),
            spacing="0",
            align="start",
        ),
        spacing="4",
        align="center",
    )


def _field(label: str, field: str, *, kind: str = "text", multiline: bool = False) -> rx.Component:
    value = getattr(ContactState, field)
    if multiline:
        control = rx.text_area(
            id=field,
            name=field,
            value=value,
            on_change=lambda text: ContactState.set_field(field, text),
            rows="4",
            required=True,
            width="100%",
        )
    else:
        control = rx.input(
            id=field,
            name=field,
            type=kind,
            value=value,
            on_change=lambda text: ContactState.set_field(field, text),
            required=True,
            width="100%",
        )
    return rx.vstack(
        rx.el.label(label, html_for=field, class_name="field-label"),
        control,
        spacing="1",
        width="100%",
    )


def _contact_form() -> rx.Component:
    return rx.form(
        rx.vstack(
            _field("Name", "name"),
            _field("Email", "email", kind="email"),
            _field("Subject", "subject"),
            _field("Message", "message", multiline=True),
            rx.button(
                "Send Message",
                type="submit",
                size="3",
                width="100%",
                disabled=ContactState.status == "sending",
            ),
            rx.cond(
                ContactState.form_error != "",
                rx.callout(ContactState.form_error, icon="triangle_alert", color_scheme="red"),
            ),
            rx.cond(
                ContactState.status_label != "",
                rx.text(ContactState.status_label, text_align="center", width="100%"),
            ),
            spacing="4",
            width="100%",
        ),
        on_submit=ContactState.handle_submit,
        on_unmount=ContactState.cancel_pending,
        reset_on_submit=False,
        width="100%",
    )


def contact() -> rx.Component:
    info = rx.vstack(
        rx.heading("Contact Information", size="6"),
        rx.text(PORTFOLIO.availability, color=tone("text-muted")),
        *[_channel(channel) for channel in PORTFOLIO.contact_channels],
        spacing="4",
        align="start",
        width=rx.breakpoints(initial="100%", md="50%"),
    )

    return section(
        rx.flex(
            info,
            rx.box(_contact_form(), width=rx.breakpoints(initial="100%", md="50%")),
            direction=rx.breakpoints(initial="column", md="row"),
            gap="2rem",
        ),
        section_id="contact",
        title="Get In Touch",
    )
