"""Builder para cards simples."""

from __future__ import annotations

from app.protocols.models import Card


class SimpleCardBuilder:
    """Builder para o card do tipo Simple."""

    def build(self, content: str, title: str | None = None) -> Card:
        return Card(title=title or "", content=content)
