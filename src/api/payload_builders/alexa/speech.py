"""Builder para o campo outputSpeech."""

from __future__ import annotations

from app.protocols.models import OutputSpeech

SSML_OPEN_TAG = "<speak>"
SSML_CLOSE_TAG = "</speak>"


def is_ssml(content: str) -> bool:
    """Retorna True se o conteúdo está envolvido por <speak>...</speak>."""
    stripped = content.strip()
    return stripped.startswith(SSML_OPEN_TAG) and stripped.endswith(SSML_CLOSE_TAG)


class OutputSpeechBuilder:
    """Classifica o conteúdo e monta a fala correspondente."""

    def build(self, content: str) -> OutputSpeech:
        """Constrói outputSpeech.

        Args:
            content: Conteúdo bruto do comando

        Returns:
            SSML com o conteúdo bruto, ou PlainText com o conteúdo bruto
        """
        if is_ssml(content):
            return OutputSpeech(type="SSML", ssml=content)
        return OutputSpeech(type="PlainText", text=content)
