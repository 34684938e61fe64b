"""Identifiers shared by every document, slide, group and playlist item."""

import uuid


def generate_uuid() -> str:
    """
    Return a random version-4 UUID in ProPresenter's uppercase form.

    Layout is ``XXXXXXXX-XXXX-4XXX-YXXX-XXXXXXXXXXXX`` with Y in {8, 9, A, B}.
    """
    return str(uuid.uuid4()).upper()
