from __future__ import annotations

import logging

from PySide6.QtCore import QUrl
from PySide6.QtGui import QDesktopServices

LOGGER = logging.getLogger(__name__)


def open_url_externally(uri: str) -> bool:
    """Hand ``uri`` to the desktop's default handler (usually the web browser)."""
    url = QUrl(str(uri or ""))
    if not url.isValid() or url.isEmpty():
        LOGGER.debug("Not opening invalid link %r", uri)
        return False
    opened = bool(QDesktopServices.openUrl(url))
    if not opened:
        LOGGER.warning("No handler accepted link %s", uri)
    return opened
