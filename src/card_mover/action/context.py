"""Triggering event payload of a workflow run."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

logger = logging.getLogger("card_mover.action")


def load_event_payload(path: str | Path | None = None) -> Any:
    """Load the webhook payload of the triggering event.

    Args:
        path: Payload file. Defaults to the GITHUB_EVENT_PATH environment variable.

    Returns:
        The decoded payload, or an empty dict when no payload file exists.
    """
    if path is None:
        path = os.environ.get("GITHUB_EVENT_PATH")
    if not path:
        return {}

    event_path = Path(path)
    if not event_path.exists():
        logger.debug("Event payload %s does not exist", event_path)
        return {}

    return json.loads(event_path.read_text(encoding="utf-8"))
