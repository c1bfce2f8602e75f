"""
src/services/events.py
──────────────────────
Fire-and-forget delivery of operational events to an optional sink.
A failing sink never interrupts zone assembly or status polling.
"""
import logging
from typing import Any

from src.data.contracts import EventSink

logger = logging.getLogger(__name__)


def notify(sink: EventSink | None, event: str, **payload: Any) -> None:
    if sink is None:
        return
    try:
        sink.publish(event, payload)
    except Exception as e:
        logger.warning(f"Event sink rejected '{event}': {e}")
