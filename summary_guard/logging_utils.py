import logging
import json
import os
import hashlib
import time
from typing import Any, Dict, Optional
from pythonjsonlogger import jsonlogger
from .models import LogEntry, ComponentType, EventType

# Generated text may be rejected and must not leak, so full payloads are opt-in
ENABLE_FULL_PAYLOAD_LOGGING = os.getenv("ENABLE_FULL_PAYLOAD_LOGGING", "false").lower() == "true"
MAX_PAYLOAD_SIZE_BYTES = int(os.getenv("MAX_PAYLOAD_SIZE_BYTES", "100000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


class GuardJSONFormatter(jsonlogger.JsonFormatter):
    def add_fields(self, log_record, record, message_dict):
        super(GuardJSONFormatter, self).add_fields(log_record, record, message_dict)
        if not log_record.get('timestamp'):
            log_record['timestamp'] = time.time()
        if log_record.get('level'):
            log_record['level'] = log_record['level'].upper()
        else:
            log_record['level'] = record.levelname


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    # Repeated calls for the same component must not stack handlers
    if not any(isinstance(h.formatter, GuardJSONFormatter) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(GuardJSONFormatter('%(timestamp)s %(level)s %(name)s %(message)s'))
        logger.addHandler(handler)
    logger.setLevel(LOG_LEVEL)
    logger.propagate = False
    return logger


class StructuredLogger:
    def __init__(self, component: ComponentType):
        self.logger = get_logger(component.value)
        self.component = component

    def hash_payload(self, payload: Any) -> str:
        """Create a hash of the payload for audit."""
        dumped = json.dumps(payload, sort_keys=True, default=str)
        return hashlib.md5(dumped.encode()).hexdigest()[:16]

    def log_event(self,
                  trace_id: str,
                  event_type: EventType,
                  payload: Any,
                  metrics: Optional[Dict[str, Any]] = None,
                  level: int = logging.INFO):

        entry = LogEntry(
            trace_id=trace_id,
            component=self.component,
            event_type=event_type,
            payload_hash=self.hash_payload(payload),
            metrics=metrics or {},
        )

        self.logger.log(level, json.dumps(entry.model_dump(), default=str))

    def log_message(self,
                    trace_id: str,
                    direction: str,
                    message_type: str,
                    payload: Dict[str, Any],
                    metadata: Optional[Dict] = None):
        """
        Log message content with trace correlation.

        Args:
            trace_id: Trace ID for correlation
            direction: "request" | "response" | "internal"
            message_type: Descriptive message type (e.g., "generate_summary", "validation")
            payload: Full message payload (request or response)
            metadata: Additional metadata (e.g., endpoint, timing)
        """
        if not ENABLE_FULL_PAYLOAD_LOGGING:
            self.logger.info(json.dumps({
                "trace_id": trace_id,
                "component": self.component.value,
                "direction": direction,
                "message_type": message_type,
                "payload_hash": self.hash_payload(payload),
                "metadata": metadata or {}
            }, default=str))
            return

        payload_str = json.dumps(payload, default=str)
        payload_size = len(payload_str.encode('utf-8'))

        log_entry = {
            "trace_id": trace_id,
            "component": self.component.value,
            "direction": direction,
            "message_type": message_type,
            "content_size_bytes": payload_size,
            "truncated": payload_size > MAX_PAYLOAD_SIZE_BYTES,
            "metadata": metadata or {}
        }
        if log_entry["truncated"]:
            log_entry[f"{direction}_payload"] = payload_str[:MAX_PAYLOAD_SIZE_BYTES]
        else:
            log_entry[f"{direction}_payload"] = payload

        self.logger.info(json.dumps(log_entry, default=str))
