import json
import logging
from pathlib import Path
from typing import Dict, List, Optional, Union

from pydantic import ValidationError

from onboarding.state import EmployeeRecord

logger = logging.getLogger(__name__)

DEFAULT_SLOT_KEY = "employees"


class StoreError(RuntimeError):
    """Raised when a stored slot cannot be read back as a list of employees."""


class MemorySlots:
    """Slot backend kept in a plain dict. Nothing survives the process."""

    def __init__(self, data: Optional[Dict[str, str]] = None):
        self.data: Dict[str, str] = data if data is not None else {}

    def get_item(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set_item(self, key: str, value: str) -> None:
        self.data[key] = value


class JsonFileSlots:
    """
    Local-storage style slots: one JSON object on disk mapping slot names to
    serialized strings. The file is read whole and rewritten whole.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def _read_all(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8") or "{}")
        except json.JSONDecodeError as exc:
            raise StoreError(f"{self.path} is not valid JSON: {exc}") from exc
        if not isinstance(data, dict):
            raise StoreError(f"{self.path} must hold a JSON object of slots")
        return data

    def get_item(self, key: str) -> Optional[str]:
        return self._read_all().get(key)

    def set_item(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_name(self.path.name + ".tmp")
        tmp.write_text(json.dumps(data, indent=2), encoding="utf-8")
        tmp.replace(self.path)


class EmployeeStore:
    """
    Append-only list of employee records held in a single named slot as a
    JSON array. Records come back as frozen EmployeeRecord objects.
    """

    def __init__(self, slots, key: str = DEFAULT_SLOT_KEY):
        self.slots = slots
        self.key = key

    def load(self) -> List[EmployeeRecord]:
        raw = self.slots.get_item(self.key)
        if raw is None:
            return []

        try:
            items = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise StoreError(f"slot {self.key!r} is not valid JSON: {exc}") from exc
        if not isinstance(items, list):
            raise StoreError(f"slot {self.key!r} must hold a JSON array")

        try:
            records = [EmployeeRecord.model_validate(item) for item in items]
        except ValidationError as exc:
            raise StoreError(f"slot {self.key!r} holds an invalid employee: {exc}") from exc

        logger.debug("Loaded %d employee(s) from slot %r", len(records), self.key)
        return records

    def append(self, record: EmployeeRecord) -> List[EmployeeRecord]:
        records = self.load() + [record]
        payload = json.dumps([r.to_json_dict() for r in records])
        self.slots.set_item(self.key, payload)
        logger.info("Saved employee record #%d to slot %r", len(records), self.key)
        return records
