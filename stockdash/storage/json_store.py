import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Mapping

from stockdash.core.errors import StorageError
from stockdash.storage.base import CollectionStore

logger = logging.getLogger(__name__)


class JsonFileStore(CollectionStore):
    """One pretty-printed JSON array per collection under ``data_dir``."""

    def __init__(self, data_dir) -> None:
        super().__init__()
        self.data_dir = Path(data_dir)

    def path_for(self, name: str) -> Path:
        return self.data_dir / f"{self.check_name(name)}.json"

    def load_collection(self, name: str) -> list[dict]:
        path = self.path_for(name)
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.warning("Collection file not found: %s. Returning empty list.", path.name)
            return []
        except OSError as exc:
            logger.exception("Failed to read %s", path)
            raise StorageError(f"Failed to read data from {path.name}") from exc

        if not text.strip():
            return []
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            logger.error("Malformed JSON in %s: %s", path, exc)
            raise StorageError(f"Failed to read data from {path.name}") from exc
        if not isinstance(data, list):
            raise StorageError(f"Expected a JSON array in {path.name}")
        return data

    def save_collection(self, name: str, records: list[dict]) -> None:
        self.commit({name: records})

    def _stage(self, name: str, records: list[dict]) -> tuple[str, Path]:
        target = self.path_for(name)
        payload = json.dumps(records, indent=2, ensure_ascii=False)
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{target.stem}-", suffix=".tmp", dir=str(self.data_dir)
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(payload)
                handle.flush()
                os.fsync(handle.fileno())
        except BaseException:
            _discard(tmp_name)
            raise
        return tmp_name, target

    def commit(self, changes: Mapping[str, list[dict]]) -> None:
        """Stage every collection to a temp file, then rename them all in.

        Serialisation and disk-full failures happen during staging, before
        any live file is touched.
        """
        staged: list[tuple[str, Path]] = []
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
            for name, records in changes.items():
                staged.append(self._stage(name, records))
            for tmp_name, target in staged:
                os.replace(tmp_name, target)
        except (OSError, TypeError, ValueError) as exc:
            for tmp_name, _ in staged:
                _discard(tmp_name)
            logger.exception("Failed to write collections %s", ", ".join(changes))
            raise StorageError(
                "Failed to write data to {}".format(", ".join(f"{n}.json" for n in changes))
            ) from exc


def _discard(tmp_name: str) -> None:
    try:
        os.unlink(tmp_name)
    except FileNotFoundError:
        pass


__all__ = ["JsonFileStore"]
