"""JSON document store backed by a single local file."""

import json
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path

from match_sessions.domain.models import Snapshot, snapshot_from_dict, snapshot_to_dict
from match_sessions.services.store import Store


@dataclass
class JsonFileStore(Store):
    """Stores both collections in one JSON file, replaced atomically on save."""

    path: Path

    def load_all(self) -> Snapshot:
        """Read the document, creating an empty one when the file is missing."""
        if not self.path.exists():
            empty = Snapshot()
            self.save_all(empty)
            return empty
        payload = json.loads(self.path.read_text(encoding="utf-8"))
        if not isinstance(payload, dict):
            raise ValueError(f"Store document in {self.path} must be a JSON object")
        return snapshot_from_dict(payload)

    def save_all(self, snapshot: Snapshot) -> None:
        """Write the document to a temp file and move it into place."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        content = json.dumps(snapshot_to_dict(snapshot), indent=2)
        fd, tmp_name = tempfile.mkstemp(
            dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(content)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
