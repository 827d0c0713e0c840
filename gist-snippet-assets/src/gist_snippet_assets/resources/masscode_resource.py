import json
import os
import tempfile
from pathlib import Path
from typing import Any, Dict

from dagster import ConfigurableResource, get_dagster_logger


class MassCodeStorageResource(ConfigurableResource):
    """Resource for writing the massCode database file."""

    output_path: str = "db.json"

    def write_document(self, document: Dict[str, Any]) -> Path:
        """Write the document as pretty-printed JSON, replacing the target in one step."""
        target = Path(self.output_path)
        target.parent.mkdir(parents=True, exist_ok=True)

        fd, temp_path = tempfile.mkstemp(prefix=f".{target.name}.", suffix=".tmp", dir=target.parent)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(document, f, indent=2, ensure_ascii=False)
            os.replace(temp_path, target)
        except Exception as e:
            get_dagster_logger().error(f"Error writing {target}: {e}")
            if os.path.exists(temp_path):
                os.remove(temp_path)
            raise

        get_dagster_logger().info(f"Wrote {target}")
        return target
