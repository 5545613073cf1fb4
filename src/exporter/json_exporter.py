"""JSON exporter."""
import json
from pathlib import Path
from datetime import datetime
from typing import Any, Dict

from src.builder.payload_builder import WirePayload
from src.schema.models import ItemGroupRequest


class JsonExporter:
    """Export an encoded item group payload to JSON for review."""

    def export(
        self,
        output_file: Path,
        request: ItemGroupRequest,
        payload: WirePayload,
    ) -> None:
        """Export to JSON file."""
        output_file.parent.mkdir(parents=True, exist_ok=True)

        data = {
            "metadata": {
                "created_at": datetime.now().isoformat(),
                "mode": "multipart" if payload.is_multipart else "json",
                "content_type": payload.content_type,
                "total_parts": len(payload.parts),
            },
            "request": request.to_dict(),
            "parts": [self._describe_part(part) for part in payload.parts],
        }

        with open(output_file, "w") as f:
            json.dump(data, f, indent=2, default=str)

    @staticmethod
    def _describe_part(part) -> Dict[str, Any]:
        if part.is_file:
            return {"name": part.name, "filename": part.filename, "size": len(part.value)}
        return {"name": part.name, "value": part.value}
