"""Sortly API client."""
import logging
import requests
from typing import Optional, Dict, Any

from config import SortlyApiConfig
from src.builder.payload_builder import build_item_group_payload
from src.filesystem.file_system import FileSystem
from src.schema.models import ItemGroupRequest

logger = logging.getLogger(__name__)

ITEM_GROUPS_PATH = "/api/v1/item_groups"


class SortlyClient:
    """Client for the Sortly API."""

    def __init__(self, config: SortlyApiConfig):
        """Initialize client."""
        self.config = config
        self.session = requests.Session()

        if config.api_key:
            self.session.headers.update({"Authorization": f"Bearer {config.api_key}"})

    def create_item_group(
        self,
        request: ItemGroupRequest,
        file_system: Optional[FileSystem] = None,
    ) -> Dict[str, Any]:
        """Validate, encode and send an item group creation request."""
        payload = build_item_group_payload(request, file_system)
        url = f"{self.config.base_url}{ITEM_GROUPS_PATH}"

        try:
            response = self.session.post(
                url,
                timeout=self.config.timeout,
                **payload.as_requests_kwargs(),
            )
            response.raise_for_status()
        except requests.RequestException as e:
            logger.error(f"Error creating item group: {e}")
            raise

        logger.info(f"Created item group '{request.item_group.name}'")
        return response.json()
