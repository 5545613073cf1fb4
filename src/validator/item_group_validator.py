"""Item group request validation."""
import logging
from typing import Optional, Tuple

from src.schema.models import ItemGroupRequest

logger = logging.getLogger(__name__)


class ValidationError(Exception):
    """Raised when a request breaks an item group rule.

    ``attribute_index`` and ``option_index`` locate the offending element
    (0-based) and are None for group-level failures.
    """

    def __init__(
        self,
        message: str,
        attribute_index: Optional[int] = None,
        option_index: Optional[int] = None,
    ):
        super().__init__(message)
        self.message = message
        self.attribute_index = attribute_index
        self.option_index = option_index

    @property
    def path(self) -> Tuple[int, ...]:
        """Index path of the offending element, outermost first."""
        return tuple(i for i in (self.attribute_index, self.option_index) if i is not None)


class ItemGroupValidator:
    """Validates an item group request, failing on the first broken rule."""

    def validate(self, request: ItemGroupRequest) -> None:
        """Validate request."""
        group = request.item_group

        if group is None:
            raise ValidationError("group spec must be defined")

        if not group.name:
            raise ValidationError("Name is required")

        if not group.attributes:
            raise ValidationError("At least one attribute is required")

        for i, attribute in enumerate(group.attributes):
            prefix = f"Group attribute at index {i}"

            if not attribute.name:
                raise ValidationError(f"{prefix} - Name is required.", i)

            # 0 is a valid order, only None counts as missing
            if attribute.order is None:
                raise ValidationError(f"{prefix} - Order is required.", i)

            if not attribute.options:
                raise ValidationError(f"{prefix} - At least one option is required.", i)

            for j, option in enumerate(attribute.options):
                if not option.name:
                    raise ValidationError(
                        f"{prefix}, Option at index {j} - Name is required.", i, j
                    )

                if option.order is None:
                    raise ValidationError(
                        f"{prefix}, Option at index {j} - Order is required.", i, j
                    )

        logger.debug(f"Item group '{group.name}' passed validation")


def validate_item_group(request: ItemGroupRequest) -> None:
    """Validate an item group request with the default validator."""
    ItemGroupValidator().validate(request)
