"""Model-bound content with blueprint conversion."""

from __future__ import annotations

from typing import TYPE_CHECKING

from content.content import Content
from core.errors import FolioLogicError
from core.types import ContentFields

if TYPE_CHECKING:
    from models.blueprint import Blueprint


class ModelContent(Content):
    """Content that belongs to a model and knows its blueprint."""

    def convert_to(self, blueprint_name: str) -> ContentFields:
        """Convert the field map to match another blueprint.

        Fields of the new blueprint keep their current value when the old
        blueprint declares a field with the same name and type; otherwise
        they take the new blueprint's default. Fields the new blueprint
        does not mention are preserved verbatim.

        Args:
            blueprint_name: Template name of the target blueprint.

        Returns:
            Converted field map. Nothing is written to storage.

        Raises:
            FolioLogicError: If the content is not bound to a model.
        """
        if self.model is None:
            raise FolioLogicError(
                "Cannot convert content without a model. "
                "Read the content through a model version first."
            )
        old_blueprint = self.model.blueprint()
        new_blueprint = self.model.sibling_blueprint(blueprint_name)
        return convert_fields(self.data, old_blueprint, new_blueprint)


def convert_fields(
    data: ContentFields,
    old_blueprint: "Blueprint",
    new_blueprint: "Blueprint",
) -> ContentFields:
    """Migrate a raw field map from one blueprint to another."""
    converted: ContentFields = {}
    for new_field in new_blueprint.fields:
        old_field = old_blueprint.field(new_field.name)
        if old_field is not None and old_field.type == new_field.type:
            converted[new_field.name] = data.get(new_field.name)
        else:
            converted[new_field.name] = new_field.default
    return {**data, **converted}
