"""Runtime context shared by all models.

The context bundles configuration with the language, user and blueprint
registries that models consult, replacing global application lookups.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePosixPath

from content.language import LanguageRegistry
from content.plain_text_storage import PlainTextContentStorageHandler
from core.config import FolioConfig
from core.constants import DEFAULT_BLUEPRINT_NAME, DRAFTS_DIR_NAME
from core.errors import FolioLogicError, FolioNotFoundError
from core.logging_config import configure_logging
from models.blueprint import BlueprintRegistry
from models.file import FileModel
from models.model_with_content import ModelWithContent
from models.page import PageModel
from models.site import SiteModel
from models.user import UserModel
from models.users import UserRegistry


@dataclass(frozen=True)
class FolioContext:
    """Configuration plus registries used by models.

    Attributes:
        config: Validated runtime configuration.
        languages: Configured languages.
        users: Known users and the authenticated user.
        blueprints: Blueprint lookup.
    """

    config: FolioConfig
    languages: LanguageRegistry
    users: UserRegistry
    blueprints: BlueprintRegistry

    @classmethod
    def from_config(
        cls,
        config: FolioConfig,
        users: UserRegistry | None = None,
        blueprints: BlueprintRegistry | None = None,
    ) -> "FolioContext":
        """Build a context with registries derived from config.

        Also applies the configured log level.
        """
        configure_logging(config.log_level)
        return cls(
            config=config,
            languages=LanguageRegistry.from_config(config),
            users=users if users is not None else UserRegistry(),
            blueprints=blueprints
            if blueprints is not None
            else BlueprintRegistry(root=config.blueprints_root),
        )

    def storage_for(self, model: ModelWithContent) -> PlainTextContentStorageHandler:
        return PlainTextContentStorageHandler(model, self.config)

    def site(self) -> SiteModel:
        return SiteModel(context=self, root=self.config.content_root)

    def page(
        self,
        page_path: str,
        template: str = DEFAULT_BLUEPRINT_NAME,
        draft: bool = False,
    ) -> PageModel:
        """Return the page model for a slash separated path.

        Args:
            page_path: Page id such as ``blog/hello``.
            template: Intended template name.
            draft: Whether the page lives in its parent's drafts folder.

        Raises:
            FolioLogicError: If the path is empty or escapes the content root.
        """
        parts = PurePosixPath(page_path.strip("/")).parts
        if not parts or any(part in ("..", ".") for part in parts):
            raise FolioLogicError(
                f"Invalid page path '{page_path}'. Use a relative path such as 'blog/hello'."
            )
        parent = self.config.content_root.joinpath(*parts[:-1])
        if draft:
            parent = parent / DRAFTS_DIR_NAME
        return PageModel(context=self, root=parent / parts[-1], template=template, is_draft=draft)

    def file(
        self,
        parent: PageModel | SiteModel,
        filename: str,
        template: str | None = None,
    ) -> FileModel:
        """Return the model of a file stored in a page or site folder."""
        if not filename or "/" in filename or filename in ("..", "."):
            raise FolioLogicError(f"Invalid filename '{filename}'. Use a plain file name.")
        return FileModel(context=self, root=parent.root / filename, template=template)

    def user(self, user_id: str) -> UserModel:
        """Return the content model of a registered user.

        Raises:
            FolioNotFoundError: If the user id is unknown.
        """
        user = self.users.find(user_id)
        if user is None:
            raise FolioNotFoundError(
                f"User '{user_id}' does not exist. Register the user before editing content."
            )
        return UserModel(
            context=self,
            root=self.config.resolved_accounts_root / user.id,
            user=user,
        )
