"""Profile form controller.

Holds the editable draft of the account page and orchestrates the calls to
the profile API. Nothing here is authoritative: the server validates every
submission again.
"""

import base64
from dataclasses import dataclass
from typing import Protocol

import structlog

from client.api import ProfileApiClient
from client.notices import NoticeBoard
from client.results import Err, ErrorKind, Result

logger = structlog.get_logger()

# Shown when the account has no avatar; never submitted back
PLACEHOLDER_AVATAR_URL = "https://assets.aceternity.com/manu.png"
HOME_PATH = "/"
DELETE_CONFIRMATION = (
    "Are you sure you want to delete your account? This action is irreversible."
)


class Confirmer(Protocol):
    """Blocking yes/no prompt."""

    async def confirm(self, message: str) -> bool: ...


class Navigator(Protocol):
    async def navigate(self, path: str) -> None: ...


class AvatarUploader(Protocol):
    """Stores raw image bytes and returns a stable reference (usually a URL)."""

    async def upload(self, data: bytes, content_type: str, filename: str | None = None) -> str: ...


def to_data_url(data: bytes, content_type: str) -> str:
    encoded = base64.b64encode(data).decode("ascii")
    return f"data:{content_type};base64,{encoded}"


@dataclass
class ProfileDraft:
    name: str = ""
    email: str = ""
    image: str | None = None
    new_password: str = ""


@dataclass
class PendingAvatar:
    data: bytes
    content_type: str
    filename: str | None = None


class ProfileFormController:
    """State and actions of the account settings form."""

    def __init__(
        self,
        api: ProfileApiClient,
        confirmer: Confirmer,
        navigator: Navigator,
        notices: NoticeBoard | None = None,
        avatar_uploader: AvatarUploader | None = None,
    ) -> None:
        self._api = api
        self._confirmer = confirmer
        self._navigator = navigator
        self._uploader = avatar_uploader
        self.notices = notices or NoticeBoard()

        self.draft = ProfileDraft()
        self.pending_avatar: PendingAvatar | None = None
        self.loading = False
        self.load_error: Err | None = None
        self.saving = False
        self.deleting = False

    @property
    def avatar_preview(self) -> str:
        return self.draft.image or PLACEHOLDER_AVATAR_URL

    @property
    def can_submit(self) -> bool:
        return not (self.loading or self.saving or self.load_error)

    @property
    def can_delete(self) -> bool:
        return not (self.loading or self.deleting)

    async def load(self) -> Result:
        """Fetch the profile and replace the draft wholesale."""
        self.loading = True
        try:
            result = await self._api.fetch_profile()
        finally:
            self.loading = False

        if isinstance(result, Err):
            self.load_error = result
            self.notices.error("Could not load your profile data.", sticky=True)
            return result

        profile = result.value
        self.load_error = None
        self.pending_avatar = None
        self.draft = ProfileDraft(name=profile.name, email=profile.email, image=profile.image)
        return result

    def set_name(self, name: str) -> None:
        self.draft.name = name

    def set_new_password(self, password: str) -> None:
        self.draft.new_password = password

    def change_avatar(
        self, data: bytes, content_type: str, filename: str | None = None
    ) -> str:
        """Show the selected image immediately; upload happens on submit."""
        self.pending_avatar = PendingAvatar(data, content_type, filename)
        self.draft.image = to_data_url(data, content_type)
        return self.draft.image

    async def submit(self) -> Result | None:
        """Send the full draft.

        Returns None when suppressed: a save is pending, or the profile is
        still loading or failed to load (the draft would blank stored fields).
        """
        if self.saving:
            logger.debug("profile_submit_suppressed", reason="saving")
            return None
        if self.loading or self.load_error is not None:
            logger.debug("profile_submit_suppressed", reason="not_loaded")
            return None

        if not self.draft.name.strip():
            self.notices.error("Name is required.")
            return Err(ErrorKind.INVALID_ARGUMENT, "Name is required")

        self.saving = True
        try:
            image = self.draft.image
            if self.pending_avatar is not None and self._uploader is not None:
                avatar = self.pending_avatar
                try:
                    image = await self._uploader.upload(
                        avatar.data, avatar.content_type, avatar.filename
                    )
                except Exception as exc:
                    logger.warning("avatar_upload_failed", error=str(exc))
                    self.notices.error("Your new photo could not be uploaded.")
                    return Err(ErrorKind.UNEXPECTED, "Avatar upload failed")

            result = await self._api.update_profile(
                name=self.draft.name,
                password=self.draft.new_password or None,
                image=image,
            )
        finally:
            self.saving = False

        if isinstance(result, Err):
            self.notices.error(
                result.message or "An error occurred while updating your profile."
            )
            return result

        self.draft.image = image
        self.pending_avatar = None
        self.draft.new_password = ""
        self.notices.success("Profile updated successfully!")
        return result

    async def delete_account(self) -> Result | None:
        """Confirm, then delete. Returns None when declined or already pending."""
        if self.deleting:
            logger.debug("account_delete_suppressed")
            return None
        if not await self._confirmer.confirm(DELETE_CONFIRMATION):
            return None

        self.deleting = True
        try:
            result = await self._api.delete_profile()
        finally:
            self.deleting = False

        if isinstance(result, Err):
            self.notices.error("An error occurred while deleting your account.")
            return result

        self.notices.success("Account deleted successfully.")
        await self._navigator.navigate(HOME_PATH)
        return result
