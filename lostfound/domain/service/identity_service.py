"""Identity resolution domain service.

Resolves the references a comment carries (item, author, mentioned
handles) against the users and items owned by other collaborators.
"""

from typing import Iterable, Sequence

import logfire

from lostfound.config import MentionSettings
from lostfound.domain.model.item import Item
from lostfound.domain.model.user import User
from lostfound.domain.repository import ItemRepository, UserRepository
from lostfound.domain.value import ItemId, UserId

from .base import Service


class IdentityService(Service):
    """Domain service for looking up users and items."""

    def __init__(
        self,
        user_repository: UserRepository,
        item_repository: ItemRepository,
        mention_settings: MentionSettings,
    ) -> None:
        """Initialize identity service.

        Args:
            user_repository: User repository
            item_repository: Item repository
            mention_settings: Mention matching configuration
        """
        self.user_repository = user_repository
        self.item_repository = item_repository
        self.mention_settings = mention_settings

    async def item_exists(self, item_id: ItemId) -> bool:
        """Check whether an item exists."""
        exists = await self.item_repository.exists(item_id)
        if not exists:
            logfire.warn("Item not found", item_id=str(item_id))
        return exists

    async def user_exists(self, user_id: UserId) -> bool:
        """Check whether a user exists."""
        exists = await self.user_repository.exists(user_id)
        if not exists:
            logfire.warn("User not found", user_id=str(user_id))
        return exists

    async def get_users(self, user_ids: Iterable[UserId]) -> dict[UserId, User]:
        """Get several users by ID with a single query.

        Args:
            user_ids: IDs to look up (duplicates allowed)

        Returns:
            Mapping of found IDs to users; unknown IDs are absent
        """
        unique_ids = list(dict.fromkeys(user_ids))
        if not unique_ids:
            return {}
        users = await self.user_repository.find_by_ids(unique_ids)
        return {user.id: user for user in users}

    async def get_items(self, item_ids: Iterable[ItemId]) -> dict[ItemId, Item]:
        """Get several items by ID with a single query.

        Args:
            item_ids: IDs to look up (duplicates allowed)

        Returns:
            Mapping of found IDs to items; unknown IDs are absent
        """
        unique_ids = list(dict.fromkeys(item_ids))
        if not unique_ids:
            return {}
        items = await self.item_repository.find_by_ids(unique_ids)
        return {item.id: item for item in items}

    async def resolve_handles(self, handles: Sequence[str]) -> list[User]:
        """Resolve mentioned handles to registered users.

        Handles without a matching user are dropped silently: an unmatched
        "@word" is just text. When matching ignores case and several users
        share a handle up to case, the user whose handle matches exactly
        wins, then the lowest username in code point order.

        Args:
            handles: Handles in order of appearance, duplicates allowed

        Returns:
            Matching users in order of first mention, each at most once
        """
        if not handles:
            return []

        case_sensitive = self.mention_settings.case_sensitive

        def key(handle: str) -> str:
            return handle if case_sensitive else handle.lower()

        with logfire.span(
            "identity_service.resolve_handles",
            handle_count=len(handles),
            case_sensitive=case_sensitive,
        ):
            distinct = list(dict.fromkeys(handles))
            users = await self.user_repository.find_by_usernames(
                distinct, case_sensitive=case_sensitive
            )
            by_handle: dict[str, list[User]] = {}
            for user in sorted(users, key=lambda u: u.username.root):
                by_handle.setdefault(key(user.username.root), []).append(user)

            resolved: dict[UserId, User] = {}
            for handle in distinct:
                candidates = by_handle.get(key(handle))
                if not candidates:
                    continue
                user = next(
                    (c for c in candidates if c.username.root == handle),
                    candidates[0],
                )
                if user.id not in resolved:
                    resolved[user.id] = user

            logfire.info(
                "Mentions resolved",
                requested=len(distinct),
                resolved=len(resolved),
            )
            return list(resolved.values())
