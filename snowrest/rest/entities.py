""" Handles for single REST resources. A handle only knows the ids
needed to address its resource, creating one never touches the
network. The data is fetched on demand through the client's services.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, AsyncIterator, Final, List, Mapping, Optional

import attr

from ..snowflake import Snowflake
from .pagination import paginate_after

if TYPE_CHECKING:
    from .client import RestClient

__all__ = (
    "RestChannel",
    "RestEmoji",
    "RestGuild",
    "RestMember",
    "RestMessage",
    "RestRole",
    "RestUser",
    "RestWebhook",
)

MEMBERS_PAGE_SIZE: Final[int] = 1000

Payload = Mapping[str, Any]


def _member_id(data: Payload) -> int:
    return Snowflake.as_int(data["user"]["id"])


@attr.frozen
class RestUser:
    """A user, addressed by its id."""

    client: RestClient = attr.field(repr=False)
    id: Snowflake = attr.field(converter=Snowflake.of)

    async def get_data(self) -> Payload:
        return await self.client.user_service.get_user(self.id)


@attr.frozen
class RestChannel:
    """A guild or private channel."""

    client: RestClient = attr.field(repr=False)
    id: Snowflake = attr.field(converter=Snowflake.of)

    async def get_data(self) -> Payload:
        return await self.client.channel_service.get_channel(self.id)

    async def modify(self, request: Payload, reason: Optional[str] = None) -> Payload:
        return await self.client.channel_service.modify_channel(
            self.id, request, reason
        )

    async def delete(self, reason: Optional[str] = None) -> Payload:
        return await self.client.channel_service.delete_channel(self.id, reason)

    def message(self, message_id: Snowflake) -> RestMessage:
        """Handle for a message of this channel."""

        return RestMessage(self.client, self.id, message_id)

    async def create_message(self, request: Payload) -> Payload:
        return await self.client.channel_service.create_message(self.id, request)


@attr.frozen
class RestMessage:
    """A message, addressed by its channel and its own id."""

    client: RestClient = attr.field(repr=False)
    channel_id: Snowflake = attr.field(converter=Snowflake.of)
    id: Snowflake = attr.field(converter=Snowflake.of)

    async def get_data(self) -> Payload:
        return await self.client.channel_service.get_message(self.channel_id, self.id)

    def channel(self) -> RestChannel:
        return RestChannel(self.client, self.channel_id)

    async def edit(self, request: Payload) -> Payload:
        return await self.client.channel_service.edit_message(
            self.channel_id, self.id, request
        )

    async def delete(self, reason: Optional[str] = None) -> None:
        await self.client.channel_service.delete_message(
            self.channel_id, self.id, reason
        )


@attr.frozen
class RestGuild:
    """A guild. Members, roles and emojis are reached through it."""

    client: RestClient = attr.field(repr=False)
    id: Snowflake = attr.field(converter=Snowflake.of)

    async def get_data(self) -> Payload:
        return await self.client.guild_service.get_guild(self.id)

    def member(self, user_id: Snowflake) -> RestMember:
        return RestMember(self.client, self.id, user_id)

    def role(self, role_id: Snowflake) -> RestRole:
        return RestRole(self.client, self.id, role_id)

    def emoji(self, emoji_id: Snowflake) -> RestEmoji:
        return RestEmoji(self.client, self.id, emoji_id)

    def get_members(self) -> AsyncIterator[Payload]:
        """Iterate over every member of the guild, ordered by user id.
        Needs the `GUILD_MEMBERS` intent to be enabled for the bot.
        """

        async def fetch(params: Mapping[str, Any]) -> List[Payload]:
            return await self.client.guild_service.get_guild_members(self.id, params)

        return paginate_after(fetch, _member_id, 0, MEMBERS_PAGE_SIZE)

    async def get_roles(self) -> List[Payload]:
        return await self.client.guild_service.get_guild_roles(self.id)

    async def get_audit_log(
        self, params: Optional[Mapping[str, Any]] = None
    ) -> Payload:
        """Fetch the audit log of the guild, `params` filters the
        entries (`user_id`, `action_type`, `before`, `limit`).
        """

        return await self.client.audit_log_service.get_guild_audit_log(
            self.id, params
        )


@attr.frozen
class RestMember:
    """A user in the context of a guild."""

    client: RestClient = attr.field(repr=False)
    guild_id: Snowflake = attr.field(converter=Snowflake.of)
    id: Snowflake = attr.field(converter=Snowflake.of)

    async def get_data(self) -> Payload:
        return await self.client.guild_service.get_guild_member(self.guild_id, self.id)

    def guild(self) -> RestGuild:
        return RestGuild(self.client, self.guild_id)

    def user(self) -> RestUser:
        return RestUser(self.client, self.id)

    async def modify(self, request: Payload, reason: Optional[str] = None) -> Payload:
        return await self.client.guild_service.modify_guild_member(
            self.guild_id, self.id, request, reason
        )

    async def kick(self, reason: Optional[str] = None) -> None:
        await self.client.guild_service.remove_guild_member(
            self.guild_id, self.id, reason
        )


@attr.frozen
class RestRole:
    # discord has no endpoint for a single role, `get_data` looks it up
    # in the guild's role list
    client: RestClient = attr.field(repr=False)
    guild_id: Snowflake = attr.field(converter=Snowflake.of)
    id: Snowflake = attr.field(converter=Snowflake.of)

    async def get_data(self) -> Payload:
        """Raises `LookupError` if the guild has no such role."""

        for role in await self.client.guild_service.get_guild_roles(self.guild_id):
            if Snowflake.as_int(role["id"]) == self.id.value:
                return role
        raise LookupError(f"role {self.id} not found in guild {self.guild_id}")

    async def modify(self, request: Payload, reason: Optional[str] = None) -> Payload:
        return await self.client.guild_service.modify_guild_role(
            self.guild_id, self.id, request, reason
        )

    async def delete(self, reason: Optional[str] = None) -> None:
        await self.client.guild_service.delete_guild_role(
            self.guild_id, self.id, reason
        )


@attr.frozen
class RestEmoji:
    """A custom emoji of a guild."""

    client: RestClient = attr.field(repr=False)
    guild_id: Snowflake = attr.field(converter=Snowflake.of)
    id: Snowflake = attr.field(converter=Snowflake.of)

    async def get_data(self) -> Payload:
        return await self.client.emoji_service.get_guild_emoji(self.guild_id, self.id)

    async def modify(self, request: Payload, reason: Optional[str] = None) -> Payload:
        return await self.client.emoji_service.modify_guild_emoji(
            self.guild_id, self.id, request, reason
        )

    async def delete(self, reason: Optional[str] = None) -> None:
        await self.client.emoji_service.delete_guild_emoji(
            self.guild_id, self.id, reason
        )


@attr.frozen
class RestWebhook:
    client: RestClient = attr.field(repr=False)
    id: Snowflake = attr.field(converter=Snowflake.of)

    async def get_data(self) -> Payload:
        return await self.client.webhook_service.get_webhook(self.id)

    async def modify(self, request: Payload, reason: Optional[str] = None) -> Payload:
        return await self.client.webhook_service.modify_webhook(
            self.id, request, reason
        )

    async def delete(self, reason: Optional[str] = None) -> None:
        await self.client.webhook_service.delete_webhook(self.id, reason)
