""" Low level wrappers around discord's endpoints, one class per REST
resource. Every method performs exactly one request and returns the
decoded JSON, raising `snowrest.rest.errors.HTTPException` on failure.
Only the endpoints used by the entity handles are covered.
"""

from typing import Any, List, Mapping, Optional

import attr

from ..snowflake import Snowflake
from .builders import JSONBuilder, ParamsBuilder
from .route import Route
from .router import Router

__all__ = (
    "Service",
    "ApplicationService",
    "AuditLogService",
    "ChannelService",
    "EmojiService",
    "GatewayService",
    "GuildService",
    "InviteService",
    "UserService",
    "VoiceService",
    "WebhookService",
)

Payload = Mapping[str, Any]


@attr.define
class Service:
    """Base class of the services, holds the shared router."""

    router: Router = attr.field()
    """ The router shared by every service of a client """

    async def _call(
        self,
        route: Route,
        *,
        json: Optional[Payload] = None,
        params: Optional[Mapping[str, Any]] = None,
        reason: Optional[str] = None,
    ) -> Any:
        return await self.router.request_json(
            route=route,
            json=JSONBuilder.from_mapping(json) if json is not None else None,
            params=(
                ParamsBuilder.from_mapping(params) if params is not None else None
            ),
            reason=reason,
        )


class ApplicationService(Service):
    async def get_current_application_info(self) -> Payload:
        """Fetch the application that owns the bot token.

        Returns
        -------
        typing.Mapping[builtins.str, typing.Any]
            The application object.
        """

        return await self._call(Route("GET", "/oauth2/applications/@me"))


class AuditLogService(Service):
    async def get_guild_audit_log(
        self, guild_id: Snowflake, params: Optional[Mapping[str, Any]] = None
    ) -> Payload:
        """Fetch the audit log of a guild.

        Parameters
        ----------
        guild_id : snowrest.snowflake.Snowflake
            The guild.
        params : typing.Optional[typing.Mapping[builtins.str, typing.Any]]
            Filters: `user_id`, `action_type`, `before`, `after` and
            `limit` (at most 100).

        Returns
        -------
        typing.Mapping[builtins.str, typing.Any]
            The audit log object, the entries are under
            `audit_log_entries`.
        """

        return await self._call(
            Route("GET", "/guilds/{guild_id}/audit-logs", guild_id=guild_id),
            params=params,
        )


class ChannelService(Service):
    async def get_channel(self, channel_id: Snowflake) -> Payload:
        """Fetch a channel by its id.

        Parameters
        ----------
        channel_id : snowrest.snowflake.Snowflake
            The channel.

        Returns
        -------
        typing.Mapping[builtins.str, typing.Any]
            The channel object.
        """

        return await self._call(
            Route("GET", "/channels/{channel_id}", channel_id=channel_id)
        )

    async def modify_channel(
        self,
        channel_id: Snowflake,
        request: Payload,
        reason: Optional[str] = None,
    ) -> Payload:
        """Update the settings of a channel.

        Parameters
        ----------
        channel_id : snowrest.snowflake.Snowflake
            The channel.
        request : typing.Mapping[builtins.str, typing.Any]
            The fields to change.
        reason : typing.Optional[builtins.str]
            Shown in the audit log.

        Returns
        -------
        typing.Mapping[builtins.str, typing.Any]
            The updated channel object.
        """

        return await self._call(
            Route("PATCH", "/channels/{channel_id}", channel_id=channel_id),
            json=request,
            reason=reason,
        )

    async def delete_channel(
        self, channel_id: Snowflake, reason: Optional[str] = None
    ) -> Payload:
        """Delete a channel, or close a private one.

        Returns
        -------
        typing.Mapping[builtins.str, typing.Any]
            The deleted channel object.
        """

        return await self._call(
            Route("DELETE", "/channels/{channel_id}", channel_id=channel_id),
            reason=reason,
        )

    async def get_message(
        self, channel_id: Snowflake, message_id: Snowflake
    ) -> Payload:
        """Fetch a single message of a channel.

        Parameters
        ----------
        channel_id : snowrest.snowflake.Snowflake
            The channel the message was sent in.
        message_id : snowrest.snowflake.Snowflake
            The message.

        Returns
        -------
        typing.Mapping[builtins.str, typing.Any]
            The message object.
        """

        return await self._call(
            Route(
                "GET",
                "/channels/{channel_id}/messages/{message_id}",
                channel_id=channel_id,
                message_id=message_id,
            )
        )

    async def create_message(
        self, channel_id: Snowflake, request: Payload
    ) -> Payload:
        """Send a message to a channel.

        Parameters
        ----------
        channel_id : snowrest.snowflake.Snowflake
            The channel to send to.
        request : typing.Mapping[builtins.str, typing.Any]
            The message body (`content`, `embeds`, ...).

        Returns
        -------
        typing.Mapping[builtins.str, typing.Any]
            The created message object.
        """

        return await self._call(
            Route("POST", "/channels/{channel_id}/messages", channel_id=channel_id),
            json=request,
        )

    async def edit_message(
        self, channel_id: Snowflake, message_id: Snowflake, request: Payload
    ) -> Payload:
        """Edit a message previously sent by the bot.

        Returns
        -------
        typing.Mapping[builtins.str, typing.Any]
            The updated message object.
        """

        return await self._call(
            Route(
                "PATCH",
                "/channels/{channel_id}/messages/{message_id}",
                channel_id=channel_id,
                message_id=message_id,
            ),
            json=request,
        )

    async def delete_message(
        self,
        channel_id: Snowflake,
        message_id: Snowflake,
        reason: Optional[str] = None,
    ) -> None:
        """Delete a message. Discord answers with no content."""

        await self._call(
            Route(
                "DELETE",
                "/channels/{channel_id}/messages/{message_id}",
                channel_id=channel_id,
                message_id=message_id,
            ),
            reason=reason,
        )


class EmojiService(Service):
    async def get_guild_emoji(
        self, guild_id: Snowflake, emoji_id: Snowflake
    ) -> Payload:
        """Fetch a custom emoji of a guild.

        Parameters
        ----------
        guild_id : snowrest.snowflake.Snowflake
            The guild that owns the emoji.
        emoji_id : snowrest.snowflake.Snowflake
            The emoji.

        Returns
        -------
        typing.Mapping[builtins.str, typing.Any]
            The emoji object.
        """

        return await self._call(
            Route(
                "GET",
                "/guilds/{guild_id}/emojis/{emoji_id}",
                guild_id=guild_id,
                emoji_id=emoji_id,
            )
        )

    async def modify_guild_emoji(
        self,
        guild_id: Snowflake,
        emoji_id: Snowflake,
        request: Payload,
        reason: Optional[str] = None,
    ) -> Payload:
        """Rename an emoji or change the roles allowed to use it.

        Returns
        -------
        typing.Mapping[builtins.str, typing.Any]
            The updated emoji object.
        """

        return await self._call(
            Route(
                "PATCH",
                "/guilds/{guild_id}/emojis/{emoji_id}",
                guild_id=guild_id,
                emoji_id=emoji_id,
            ),
            json=request,
            reason=reason,
        )

    async def delete_guild_emoji(
        self,
        guild_id: Snowflake,
        emoji_id: Snowflake,
        reason: Optional[str] = None,
    ) -> None:
        """Delete a custom emoji."""

        await self._call(
            Route(
                "DELETE",
                "/guilds/{guild_id}/emojis/{emoji_id}",
                guild_id=guild_id,
                emoji_id=emoji_id,
            ),
            reason=reason,
        )


class GatewayService(Service):
    """The REST endpoints that describe the gateway. Connecting to it
    is out of this package's reach.
    """

    async def get_gateway(self) -> Payload:
        """Fetch the gateway URL.

        Returns
        -------
        typing.Mapping[builtins.str, typing.Any]
            A mapping with the `url` key.
        """

        return await self._call(Route("GET", "/gateway"))

    async def get_gateway_bot(self) -> Payload:
        """Fetch the gateway URL along with the recommended shard count
        and the session start limits of the bot.

        Returns
        -------
        typing.Mapping[builtins.str, typing.Any]
            A mapping with `url`, `shards` and `session_start_limit`.
        """

        return await self._call(Route("GET", "/gateway/bot"))


class GuildService(Service):
    async def create_guild(self, request: Payload) -> Payload:
        """Create a guild owned by the bot.

        Parameters
        ----------
        request : typing.Mapping[builtins.str, typing.Any]
            The guild settings, `name` is required.

        Returns
        -------
        typing.Mapping[builtins.str, typing.Any]
            The created guild object.
        """

        return await self._call(Route("POST", "/guilds"), json=request)

    async def get_guild(self, guild_id: Snowflake) -> Payload:
        """Fetch a guild by its id.

        Returns
        -------
        typing.Mapping[builtins.str, typing.Any]
            The guild object.
        """

        return await self._call(Route("GET", "/guilds/{guild_id}", guild_id=guild_id))

    async def get_guild_member(
        self, guild_id: Snowflake, user_id: Snowflake
    ) -> Payload:
        """Fetch a member of a guild.

        Parameters
        ----------
        guild_id : snowrest.snowflake.Snowflake
            The guild.
        user_id : snowrest.snowflake.Snowflake
            The user the member represents.

        Returns
        -------
        typing.Mapping[builtins.str, typing.Any]
            The member object, the user is nested under `user`.
        """

        return await self._call(
            Route(
                "GET",
                "/guilds/{guild_id}/members/{user_id}",
                guild_id=guild_id,
                user_id=user_id,
            )
        )

    async def get_guild_members(
        self, guild_id: Snowflake, params: Mapping[str, Any]
    ) -> List[Payload]:
        """One page of members, ordered by user id.

        Parameters
        ----------
        guild_id : snowrest.snowflake.Snowflake
            The guild.
        params : typing.Mapping[builtins.str, typing.Any]
            `after` (a user id) and `limit` (at most 1000).

        Returns
        -------
        typing.List[typing.Mapping[builtins.str, typing.Any]]
            The member objects, empty past the last member.
        """

        return await self._call(
            Route("GET", "/guilds/{guild_id}/members", guild_id=guild_id),
            params=params,
        )

    async def modify_guild_member(
        self,
        guild_id: Snowflake,
        user_id: Snowflake,
        request: Payload,
        reason: Optional[str] = None,
    ) -> Payload:
        """Change the nickname, roles or voice state of a member.

        Returns
        -------
        typing.Mapping[builtins.str, typing.Any]
            The updated member object.
        """

        return await self._call(
            Route(
                "PATCH",
                "/guilds/{guild_id}/members/{user_id}",
                guild_id=guild_id,
                user_id=user_id,
            ),
            json=request,
            reason=reason,
        )

    async def remove_guild_member(
        self,
        guild_id: Snowflake,
        user_id: Snowflake,
        reason: Optional[str] = None,
    ) -> None:
        """Kick a member out of the guild."""

        await self._call(
            Route(
                "DELETE",
                "/guilds/{guild_id}/members/{user_id}",
                guild_id=guild_id,
                user_id=user_id,
            ),
            reason=reason,
        )

    async def get_guild_roles(self, guild_id: Snowflake) -> List[Payload]:
        """Fetch every role of a guild.

        Returns
        -------
        typing.List[typing.Mapping[builtins.str, typing.Any]]
            The role objects, `@everyone` included.
        """

        return await self._call(
            Route("GET", "/guilds/{guild_id}/roles", guild_id=guild_id)
        )

    async def modify_guild_role(
        self,
        guild_id: Snowflake,
        role_id: Snowflake,
        request: Payload,
        reason: Optional[str] = None,
    ) -> Payload:
        """Change the name, permissions or colour of a role.

        Returns
        -------
        typing.Mapping[builtins.str, typing.Any]
            The updated role object.
        """

        return await self._call(
            Route(
                "PATCH",
                "/guilds/{guild_id}/roles/{role_id}",
                guild_id=guild_id,
                role_id=role_id,
            ),
            json=request,
            reason=reason,
        )

    async def delete_guild_role(
        self,
        guild_id: Snowflake,
        role_id: Snowflake,
        reason: Optional[str] = None,
    ) -> None:
        """Delete a role."""

        await self._call(
            Route(
                "DELETE",
                "/guilds/{guild_id}/roles/{role_id}",
                guild_id=guild_id,
                role_id=role_id,
            ),
            reason=reason,
        )


class InviteService(Service):
    async def get_invite(self, invite_code: str) -> Payload:
        """Resolve an invite code.

        Parameters
        ----------
        invite_code : builtins.str
            The code, without the `discord.gg/` prefix.

        Returns
        -------
        typing.Mapping[builtins.str, typing.Any]
            The invite object.
        """

        return await self._call(
            Route("GET", "/invites/{invite_code}", invite_code=invite_code)
        )


class UserService(Service):
    async def get_current_user(self) -> Payload:
        """Fetch the user of the bot token.

        Returns
        -------
        typing.Mapping[builtins.str, typing.Any]
            The user object.
        """

        return await self._call(Route("GET", "/users/@me"))

    async def get_user(self, user_id: Snowflake) -> Payload:
        """Fetch any user by its id.

        Returns
        -------
        typing.Mapping[builtins.str, typing.Any]
            The user object.
        """

        return await self._call(Route("GET", "/users/{user_id}", user_id=user_id))

    async def modify_current_user(self, request: Payload) -> Payload:
        """Change the username or avatar of the bot.

        Parameters
        ----------
        request : typing.Mapping[builtins.str, typing.Any]
            `username` and/or `avatar` (a data URI).

        Returns
        -------
        typing.Mapping[builtins.str, typing.Any]
            The updated user object.
        """

        return await self._call(Route("PATCH", "/users/@me"), json=request)

    async def get_current_user_guilds(
        self, params: Mapping[str, Any]
    ) -> List[Payload]:
        """One page of the guilds the current user is in.

        Parameters
        ----------
        params : typing.Mapping[builtins.str, typing.Any]
            `after` (a guild id) and `limit` (at most 200).

        Returns
        -------
        typing.List[typing.Mapping[builtins.str, typing.Any]]
            Partial guild objects, empty past the last guild.
        """

        return await self._call(Route("GET", "/users/@me/guilds"), params=params)


class VoiceService(Service):
    async def get_voice_regions(self) -> List[Payload]:
        """Fetch the voice regions that can be picked for a channel.

        Returns
        -------
        typing.List[typing.Mapping[builtins.str, typing.Any]]
            The voice region objects.
        """

        return await self._call(Route("GET", "/voice/regions"))


class WebhookService(Service):
    async def get_webhook(self, webhook_id: Snowflake) -> Payload:
        """Fetch a webhook by its id.

        Returns
        -------
        typing.Mapping[builtins.str, typing.Any]
            The webhook object.
        """

        return await self._call(
            Route("GET", "/webhooks/{webhook_id}", webhook_id=webhook_id)
        )

    async def modify_webhook(
        self,
        webhook_id: Snowflake,
        request: Payload,
        reason: Optional[str] = None,
    ) -> Payload:
        """Rename a webhook, change its avatar or move it to another
        channel.

        Returns
        -------
        typing.Mapping[builtins.str, typing.Any]
            The updated webhook object.
        """

        return await self._call(
            Route("PATCH", "/webhooks/{webhook_id}", webhook_id=webhook_id),
            json=request,
            reason=reason,
        )

    async def delete_webhook(
        self, webhook_id: Snowflake, reason: Optional[str] = None
    ) -> None:
        """Delete a webhook."""

        await self._call(
            Route("DELETE", "/webhooks/{webhook_id}", webhook_id=webhook_id),
            reason=reason,
        )
