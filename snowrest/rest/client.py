from __future__ import annotations

from typing import Any, AsyncIterator, Final, List, Mapping

import aiohttp
import attr

from ..snowflake import Snowflake
from .entities import (
    RestChannel,
    RestEmoji,
    RestGuild,
    RestMember,
    RestMessage,
    RestRole,
    RestUser,
    RestWebhook,
)
from .pagination import paginate_after
from .router import Router
from .services import (
    ApplicationService,
    AuditLogService,
    ChannelService,
    EmojiService,
    GatewayService,
    GuildService,
    InviteService,
    UserService,
    VoiceService,
    WebhookService,
)

__all__ = ("RestClient",)

GUILDS_PAGE_SIZE: Final[int] = 100

Payload = Mapping[str, Any]


def _record_id(data: Payload) -> int:
    return Snowflake.as_int(data["id"])


@attr.define(eq=False, init=False)
class RestClient:
    """Aggregation of every REST resource. Each resource has its own
    service, all of them share one `Router`. Prefer the handle
    factories (`get_guild_by_id`, `rest_channel`, ...) over calling
    the services directly.
    """

    router: Router = attr.field()
    """ The router every service sends its requests through """

    application_service: ApplicationService = attr.field()
    audit_log_service: AuditLogService = attr.field()
    channel_service: ChannelService = attr.field()
    emoji_service: EmojiService = attr.field()
    gateway_service: GatewayService = attr.field()
    guild_service: GuildService = attr.field()
    invite_service: InviteService = attr.field()
    user_service: UserService = attr.field()
    voice_service: VoiceService = attr.field()
    webhook_service: WebhookService = attr.field()

    def __init__(self, router: Router):
        self.router = router

        self.application_service = ApplicationService(router)
        self.audit_log_service = AuditLogService(router)
        self.channel_service = ChannelService(router)
        self.emoji_service = EmojiService(router)
        self.gateway_service = GatewayService(router)
        self.guild_service = GuildService(router)
        self.invite_service = InviteService(router)
        self.user_service = UserService(router)
        self.voice_service = VoiceService(router)
        self.webhook_service = WebhookService(router)

    @classmethod
    def create(
        cls, session: aiohttp.ClientSession, token: str, **options: Any
    ) -> RestClient:
        """Create a client with a default router.

        Parameters
        ----------
        session : aiohttp.ClientSession
            The session to send requests with, it is not closed by
            the client.
        token : builtins.str
            The bot token.
        **options : typing.Any
            Extra `Router` fields (`user_agent`, `base_url`).

        Returns
        -------
        snowrest.rest.client.RestClient
        """

        return cls(Router(session=session, token=token, **options))

    def get_channel_by_id(self, channel_id: Snowflake) -> RestChannel:
        return RestChannel(self, channel_id)

    def rest_channel(self, data: Payload) -> RestChannel:
        return RestChannel(self, data["id"])

    def get_guild_by_id(self, guild_id: Snowflake) -> RestGuild:
        return RestGuild(self, guild_id)

    def rest_guild(self, data: Payload) -> RestGuild:
        return RestGuild(self, data["id"])

    def get_guild_emoji_by_id(
        self, guild_id: Snowflake, emoji_id: Snowflake
    ) -> RestEmoji:
        return RestEmoji(self, guild_id, emoji_id)

    def rest_guild_emoji(self, guild_id: Snowflake, data: Payload) -> RestEmoji:
        return RestEmoji(self, guild_id, data["id"])

    def get_member_by_id(self, guild_id: Snowflake, user_id: Snowflake) -> RestMember:
        return RestMember(self, guild_id, user_id)

    def rest_member(self, guild_id: Snowflake, data: Payload) -> RestMember:
        return RestMember(self, guild_id, data["user"]["id"])

    def get_message_by_id(
        self, channel_id: Snowflake, message_id: Snowflake
    ) -> RestMessage:
        return RestMessage(self, channel_id, message_id)

    def rest_message(self, data: Payload) -> RestMessage:
        return RestMessage(self, data["channel_id"], data["id"])

    def get_role_by_id(self, guild_id: Snowflake, role_id: Snowflake) -> RestRole:
        return RestRole(self, guild_id, role_id)

    def rest_role(self, guild_id: Snowflake, data: Payload) -> RestRole:
        return RestRole(self, guild_id, data["id"])

    def get_user_by_id(self, user_id: Snowflake) -> RestUser:
        return RestUser(self, user_id)

    def rest_user(self, data: Payload) -> RestUser:
        return RestUser(self, data["id"])

    def get_webhook_by_id(self, webhook_id: Snowflake) -> RestWebhook:
        return RestWebhook(self, webhook_id)

    def rest_webhook(self, data: Payload) -> RestWebhook:
        return RestWebhook(self, data["id"])

    async def get_application_info(self) -> Payload:
        return await self.application_service.get_current_application_info()

    def get_guilds(self) -> AsyncIterator[Payload]:
        """Iterate over every guild the current user is in, requesting
        them 100 at a time as the iteration goes.

        Returns
        -------
        typing.AsyncIterator[typing.Mapping[builtins.str, typing.Any]]
            The partial guild objects, a failed request is raised
            from the iteration.
        """

        return paginate_after(
            self.user_service.get_current_user_guilds, _record_id, 0, GUILDS_PAGE_SIZE
        )

    async def get_regions(self) -> List[Payload]:
        return await self.voice_service.get_voice_regions()

    async def get_self(self) -> Payload:
        return await self.user_service.get_current_user()

    async def create_guild(self, request: Payload) -> Payload:
        return await self.guild_service.create_guild(request)

    async def get_invite(self, invite_code: str) -> Payload:
        return await self.invite_service.get_invite(invite_code)

    async def edit(self, request: Payload) -> Payload:
        """Modify the current user (username, avatar)."""

        return await self.user_service.modify_current_user(request)
