import logging

import discord
from discord.ext import commands

from .config import load_config, require_token
from .pins import PIN_COMMAND_NAME, UNPIN_COMMAND_NAME, pin_message_handler, unpin_message_handler
from .responses import send_response
from .rest import DiscordRest


log = logging.getLogger(__name__)


class PinBot(commands.Bot):
    def __init__(self, rest: DiscordRest, **kwargs):
        super().__init__(**kwargs)
        self.rest = rest

    async def setup_hook(self):
        await self.rest.start()

    async def close(self):
        await self.rest.close()
        await super().close()


def build_bot(config: dict):
    rest = DiscordRest(config["token"], config["api_base_url"], config["request_timeout"])

    intents = discord.Intents.default()
    bot = PinBot(rest, command_prefix="", intents=intents)


    @bot.event
    async def on_ready():
        log.info(f"Connected => {bot.user}")

        for guild in bot.guilds:
            if not guild.me.guild_permissions.manage_messages:
                log.warning(f"Missing permissions to manage messages in {guild.name}, pins will fail")


    @bot.event
    async def on_message(message: discord.Message): # This intentionally prevents the bot checking for plaintext commands
        pass


    @bot.tree.command(
        name="sync"
    )
    async def sync(interaction: discord.Interaction):
        await interaction.response.defer(ephemeral=True)
        if not interaction.user.id == interaction.guild.owner_id:
            await interaction.edit_original_response(content="You must be an administrator to use this command")
            return
        await bot.tree.sync()
        await interaction.edit_original_response(content="Commands synced")


    @bot.tree.context_menu(
        name=PIN_COMMAND_NAME
    )
    async def pin_message_context(interaction: discord.Interaction, message: discord.Message):
        await interaction.response.defer(ephemeral=True)
        response = await pin_message_handler(interaction, bot.rest)
        await send_response(interaction, response)


    @bot.tree.context_menu(
        name=UNPIN_COMMAND_NAME
    )
    async def unpin_message_context(interaction: discord.Interaction, message: discord.Message):
        await interaction.response.defer(ephemeral=True)
        response = await unpin_message_handler(interaction, bot.rest)
        await send_response(interaction, response)


    return bot


def main():
    #- Setup
    config = load_config()
    token = require_token(config)
    bot = build_bot(config)

    #- Start
    bot.run(token, log_level=logging.getLevelName(config["log_level"]), root_logger=True)

if __name__ == "__main__":
    main()
