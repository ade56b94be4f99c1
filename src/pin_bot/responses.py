import logging
from dataclasses import dataclass

import discord


log = logging.getLogger(__name__)

UNKNOWN_ERROR_MESSAGE = "Something went wrong. Please try again later."


@dataclass
class CommandResponse:
    content: str
    ephemeral: bool = True
    is_error: bool = False
    interaction_id: int = None


def ephemeral_response(content: str):
    return CommandResponse(content=content)


def unknown_error_response(interaction_id: int):
    return CommandResponse(content=UNKNOWN_ERROR_MESSAGE, is_error=True, interaction_id=interaction_id)


async def send_response(interaction: discord.Interaction, response: CommandResponse):
    if response.is_error:
        log.info(f"Sending unknown error response for interaction {response.interaction_id}")

    if interaction.response.is_done():
        await interaction.followup.send(response.content, ephemeral=response.ephemeral)
    else:
        await interaction.response.send_message(response.content, ephemeral=response.ephemeral)
