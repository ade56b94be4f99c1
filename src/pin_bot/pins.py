import logging

import discord

from .helpers import audit_log_header, get_channel_and_message_id
from .responses import ephemeral_response, unknown_error_response
from .rest import DiscordRest, RequestError


log = logging.getLogger(__name__)

PIN_COMMAND_NAME = "Pin this message"
UNPIN_COMMAND_NAME = "Remove this pin"


class PinQueryError(Exception):
    pass


async def get_matching_pin(rest: DiscordRest, channel_id: str, message_id: str):
    """Look for a message in the pins of a channel.

    Returns the pin if found, otherwise None. Raises PinQueryError when the
    pin list could not be fetched, so a failed lookup never reads as "not pinned".
    """
    try:
        res = await rest.request(f"channels/{channel_id}/pins", method="GET")
    except RequestError as e:
        raise PinQueryError(f"Could not fetch pins for channel {channel_id}") from e

    if not isinstance(res.data, list):
        raise PinQueryError(f"Unexpected pins payload for channel {channel_id}: {type(res.data).__name__}")
    if not all(isinstance(pin, dict) for pin in res.data):
        raise PinQueryError(f"Unexpected pin entry in payload for channel {channel_id}")

    return next((pin for pin in res.data if pin.get("id") == message_id), None)


async def pin_message_handler(interaction: discord.Interaction, rest: DiscordRest):
    if interaction.data.get("type") != discord.AppCommandType.message.value:
        log.warning(f"Interaction {interaction.id} is not a message command")
        return unknown_error_response(interaction.id)

    channel_id, message_id = get_channel_and_message_id(interaction)
    try:
        matching_pin = await get_matching_pin(rest, channel_id, message_id)
    except PinQueryError as e:
        log.warning(f"Interaction {interaction.id}: {e} ({e.__cause__ or 'no detail'})")
        return unknown_error_response(interaction.id)

    if matching_pin:
        return ephemeral_response("This message was already pinned. No action taken.")

    try:
        res = await rest.request(
            f"channels/{channel_id}/pins/{message_id}",
            method="PUT",
            headers=audit_log_header(interaction),
        )
    except RequestError as e:
        log.warning(f"Interaction {interaction.id}: failed to pin {message_id} in {channel_id}: {e}")
        return unknown_error_response(interaction.id)

    if res.status != 204:
        log.warning(f"Interaction {interaction.id}: pin returned status {res.status}")
        return unknown_error_response(interaction.id)

    log.info(f"Pinned message {message_id} in channel {channel_id} for {interaction.user}")
    return ephemeral_response("Pin added successfully")


async def unpin_message_handler(interaction: discord.Interaction, rest: DiscordRest):
    channel_id, message_id = get_channel_and_message_id(interaction)
    try:
        matching_pin = await get_matching_pin(rest, channel_id, message_id)
    except PinQueryError as e:
        log.warning(f"Interaction {interaction.id}: {e} ({e.__cause__ or 'no detail'})")
        return unknown_error_response(interaction.id)

    if not matching_pin:
        return ephemeral_response("This message was not in the pins. No action taken.")

    try:
        res = await rest.request(
            f"channels/{channel_id}/pins/{message_id}",
            method="DELETE",
            headers=audit_log_header(interaction),
        )
    except RequestError as e:
        log.warning(f"Interaction {interaction.id}: failed to unpin {message_id} in {channel_id}: {e}")
        return unknown_error_response(interaction.id)

    if res.status != 204:
        log.warning(f"Interaction {interaction.id}: unpin returned status {res.status}")
        return unknown_error_response(interaction.id)

    log.info(f"Unpinned message {message_id} in channel {channel_id} for {interaction.user}")
    return ephemeral_response("Pin removed successfully")
