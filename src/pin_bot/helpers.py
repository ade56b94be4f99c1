from urllib.parse import quote

import discord


AUDIT_LOG_REASON_MAX_LENGTH = 512


def get_channel_and_message_id(interaction: discord.Interaction):
    channel_id = str(interaction.channel_id)
    message_id = str(interaction.data["target_id"])
    return channel_id, message_id


def audit_log_header(interaction: discord.Interaction):
    user = interaction.user
    command = interaction.data.get("name", "unknown command")
    reason = f"{user.name} ({user.id}) used \"{command}\""[:AUDIT_LOG_REASON_MAX_LENGTH]
    # Discord expects the reason URL encoded, spaces and slashes allowed
    return {"X-Audit-Log-Reason": quote(reason, safe="/ ")}
