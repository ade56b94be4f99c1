import pytest
from unittest.mock import AsyncMock, MagicMock

import discord


@pytest.fixture
def interaction():
    interaction = MagicMock(spec=discord.Interaction)
    interaction.id = 1001
    interaction.channel_id = 111
    interaction.data = {
        "type": discord.AppCommandType.message.value,
        "target_id": "42",
        "name": "Pin this message",
    }
    interaction.user = MagicMock()
    interaction.user.name = "toast"
    interaction.user.id = 555
    return interaction


@pytest.fixture
def rest():
    rest = MagicMock()
    rest.request = AsyncMock()
    return rest
