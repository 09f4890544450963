"""Gymnasium environments for Pearls."""

from __future__ import annotations

from gymnasium.envs.registration import register

# Register default Pearls environment (first bundled level)
register(
    id="Pearls-v0",
    entry_point="pearls.env.pearls_env:PearlsEnv",
)

__all__ = ["Pearls-v0"]
