"""Utility functions for configuration."""

from solar_sim.utils.config import Config, bodies_from_config, body_from_dict, load_config, save_config

__all__ = ["Config", "load_config", "save_config", "body_from_dict", "bodies_from_config"]
