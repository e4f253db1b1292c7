import logging

import yaml
import numpy as np

from ..core import BladeTexture, ConstantTexture

logger = logging.getLogger(__name__)


def load_texture(filename):
    """
    Load texture from YAML configuration file.

    Args:
        filename: Path to YAML file

    Returns:
        Texture
    """
    with open(filename, 'r') as f:
        config = yaml.safe_load(f)

    logger.debug("Loaded texture config from %s", filename)
    return build_texture(config)


def build_texture(config):
    """
    Build texture from parsed config dict.

    Args:
        config: Dict from YAML, e.g. {'type': 'blade', 'blades': 6, 'angle': 0.26}

    Returns:
        Texture
    """
    if 'type' not in config:
        raise ValueError("Texture config is missing 'type'")
    ttype = config['type']

    if ttype == 'blade':
        texture = BladeTexture(
            num_blades=config.get('blades', 6),
            angle=config.get('angle'),
        )
        logger.debug("Built blade texture with %d blades at angle %g",
                     texture.num_blades, texture.angle)
        return texture
    elif ttype == 'constant':
        return ConstantTexture(np.asarray(config.get('value', 1.0), dtype=float))
    else:
        raise ValueError(f"Unknown texture type: {ttype}")


def texture_to_config(texture):
    """Convert texture into a dict suitable for YAML."""
    if isinstance(texture, BladeTexture):
        return {
            'type': 'blade',
            'blades': int(texture.num_blades),
            'angle': float(texture.angle),
        }
    elif isinstance(texture, ConstantTexture):
        return {
            'type': 'constant',
            'value': [float(c) for c in np.asarray(texture.value)],
        }
    else:
        raise TypeError(f"Cannot serialise texture of type {type(texture).__name__}")


def save_texture(texture, filename):
    """Write texture to a YAML configuration file."""
    with open(filename, 'w') as f:
        yaml.safe_dump(texture_to_config(texture), f, default_flow_style=False, sort_keys=False)

    logger.debug("Saved texture config to %s", filename)
