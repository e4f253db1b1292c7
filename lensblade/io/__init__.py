from .yaml_loader import load_texture, build_texture, texture_to_config, save_texture

__all__ = ['load_texture', 'build_texture', 'texture_to_config', 'save_texture']
