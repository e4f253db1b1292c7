"""Unit tests for texture persistence."""

import logging

import numpy as np
import pytest
import yaml

from lensblade import BladeTexture, ConstantTexture, load_texture, save_texture
from lensblade.io import build_texture, texture_to_config


class TestBuildTexture:
    """Tests for building textures from config dicts."""

    def test_blade(self):
        tex = build_texture({'type': 'blade', 'blades': 8, 'angle': 0.5})
        assert isinstance(tex, BladeTexture)
        assert tex.num_blades == 8
        assert tex.angle == 0.5

    def test_blade_defaults(self):
        tex = build_texture({'type': 'blade'})
        assert tex.num_blades == 6
        assert abs(tex.angle - 0.5 * np.pi / 6) < 1e-12

    def test_blade_default_angle_follows_count(self):
        tex = build_texture({'type': 'blade', 'blades': 5})
        assert abs(tex.angle - 0.5 * np.pi / 5) < 1e-12

    def test_invalid_blade_count(self):
        with pytest.raises(ValueError):
            build_texture({'type': 'blade', 'blades': 2})

    def test_constant(self):
        tex = build_texture({'type': 'constant', 'value': [0.1, 0.2, 0.3]})
        assert isinstance(tex, ConstantTexture)
        np.testing.assert_allclose(np.asarray(tex.value), [0.1, 0.2, 0.3])

    def test_missing_type(self):
        with pytest.raises(ValueError, match="missing 'type'"):
            build_texture({'blades': 6})

    def test_unknown_type(self):
        with pytest.raises(ValueError, match="Unknown texture type"):
            build_texture({'type': 'checker'})


class TestTextureToConfig:
    """Tests for converting textures to config dicts."""

    def test_blade(self):
        config = texture_to_config(BladeTexture(7, 0.25))
        assert config == {'type': 'blade', 'blades': 7, 'angle': 0.25}

    def test_constant(self):
        config = texture_to_config(ConstantTexture(0.5))
        assert config['type'] == 'constant'
        assert config['value'] == [0.5, 0.5, 0.5]

    def test_unsupported(self):
        with pytest.raises(TypeError):
            texture_to_config(object())


class TestFiles:
    """Tests for YAML file round trips."""

    def test_save_and_load(self, tmp_path):
        filename = tmp_path / "aperture.yaml"
        save_texture(BladeTexture(5, 1.1), filename)

        with open(filename) as f:
            raw = yaml.safe_load(f)
        assert raw == {'type': 'blade', 'blades': 5, 'angle': 1.1}

        tex = load_texture(filename)
        assert tex.num_blades == 5
        assert tex.angle == 1.1
        assert tex.area == BladeTexture(5).area

    def test_load_handwritten(self, tmp_path):
        filename = tmp_path / "hexagon.yaml"
        filename.write_text("type: blade\nblades: 6\n")
        tex = load_texture(filename)
        assert tex.num_blades == 6

    def test_logs_debug(self, tmp_path, caplog):
        filename = tmp_path / "aperture.yaml"
        with caplog.at_level(logging.DEBUG, logger="lensblade.io.yaml_loader"):
            save_texture(BladeTexture(), filename)
            load_texture(filename)
        assert any("Saved texture config" in r.message for r in caplog.records)
        assert any("Loaded texture config" in r.message for r in caplog.records)
