"""Tests for color rendering and the end-to-end generator."""

import colorsys
import random
import types

import numpy as np
import pytest
from PIL import Image

import pixelsprites.render as render_module
from pixelsprites import ConfigError, GeneratorConfig, Mask, PixelSpriteGenerator, generate_sprite
from pixelsprites.render import render


def _record_hues(monkeypatch):
    hues = []

    def hsv_to_rgb(h, s, v):
        hues.append(h)
        return colorsys.hsv_to_rgb(h, s, v)

    monkeypatch.setattr(render_module, "colorsys", types.SimpleNamespace(hsv_to_rgb=hsv_to_rgb))
    return hues


class TestSingleCell:
    def test_border_or_body_resolved_to_body(self, scripted):
        # resolve, axis, saturation, hue, three noise draws, brightness
        rng = scripted([0.9, 0.9, 0.8, 0.25, 0.5, 0.5, 0.5, 0.5])
        sprite = generate_sprite(Mask.from_array([[2]]), GeneratorConfig(scale=3), rng=rng)

        assert sprite.pixels.shape == (3, 3, 4)
        assert sprite.pivot == (0.5, 0.5)
        expected = colorsys.hsv_to_rgb(0.25, 0.4, 0.5 * 0.3) + (1.0,)
        for y in range(3):
            for x in range(3):
                np.testing.assert_allclose(sprite.pixels[y, x], expected, rtol=1e-6)
        assert not np.allclose(sprite.pixels[..., :3], 0.0)
        assert not rng.values

    def test_empty_mask_is_background(self):
        background = (0.1, 0.2, 0.3, 1.0)
        config = GeneratorConfig(scale=4, background_color=background)
        sprite = generate_sprite(Mask.from_array([[0]]), config, seed=3)
        assert sprite.pixels.shape == (4, 4, 4)
        np.testing.assert_allclose(sprite.pixels.reshape(-1, 4), [background] * 16, rtol=1e-6)


class TestRender:
    def test_buffer_is_flipped_on_both_axes(self):
        grid = np.array([[-1, 0, 0], [0, 0, 0]], dtype=np.int8)
        sprite = render(grid, GeneratorConfig(is_colored=False, scale=2), random.Random(5))
        assert sprite.pixels.shape == (4, 6, 4)
        black = sprite.pixels[2:4, 4:6]
        np.testing.assert_array_equal(black.reshape(-1, 4), [[0, 0, 0, 1]] * 4)
        sprite.pixels[2:4, 4:6] = 0
        assert not sprite.pixels.any()

    @pytest.mark.parametrize("seed", range(10))
    def test_uncolored_only_background_or_black(self, ship_mask, seed):
        background = (1.0, 1.0, 1.0, 1.0)
        config = GeneratorConfig(is_colored=False, background_color=background)
        sprite = generate_sprite(ship_mask, config, seed=seed)
        colors = {tuple(p) for p in sprite.pixels.reshape(-1, 4).tolist()}
        assert colors <= {background, (0.0, 0.0, 0.0, 1.0)}
        assert (0.0, 0.0, 0.0, 1.0) in colors

    @pytest.mark.parametrize("seed", range(10))
    def test_zero_variation_keeps_hue(self, monkeypatch, ship_mask, seed):
        hues = _record_hues(monkeypatch)
        generate_sprite(ship_mask, GeneratorConfig(color_variations=0.0), seed=seed)
        assert hues
        assert len(set(hues)) == 1

    def test_full_variation_changes_hue(self, monkeypatch, ship_mask):
        hues = _record_hues(monkeypatch)
        generate_sprite(ship_mask, GeneratorConfig(color_variations=1.0), seed=11)
        assert len(set(hues)) > 1

    def test_foreground_overrides_hue(self):
        grid = np.array([[1, -1]], dtype=np.int8)
        config = GeneratorConfig(foreground_color=(0.0, 0.0, 1.0), edge_brightness=0.5)
        sprite = render(grid, config, random.Random(2))
        # x is flipped: body at column 1, border at column 0
        np.testing.assert_allclose(sprite.pixels[0, 1], (0.0, 0.0, 1.0, 1.0))
        np.testing.assert_allclose(sprite.pixels[0, 0], (0.0, 0.0, 0.5, 1.0))

    def test_border_darkened(self, scripted):
        grid = np.array([[-1]], dtype=np.int8)
        # axis, saturation, hue, three noise draws, brightness
        rng = scripted([0.1, 1.0 - 1e-9, 0.0, 0.5, 0.5, 0.5, 0.99])
        config = GeneratorConfig(saturation=0.0, brightness_noise=1.0, edge_brightness=0.3)
        sprite = render(grid, config, rng)
        np.testing.assert_allclose(sprite.pixels[0, 0], (0.297, 0.297, 0.297, 1.0), rtol=1e-5)


class TestGenerator:
    def test_seeded_generation_is_deterministic(self, ship_mask):
        config = GeneratorConfig(scale=2)
        first = generate_sprite(ship_mask, config, seed=1234)
        second = generate_sprite(ship_mask, config, seed=1234)
        assert first.pixels.tobytes() == second.pixels.tobytes()

    def test_global_random_untouched(self, ship_mask):
        random.seed(99)
        before = random.getstate()
        generate_sprite(ship_mask, seed=1)
        assert random.getstate() == before

    def test_output_size(self, blob_mask):
        sprite = generate_sprite(blob_mask, GeneratorConfig(scale=5), seed=0)
        assert (sprite.width, sprite.height) == (30, 30)

    def test_invalid_config_rejected(self):
        with pytest.raises(ConfigError) as exc:
            GeneratorConfig(scale=0)
        assert exc.value.field == "scale"
        with pytest.raises(ConfigError):
            GeneratorConfig(saturation=1.5)

    def test_rng_and_seed_are_exclusive(self, ship_mask):
        with pytest.raises(ValueError):
            generate_sprite(ship_mask, rng=random.Random(1), seed=1)

    def test_object_api(self, ship_mask):
        generator = PixelSpriteGenerator(ship_mask, scale=2, saturation=0.1)
        assert generator.config.scale == 2
        a = generator.create_sprite(seed=7)
        b = generator.create_sprite(seed=7)
        assert np.array_equal(a.pixels, b.pixels)

    def test_object_api_overrides_config(self, ship_mask):
        generator = PixelSpriteGenerator(ship_mask, GeneratorConfig(scale=3), is_colored=False)
        assert generator.config.scale == 3
        assert not generator.config.is_colored

    def test_to_image(self, ship_mask):
        sprite = generate_sprite(ship_mask, GeneratorConfig(scale=2), seed=4)
        img = sprite.to_image()
        assert isinstance(img, Image.Image)
        assert img.mode == "RGBA"
        assert img.size == (24, 24)
