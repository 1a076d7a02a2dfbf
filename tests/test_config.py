from config import AppConfig, GridConfig
from game_logic import create_grid
from renderer import DEFAULT_STYLE


def test_defaults_match_demo_settings():
    config = AppConfig()
    assert (config.grid.width, config.grid.height) == (30, 30)
    assert config.grid.alive_probability == 0.2
    assert config.render.style() == DEFAULT_STYLE


def test_update_from_mapping_merges_sections():
    config = AppConfig()
    config.update_from_mapping({
        "grid": {"width": 50, "unknown": 1},
        "render": {"alive_color": "green"},
        "log_level": "DEBUG",
        "missing_section": {"x": 1},
    })
    assert config.grid.width == 50
    assert config.grid.height == 30
    assert not hasattr(config.grid, "unknown")
    assert config.render.style().alive_color == "green"
    assert config.log_level == "DEBUG"
    assert config.to_dict()["grid"]["width"] == 50


def test_non_mapping_section_value_is_ignored():
    config = AppConfig()
    config.update_from_mapping({"grid": 5})
    assert isinstance(config.grid, GridConfig)


def test_seeded_rng_is_reproducible():
    cfg = GridConfig(width=10, height=10, alive_probability=0.5, seed=99)
    a = create_grid(cfg.width, cfg.height, cfg.alive_probability, rng=cfg.rng())
    b = create_grid(cfg.width, cfg.height, cfg.alive_probability, rng=cfg.rng())
    assert a == b


def test_update_from_mapping_never_replaces_methods():
    config = AppConfig()
    config.update_from_mapping({"to_dict": "x", "grid": {"rng": 3}, "render": {"style": None}})
    assert callable(config.to_dict)
    assert callable(config.grid.rng)
    assert callable(config.render.style)
    assert config.to_dict()["grid"]["width"] == 30
