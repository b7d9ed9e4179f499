import json

import pytest

from config.config_loader import DEFAULT_CONFIG, default_config, load_config, validate_config


def write_config(tmp_path, overrides):
    path = tmp_path / "runtime_config.json"
    path.write_text(json.dumps(overrides), encoding="utf-8")
    return path


def test_defaults_are_valid():
    validate_config(default_config())


def test_default_config_is_a_copy():
    config = default_config()
    config["complexity"] = 9
    assert DEFAULT_CONFIG["complexity"] == 4


def test_load_merges_overrides_and_creates_output_dir(tmp_path):
    out_dir = tmp_path / "out"
    path = write_config(tmp_path, {"complexity": 2, "seed": 7, "output_directory": str(out_dir)})
    config = load_config(str(path), verbose=False)
    assert config["complexity"] == 2
    assert config["seed"] == 7
    assert config["step_delay"] == DEFAULT_CONFIG["step_delay"]
    assert out_dir.is_dir()


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "missing.json"))


def test_missing_key():
    config = default_config()
    del config["states_file"]
    with pytest.raises(ValueError):
        validate_config(config)


@pytest.mark.parametrize("key, value", [
    ("complexity", "4"),
    ("complexity", True),
    ("step_delay", "fast"),
    ("seed", 1.5),
    ("log_steps", 1),
])
def test_wrong_type(key, value):
    config = default_config()
    config[key] = value
    with pytest.raises(TypeError):
        validate_config(config)


@pytest.mark.parametrize("key", ["complexity", "viewport_width", "step_delay", "max_steps"])
def test_negative_values(key):
    config = default_config()
    config[key] = -1
    with pytest.raises(ValueError):
        validate_config(config)
