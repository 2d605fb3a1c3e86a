import pytest
from pydantic import ValidationError

from kvstorage_lib.config import StorageConfig, load_config
from kvstorage_lib.storage.file_backend import DEFAULT_DATA_DIR, DEFAULT_QUOTA


def test_defaults_when_file_missing(tmp_path):
    cfg = load_config(tmp_path / "missing.yml", environ={})
    assert cfg == StorageConfig()
    assert cfg.backend == "auto"
    assert cfg.data_dir == DEFAULT_DATA_DIR
    assert cfg.quota == DEFAULT_QUOTA
    assert cfg.log_level is None


def test_yaml_values(tmp_path):
    path = tmp_path / "kvstorage.yml"
    path.write_text("backend: File\ndata_dir: /var/lib/kv\nquota: 2048\nlog_level: debug\n")
    cfg = load_config(path, environ={})
    assert cfg.backend == "file"
    assert cfg.data_dir == "/var/lib/kv"
    assert cfg.quota == 2048
    assert cfg.log_level == "debug"


def test_environment_overrides_yaml(tmp_path):
    path = tmp_path / "kvstorage.yml"
    path.write_text("backend: file\nquota: 2048\n")
    env = {
        "KVSTORAGE_BACKEND": "memory",
        "KVSTORAGE_DATA_DIR": "elsewhere",
        "KVSTORAGE_QUOTA": "none",
        "KVSTORAGE_LOG_LEVEL": "INFO",
    }
    cfg = load_config(path, environ=env)
    assert cfg.backend == "memory"
    assert cfg.data_dir == "elsewhere"
    assert cfg.quota is None
    assert cfg.log_level == "INFO"


@pytest.mark.parametrize("raw,expected", [("0", None), ("", None), (" None ", None), ("4096", 4096)])
def test_quota_from_environment(tmp_path, raw, expected):
    cfg = load_config(tmp_path / "missing.yml", environ={"KVSTORAGE_QUOTA": raw})
    assert cfg.quota == expected


def test_empty_yaml_file(tmp_path):
    path = tmp_path / "kvstorage.yml"
    path.write_text("")
    assert load_config(path, environ={}) == StorageConfig()


def test_non_mapping_yaml_rejected(tmp_path):
    path = tmp_path / "kvstorage.yml"
    path.write_text("- a\n- b\n")
    with pytest.raises(ValueError):
        load_config(path, environ={})


def test_unknown_backend_rejected(tmp_path):
    with pytest.raises(ValidationError):
        load_config(tmp_path / "missing.yml", environ={"KVSTORAGE_BACKEND": "redis"})


def test_yaml_zero_quota_disables_quota(tmp_path):
    path = tmp_path / "kvstorage.yml"
    path.write_text("quota: 0\n")
    assert load_config(path, environ={}).quota is None
    path.write_text("quota: null\n")
    assert load_config(path, environ={}).quota is None


@pytest.mark.parametrize("raw", ["abc", "-1", "1.5"])
def test_bad_quota_from_environment_rejected(tmp_path, raw):
    with pytest.raises(ValidationError):
        load_config(tmp_path / "missing.yml", environ={"KVSTORAGE_QUOTA": raw})


def test_bad_quota_in_yaml_rejected(tmp_path):
    path = tmp_path / "kvstorage.yml"
    path.write_text("quota: -5\n")
    with pytest.raises(ValidationError):
        load_config(path, environ={})
    with pytest.raises(ValidationError):
        StorageConfig(quota="lots")
