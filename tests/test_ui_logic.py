from pydantic import SecretStr
from thoughtvault.config import Settings
from thoughtvault.ui.validation import validate_api_key, validate_data_dir, asset_dir_warning, run_all_checks


def make_settings(**overrides) -> Settings:
    values = {"OPENAI_API_KEY": SecretStr("sk-test")}
    values.update(overrides)
    return Settings(_env_file=None, **values)


def test_validate_api_key():
    assert validate_api_key(make_settings()) == []
    assert validate_api_key(make_settings(OPENAI_API_KEY=SecretStr(""))) != []


def test_validate_data_dir_creates_directory(tmp_path):
    data_dir = tmp_path / "nested" / "data"
    assert validate_data_dir(make_settings(DATA_DIR=data_dir)) == []
    assert data_dir.is_dir()


def test_validate_data_dir_on_file(tmp_path):
    blocker = tmp_path / "data"
    blocker.write_text("not a directory")
    errors = validate_data_dir(make_settings(DATA_DIR=blocker))
    assert errors


def test_asset_dir_warning(tmp_path):
    assert asset_dir_warning(make_settings()) is None
    assert asset_dir_warning(make_settings(ASSET_DIR=tmp_path)) is None
    assert "not writable" in asset_dir_warning(make_settings(ASSET_DIR=tmp_path / "missing"))


def test_run_all_checks(tmp_path):
    assert run_all_checks(make_settings(DATA_DIR=tmp_path)) == []
