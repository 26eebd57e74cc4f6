import logging

import pytest

import serialism.config
import serialism.ranges
import serialism.transform


def test_missing_file_uses_defaults (tmp_path, caplog: pytest.LogCaptureFixture) -> None:

	"""A missing config file logs a warning and returns defaults."""

	with caplog.at_level(logging.WARNING, logger="serialism.config"):
		config = serialism.config.load_config(str(tmp_path / "missing.yaml"))

	assert config == serialism.config.Config()
	assert "not found" in caplog.text


def test_load_values (tmp_path) -> None:

	"""Values in the file override the defaults."""

	path = tmp_path / "serialism.yaml"
	path.write_text("lo: 0\nhi: 24\ninterpolation: cosine\nrepeat: 3\n")

	config = serialism.config.load_config(str(path))

	assert config.hi == 24
	assert config.interpolation == "cosine"
	assert config.repeat == 3
	assert config.duplicates == 2


def test_empty_file_uses_defaults (tmp_path) -> None:

	"""An empty file is the same as no settings."""

	path = tmp_path / "serialism.yaml"
	path.write_text("")

	assert serialism.config.load_config(str(path)) == serialism.config.Config()


def test_unknown_key_raises (tmp_path) -> None:

	"""Misspelt keys are reported rather than ignored."""

	path = tmp_path / "serialism.yaml"
	path.write_text("hgih: 24\n")

	with pytest.raises(ValueError, match="hgih"):
		serialism.config.load_config(str(path))


def test_non_mapping_raises (tmp_path) -> None:

	"""The file must hold a mapping."""

	path = tmp_path / "serialism.yaml"
	path.write_text("- 1\n- 2\n")

	with pytest.raises(ValueError):
		serialism.config.load_config(str(path))


def test_invalid_values_raise () -> None:

	"""Field values are validated."""

	with pytest.raises(ValueError):
		serialism.config.Config(interpolation="wobbly")

	with pytest.raises(ValueError):
		serialism.config.Config(hi="twelve")

	with pytest.raises(ValueError):
		serialism.config.Config(repeat=1.5)

	with pytest.raises(ValueError):
		serialism.config.Config(log_level="LOUD")


def test_apply_logging () -> None:

	"""The package logger level follows the config."""

	package_logger = logging.getLogger("serialism")
	previous = package_logger.level

	try:
		serialism.config.Config(log_level="debug").apply_logging()
		assert package_logger.level == logging.DEBUG
	finally:
		package_logger.setLevel(previous)


def test_values_feed_transformers (tmp_path) -> None:

	"""Loaded values are passed explicitly to the functions that use them."""

	path = tmp_path / "serialism.yaml"
	path.write_text("lo: 0\nhi: 12\nrepeat: 2\nduplicates: 3\n")

	config = serialism.config.load_config(str(path))

	melody = serialism.ranges.wrap([11, 13], config.lo, config.hi)
	phrase = serialism.transform.repeat(melody, config.repeat)
	phrase = serialism.transform.duplicate(phrase, config.duplicates)

	assert melody == [11, 1]
	assert phrase == [11, 11, 1, 1] * 3
