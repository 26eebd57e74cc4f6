"""Optional YAML configuration of parameter defaults.

Library functions always carry their own documented defaults.  A project that
wants different house defaults - a two-octave range, cosine stretching - can
keep them in a YAML file and pass the values through explicitly:

    # serialism.yaml
    lo: 0
    hi: 24
    interpolation: cosine
    repeat: 2
    duplicates: 4
    log_level: DEBUG

    config = serialism.config.load_config("serialism.yaml")
    config.apply_logging()
    melody = serialism.ranges.wrap(notes, config.lo, config.hi)
    contour = serialism.transform.stretch(melody, 32, config.interpolation)
    phrase = serialism.transform.repeat(contour, config.repeat)
    phrase = serialism.transform.duplicate(phrase, config.duplicates)

Loading configuration never changes library defaults behind the caller's back.
"""

import dataclasses
import logging
import os
import typing

import yaml

import serialism.interpolation


logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class Config:

	"""
	Project-wide default values read from a configuration file.
	"""

	lo: float = 0
	hi: float = 12
	interpolation: str = "linear"
	repeat: int = 1
	duplicates: int = 2
	log_level: str = "WARNING"

	def __post_init__ (self) -> None:

		"""
		Validate field values.
		"""

		for name in ("lo", "hi"):
			value = getattr(self, name)
			if isinstance(value, bool) or not isinstance(value, (int, float)):
				raise ValueError(f"Config value {name!r} must be a number, got {value!r}")

		for name in ("repeat", "duplicates"):
			value = getattr(self, name)
			if isinstance(value, bool) or not isinstance(value, int):
				raise ValueError(f"Config value {name!r} must be an integer, got {value!r}")

		# Raises ValueError for unknown modes.
		serialism.interpolation.get_interpolation(self.interpolation)

		if not isinstance(logging.getLevelName(str(self.log_level).upper()), int):
			raise ValueError(f"Unknown log level {self.log_level!r}")

	def apply_logging (self) -> None:

		"""
		Set the level of the ``serialism`` package logger.
		"""

		logging.getLogger("serialism").setLevel(str(self.log_level).upper())


def load_config (config_path: str = "serialism.yaml") -> Config:

	"""
	Load configuration from a YAML file.

	A missing file is not an error: a warning is logged and the defaults are
	returned.  Unknown keys or invalid values raise :class:`ValueError`.

	Parameters:
		config_path: Path to the YAML file (default ``serialism.yaml``)
	"""

	if not os.path.exists(config_path):
		logger.warning(f"Config file {config_path} not found. Using defaults.")
		return Config()

	with open(config_path, 'r') as f:
		data = yaml.safe_load(f)

	if data is None:
		return Config()

	if not isinstance(data, dict):
		raise ValueError(f"Config file {config_path} must contain a mapping, got {type(data).__name__}")

	known = {field.name for field in dataclasses.fields(Config)}
	unknown = sorted(set(data) - known)

	if unknown:
		raise ValueError(f"Unknown config keys in {config_path}: {', '.join(map(str, unknown))}")

	values: typing.Dict[str, typing.Any] = dict(data)
	logger.debug(f"Loaded config from {config_path}: {values}")

	return Config(**values)
