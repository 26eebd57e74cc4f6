import pytest


@pytest.fixture
def ragged () -> list:

	"""A nested, ragged sequence mixing numbers and symbols."""

	return [0, [3, 7], "eb4", [[12], []], 5.5]
