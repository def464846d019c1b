"""Environment-variable configuration for hashset.

Values are read from ``os.environ`` on every access so they can be changed at
runtime (and patched in tests).
"""

from __future__ import annotations

import os

ENV_HASHSET_SORTED_STR = "HASHSET_SORTED_STR"

_TRUTHY = {"1", "true", "True", "yes"}


def _flag(name: str, default: bool = False) -> bool:
	value = os.environ.get(name)
	if value is None:
		return default
	return value in _TRUTHY


class HashSetEnv:
	@property
	def sorted_str(self) -> bool:
		"""Render ``str(HashSet)`` with elements sorted by their text."""
		return _flag(ENV_HASHSET_SORTED_STR)

	@sorted_str.setter
	def sorted_str(self, value: bool) -> None:
		os.environ[ENV_HASHSET_SORTED_STR] = "1" if value else "0"


env = HashSetEnv()


__all__ = ["ENV_HASHSET_SORTED_STR", "HashSetEnv", "env"]
