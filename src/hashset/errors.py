from __future__ import annotations

from typing import Any


class HashSetError(Exception):
	"""Base class for errors raised by hashset."""


class NotAHashSetError(HashSetError, TypeError):
	"""An operand that must be a HashSet is something else (None included)."""

	def __init__(self, op: str, value: Any) -> None:
		self.op: str = op
		self.value: Any = value
		super().__init__(
			f"HashSet.{op}() expects a HashSet, got {type(value).__name__}"
		)


class UnhashableElementError(HashSetError, TypeError):
	"""An element cannot be stored because it is not hashable."""

	def __init__(self, op: str, value: Any) -> None:
		self.op: str = op
		self.value: Any = value
		super().__init__(
			f"HashSet.{op}() got unhashable element of type {type(value).__name__}"
		)


__all__ = ["HashSetError", "NotAHashSetError", "UnhashableElementError"]
