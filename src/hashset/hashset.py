"""
Generic hash set backed by a presence mapping.

Usage:
	from hashset import HashSet, new

	books = new(["Einar", "Olaf"])
	books.insert("Harald")        # -> True
	books.insert("Olaf")          # -> False
	books.union(new(["Sigurd"]))  # -> new, independent HashSet
"""

from __future__ import annotations

import logging
from collections.abc import Hashable, Iterable, Iterator
from typing import Any, ClassVar, Generic, TypeVar, override

from hashset.env import env
from hashset.errors import NotAHashSetError, UnhashableElementError

T = TypeVar("T", bound=Hashable)

logger = logging.getLogger(__name__)


def _expect_set(op: str, value: Any) -> HashSet[Any]:
	if not isinstance(value, HashSet):
		raise NotAHashSetError(op, value)
	return value


class HashSet(Generic[T]):
	"""An unordered collection of unique, hashable elements.

	- Elements are stored as keys of a ``dict`` whose values are all ``None``
	- Binary operations (``union``, ``intersect``, ``diff``, ``sym_diff``)
	  never touch their operands and always return a set with its own storage
	- Iteration order is unspecified
	- Passing anything other than a HashSet where a set is expected raises
	  ``NotAHashSetError``; operators return ``NotImplemented`` instead
	"""

	__slots__ = ("_inner",)
	__hash__: ClassVar[None] = None  # pyright: ignore[reportIncompatibleMethodOverride]

	_inner: dict[T, None]

	def __init__(self, elems: Iterable[T] | None = None) -> None:
		self._inner = {}
		if elems is None:
			return
		if isinstance(elems, HashSet):
			self._inner = dict(elems._inner)
			return
		for value in elems:
			self.insert(value)

	def _derive(self, inner: dict[T, None]) -> HashSet[T]:
		# Derived sets always receive a mapping nobody else holds
		result = HashSet.__new__(HashSet)
		result._inner = inner
		return result

	def _lookup(self, op: str, value: Any) -> bool:
		try:
			return value in self._inner
		except TypeError as exc:
			raise UnhashableElementError(op, value) from exc

	# --- Mutation ---
	def insert(self, value: T) -> bool:
		"""Add ``value``. Returns True if it was not already present."""
		if self._lookup("insert", value):
			return False
		self._inner[value] = None
		return True

	def remove(self, value: T) -> bool:
		"""Remove ``value``. Returns True if it was present, False otherwise."""
		if not self._lookup("remove", value):
			return False
		del self._inner[value]
		return True

	def merge(self, other: HashSet[T]) -> None:
		"""Add every element of ``other`` to this set. ``other`` is left as is."""
		other = _expect_set("merge", other)
		if other is self:
			return
		# dict.update keeps the existing key object for elements already present
		self._inner.update(other._inner)

	def clear(self) -> None:
		if self._inner:
			logger.debug("Clearing HashSet with %d elements", len(self._inner))
		self._inner.clear()

	# --- Query ---
	def contains(self, value: T) -> bool:
		return self._lookup("contains", value)

	def elems(self) -> list[T]:
		"""All elements in no particular order. Empty list for an empty set."""
		return list(self._inner)

	@property
	def size(self) -> int:
		return len(self._inner)

	def copy(self) -> HashSet[T]:
		return self._derive(dict(self._inner))

	# --- Binary operations ---
	def diff(self, other: HashSet[T]) -> HashSet[T]:
		"""Elements of this set that are not in ``other``."""
		other = _expect_set("diff", other)
		theirs = other._inner
		return self._derive({k: None for k in self._inner if k not in theirs})

	def sym_diff(self, other: HashSet[T]) -> HashSet[T]:
		"""Elements in exactly one of the two sets."""
		other = _expect_set("sym_diff", other)
		result = self.diff(other)
		result.merge(other.diff(self))
		return result

	def intersect(self, other: HashSet[T]) -> HashSet[T]:
		other = _expect_set("intersect", other)
		smaller, larger = self._by_size(other)
		theirs = larger._inner
		return self._derive({k: None for k in smaller._inner if k in theirs})

	def union(self, other: HashSet[T]) -> HashSet[T]:
		"""Elements in either set, without duplicates.

		The result is seeded with a copy of the larger operand's mapping, so
		its table is allocated for that size in one step, and only the
		elements unique to the smaller operand are added afterwards.
		"""
		other = _expect_set("union", other)
		smaller, larger = self._by_size(other)
		extra = smaller.diff(larger)
		logger.debug(
			"HashSet.union: seeding %d elements, adding %d",
			len(larger),
			len(extra),
		)
		result = self._derive(dict(larger._inner))
		result._inner.update(extra._inner)
		return result

	def _by_size(self, other: HashSet[T]) -> tuple[HashSet[T], HashSet[T]]:
		if len(self._inner) < len(other._inner):
			return self, other
		return other, self

	# --- Predicates ---
	def disjoint(self, other: HashSet[T]) -> bool:
		other = _expect_set("disjoint", other)
		smaller, larger = self._by_size(other)
		theirs = larger._inner
		return not any(k in theirs for k in smaller._inner)

	def subset(self, other: HashSet[T]) -> bool:
		"""True if every element of this set is in ``other``."""
		other = _expect_set("subset", other)
		if len(self._inner) > len(other._inner):
			return False
		theirs = other._inner
		return all(k in theirs for k in self._inner)

	def superset(self, other: HashSet[T]) -> bool:
		other = _expect_set("superset", other)
		return other.subset(self)

	def equal(self, other: HashSet[T]) -> bool:
		other = _expect_set("equal", other)
		if len(self._inner) != len(other._inner):
			return False
		return self.subset(other)

	# --- Python protocols ---
	def __len__(self) -> int:
		return len(self._inner)

	def __iter__(self) -> Iterator[T]:
		return iter(self._inner)

	def __contains__(self, value: object) -> bool:
		return self._lookup("contains", value)

	def __bool__(self) -> bool:
		return bool(self._inner)

	def __copy__(self) -> HashSet[T]:
		return self.copy()

	@override
	def __eq__(self, other: object) -> bool:
		if not isinstance(other, HashSet):
			return NotImplemented
		return self.equal(other)

	def __le__(self, other: HashSet[T]) -> bool:
		if not isinstance(other, HashSet):
			return NotImplemented
		return self.subset(other)

	def __lt__(self, other: HashSet[T]) -> bool:
		if not isinstance(other, HashSet):
			return NotImplemented
		return len(self._inner) < len(other._inner) and self.subset(other)

	def __ge__(self, other: HashSet[T]) -> bool:
		if not isinstance(other, HashSet):
			return NotImplemented
		return self.superset(other)

	def __gt__(self, other: HashSet[T]) -> bool:
		if not isinstance(other, HashSet):
			return NotImplemented
		return len(self._inner) > len(other._inner) and self.superset(other)

	def __or__(self, other: HashSet[T]) -> HashSet[T]:
		if not isinstance(other, HashSet):
			return NotImplemented
		return self.union(other)

	def __and__(self, other: HashSet[T]) -> HashSet[T]:
		if not isinstance(other, HashSet):
			return NotImplemented
		return self.intersect(other)

	def __sub__(self, other: HashSet[T]) -> HashSet[T]:
		if not isinstance(other, HashSet):
			return NotImplemented
		return self.diff(other)

	def __xor__(self, other: HashSet[T]) -> HashSet[T]:
		if not isinstance(other, HashSet):
			return NotImplemented
		return self.sym_diff(other)

	def __ior__(self, other: HashSet[T]) -> HashSet[T]:
		if not isinstance(other, HashSet):
			return NotImplemented
		self.merge(other)
		return self

	@override
	def __str__(self) -> str:
		parts = [str(k) for k in self._inner]
		if env.sorted_str:
			parts.sort()
		return "{" + ",".join(parts) + "}"

	@override
	def __repr__(self) -> str:
		if not self._inner:
			return "HashSet()"
		return "HashSet({" + ", ".join(repr(k) for k in self._inner) + "})"


def new(elems: Iterable[T] | None = None) -> HashSet[T]:
	"""Create a HashSet. ``None`` or an empty iterable gives an empty set."""
	return HashSet(elems)


__all__ = ["HashSet", "new"]
