import logging

from abc import ABC
from abc import abstractmethod

from . import stats
from .display import _printr
from .errors import EmptyInputError
from .errors import ImmutableContainerError
from .errors import IndexOutOfRangeError
from .errors import InvalidIndexTypeError
from .errors import PyMatrixValueError
from .storage import FallbackStorage
from .typing import infer_quantity_type
from .typing import validate_quantity

logger = logging.getLogger(__name__)


# ============================================================
# Small helpers
# ============================================================

def _check_index_type(key):
	# bool is an int subclass but never a position
	if isinstance(key, bool) or not isinstance(key, int):
		raise InvalidIndexTypeError(f'Vector indices must be integers, not {type(key).__name__}')
	return key


def _check_length(length, op_name):
	if isinstance(length, bool) or not isinstance(length, int):
		raise PyMatrixValueError(f'{op_name}() length must be an integer, not {type(length).__name__}')
	if length < 0:
		raise PyMatrixValueError(f'{op_name}() length must be non-negative, got {length}')
	return length


# ============================================================
# Capability contract
# ============================================================

class AbstractVector(ABC):
	""" Read-only sequence of quantities with shared statistics """

	@classmethod
	@abstractmethod
	def create(cls, values):
		""" Build a vector of this kind from any iterable of quantities """

	@abstractmethod
	def __iter__(self):
		...

	@abstractmethod
	def count(self):
		...

	@abstractmethod
	def get(self, key):
		...

	@abstractmethod
	def map(self, fn, *args):
		"""
		New vector where element i becomes fn(value_i, i, *args).
		The receiver is never modified.
		"""

	def values(self):
		""" Materialize every element, in index order, as a list """
		# iter() keeps list() from asking __len__ for a size hint
		return list(iter(self))

	def to_list(self):
		""" Plain export shape for serializers """
		return self.values()

	def size(self):
		return (self.count(),)

	def extend(self, length, fill=0):
		"""
		New vector with `length` copies of `fill` appended.

		Examples
		--------
		>>> Vector([1, 2]).extend(2, 9).values()
		[1, 2, 9, 9]
		"""
		_check_length(length, 'extend')
		return self.create(self.values() + [fill] * length)

	def reduce(self, length):
		"""
		New vector without its last `length` elements.

		Raises
		------
		EmptyInputError
			If nothing would be left
		"""
		_check_length(length, 'reduce')
		values = self.values()
		keep = len(values) - length
		if keep <= 0:
			raise EmptyInputError(
				f'Cannot reduce a {len(values)} element vector by {length}; vectors cannot be empty'
			)
		return self.create(values[:keep])

	#-----------------------------------------------------
	# Statistics
	#-----------------------------------------------------

	def max(self):
		return stats.maximum(self.values())

	def min(self):
		return stats.minimum(self.values())

	def sum(self):
		return stats.total(self.values())

	def avg(self):
		return stats.average(self.values())

	def median(self):
		return stats.median(self.values())

	def variance(self):
		return stats.variance(self.values())

	def deviation(self):
		return stats.deviation(self.values())

	#-----------------------------------------------------
	# Container protocol
	#-----------------------------------------------------

	def __len__(self):
		return self.count()

	def __getitem__(self, key):
		return self.get(key)

	def __setitem__(self, key, value):
		raise ImmutableContainerError("Can't set element of vector")

	def __delitem__(self, key):
		raise ImmutableContainerError("Can't unset element of vector")

	def __repr__(self):
		return _printr(self)


# ============================================================
# Dense backend
# ============================================================

class Vector(AbstractVector):
	"""
	Eager, immutable vector.

	Storage keeps only the values that differ from the most frequent one,
	which makes repetitive samples cheap to hold.
	"""

	def __init__(self, initial):
		data = tuple(validate_quantity(x) for x in initial)
		if not data:
			raise EmptyInputError('Vector cannot be empty')

		self._storage = FallbackStorage.from_iterable(data)
		self._qtype = infer_quantity_type(data)
		logger.debug(
			"Vector of %d values stored as fallback %r + %d overrides",
			len(data), self._storage.fallback, self._storage.override_count,
		)

	@classmethod
	def create(cls, values):
		return cls(values)

	def schema(self):
		"""Get the QuantityType of this vector."""
		return self._qtype

	def count(self):
		return len(self._storage)

	def __len__(self):
		return len(self._storage)

	def __iter__(self):
		return iter(self._storage)

	def get(self, key):
		_check_index_type(key)
		if key < 0 or key >= len(self._storage):
			raise IndexOutOfRangeError(
				f"Index {key} out of range for vector length {len(self._storage)}"
			)
		return self._storage[key]

	def values(self):
		return list(self._storage)

	def map(self, fn, *args):
		return self.create(fn(value, i, *args) for i, value in enumerate(self._storage))
