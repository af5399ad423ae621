"""
Generator-backed vector for derived views (matrix columns, flattenings).

A LazyVector is fed by one of two sources:

  - a zero-argument factory, re-invoked every time iteration begins, which
    makes the vector restartable (every view a Matrix hands out is built
    this way)
  - a one-shot iterable, consumed at most once, whose progress is tracked
    as FRESH -> PARTIAL -> EXHAUSTED

Only sequential consumption is supported; indexed access always fails.
"""

import logging
import warnings

from collections.abc import Sequence
from enum import Enum

from .errors import PyMatrixTypeError
from .errors import UnsupportedOperationError
from .typing import validate_quantity
from .vector import AbstractVector

logger = logging.getLogger(__name__)


class ConsumptionState(Enum):
	FRESH = 'fresh'
	PARTIAL = 'partial'
	EXHAUSTED = 'exhausted'


class LazyVector(AbstractVector):
	""" Vector whose values are produced on demand, in order """

	def __init__(self, source):
		"""
		Parameters
		----------
		source : callable or iterable
			A zero-argument callable returning an iterable (restartable), or
			an iterable/generator consumed once.
		"""
		self._state = ConsumptionState.FRESH
		if callable(source):
			self._factory = source
			self._source = None
		elif hasattr(source, '__iter__'):
			self._factory = None
			self._source = iter(source)
		else:
			raise PyMatrixTypeError(
				f'LazyVector needs an iterable or a zero-argument factory, not {type(source).__name__}'
			)

	@classmethod
	def create(cls, values):
		"""
		Reusable containers give a restartable vector; bare iterators,
		generators and one-shot LazyVectors give a one-shot vector. Empty
		input is allowed.
		"""
		if isinstance(values, LazyVector) and not values.restartable:
			return cls(iter(values))
		if isinstance(values, AbstractVector):
			return cls(lambda: values)
		if isinstance(values, Sequence):
			snapshot = tuple(values)
			return cls(lambda: snapshot)
		return cls(values)

	@property
	def restartable(self):
		return self._factory is not None

	@property
	def state(self):
		""" Consumption progress of a one-shot source; always FRESH for a factory """
		return self._state

	def __iter__(self):
		if self._factory is not None:
			return map(validate_quantity, iter(self._factory()))
		return self._drain()

	def _drain(self):
		if self._state is ConsumptionState.EXHAUSTED:
			warnings.warn(
				"LazyVector source is exhausted; iteration yields nothing. "
				"Build it from a factory to make it restartable.",
				RuntimeWarning,
				stacklevel=2,
			)
			return
		for value in self._source:
			self._state = ConsumptionState.PARTIAL
			yield validate_quantity(value)
		self._state = ConsumptionState.EXHAUSTED

	def count(self):
		"""
		Number of elements. Forces one full pass; a one-shot source is swapped
		for a fresh one over the materialized values so it stays consumable.
		"""
		values = self.values()
		if self._factory is None:
			self._source = iter(values)
			self._state = ConsumptionState.FRESH
			logger.debug("LazyVector re-materialized %d values after count()", len(values))
		return len(values)

	def get(self, key):
		raise UnsupportedOperationError("Lazy vector can't be accessed as array")

	def map(self, fn, *args):
		"""
		Deferred: fn runs only as the result is consumed. The result is
		restartable only when this vector is.
		"""
		def produce():
			for i, value in enumerate(self):
				yield fn(value, i, *args)
		if self.restartable:
			return type(self)(produce)
		return type(self)(produce())
