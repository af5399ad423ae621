from .matrix import Matrix
from .vector import AbstractVector
from .vector import Vector


class MatrixBuilder:
	"""
	Accumulates rows one at a time and builds a Matrix from them.

	Raw sequences are wrapped into Vectors as soon as they are added, so an
	empty row fails at add_row() rather than at build().

	Examples
	--------
	>>> m = MatrixBuilder().add_row([1, 2]).add_row([3, 4]).build()
	>>> m.values()
	[[1, 2], [3, 4]]
	"""

	def __init__(self, matrix_class=Matrix):
		self._matrix_class = matrix_class
		self.reset()

	def reset(self):
		"""Discard every accumulated row (returns self for chaining)"""
		self._rows = []
		return self

	def add_row(self, values):
		"""Append one row (returns self for chaining)"""
		if isinstance(values, AbstractVector):
			self._rows.append(values)
		else:
			self._rows.append(Vector(values))
		return self

	def build(self):
		return self._matrix_class(self._rows)

	def __len__(self):
		return len(self._rows)
