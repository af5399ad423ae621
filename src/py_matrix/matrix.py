import logging

from .display import _printr
from .errors import EmptyInputError
from .errors import ImmutableContainerError
from .errors import IndexOutOfRangeError
from .errors import InvalidShapeError
from .errors import PyMatrixTypeError
from .errors import ShapeMismatchError
from .lazy import LazyVector
from .vector import AbstractVector
from .vector import Vector
from .vector import _check_index_type

logger = logging.getLogger(__name__)


def _as_row(row):
	"""
	Raw sequences become dense Vectors and one-shot LazyVectors are snapshotted
	into restartable ones. Other vectors are kept as they are.
	"""
	if isinstance(row, LazyVector) and not row.restartable:
		return LazyVector.create(row.values())
	if isinstance(row, AbstractVector):
		return row
	if not hasattr(row, '__iter__'):
		raise PyMatrixTypeError(f'Matrix rows must be sequences or vectors, not {type(row).__name__}')
	return Vector(row)


def _check_offset(offset, bound, what):
	_check_index_type(offset)
	if offset < 0 or offset >= bound:
		raise IndexOutOfRangeError(f"{what} {offset} out of range for {bound} {what.lower()}s")
	return offset


class Matrix():
	"""
	Immutable sequence of equal-length row vectors.

	Columns and flattened views are LazyVectors built on demand from the
	rows; nothing is transposed or copied until a view is consumed.
	"""

	def __init__(self, initial):
		if not hasattr(initial, '__iter__'):
			raise PyMatrixTypeError(f'Matrix needs an iterable of rows, not {type(initial).__name__}')
		rows = tuple(_as_row(row) for row in initial)
		if not rows:
			raise EmptyInputError('Matrix cannot be empty')

		lengths = [row.count() for row in rows]
		if len(set(lengths)) > 1:
			raise ShapeMismatchError(f'All rows must have the same number of elements, got {lengths}')
		if lengths[0] == 0:
			raise EmptyInputError('Matrix rows cannot be empty')

		self._rows = rows
		self._columns = lengths[0]
		logger.debug("%s built with %d rows × %d columns", type(self).__name__, len(rows), self._columns)

	@classmethod
	def create(cls, values):
		return cls(values)

	def values(self):
		""" Row-major list of row lists """
		return [row.values() for row in self._rows]

	def to_list(self):
		return self.values()

	def size(self):
		return (len(self._rows), self._columns)

	def count(self):
		""" Total number of elements (rows × columns) """
		return len(self._rows) * self._columns

	def count_rows(self):
		return len(self._rows)

	def count_columns(self):
		return self._columns

	def is_square(self):
		return self.count_rows() == self.count_columns()

	#-----------------------------------------------------
	# Rows, columns, values
	#-----------------------------------------------------

	def rows(self):
		yield from self._rows

	def columns(self):
		for offset in range(self._columns):
			yield self.get_column(offset)

	def get_row(self, offset):
		_check_offset(offset, len(self._rows), 'Row')
		return self._rows[offset]

	def get_column(self, offset):
		"""
		Restartable LazyVector yielding row[offset] from every row, in order.

		Rows without indexed access (LazyVector rows) raise
		UnsupportedOperationError once the column is consumed.
		"""
		_check_offset(offset, self._columns, 'Column')
		rows = self._rows

		def gather():
			for row in rows:
				yield row[offset]
		return LazyVector(gather)

	def get_value(self, y, x):
		"""
		Value at column `y` of row `x`.

		The row is picked by the SECOND argument: get_value(y, x) is
		get_row(x)[y].
		"""
		return self.get_row(x)[y]

	def as_vector(self):
		""" Row-major flattening: row 0 fully, then row 1, ... """
		def flatten():
			for row in self.rows():
				yield from row
		return LazyVector(flatten)

	def as_column_vector(self):
		""" Column-major flattening: column 0 fully, then column 1, ... """
		def flatten():
			for column in self.columns():
				yield from column
		return LazyVector(flatten)

	def transpose(self):
		""" New matrix whose rows are this matrix's columns """
		return type(self)(column.values() for column in self.columns())

	@property
	def T(self):
		return self.transpose()

	#-----------------------------------------------------
	# Mapping
	#-----------------------------------------------------

	def map(self, fn, *args):
		""" Apply fn(value, column_index, *args) to every element """
		return type(self)(row.map(fn, *args) for row in self._rows)

	def map_row(self, offset, fn, *args):
		_check_offset(offset, len(self._rows), 'Row')
		rows = list(self._rows)
		rows[offset] = rows[offset].map(fn, *args)
		return type(self)(rows)

	def map_column(self, offset, fn, *args):
		_check_offset(offset, self._columns, 'Column')

		def apply(value, index):
			if index != offset:
				return value
			return fn(value, index, *args)
		return type(self)(row.map(apply) for row in self._rows)

	#-----------------------------------------------------
	# Statistics, over the row-major flattening
	#-----------------------------------------------------

	def max(self):
		return self.as_vector().max()

	def min(self):
		return self.as_vector().min()

	def sum(self):
		return self.as_vector().sum()

	def avg(self):
		return self.as_vector().avg()

	def median(self):
		return self.as_vector().median()

	def variance(self):
		return self.as_vector().variance()

	def deviation(self):
		return self.as_vector().deviation()

	#-----------------------------------------------------
	# Container protocol
	#-----------------------------------------------------

	def __iter__(self):
		return self.rows()

	def __len__(self):
		return len(self._rows)

	def __getitem__(self, key):
		return self.get_row(key)

	def __setitem__(self, key, value):
		raise ImmutableContainerError("Can't set row of matrix")

	def __delitem__(self, key):
		raise ImmutableContainerError("Can't unset row of matrix")

	def __repr__(self):
		return _printr(self)


class SquareMatrix(Matrix):
	""" Matrix with as many rows as columns """

	def __init__(self, initial):
		super().__init__(initial)
		if not self.is_square():
			rows, cols = self.size()
			raise InvalidShapeError(f'Not a square matrix: {rows}×{cols}')
