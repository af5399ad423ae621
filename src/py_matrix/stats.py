"""Descriptive statistics shared by every vector and matrix.

Each function takes a fully materialized sequence of quantities. Vectors and
matrices call these over ``values()``; nothing here knows about containers.
"""

import math

from .errors import DivisionByZeroError
from .errors import EmptyInputError


def maximum(values):
	if not values:
		raise EmptyInputError("max() of an empty sequence")
	return max(values)


def minimum(values):
	if not values:
		raise EmptyInputError("min() of an empty sequence")
	return min(values)


def total(values):
	""" Arithmetic sum; int-only input stays int """
	return sum(values)


def average(values):
	count = len(values)
	if count == 0:
		raise DivisionByZeroError("avg() of an empty sequence")
	return sum(values) / count


def median(values):
	"""
	Middle value of a sorted copy of values.

	Odd counts return the middle element itself, even counts the mean of the
	two middle elements. The caller's ordering is left untouched.
	"""
	ordered = sorted(values)
	count = len(ordered)
	if count == 0:
		raise EmptyInputError("median() of an empty sequence")

	middle = count // 2
	if count % 2:
		return ordered[middle]
	return (ordered[middle - 1] + ordered[middle]) / 2


def variance(values):
	"""
	Population variance (divisor is the full count, not count - 1).
	"""
	count = len(values)
	if count == 0:
		raise DivisionByZeroError("variance() of an empty sequence")
	m = sum(values) / count
	return sum((x - m) * (x - m) for x in values) / count


def deviation(values):
	""" Population standard deviation; 0.0 for an empty sequence """
	if not values:
		return 0.0
	return math.sqrt(variance(values))
