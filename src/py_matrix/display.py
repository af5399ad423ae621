"""Display and repr logic for Vector, LazyVector and Matrix."""

from __future__ import annotations
import math
from typing import List


# How many rows/columns to show before inserting "..."
MAX_HEAD_ROWS = 5
MAX_HEAD_COLS = 5


def _format_scalar(v) -> str:
	if isinstance(v, float):
		if math.isfinite(v) and v == int(v):
			return f"{v:.1f}"
		return f"{v:g}"
	return str(v)


def _preview(vals, max_preview: int) -> list:
	""" Symmetric head/tail preview with '...' in the middle """
	vals = list(vals)
	if len(vals) > max_preview * 2:
		return vals[:max_preview] + ['...'] + vals[-max_preview:]
	return vals


def _format_column(vals, max_preview: int = MAX_HEAD_ROWS) -> List[str]:
	"""Returns a list of right-aligned strings for one column of numbers."""
	out = [v if v == '...' else _format_scalar(v) for v in _preview(vals, max_preview)]
	width = max(len(s) for s in out) if out else 0
	return [s.rjust(width) for s in out]


def _kind_name(qtype) -> str:
	return qtype.kind.__name__ if qtype is not None else "object"


def _repr_vector(v) -> str:
	"""Pretty repr for a dense Vector."""
	storage = v._storage
	lines = _format_column(storage.to_tuple())
	lines.append("")
	lines.append(
		f"# {len(storage)} element vector <{_kind_name(v.schema())}>"
		f" fallback={_format_scalar(storage.fallback)} stored={storage.override_count}"
	)
	return "\n".join(lines)


def _repr_lazy(v) -> str:
	"""Repr for a LazyVector. Never consumes the source."""
	if v.restartable:
		return "# lazy vector <restartable>"
	return f"# lazy vector <one-shot, {v.state.name.lower()}>"


def _row_cells(row) -> List[str]:
	storage = getattr(row, '_storage', None)
	if storage is None:
		return ['<lazy>']
	cells = _preview(storage.to_tuple(), MAX_HEAD_COLS)
	return [c if c == '...' else _format_scalar(c) for c in cells]


def _repr_matrix(m) -> str:
	"""Pretty repr for a Matrix (rows of right-aligned cells)."""
	rows = _preview(m._rows, MAX_HEAD_ROWS)
	grid = [['...'] if r == '...' else _row_cells(r) for r in rows]

	ncols = max(len(cells) for cells in grid)
	widths = [0] * ncols
	for cells in grid:
		for c, s in enumerate(cells):
			widths[c] = max(widths[c], len(s))

	lines = []
	for cells in grid:
		lines.append("  ".join(s.rjust(widths[c]) for c, s in enumerate(cells)))

	kinds = {_kind_name(r.schema()) if hasattr(r, 'schema') else "lazy" for r in m._rows}
	kind = "float" if "float" in kinds else ", ".join(sorted(kinds))
	rows_n, cols_n = m.size()
	lines.append("")
	lines.append(f"# {rows_n}×{cols_n} {type(m).__name__} <{kind}>")
	return "\n".join(lines)


def _printr(obj) -> str:
	"""Entry point used by the __repr__ of every container."""
	if hasattr(obj, '_rows'):
		return _repr_matrix(obj)
	if hasattr(obj, '_storage'):
		return _repr_vector(obj)
	return _repr_lazy(obj)
