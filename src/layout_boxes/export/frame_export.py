"""Tabular export of box collections as pandas DataFrames.

Requires the [frame] optional extra: pip install layout-boxes[frame]
"""

from __future__ import annotations

import logging
from typing import Any, Iterable

import numpy as np

try:
    import pandas as pd
    _HAS_PANDAS = True
except ImportError:
    _HAS_PANDAS = False

from ..core.box import Box, BoxType

logger = logging.getLogger(__name__)

BOUND_COLUMNS = ["minimum_x", "maximum_x", "minimum_y", "maximum_y"]
FRAME_COLUMNS = BOUND_COLUMNS + ["width", "height"]


def _check_pandas():
    if not _HAS_PANDAS:
        raise ImportError(
            "pandas is required for DataFrame export. "
            "Install it with: pip install layout-boxes[frame]"
        )


def boxes_to_frame(
    boxes: Iterable[BoxType],
    index: Iterable[Any] | None = None,
) -> pd.DataFrame:
    """Tabulate boxes one per row.

    Parameters
    ----------
    boxes : iterable of box-like values
    index : optional row labels, one per box

    Returns
    -------
    pd.DataFrame
        int64 columns minimum_x, maximum_x, minimum_y, maximum_y,
        width, height.
    """
    _check_pandas()
    records = [Box.copy_of(box).to_dict() for box in boxes]
    if index is not None:
        index = list(index)
        if len(index) != len(records):
            raise ValueError(
                f"index has {len(index)} labels but {len(records)} boxes were given."
            )
    return pd.DataFrame(records, columns=FRAME_COLUMNS, index=index).astype(np.int64)


def boxes_from_frame(df: Any) -> list[Box]:
    """Rebuild boxes from a DataFrame holding the four bound columns.

    width/height columns, if present, are ignored: they are derived
    from the bounds. Every row is validated as a Box.
    """
    _check_pandas()
    if not isinstance(df, pd.DataFrame):
        raise TypeError(
            f"Expected a pandas DataFrame, got {type(df).__name__}."
        )
    missing = [c for c in BOUND_COLUMNS if c not in df.columns]
    if missing:
        raise KeyError(
            f"Box frame is missing columns: {missing}. "
            f"Required: {BOUND_COLUMNS}"
        )
    bounds = df[BOUND_COLUMNS]
    non_integer = [
        c for c in BOUND_COLUMNS if not pd.api.types.is_integer_dtype(bounds[c])
    ]
    if non_integer:
        raise TypeError(
            f"Box bound columns must have an integer dtype. "
            f"Non-integer columns: {non_integer}"
        )
    boxes = [Box.of(*row) for row in bounds.itertuples(index=False, name=None)]
    logger.debug("Read %d boxes from frame", len(boxes))
    return boxes
