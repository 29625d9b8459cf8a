from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray

# typing only
type FloatArray = NDArray[np.floating]
type IntArray = NDArray[np.integer]
type ArrayLike = float | Sequence[float] | np.ndarray | np.floating
